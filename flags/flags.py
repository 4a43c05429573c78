"""Flags class for managing flag values with validation and serialization."""

import logging as log
from typing import Any, Dict, Iterable, Optional, Tuple

from .definitions import BooleanFlag, EnumFlag, IntegerFlag, FlagDefinition
from .registry import FlagRegistry


def parse_flag_assignment(assignment: str) -> Tuple[str, str]:
    """Split a 'key=value' string as given on the command line.

    Raises:
        ValueError: If the string has no '=' or an empty key
    """
    if "=" not in assignment:
        raise ValueError(f"Expected key=value, got '{assignment}'")
    key, raw = assignment.split("=", 1)
    key = key.strip()
    if not key:
        raise ValueError(f"Missing flag name in '{assignment}'")
    return key, raw


class Flags:
    """Container for flag values with validation and serialization."""

    def __init__(self):
        self._definitions = FlagRegistry.get_all_flags()
        self._values: Dict[str, Any] = {
            key: defn.get_default()
            for key, defn in self._definitions.items()
        }

    def __getattr__(self, key: str) -> Any:
        """Access flags as attributes: flags.place_hazards"""
        if key.startswith('_'):
            return object.__getattribute__(self, key)

        if key in self._values:
            return self._values[key]

        raise AttributeError(f"Flag '{key}' not found")

    def __setattr__(self, key: str, value: Any):
        """Set flags as attributes: flags.place_hazards = False"""
        if key.startswith('_'):
            object.__setattr__(self, key, value)
            return

        self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set flag value with validation."""
        if key not in self._definitions:
            raise KeyError(f"Flag '{key}' not found.")

        self._values[key] = self._definitions[key].validate(value)

    def set_from_string(self, key: str, raw: str) -> None:
        """Set a flag from its string form, e.g. from --flag key=value."""
        if key not in self._definitions:
            raise KeyError(f"Flag '{key}' not found.")

        self._values[key] = self._definitions[key].parse(raw)

    def apply_assignments(self, assignments: Iterable[str]) -> None:
        """Apply a sequence of 'key=value' strings. Errors propagate."""
        for assignment in assignments:
            key, raw = parse_flag_assignment(assignment)
            self.set_from_string(key, raw)

    def get_definition(self, key: str) -> Optional[FlagDefinition]:
        return self._definitions.get(key)

    def to_dict(self) -> Dict[str, Any]:
        """Export flags to dictionary."""
        return dict(self._values)

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Import flags from dictionary, skipping bad entries with a warning."""
        for key, value in data.items():
            try:
                self.set(key, value)
            except (KeyError, TypeError, ValueError) as e:
                log.warning(f"Failed to set flag '{key}': {e}")

    def to_file_string(self) -> str:
        """
        Generate a compact string representation for dump file names.
        Only non-default flags are included.
        """
        parts = []
        for key, value in sorted(self._values.items()):
            definition = self._definitions[key]

            if value == definition.get_default():
                continue

            if isinstance(definition, BooleanFlag):
                parts.append(f"{key[0:3]}{'Y' if value else 'N'}")
            elif isinstance(definition, EnumFlag):
                parts.append(f"{key[0:3]}{value[0:3]}")
            elif isinstance(definition, IntegerFlag):
                parts.append(f"{key[0:3]}{value}")

        return "_".join(parts) if parts else "default"

    def get_all_definitions(self) -> Dict[str, FlagDefinition]:
        return self._definitions.copy()
