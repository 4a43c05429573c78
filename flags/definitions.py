"""Flag definition classes for boolean, enum and integer settings."""

from dataclasses import dataclass
from typing import Any, List, Optional

from .categories import FlagCategory

_TRUE_STRINGS = ("1", "true", "yes", "on")
_FALSE_STRINGS = ("0", "false", "no", "off")


@dataclass
class FlagOption:
    """Represents a single option for an enum flag."""
    value: str
    display_name: str
    help_text: str = ""


class FlagDefinition:
    """Base class for flag definitions.

    Subclasses implement `validate` for typed values (from code or JSON) and
    `parse` for raw strings (from the command line or a query string).
    """

    def __init__(
        self,
        key: str,
        display_name: str,
        help_text: str,
        category: FlagCategory
    ):
        self.key = key
        self.display_name = display_name
        self.help_text = help_text
        self.category = category

    def get_default(self) -> Any:
        raise NotImplementedError

    def validate(self, value: Any) -> Any:
        """Validate and convert value if needed. Returns validated value."""
        raise NotImplementedError

    def parse(self, raw: str) -> Any:
        """Convert a raw string to a validated value."""
        raise NotImplementedError


class BooleanFlag(FlagDefinition):

    def __init__(
        self,
        key: str,
        display_name: str,
        help_text: str,
        category: FlagCategory,
        default: bool = False
    ):
        super().__init__(key, display_name, help_text, category)
        self.default = default

    def get_default(self) -> bool:
        return self.default

    def validate(self, value: Any) -> bool:
        if not isinstance(value, bool):
            raise TypeError(f"Flag '{self.key}' expects boolean, got {type(value).__name__}")
        return value

    def parse(self, raw: str) -> bool:
        lowered = raw.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise ValueError(f"Flag '{self.key}' expects true/false, got '{raw}'")


class EnumFlag(FlagDefinition):
    """A flag with multiple predefined options."""

    def __init__(
        self,
        key: str,
        display_name: str,
        help_text: str,
        category: FlagCategory,
        options: List[FlagOption],
        default: str = None
    ):
        super().__init__(key, display_name, help_text, category)
        self.options = options
        self.option_dict = {opt.value: opt for opt in options}
        self.default = default if default is not None else options[0].value

        if self.default not in self.option_dict:
            raise ValueError(f"Default value '{self.default}' not in options for flag '{key}'")

    def get_default(self) -> str:
        return self.default

    def validate(self, value: Any) -> str:
        if not isinstance(value, str):
            value = str(value)

        if value not in self.option_dict:
            valid_options = ", ".join(self.option_dict.keys())
            raise ValueError(
                f"Flag '{self.key}' expects one of [{valid_options}], got '{value}'"
            )
        return value

    def parse(self, raw: str) -> str:
        return self.validate(raw.strip())

    def get_option_display_name(self, value: str) -> str:
        return self.option_dict.get(value, FlagOption(value, value)).display_name


class IntegerFlag(FlagDefinition):
    """A flag with an integer value and optional range constraints."""

    def __init__(
        self,
        key: str,
        display_name: str,
        help_text: str,
        category: FlagCategory,
        default: int,
        min_value: Optional[int] = None,
        max_value: Optional[int] = None
    ):
        super().__init__(key, display_name, help_text, category)
        self.default = default
        self.min_value = min_value
        self.max_value = max_value

        self.validate(default)

    def get_default(self) -> int:
        return self.default

    def validate(self, value: Any) -> int:
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Flag '{self.key}' expects integer, got {type(value).__name__}")

        if self.min_value is not None and value < self.min_value:
            raise ValueError(
                f"Flag '{self.key}' value {value} below minimum {self.min_value}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValueError(
                f"Flag '{self.key}' value {value} above maximum {self.max_value}"
            )
        return value

    def parse(self, raw: str) -> int:
        try:
            value = int(raw.strip())
        except ValueError:
            raise ValueError(f"Flag '{self.key}' expects integer, got '{raw}'") from None
        return self.validate(value)
