"""
Level generation settings.

Key features:
- Inline value definitions for readability
- Boolean, enum and integer flags with validation
- String parsing for command line and query string values
- Categories that group flags in the command-line help
"""

from .categories import FlagCategory
from .definitions import BooleanFlag, EnumFlag, IntegerFlag, FlagDefinition, FlagOption
from .registry import FlagRegistry
from .flags import Flags, parse_flag_assignment

__all__ = [
    'FlagCategory',
    'BooleanFlag',
    'EnumFlag',
    'IntegerFlag',
    'FlagDefinition',
    'FlagOption',
    'FlagRegistry',
    'Flags',
    'parse_flag_assignment',
]
