"""Flag categories for grouping level generation settings."""

from enum import IntEnum


class FlagCategory(IntEnum):
    """Categories for grouping flags in the command-line help."""
    CONTENT = 1
    DIFFICULTY = 2
    SOLVABILITY = 3
    HIDDEN = 4  # Left out of the help listing

    @property
    def display_name(self) -> str:
        """Get user-friendly display name for the category."""
        names = {
            FlagCategory.CONTENT: "Level Content",
            FlagCategory.DIFFICULTY: "Difficulty Scaling",
            FlagCategory.SOLVABILITY: "Solvability Checks",
            FlagCategory.HIDDEN: "Hidden",
        }
        return names.get(self, "Unknown")
