"""Central registry of all flag definitions."""

from typing import Dict, List

from .categories import FlagCategory
from .definitions import BooleanFlag, EnumFlag, IntegerFlag, FlagDefinition, FlagOption


class FlagRegistry:
    """Central registry of all flag definitions."""

    # Content flags
    PLACE_HAZARDS = BooleanFlag(
        'place_hazards',
        'Place Hazards',
        'Seal off side rooms behind environmental hazards (from level 2, not on the final deck). '
        'Each hazard comes with a control or item that clears it.',
        FlagCategory.CONTENT,
        default=True
    )

    PLACE_FURNITURE = BooleanFlag(
        'place_furniture',
        'Place Furniture',
        'Furnish rooms whose names match a known room type (not on the final deck).',
        FlagCategory.CONTENT,
        default=True
    )

    PLACE_PUZZLES = BooleanFlag(
        'place_puzzles',
        'Place Puzzle Terminals',
        'Place security terminals whose codes are hidden in furniture descriptions (from level 2, '
        'not on the final deck).',
        FlagCategory.CONTENT,
        default=True
    )

    PLACE_CCTV_TERMINALS = BooleanFlag(
        'place_cctv_terminals',
        'Place CCTV Terminals',
        'Place camera terminals that reveal other rooms (from level 2).',
        FlagCategory.CONTENT,
        default=True
    )

    PLACE_MAINTENANCE_TERMINALS = BooleanFlag(
        'place_maintenance_terminals',
        'Place Maintenance Terminals',
        'Place one maintenance terminal per room for routing power to doors.',
        FlagCategory.CONTENT,
        default=True
    )

    HIDE_ITEMS_IN_FURNITURE = BooleanFlag(
        'hide_items_in_furniture',
        'Hide Items in Furniture',
        'Keycards and patch kits may be hidden inside reachable furniture instead of lying on the floor.',
        FlagCategory.CONTENT,
        default=True
    )

    ITEM_HIDE_CHANCE = IntegerFlag(
        'item_hide_chance',
        'Item Hide Chance',
        'Percent chance that each keycard or patch kit is hidden in furniture.',
        FlagCategory.CONTENT,
        default=50,
        min_value=0,
        max_value=100
    )

    # Difficulty flags
    TOTAL_DECKS = IntegerFlag(
        'total_decks',
        'Total Decks',
        'Number of decks in the station. The last deck only carries the minimal systems.',
        FlagCategory.DIFFICULTY,
        default=10,
        min_value=1,
        max_value=99
    )

    # Solvability flags
    GENERATOR_CHOKEPOINT_CHECK = EnumFlag(
        'generator_chokepoint_check',
        'Generator Chokepoint Check',
        'How generator placement decides whether a cell is a chokepoint to avoid.',
        FlagCategory.SOLVABILITY,
        options=[
            FlagOption('heuristic', 'Heuristic',
                       'Avoid cells whose removal cuts off more than a threshold share of the deck.'),
            FlagOption('exact', 'Exact',
                       'Avoid every articulation point, like the other placement stages.'),
        ],
        default='heuristic'
    )

    CHOKEPOINT_THRESHOLD_PERCENT = IntegerFlag(
        'chokepoint_threshold_percent',
        'Chokepoint Threshold',
        'Share of the deck (percent) that must become unreachable for the heuristic check to call '
        'a cell a chokepoint.',
        FlagCategory.SOLVABILITY,
        default=10,
        min_value=1,
        max_value=100
    )

    # Hidden/Test flags
    ENFORCE_POWER_SOLVABILITY = BooleanFlag(
        'enforce_power_solvability',
        'Enforce Power Solvability',
        'Pre-power the doors of gatekeeper rooms that could never be powered otherwise. Only '
        'turned off to exercise the validator.',
        FlagCategory.HIDDEN,
        default=True
    )

    @classmethod
    def get_all_flags(cls) -> Dict[str, FlagDefinition]:
        """Get all flag definitions as a dictionary."""
        flags = {}
        for attr_name in dir(cls):
            attr = getattr(cls, attr_name)
            if isinstance(attr, FlagDefinition):
                flags[attr.key] = attr
        return flags

    @classmethod
    def get_flags_by_category(cls) -> Dict[FlagCategory, List[FlagDefinition]]:
        """Get flags organized by category."""
        by_category = {}
        for flag in cls.get_all_flags().values():
            by_category.setdefault(flag.category, []).append(flag)
        return by_category
