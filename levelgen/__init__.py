"""
Level content placement and solvability checking.

The generator takes a pre-carved deck and places locked rooms, hazards,
generators, batteries, terminals and furniture, proving before each
placement that the exit stays reachable and every room's doorways stay
connected.
"""

from .articulation import is_articulation_point, is_chokepoint, room_still_connected_if_block
from .level_generator import LevelGenerator
from .reachability import get_reachable_cells
from .state import LevelState, SetupConfig
from .topology import find_room_entry_points, get_adjacent_room_names
from .validator import LevelValidator

__all__ = [
    'LevelGenerator',
    'LevelState',
    'LevelValidator',
    'SetupConfig',
    'find_room_entry_points',
    'get_adjacent_room_names',
    'get_reachable_cells',
    'is_articulation_point',
    'is_chokepoint',
    'room_still_connected_if_block',
]
