"""Grid, cells and entities for station decks."""

from .direction import CARDINAL_DIRECTIONS, Direction
from .entities import (
    BATTERY, PATCH_KIT, CCTVTerminal, ContentKind, Door, Generator, Hazard,
    HazardControl, HazardType, HAZARD_TYPES, Item, MaintenanceTerminal,
    PuzzleReward, PuzzleTerminal, PuzzleType, keycard_name_for_room,
)
from .furniture import Furniture, FurnitureTemplate, get_furniture_templates_for_room
from .grid import CORRIDOR, Cell, Grid
from .map_loader import load_map, load_map_file

__all__ = [
    'BATTERY',
    'CARDINAL_DIRECTIONS',
    'CCTVTerminal',
    'CORRIDOR',
    'Cell',
    'ContentKind',
    'Direction',
    'Door',
    'Furniture',
    'FurnitureTemplate',
    'Generator',
    'Grid',
    'HAZARD_TYPES',
    'Hazard',
    'HazardControl',
    'HazardType',
    'Item',
    'MaintenanceTerminal',
    'PATCH_KIT',
    'PuzzleReward',
    'PuzzleTerminal',
    'PuzzleType',
    'get_furniture_templates_for_room',
    'keycard_name_for_room',
    'load_map',
    'load_map_file',
]
