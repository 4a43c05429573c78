"""Room furniture, and hiding gate solutions inside it."""

import logging as log
from typing import Dict, List

from rng.random_number_generator import RandomNumberGenerator
from world.entities import PATCH_KIT, ContentKind, Item
from world.furniture import Furniture, get_furniture_templates_for_room
from world.grid import Cell
from .placement import is_free_cell, keeps_room_connected, sorted_cells
from .reachability import blocked_by, get_reachable_cells
from .state import LevelState, SetupConfig
from .topology import collect_room_cells, collect_room_names

LARGE_ROOM_CELLS = 6


def place_furniture(state: LevelState, config: SetupConfig, rng: RandomNumberGenerator) -> int:
    """Furnish every room whose name matches a known room type.

    Large rooms (more than six cells) get two pieces, others one. A piece
    never goes on a doorway and never splits its room's doorways apart.
    """
    placed = 0
    exit_cell = state.ExitCell()
    for room in collect_room_names(state.grid):
        templates = get_furniture_templates_for_room(room)
        if not templates:
            continue
        room_cells = collect_room_cells(state.grid, room)
        count = 2 if len(room_cells) > LARGE_ROOM_CELLS else 1
        count = min(count, len(templates))
        rng.shuffle(templates)

        for template in templates[:count]:
            candidates = [cell for cell in room_cells
                          if is_free_cell(cell, config, exit_cell)
                          and not state.IsDoorwayCell(cell)]
            rng.shuffle(candidates)
            cell = next((c for c in candidates if keeps_room_connected(state, c)), None)
            if cell is None:
                log.debug(f"Level {state.level}: no space for the {template.name} in {room}")
                break
            cell.Place(Furniture.FromTemplate(template))
            config.avoid.add(cell)
            placed += 1
    return placed


def is_hideable(item: Item) -> bool:
    return item.IsKeycard() or item.name == PATCH_KIT


def _floor_hint(item_name: str, room_name: str) -> str:
    if item_name == PATCH_KIT:
        return f"A {item_name} is in {room_name}"
    return f"The {item_name} is in {room_name}"


def hide_items_in_furniture(state: LevelState, config: SetupConfig, rng: RandomNumberGenerator,
                            chance_percent: int = 50) -> int:
    """Move some keycards and patch kits off the floor into furniture.

    An item only goes into empty furniture in the room it was lying in, and
    only furniture reachable with every gate still shut is used, so a hidden
    item is exactly as reachable as it was on the floor.
    """
    reachable = get_reachable_cells(state.grid, state.StartCell(),
                                     blocked_by(config.locked_door_cells))
    hiding_spots: Dict[str, List[Cell]] = {}
    for cell in sorted_cells(reachable):
        if cell.Has(ContentKind.FURNITURE) and not cell.entity.HasItem():
            hiding_spots.setdefault(cell.name, []).append(cell)

    hidden = 0
    for cell in list(state.grid.Cells()):
        for item in list(cell.items_on_floor):
            spots = hiding_spots.get(cell.name)
            if not spots or not is_hideable(item) or not rng.chance(chance_percent):
                continue
            spot = spots.pop(rng.intn(len(spots)))
            furniture = spot.entity
            cell.items_on_floor.remove(item)
            furniture.contained_item = item
            config.solution_cells.add(spot)
            state.hint_writer.ReplaceHint(
                _floor_hint(item.name, cell.name),
                f"The {item.name} is hidden in the {furniture.name} in {cell.name}")
            log.debug(f"Level {state.level}: hid {item.name} in the {furniture.name}")
            hidden += 1
    return hidden
