import logging as log
from typing import Optional

from rng.random_number_generator import RandomNumberGenerator
from world.entities import CCTVTerminal
from world.grid import Cell
from .placement import find_room, is_placeable, sorted_cells
from .state import LevelState, SetupConfig
from .topology import collect_room_cells, collect_room_names

MAX_CCTV_TERMINALS = 3


def get_num_cctv_terminals(level: int) -> int:
    if level < 2:
        return 0
    return min(MAX_CCTV_TERMINALS, 1 + (level - 1) // 3)


def find_terminal_cell(state: LevelState, config: SetupConfig, rng: RandomNumberGenerator,
                       room_name: str) -> Optional[Cell]:
    candidates = [cell for cell in sorted_cells(collect_room_cells(state.grid, room_name))
                  if is_placeable(state, config, cell)]
    if not candidates:
        return None
    return rng.choice(candidates)


def place_cctv_terminals(state: LevelState, config: SetupConfig, rng: RandomNumberGenerator) -> int:
    """Place camera terminals, each watching a different room."""
    rooms = collect_room_names(state.grid)
    count = min(get_num_cctv_terminals(state.level), len(rooms))
    if count == 0:
        return 0

    targets = rng.sample(rooms, count)
    placed = 0
    for index, target in enumerate(targets):
        room_cell = find_room(rng, state.grid, state.StartCell(), config.avoid, state.level)
        if room_cell is None:
            continue
        cell = find_terminal_cell(state, config, rng, room_cell.name)
        if cell is None:
            log.debug(f"Level {state.level}: no cell for a CCTV terminal in {room_cell.name}")
            continue
        cell.Place(CCTVTerminal(f"CCTV Terminal #{index + 1}", target))
        config.avoid.add(cell)
        placed += 1
    return placed
