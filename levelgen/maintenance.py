import logging as log

from rng.random_number_generator import RandomNumberGenerator
from world.entities import MaintenanceTerminal
from world.grid import Cell
from .placement import is_placeable
from .state import LevelState, SetupConfig
from .topology import collect_room_cells, collect_room_names


def is_wall_cell(cell: Cell) -> bool:
    """Cell on the room's outline: some side is off-grid or not a room."""
    return any(neighbor is None or not neighbor.room for neighbor in cell.neighbors.values())


def is_edge_cell(cell: Cell) -> bool:
    same_room = sum(1 for n in cell.GetNeighbors() if n.room and n.name == cell.name)
    return same_room <= 2


def place_maintenance_terminals(state: LevelState, config: SetupConfig,
                                rng: RandomNumberGenerator) -> int:
    """One maintenance terminal per room, against a wall where possible.

    Rooms with no cell that keeps their doorways connected go without.
    """
    placed = 0
    for room in collect_room_names(state.grid):
        valid = [cell for cell in collect_room_cells(state.grid, room)
                 if is_placeable(state, config, cell)]
        walls = [cell for cell in valid if is_wall_cell(cell)]
        edges = [cell for cell in valid if is_edge_cell(cell)]
        pool = walls or edges or valid
        if not pool:
            log.info(f"Level {state.level}: no maintenance terminal fits in {room}")
            continue
        cell = rng.choice(pool)
        cell.Place(MaintenanceTerminal(room))
        config.avoid.add(cell)
        placed += 1
    return placed
