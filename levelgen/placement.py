"""Shared helpers for the placement stages.

Every stage follows the same shape: collect candidates, prove the placement
keeps the deck solvable, then commit. Candidate lists are ordered by grid
position before any random pick, so a seed always reproduces the same deck.
"""

from collections import namedtuple
from typing import Iterable, List, Optional, Set

from rng.random_number_generator import RandomNumberGenerator
from world.entities import Item
from world.grid import Cell, Grid
from .articulation import is_articulation_point, room_still_connected_if_block
from .reachability import blocked_by, get_reachable_cells
from .state import LevelState, SetupConfig

# Reachable sets before and after a simulated gate (locked doors or hazard).
GateSimulation = namedtuple("GateSimulation", ["before", "after"])


def sorted_cells(cells: Iterable[Cell]) -> List[Cell]:
    return sorted(cells, key=lambda c: c.position)


def manhattan_distance(a: Cell, b: Cell) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


def is_free_cell(cell: Cell, config: SetupConfig, exit_cell: Optional[Cell]) -> bool:
    return (cell.room and cell not in config.avoid and cell is not exit_cell
            and not cell.HasEntity())


def keeps_room_connected(state: LevelState, cell: Cell) -> bool:
    if not cell.IsNamedRoom():
        return True
    return room_still_connected_if_block(
        state.grid, cell.name, state.GetEntryCells(cell.name), cell)


def is_placeable(state: LevelState, config: SetupConfig, cell: Cell) -> bool:
    """Can a blocking entity go here without hurting any room?

    The cell must be free, off every room's entry and doorway cells, and
    blocking it must leave its room's doorways connected.
    """
    if not is_free_cell(cell, config, state.ExitCell()):
        return False
    if state.IsEntryCell(cell) or state.IsDoorwayCell(cell):
        return False
    return keeps_room_connected(state, cell)


def find_room(rng: RandomNumberGenerator, grid: Optional[Grid], start: Optional[Cell],
              avoid: Set[Cell], level: int) -> Optional[Cell]:
    """Pick a cell in some named room, further away on deeper decks.

    Doors are ignored. Cells at least 1 + level steps (Manhattan) from the
    start are preferred; if none qualify the bar drops to half of the
    furthest candidate. With no candidates at all the start cell is
    returned.
    """
    if grid is None or start is None:
        return None
    candidates = [cell for cell in sorted_cells(get_reachable_cells(grid, start))
                  if cell.IsNamedRoom() and cell not in avoid]
    if not candidates:
        return start

    min_distance = 1 + level
    far = [cell for cell in candidates if manhattan_distance(start, cell) >= min_distance]
    if not far and len(candidates) > 2:
        max_distance = max(manhattan_distance(start, cell) for cell in candidates)
        far = [cell for cell in candidates
               if manhattan_distance(start, cell) >= max_distance // 2]
    if not far:
        far = candidates
    return rng.choice(far)


def find_room_in_reachable(rng: RandomNumberGenerator, reachable: Iterable[Cell],
                           avoid: Set[Cell]) -> Optional[Cell]:
    """Random free cell of `reachable`, named rooms first, then corridor."""
    free = [cell for cell in sorted_cells(reachable) if cell not in avoid]
    rooms = [cell for cell in free if cell.IsNamedRoom()]
    if rooms:
        return rng.choice(rooms)
    if free:
        return rng.choice(free)
    return None


def find_non_articulation_cell(rng: RandomNumberGenerator, state: LevelState,
                               config: SetupConfig, candidates: Iterable[Cell],
                               blocked: Optional[Set[Cell]] = None) -> Optional[Cell]:
    """Random placeable cell among `candidates` that is not a chokepoint.

    Named-room cells are tried before corridor cells. `blocked` defaults to
    the current locked-door cells.
    """
    if blocked is None:
        blocked = config.locked_door_cells
    placeable = [cell for cell in sorted_cells(candidates) if is_placeable(state, config, cell)]
    rooms = [cell for cell in placeable if cell.IsNamedRoom()]
    corridors = [cell for cell in placeable if not cell.IsNamedRoom()]
    start = state.StartCell()
    for pool in (rooms, corridors):
        rng.shuffle(pool)
        for cell in pool:
            if not is_articulation_point(state.grid, start, cell, blocked):
                return cell
    return None


def simulate_gate(state: LevelState, config: SetupConfig,
                  entry_cells: List[Cell]) -> Optional[GateSimulation]:
    """Prove that sealing `entry_cells` is a real, safe gate.

    Every entry must be free, not already sealed, and reachable right now.
    Sealing them all must shrink the reachable area, keep the exit reachable
    and keep every existing gate solution reachable. Returns the reachable
    sets before and after, or None when the gate is rejected.
    """
    if not entry_cells:
        return None
    grid = state.grid
    start = state.StartCell()
    before = get_reachable_cells(grid, start, blocked_by(config.locked_door_cells))
    for entry in entry_cells:
        if entry in config.avoid or entry in config.locked_door_cells or entry not in before:
            return None
        if entry.HasEntity():
            return None

    sealed = config.locked_door_cells | set(entry_cells)
    after = get_reachable_cells(grid, start, blocked_by(sealed))
    if len(after) >= len(before):
        return None
    if state.ExitCell() not in after:
        return None
    if not config.solution_cells <= after:
        return None
    return GateSimulation(before, after)


def place_item(cell: Cell, name: str) -> Item:
    item = Item(name)
    cell.items_on_floor.append(item)
    return item
