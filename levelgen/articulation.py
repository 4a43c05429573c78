"""Chokepoint detection built on the reachability engine.

Three checks live here:

- `is_articulation_point`: exact global test. Would removing this cell cut
  off anything besides the cell itself?
- `room_still_connected_if_block`: local test. Would blocking this cell (on
  top of everything already in the room) split the room's doorways apart?
- `is_chokepoint`: the coarse test generator placement has always used. It
  only flags cells whose removal loses a sizeable share of the deck.
"""

from collections import deque
from typing import AbstractSet, Iterable, Optional

from world.grid import Cell, Grid
from .reachability import blocked_by, blocked_by_or_excluding, count_room_cells, get_reachable_cells
from .topology import collect_room_cells, get_doorway_cells


def is_articulation_point(grid: Optional[Grid], start: Optional[Cell], cell: Optional[Cell],
                          blocked: Optional[AbstractSet[Cell]] = None) -> bool:
    if grid is None or start is None or cell is None:
        return False
    blocked = blocked or frozenset()

    full = get_reachable_cells(grid, start, blocked_by(blocked))
    if cell not in full:
        return False
    without_cell = get_reachable_cells(grid, start, blocked_by_or_excluding(blocked, cell))
    return len(without_cell) < len(full) - 1


def is_chokepoint(grid: Optional[Grid], cell: Optional[Cell], start: Optional[Cell],
                  threshold_percent: int = 10) -> bool:
    """True if blocking `cell` alone loses more than threshold_percent of the deck.

    Doors are ignored. This is deliberately coarser than
    is_articulation_point: a cell sealing off a small alcove is not flagged.
    """
    if grid is None or cell is None or start is None:
        return False
    total = count_room_cells(grid)
    reachable = get_reachable_cells(grid, start, blocked_by({cell}))
    return len(reachable) < total - total * threshold_percent // 100


def room_still_connected_if_block(grid: Optional[Grid], room_name: str,
                                  entry_cells: Optional[Iterable[Cell]],
                                  candidate: Optional[Cell] = None) -> bool:
    """Check that every doorway of the room stays reachable from the others.

    Cells of the room that already hold an entity count as blocked, and so
    does `candidate` when given. Rooms with no entries or no doorways are
    trivially connected.

    Args:
        grid: The deck grid
        room_name: Room to check
        entry_cells: Corridor cells bordering the room
        candidate: Cell about to be filled, or None to check the room as is

    Returns:
        True if all doorways are mutually reachable through the room
    """
    if grid is None or not entry_cells:
        return True
    doorways = get_doorway_cells(grid, room_name, entry_cells)
    if not doorways:
        return True

    blocked = {cell for cell in collect_room_cells(grid, room_name) if cell.HasEntity()}
    if candidate is not None:
        blocked.add(candidate)

    first = doorways[0]
    if first in blocked:
        return False

    visited = {first}
    queue = deque([first])
    while queue:
        cell = queue.popleft()
        for neighbor in cell.GetNeighbors():
            if neighbor in visited or neighbor in blocked:
                continue
            if not neighbor.room or neighbor.name != room_name:
                continue
            visited.add(neighbor)
            queue.append(neighbor)

    return all(doorway in visited for doorway in doorways)
