"""Breadth-first reachability over room cells.

Every query takes a blocking predicate instead of a fixed rule so the same
traversal answers "what can the player reach now", "what if this cell were
gone" and "what if room X could not be entered". Results are never cached;
the grid changes between stages.
"""

from collections import deque
from typing import AbstractSet, Callable, Optional, Set

from world.entities import ContentKind
from world.grid import Cell, Grid

BlockedPredicate = Callable[[Cell], bool]


def get_reachable_cells(grid: Optional[Grid], start: Optional[Cell],
                        is_blocked: Optional[BlockedPredicate] = None) -> Set[Cell]:
    """Return every room cell reachable from `start`.

    The start cell seeds the search. Any other cell is entered only if it is
    a room cell for which `is_blocked` returns False. A missing grid or start
    cell gives an empty set.
    """
    if grid is None or start is None or not start.room:
        return set()

    visited = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for neighbor in cell.GetNeighbors():
            if neighbor in visited or not neighbor.room:
                continue
            if is_blocked is not None and is_blocked(neighbor):
                continue
            visited.add(neighbor)
            queue.append(neighbor)
    return visited


def blocked_by(cells: AbstractSet[Cell]) -> BlockedPredicate:
    return lambda cell: cell in cells


def blocked_by_or_excluding(cells: AbstractSet[Cell], excluded: Cell) -> BlockedPredicate:
    return lambda cell: cell is excluded or cell in cells


def is_impassable(cell: Cell) -> bool:
    """Predicate for the live grid: locked doors and blocking hazards."""
    return cell.IsImpassable()


def blocking_doors_into(room_name: str) -> BlockedPredicate:
    """Treat every door into `room_name` as shut, plus anything impassable.

    Used to ask whether the rest of the deck still works when the player
    cannot enter that room yet.
    """
    def predicate(cell: Cell) -> bool:
        door = cell.Get(ContentKind.DOOR)
        if door is not None and door.room_name == room_name:
            return True
        return cell.IsImpassable()
    return predicate


def get_reachable_cells_excluding(grid: Optional[Grid], start: Optional[Cell],
                                  blocked: AbstractSet[Cell], excluded: Cell) -> Set[Cell]:
    return get_reachable_cells(grid, start, blocked_by_or_excluding(blocked, excluded))


def get_reachable_cells_blocking_doors_into(grid: Optional[Grid], start: Optional[Cell],
                                            room_name: str) -> Set[Cell]:
    return get_reachable_cells(grid, start, blocking_doors_into(room_name))


def count_room_cells(grid: Optional[Grid]) -> int:
    if grid is None:
        return 0
    return sum(1 for _ in grid.RoomCells())
