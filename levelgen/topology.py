"""Room topology: entry points, doorways and room adjacency."""

from collections import deque
from typing import Dict, Iterable, List, Optional

from world.grid import CORRIDOR, Cell, Grid


def find_room_entry_points(grid: Optional[Grid]) -> Dict[str, List[Cell]]:
    """Group corridor cells by the named rooms they border.

    A corridor cell next to two rooms is an entry of both. Each room's list
    keeps discovery order (row-major) with no duplicates. Rooms with no
    bordering corridor do not appear.
    """
    entry_points: Dict[str, List[Cell]] = {}
    if grid is None:
        return entry_points

    for cell in grid.Cells():
        if not cell.IsCorridor():
            continue
        for neighbor in cell.GetNeighbors():
            if not neighbor.IsNamedRoom():
                continue
            entries = entry_points.setdefault(neighbor.name, [])
            if cell not in entries:
                entries.append(cell)
    return entry_points


def get_doorway_cells(grid: Optional[Grid], room_name: str,
                      entry_cells: Optional[Iterable[Cell]]) -> List[Cell]:
    """Room-side cells touching one of the room's entry cells, row-major."""
    if grid is None or not entry_cells:
        return []
    doorways = set()
    for entry in entry_cells:
        for neighbor in entry.GetNeighbors():
            if neighbor.room and neighbor.name == room_name:
                doorways.add(neighbor)
    return sorted(doorways, key=lambda c: c.position)


def collect_room_names(grid: Optional[Grid]) -> List[str]:
    """Named (non-corridor) rooms in order of first appearance."""
    if grid is None:
        return []
    names = []
    seen = set()
    for cell in grid.Cells():
        if cell.IsNamedRoom() and cell.name not in seen:
            seen.add(cell.name)
            names.append(cell.name)
    return names


def collect_room_cells(grid: Optional[Grid], room_name: str) -> List[Cell]:
    if grid is None:
        return []
    return [cell for cell in grid.Cells() if cell.room and cell.name == room_name]


def get_adjacent_room_names(grid: Optional[Grid], room_name: str) -> Optional[List[str]]:
    """Rooms next to `room_name`, including the room itself, sorted.

    Two rooms are adjacent when they share a wall or when a run of corridor
    cells connects them. Returns None for a missing grid, an empty name or a
    room that is not on the grid.
    """
    if grid is None or not room_name:
        return None

    room_cells = collect_room_cells(grid, room_name)
    if not room_cells:
        return None

    names = {room_name}
    visited = set()
    queue = deque()

    for cell in room_cells:
        for neighbor in cell.GetNeighbors():
            if not neighbor.room:
                continue
            if neighbor.name == CORRIDOR:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
            elif neighbor.name:
                names.add(neighbor.name)

    while queue:
        corridor = queue.popleft()
        for neighbor in corridor.GetNeighbors():
            if not neighbor.room:
                continue
            if neighbor.name == CORRIDOR:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
            elif neighbor.name:
                names.add(neighbor.name)

    return sorted(names)
