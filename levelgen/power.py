"""Room power state and the door-power deadlock solver.

Room doors need power to open. Power is routed from maintenance terminals,
and a terminal can only feed the rooms next to its own. If every route to
the exit runs through a room whose doors are dark, and no room next to it
with a terminal can be reached without going through it, the deck can never
be finished. The solver finds such rooms and starts their doors powered.
"""

import logging as log
from typing import List, Set

from world.entities import ContentKind
from .reachability import get_reachable_cells_blocking_doors_into
from .state import LevelState
from .topology import collect_room_names, get_adjacent_room_names


def init_room_power(state: LevelState) -> None:
    """Doors and CCTV start dark, lights on. The start room's doors are powered."""
    if state is None or state.grid is None:
        return
    for room in collect_room_names(state.grid):
        state.room_doors_powered[room] = False
        state.room_cctv_powered[room] = False
        state.room_lights_powered[room] = True
    start_room = state.StartRoomName()
    if start_room:
        state.room_doors_powered[start_room] = True


def init_maintenance_terminal_power(state: LevelState) -> None:
    """Only the terminals in the start room come up powered."""
    if state is None or state.grid is None:
        return
    start_room = state.StartRoomName()
    for cell in state.grid.Cells():
        terminal = cell.Get(ContentKind.MAINTENANCE_TERMINAL)
        if terminal is not None:
            terminal.powered = cell.name == start_room


def _rooms_with_doors(state: LevelState) -> List[str]:
    rooms = []
    for door in state.grid.GetDoors():
        if door.room_name not in rooms:
            rooms.append(door.room_name)
    return rooms


def _rooms_with_maintenance_terminals(state: LevelState) -> Set[str]:
    return {cell.name for cell in state.grid.Cells()
            if cell.Has(ContentKind.MAINTENANCE_TERMINAL)}


def find_power_deadlocks(state: LevelState) -> List[str]:
    """Rooms whose dark doors would make the exit unreachable for good.

    A room is checked if it owns a door, is not the start room and its
    doors are not powered yet. It is a gatekeeper when the exit cannot be
    reached with its doors shut (and every locked door and live hazard shut
    too). A gatekeeper deadlocks when none of its adjacent rooms that have a
    maintenance terminal can be reached without entering it.
    """
    if state is None or state.grid is None or state.StartCell() is None:
        return []

    grid = state.grid
    start = state.StartCell()
    exit_cell = state.ExitCell()
    start_room = state.StartRoomName()
    terminal_rooms = _rooms_with_maintenance_terminals(state)

    deadlocked = []
    for room in _rooms_with_doors(state):
        if room == start_room or state.room_doors_powered.get(room, False):
            continue
        reachable = get_reachable_cells_blocking_doors_into(grid, start, room)
        if exit_cell in reachable:
            continue

        reachable_rooms = {cell.name for cell in reachable}
        adjacent = get_adjacent_room_names(grid, room) or []
        can_power = any(
            other != room and other in terminal_rooms and other in reachable_rooms
            for other in adjacent)
        if not can_power:
            deadlocked.append(room)
    return deadlocked


def ensure_solvability_door_power(state: LevelState) -> List[str]:
    """Pre-power the doors of every deadlocked gatekeeper room.

    Returns the rooms that were powered.
    """
    powered = find_power_deadlocks(state)
    for room in powered:
        state.room_doors_powered[room] = True
        log.info(f"Level {state.level}: {room} gates the exit and cannot be powered; "
                 f"its doors start powered")
    return powered
