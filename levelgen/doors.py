"""Locked rooms, keycards and plain doors."""

import logging as log
from typing import List

from rng.random_number_generator import RandomNumberGenerator
from world.entities import Door, keycard_name_for_room
from .placement import find_room_in_reachable, place_item, simulate_gate
from .state import LevelState, SetupConfig
from .topology import collect_room_names

# Rooms with more entries than this are not worth locking.
MAX_GATE_ENTRIES = 3


def get_num_locked_rooms(level: int) -> int:
    if level >= 6:
        return 4
    if level >= 4:
        return 3
    if level >= 2:
        return 2
    return 0


def get_gate_candidates(state: LevelState, rng: RandomNumberGenerator) -> List[str]:
    """Rooms with 1 to 3 entry cells, in shuffled order."""
    candidates = [room for room in collect_room_names(state.grid)
                  if 1 <= len(state.GetEntryCells(room)) <= MAX_GATE_ENTRIES]
    rng.shuffle(candidates)
    return candidates


def place_locked_rooms(state: LevelState, config: SetupConfig,
                       rng: RandomNumberGenerator) -> int:
    """Lock rooms behind keycard doors. Returns the number of rooms locked.

    A room is only locked if the lock provably gates part of the deck and
    the keycard can be put somewhere reachable with the lock in place.
    """
    target = get_num_locked_rooms(state.level)
    if target == 0:
        return 0

    locked = 0
    for room in get_gate_candidates(state, rng):
        if locked >= target:
            break
        entries = state.GetEntryCells(room)
        simulation = simulate_gate(state, config, entries)
        if simulation is None:
            log.debug(f"Level {state.level}: {room} cannot be locked")
            continue

        keycard_cell = find_room_in_reachable(rng, simulation.after, config.avoid)
        if keycard_cell is None:
            log.debug(f"Level {state.level}: no reachable cell for the {room} keycard")
            continue

        keycard_name = keycard_name_for_room(room)
        place_item(keycard_cell, keycard_name)
        config.avoid.add(keycard_cell)
        config.solution_cells.add(keycard_cell)

        door = None
        for entry in entries:
            door = Door(room)
            entry.Place(door)
            config.avoid.add(entry)
            config.locked_door_cells.add(entry)

        state.AddHint(f"The {keycard_name} is in {keycard_cell.name}")
        if len(entries) == 1:
            state.AddHint(f"The {door.door_name} blocks access to {room}")
        else:
            state.AddHint(f"{len(entries)} doors block access to {room}")
        log.info(f"Level {state.level}: locked {room} ({len(entries)} doors), "
                 f"keycard at ({keycard_cell.row}, {keycard_cell.col})")
        locked += 1

    if locked < target:
        log.info(f"Level {state.level}: locked {locked} of {target} rooms")
    return locked


def ensure_every_room_has_door(state: LevelState, config: SetupConfig) -> int:
    """Give each room without a door an unlocked one on its first entry.

    Rooms whose first entry is already taken or sealed are left alone.
    """
    added = 0
    rooms_with_doors = {door.room_name for door in state.grid.GetDoors()}
    for room, entries in state.room_entry_points.items():
        if not entries or room in rooms_with_doors:
            continue
        first = entries[0]
        if first in config.avoid or first in config.locked_door_cells or first.HasEntity():
            continue
        first.Place(Door(room, locked=False))
        config.avoid.add(first)
        rooms_with_doors.add(room)
        added += 1
    return added
