"""Environmental hazards sealing off side rooms."""

import logging as log
from typing import List

from rng.random_number_generator import RandomNumberGenerator
from world.entities import Hazard, HazardControl, HazardType
from .doors import get_gate_candidates
from .placement import find_non_articulation_cell, find_room_in_reachable, place_item, simulate_gate
from .state import LevelState, SetupConfig


def get_num_hazards(level: int, rng: RandomNumberGenerator) -> int:
    if level >= 4:
        return 2 + rng.intn(2)
    if level >= 3:
        return 1 + rng.intn(2)
    return 1


def get_available_hazard_types(level: int) -> List[HazardType]:
    types = [HazardType.COOLANT, HazardType.ELECTRICAL, HazardType.GAS]
    if level >= 3:
        types.append(HazardType.VACUUM)
    if level >= 5:
        types.append(HazardType.RADIATION)
    return types


def place_hazards(state: LevelState, config: SetupConfig, rng: RandomNumberGenerator) -> int:
    """Seal rooms behind hazards. Returns the number of rooms sealed.

    Like a locked room, a hazard must gate something, and what clears it (a
    patch kit or a control) goes somewhere reachable with the hazard live.
    All entries of a room share one Hazard, so clearing it once opens them
    all.
    """
    target = get_num_hazards(state.level, rng)
    hazard_types = get_available_hazard_types(state.level)

    placed = 0
    for room in get_gate_candidates(state, rng):
        if placed >= target:
            break
        entries = state.GetEntryCells(room)
        simulation = simulate_gate(state, config, entries)
        if simulation is None:
            continue

        hazard = Hazard(rng.choice(hazard_types))
        if hazard.RequiresItem():
            solution_cell = find_room_in_reachable(rng, simulation.after, config.avoid)
        else:
            sealed = config.locked_door_cells | set(entries)
            solution_cell = find_non_articulation_cell(
                rng, state, config, simulation.after, blocked=sealed)
        if solution_cell is None:
            log.debug(f"Level {state.level}: nowhere to put the fix for a {hazard.name} at {room}")
            continue

        if hazard.RequiresItem():
            item_name = hazard.RequiredItemName()
            place_item(solution_cell, item_name)
            state.AddHint(f"A {item_name} is in {solution_cell.name}")
        else:
            control = HazardControl(hazard.hazard_type, hazard)
            solution_cell.Place(control)
            state.AddHint(f"The {control.name} is in {solution_cell.name}")
        config.avoid.add(solution_cell)
        config.solution_cells.add(solution_cell)

        for entry in entries:
            entry.Place(hazard)
            config.avoid.add(entry)
            config.locked_door_cells.add(entry)

        if len(entries) == 1:
            state.AddHint(f"A {hazard.name} blocks access to {room}")
        else:
            state.AddHint(f"{len(entries)} {hazard.name} hazards block access to {room}")
        log.info(f"Level {state.level}: {hazard.name} seals {room}")
        placed += 1

    return placed
