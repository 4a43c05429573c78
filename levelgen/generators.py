"""Power generators: the pre-powered spawn generator and the ones to charge."""

import logging as log
from typing import Optional

from flags import Flags
from rng.random_number_generator import RandomNumberGenerator
from world.entities import Generator
from world.grid import Cell
from .articulation import is_articulation_point, is_chokepoint
from .placement import find_room, is_placeable, sorted_cells
from .state import LevelState, SetupConfig
from .topology import collect_room_cells

MAX_BATTERIES_PER_GENERATOR = 5


def calculate_batteries_for_generator(level: int, rng: RandomNumberGenerator) -> int:
    """Battery requirement for an additional generator on this level."""
    depth = max(0, level - 3)
    min_batteries = min(MAX_BATTERIES_PER_GENERATOR, 1 + depth // 3)
    max_batteries = min(MAX_BATTERIES_PER_GENERATOR, 2 + depth // 2)
    max_batteries = max(max_batteries, min_batteries)
    return min_batteries + rng.intn(max_batteries - min_batteries + 1)


def is_generator_chokepoint(state: LevelState, config: SetupConfig, cell: Cell,
                            flags: Flags) -> bool:
    if flags.generator_chokepoint_check == 'exact':
        return is_articulation_point(state.grid, state.StartCell(), cell, config.locked_door_cells)
    return is_chokepoint(state.grid, cell, state.StartCell(), flags.chokepoint_threshold_percent)


def find_valid_generator_cell(state: LevelState, config: SetupConfig, rng: RandomNumberGenerator,
                              room_name: str, flags: Flags) -> Optional[Cell]:
    """Random cell for a generator in the room, avoiding chokepoints if possible."""
    valid = [cell for cell in sorted_cells(collect_room_cells(state.grid, room_name))
             if is_placeable(state, config, cell)]
    if not valid:
        return None
    preferred = [cell for cell in valid if not is_generator_chokepoint(state, config, cell, flags)]
    return rng.choice(preferred or valid)


def place_generators(state: LevelState, config: SetupConfig, rng: RandomNumberGenerator,
                     flags: Flags) -> int:
    """Place the spawn generator and, from level 3, the generators the exit needs.

    The spawn generator starts fully charged so the player can always get
    out of the start room. From level 3 the exit requires power and
    level - 3 more generators are placed, each needing batteries.
    Returns the number of generators placed.
    """
    grid = state.grid
    start = state.StartCell()
    exit_cell = state.ExitCell()

    spawn_required = 1
    if state.level >= 3:
        spawn_required = 1 + rng.intn(3)

    placed = 0
    spawn_cell = find_valid_generator_cell(state, config, rng, start.name, flags)
    if spawn_cell is None:
        log.warning(f"Level {state.level}: no room for a generator in {start.name}")
    else:
        generator = Generator("Generator #1", spawn_required)
        generator.InsertBatteries(spawn_required)
        spawn_cell.Place(generator)
        config.avoid.add(spawn_cell)
        state.generators.append(generator)
        state.AddHint(f"A generator is in {spawn_cell.name}")
        placed += 1

    if state.level < 3:
        exit_cell.locked = False
        return placed

    exit_cell.locked = True
    for i in range(state.level - 3):
        room_cell = find_room(rng, grid, start, config.avoid, state.level)
        if room_cell is None:
            continue
        cell = find_valid_generator_cell(state, config, rng, room_cell.name, flags)
        if cell is None:
            log.debug(f"Level {state.level}: no generator cell in {room_cell.name}")
            continue
        generator = Generator(f"Generator #{i + 2}", calculate_batteries_for_generator(state.level, rng))
        cell.Place(generator)
        config.avoid.add(cell)
        state.generators.append(generator)
        state.AddHint(f"A generator is in {cell.name}")
        placed += 1

    return placed
