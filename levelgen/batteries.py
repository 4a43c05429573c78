import logging as log

from rng.random_number_generator import RandomNumberGenerator
from world.entities import BATTERY
from .placement import find_room, place_item
from .state import LevelState, SetupConfig


def place_batteries(state: LevelState, config: SetupConfig, rng: RandomNumberGenerator) -> int:
    """Scatter enough batteries to charge every generator, plus one or two spare.

    Only decks with a powered exit (level 3 and up) get batteries.
    """
    if state.level < 3:
        return 0

    needed = sum(generator.BatteriesNeeded() for generator in state.generators)
    total = needed + 1 + rng.intn(2)

    placed = 0
    for _ in range(total):
        cell = find_room(rng, state.grid, state.StartCell(), config.avoid, state.level)
        if cell is None or cell in config.avoid:
            continue
        place_item(cell, BATTERY)
        config.avoid.add(cell)
        placed += 1

    log.debug(f"Level {state.level}: placed {placed} of {total} batteries ({needed} needed)")
    return placed
