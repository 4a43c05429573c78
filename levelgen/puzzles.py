"""Security puzzle terminals whose codes hide in furniture descriptions."""

import logging as log

from rng.random_number_generator import RandomNumberGenerator
from world.entities import ContentKind, PuzzleReward, PuzzleTerminal, PuzzleType
from .placement import find_non_articulation_cell, find_room, sorted_cells
from .state import LevelState, SetupConfig
from .topology import collect_room_cells

PUZZLE_SOLUTIONS = [
    "1-2-3-4",
    "2-4-6-8",
    "up-down-left-right",
    "north-south-east-west",
    "alpha-beta-gamma-delta",
]


def get_num_puzzles(level: int) -> int:
    return 2 if level >= 3 else 1


def get_puzzle_type(solution: str) -> PuzzleType:
    if "-" in solution and not any(ch.isdigit() for ch in solution):
        return PuzzleType.PATTERN
    return PuzzleType.SEQUENCE


def get_puzzle_reward(level: int, index: int) -> PuzzleReward:
    if index == 0 and level >= 6:
        return PuzzleReward.MAP
    if index == 0 and level >= 3:
        return PuzzleReward.KEYCARD
    return PuzzleReward.BATTERY


def place_puzzles(state: LevelState, config: SetupConfig, rng: RandomNumberGenerator) -> int:
    """Place puzzle terminals and leave their codes in another room's furniture."""
    grid = state.grid
    start = state.StartCell()
    count = min(get_num_puzzles(state.level), len(PUZZLE_SOLUTIONS))

    placed = 0
    for index in range(count):
        room_cell = find_room(rng, grid, start, config.avoid, state.level)
        if room_cell is None:
            continue
        cell = find_non_articulation_cell(
            rng, state, config, collect_room_cells(grid, room_cell.name))
        if cell is None:
            log.debug(f"Level {state.level}: no puzzle terminal cell in {room_cell.name}")
            continue

        solution = PUZZLE_SOLUTIONS[index]
        terminal = PuzzleTerminal(
            f"Security Terminal #{index + 1}",
            get_puzzle_type(solution),
            solution,
            f"Find the code in logs or furniture descriptions. Look for: Code: {solution}",
            get_puzzle_reward(state.level, index),
            "A security terminal requiring an access code.",
        )
        cell.Place(terminal)
        config.avoid.add(cell)

        code_room = find_room(rng, grid, start, config.avoid, state.level)
        if code_room is not None and code_room.name != cell.name:
            furniture_cells = [c for c in sorted_cells(collect_room_cells(grid, code_room.name))
                               if c.Has(ContentKind.FURNITURE)]
            if furniture_cells:
                furniture = rng.choice(furniture_cells).entity
                furniture.description += f" Code: {solution}"
            config.avoid.add(code_room)

        state.AddHint(f"A puzzle terminal is in {cell.name}")
        placed += 1
    return placed
