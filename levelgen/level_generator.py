import logging as log
from typing import Optional

from flags import Flags
from rng.random_number_generator import RandomNumberGenerator
from world.grid import Grid
from .batteries import place_batteries
from .cctv import place_cctv_terminals
from .doors import ensure_every_room_has_door, place_locked_rooms
from .furniture import hide_items_in_furniture, place_furniture
from .generators import place_generators
from .hazards import place_hazards
from .maintenance import place_maintenance_terminals
from .power import ensure_solvability_door_power, init_maintenance_terminal_power, init_room_power
from .puzzles import place_puzzles
from .state import LevelState, SetupConfig


class LevelGenerator:
    """Populates a pre-carved deck with gated, solvable content.

    Usage:
        generator = LevelGenerator(grid, seed=1234, level=4)
        state = generator.Generate()
    """

    def __init__(self, grid: Grid, seed: int, level: int, flags: Optional[Flags] = None) -> None:
        self.grid = grid
        self.seed = seed
        self.level = level
        self.flags = flags if flags is not None else Flags()
        self.rng = RandomNumberGenerator(seed)

    def IsFinalDeck(self) -> bool:
        return self.level >= self.flags.total_decks

    def Generate(self) -> Optional[LevelState]:
        """Run the placement pipeline once.

        Returns None if the grid fails structural validation. Placement
        stages that find no valid spot skip that piece of content; they
        never fail the whole deck.
        """
        problem = self.grid.Validate() if self.grid is not None else "Grid has invalid dimensions"
        if problem:
            log.error(f"Level {self.level}: refusing to populate grid: {problem}")
            return None

        self.rng.reset()
        state = LevelState(self.grid, self.level, self.seed)
        config = SetupConfig.ForGrid(self.grid)
        state.config = config
        final_deck = self.IsFinalDeck()
        log.info(f"Populating level {self.level} with seed {self.seed}"
                 f"{' (final deck)' if final_deck else ''}")

        place_locked_rooms(state, config, self.rng)
        if self.level >= 2 and not final_deck and self.flags.place_hazards:
            place_hazards(state, config, self.rng)
        ensure_every_room_has_door(state, config)
        init_room_power(state)

        place_generators(state, config, self.rng, self.flags)
        place_batteries(state, config, self.rng)

        if self.flags.place_cctv_terminals:
            place_cctv_terminals(state, config, self.rng)

        if not final_deck and self.flags.place_furniture:
            place_furniture(state, config, self.rng)
            if self.flags.hide_items_in_furniture:
                hide_items_in_furniture(state, config, self.rng, self.flags.item_hide_chance)

        if self.level >= 2 and not final_deck and self.flags.place_puzzles:
            place_puzzles(state, config, self.rng)

        if self.flags.place_maintenance_terminals:
            place_maintenance_terminals(state, config, self.rng)

        if self.flags.enforce_power_solvability:
            ensure_solvability_door_power(state)
        init_maintenance_terminal_power(state)

        log.info(f"Level {self.level}: {len(state.hints)} hints, "
                 f"{len(state.generators)} generators, {len(config.avoid)} cells in use")
        return state
