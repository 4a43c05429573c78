# rng/random_number_generator.py

import random
from typing import List, Sequence, Tuple, TypeVar

T = TypeVar('T')


class RandomNumberGenerator:
    """Deterministic random source for level generation.

    Wraps a private random.Random so that a deck regenerated from its stored
    seed comes out identical. Every placement stage receives this object;
    nothing in the generator touches the global random module.

    The API mirrors random.Random where the two overlap.

    Usage:
        rng = RandomNumberGenerator(12345)
        index = rng.intn(len(candidates))
        rng.shuffle(candidates)
    """

    def __init__(self, seed: int):
        """Initialize RNG with a seed.

        Args:
            seed: Integer seed for deterministic random generation
        """
        self._seed = seed
        self._rng = random.Random(seed)
        self._initial_state = self._rng.getstate()

    @property
    def seed(self) -> int:
        """Get the seed used to initialize this RNG."""
        return self._seed

    def reset(self) -> None:
        """Reset RNG to initial seeded state."""
        self._rng.setstate(self._initial_state)

    def getstate(self) -> Tuple:
        return self._rng.getstate()

    def setstate(self, state: Tuple) -> None:
        self._rng.setstate(state)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], including both end points."""
        return self._rng.randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        return self._rng.choice(seq)

    def sample(self, population: Sequence[T], k: int) -> List[T]:
        """Choose k unique elements, without replacement."""
        return self._rng.sample(list(population), k)

    def shuffle(self, x: List) -> None:
        """Shuffle list x in-place, and return None."""
        self._rng.shuffle(x)

    def random(self) -> float:
        """Return random float in the range [0.0, 1.0)."""
        return self._rng.random()

    # ========================================================================
    # Level generation helpers
    # ========================================================================

    def intn(self, n: int) -> int:
        """Return a random integer in [0, n).

        Raises:
            ValueError: If n is not positive
        """
        if n <= 0:
            raise ValueError(f"intn expects a positive bound, got {n}")
        return self._rng.randrange(n)

    def chance(self, percent: int) -> bool:
        """Return True with the given probability in percent (0-100)."""
        return self.intn(100) < percent
