import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """
    The randomness a process or decider is allowed to consume.

    Anything with these three methods can drive a simulation; tests plug in
    scripted sources to force specific candidate pairs.
    """

    def uniform_index(self, n: int) -> int:
        ...

    def normal(self, mean: float = 0.0, stddev: float = 1.0) -> float:
        ...

    def bernoulli(self, p: float = 0.5) -> bool:
        ...


class PyRandomSource:
    """
    RandomSource backed by a private random.Random instance.

    The same instance is meant to be shared by every trial of a run, so the
    stream continues across trials instead of being re-seeded.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform_index(self, n: int) -> int:
        return self._rng.randrange(n)

    def normal(self, mean: float = 0.0, stddev: float = 1.0) -> float:
        # Zero spread is a point mass; don't touch the stream.
        if stddev == 0:
            return mean
        return self._rng.gauss(mean, stddev)

    def bernoulli(self, p: float = 0.5) -> bool:
        return self._rng.random() < p
