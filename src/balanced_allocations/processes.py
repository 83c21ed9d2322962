from __future__ import annotations

import logging
from typing import List

from .deciders import Decider, TwoChoice
from .errors import InvalidConfiguration
from .load_vector import LoadVector
from .random_source import RandomSource


logger = logging.getLogger("balanced_allocations")


class TwoSampleProcess:
    """
    Sequential two-sample allocation.

    Every step samples two bins uniformly at random (independently, so the
    two samples may be the same bin) from the *current* load vector, asks
    the decider which one gets the ball, and places it immediately.

    The decider is the only thing that varies between TwoChoice, g-Bounded,
    g-Myopic and sigma-Noisy-Load; this class is identical for all of them.
    """

    def __init__(self, num_bins: int, decider: Decider):
        self._loads = LoadVector(num_bins)
        self.decider = decider

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def step(self, rng: RandomSource) -> int:
        """
        Allocate one ball. Returns the bin it went to.
        """
        lv = self._loads
        n = lv.num_bins
        i1 = rng.uniform_index(n)
        i2 = rng.uniform_index(n)
        idx = self.decider.decide(lv.loads, i1, i2, rng)
        lv.increment(idx)
        return idx

    def run(self, num_balls: int, rng: RandomSource) -> None:
        for _ in range(num_balls):
            self.step(rng)

    # ------------------------------------------------------------
    # Introspection (read-only)
    # ------------------------------------------------------------

    def num_bins(self) -> int:
        return self._loads.num_bins

    def total_balls(self) -> int:
        return self._loads.total_balls

    def max_load(self) -> int:
        return self._loads.max_load

    def gap(self) -> float:
        return self._loads.gap()

    def snapshot_loads(self) -> List[int]:
        return self._loads.snapshot()


class BatchedTwoChoiceSetting:
    """
    Two-Choice in the b-Batched setting.

    Starting from an empty load vector, each round allocates b balls with
    Two-Choice, but every decision in the round uses the loads as they were
    at the *start* of the round. The round's balls are collected in a
    separate buffer and only added to the load vector once the whole batch
    has been decided, which models b allocations happening in parallel with
    equally stale information.

    The decision rule inside a batch is fixed to TwoChoice.
    """

    def __init__(self, num_bins: int, batch_size: int):
        if batch_size < 0:
            raise InvalidConfiguration("batch_size must be >= 0")

        self._loads = LoadVector(num_bins)
        self._buffer: List[int] = [0] * num_bins
        self.batch_size = batch_size
        self.rounds = 0
        self._decider = TwoChoice()

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def step(self, rng: RandomSource) -> None:
        """
        Allocate one batch of `batch_size` balls.
        """
        lv = self._loads
        snapshot = lv.loads
        buffer = self._buffer
        n = lv.num_bins
        decide = self._decider.decide

        try:
            # Phase 1: decide all b allocations against the frozen loads.
            for _ in range(self.batch_size):
                i1 = rng.uniform_index(n)
                i2 = rng.uniform_index(n)
                buffer[decide(snapshot, i1, i2, rng)] += 1

            # Phase 2: publish the batch.
            lv.add(buffer)
            self.rounds += 1
        finally:
            for i in range(n):
                buffer[i] = 0

        logger.debug(
            "batched round %d: total_balls=%d max_load=%d",
            self.rounds, lv.total_balls, lv.max_load,
        )

    def run(self, num_rounds: int, rng: RandomSource) -> None:
        for _ in range(num_rounds):
            self.step(rng)

    # ------------------------------------------------------------
    # Introspection (read-only)
    # ------------------------------------------------------------

    def num_bins(self) -> int:
        return self._loads.num_bins

    def total_balls(self) -> int:
        return self._loads.total_balls

    def max_load(self) -> int:
        return self._loads.max_load

    def gap(self) -> float:
        return self._loads.gap()

    def snapshot_loads(self) -> List[int]:
        return self._loads.snapshot()
