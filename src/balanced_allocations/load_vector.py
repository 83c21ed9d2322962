from typing import List, Sequence

from .errors import InvalidConfiguration, OutOfRange


class LoadVector:
    """
    Per-bin ball counts for one trial.

    Keeps two running aggregates next to the counts so the gap can be read
    in O(1):

        total_balls == sum(loads)
        max_load    == max(loads)

    Loads only ever grow, so max_load is maintained incrementally and never
    has to be recomputed from scratch.
    """

    def __init__(self, num_bins: int):
        if num_bins <= 0:
            raise InvalidConfiguration("num_bins must be > 0")

        self._num_bins = num_bins
        self.loads: List[int] = [0] * num_bins
        self.total_balls: int = 0
        self.max_load: int = 0

    # ------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------

    def increment(self, index: int) -> None:
        """
        Place a single ball into bin `index`.
        """
        self._check_index(index)

        c = self.loads[index] + 1
        self.loads[index] = c
        self.total_balls += 1
        if c > self.max_load:
            self.max_load = c

    def add(self, counts: Sequence[int]) -> None:
        """
        Add a whole vector of per-bin counts in one go (used to flush a
        batch buffer).
        """
        if len(counts) != self._num_bins:
            raise OutOfRange(
                f"counts has {len(counts)} entries, expected {self._num_bins}"
            )

        loads = self.loads
        added = 0
        mx = self.max_load
        for i, c in enumerate(counts):
            if c:
                v = loads[i] + c
                loads[i] = v
                added += c
                if v > mx:
                    mx = v
        self.total_balls += added
        self.max_load = mx

    # ------------------------------------------------------------
    # Introspection (read-only)
    # ------------------------------------------------------------

    @property
    def num_bins(self) -> int:
        return self._num_bins

    def load(self, index: int) -> int:
        self._check_index(index)
        return self.loads[index]

    def gap(self) -> float:
        """
        max_load - average load. Zero for an empty vector.
        """
        return self.max_load - self.total_balls / self._num_bins

    def snapshot(self) -> List[int]:
        """
        Return a copy of the loads for inspection/debugging.
        """
        return list(self.loads)

    def __len__(self) -> int:
        return self._num_bins

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._num_bins:
            raise OutOfRange(f"bin index {index} out of range [0, {self._num_bins})")
