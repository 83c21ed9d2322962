# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple
import time

from balanced_allocations import InvalidConfiguration, get_decider


@dataclass(frozen=True)
class NoiseSweepSpec:
    """
    One sweep of a TwoSampleProcess decider over a range of parameter values
    (sigma for sigma_noisy, g for g_bounded / g_myopic).
    """
    num_bins: int
    decider: str
    param_values: Tuple[float, ...]
    balls_multiplier: int
    num_trials: int = 100

    def __post_init__(self) -> None:
        if self.num_bins <= 0:
            raise InvalidConfiguration("num_bins must be > 0")
        if self.balls_multiplier <= 0:
            raise InvalidConfiguration("balls_multiplier must be > 0")
        if self.num_trials <= 0:
            raise InvalidConfiguration("num_trials must be > 0")
        if not self.param_values:
            raise InvalidConfiguration("param_values must be non-empty")
        # Fail on unknown names before any trial runs.
        get_decider(self.decider)

    @property
    def num_balls(self) -> int:
        return self.balls_multiplier * self.num_bins


@dataclass(frozen=True)
class BatchedSweepSpec:
    """
    One sweep of the b-Batched setting over a range of batch sizes.
    """
    num_bins: int
    batch_sizes: Tuple[int, ...]
    num_trials: int = 100

    def __post_init__(self) -> None:
        if self.num_bins <= 0:
            raise InvalidConfiguration("num_bins must be > 0")
        if self.num_trials <= 0:
            raise InvalidConfiguration("num_trials must be > 0")
        if not self.batch_sizes:
            raise InvalidConfiguration("batch_sizes must be non-empty")
        for b in self.batch_sizes:
            if b <= 0:
                raise InvalidConfiguration("batch sizes must be > 0")


@dataclass(frozen=True)
class GapSummary:
    """
    Mean and histogram of rounded gap values over a set of trials.
    """
    mean: float
    histogram: Dict[int, int]  # rounded gap -> number of trials


def summarize_gaps(gaps: Sequence[int]) -> GapSummary:
    """
    Compute the mean and the histogram of already-rounded gaps.
    """
    if not gaps:
        raise ValueError("gaps must be non-empty")

    histogram: Dict[int, int] = {}
    total = 0
    for g in gaps:
        total += g
        histogram[g] = histogram.get(g, 0) + 1

    return GapSummary(mean=total / len(gaps), histogram=dict(sorted(histogram.items())))


def histogram_percentages(histogram: Dict[int, int], num_trials: int) -> Dict[int, int]:
    """
    Convert trial counts to integer percentages of num_trials (rounded down,
    so the entries sum to at most 100).
    """
    if num_trials <= 0:
        raise ValueError("num_trials must be > 0")
    return {gap: count * 100 // num_trials for gap, count in sorted(histogram.items())}


@dataclass
class SweepPoint:
    """
    Result for one parameter value of a sweep.
    """
    param: float
    num_trials: int
    gaps: List[int]

    summary: GapSummary = field(init=False)
    runtime_s: Optional[float] = None

    def __post_init__(self) -> None:
        # Sanity: every trial must be accounted for exactly once
        if len(self.gaps) != self.num_trials:
            raise ValueError(
                f"trial count mismatch: expected {self.num_trials}, got {len(self.gaps)}"
            )
        self.summary = summarize_gaps(self.gaps)

    @property
    def mean_gap(self) -> float:
        return self.summary.mean

    @property
    def histogram(self) -> Dict[int, int]:
        return self.summary.histogram

    def percentages(self) -> Dict[int, int]:
        return histogram_percentages(self.summary.histogram, self.num_trials)


@dataclass
class NoiseSweepResult:
    spec: NoiseSweepSpec
    points: List[SweepPoint] = field(default_factory=list)


@dataclass
class BatchedSweepResult:
    """
    For every batch size, the gap after the first round ("One-Choice") and
    after the last round ("Two-Choice").
    """
    spec: BatchedSweepSpec
    one_choice: List[SweepPoint] = field(default_factory=list)
    two_choice: List[SweepPoint] = field(default_factory=list)


def coordinates(points: Sequence[SweepPoint]) -> List[Tuple[float, float]]:
    """
    (parameter value, mean gap) pairs, ready for plotting.
    """
    return [(p.param, p.mean_gap) for p in points]


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.time()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.time() - self._start
