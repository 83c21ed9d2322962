# simulations/runner.py

from __future__ import annotations

import logging
import math
from typing import Tuple

from tqdm import tqdm

from balanced_allocations import (
    BatchedTwoChoiceSetting,
    Decider,
    InvalidConfiguration,
    RandomSource,
    TwoSampleProcess,
    make_decider,
)

from . import config
from .common import (
    BatchedSweepResult,
    BatchedSweepSpec,
    NoiseSweepResult,
    NoiseSweepSpec,
    SweepPoint,
    Timer,
)


logger = logging.getLogger("balanced_allocations.simulations")


def rounds_for_batch(num_bins: int, batch_size: int) -> int:
    """
    Number of rounds a b-Batched trial runs for: factor * n / b, where the
    factor is larger once a single batch is at least n balls. Always at
    least one round, so the first-round gap exists for every batch size.
    """
    if batch_size <= 0:
        raise InvalidConfiguration("batch_size must be > 0")
    if batch_size >= num_bins:
        factor = config.ROUNDS_FACTOR_LARGE_BATCH
    else:
        factor = config.ROUNDS_FACTOR_SMALL_BATCH
    return max(1, factor * num_bins // batch_size)


# --- Single trials -----------------------------------------------------------

def run_noise_trial(
    num_bins: int,
    num_balls: int,
    decider: Decider,
    rng: RandomSource,
) -> float:
    """
    Allocate num_balls balls into a fresh TwoSampleProcess and return the
    final gap.
    """
    process = TwoSampleProcess(num_bins, decider)
    process.run(num_balls, rng)
    return process.gap()


def run_batched_trial(
    num_bins: int,
    batch_size: int,
    num_rounds: int,
    rng: RandomSource,
) -> Tuple[float, float]:
    """
    Run a fresh b-Batched trial for num_rounds rounds.

    Returns (gap after the first round, gap after the last round). A single
    batch of b balls is allocated with no load information at all, so the
    first-round gap doubles as a One-Choice baseline.
    """
    if num_rounds <= 0:
        raise InvalidConfiguration("num_rounds must be > 0")

    process = BatchedTwoChoiceSetting(num_bins, batch_size)
    process.step(rng)
    first_gap = process.gap()
    process.run(num_rounds - 1, rng)
    return first_gap, process.gap()


# --- Sweep points ------------------------------------------------------------

def run_noise_point(spec: NoiseSweepSpec, param: float, rng: RandomSource) -> SweepPoint:
    decider = make_decider(spec.decider, param)
    gaps = []

    with Timer() as t:
        for _ in range(spec.num_trials):
            gap = run_noise_trial(spec.num_bins, spec.num_balls, decider, rng)
            gaps.append(int(gap))

    return SweepPoint(param=param, num_trials=spec.num_trials, gaps=gaps, runtime_s=t.elapsed_s)


def run_batched_point(
    spec: BatchedSweepSpec,
    batch_size: int,
    rng: RandomSource,
) -> Tuple[SweepPoint, SweepPoint]:
    """
    Returns (one_choice_point, two_choice_point) for one batch size.
    """
    num_rounds = rounds_for_batch(spec.num_bins, batch_size)
    first_gaps = []
    final_gaps = []

    with Timer() as t:
        for _ in range(spec.num_trials):
            first, final = run_batched_trial(spec.num_bins, batch_size, num_rounds, rng)
            first_gaps.append(math.ceil(first))
            final_gaps.append(math.ceil(final))

    one_choice = SweepPoint(
        param=batch_size, num_trials=spec.num_trials, gaps=first_gaps, runtime_s=t.elapsed_s
    )
    two_choice = SweepPoint(
        param=batch_size, num_trials=spec.num_trials, gaps=final_gaps, runtime_s=t.elapsed_s
    )
    return one_choice, two_choice


# --- Sweeps ------------------------------------------------------------------

def run_noise_sweep(
    spec: NoiseSweepSpec,
    rng: RandomSource,
    progress: bool = False,
) -> NoiseSweepResult:
    """
    Run spec.num_trials trials for every parameter value of the sweep.

    rng is shared by every trial and never re-seeded, so the random stream
    simply continues from one trial (and one parameter value) to the next.
    """
    logger.info(
        f"START {spec.decider}: n={spec.num_bins} m={spec.num_balls} "
        f"trials={spec.num_trials} values={list(spec.param_values)}"
    )
    result = NoiseSweepResult(spec=spec)

    for param in tqdm(spec.param_values, desc=f"{spec.decider} n={spec.num_bins}",
                      leave=True, disable=not progress):
        point = run_noise_point(spec, param, rng)
        result.points.append(point)
        logger.info(
            f"{spec.decider}: value={param} mean_gap={point.mean_gap:.3f} "
            f"runtime={point.runtime_s:.3f}s"
        )

    logger.info(f"END {spec.decider}")
    return result


def run_batched_sweep(
    spec: BatchedSweepSpec,
    rng: RandomSource,
    progress: bool = False,
) -> BatchedSweepResult:
    """
    Run spec.num_trials b-Batched trials for every batch size of the sweep.
    """
    logger.info(
        f"START batched: n={spec.num_bins} trials={spec.num_trials} "
        f"batch_sizes={list(spec.batch_sizes)}"
    )
    result = BatchedSweepResult(spec=spec)

    for batch_size in tqdm(spec.batch_sizes, desc=f"batched n={spec.num_bins}",
                           leave=True, disable=not progress):
        one_choice, two_choice = run_batched_point(spec, batch_size, rng)
        result.one_choice.append(one_choice)
        result.two_choice.append(two_choice)
        logger.info(
            f"batched: b={batch_size} rounds={rounds_for_batch(spec.num_bins, batch_size)} "
            f"one_choice={one_choice.mean_gap:.3f} two_choice={two_choice.mean_gap:.3f} "
            f"runtime={two_choice.runtime_s:.3f}s"
        )

    logger.info("END batched")
    return result
