from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Protocol, Sequence

from .errors import InvalidConfiguration
from .random_source import RandomSource


# A decider looks at the loads of two sampled bins and returns the one that
# receives the ball. Every variant below exposes the same single method:
#
#     decide(loads, i1, i2, rng) -> i1 or i2
#
# Deciders hold only their configuration and can be called any number of
# times; the process that owns the load vector never needs to know which
# rule it is running.


class Decider(Protocol):
    def decide(self, loads: Sequence[int], i1: int, i2: int, rng: RandomSource) -> int:
        ...


def _two_choice(loads: Sequence[int], i1: int, i2: int) -> int:
    # Ties go to the first sample.
    if loads[i1] <= loads[i2]:
        return i1
    return i2


@dataclass(frozen=True)
class TwoChoice:
    """
    Classic power-of-two-choices: the less loaded of the two samples.
    """

    name = "two_choice"

    def decide(self, loads: Sequence[int], i1: int, i2: int, rng: RandomSource) -> int:
        return _two_choice(loads, i1, i2)


@dataclass(frozen=True)
class GBounded:
    """
    g-Bounded: an adversary may reverse the Two-Choice decision whenever the
    two loads differ by at most g. This variant always reverses in that
    case, which is the worst it can do.

    Loads further apart than g are allocated exactly like TwoChoice.
    """

    g: int
    name = "g_bounded"

    def __post_init__(self) -> None:
        if self.g < 0:
            raise InvalidConfiguration("g must be >= 0")

    def decide(self, loads: Sequence[int], i1: int, i2: int, rng: RandomSource) -> int:
        if abs(loads[i1] - loads[i2]) > self.g:
            return _two_choice(loads, i1, i2)
        # Reverse the allocation.
        if loads[i1] <= loads[i2]:
            return i2
        return i1


@dataclass(frozen=True)
class GMyopic:
    """
    g-Myopic: loads within g of each other look the same, so the ball goes
    to either sample with probability 1/2. Otherwise TwoChoice.
    """

    g: int
    name = "g_myopic"

    def __post_init__(self) -> None:
        if self.g < 0:
            raise InvalidConfiguration("g must be >= 0")

    def decide(self, loads: Sequence[int], i1: int, i2: int, rng: RandomSource) -> int:
        if abs(loads[i1] - loads[i2]) <= self.g:
            return i1 if rng.bernoulli(0.5) else i2
        return _two_choice(loads, i1, i2)


@dataclass(frozen=True)
class SigmaNoisy:
    """
    sigma-Noisy-Load: each sampled load is observed with independent
    N(0, sigma^2) noise and the ball goes to the smaller observation.

    Observations are truncated to integers before comparing, and ties go to
    the first sample. With sigma == 0 this is exactly TwoChoice and no
    randomness is consumed.
    """

    sigma: float
    name = "sigma_noisy"

    def __post_init__(self) -> None:
        if self.sigma < 0:
            raise InvalidConfiguration("sigma must be >= 0")

    def decide(self, loads: Sequence[int], i1: int, i2: int, rng: RandomSource) -> int:
        if self.sigma == 0:
            return _two_choice(loads, i1, i2)

        est_1 = int(loads[i1] + rng.normal(0.0, self.sigma))
        est_2 = int(loads[i2] + rng.normal(0.0, self.sigma))
        if est_1 <= est_2:
            return i1
        return i2


# --- Registry / dispatch -----------------------------------------------------

DeciderFactory = Callable[[float], Decider]


def _no_param(_param: float) -> TwoChoice:
    return TwoChoice()


# DECIDERS maps decider name -> factory taking the swept parameter.
# Note: two_choice ignores the parameter.
DECIDERS: Dict[str, DeciderFactory] = {
    "two_choice": _no_param,
    "g_bounded": lambda g: GBounded(int(g)),
    "g_myopic": lambda g: GMyopic(int(g)),
    "sigma_noisy": lambda sigma: SigmaNoisy(float(sigma)),
}


def get_decider(name: str) -> DeciderFactory:
    name = name.strip().lower()
    if name not in DECIDERS:
        raise InvalidConfiguration(
            f"unknown decider '{name}'. Available: {sorted(DECIDERS.keys())}"
        )
    return DECIDERS[name]


def make_decider(name: str, param: float = 0) -> Decider:
    """
    Build a decider by name, e.g. make_decider("g_myopic", 3).
    """
    return get_decider(name)(param)
