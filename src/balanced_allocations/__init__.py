"""
Balanced allocations (balls-into-bins) processes.

Two process shapes share one load-vector model:

  - TwoSampleProcess: one ball per step, decided by a pluggable decider
    (TwoChoice, GBounded, GMyopic, SigmaNoisy).
  - BatchedTwoChoiceSetting: b balls per round, all decided by TwoChoice
    against the loads at the start of the round.
"""

from .deciders import (  # noqa: F401
    DECIDERS,
    Decider,
    GBounded,
    GMyopic,
    SigmaNoisy,
    TwoChoice,
    get_decider,
    make_decider,
)
from .errors import InvalidConfiguration, OutOfRange  # noqa: F401
from .load_vector import LoadVector  # noqa: F401
from .processes import BatchedTwoChoiceSetting, TwoSampleProcess  # noqa: F401
from .random_source import PyRandomSource, RandomSource  # noqa: F401
