class InvalidConfiguration(ValueError):
    """
    Raised at construction time when a process, decider or sweep is given
    parameters it cannot run with (zero bins, negative batch size, ...).
    """


class OutOfRange(IndexError):
    """
    Raised when a bin index falls outside [0, num_bins).

    Correct sampling never produces one, so seeing this means a bug.
    """
