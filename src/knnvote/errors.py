"""
Exceptions raised by the k-NN engine.

Both concrete errors describe a bad run configuration rather than bad
data for a single point, so callers are expected to abort the whole
classification instead of skipping the offending query.
"""


class InvalidArgument(ValueError):
    """Base class for configuration errors detected before any scan work."""


class InvalidK(InvalidArgument):
    """Raised when k is zero or negative."""

    def __init__(self, k):
        self.k = k
        super().__init__(f"k must be > 0 (got {k})")


class InsufficientTrainingData(InvalidArgument):
    """Raised when k exceeds the number of available training points."""

    def __init__(self, k, n_train):
        self.k = k
        self.n_train = n_train
        super().__init__(
            f"k cannot be larger than number of training points (k={k}, n_train={n_train})"
        )
