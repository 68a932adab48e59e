"""
Clustering errors.

Both conditions are fatal to a single clustering call. They subclass
ValueError so callers that already guard against bad input keep working.
"""


class ClusteringError(ValueError):
    """Base class for input conditions that make clustering impossible."""


class EmptyInputError(ClusteringError):
    """Raised when no points are supplied, so no seed centers can be drawn."""

    def __init__(self, message: str = "Cannot cluster an empty point sequence"):
        super().__init__(message)


class DegenerateInputError(ClusteringError):
    """
    Raised when the requested cluster count exceeds the number of distinct
    values present in the input.

    Attributes:
        k: Requested number of clusters
        n_distinct: Number of distinct points actually available
    """

    def __init__(self, k: int, n_distinct: int):
        self.k = k
        self.n_distinct = n_distinct
        super().__init__(
            f"Cannot seed {k} clusters from {n_distinct} distinct point(s); "
            f"reduce k or supply more varied input"
        )
