"""
K-Means Configuration

Configuration for the bounded-iteration color clusterer.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class KMeansConfig:
    """
    Configuration for K-Means color clustering.

    Attributes:
        n_clusters: Default number of clusters when cluster() is called without k
        max_iter: Hard cap on assignment/update rounds
        tol: Convergence threshold on the squared movement of every center
        random_state: Seed for reproducible seeding (None draws fresh entropy)
    """
    n_clusters: int = 3
    """Number of clusters (k). Dominant-color extraction uses 3."""

    max_iter: int = 10
    """Maximum number of iterations; the run always terminates after this many."""

    tol: float = 0.001
    """Absolute squared-distance bound in normalized [0, 1]^3 space."""

    random_state: Optional[int] = None
    """Random seed for seed-center selection."""

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.n_clusters < 1:
            raise ValueError(f"n_clusters must be >= 1, got {self.n_clusters}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}")
        if self.tol < 0:
            raise ValueError(f"tol must be >= 0, got {self.tol}")
