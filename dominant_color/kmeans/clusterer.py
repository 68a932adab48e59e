"""
K-Means Clustering for Dominant Color Estimation

Bounded-iteration K-Means over normalized RGB points. Differences from the
textbook algorithm:
- Seeds are drawn by rejection sampling until k distinct points are found.
- Centers snap to the member nearest the cluster mean (medoid-snap), so every
  center is a real sample color.
- At most max_iter rounds are run; the loop stops early once no center
  moves more than tol (squared distance).
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np
from sklearn.utils import check_random_state

from .cluster import Cluster
from .config import KMeansConfig
from .errors import DegenerateInputError, EmptyInputError
from .point import Point

logger = logging.getLogger(__name__)


# ============================================================================
# Results
# ============================================================================

@dataclass
class ClusteringResult:
    """
    Results from one clustering run.
    """
    clusters: List[Cluster]
    """Exactly k clusters, in seeding order."""

    n_iter: int
    """Number of assignment/update rounds performed."""

    converged: bool
    """Whether every center moved at most tol in the last round."""

    def ranked(self) -> List[Cluster]:
        """Clusters sorted by descending member count (stable for ties)."""
        return sorted(self.clusters, key=len, reverse=True)


# ============================================================================
# Clusterer
# ============================================================================

class KMeansClusterer:
    """
    K-Means clusterer for color samples.

    Each call to fit()/cluster() creates fresh clusters and resolves its own
    random generator, so calls share no mutable state unless the caller
    passes the same numpy RandomState on purpose.

    Example:
        >>> points = [Point(0, 0, 0), Point(0, 0, 0), Point(1, 1, 1)]
        >>> clusterer = KMeansClusterer(KMeansConfig(random_state=0))
        >>> clusters = clusterer.cluster(points, 2)
        >>> sorted(len(c) for c in clusters)
        [1, 2]
    """

    def __init__(
        self,
        config: Optional[KMeansConfig] = None,
        random_state: Union[None, int, np.random.RandomState] = None
    ):
        """
        Initialize the clusterer.

        Args:
            config: Configuration parameters. If None, uses defaults.
            random_state: Overrides config.random_state; accepts a seed or a
                          numpy RandomState for callers that manage their own.
        """
        self.config = config or KMeansConfig()
        self.random_state = random_state if random_state is not None else self.config.random_state

    def cluster(self, points: Sequence[Point], k: Optional[int] = None) -> List[Cluster]:
        """
        Partition points into k clusters.

        Args:
            points: Color samples
            k: Number of clusters. If None, uses config.n_clusters.

        Returns:
            clusters: Exactly k clusters

        Raises:
            EmptyInputError: If points is empty
            DegenerateInputError: If fewer than k distinct points exist
            ValueError: If k < 1
        """
        return self.fit(points, k).clusters

    def fit(self, points: Sequence[Point], k: Optional[int] = None) -> ClusteringResult:
        """
        Run the clustering loop and return clusters plus run statistics.

        Same arguments and errors as cluster().
        """
        points = list(points)
        if k is None:
            k = self.config.n_clusters

        rng = check_random_state(self.random_state)
        clusters = self._seed(points, k, rng)
        coords = _as_array(points)

        converged = False
        n_iter = 0
        for n_iter in range(1, self.config.max_iter + 1):
            movement = self._step(coords, points, clusters)
            if movement <= self.config.tol:
                converged = True
                break

        if converged:
            logger.debug(f"Converged after {n_iter} iteration(s)")
        else:
            logger.debug(f"Stopped at iteration cap ({self.config.max_iter}) without converging")

        return ClusteringResult(clusters=clusters, n_iter=n_iter, converged=converged)

    def step(self, points: Sequence[Point], clusters: List[Cluster]) -> float:
        """
        Run one assignment + center-update round on existing clusters.

        Args:
            points: Color samples
            clusters: Clusters to reassign and update in place

        Returns:
            movement: Largest squared center movement in this round
        """
        points = list(points)
        return self._step(_as_array(points), points, clusters)

    def _seed(self, points: List[Point], k: int, rng: np.random.RandomState) -> List[Cluster]:
        """Pick k mutually distinct seed centers by rejection sampling."""
        if not points:
            raise EmptyInputError()
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")

        n_distinct = len(set(points))
        if n_distinct < k:
            raise DegenerateInputError(k, n_distinct)

        seeds: List[Point] = []
        while len(seeds) < k:
            candidate = points[rng.randint(len(points))]
            if candidate not in seeds:
                seeds.append(candidate)

        logger.debug(f"Seeded {k} cluster(s) from {len(points)} points ({n_distinct} distinct)")
        return [Cluster(center) for center in seeds]

    def _step(self, coords: np.ndarray, points: List[Point], clusters: List[Cluster]) -> float:
        centers = _as_array([cluster.center for cluster in clusters])

        # Squared distance of every point to every center, shape (N, k).
        # argmin returns the first minimum, so ties go to the earlier cluster.
        distances = ((coords[:, np.newaxis, :] - centers[np.newaxis, :, :]) ** 2).sum(axis=2)
        labels = distances.argmin(axis=1)

        for cluster in clusters:
            cluster.clear()
        for point, label in zip(points, labels):
            clusters[label].add(point)

        return max(cluster.update_center() for cluster in clusters)


def _as_array(points: Sequence[Point]) -> np.ndarray:
    return np.array([p.as_tuple() for p in points], dtype=np.float64).reshape(-1, 3)
