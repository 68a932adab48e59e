"""
Dominant Color Extraction

Clusters an image's color samples and ranks the cluster centers by how many
samples they represent. The largest cluster's center is the dominant color.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

import numpy as np

from ..kmeans import ClusteringError, KMeansClusterer, KMeansConfig, Point
from .interfaces import ColorSink, ColorSource

logger = logging.getLogger(__name__)


@dataclass
class DominantColorConfig:
    """
    Configuration for dominant color extraction.

    Attributes:
        n_colors: Number of clusters (and therefore colors) to extract
        max_iter: Iteration cap for the clusterer
        tol: Convergence threshold for the clusterer
        random_state: Random seed for reproducible results
        fallback: Neutral (r, g, b) color returned when clustering is impossible
    """
    n_colors: int = 3
    max_iter: int = 10
    tol: float = 0.001
    random_state: Optional[int] = None
    fallback: Tuple[float, float, float] = (0.5, 0.5, 0.5)

    def __post_init__(self):
        """Validate configuration."""
        if self.n_colors < 1:
            raise ValueError(f"n_colors must be >= 1, got {self.n_colors}")
        if len(self.fallback) != 3 or not all(0.0 <= c <= 1.0 for c in self.fallback):
            raise ValueError(f"fallback must be an (r, g, b) triple in [0, 1], got {self.fallback}")

    def kmeans_config(self) -> KMeansConfig:
        return KMeansConfig(
            n_clusters=self.n_colors,
            max_iter=self.max_iter,
            tol=self.tol,
            random_state=self.random_state
        )


@dataclass
class DominantColorResult:
    """
    Ranked colors, most dominant first.
    """
    colors: List[Any]
    """Cluster centers mapped through the sink, by descending population."""

    counts: List[int]
    """Member count of each color's cluster. Empty when the fallback was used."""

    centers: List[Point] = field(default_factory=list)
    """Cluster centers as points, in the same order as colors."""

    fallback_used: bool = False
    """True if clustering failed and colors holds only the fallback color."""

    @property
    def dominant(self) -> Any:
        return self.colors[0]

    def fractions(self) -> np.ndarray:
        """Share of samples per color, summing to 1 (empty for the fallback)."""
        counts = np.asarray(self.counts, dtype=np.float64)
        if counts.size == 0:
            return counts
        return counts / counts.sum()


class DominantColorExtractor:
    """
    Extracts ranked dominant colors from a ColorSource.

    The caller bounds the number of samples (e.g. by downsizing the image to
    100x100) since each round costs O(k * n).

    Example:
        >>> source = PixelArraySource(image)   # (H, W, 3) uint8
        >>> extractor = DominantColorExtractor(DominantColorConfig(random_state=42))
        >>> result = extractor.extract(source, sink=HexColorSink())
        >>> print(result.dominant)   # e.g. '#2a5d8f'
    """

    def __init__(self, config: Optional[DominantColorConfig] = None):
        self.config = config or DominantColorConfig()
        self.clusterer = KMeansClusterer(self.config.kmeans_config())

    def extract(self, source: Union[ColorSource, List[Point]], sink: Optional[ColorSink] = None) -> DominantColorResult:
        """
        Cluster the source's samples and rank the centers.

        Args:
            source: ColorSource, or a list of points already extracted
            sink: Maps centers to output colors. If None, colors are
                  (r, g, b, a) float tuples.

        Returns:
            result: Ranked colors; a single fallback color if the samples are
                    empty or have fewer distinct values than n_colors
        """
        points = source.points() if isinstance(source, ColorSource) else list(source)
        logger.debug(f"Extracting {self.config.n_colors} color(s) from {len(points)} samples")

        try:
            result = self.clusterer.fit(points, self.config.n_colors)
        except ClusteringError as exc:
            logger.warning(f"Unable to determine dominant color, using fallback: {exc}")
            fallback = Point(*self.config.fallback)
            return DominantColorResult(
                colors=[fallback.to_color(sink)],
                counts=[],
                centers=[fallback],
                fallback_used=True
            )

        ranked = result.ranked()
        return DominantColorResult(
            colors=[cluster.center.to_color(sink) for cluster in ranked],
            counts=[len(cluster) for cluster in ranked],
            centers=[cluster.center for cluster in ranked]
        )


def determine_dominant_colors(
    source: Union[ColorSource, List[Point]],
    n_colors: int = 3,
    sink: Optional[ColorSink] = None,
    random_state: Optional[int] = None
) -> List[Any]:
    """
    Ranked dominant colors of a color source, most dominant first.

    Args:
        source: ColorSource or list of points
        n_colors: Number of colors to extract
        sink: Output color representation (default: (r, g, b, a) tuples)
        random_state: Random seed for reproducibility

    Returns:
        colors: n_colors colors, or a single neutral fallback color

    Example:
        >>> from dominant_color.colors import PixelArraySource, HexColorSink
        >>> colors = determine_dominant_colors(PixelArraySource(image), sink=HexColorSink())
    """
    config = DominantColorConfig(n_colors=n_colors, random_state=random_state)
    return DominantColorExtractor(config).extract(source, sink).colors
