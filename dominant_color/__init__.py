"""
dominant_color - Dominant color estimation with bounded K-Means.

Clusters normalized RGB samples with a medoid-snapping K-Means and ranks the
resulting centers by population.
"""

from .colors import (
    ColorSink,
    ColorSource,
    DominantColorConfig,
    DominantColorExtractor,
    DominantColorResult,
    HexColorSink,
    PackedPixelSource,
    PixelArraySource,
    RGBAColorSink,
    Rgb8ColorSink,
    determine_dominant_colors
)
from .kmeans import (
    Cluster,
    ClusteringError,
    ClusteringResult,
    DegenerateInputError,
    EmptyInputError,
    InvalidColorSample,
    KMeansClusterer,
    KMeansConfig,
    Point
)

__version__ = '0.1.0'
