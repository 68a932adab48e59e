"""
K-Means clustering module for dominant color estimation.
"""

from .cluster import Cluster
from .clusterer import ClusteringResult, KMeansClusterer
from .config import KMeansConfig
from .errors import ClusteringError, DegenerateInputError, EmptyInputError
from .point import InvalidColorSample, Point

__all__ = [
    'Point',
    'InvalidColorSample',
    'Cluster',
    'KMeansConfig',
    'KMeansClusterer',
    'ClusteringResult',
    'ClusteringError',
    'EmptyInputError',
    'DegenerateInputError',
]
