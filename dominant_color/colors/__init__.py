"""
Color boundary: pixel sources, color sinks and dominant color extraction.
"""

from .dominant import (
    DominantColorConfig,
    DominantColorExtractor,
    DominantColorResult,
    determine_dominant_colors
)
from .interfaces import ColorSink, ColorSource
from .pixels import (
    HexColorSink,
    PackedPixelSource,
    PixelArraySource,
    RGBAColorSink,
    Rgb8ColorSink
)

__all__ = [
    # Interfaces
    'ColorSource',
    'ColorSink',
    # Sources and sinks
    'PixelArraySource',
    'PackedPixelSource',
    'RGBAColorSink',
    'Rgb8ColorSink',
    'HexColorSink',
    # Extraction
    'DominantColorConfig',
    'DominantColorExtractor',
    'DominantColorResult',
    'determine_dominant_colors'
]
