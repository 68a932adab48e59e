"""
Pixel-buffer color sources and common color sinks.

Sources turn decoded 8-bit pixel data into normalized component triples;
decoding and resizing the image is left to the caller.
"""

from typing import Iterable, Tuple

import numpy as np

from .interfaces import ColorSink, ColorSource

# Byte orders for 32-bit packed pixels, as reported by the image decoder
BYTE_ORDERS = ('default', 'big', 'little')


class PixelArraySource(ColorSource):
    """
    Color source over an RGB(A) pixel array.

    Accepts arrays of shape (H, W, C) or (N, C) with C = 3 or 4. Integer
    samples (uint8, or numpy's default int64) must be 8-bit values and are
    normalized from [0, 255]; floating point samples are assumed to be in
    [0, 1] already. The alpha channel, if present, is ignored.

    Example:
        >>> pixels = np.zeros((100, 100, 3), dtype=np.uint8)
        >>> points = PixelArraySource(pixels).points()
        >>> len(points)
        10000
    """

    def __init__(self, pixels: np.ndarray):
        pixels = np.asarray(pixels)
        if pixels.ndim not in (2, 3) or pixels.shape[-1] not in (3, 4):
            raise ValueError(
                f"Pixels must be (H, W, 3|4) or (N, 3|4), got shape {pixels.shape}"
            )
        if np.issubdtype(pixels.dtype, np.integer) and pixels.size:
            if pixels.min() < 0 or pixels.max() > 255:
                raise ValueError(
                    f"Integer pixels must be 8-bit samples in [0, 255], "
                    f"got range [{pixels.min()}, {pixels.max()}]"
                )
        self.pixels = pixels

    def as_normalized_array(self) -> np.ndarray:
        """
        Returns:
            rgb: float64 array of shape (N, 3) with values in [0, 1]
        """
        rgb = self.pixels.reshape(-1, self.pixels.shape[-1])[:, :3]
        if np.issubdtype(rgb.dtype, np.integer):
            return rgb.astype(np.float64) / 255.0
        return rgb.astype(np.float64)

    def components(self) -> Iterable[Tuple[float, float, float]]:
        return map(tuple, self.as_normalized_array().tolist())


class PackedPixelSource(ColorSource):
    """
    Color source over 32-bit packed pixels with 8 bits per channel.

    The channel layout depends on the buffer's byte order:
    - 'default' / 'big': red in the low byte, then green, then blue
    - 'little': blue in the low byte, then green, then red

    Signed 32-bit values are reinterpreted as unsigned. The highest byte
    (alpha or padding) is ignored, so the same image yields the same points
    regardless of byte order.
    """

    def __init__(self, buffer, byte_order: str = 'default'):
        if byte_order not in BYTE_ORDERS:
            raise ValueError(f"byte_order must be one of {BYTE_ORDERS}, got '{byte_order}'")
        self.buffer = np.asarray(buffer).astype(np.uint32).ravel()
        self.byte_order = byte_order

    def as_normalized_array(self) -> np.ndarray:
        low = self.buffer & 0xFF
        mid = (self.buffer >> 8) & 0xFF
        high = (self.buffer >> 16) & 0xFF

        if self.byte_order == 'little':
            r, g, b = high, mid, low
        else:
            r, g, b = low, mid, high

        return np.stack([r, g, b], axis=1).astype(np.float64) / 255.0

    def components(self) -> Iterable[Tuple[float, float, float]]:
        return map(tuple, self.as_normalized_array().tolist())


class RGBAColorSink(ColorSink):
    """Opaque (r, g, b, a) float tuple."""

    def to_color(self, r: float, g: float, b: float) -> Tuple[float, float, float, float]:
        return (r, g, b, 1.0)


class Rgb8ColorSink(ColorSink):
    """(R, G, B) tuple of ints in [0, 255]."""

    def to_color(self, r: float, g: float, b: float) -> Tuple[int, int, int]:
        return tuple(int(round(np.clip(c, 0.0, 1.0) * 255)) for c in (r, g, b))


class HexColorSink(ColorSink):
    """'#rrggbb' string."""

    def to_color(self, r: float, g: float, b: float) -> str:
        red, green, blue = Rgb8ColorSink().to_color(r, g, b)
        return f"#{red:02x}{green:02x}{blue:02x}"
