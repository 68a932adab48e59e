"""
Point - immutable 3D vector used as a color sample.

Components are conventionally RGB channels normalized to [0, 1]. Equality is
exact component-wise comparison: samples come from 8-bit channels, so the
value set is finite and a tolerance would only merge distinct colors.
"""

import logging
from dataclasses import dataclass
from numbers import Real
from typing import Optional, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from ..colors.interfaces import ColorSink

logger = logging.getLogger(__name__)


class InvalidColorSample(ValueError):
    """A color value that cannot be decomposed into RGB components."""


@dataclass(frozen=True)
class Point:
    """
    Immutable point in normalized RGB space.

    Supports ``+`` with another Point and ``/`` by an int or float, so the
    mean of a group of points reads as ``sum(points, Point.zero()) / len(points)``.

    Example:
        >>> p = Point(0.5, 0.25, 1.0)
        >>> p + Point(0.5, 0.25, 0.0)
        Point(x=1.0, y=0.5, z=1.0)
        >>> p.distance_squared(Point(0.5, 0.25, 0.0))
        1.0
    """
    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> 'Point':
        """The origin (0, 0, 0)."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_color(cls, color) -> 'Point':
        """
        Build a point from an external color representation.

        Args:
            color: Sequence (r, g, b) or (r, g, b, a) of channel values
                   already normalized to [0, 1]. Alpha is ignored.

        Returns:
            point: (r, g, b) as a Point, or the zero point if the color
                   cannot report its components
        """
        try:
            r, g, b = _rgb_components(color)
        except InvalidColorSample as exc:
            logger.debug(f"Substituting zero point for invalid color sample: {exc}")
            return cls.zero()
        return cls(r, g, b)

    def add(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def divide(self, divisor: Union[int, float]) -> 'Point':
        # Division by zero is left to raise ZeroDivisionError
        return Point(self.x / divisor, self.y / divisor, self.z / divisor)

    def __add__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __truediv__(self, divisor: Union[int, float]) -> 'Point':
        if not isinstance(divisor, Real):
            return NotImplemented
        return self.divide(divisor)

    def distance_squared(self, other: 'Point') -> float:
        """Sum of squared component differences (no square root)."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_color(self, sink: Optional['ColorSink'] = None):
        """
        Map back to a color: x -> red, y -> green, z -> blue, opaque alpha.

        Args:
            sink: Optional ColorSink producing a platform color value.
                  If None, an (r, g, b, a) tuple of floats is returned.
        """
        if sink is None:
            return (self.x, self.y, self.z, 1.0)
        return sink.to_color(self.x, self.y, self.z)


def _rgb_components(color) -> Tuple[float, float, float]:
    """Extract (r, g, b) floats from a color sequence or raise InvalidColorSample."""
    if isinstance(color, (str, bytes)):
        raise InvalidColorSample(f"expected an (r, g, b[, a]) sequence, got {color!r}")
    try:
        n_components = len(color)
    except TypeError as exc:
        raise InvalidColorSample(f"expected an (r, g, b[, a]) sequence, got {color!r}") from exc
    if n_components not in (3, 4):
        raise InvalidColorSample(f"expected 3 or 4 components, got {n_components}")
    try:
        return float(color[0]), float(color[1]), float(color[2])
    except (TypeError, ValueError) as exc:
        raise InvalidColorSample(f"non-numeric component in {color!r}") from exc
