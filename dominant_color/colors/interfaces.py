"""
Narrow boundary between the clustering core and whatever produces or
displays colors. The core depends only on these two interfaces, never on an
imaging or rendering library.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Tuple

from ..kmeans.point import Point


class ColorSource(ABC):
    """
    Produces normalized (r, g, b) component triples, each in [0, 1].
    """

    @abstractmethod
    def components(self) -> Iterable[Tuple[float, float, float]]:
        """
        Yield one (r, g, b) triple per color sample.

        Returns:
            components: Iterable of normalized channel triples
        """
        pass

    def points(self) -> List[Point]:
        """Color samples as clustering points."""
        return [Point(r, g, b) for r, g, b in self.components()]


class ColorSink(ABC):
    """
    Turns a normalized (r, g, b) triple into a platform color value.
    """

    @abstractmethod
    def to_color(self, r: float, g: float, b: float):
        """
        Args:
            r, g, b: Channel values in [0, 1]

        Returns:
            color: Color value in the sink's representation
        """
        pass
