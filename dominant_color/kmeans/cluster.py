"""
Cluster - a center plus the points currently assigned to it.
"""

from typing import List

from .point import Point


class Cluster:
    """
    Mutable cluster owned by a single clustering run.

    The center is always one of the original sample points: after each
    assignment pass it snaps to the member nearest the members' mean
    (medoid-snap), which keeps centers inside the sampled color gamut.

    Attributes:
        center: Current representative point
        members: Points assigned in the latest assignment pass
    """

    def __init__(self, center: Point):
        self.center = center
        self.members: List[Point] = []

    def __len__(self) -> int:
        return len(self.members)

    def __repr__(self) -> str:
        return f"Cluster(center={self.center!r}, size={len(self.members)})"

    @property
    def size(self) -> int:
        """Number of members."""
        return len(self.members)

    def clear(self):
        self.members.clear()

    def add(self, point: Point):
        self.members.append(point)

    def ideal_center(self) -> Point:
        """
        Arithmetic mean of the members.

        Returns:
            mean: Mean point, or the zero point if the cluster is empty
        """
        if not self.members:
            return Point.zero()
        return sum(self.members, Point.zero()) / len(self.members)

    def update_center(self) -> float:
        """
        Snap the center to the member closest to the members' mean.

        An empty cluster keeps its previous center.

        Returns:
            movement: Squared distance between the old and new center
        """
        if not self.members:
            return 0.0

        old_center = self.center
        mean = self.ideal_center()
        # min() keeps the first of several equally close members
        self.center = min(self.members, key=mean.distance_squared)
        return old_center.distance_squared(self.center)
