"""Planes defined by a point and a normal direction."""

from __future__ import annotations

from cadgeom.mathutils import is_zero
from cadgeom.vector import Point, Vector3D


class Plane:
    """An infinite plane through ``point`` with unit ``normal``."""

    __slots__ = ("_point", "_normal")

    def __init__(self, point: Point, direction: Vector3D) -> None:
        self._point = point
        self._normal = direction.normalized()

    @property
    def point(self) -> Point:
        """The point the plane was built through."""
        return self._point

    @property
    def normal(self) -> Vector3D:
        """Unit normal of the plane."""
        return self._normal

    def signed_distance(self, point: Point) -> float:
        """Distance from the plane, positive on the side the normal points to.

        Raises ValueError if ``point`` coincides with the plane's own point.
        """
        return Vector3D.from_points(self._point, point).dot(self._normal)

    def distance(self, point: Point) -> float:
        """Unsigned distance from the plane."""
        return abs(self.signed_distance(point))

    def projection(self, point: Point) -> Point:
        """Orthogonal projection of ``point`` onto the plane."""
        moved = point.to_vector() - self._normal * self.signed_distance(point)
        return Point(moved.x, moved.y, moved.z)

    def is_point_on_same_side(self, point: Point) -> bool:
        """True if ``point`` lies strictly on the side the normal points to."""
        signed = self.signed_distance(point)
        return not is_zero(signed) and signed > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return self._normal.is_parallel(other._normal) and is_zero(
            Vector3D.from_points(self._point, other._point).dot(self._normal)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Plane({self._point!r}, {self._normal!r})"