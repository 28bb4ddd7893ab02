"""Straight line segments between two distinct points."""

from __future__ import annotations

from cadgeom.vector import Point, Vector3D


class Line:
    """A segment from ``vertex1`` to ``vertex2``; equality ignores orientation."""

    __slots__ = ("_vertex1", "_vertex2", "_direction")

    def __init__(self, vertex1: Point, vertex2: Point) -> None:
        if vertex1 == vertex2:
            raise ValueError("Cannot create line from identical points")
        self._vertex1 = vertex1
        self._vertex2 = vertex2
        self._direction = Vector3D(
            vertex2.x - vertex1.x,
            vertex2.y - vertex1.y,
            vertex2.z - vertex1.z,
        )

    @property
    def vertex1(self) -> Point:
        """Start point of the segment."""
        return self._vertex1

    @property
    def vertex2(self) -> Point:
        """End point of the segment."""
        return self._vertex2

    @property
    def direction(self) -> Vector3D:
        """Vector from ``vertex1`` to ``vertex2``."""
        return self._direction

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return (self._vertex1 == other._vertex1 and self._vertex2 == other._vertex2) or (
            self._vertex1 == other._vertex2 and self._vertex2 == other._vertex1
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Line({self._vertex1!r}, {self._vertex2!r})"