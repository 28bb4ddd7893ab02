"""Intersection analysis for pairs of line segments."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from cadgeom.line import Line
from cadgeom.mathutils import is_zero
from cadgeom.vector import Point, Vector3D


class Axis(IntEnum):
    """Coordinate axes, valued by component index."""

    X = 0
    Y = 1
    Z = 2


class CrossAndDotCalculator:
    """Cross and dot products for a pair of lines.

    A and B are the vertices of the first line, C and D those of the second.
    """

    def __init__(
        self, line1: Line, line2: Line, do_cross: bool = True, do_dot: bool = False
    ) -> None:
        self.a_to_c: Vector3D = Vector3D.from_points(line1.vertex1, line2.vertex1)
        self.line1_cross_line2: Vector3D = Vector3D()
        self.a_to_c_cross_line1: Vector3D = Vector3D()
        self.a_to_c_cross_line2: Vector3D = Vector3D()
        self.dot: Optional[float] = None

        if do_cross:
            self.line1_cross_line2 = line1.direction.cross(line2.direction)
            self.a_to_c_cross_line1 = self.a_to_c.cross(line1.direction)
            self.a_to_c_cross_line2 = self.a_to_c.cross(line2.direction)
        if do_dot:
            self.dot = line1.direction.dot(line2.direction)


def make_line_pair_analysis(
    line1: Line, line2: Line, do_cross: bool = True, do_dot: bool = False
) -> CrossAndDotCalculator:
    """Compute the cross and dot data for two lines."""
    return CrossAndDotCalculator(line1, line2, do_cross, do_dot)


class IntersectionChecker:
    """Decides whether two segments meet; the point is computed on request."""

    def __init__(self, line1: Line, line2: Line, data: CrossAndDotCalculator) -> None:
        self._line1 = line1
        self._line2 = line2
        self._data = data
        self.param_line1: float = 0.0
        self.param_line2: float = 0.0
        self.intersects: bool = False
        self.intersection_point: Optional[Point] = None
        self._check_existence()

    @property
    def lines(self) -> tuple[Line, Line]:
        """The two lines under test."""
        return (self._line1, self._line2)

    def _calculate_parameters(self, axis: Axis) -> None:
        denominator = self._data.line1_cross_line2[axis]
        self.param_line1 = self._data.a_to_c_cross_line2[axis] / denominator
        self.param_line2 = self._data.a_to_c_cross_line1[axis] / denominator

    def _check_existence(self) -> None:
        data = self._data
        if data.line1_cross_line2.is_zero() and not data.a_to_c_cross_line1.is_zero():
            # parallel but not aligned
            self.intersects = False
            return

        if not is_zero(data.line1_cross_line2.dot(data.a_to_c)):
            # skew
            self.intersects = False
            return

        for axis in Axis:
            if not is_zero(data.line1_cross_line2[axis]):
                self._calculate_parameters(axis)
                break

        self.intersects = 0 <= self.param_line1 <= 1 and 0 <= self.param_line2 <= 1

    def calculate_intersection_point(self) -> None:
        """Store the intersection point if the lines intersect."""
        if not self.intersects:
            return
        start = self._line1.vertex1.to_vector()
        position = self._line1.direction * self.param_line1 + start
        self.intersection_point = Point(position.x, position.y, position.z)