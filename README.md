# cadgeom

Small, dependency-free 3D geometry primitives with CAD-style tolerances.

## Modules

### `cadgeom.mathutils`

Tolerances and scalar comparisons:

- `LINEAR` (1e-7), `ANGULAR` (1e-12) and `EPSILON` (machine epsilon).
- `is_positive(a, epsilon=EPSILON)`: `a > epsilon`.
- `is_negative(a, epsilon=EPSILON)`: `a < -epsilon`.
- `is_zero(a, epsilon=EPSILON)`: `abs(a) < epsilon`.
- `is_equal(a, b, epsilon=EPSILON)`: `abs(b - a) <= epsilon`.
- `is_linear_equal(a, b, epsilon=LINEAR)` and
  `is_angular_equal(a, b, epsilon=ANGULAR)`.
- `coords_equal(first, second)`: compares `x`, `y` and `z` of two objects
  with the linear tolerance.
- `round_to(value, precision=3)`: adds one half at the last place and
  truncates toward zero. A negative `precision` raises `ValueError`.

### `cadgeom.vector`

- `Point(x=0.0, y=0.0, z=0.0)`: immutable. Supports `+` and `-` between
  points and `to_vector()`. Equality uses the linear tolerance.
- `Vector3D(x=0.0, y=0.0, z=0.0)`: immutable.
  - `Vector3D.from_points(p1, p2)` builds the vector from `p1` to `p2`. It
    raises `ValueError` if the points are equal.
  - The `modulus` property gives the length. The `is_unit` property is true
    when the length is 1 within machine epsilon.
  - Indexing with `0`, `1` and `2` works, and any other index raises
    `IndexError`. Iterating yields the three components.
  - Supports `+`, `-`, `*` by a number (either side) and `/` by a number.
    Dividing by zero raises `ZeroDivisionError`.
  - `dot`, `cross`, `normalized()` and `is_zero()`. `normalized()` raises
    `ValueError` for a zero vector.
  - `is_parallel` and `is_antiparallel` raise `ValueError` if either vector
    is zero.
  - Equality uses the linear tolerance. `str()` gives
    `vector coordinates are: (x, y, z)`.

### `cadgeom.line`

`Line(vertex1, vertex2)` is a segment between two distinct points.
Identical points raise `ValueError`. It exposes `vertex1`, `vertex2` and
`direction`, the vector from `vertex1` to `vertex2`. Two lines compare equal
in either vertex order.

### `cadgeom.plane`

`Plane(point, direction)` stores `point` and a unit `normal`. A zero
direction raises `ValueError`. It provides these operations:

- `signed_distance(p)`: positive on the side the normal points to.
- `distance(p)`.
- `projection(p)`.
- `is_point_on_same_side(p)`: true only strictly on the positive side.

Two planes are equal when their normals are parallel and the second plane's
point lies in the first plane.

`signed_distance`, `distance`, `projection` and `is_point_on_same_side`
raise `ValueError` when the point given coincides with the plane's own
point. Comparing two planes built through the same point raises
`ValueError` as well.

### `cadgeom.intersection`

- `make_line_pair_analysis(line1, line2, do_cross=True, do_dot=False)`
  returns a `CrossAndDotCalculator`. The calculator has these attributes:
  - `a_to_c`: the vector between the two start points.
  - `line1_cross_line2`, `a_to_c_cross_line1` and `a_to_c_cross_line2`,
    filled when `do_cross` is set.
  - `dot`: the dot product of the two directions when `do_dot` is set,
    otherwise `None`.

  The start points of the two lines must differ, or `ValueError` is raised.
- `IntersectionChecker(line1, line2, data)` decides on construction whether
  the segments meet and records the answer in `intersects`.
  `calculate_intersection_point()` then fills `intersection_point`, which
  stays `None` when there is no intersection. The segment parameters are in
  `param_line1` and `param_line2`, and `lines` returns both lines.
- `Axis` is an `IntEnum` with `X`, `Y` and `Z`.

## Installation

```
pip install .
```

## Example

```python
from cadgeom.vector import Point, Vector3D
from cadgeom.line import Line
from cadgeom.plane import Plane
from cadgeom.intersection import make_line_pair_analysis, IntersectionChecker

line1 = Line(Point(0, 0, 0), Point(2, 0, 0))
line2 = Line(Point(1, -1, 0), Point(1, 1, 0))

checker = IntersectionChecker(line1, line2, make_line_pair_analysis(line1, line2))
assert checker.intersects
checker.calculate_intersection_point()
assert checker.intersection_point == Point(1, 0, 0)

plane = Plane(Point(0, 0, 0), Vector3D(0, 0, 1))
assert plane.signed_distance(Point(2, 3, 4)) == 4
assert plane.projection(Point(3, 4, 7)) == Point(3, 4, 0)
```

## What it does not do

This is a library only. It has no command-line tool and no file input or
output. Intersection works on finite segments and reports only whether they
meet and, when they do, one point. It does not classify lines as skew,
parallel, coincident or collinear. It does not return the overlapping part of
collinear segments.

## Running the tests

```
pip install .[test]
pytest
```