"""Hypothesis strategies for planar geometry types.

Coordinates are bounded so squared terms stay far from overflow and
rounding errors remain small against the tolerances used in tests.
"""

from hypothesis import strategies as st

from planar.model.geometry_primitives import Point, Triangle
from planar.model.plottable import CoordinatePair

coordinate = st.floats(
    min_value=-1e3,
    max_value=1e3,
    allow_nan=False,
    allow_infinity=False,
)

points = st.builds(Point, x=coordinate, y=coordinate)

coordinate_pairs = st.builds(CoordinatePair, x=coordinate, y=coordinate)

raw_pairs = st.tuples(coordinate, coordinate)

triangles = st.builds(Triangle, a=points, b=points, c=points)
