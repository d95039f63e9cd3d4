"""
Geometric Primitives for 2D shapes.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A simple geometric point in the XY plane."""
    x: float
    y: float

    def __post_init__(self) -> None:
        # Frozen, so coordinates are normalised through object.__setattr__
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def origin(cls) -> Point:
        return cls(0.0, 0.0)

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle anchored at its top-left corner.
    Dimensions are taken as given; negative w or h yields a negative area.
    """
    top_left: Point
    w: float
    h: float

    def area(self) -> float:
        return self.w * self.h


@dataclass(frozen=True)
class Triangle:
    """A triangle defined by three vertices in any winding order."""
    a: Point
    b: Point
    c: Point

    def vertices(self) -> Tuple[Point, Point, Point]:
        return self.a, self.b, self.c

    def area(self) -> float:
        """
        Shoelace formula. The absolute value makes the result independent of
        the winding order; collinear vertices give 0.
        """
        a, b, c = self.a, self.b, self.c
        doubled = a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)
        return abs(doubled) * 0.5


# Union type for shape handling
Shape = Union[Circle, Rect, Triangle]
