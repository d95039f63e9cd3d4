"""
Plottable capability.

Anything that exposes read-only `x` and `y` coordinates can be plotted and
searched. `Point` satisfies the protocol structurally; raw coordinate pairs
(a 2-tuple, 2-list or a numpy array of shape (2,)) are accepted through
`as_xy`.
"""
from __future__ import annotations
from typing import NamedTuple, Optional, Protocol, Tuple, Union, runtime_checkable
import numbers
import numpy as np


@runtime_checkable
class Plottable(Protocol):
    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


class CoordinatePair(NamedTuple):
    """A plain (x, y) tuple that is also Plottable."""
    x: float
    y: float


PlottableLike = Union[Plottable, Tuple[float, float]]


def as_xy(item: PlottableLike) -> Tuple[float, float]:
    """
    Project an item onto its (x, y) coordinates.

    Args:
        item: A Plottable object or a length-2 coordinate sequence.

    Returns:
        The coordinates as a tuple of two floats.

    Raises:
        TypeError: If the item is neither Plottable nor a coordinate pair, or
            if either coordinate is not a real number.
    """
    coords: Optional[Tuple[object, object]] = None
    if isinstance(item, Plottable):
        coords = (item.x, item.y)
    elif isinstance(item, (tuple, list, np.ndarray)) and len(item) == 2:
        coords = (item[0], item[1])

    # Strings are rejected here rather than parsed by float()
    if coords is None or not all(isinstance(v, numbers.Real) for v in coords):
        raise TypeError(f"Expected a Plottable or an (x, y) pair of numbers, got {type(item).__name__}.")
    return float(coords[0]), float(coords[1])


def squared_norm(item: PlottableLike) -> float:
    x, y = as_xy(item)
    return x * x + y * y
