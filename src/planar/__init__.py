"""
planar: 2D point and shape geometry plus generic extremal searches.
"""
from planar.model.geometry_primitives import Point, Circle, Rect, Triangle, Shape
from planar.model.plottable import Plottable, CoordinatePair, as_xy, squared_norm
from planar.model.search import furthest_from_origin, min_by_key
from planar.logging_config import setup_logging

__all__ = [
    "Point",
    "Circle",
    "Rect",
    "Triangle",
    "Shape",
    "Plottable",
    "CoordinatePair",
    "as_xy",
    "squared_norm",
    "furthest_from_origin",
    "min_by_key",
    "setup_logging",
]
