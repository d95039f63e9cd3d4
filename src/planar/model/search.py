"""
Extremal searches over ordered sequences.

Both functions make a single pass, never mutate the input and return the
element object itself rather than a copy.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Optional, Sequence, TypeVar

from planar.model.plottable import PlottableLike, squared_norm

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P", bound=PlottableLike)


def furthest_from_origin(items: Sequence[P]) -> Optional[P]:
    """
    Return the item with the largest squared distance from the origin.

    Ties go to the last tied item in iteration order. An item whose squared
    distance is NaN never replaces the running maximum.

    Args:
        items: Plottable items or (x, y) pairs.

    Returns:
        The furthest item, or None if `items` is empty.
    """
    best: Optional[P] = None
    best_index = -1
    best_dist = 0.0

    for index, item in enumerate(items):
        dist = squared_norm(item)
        if best_index < 0 or dist >= best_dist:
            best, best_index, best_dist = item, index, dist

    if best_index < 0:
        logger.debug("furthest_from_origin called with an empty sequence.")
    else:
        logger.debug(f"Furthest item at index {best_index} (squared distance {best_dist}).")
    return best


def min_by_key(items: Sequence[T], key_fn: Callable[[T], Any]) -> Optional[T]:
    """
    Return the first item whose key is minimal.

    `key_fn` is called exactly once per item and must return mutually
    orderable values. A later item replaces the running minimum only if its
    key is strictly smaller, so the first of several equal minima wins.

    Args:
        items: The items to search.
        key_fn: Maps an item to its comparison key.

    Returns:
        The minimising item, or None if `items` is empty.
    """
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        logger.debug("min_by_key called with an empty sequence.")
        return None

    best_key = key_fn(best)
    best_index = 0
    for index, item in enumerate(iterator, start=1):
        key = key_fn(item)
        if key < best_key:
            best, best_index, best_key = item, index, key

    logger.debug(f"Minimum item at index {best_index} (key {best_key!r}).")
    return best
