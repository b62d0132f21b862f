"""
Utility functions for checking element visibility.
"""

from typing import Iterable, Mapping, Optional


def has_area(width: Optional[float], height: Optional[float]) -> bool:
    """Check whether a box has a non-zero width and height."""
    return bool(width) and bool(height)


def is_visible(
    connected: bool,
    offset_width: Optional[float],
    offset_height: Optional[float],
    rects: Iterable[Mapping[str, float]] = (),
) -> bool:
    """Check if an element is rendered on the page.

    An element is visible when its layout box has a non-zero size, or when any
    of its client rects does (inline elements split over several lines have no
    offset box of their own). Visibility says nothing about the viewport.

    Args:
        connected: Whether the element is attached to its document
        offset_width: The element's offsetWidth
        offset_height: The element's offsetHeight
        rects: The element's client rects, each with `width` and `height`

    Returns:
        bool: True if element is visible, False otherwise
    """
    if not connected:
        return False
    if has_area(offset_width, offset_height):
        return True
    return any(has_area(rect.get("width"), rect.get("height")) for rect in rects)
