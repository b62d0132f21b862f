"""
Resolution module for DOM assertions.
Turns a caller supplied target into concrete elements.
"""

import logging
from typing import Any, Optional, Union

from playwright.sync_api import ElementHandle, Page

from .models import (
    Target,
    SelectorTarget,
    ElementTarget,
    NullTarget,
    NULL_TARGET,
    Resolution,
    InvalidTargetError,
)

logger = logging.getLogger("dom_assertions.assertions.resolution")

Root = Union[Page, ElementHandle]


def parse_target(raw: Any) -> Target:
    """Classify a raw target.

    Args:
        raw: A non-empty selector string, an ElementHandle or None

    Returns:
        Target: The tagged target

    Raises:
        InvalidTargetError: If `raw` is of any other type or an empty string
    """
    if isinstance(raw, (SelectorTarget, ElementTarget, NullTarget)):
        return raw
    if raw is None:
        return NULL_TARGET
    if isinstance(raw, str):
        if not raw.strip():
            raise InvalidTargetError("Selector targets must be non-empty strings")
        return SelectorTarget(raw)
    if isinstance(raw, ElementHandle):
        return ElementTarget(raw)
    raise InvalidTargetError(f"Unexpected target type {type(raw).__name__}: {raw!r}")


class TargetResolver:
    """Resolves targets under a root page or element"""

    def __init__(self, root: Optional[Root] = None):
        self.root = root

    def resolve_all(self, target: Target) -> Resolution:
        """Resolve every element a target refers to.

        A selector that matches nothing is an empty resolution, not an error.
        """
        if isinstance(target, NullTarget):
            return Resolution(target)
        if isinstance(target, ElementTarget):
            return Resolution(target, (target.element,))
        if isinstance(target, SelectorTarget):
            if self.root is None:
                raise InvalidTargetError(
                    f"A root page or element is required to resolve selector {target.selector!r}"
                )
            elements = tuple(self.root.query_selector_all(target.selector))
            logger.debug(f"Selector {target.selector!r} matched {len(elements)} element(s)")
            return Resolution(target, elements)
        raise InvalidTargetError(f"Unexpected target type {type(target).__name__}: {target!r}")

    def resolve(self, target: Target) -> Optional[ElementHandle]:
        """Resolve the single element a target refers to, or None if not found."""
        return self.resolve_all(target).first
