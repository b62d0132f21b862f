"""
DOM assertions for Playwright based browser tests.
"""

from typing import Any, Optional

from .assertions import (
    ANY,
    AssertionResult,
    DOMAssertions,
    InvalidExpectationError,
    InvalidTargetError,
    UnsupportedElementError,
)
from .assertions.resolution import Root
from .reporting.result_reporter import (
    DomAssertionFailure,
    RaisingReporter,
    ResultCollector,
    ResultReporter,
    SoftAssertionReporter,
)


def dom(target: Any, root: Optional[Root] = None, reporter: Optional[ResultReporter] = None) -> DOMAssertions:
    """Start assertions about `target`.

    Args:
        target: A CSS selector, an ElementHandle or None
        root: Page or element that selectors are queried under
        reporter: Result sink; failures raise DomAssertionFailure by default

    Raises:
        InvalidTargetError: If `target` has an unsupported type
    """
    return DOMAssertions(target, root, reporter)


__all__ = [
    'dom',
    'ANY',
    'AssertionResult',
    'DOMAssertions',
    'DomAssertionFailure',
    'InvalidExpectationError',
    'InvalidTargetError',
    'RaisingReporter',
    'ResultCollector',
    'ResultReporter',
    'SoftAssertionReporter',
    'UnsupportedElementError',
]
