"""
Base module for DOM assertions.
Contains the result plumbing shared by every assertion.
"""

import logging
from typing import Optional, TYPE_CHECKING

from .models import AssertionResult, AssertionErrorCode

if TYPE_CHECKING:
    from ..reporting.result_reporter import ResultReporter

logger = logging.getLogger("dom_assertions.assertions")


def merge_message(custom: Optional[str], generated: str) -> str:
    """Combine a caller supplied message with the generated one."""
    if custom:
        return f"{custom}: {generated}"
    return generated


class BaseAssertions:
    """Base class for assertions with common functionality"""

    def __init__(self, reporter: "ResultReporter"):
        self.reporter = reporter

    def _push_result(
        self,
        passed: bool,
        generated_message: str,
        custom_message: Optional[str] = None,
        actual: Optional[str] = None,
        expected: Optional[str] = None,
        error_code: Optional[AssertionErrorCode] = None,
    ) -> AssertionResult:
        """Build a result, hand it to the reporter and return it.

        Args:
            passed: Whether the assertion held
            generated_message: Message describing the assertion
            custom_message: Optional caller supplied message
            actual: Description of the actual state
            expected: Description of the expected state
            error_code: Code recorded on failure

        Returns:
            AssertionResult: The reported result
        """
        result = AssertionResult(
            passed=passed,
            message=merge_message(custom_message, generated_message),
            actual_description=actual,
            expected_description=expected,
            error_code=None if passed else error_code,
        )
        if result.passed:
            logger.info(f"✅ {result.message}")
        else:
            logger.warning(f"⚠️ {result.message} (expected: {expected}, actual: {actual})")
        self.reporter.push_result(result)
        return result
