"""
Matching module for DOM assertions.
Compares actual values read from the DOM against literal, pattern or
wildcard expectations.
"""

import json
import logging
import re
from enum import Enum, auto
from typing import Optional

from .models import MatchSpec, LiteralSpec, PatternSpec, AnySpec, InvalidExpectationError

logger = logging.getLogger("dom_assertions.assertions")

REGEX_FLAG_LETTERS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


class MatchMode(Enum):
    """Modes of value matching"""
    EXACT = auto()
    PATTERN = auto()
    ANY = auto()
    CONTAINS = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ValueMatcher:
    """Stateless matching of actual values against expectations"""

    @staticmethod
    def mode_of(spec: MatchSpec) -> MatchMode:
        if isinstance(spec, LiteralSpec):
            return MatchMode.EXACT
        if isinstance(spec, PatternSpec):
            return MatchMode.PATTERN
        if isinstance(spec, AnySpec):
            return MatchMode.ANY
        raise InvalidExpectationError(f"Unknown match specification: {spec!r}")

    @staticmethod
    def match(actual: Optional[str], spec: MatchSpec, blank_is_absent: bool = False) -> bool:
        """Match an actual value against a MatchSpec.

        Args:
            actual: The value read from the DOM, or None when absent
            spec: The expectation
            blank_is_absent: Treat an empty string as absent for ANY

        Returns:
            bool: Whether the value satisfies the expectation
        """
        mode = ValueMatcher.mode_of(spec)
        logger.debug(f"Matching value: mode={mode}, actual={actual!r}, expected={ValueMatcher.describe(spec)}")

        if actual is None:
            return False
        if mode is MatchMode.EXACT:
            return actual == spec.value
        if mode is MatchMode.PATTERN:
            return spec.regex.search(actual) is not None
        # ANY
        return not (blank_is_absent and actual == "")

    @staticmethod
    def contains(actual: Optional[str], substring: str) -> bool:
        """Check verbatim substring containment; patterns are not accepted."""
        if not isinstance(substring, str):
            raise InvalidExpectationError(
                f"Expected a string to search for, got {type(substring).__name__}: {substring!r}"
            )
        logger.debug(f"Matching value: mode={MatchMode.CONTAINS}, actual={actual!r}, substring={substring!r}")
        return actual is not None and substring in actual

    @staticmethod
    def describe(spec: MatchSpec) -> str:
        """Describe an expectation for assertion messages."""
        if isinstance(spec, LiteralSpec):
            return json.dumps(spec.value, ensure_ascii=False)
        if isinstance(spec, PatternSpec):
            flags = "".join(letter for flag, letter in REGEX_FLAG_LETTERS if spec.regex.flags & flag)
            return f"/{spec.regex.pattern}/{flags}"
        return "<any>"
