"""
Models module for DOM assertions.
Contains data models and types used across assertion modules.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union, FrozenSet, Tuple, Mapping
from enum import Enum
import re

from playwright.sync_api import ElementHandle
from pydantic import BaseModel, ConfigDict, Field


class InvalidTargetError(TypeError):
    """Raised when an assertion target cannot be resolved because of its type"""


class InvalidExpectationError(TypeError):
    """Raised when an expected value has an unsupported type"""


class UnsupportedElementError(TypeError):
    """Raised when a predicate is used on an element that lacks the inspected state"""


# Targets

@dataclass(frozen=True)
class SelectorTarget:
    """A CSS selector queried under the root element"""
    selector: str


@dataclass(frozen=True)
class ElementTarget:
    """An element handle used as-is"""
    element: ElementHandle


@dataclass(frozen=True)
class NullTarget:
    """An absent target, which never resolves to an element"""


NULL_TARGET = NullTarget()

Target = Union[SelectorTarget, ElementTarget, NullTarget]


@dataclass(frozen=True)
class Resolution:
    """All elements a target resolved to, in document order"""
    target: Target
    elements: Tuple[ElementHandle, ...] = ()

    @property
    def count(self) -> int:
        return len(self.elements)

    @property
    def found(self) -> bool:
        return bool(self.elements)

    @property
    def first(self) -> Optional[ElementHandle]:
        # Single-element predicates operate on the first match.
        return self.elements[0] if self.elements else None


# Expected values

@dataclass(frozen=True)
class LiteralSpec:
    """Matches a value that is exactly equal to `value`"""
    value: str


@dataclass(frozen=True)
class PatternSpec:
    """Matches a value the regular expression finds a match in"""
    regex: re.Pattern


@dataclass(frozen=True)
class AnySpec:
    """Matches any value that is present"""

    def __repr__(self) -> str:
        return "ANY"


ANY = AnySpec()

MatchSpec = Union[LiteralSpec, PatternSpec, AnySpec]


def to_match_spec(expected: Any) -> MatchSpec:
    """Build a MatchSpec from a caller supplied expected value.

    Args:
        expected: A string, a compiled regular expression, ``ANY``,
            ``{"any": True}`` or an existing MatchSpec

    Returns:
        MatchSpec: The normalized expectation

    Raises:
        InvalidExpectationError: If `expected` has any other shape
    """
    if isinstance(expected, (LiteralSpec, PatternSpec, AnySpec)):
        return expected
    if isinstance(expected, str):
        return LiteralSpec(expected)
    if isinstance(expected, re.Pattern):
        if not isinstance(expected.pattern, str):
            raise InvalidExpectationError("Regular expressions must be compiled from str, not bytes")
        return PatternSpec(expected)
    if isinstance(expected, Mapping) and dict(expected) == {"any": True}:
        return ANY
    raise InvalidExpectationError(
        f"Expected a string, a regular expression or ANY, got {type(expected).__name__}: {expected!r}"
    )


class ExistsOptions(BaseModel):
    """Options accepted by the count form of `exists`"""
    model_config = ConfigDict(extra="forbid", frozen=True)

    count: Optional[int] = Field(default=None, ge=0, strict=True)


# State and results

@dataclass(frozen=True)
class ElementState:
    """Snapshot of the observable state of one element"""
    tag_name: str
    connected: bool = True
    visible: bool = False
    checked: bool = False
    disabled: bool = False
    required: bool = False
    focused: bool = False
    attributes: Mapping[str, str] = field(default_factory=dict)
    classes: FrozenSet[str] = frozenset()
    text: str = ""
    value: str = ""

    def get_attribute(self, name: str) -> Optional[str]:
        """Return the attribute value, or None if the attribute is absent"""
        if name in self.attributes:
            return self.attributes[name]
        # HTML attribute names are case-insensitive and stored lower-cased
        return self.attributes.get(name.lower())


class AssertionErrorCode(str, Enum):
    """Standardized error codes for failed assertions"""
    ELEMENT_NOT_FOUND = "ELEMENT_NOT_FOUND"
    ELEMENT_FOUND = "ELEMENT_FOUND"
    COUNT_MISMATCH = "COUNT_MISMATCH"
    STATE_MISMATCH = "STATE_MISMATCH"
    ATTRIBUTE_MISMATCH = "ATTRIBUTE_MISMATCH"
    CLASS_MISMATCH = "CLASS_MISMATCH"
    TEXT_MISMATCH = "TEXT_MISMATCH"
    VALUE_MISMATCH = "VALUE_MISMATCH"
    STYLE_MISMATCH = "STYLE_MISMATCH"


@dataclass(frozen=True)
class AssertionResult:
    """Result of an assertion check"""
    passed: bool
    message: str
    actual_description: Optional[str] = None
    expected_description: Optional[str] = None
    error_code: Optional[AssertionErrorCode] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed": self.passed,
            "message": self.message,
            "actual": self.actual_description,
            "expected": self.expected_description,
            "error_code": self.error_code.value if self.error_code else None,
        }
