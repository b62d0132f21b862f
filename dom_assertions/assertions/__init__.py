"""
DOM assertions package.
Provides element resolution, state inspection, value matching and the
assertion engine.
"""

from .dom import DOMAssertions, ALIASES
from .inspection import collapse_whitespace, describe_element, inspect_element, build_state
from .matching import ValueMatcher, MatchMode
from .resolution import TargetResolver, parse_target
from .models import (
    ANY,
    AnySpec,
    AssertionErrorCode,
    AssertionResult,
    ElementState,
    ElementTarget,
    ExistsOptions,
    InvalidExpectationError,
    InvalidTargetError,
    LiteralSpec,
    NULL_TARGET,
    NullTarget,
    PatternSpec,
    Resolution,
    SelectorTarget,
    UnsupportedElementError,
    to_match_spec,
)

__all__ = [
    'DOMAssertions',
    'ALIASES',
    'collapse_whitespace',
    'describe_element',
    'inspect_element',
    'build_state',
    'ValueMatcher',
    'MatchMode',
    'TargetResolver',
    'parse_target',
    'ANY',
    'AnySpec',
    'AssertionErrorCode',
    'AssertionResult',
    'ElementState',
    'ElementTarget',
    'ExistsOptions',
    'InvalidExpectationError',
    'InvalidTargetError',
    'LiteralSpec',
    'NULL_TARGET',
    'NullTarget',
    'PatternSpec',
    'Resolution',
    'SelectorTarget',
    'UnsupportedElementError',
    'to_match_spec',
]
