"""
DOM assertions module.
Resolves a target, inspects the element and reports one result per call.
"""

import json
import logging
from typing import Any, Mapping, Optional, Tuple

from .base import BaseAssertions
from .inspection import (
    DISABLEABLE_TAGS,
    collapse_whitespace,
    describe_element,
    inspect_element,
    read_style,
)
from .matching import ValueMatcher
from .models import (
    ANY,
    AnySpec,
    AssertionErrorCode,
    AssertionResult,
    ElementState,
    ElementTarget,
    ExistsOptions,
    InvalidExpectationError,
    LiteralSpec,
    NullTarget,
    PatternSpec,
    UnsupportedElementError,
    to_match_spec,
)
from .resolution import Root, TargetResolver, parse_target
from ..reporting.result_reporter import RaisingReporter

logger = logging.getLogger("dom_assertions.assertions")

UNKNOWN_TARGET = "<unknown>"
NOT_FOUND_TARGET = "<not found>"

# Alias name -> canonical method name
ALIASES = {
    "has_no_attribute": "does_not_have_attribute",
    "lacks_attribute": "does_not_have_attribute",
    "has_no_class": "does_not_have_class",
    "lacks_class": "does_not_have_class",
    "matches_text": "has_text",
    "contains_text": "includes_text",
    "has_text_containing": "includes_text",
    "does_not_contain_text": "does_not_include_text",
    "does_not_have_text_containing": "does_not_include_text",
    "lacks_value": "has_no_value",
}


def format_count(description: str, count: Optional[int]) -> str:
    """Describe how many elements matched a target."""
    if count is None:
        return f"Element {description} exists"
    if count == 0:
        return f"Element {description} does not exist"
    if count == 1:
        return f"Element {description} exists once"
    if count == 2:
        return f"Element {description} exists twice"
    return f"Element {description} exists {count} times"


def parse_exists_args(
    options: Any = None, message: Optional[str] = None, count: Optional[int] = None
) -> Tuple[ExistsOptions, Optional[str]]:
    """Normalize the overloaded arguments of `exists` into options and message.

    A string in the options position is the message. Mappings are validated
    by ExistsOptions, so unknown keys and invalid counts raise.
    """
    if isinstance(options, str):
        if message is not None:
            raise InvalidExpectationError("exists() got two messages")
        options, message = None, options

    if options is None:
        parsed = ExistsOptions()
    elif isinstance(options, ExistsOptions):
        parsed = options
    elif isinstance(options, Mapping):
        parsed = ExistsOptions.model_validate(dict(options))
    else:
        raise InvalidExpectationError(
            f"exists() options must be a mapping with a 'count' key, got {type(options).__name__}"
        )

    if count is not None:
        if parsed.count is not None:
            raise InvalidExpectationError("exists() got the count twice")
        parsed = ExistsOptions(count=count)
    return parsed, message


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise InvalidExpectationError(f"{what} must be a string, got {type(value).__name__}: {value!r}")
    return value


class DOMAssertions(BaseAssertions):
    """Assertions about the element(s) a target resolves to.

    Single-element assertions operate on the first element a selector
    matches; `exists` and `does_not_exist` count every match. Every method
    reports exactly one result and returns it.
    """

    def __init__(self, target: Any, root: Optional[Root] = None, reporter=None):
        if reporter is None:
            reporter = RaisingReporter()
        super().__init__(reporter)
        self.target = parse_target(target)
        self.resolver = TargetResolver(root)

    # Helpers

    def _description(self, state: Optional[ElementState] = None) -> str:
        if isinstance(self.target, NullTarget):
            return UNKNOWN_TARGET
        if isinstance(self.target, ElementTarget):
            return describe_element(state or inspect_element(self.target.element))
        return self.target.selector

    def _inspect_target(self) -> Optional[ElementState]:
        element = self.resolver.resolve(self.target)
        if element is None:
            return None
        return inspect_element(element)

    def _missing(self, message: Optional[str]) -> AssertionResult:
        description = self._description()
        return self._push_result(
            False,
            f"Element matching {description} does not exist",
            message,
            actual=format_count(description, 0),
            expected=format_count(description, None),
            error_code=AssertionErrorCode.ELEMENT_NOT_FOUND,
        )

    def _assert_flag(
        self,
        flag: str,
        wanted: bool,
        message: Optional[str],
        missing_passes: bool = False,
    ) -> AssertionResult:
        expected = flag if wanted else f"not {flag}"
        state = self._inspect_target()
        if state is None:
            if not missing_passes:
                return self._missing(message)
            description = self._description()
            return self._push_result(
                True, f"Element {description} is {expected}", message,
                actual="does not exist", expected=expected,
            )

        if flag == "disabled" and state.tag_name not in DISABLEABLE_TAGS:
            raise UnsupportedElementError(
                f"Element {self._description(state)} has no disabled state"
            )

        actual_flag = getattr(state, flag)
        return self._push_result(
            actual_flag is wanted,
            f"Element {self._description(state)} is {expected}",
            message,
            actual=flag if actual_flag else f"not {flag}",
            expected=expected,
            error_code=AssertionErrorCode.STATE_MISMATCH,
        )

    # Existence

    def exists(self, options: Any = None, message: Optional[str] = None, *, count: Optional[int] = None) -> AssertionResult:
        """Assert that the target matches at least one element, or exactly `count` elements.

        Args:
            options: Optional ``{"count": N}``; a string here is taken as the message
            message: Optional message
            count: Keyword form of ``{"count": N}``
        """
        parsed, message = parse_exists_args(options, message, count)
        resolution = self.resolver.resolve_all(self.target)
        description = NOT_FOUND_TARGET if isinstance(self.target, NullTarget) else self._description()
        logger.debug(f"Counting elements for {description}: {resolution.count} found, expected {parsed.count}")

        if parsed.count is None:
            expected = format_count(description, None)
            passed = resolution.found
            actual = expected if passed else format_count(description, 0)
            error_code = AssertionErrorCode.ELEMENT_NOT_FOUND
        else:
            expected = format_count(description, parsed.count)
            actual = format_count(description, resolution.count)
            passed = resolution.count == parsed.count
            error_code = AssertionErrorCode.COUNT_MISMATCH

        return self._push_result(passed, expected, message, actual, expected, error_code)

    def does_not_exist(self, message: Optional[str] = None) -> AssertionResult:
        """Assert that the target matches no element."""
        resolution = self.resolver.resolve_all(self.target)
        description = NOT_FOUND_TARGET if isinstance(self.target, NullTarget) else self._description()
        expected = format_count(description, 0)
        passed = not resolution.found
        actual = expected if passed else format_count(description, None)
        return self._push_result(
            passed, expected, message, actual, expected, AssertionErrorCode.ELEMENT_FOUND
        )

    # State

    def is_checked(self, message: Optional[str] = None) -> AssertionResult:
        return self._assert_flag("checked", True, message)

    def is_not_checked(self, message: Optional[str] = None) -> AssertionResult:
        return self._assert_flag("checked", False, message)

    def is_focused(self, message: Optional[str] = None) -> AssertionResult:
        return self._assert_flag("focused", True, message)

    def is_not_focused(self, message: Optional[str] = None) -> AssertionResult:
        return self._assert_flag("focused", False, message)

    def is_required(self, message: Optional[str] = None) -> AssertionResult:
        return self._assert_flag("required", True, message)

    def is_not_required(self, message: Optional[str] = None) -> AssertionResult:
        return self._assert_flag("required", False, message)

    def is_disabled(self, message: Optional[str] = None) -> AssertionResult:
        """Assert that a form control is disabled.

        Raises:
            UnsupportedElementError: If the element has no disabled state
        """
        return self._assert_flag("disabled", True, message)

    def is_not_disabled(self, message: Optional[str] = None) -> AssertionResult:
        return self._assert_flag("disabled", False, message)

    def is_visible(self, message: Optional[str] = None) -> AssertionResult:
        """Assert that the element exists and is rendered with a non-zero size.

        Visibility means the element is laid out on the page, not that it is
        inside the viewport.
        """
        return self._assert_flag("visible", True, message)

    def is_not_visible(self, message: Optional[str] = None) -> AssertionResult:
        """Assert that the element does not exist or is not rendered."""
        return self._assert_flag("visible", False, message, missing_passes=True)

    # Attributes and classes

    def has_attribute(self, name: str, value: Any = ANY, message: Optional[str] = None) -> AssertionResult:
        """Assert that the element has the attribute `name`, optionally matching `value`.

        Args:
            name: Attribute name
            value: A string, a compiled regular expression or ANY
            message: Optional message
        """
        _require_str(name, "Attribute name")
        spec = to_match_spec(value)
        state = self._inspect_target()
        if state is None:
            return self._missing(message)

        description = self._description(state)
        actual_value = state.get_attribute(name)
        passed = ValueMatcher.match(actual_value, spec)

        if isinstance(spec, AnySpec):
            expected = f'Element {description} has attribute "{name}"'
        elif isinstance(spec, PatternSpec):
            expected = f'Element {description} has attribute "{name}" with value matching {ValueMatcher.describe(spec)}'
        else:
            expected = f'Element {description} has attribute "{name}" with value {ValueMatcher.describe(spec)}'

        if actual_value is None:
            actual = f'Element {description} does not have attribute "{name}"'
        elif isinstance(spec, AnySpec):
            actual = expected
        else:
            actual = f'Element {description} has attribute "{name}" with value {json.dumps(actual_value, ensure_ascii=False)}'

        return self._push_result(
            passed, expected, message, actual, expected, AssertionErrorCode.ATTRIBUTE_MISMATCH
        )

    def does_not_have_attribute(self, name: str, message: Optional[str] = None) -> AssertionResult:
        """Assert that the element has no attribute `name`.

        **Aliases:** `has_no_attribute`, `lacks_attribute`
        """
        _require_str(name, "Attribute name")
        state = self._inspect_target()
        if state is None:
            return self._missing(message)

        description = self._description(state)
        actual_value = state.get_attribute(name)
        expected = f'Element {description} does not have attribute "{name}"'
        passed = actual_value is None
        actual = expected if passed else (
            f'Element {description} has attribute "{name}" with value {json.dumps(actual_value, ensure_ascii=False)}'
        )
        return self._push_result(
            passed, expected, message, actual, expected, AssertionErrorCode.ATTRIBUTE_MISMATCH
        )

    def has_class(self, expected: str, message: Optional[str] = None) -> AssertionResult:
        _require_str(expected, "CSS class")
        state = self._inspect_target()
        if state is None:
            return self._missing(message)

        return self._push_result(
            expected in state.classes,
            f'Element {self._description(state)} has CSS class "{expected}"',
            message,
            actual=state.attributes.get("class", ""),
            expected=expected,
            error_code=AssertionErrorCode.CLASS_MISMATCH,
        )

    def does_not_have_class(self, expected: str, message: Optional[str] = None) -> AssertionResult:
        """Assert that the element does not have the CSS class `expected`.

        **Aliases:** `has_no_class`, `lacks_class`
        """
        _require_str(expected, "CSS class")
        state = self._inspect_target()
        if state is None:
            return self._missing(message)

        return self._push_result(
            expected not in state.classes,
            f'Element {self._description(state)} does not have CSS class "{expected}"',
            message,
            actual=state.attributes.get("class", ""),
            expected=f"not: {expected}",
            error_code=AssertionErrorCode.CLASS_MISMATCH,
        )

    # Text

    def has_text(self, expected: Any, message: Optional[str] = None) -> AssertionResult:
        """Assert that the element's text matches `expected`.

        The element's ``textContent`` has its whitespace collapsed and trimmed
        before matching; a string `expected` is collapsed the same way.

        **Aliases:** `matches_text`

        Example::

            # <h2 id="title">
            #   Welcome to <b>QUnit</b>
            # </h2>
            dom("#title", page).has_text("Welcome to QUnit")
        """
        spec = to_match_spec(expected)
        if isinstance(spec, LiteralSpec):
            spec = LiteralSpec(collapse_whitespace(spec.value))
        state = self._inspect_target()
        if state is None:
            return self._missing(message)

        description = self._description(state)
        passed = ValueMatcher.match(state.text, spec, blank_is_absent=True)

        if isinstance(spec, AnySpec):
            expected_text = f"Element {description} has a text"
            actual = expected_text if passed else f"Element {description} has no text"
            generated = expected_text
        elif isinstance(spec, PatternSpec):
            expected_text = ValueMatcher.describe(spec)
            actual = state.text
            generated = f"Element {description} has text matching {expected_text}"
        else:
            expected_text = spec.value
            actual = state.text
            generated = f"Element {description} has text {ValueMatcher.describe(spec)}"

        return self._push_result(
            passed, generated, message, actual, expected_text, AssertionErrorCode.TEXT_MISMATCH
        )

    def has_any_text(self, message: Optional[str] = None) -> AssertionResult:
        return self.has_text(ANY, message)

    def includes_text(self, text: str, message: Optional[str] = None) -> AssertionResult:
        """Assert that the element's normalized text contains `text` verbatim.

        **Aliases:** `contains_text`, `has_text_containing`
        """
        expected = _require_str(text, "Text")
        state = self._inspect_target()
        if state is None:
            return self._missing(message)

        return self._push_result(
            ValueMatcher.contains(state.text, expected),
            f"Element {self._description(state)} has text containing {json.dumps(text, ensure_ascii=False)}",
            message,
            actual=state.text,
            expected=expected,
            error_code=AssertionErrorCode.TEXT_MISMATCH,
        )

    def does_not_include_text(self, text: str, message: Optional[str] = None) -> AssertionResult:
        """Assert that the element's normalized text does not contain `text` verbatim.

        **Aliases:** `does_not_contain_text`, `does_not_have_text_containing`
        """
        unexpected = _require_str(text, "Text")
        state = self._inspect_target()
        if state is None:
            return self._missing(message)

        description = self._description(state)
        passed = not ValueMatcher.contains(state.text, unexpected)
        expected = f"Element {description} does not include text {json.dumps(text, ensure_ascii=False)}"
        actual = expected if passed else f"Element {description} includes text {json.dumps(text, ensure_ascii=False)}"
        return self._push_result(
            passed, expected, message, actual, expected, AssertionErrorCode.TEXT_MISMATCH
        )

    # Values

    def has_value(self, expected: Any = ANY, message: Optional[str] = None) -> AssertionResult:
        """Assert that the element's ``value`` matches `expected`.

        Without `expected` the assertion fails for an empty value.
        """
        spec = to_match_spec(expected)
        state = self._inspect_target()
        if state is None:
            return self._missing(message)

        description = self._description(state)
        passed = ValueMatcher.match(state.value, spec, blank_is_absent=True)

        if isinstance(spec, AnySpec):
            expected_value = f"Element {description} has a value"
            actual = expected_value if passed else f"Element {description} has no value"
            generated = expected_value
        elif isinstance(spec, PatternSpec):
            expected_value = ValueMatcher.describe(spec)
            actual = state.value
            generated = f"Element {description} has value matching {expected_value}"
        else:
            expected_value = spec.value
            actual = state.value
            generated = f"Element {description} has value {ValueMatcher.describe(spec)}"

        return self._push_result(
            passed, generated, message, actual, expected_value, AssertionErrorCode.VALUE_MISMATCH
        )

    def has_any_value(self, message: Optional[str] = None) -> AssertionResult:
        return self.has_value(ANY, message)

    def has_no_value(self, message: Optional[str] = None) -> AssertionResult:
        """Assert that the element's ``value`` is empty.

        **Aliases:** `lacks_value`
        """
        state = self._inspect_target()
        if state is None:
            return self._missing(message)

        description = self._description(state)
        expected = f"Element {description} has no value"
        passed = state.value == ""
        actual = expected if passed else f"Element {description} has value {json.dumps(state.value, ensure_ascii=False)}"
        return self._push_result(
            passed, expected, message, actual, expected, AssertionErrorCode.VALUE_MISMATCH
        )

    # Style

    def has_style(self, name: str, value: str, message: Optional[str] = None) -> AssertionResult:
        """Assert that the computed style property `name` equals `value`.

        Example::

            dom(".progress-bar", page).has_style("backgroundColor", "rgb(248, 183, 21)")
        """
        _require_str(name, "Style property")
        _require_str(value, "Style value")
        element = self.resolver.resolve(self.target)
        if element is None:
            return self._missing(message)

        actual_value = read_style(element, name)
        return self._push_result(
            ValueMatcher.match(actual_value, LiteralSpec(value)),
            f'Element {self._description()} has style "{name}: {value}"',
            message,
            actual=f"{name}: {actual_value}",
            expected=f"{name}: {value}",
            error_code=AssertionErrorCode.STYLE_MISMATCH,
        )


for _alias, _canonical in ALIASES.items():
    setattr(DOMAssertions, _alias, getattr(DOMAssertions, _canonical))
