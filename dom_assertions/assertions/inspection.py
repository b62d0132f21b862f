"""
Inspection module for DOM assertions.
Reads the observable state of an element into an ElementState snapshot.
"""

import json
import logging
import re
from typing import Any, Dict

from playwright.sync_api import ElementHandle

from .models import ElementState
from ..utils.visibility_utils import is_visible

logger = logging.getLogger("dom_assertions.assertions.inspection")

WHITESPACE_RUN = re.compile(r"\s+")

# Tags whose elements expose a `disabled` property
DISABLEABLE_TAGS = frozenset({"button", "fieldset", "input", "option", "select", "textarea"})

ELEMENT_STATE_SCRIPT = """
(element) => {
  const doc = element.ownerDocument;
  const attributes = {};
  for (const attr of Array.from(element.attributes || [])) {
    attributes[attr.name] = attr.value;
  }
  const rects = Array.from(element.getClientRects()).map((rect) => ({
    width: rect.width,
    height: rect.height,
  }));
  const value = element.value;
  return {
    tagName: (element.tagName || '').toLowerCase(),
    connected: element.isConnected,
    offsetWidth: element.offsetWidth || 0,
    offsetHeight: element.offsetHeight || 0,
    rects,
    checked: element.checked === true,
    disabled: element.disabled === true,
    required: element.required === true,
    focused: !!doc && doc.activeElement === element,
    attributes,
    classes: Array.from(element.classList || []),
    textContent: element.textContent || '',
    value: value === undefined || value === null ? '' : String(value),
  };
}
"""

STYLE_SCRIPT = """
(element, name) => {
  const style = element.ownerDocument.defaultView.getComputedStyle(element);
  if (name in style) {
    return String(style[name]);
  }
  return style.getPropertyValue(name);
}
"""


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace into one space and trim both ends."""
    if not text:
        return ""
    return WHITESPACE_RUN.sub(" ", text).strip()


def build_state(snapshot: Dict[str, Any]) -> ElementState:
    """Build an ElementState from the raw snapshot returned by the page.

    Args:
        snapshot: Result of evaluating ELEMENT_STATE_SCRIPT

    Returns:
        ElementState: Normalized, read-only state
    """
    connected = bool(snapshot.get("connected", False))
    return ElementState(
        tag_name=snapshot.get("tagName", ""),
        connected=connected,
        visible=is_visible(
            connected,
            snapshot.get("offsetWidth"),
            snapshot.get("offsetHeight"),
            snapshot.get("rects") or (),
        ),
        checked=bool(snapshot.get("checked", False)),
        disabled=bool(snapshot.get("disabled", False)),
        required=bool(snapshot.get("required", False)),
        focused=bool(snapshot.get("focused", False)),
        attributes=dict(snapshot.get("attributes") or {}),
        classes=frozenset(snapshot.get("classes") or ()),
        text=collapse_whitespace(snapshot.get("textContent", "")),
        value=snapshot.get("value") or "",
    )


def inspect_element(element: ElementHandle) -> ElementState:
    """Read a fresh state snapshot of `element`."""
    snapshot = element.evaluate(ELEMENT_STATE_SCRIPT)
    logger.debug(f"Element snapshot: {snapshot}")
    return build_state(snapshot)


def read_style(element: ElementHandle, name: str) -> str:
    """Read a computed style property by camelCase or kebab-case name."""
    value = element.evaluate(STYLE_SCRIPT, name)
    return "" if value is None else str(value)


def describe_element(state: ElementState) -> str:
    """Render an element as `tag#id.class[attr="value"]` for messages."""
    description = state.tag_name
    element_id = state.attributes.get("id")
    if element_id:
        description += f"#{element_id}"
    class_name = state.attributes.get("class", "").strip()
    if class_name:
        description += "." + WHITESPACE_RUN.sub(".", class_name)
    for name, value in state.attributes.items():
        if name in ("id", "class"):
            continue
        description += f"[{name}={json.dumps(value, ensure_ascii=False)}]" if value else f"[{name}]"
    return description
