"""
Runs the assertions against a real page. Skipped when no browser is installed.
"""

import re

import pytest

from dom_assertions import dom, DomAssertionFailure, ResultCollector

PAGE = """
<h2 id="title">
  Welcome to <b>QUnit</b>
</h2>
<form>
  <input id="name" class="username wide" type="text" required value="HSimpson">
  <input id="empty" type="text">
  <input id="agree" type="checkbox" checked>
  <button id="save" disabled>Save</button>
</form>
<div id="hidden" style="display: none">secret</div>
<p><span id="inline">inline text</span></p>
<ul id="choices">
  <li class="choice">One</li>
  <li class="choice">Two</li>
  <li class="choice">Three</li>
  <li class="choice">Four</li>
</ul>
<div class="progress-bar" style="background-color: rgb(248, 183, 21); width: 10px; height: 10px"></div>
"""


@pytest.fixture
def page(dom_page):
    dom_page.set_content(PAGE)
    return dom_page


def test_existence(page):
    dom("#title", page).exists()
    dom(".choice", page).exists({"count": 4})
    dom(".missing", page).does_not_exist()


def test_text(page):
    dom("#title", page).has_text("Welcome to QUnit")
    dom("#title", page).has_text(re.compile(r"QUnit$"))
    dom("#title", page).includes_text("Welcome")
    dom("#title", page).does_not_include_text("Goodbye")
    dom("#title", page).has_any_text()


def test_text_mismatch_raises(page):
    with pytest.raises(DomAssertionFailure):
        dom("#title", page).has_text("Welcome")


def test_form_state(page):
    dom("#name", page).is_required()
    dom("#empty", page).is_not_required()
    dom("#agree", page).is_checked()
    dom("#name", page).is_not_checked()
    dom("#save", page).is_disabled()
    dom("#name", page).is_not_disabled()


def test_focus(page):
    dom("#name", page).is_not_focused()
    page.focus("#name")
    dom("#name", page).is_focused()
    dom("#empty", page).is_not_focused()


def test_visibility(page):
    dom("#title", page).is_visible()
    dom("#inline", page).is_visible()
    dom("#hidden", page).is_not_visible()
    dom("#missing", page).is_not_visible()


def test_detached_element_is_not_visible(page):
    element = page.evaluate_handle("() => document.createElement('div')").as_element()
    dom(element).is_not_visible()


def test_attributes_and_classes(page):
    dom("#name", page).has_attribute("required")
    dom("#name", page).has_attribute("type", "text")
    dom("#name", page).has_attribute("value", re.compile("^HS"))
    dom("#name", page).does_not_have_attribute("disabled")
    dom("#name", page).has_class("username")
    dom("#name", page).does_not_have_class("password")


def test_values(page):
    dom("#name", page).has_value("HSimpson")
    dom("#name", page).has_any_value()
    dom("#empty", page).has_no_value()
    page.fill("#empty", "typed")
    dom("#empty", page).has_value("typed")


def test_style(page):
    dom(".progress-bar", page).has_style("backgroundColor", "rgb(248, 183, 21)")
    dom(".progress-bar", page).has_style("background-color", "rgb(248, 183, 21)")


def test_element_target(page):
    element = page.query_selector("#name")
    collector = ResultCollector()
    result = dom(element, reporter=collector).has_class("missing")
    assert result.passed is False
    assert result.message == 'Element input#name.username.wide[type="text"][required][value="HSimpson"] has CSS class "missing"'


def test_root_scoping(page):
    choices = page.query_selector("#choices")
    dom(".choice", choices).exists({"count": 4})
    dom("#title", choices).does_not_exist()
