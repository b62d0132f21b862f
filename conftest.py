import pytest
from playwright.sync_api import ElementHandle, Page, Error as PlaywrightError, sync_playwright

from dom_assertions.assertions.inspection import STYLE_SCRIPT
from dom_assertions.config import load_settings
from dom_assertions.reporting.result_reporter import ResultCollector


def make_snapshot(**overrides):
    """Build the raw snapshot a rendered, empty <div> produces."""
    snapshot = {
        "tagName": "div",
        "connected": True,
        "offsetWidth": 100,
        "offsetHeight": 20,
        "rects": [{"width": 100, "height": 20}],
        "checked": False,
        "disabled": False,
        "required": False,
        "focused": False,
        "attributes": {},
        "classes": [],
        "textContent": "",
        "value": "",
    }
    snapshot.update(overrides)
    return snapshot


@pytest.fixture
def snapshot_factory():
    return make_snapshot


@pytest.fixture
def make_element(mocker):
    """Create mock element handles whose in-page scripts return fixed values."""
    def factory(style=None, **overrides):
        element = mocker.MagicMock(spec=ElementHandle)
        snapshot = make_snapshot(**overrides)

        def evaluate(script, *args):
            if script == STYLE_SCRIPT:
                return (style or {}).get(args[0], "")
            return snapshot

        element.evaluate.side_effect = evaluate
        return element
    return factory


@pytest.fixture
def mock_page(mocker):
    """Create a mock page whose selectors match nothing until configured."""
    page = mocker.MagicMock(spec=Page)
    page.query_selector_all.return_value = []
    return page


@pytest.fixture
def collector():
    return ResultCollector()


@pytest.fixture(scope="session")
def dom_browser():
    """Launch the configured browser, skipping when it is not installed."""
    settings = load_settings()
    with sync_playwright() as playwright:
        try:
            browser = getattr(playwright, settings.browser).launch(headless=settings.headless)
        except PlaywrightError as error:
            pytest.skip(f"{settings.browser} is not available: {error}")
        yield browser
        browser.close()


@pytest.fixture
def dom_page(dom_browser):
    page = dom_browser.new_page()
    yield page
    page.close()
