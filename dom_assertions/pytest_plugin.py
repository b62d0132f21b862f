"""
pytest integration for DOM assertions.

Provides the `assert_dom` fixture::

    def test_title(assert_dom, page):
        assert_dom.root = page
        assert_dom("#title").has_text("Welcome to QUnit")
        assert_dom(".choice").exists({"count": 4})

By default failures are collected and reported together when the fixture is
torn down; set ``DOM_ASSERTIONS_FAIL_FAST=1`` to fail on the first one.
"""

import logging
from typing import Any, Optional

import pytest

from .assertions.dom import DOMAssertions
from .assertions.resolution import Root
from .config import Settings, configure_logging, load_settings
from .reporting.result_reporter import RaisingReporter, ResultCollector, SoftAssertionReporter

logger = logging.getLogger("dom_assertions.pytest_plugin")


class DomAssertionFactory:
    """Creates DOMAssertions that all report to one reporter"""

    def __init__(self, reporter: ResultCollector, root: Optional[Root] = None):
        self.reporter = reporter
        self.root = root

    def __call__(self, target: Any, root: Optional[Root] = None) -> DOMAssertions:
        return DOMAssertions(target, root if root is not None else self.root, self.reporter)


def create_reporter(settings: Settings) -> ResultCollector:
    if settings.fail_fast:
        return RaisingReporter()
    return SoftAssertionReporter()


@pytest.fixture(scope="session")
def dom_settings() -> Settings:
    settings = load_settings()
    configure_logging(settings)
    return settings


@pytest.fixture
def assert_dom(request, dom_settings):
    reporter = create_reporter(dom_settings)
    factory = DomAssertionFactory(reporter)
    yield factory

    if dom_settings.report_path:
        reporter.generate_report(dom_settings.report_path, test_name=request.node.nodeid)
    logger.debug(f"{request.node.nodeid}: {reporter.summary()}")
    if isinstance(reporter, SoftAssertionReporter):
        reporter.verify()
