import json
import logging
import os
import tempfile
from typing import List, Optional, Protocol

from ..assertions.models import AssertionResult

logger = logging.getLogger("dom_assertions.reporting")


class DomAssertionFailure(AssertionError):
    """Raised by reporters that turn failed results into test failures"""

    def __init__(self, results: List[AssertionResult]):
        self.results = list(results)
        super().__init__(format_failures(self.results))


def format_failure(result: AssertionResult) -> str:
    lines = [result.message]
    if result.expected_description is not None:
        lines.append(f"  expected: {result.expected_description}")
    if result.actual_description is not None:
        lines.append(f"  actual:   {result.actual_description}")
    return "\n".join(lines)


def format_failures(results: List[AssertionResult]) -> str:
    if len(results) == 1:
        return format_failure(results[0])
    header = f"{len(results)} DOM assertions failed:"
    return "\n".join([header] + [format_failure(result) for result in results])


class ResultReporter(Protocol):
    """Sink that records assertion results for the host test framework"""

    def push_result(self, result: AssertionResult) -> None:
        ...


class ResultCollector:
    """Records every result in order and writes them as a JSON report"""

    def __init__(self):
        self.results: List[AssertionResult] = []

    def push_result(self, result: AssertionResult) -> None:
        self.results.append(result)

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def failures(self) -> List[AssertionResult]:
        return [result for result in self.results if not result.passed]

    def summary(self) -> str:
        failed = len(self.failures)
        return f"{len(self.results) - failed} passed, {failed} failed"

    def generate_report(self, path: str, test_name: Optional[str] = None) -> None:
        """Append this collector's results to a JSON report file."""
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        entries = []
        if os.path.exists(path):
            with open(path, encoding="utf-8") as report_file:
                try:
                    entries = json.load(report_file)
                except json.JSONDecodeError as e:
                    raise ValueError(f"Report file {path} is not valid JSON: {e}") from e
            if not isinstance(entries, list):
                raise ValueError(f"Report file {path} must hold a JSON list, got {type(entries).__name__}")

        entries.extend(
            dict(result.to_dict(), test=test_name) if test_name else result.to_dict()
            for result in self.results
        )
        # the previous report stays intact until the new one is complete
        handle, temp_path = tempfile.mkstemp(dir=directory or ".", suffix=".tmp")
        try:
            with os.fdopen(handle, "w", encoding="utf-8") as report_file:
                json.dump(entries, report_file, indent=4, ensure_ascii=False)
            os.replace(temp_path, path)
        except BaseException:
            os.remove(temp_path)
            raise
        logger.debug(f"Wrote {len(self.results)} result(s) to {path}")


class RaisingReporter(ResultCollector):
    """Raises DomAssertionFailure as soon as a failed result is pushed"""

    def push_result(self, result: AssertionResult) -> None:
        super().push_result(result)
        if not result.passed:
            raise DomAssertionFailure([result])


class SoftAssertionReporter(ResultCollector):
    """Collects failures and raises them all at once from `verify`"""

    def verify(self) -> None:
        failures = self.failures
        if failures:
            logger.warning(f"⚠️ {self.summary()}")
            raise DomAssertionFailure(failures)
