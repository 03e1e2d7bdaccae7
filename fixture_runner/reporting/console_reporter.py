"""Console reporter - one status line per test, in index order."""

import sys
from typing import Optional, TextIO

from ..runner.results import ResultStatus, RunSummary, TestResult

_ERROR_LABELS = {
    ResultStatus.FIXTURE_MISSING: "fixture missing",
    ResultStatus.EXECUTION_FAILED: "execution failed",
}


class ConsoleReporter:
    """Prints test outcomes as they arrive.

    Passing and mismatching tests use the historical wording
    (``Test 3 passed.`` / ``ERROR! Test 3 not passed`` plus the diff). Harness
    errors get their own ``HARNESS ERROR!`` prefix so they can't be mistaken
    for a wrong answer.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
    ):
        self.stream = stream or sys.stdout
        self.err_stream = err_stream or sys.stderr

    def report(self, result: TestResult) -> None:
        """Print the status of one test."""
        if result.status == ResultStatus.PASSED:
            self._print(f"Test {result.index} passed.")
        elif result.status == ResultStatus.CONTENT_MISMATCH:
            self._print(f"ERROR! Test {result.index} not passed")
            self._print(result.diff_text)
        else:
            label = _ERROR_LABELS[result.status]
            self._print(f"HARNESS ERROR! Test {result.index}: {label}: {result.error}")

        for warning in result.warnings:
            print(f"Warning: Test {result.index}: {warning}", file=self.err_stream)

    def report_summary(self, summary: RunSummary) -> None:
        """Print the closing tally of a run."""
        line = (
            f"{summary.total_count} tests: {summary.passed_count} passed, "
            f"{summary.failed_count} failed, {summary.error_count} harness errors"
        )
        self._print(f"\n{line}")

    def _print(self, text: str) -> None:
        print(text, file=self.stream)
