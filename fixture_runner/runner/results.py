"""Result types for fixture runs."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ResultStatus(str, Enum):
    """Outcome of a single test case."""
    PASSED = "passed"
    CONTENT_MISMATCH = "content_mismatch"
    FIXTURE_MISSING = "fixture_missing"
    EXECUTION_FAILED = "execution_failed"


HARNESS_ERRORS = {ResultStatus.FIXTURE_MISSING, ResultStatus.EXECUTION_FAILED}


@dataclass
class TestResult:
    """Result of running one test case."""
    __test__ = False

    index: int
    status: ResultStatus
    diff_text: str = ""
    error: Optional[str] = None
    exit_code: Optional[int] = None
    duration_ms: int = 0
    actual_output_path: Optional[str] = None
    warnings: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.status == ResultStatus.PASSED

    @property
    def is_harness_error(self) -> bool:
        return self.status in HARNESS_ERRORS

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "status": self.status.value,
            "diff": self.diff_text or None,
            "error": self.error,
            "exit_code": self.exit_code,
            "duration_ms": self.duration_ms,
            "actual_output": self.actual_output_path,
            "warnings": list(self.warnings),
        }


@dataclass
class RunSummary:
    """Aggregated results of a whole run, in index order."""
    suite_name: str
    results: list[TestResult] = field(default_factory=list)
    duration_ms: int = 0

    @property
    def all_passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def total_count(self) -> int:
        return len(self.results)

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results if r.status == ResultStatus.CONTENT_MISMATCH)

    @property
    def error_count(self) -> int:
        return sum(1 for r in self.results if r.is_harness_error)
