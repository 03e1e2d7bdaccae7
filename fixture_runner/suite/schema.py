"""Suite data models for fixture runs.

Defines the run configuration and the per-index test case it expands into.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class DiffFormat(str, Enum):
    """Supported diff renderings."""
    NORMAL = "normal"
    UNIFIED = "unified"


VALID_DIFF_FORMATS = {e.value for e in DiffFormat}

DEFAULT_INPUT_PATTERN = "input{index}.txt"
DEFAULT_EXPECTED_PATTERN = "output{index}.txt"
DEFAULT_ACTUAL_PATTERN = "res{index}.txt"


@dataclass(frozen=True)
class TestCase:
    """A single numbered fixture pair and the file its output goes to."""
    __test__ = False

    index: int
    input_path: Path
    expected_output_path: Path
    actual_output_path: Path


@dataclass
class RunConfiguration:
    """Everything a run needs, fixed for the duration of the run."""
    executable: str
    fixture_dir: Path
    count: int
    name: str = "default"
    args: list[str] = field(default_factory=list)
    work_dir: Path = Path(".")
    input_pattern: str = DEFAULT_INPUT_PATTERN
    expected_pattern: str = DEFAULT_EXPECTED_PATTERN
    actual_pattern: str = DEFAULT_ACTUAL_PATTERN
    timeout: Optional[float] = None
    jobs: int = 1
    check_exit_code: bool = False
    diff_format: str = DiffFormat.NORMAL.value

    def __post_init__(self):
        self.executable = str(self.executable)
        self.fixture_dir = Path(self.fixture_dir)
        self.work_dir = Path(self.work_dir)
        self.args = [str(a) for a in self.args]
        self.diff_format = str(self.diff_format).lower()

    @property
    def command(self) -> list[str]:
        """Argument vector used to launch the program under test."""
        return [self.executable, *self.args]

    @property
    def indices(self) -> range:
        return range(max(self.count, 0))

    def input_path(self, index: int) -> Path:
        return self.fixture_dir / self.input_pattern.format(index=index)

    def expected_output_path(self, index: int) -> Path:
        return self.fixture_dir / self.expected_pattern.format(index=index)

    def actual_output_path(self, index: int) -> Path:
        return self.work_dir / self.actual_pattern.format(index=index)

    def test_case(self, index: int) -> TestCase:
        return TestCase(
            index=index,
            input_path=self.input_path(index),
            expected_output_path=self.expected_output_path(index),
            actual_output_path=self.actual_output_path(index),
        )

    def test_cases(self) -> list[TestCase]:
        """All test cases of the run, in ascending index order."""
        return [self.test_case(i) for i in self.indices]

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "name": self.name,
            "exe": self.executable,
            "args": list(self.args),
            "fixtures": str(self.fixture_dir),
            "count": self.count,
            "work_dir": str(self.work_dir),
            "input_pattern": self.input_pattern,
            "expected_pattern": self.expected_pattern,
            "actual_pattern": self.actual_pattern,
            "timeout": self.timeout,
            "jobs": self.jobs,
            "check_exit_code": self.check_exit_code,
            "diff_format": self.diff_format,
        }


@dataclass
class ValidationError:
    """A single validation error."""
    path: str
    message: str
    severity: str = "error"  # "error" or "warning"


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def __str__(self) -> str:
        if self.valid:
            msg = "Valid"
            if self.warnings:
                msg += f" ({self.warning_count} warnings)"
            return msg
        return f"Invalid: {self.error_count} errors, {self.warning_count} warnings"
