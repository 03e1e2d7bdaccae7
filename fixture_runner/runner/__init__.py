"""Runner module - test orchestration."""

from .executor import TestRunner, run_all
from .process import ProcessOutcome, run_program
from .results import ResultStatus, RunSummary, TestResult

__all__ = [
    "TestRunner",
    "run_all",
    "ProcessOutcome",
    "run_program",
    "ResultStatus",
    "RunSummary",
    "TestResult",
]
