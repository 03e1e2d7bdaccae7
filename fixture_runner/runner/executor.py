"""Test runner - drives the program under test over every fixture.

For each index of the run:
1. Check the fixture pair exists
2. Run the program with the input on stdin, stdout to the actual output file
3. Normalize expected and actual output (drop blank lines)
4. Diff them
5. Delete the actual output on a match, keep it on a mismatch
"""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Iterable, Optional

from ..compare.diff import render_diff
from ..compare.normalize import read_normalized
from ..suite.schema import RunConfiguration, TestCase
from .process import run_program
from .results import ResultStatus, RunSummary, TestResult

ResultCallback = Callable[[TestResult], None]


class TestRunner:
    """Runs numbered fixtures against a program and compares the output.

    Each index reads and writes only its own files, so cases are independent
    and may run on a worker pool. Results always come back, and are handed to
    ``on_result``, in ascending index order.
    """

    __test__ = False

    def __init__(
        self,
        config: RunConfiguration,
        on_result: Optional[ResultCallback] = None,
    ):
        """Initialize test runner.

        Args:
            config: Run configuration.
            on_result: Called once per result, in index order, as soon as
                every lower index has been reported.
        """
        self.config = config
        self.on_result = on_result

    def run_all(self) -> list[TestResult]:
        """Run every index in ``[0, count)``."""
        return self.run().results

    def run(self, indices: Optional[Iterable[int]] = None) -> RunSummary:
        """Run the given indices (default: all) and summarize.

        Returns:
            RunSummary with results sorted by index.
        """
        start_time = time.time()
        selected = sorted(set(self.config.indices if indices is None else indices))

        if self.config.jobs > 1 and len(selected) > 1:
            results = self._run_parallel(selected)
        else:
            results = []
            for index in selected:
                result = self.run_case(index)
                results.append(result)
                self._emit(result)

        return RunSummary(
            suite_name=self.config.name,
            results=results,
            duration_ms=int((time.time() - start_time) * 1000),
        )

    def run_case(self, index: int) -> TestResult:
        """Run and compare a single index. Never raises for test outcomes."""
        case = self.config.test_case(index)
        start_time = time.time()

        try:
            result = self._execute(case)
        except FileNotFoundError as e:
            result = TestResult(
                index=index,
                status=ResultStatus.FIXTURE_MISSING,
                error=str(e),
            )
        except TimeoutError as e:
            result = TestResult(
                index=index,
                status=ResultStatus.EXECUTION_FAILED,
                error=f"timeout: {e}",
                actual_output_path=_existing(case.actual_output_path),
            )
        except RuntimeError as e:
            result = TestResult(
                index=index,
                status=ResultStatus.EXECUTION_FAILED,
                error=str(e),
            )
        except OSError as e:
            result = TestResult(
                index=index,
                status=ResultStatus.EXECUTION_FAILED,
                error=f"I/O error: {e}",
            )

        result.duration_ms = int((time.time() - start_time) * 1000)
        return result

    def _execute(self, case: TestCase) -> TestResult:
        for path in (case.input_path, case.expected_output_path):
            if not path.is_file():
                # Don't let output from an earlier run pass as this run's.
                case.actual_output_path.unlink(missing_ok=True)
                raise FileNotFoundError(f"Fixture missing: {path}")

        outcome = run_program(
            self.config.command,
            case.input_path,
            case.actual_output_path,
            timeout=self.config.timeout,
        )

        warnings = []
        if outcome.exit_code != 0:
            message = f"Program exited with code {outcome.exit_code}"
            stderr_lines = outcome.stderr.strip().splitlines()
            if stderr_lines:
                message += f" ({stderr_lines[-1]})"
            if self.config.check_exit_code:
                return TestResult(
                    index=case.index,
                    status=ResultStatus.EXECUTION_FAILED,
                    error=message,
                    exit_code=outcome.exit_code,
                    actual_output_path=str(case.actual_output_path),
                )
            warnings.append(message)

        expected = read_normalized(case.expected_output_path)
        actual = read_normalized(case.actual_output_path)
        diff_text = render_diff(
            expected,
            actual,
            diff_format=self.config.diff_format,
            labels=(str(case.expected_output_path), str(case.actual_output_path)),
        )

        if not diff_text:
            case.actual_output_path.unlink()
            return TestResult(
                index=case.index,
                status=ResultStatus.PASSED,
                exit_code=outcome.exit_code,
                warnings=warnings,
            )

        return TestResult(
            index=case.index,
            status=ResultStatus.CONTENT_MISMATCH,
            diff_text=diff_text,
            exit_code=outcome.exit_code,
            actual_output_path=str(case.actual_output_path),
            warnings=warnings,
        )

    def _run_parallel(self, indices: list[int]) -> list[TestResult]:
        done: dict[int, TestResult] = {}
        next_pos = 0

        pool = ThreadPoolExecutor(max_workers=self.config.jobs)
        try:
            futures = {pool.submit(self.run_case, i): i for i in indices}
            for future in as_completed(futures):
                result = future.result()
                done[result.index] = result
                # Report in index order as soon as the prefix is complete.
                while next_pos < len(indices) and indices[next_pos] in done:
                    self._emit(done[indices[next_pos]])
                    next_pos += 1
        except BaseException:
            # Queued cases must not start once the run is abandoned.
            pool.shutdown(wait=False, cancel_futures=True)
            raise
        pool.shutdown()

        return [done[i] for i in indices]

    def _emit(self, result: TestResult) -> None:
        if self.on_result:
            self.on_result(result)


def run_all(
    config: RunConfiguration,
    on_result: Optional[ResultCallback] = None,
) -> list[TestResult]:
    """Run every fixture of ``config`` and return index-aligned results."""
    return TestRunner(config, on_result=on_result).run_all()


def _existing(path: Path) -> Optional[str]:
    return str(path) if path.exists() else None
