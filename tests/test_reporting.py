"""Tests for console and JSON reporting."""

import io
import json

from fixture_runner.reporting.console_reporter import ConsoleReporter
from fixture_runner.reporting.json_reporter import JsonReporter
from fixture_runner.runner.results import ResultStatus, RunSummary, TestResult
from fixture_runner.suite.schema import RunConfiguration


def _summary():
    return RunSummary(
        suite_name="handson2_p1",
        results=[
            TestResult(index=0, status=ResultStatus.PASSED),
            TestResult(
                index=1,
                status=ResultStatus.CONTENT_MISMATCH,
                diff_text="1c1\n< 5\n---\n> 4",
                actual_output_path="res1.txt",
            ),
            TestResult(
                index=2,
                status=ResultStatus.FIXTURE_MISSING,
                error="Fixture missing: Testset/input2.txt",
            ),
            TestResult(
                index=3,
                status=ResultStatus.EXECUTION_FAILED,
                error="timeout: Program timed out after 1.0s",
            ),
        ],
        duration_ms=42,
    )


class TestConsoleReporter:
    def test_status_lines(self):
        out, err = io.StringIO(), io.StringIO()
        reporter = ConsoleReporter(stream=out, err_stream=err)

        for result in _summary().results:
            reporter.report(result)

        assert out.getvalue().splitlines() == [
            "Test 0 passed.",
            "ERROR! Test 1 not passed",
            "1c1",
            "< 5",
            "---",
            "> 4",
            "HARNESS ERROR! Test 2: fixture missing: Fixture missing: Testset/input2.txt",
            "HARNESS ERROR! Test 3: execution failed: timeout: Program timed out after 1.0s",
        ]
        assert err.getvalue() == ""

    def test_warnings_go_to_error_stream(self):
        out, err = io.StringIO(), io.StringIO()
        reporter = ConsoleReporter(stream=out, err_stream=err)

        reporter.report(TestResult(
            index=7,
            status=ResultStatus.PASSED,
            warnings=["Program exited with code 1"],
        ))

        assert out.getvalue() == "Test 7 passed.\n"
        assert err.getvalue() == "Warning: Test 7: Program exited with code 1\n"

    def test_summary_line(self):
        out = io.StringIO()
        ConsoleReporter(stream=out).report_summary(_summary())

        assert out.getvalue().strip() == "4 tests: 1 passed, 1 failed, 2 harness errors"


class TestJsonReporter:
    def _config(self):
        return RunConfiguration(
            name="handson2_p1",
            executable="./target/debug/handson2",
            fixture_dir="Testset_handson2_p1",
            count=4,
        )

    def test_generate(self):
        report = JsonReporter().generate(self._config(), _summary())

        assert report["suite"] == "handson2_p1"
        assert report["status"] == "failed"
        assert report["summary"] == {
            "total": 4,
            "passed": 1,
            "failed": 1,
            "harness_errors": 2,
            "duration_ms": 42,
        }
        assert report["config"]["exe"] == "./target/debug/handson2"
        assert [t["status"] for t in report["tests"]] == [
            "passed", "content_mismatch", "fixture_missing", "execution_failed",
        ]
        assert report["tests"][1]["diff"] == "1c1\n< 5\n---\n> 4"
        assert report["tests"][0]["diff"] is None
        assert set(report) == {"timestamp", "suite", "config", "status", "summary", "tests"}

    def test_all_passed(self):
        summary = RunSummary(
            suite_name="s",
            results=[TestResult(index=0, status=ResultStatus.PASSED)],
        )
        reporter = JsonReporter()
        report = reporter.generate(self._config(), summary)
        output = reporter.generate_cli_output(report)

        assert report["status"] == "passed"
        assert output["success"] is True
        assert output["message"] == "All tests passed"

    def test_cli_output_on_failure(self):
        reporter = JsonReporter()
        report = reporter.generate(self._config(), _summary())

        output = reporter.generate_cli_output(report, report_path="r.json")

        assert output["success"] is False
        assert output["command"] == "run"
        assert output["message"] == "3 of 4 tests not passed"
        assert output["data"]["report_path"] == "r.json"
        assert output["data"]["harness_errors"] == 2

    def test_save_round_trips(self, tmp_path):
        reporter = JsonReporter()
        report = reporter.generate(self._config(), _summary())

        path = reporter.save(report, tmp_path / "reports" / "run.json")

        assert json.loads(path.read_text(encoding="utf-8")) == report
