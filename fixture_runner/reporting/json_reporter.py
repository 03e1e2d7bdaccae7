"""JSON report generator for fixture run results.

Generates structured JSON reports from test run results.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from ..runner.results import RunSummary
from ..suite.schema import RunConfiguration


class JsonReporter:
    """Generates JSON reports from fixture run results."""

    def generate(
        self,
        config: RunConfiguration,
        summary: RunSummary,
    ) -> dict[str, Any]:
        """Generate a JSON report from run results.

        Args:
            config: Configuration the run used.
            summary: Results of the run.

        Returns:
            Report dictionary ready for JSON serialization.
        """
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "suite": summary.suite_name,
            "config": config.to_dict(),
            "status": "passed" if summary.all_passed else "failed",
            "summary": {
                "total": summary.total_count,
                "passed": summary.passed_count,
                "failed": summary.failed_count,
                "harness_errors": summary.error_count,
                "duration_ms": summary.duration_ms,
            },
            "tests": [r.to_dict() for r in summary.results],
        }

    def save(self, report: dict[str, Any], path: Path) -> Path:
        """Save report to a JSON file.

        Args:
            report: Report dictionary.
            path: Output file path.

        Returns:
            Path to the saved file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        return path

    def generate_cli_output(
        self,
        report: dict[str, Any],
        report_path: Optional[str] = None,
    ) -> dict[str, Any]:
        """Generate the compact JSON printed by ``--json``.

        Shape::

            {
                "success": bool,
                "command": "run",
                "data": { ... },
                "message": str
            }
        """
        summary = report["summary"]
        all_passed = report["status"] == "passed"

        data: dict[str, Any] = {
            "suite": report["suite"],
            "total_tests": summary["total"],
            "passed": summary["passed"],
            "failed": summary["failed"],
            "harness_errors": summary["harness_errors"],
            "duration_ms": summary["duration_ms"],
            "tests": [
                {"index": t["index"], "status": t["status"]}
                for t in report["tests"]
            ],
        }

        if report_path:
            data["report_path"] = report_path

        if not all_passed:
            not_passed = summary["total"] - summary["passed"]
            message = f"{not_passed} of {summary['total']} tests not passed"
        else:
            message = "All tests passed"

        return {
            "success": all_passed,
            "command": "run",
            "data": data,
            "message": message,
        }
