"""CLI entry point for fixture runner.

Usage:
    fixture-runner [--preset NAME | --suite-file FILE [--suite NAME]] [options]
    python -m fixture_runner.cli [options]
"""

import dataclasses
import json
import sys
from pathlib import Path
from typing import Optional

import click

from .reporting.console_reporter import ConsoleReporter
from .reporting.json_reporter import JsonReporter
from .runner.executor import TestRunner
from .suite.parser import parse_suite_file, select_suite
from .suite.presets import DEFAULT_PRESET, PRESETS, get_preset
from .suite.schema import VALID_DIFF_FORMATS, RunConfiguration
from .suite.validator import validate_configuration

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2
EXIT_INTERRUPTED = 130


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--preset", type=click.Choice(sorted(PRESETS)), default=None,
              help=f"Built-in configuration (default: {DEFAULT_PRESET}).")
@click.option("--suite-file", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="YAML file describing one or more suites.")
@click.option("--suite", "suite_name", default=None,
              help="Suite to run from --suite-file.")
@click.option("--exe", default=None, help="Program under test.")
@click.option("--arg", "program_args", multiple=True,
              help="Argument passed to the program under test (repeatable).")
@click.option("--fixtures", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Directory holding input<i>.txt and output<i>.txt.")
@click.option("--count", type=int, default=None, help="Number of numbered fixtures.")
@click.option("--work-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Where res<i>.txt files are written (default: current directory).")
@click.option("--timeout", type=float, default=None, help="Per-test timeout in seconds.")
@click.option("--jobs", "-j", type=int, default=None, help="Tests to run at once (default: 1).")
@click.option("--only", type=int, multiple=True, help="Run only this index (repeatable).")
@click.option("--check-exit-code", is_flag=True, default=False,
              help="Fail a test when the program exits non-zero.")
@click.option("--diff-format", type=click.Choice(sorted(VALID_DIFF_FORMATS)), default=None,
              help="Diff rendering for failed tests (default: normal).")
@click.option("--save-report", is_flag=True, default=False, help="Save a JSON report file.")
@click.option("--report-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Directory for saved reports.")
@click.option("--json", "json_output", is_flag=True, default=False,
              help="Print a JSON result instead of per-test lines.")
@click.option("--validate-only", is_flag=True, default=False,
              help="Check the configuration and exit without running.")
def main(
    preset: Optional[str],
    suite_file: Optional[Path],
    suite_name: Optional[str],
    exe: Optional[str],
    program_args: tuple[str, ...],
    fixtures: Optional[Path],
    count: Optional[int],
    work_dir: Optional[Path],
    timeout: Optional[float],
    jobs: Optional[int],
    only: tuple[int, ...],
    check_exit_code: bool,
    diff_format: Optional[str],
    save_report: bool,
    report_dir: Optional[Path],
    json_output: bool,
    validate_only: bool,
):
    """Run a program against numbered fixtures and diff its output."""
    if preset and suite_file:
        output_error("--preset and --suite-file are mutually exclusive.", json_output)
        sys.exit(EXIT_CONFIG)

    try:
        config = load_configuration(preset, suite_file, suite_name)
    except (FileNotFoundError, ValueError) as e:
        output_error(f"Failed to load configuration: {e}", json_output)
        sys.exit(EXIT_CONFIG)

    config = apply_overrides(
        config,
        executable=exe,
        args=list(program_args) or None,
        fixture_dir=fixtures,
        count=count,
        work_dir=work_dir,
        timeout=timeout,
        jobs=jobs,
        check_exit_code=check_exit_code or None,
        diff_format=diff_format,
    )

    validation = validate_configuration(config)
    for warning in validation.warnings:
        click.echo(f"Warning: {warning.path}: {warning.message}", err=True)
    if not validation.valid:
        errors_str = "; ".join(f"{e.path}: {e.message}" for e in validation.errors)
        output_error(f"Invalid configuration: {errors_str}", json_output)
        sys.exit(EXIT_CONFIG)

    out_of_range = [i for i in only if i not in config.indices]
    if out_of_range:
        output_error(
            f"--only index out of range [0, {config.count}): {', '.join(map(str, out_of_range))}",
            json_output,
        )
        sys.exit(EXIT_CONFIG)

    if validate_only:
        click.echo(f"Configuration '{config.name}': {validation}")
        sys.exit(EXIT_OK)

    console = None if json_output else ConsoleReporter()
    runner = TestRunner(config, on_result=console.report if console else None)

    try:
        summary = runner.run(indices=only or None)
    except KeyboardInterrupt:
        output_error("Run interrupted by user", json_output)
        sys.exit(EXIT_INTERRUPTED)

    reporter = JsonReporter()
    report = reporter.generate(config, summary)

    report_path = None
    if save_report:
        report_path = save_json_report(reporter, report, config, report_dir)

    if console:
        console.report_summary(summary)
    else:
        click.echo(json.dumps(reporter.generate_cli_output(report, report_path), ensure_ascii=False))

    sys.exit(EXIT_OK if summary.all_passed else EXIT_FAILED)


def load_configuration(
    preset: Optional[str],
    suite_file: Optional[Path],
    suite_name: Optional[str],
) -> RunConfiguration:
    """Load the base configuration from a suite file or a preset."""
    if suite_file is not None:
        return select_suite(parse_suite_file(suite_file), suite_name)
    if suite_name is not None:
        raise ValueError("--suite requires --suite-file")
    return get_preset(preset or DEFAULT_PRESET)


def apply_overrides(config: RunConfiguration, **overrides) -> RunConfiguration:
    """Return a copy of ``config`` with every non-None override applied."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    if not changes:
        return config
    return dataclasses.replace(config, **changes)


def save_json_report(
    reporter: JsonReporter,
    report: dict,
    config: RunConfiguration,
    report_dir: Optional[Path],
) -> Optional[str]:
    """Save the run report, warning instead of failing the run on I/O errors."""
    path = (report_dir or Path(".")) / f"fixture_report_{config.name}.json"
    try:
        saved_path = reporter.save(report, path)
    except OSError as e:
        click.echo(f"Warning: Failed to save report: {e}", err=True)
        return None
    click.echo(f"Report saved: {saved_path}", err=True)
    return str(saved_path)


def output_error(message: str, as_json: bool = False) -> None:
    """Print an error either as JSON on stdout or as text on stderr."""
    if as_json:
        output = {
            "success": False,
            "command": "run",
            "data": None,
            "message": message,
        }
        click.echo(json.dumps(output, ensure_ascii=False))
    else:
        click.echo(f"Error: {message}", err=True)


if __name__ == "__main__":
    main()
