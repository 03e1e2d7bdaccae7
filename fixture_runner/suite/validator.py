"""Configuration validator for fixture runs.

Checks a RunConfiguration before any program is launched. Errors block the
run; warnings (such as individual missing fixtures) are reported and the run
goes ahead, since a missing fixture only fails its own index.
"""

import os
import shutil
from pathlib import Path
from typing import Optional

from .schema import (
    RunConfiguration,
    ValidationError,
    ValidationResult,
    VALID_DIFF_FORMATS,
)


def validate_configuration(config: RunConfiguration) -> ValidationResult:
    """Validate a RunConfiguration.

    Checks:
    - The executable exists and is executable (or resolves on PATH)
    - The fixture directory exists
    - Count, timeout and jobs are in range, diff format is known
    - File name patterns contain the ``{index}`` placeholder
    - Every fixture file is present (warning only)

    Args:
        config: Configuration to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    _validate_executable(config, errors)
    _validate_settings(config, errors, warnings)

    fixtures_ok = _validate_fixture_dir(config, errors)
    if fixtures_ok and not errors:
        _validate_fixture_files(config, warnings)

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def resolve_executable(executable: str) -> Optional[str]:
    """Return the launchable path for an executable, or None."""
    path = Path(executable)
    if "/" in executable or "\\" in executable:
        if path.is_file() and os.access(path, os.X_OK):
            return str(path)
        return None
    return shutil.which(executable)


def _validate_executable(
    config: RunConfiguration,
    errors: list[ValidationError],
) -> None:
    if not config.executable:
        errors.append(ValidationError(
            path="exe",
            message="'exe' is required and must not be empty.",
        ))
        return

    if resolve_executable(config.executable) is None:
        errors.append(ValidationError(
            path="exe",
            message=f"Executable not found or not executable: {config.executable}",
        ))


def _validate_settings(
    config: RunConfiguration,
    errors: list[ValidationError],
    warnings: list[ValidationError],
) -> None:
    if config.count < 0:
        errors.append(ValidationError(
            path="count",
            message=f"Count must be zero or positive, got {config.count}.",
        ))
    elif config.count == 0:
        warnings.append(ValidationError(
            path="count",
            message="Count is 0. No tests will run.",
            severity="warning",
        ))

    if config.timeout is not None and config.timeout <= 0:
        errors.append(ValidationError(
            path="timeout",
            message=f"Timeout must be positive, got {config.timeout}.",
        ))

    if config.jobs < 1:
        errors.append(ValidationError(
            path="jobs",
            message=f"Jobs must be at least 1, got {config.jobs}.",
        ))

    if config.diff_format not in VALID_DIFF_FORMATS:
        errors.append(ValidationError(
            path="diff_format",
            message=f"Invalid diff format '{config.diff_format}'. Must be one of: {', '.join(sorted(VALID_DIFF_FORMATS))}",
        ))

    for name in ("input_pattern", "expected_pattern", "actual_pattern"):
        pattern = getattr(config, name)
        try:
            varies = pattern.format(index=0) != pattern.format(index=1)
        except (KeyError, IndexError, AttributeError, ValueError) as e:
            errors.append(ValidationError(
                path=name,
                message=f"Pattern '{pattern}' is not a valid file name pattern: {e!r}",
            ))
            continue
        if not varies:
            errors.append(ValidationError(
                path=name,
                message=f"Pattern '{pattern}' must contain '{{index}}'.",
            ))

    if config.input_pattern == config.actual_pattern and config.fixture_dir == config.work_dir:
        errors.append(ValidationError(
            path="actual_pattern",
            message="Actual output files would overwrite the input fixtures.",
        ))


def _validate_fixture_dir(
    config: RunConfiguration,
    errors: list[ValidationError],
) -> bool:
    if not config.fixture_dir.is_dir():
        errors.append(ValidationError(
            path="fixtures",
            message=f"Fixture directory not found: {config.fixture_dir}",
        ))
        return False
    return True


def _validate_fixture_files(
    config: RunConfiguration,
    warnings: list[ValidationError],
) -> None:
    for case in config.test_cases():
        for path in (case.input_path, case.expected_output_path):
            if not path.is_file():
                warnings.append(ValidationError(
                    path=f"fixtures[{case.index}]",
                    message=f"Fixture missing: {path}",
                    severity="warning",
                ))
