"""Suite module - run configuration, YAML suite files and presets."""

from .schema import (
    DiffFormat,
    RunConfiguration,
    TestCase,
    ValidationError,
    ValidationResult,
)
from .parser import parse_suite_data, parse_suite_file, select_suite
from .presets import DEFAULT_PRESET, PRESETS, get_preset
from .validator import resolve_executable, validate_configuration

__all__ = [
    "DiffFormat",
    "RunConfiguration",
    "TestCase",
    "ValidationError",
    "ValidationResult",
    "parse_suite_data",
    "parse_suite_file",
    "select_suite",
    "DEFAULT_PRESET",
    "PRESETS",
    "get_preset",
    "resolve_executable",
    "validate_configuration",
]
