"""YAML suite parser for fixture runs.

Parses suite files into RunConfiguration objects. A suite file holds a
``suites`` list; each entry names the executable, the fixture directory and
the number of numbered fixtures, plus any optional run setting::

    suites:
      - name: handson2_p1
        exe: ./target/debug/handson2
        fixtures: Testset_handson2_p1
        count: 11
        timeout: 5
"""

from pathlib import Path
from typing import Optional, Union

import yaml

from .schema import RunConfiguration

# YAML key -> RunConfiguration field
_FIELD_ALIASES = {
    "exe": "executable",
    "executable": "executable",
    "fixtures": "fixture_dir",
    "fixture_dir": "fixture_dir",
}

_PATH_FIELDS = ("fixture_dir", "work_dir")

# Field -> (accepted types, wording for errors). None is allowed for timeout only.
_FIELD_TYPES = {
    "count": ((int,), "an integer"),
    "jobs": ((int,), "an integer"),
    "timeout": ((int, float, type(None)), "a number"),
    "check_exit_code": ((bool,), "true or false"),
    "name": ((str,), "a string"),
    "diff_format": ((str,), "a string"),
    "input_pattern": ((str,), "a string"),
    "expected_pattern": ((str,), "a string"),
    "actual_pattern": ((str,), "a string"),
}


def parse_suite_file(file_path: Union[str, Path]) -> list[RunConfiguration]:
    """Parse a YAML suite file into RunConfiguration objects.

    Relative paths in the file resolve against the file's own directory.

    Raises:
        FileNotFoundError: If the suite file doesn't exist.
        ValueError: If the YAML is malformed or missing required fields.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Suite file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty suite file: {file_path}")

    return parse_suite_data(data, source=str(file_path), base_dir=file_path.parent)


def parse_suite_data(
    data: dict,
    source: str = "<inline>",
    base_dir: Path = Path("."),
) -> list[RunConfiguration]:
    """Parse suites from a dictionary (already loaded YAML)."""
    if not isinstance(data, dict):
        raise ValueError(f"Suite file must be a YAML mapping, got {type(data).__name__}")

    if "suites" not in data:
        raise ValueError(f"Missing required field 'suites' in {source}")

    suites_data = data["suites"]
    if not isinstance(suites_data, list):
        raise ValueError(f"'suites' must be a list in {source}")

    suites = []
    seen: set[str] = set()
    for i, suite_data in enumerate(suites_data):
        if not isinstance(suite_data, dict):
            raise ValueError(f"Suite {i} must be a mapping in {source}")
        config = _parse_suite(suite_data, f"suites[{i}]", source, Path(base_dir))
        if config.name in seen:
            raise ValueError(f"Duplicate suite name '{config.name}' in {source}")
        seen.add(config.name)
        suites.append(config)

    return suites


def select_suite(suites: list[RunConfiguration], name: Optional[str] = None) -> RunConfiguration:
    """Pick a suite by name, or the only suite when no name is given."""
    if name is None:
        if len(suites) != 1:
            names = ", ".join(s.name for s in suites)
            raise ValueError(f"Suite file defines several suites ({names}); choose one by name")
        return suites[0]

    for suite in suites:
        if suite.name == name:
            return suite
    raise ValueError(f"Suite '{name}' not found")


def _parse_suite(data: dict, context: str, source: str, base_dir: Path) -> RunConfiguration:
    kwargs = {}
    for key, value in data.items():
        field_name = _FIELD_ALIASES.get(key, key)
        if field_name not in RunConfiguration.__dataclass_fields__:
            raise ValueError(f"Unknown field '{key}' in {context} ({source})")
        kwargs[field_name] = value

    _require_fields(kwargs, {"executable": "exe", "fixture_dir": "fixtures", "count": "count"}, context, source)

    if "name" not in kwargs:
        kwargs["name"] = context

    for field_name, (types, description) in _FIELD_TYPES.items():
        if field_name in kwargs:
            _require_type(kwargs[field_name], field_name, types, description, context, source)

    args = kwargs.get("args", [])
    if not isinstance(args, list):
        raise ValueError(f"'args' must be a list in {context} ({source})")

    for field_name in _PATH_FIELDS:
        if field_name in kwargs:
            kwargs[field_name] = _resolve(kwargs[field_name], base_dir)

    # Bare program names are looked up on PATH, so only anchor real paths.
    executable = str(kwargs["executable"])
    if "/" in executable or "\\" in executable:
        kwargs["executable"] = str(_resolve(executable, base_dir))

    return RunConfiguration(**kwargs)


def _resolve(value, base_dir: Path) -> Path:
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def _require_fields(
    data: dict, fields: dict[str, str], context: str, source: str
) -> None:
    """Check that required fields exist in a dictionary.

    ``fields`` maps dataclass field names to the YAML key shown in errors.
    """
    for field_name, key in fields.items():
        if field_name not in data:
            raise ValueError(
                f"Missing required field '{key}' in {context} ({source})"
            )


def _require_type(
    value, field_name: str, types: tuple, description: str, context: str, source: str
) -> None:
    """Check a field's YAML type. Booleans only count where ``bool`` is listed."""
    if isinstance(value, bool) and bool not in types:
        valid = False
    else:
        valid = isinstance(value, types)
    if not valid:
        raise ValueError(
            f"'{field_name}' must be {description} in {context} ({source}), got {value!r}"
        )
