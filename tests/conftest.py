import sys
import textwrap
from pathlib import Path

import pytest

from fixture_runner.suite.schema import RunConfiguration

SORT_PROGRAM = """
import sys
numbers = sorted(int(tok) for tok in sys.stdin.read().split())
print(" ".join(map(str, numbers)))
"""

ECHO_PROGRAM = """
import sys
sys.stdout.write(sys.stdin.read())
"""


@pytest.fixture
def write_program(tmp_path):
    """Write a Python script and return the argv prefix that runs it."""
    def _write(source: str, name: str = "program.py") -> list[str]:
        path = tmp_path / name
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return [sys.executable, str(path)]
    return _write


@pytest.fixture
def fixture_dir(tmp_path) -> Path:
    path = tmp_path / "fixtures"
    path.mkdir()
    return path


@pytest.fixture
def work_dir(tmp_path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def write_fixture(fixture_dir):
    """Write input<i>.txt and/or output<i>.txt into the fixture directory."""
    def _write(index: int, input_text=None, expected_text=None) -> None:
        if input_text is not None:
            (fixture_dir / f"input{index}.txt").write_text(input_text, encoding="utf-8")
        if expected_text is not None:
            (fixture_dir / f"output{index}.txt").write_text(expected_text, encoding="utf-8")
    return _write


@pytest.fixture
def make_config(fixture_dir, work_dir):
    """Build a RunConfiguration around a program argv."""
    def _make(command: list[str], count: int, **kwargs) -> RunConfiguration:
        return RunConfiguration(
            executable=command[0],
            args=command[1:],
            fixture_dir=fixture_dir,
            count=count,
            work_dir=work_dir,
            **kwargs,
        )
    return _make
