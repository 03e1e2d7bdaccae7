"""Tests for running the program under test."""

import pytest

from fixture_runner.runner.process import run_program


def test_stdout_captured_to_file(tmp_path, write_program):
    command = write_program("import sys\nsys.stdout.write(sys.stdin.read().upper())\n")
    input_path = tmp_path / "in.txt"
    input_path.write_text("abc\n")
    output_path = tmp_path / "out" / "res.txt"

    outcome = run_program(command, input_path, output_path)

    assert outcome.exit_code == 0
    assert output_path.read_text() == "ABC\n"


def test_existing_output_is_overwritten(tmp_path, write_program):
    command = write_program("print('new')")
    input_path = tmp_path / "in.txt"
    input_path.write_text("")
    output_path = tmp_path / "res.txt"
    output_path.write_text("old output that is much longer\n")

    run_program(command, input_path, output_path)

    assert output_path.read_text() == "new\n"


def test_exit_code_and_stderr_reported(tmp_path, write_program):
    command = write_program("import sys\nprint('partial')\nsys.stderr.write('boom\\n')\nsys.exit(3)\n")
    input_path = tmp_path / "in.txt"
    input_path.write_text("")
    output_path = tmp_path / "res.txt"

    outcome = run_program(command, input_path, output_path)

    assert outcome.exit_code == 3
    assert "boom" in outcome.stderr
    assert set(vars(outcome)) == {"exit_code", "stderr"}
    assert output_path.read_text() == "partial\n"


def test_missing_input_raises_file_not_found(tmp_path, write_program):
    command = write_program("print('x')")
    with pytest.raises(FileNotFoundError):
        run_program(command, tmp_path / "nope.txt", tmp_path / "res.txt")
    assert not (tmp_path / "res.txt").exists()


def test_unlaunchable_program_raises_runtime_error(tmp_path):
    input_path = tmp_path / "in.txt"
    input_path.write_text("")
    with pytest.raises(RuntimeError, match="Failed to launch"):
        run_program([str(tmp_path / "missing-binary")], input_path, tmp_path / "res.txt")


def test_timeout_raises_timeout_error(tmp_path, write_program):
    command = write_program("import time\ntime.sleep(30)\n")
    input_path = tmp_path / "in.txt"
    input_path.write_text("")
    output_path = tmp_path / "res.txt"

    with pytest.raises(TimeoutError):
        run_program(command, input_path, output_path, timeout=0.5)

    assert output_path.exists()


def test_launch_failure_removes_previous_output(tmp_path):
    input_path = tmp_path / "in.txt"
    input_path.write_text("")
    output_path = tmp_path / "res.txt"
    output_path.write_text("from an earlier run\n")

    with pytest.raises(RuntimeError):
        run_program([str(tmp_path / "missing-binary")], input_path, output_path)

    assert not output_path.exists()
