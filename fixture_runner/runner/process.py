"""Subprocess invocation for the program under test."""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class ProcessOutcome:
    """What the program did with one input."""
    exit_code: int
    stderr: str


def run_program(
    command: list[str],
    input_path: Path,
    output_path: Path,
    timeout: Optional[float] = None,
) -> ProcessOutcome:
    """Run a program with a file on stdin and save its stdout to a file.

    Standard output is captured in full and written to ``output_path`` as raw
    bytes, replacing any previous file.

    Args:
        command: Program and arguments.
        input_path: File fed to the program's stdin.
        output_path: File the captured stdout is written to.
        timeout: Seconds before the program is killed. None = wait forever.

    Returns:
        ProcessOutcome with exit code and stderr.

    Raises:
        FileNotFoundError: If the input file doesn't exist.
        RuntimeError: If the program cannot be launched. Any previous
            ``output_path`` is removed.
        TimeoutError: If the program runs past ``timeout``. Output captured
            before the kill is still written.
    """
    with open(input_path, "rb") as stdin:
        try:
            proc = subprocess.run(
                command,
                stdin=stdin,
                capture_output=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as e:
            _write_output(output_path, e.stdout or b"")
            raise TimeoutError(
                f"Program timed out after {timeout}s"
            ) from e
        except OSError as e:
            Path(output_path).unlink(missing_ok=True)
            raise RuntimeError(
                f"Failed to launch {command[0]}: {e}"
            ) from e

    _write_output(output_path, proc.stdout)

    return ProcessOutcome(
        exit_code=proc.returncode,
        stderr=proc.stderr.decode("utf-8", errors="replace"),
    )


def _write_output(output_path: Path, data: bytes) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wb") as f:
        f.write(data)
