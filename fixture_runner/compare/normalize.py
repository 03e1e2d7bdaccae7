"""Output normalization applied before comparison."""

from pathlib import Path

# ASCII whitespace, the set matched by \s in grep
BLANK_CHARS = " \t\n\r\v\f"


def is_blank(line: str) -> bool:
    """Whether a line is empty or consists solely of ASCII whitespace."""
    return not line.strip(BLANK_CHARS)


def normalize_lines(text: str) -> list[str]:
    """Split text into lines and drop the blank ones.

    Lines end at ``\\n``; a ``\\r`` before it is dropped so CRLF text compares
    equal to LF text, while a lone ``\\r`` stays part of its line. The
    remaining lines keep their order and content, including any inner or
    trailing whitespace.
    """
    lines = (line[:-1] if line.endswith("\r") else line for line in text.split("\n"))
    return [line for line in lines if not is_blank(line)]


def read_normalized(path: Path) -> list[str]:
    """Read a file and return its normalized lines.

    Undecodable bytes become U+FFFD.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return normalize_lines(f.read())
