"""Line-level diff between expected and actual output.

Produces a structured diff from ``difflib.SequenceMatcher`` opcodes and
renders it either in the classic ``diff`` normal format::

    1c1
    < 5
    ---
    > 4

or as a unified diff.
"""

import difflib
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DiffHunk:
    """One change between the expected and actual line sequences.

    Ranges are 1-based and inclusive. For an add, ``old_start`` is the
    expected line the new lines follow (0 when they go first) and the old
    range is empty; deletes mirror this on the actual side.
    """
    kind: str  # "a", "d" or "c"
    old_start: int
    old_end: int
    new_start: int
    new_end: int
    removed: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)

    def header(self) -> str:
        if self.kind == "a":
            return f"{self.old_start}a{_range(self.new_start, self.new_end)}"
        if self.kind == "d":
            return f"{_range(self.old_start, self.old_end)}d{self.new_start}"
        return f"{_range(self.old_start, self.old_end)}c{_range(self.new_start, self.new_end)}"


@dataclass
class LineDiff:
    """All hunks between two line sequences."""
    hunks: list[DiffHunk] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.hunks

    @property
    def removed_count(self) -> int:
        return sum(len(h.removed) for h in self.hunks)

    @property
    def added_count(self) -> int:
        return sum(len(h.added) for h in self.hunks)


_OPCODE_KINDS = {"replace": "c", "delete": "d", "insert": "a"}


def compute_diff(expected: list[str], actual: list[str]) -> LineDiff:
    """Compute the line diff turning ``expected`` into ``actual``."""
    matcher = difflib.SequenceMatcher(None, expected, actual, autojunk=False)
    diff = LineDiff()

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        kind = _OPCODE_KINDS[tag]
        if kind == "a":
            old_start, old_end = i1, i1
        else:
            old_start, old_end = i1 + 1, i2
        if kind == "d":
            new_start, new_end = j1, j1
        else:
            new_start, new_end = j1 + 1, j2
        diff.hunks.append(DiffHunk(
            kind=kind,
            old_start=old_start,
            old_end=old_end,
            new_start=new_start,
            new_end=new_end,
            removed=list(expected[i1:i2]),
            added=list(actual[j1:j2]),
        ))

    return diff


def format_normal(diff: LineDiff) -> str:
    """Render a diff in normal format. Empty diff renders as ''."""
    lines: list[str] = []
    for hunk in diff.hunks:
        lines.append(hunk.header())
        lines.extend(f"< {line}" for line in hunk.removed)
        if hunk.kind == "c":
            lines.append("---")
        lines.extend(f"> {line}" for line in hunk.added)
    return "\n".join(lines)


def format_unified(
    expected: list[str],
    actual: list[str],
    fromfile: str = "expected",
    tofile: str = "actual",
    context: int = 3,
) -> str:
    """Render the difference between two line sequences as a unified diff."""
    return "\n".join(difflib.unified_diff(
        expected,
        actual,
        fromfile=fromfile,
        tofile=tofile,
        n=context,
        lineterm="",
    ))


def render_diff(
    expected: list[str],
    actual: list[str],
    diff_format: str = "normal",
    labels: Optional[tuple[str, str]] = None,
) -> str:
    """Diff two normalized line sequences and render the result.

    Returns '' when the sequences are identical, whatever the format.
    """
    diff = compute_diff(expected, actual)
    if diff.is_empty:
        return ""
    if diff_format == "unified":
        fromfile, tofile = labels or ("expected", "actual")
        return format_unified(expected, actual, fromfile=fromfile, tofile=tofile)
    return format_normal(diff)


def _range(start: int, end: int) -> str:
    if start == end:
        return str(start)
    return f"{start},{end}"
