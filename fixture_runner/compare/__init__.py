"""Compare module - output normalization and line diffs."""

from .diff import (
    DiffHunk,
    LineDiff,
    compute_diff,
    format_normal,
    format_unified,
    render_diff,
)
from .normalize import is_blank, normalize_lines, read_normalized

__all__ = [
    "DiffHunk",
    "LineDiff",
    "compute_diff",
    "format_normal",
    "format_unified",
    "render_diff",
    "is_blank",
    "normalize_lines",
    "read_normalized",
]
