"""Tests for blank-line normalization."""

from fixture_runner.compare.normalize import is_blank, normalize_lines, read_normalized


def test_drops_empty_and_whitespace_lines():
    text = "1 2 3\n\n   \n\t\n4\n"
    assert normalize_lines(text) == ["1 2 3", "4"]


def test_preserves_order_and_inner_whitespace():
    text = "b  x\n\na \n c\n"
    assert normalize_lines(text) == ["b  x", "a ", " c"]


def test_trailing_blank_line_is_ignored():
    assert normalize_lines("1 2 3\n\n") == normalize_lines("1 2 3\n")
    assert normalize_lines("1 2 3") == ["1 2 3"]


def test_empty_text():
    assert normalize_lines("") == []
    assert normalize_lines("\n\n  \n") == []


def test_is_blank():
    assert is_blank("")
    assert is_blank(" \t ")
    assert not is_blank(" x ")


def test_read_normalized_handles_crlf_and_bad_bytes(tmp_path):
    path = tmp_path / "out.txt"
    path.write_bytes(b"5\r\n\r\n6\xff\n")
    assert read_normalized(path) == ["5", "6\ufffd"]


def test_only_ascii_whitespace_counts_as_blank():
    assert normalize_lines("a\n \n\u00a0\n\u3000\n \x0b\x0c\n") == ["a", "\u00a0", "\u3000"]
    assert not is_blank("\u00a0")


def test_lone_carriage_return_does_not_split_lines():
    assert normalize_lines("1\r2\n3\r\n") == ["1\r2", "3"]
