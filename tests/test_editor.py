import re

import pytest

from labtools.editor import LineEditor, Match, find_matches

TEXT = "Hello World.\nA second line full of text."


def test_new_splits_on_newline():
    editor = LineEditor(TEXT)
    assert editor.all_lines() == TEXT.split("\n")


def test_trailing_newline_keeps_empty_line():
    editor = LineEditor("a\n")
    assert editor.all_lines() == ["a", ""]


def test_all_lines_returns_copy():
    editor = LineEditor(TEXT)
    lines = editor.all_lines()
    lines.append("extra")
    assert editor.all_lines() == TEXT.split("\n")


def test_from_file_strips_terminators(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"one\r\ntwo\nthree\n")
    editor = LineEditor.from_file(path)
    assert editor.all_lines() == ["one", "two", "three"]


def test_from_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        LineEditor.from_file(tmp_path / "missing.txt")


def test_replace_span():
    editor = LineEditor(TEXT)
    editor.replace(0, 0, 5, "Howdy")
    assert editor.all_lines()[0] == "Howdy World."
    assert editor.all_lines()[1] == TEXT.split("\n")[1]


@pytest.mark.parametrize(
    "line, start, end",
    [(2, 0, 1), (-1, 0, 1), (0, 3, 2), (0, 0, 100)],
)
def test_replace_out_of_range_is_noop(line, start, end):
    editor = LineEditor(TEXT)
    editor.replace(line, start, end, "X")
    assert editor.all_lines() == TEXT.split("\n")


def test_match_repl_defaults_to_none():
    found = Match(line=0, start=2, end=4, text="ll")
    assert found.repl is None


def test_find_matches_spans_agree_with_text():
    lines = LineEditor(TEXT).all_lines()
    matches = find_matches(lines, "ll")
    assert {m.line for m in matches} == {0, 1}
    for m in matches:
        assert m.text == "ll"
        assert lines[m.line][m.start:m.end] == m.text
        assert m.repl is None


def test_find_matches_in_order():
    lines = LineEditor(TEXT).all_lines()
    matches = find_matches(lines, r"[a-z]+")
    keys = [(m.line, m.start) for m in matches]
    assert keys == sorted(keys)
    assert "".join(m.text for m in matches if m.line == 0) == "elloorld"


def test_find_matches_no_match():
    assert find_matches(["abc", "def"], "zz") == []


def test_find_matches_invalid_pattern():
    with pytest.raises(re.error):
        find_matches(["abc"], "(")


def test_find_and_replace_workflow():
    editor = LineEditor(TEXT)
    matches = find_matches(editor.all_lines(), "ll")
    for m in matches:
        m.repl = "some repl"

    for m in reversed(matches):
        if m.repl is not None:
            editor.replace(m.line, m.start, m.end, m.repl)

    result = editor.all_lines()
    assert all("ll" not in line for line in result)
    assert sum(line.count("some repl") for line in result) == len(matches)
    assert find_matches(result, "some repl")[0].line == 0