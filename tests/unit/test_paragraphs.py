import re

from latexbreak.config import BreakConfig
from latexbreak.models import Line
from latexbreak.paragraphs import merge_paragraphs, remove_duplicate_blank_lines

CFG = BreakConfig(
    protect_break_after=re.compile(r"\\\\$"),
    protect_break_before=re.compile(r"^\\item"),
)


def _lines(*rows):
    return [Line(content=r) for r in rows]


def _contents(lines):
    return [ln.content for ln in lines]


def test_remove_duplicate_blank_lines():
    out = remove_duplicate_blank_lines(_lines("a", "", "", "", "b", ""))
    assert _contents(out) == ["a", "", "b", ""]


def test_protected_blank_line_is_kept():
    lines = [Line(content=""), Line(content="", protect=True), Line(content="x")]
    assert remove_duplicate_blank_lines(lines) == lines


def test_merge_soft_line_breaks():
    out = merge_paragraphs(_lines("This is", "a paragraph.", "", "Next"), CFG)
    assert _contents(out) == ["This is a paragraph.", "", "Next"]


def test_merge_chains_whole_paragraph():
    assert _contents(merge_paragraphs(_lines("a", "b", "c"), CFG)) == ["a b c"]


def test_line_with_comment_is_not_merged_forward():
    rows = ("text % note", "more")
    assert _contents(merge_paragraphs(_lines(*rows), CFG)) == list(rows)


def test_escaped_percent_is_not_a_comment():
    out = merge_paragraphs(_lines("50\\% of", "all"), CFG)
    assert _contents(out) == ["50\\% of all"]


def test_comment_line_is_not_merged_into_previous():
    lines = [Line(content="text"), Line(content="% c", line_comment=True)]
    assert merge_paragraphs(lines, CFG) == lines


def test_protect_break_after_and_before():
    assert _contents(merge_paragraphs(_lines("a \\\\", "b"), CFG)) == ["a \\\\", "b"]
    assert _contents(merge_paragraphs(_lines("a", "\\item b"), CFG)) == ["a", "\\item b"]


def test_protected_lines_are_not_merged():
    lines = [Line(content="a"), Line(content="b", protect=True), Line(content="c")]
    assert merge_paragraphs(lines, CFG) == lines


def test_merge_without_guards_configured():
    out = merge_paragraphs(_lines("a \\\\", "\\item b"), BreakConfig())
    assert _contents(out) == ["a \\\\ \\item b"]
