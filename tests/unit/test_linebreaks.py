from latexbreak.grammar import MacroRule
from latexbreak.linebreaks import insert_linebreaks, rewrite_content
from latexbreak.models import BreakMode, Line


def _contents(lines):
    return [ln.content for ln in lines]


def test_rewrite_leaves_comment_alone():
    rules = [MacroRule("bar", BreakMode.AROUND)]
    assert rewrite_content("foo \\bar{1} % \\bar{2}", rules) == "foo \n\\bar{1}\n % \\bar{2}"


def test_comment_suffix_becomes_comment_line():
    rules = [MacroRule("bar", BreakMode.AROUND)]
    out = insert_linebreaks([Line(content="foo \\bar{1} % \\bar{2}")], rules)
    assert _contents(out) == ["foo", "\\bar{1}", "% \\bar{2}"]
    assert [ln.line_comment for ln in out] == [False, False, True]


def test_no_new_blank_lines():
    rules = [MacroRule("section", BreakMode.AROUND)]
    out = insert_linebreaks([Line(content="\\section{A}")], rules)
    assert _contents(out) == ["\\section{A}"]


def test_rules_apply_in_order():
    rules = [MacroRule("item", BreakMode.BEFORE), MacroRule("label", BreakMode.AFTER)]
    out = insert_linebreaks([Line(content="\\item a \\label{x} b")], rules)
    assert _contents(out) == ["\\item a \\label{x}", "b"]


def test_skips_blank_protected_and_comment_lines():
    rules = [MacroRule("bar", BreakMode.AROUND)]
    lines = [
        Line(content=""),
        Line(content="  x \\bar{1} y", protect=True),
        Line(content="% \\bar{1} y", line_comment=True),
    ]
    assert insert_linebreaks(lines, rules) == lines


def test_pieces_keep_math_flag():
    rules = [MacroRule("bar", BreakMode.BEFORE)]
    out = insert_linebreaks([Line(content="a \\bar{1}", protect_sentences=True)], rules)
    assert _contents(out) == ["a", "\\bar{1}"]
    assert all(ln.protect_sentences for ln in out)


def test_guarded_macro_is_untouched():
    rules = [MacroRule("part", BreakMode.AROUND)]
    out = insert_linebreaks([Line(content="We use \\partial{x} and \\part{1} here.")], rules)
    assert _contents(out) == ["We use \\partial{x} and", "\\part{1}", "here."]
