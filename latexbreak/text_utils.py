from __future__ import annotations

import re

from .models import Line

COMMENT_MARKER = "%"

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


def split_rows(text: str) -> list[str]:
    """Split on line breaks only; a final line break does not start another row."""
    rows = _NEWLINE_RE.split(text)
    if rows[-1] == "":
        rows.pop()
    return rows


def is_comment_text(s: str) -> bool:
    return s.strip().startswith(COMMENT_MARKER)


def trim_lines(lines: list[Line]) -> list[Line]:
    return [ln if ln.protect else ln.replace(content=ln.content.strip()) for ln in lines]


def mark_comment_lines(lines: list[Line]) -> list[Line]:
    return [ln.replace(line_comment=True) if is_comment_text(ln.content) else ln for ln in lines]


def _collapse_spaces(s: str) -> str:
    while "  " in s:
        s = s.replace("  ", " ")
    return s


def collapse_double_spaces(lines: list[Line]) -> list[Line]:
    out: list[Line] = []
    for ln in lines:
        if ln.protect or "  " not in ln.content:
            out.append(ln)
        else:
            out.append(ln.replace(content=_collapse_spaces(ln.content)))
    return out


def join_lines(lines: list[Line], newline: str = "\n") -> str:
    return "".join(ln.content + newline for ln in lines)
