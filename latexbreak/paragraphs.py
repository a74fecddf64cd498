from __future__ import annotations

import logging
from re import Pattern
from typing import Optional

from .grammar import has_comment
from .models import Line

logger = logging.getLogger(__name__)


def _matches(pattern: Optional[Pattern[str]], content: str) -> bool:
    return pattern is not None and pattern.search(content) is not None


def remove_duplicate_blank_lines(lines: list[Line]) -> list[Line]:
    out: list[Line] = []
    prev_blank = False
    for ln in lines:
        blank = ln.is_blank()
        if blank and prev_blank and not ln.protect:
            continue
        out.append(ln)
        prev_blank = blank
    dropped = len(lines) - len(out)
    if dropped:
        logger.debug("Dropped %d duplicate blank lines", dropped)
    return out


def _can_merge(first: Line, second: Line, cfg) -> bool:
    if first.is_blank() or second.is_blank():
        return False
    if first.protect or second.protect:
        return False
    if _matches(cfg.protect_break_after, first.content):
        return False
    if _matches(cfg.protect_break_before, second.content):
        return False
    # A comment would swallow whatever is appended to it.
    if has_comment(first.content):
        return False
    return not second.line_comment


def merge_paragraphs(lines: list[Line], cfg) -> list[Line]:
    """
    Remove soft line breaks inside paragraphs.

    Adjacent lines are joined with a single space until a blank line, a
    protected line, a comment or a configured break guard stops the run.
    """
    out = list(lines)
    merged = 0
    i = 0
    while i < len(out) - 1:
        first, second = out[i], out[i + 1]
        if _can_merge(first, second, cfg):
            out[i] = first.replace(content=(first.content + " " + second.content).strip())
            del out[i + 1]
            merged += 1
        else:
            i += 1
    logger.debug("Merged %d soft line breaks", merged)
    return out
