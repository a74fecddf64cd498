from __future__ import annotations

import logging
from typing import Sequence

from .grammar import MacroRule, split_comment
from .models import Line
from .text_utils import is_comment_text

logger = logging.getLogger(__name__)


def rewrite_content(content: str, rules: Sequence[MacroRule], newline: str = "\n") -> str:
    """Apply every rule, in order, to the part of `content` before its comment."""
    prefix, suffix = split_comment(content)
    for rule in rules:
        prefix = rule.apply(prefix, newline)
    return prefix + suffix


def insert_linebreaks(lines: list[Line], rules: Sequence[MacroRule], newline: str = "\n") -> list[Line]:
    out: list[Line] = []
    added = 0
    for ln in lines:
        if ln.is_blank() or ln.protect or ln.line_comment:
            out.append(ln)
            continue
        pieces = rewrite_content(ln.content, rules, newline).split(newline)
        kept = [p.strip() for p in pieces if p.strip()]
        # Rewrites never introduce new blank lines.
        for piece in kept:
            out.append(ln.replace(content=piece, line_comment=is_comment_text(piece)))
        added += len(kept) - 1
    logger.debug("Inserted %d line breaks", added)
    return out
