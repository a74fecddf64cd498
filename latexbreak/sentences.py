from __future__ import annotations

import logging
from re import Pattern
from typing import Optional

from .models import Line
from .text_utils import is_comment_text

logger = logging.getLogger(__name__)


def _prefix_length(pattern: Optional[Pattern[str]], content: str, i: int) -> int:
    """Length of the match of `pattern` at the start of content[i:], 0 if none."""
    if pattern is None:
        return 0
    m = pattern.match(content[i:])
    return m.end() if m else 0


def split_line(line: Line, cfg) -> list[Line]:
    """
    Split one line into sentences.

    A sentence ends at a configured line-end character followed by a space,
    unless it lies inside an inline math span.
    """
    content = line.content
    separator = cfg.sentence_separator
    out: list[Line] = []
    in_math = False
    last_end = -1
    i = 0
    while i < len(content):
        if in_math:
            n = _prefix_length(cfg.end_protect_sentences_inline, content, i)
            if n > 0:
                in_math = False
                i += n
                continue
        else:
            n = _prefix_length(cfg.begin_protect_sentences_inline, content, i)
            if n > 0:
                in_math = True
                i += n
                continue
            if content[i] in cfg.line_ends and i + 1 < len(content) and content[i + 1] == " ":
                out.append(line.replace(content=content[last_end + 1:i + 1].strip()))
                if separator:
                    out.append(line.replace(content=separator, line_comment=is_comment_text(separator)))
                last_end = i
        i += 1

    rest = content[last_end + 1:]
    if rest.strip():
        out.append(line.replace(content=rest.strip()))
    elif separator and last_end >= 0:
        # The line ended on a sentence boundary: drop its trailing separator.
        out.pop()
    return out


def split_sentences(lines: list[Line], cfg) -> list[Line]:
    out: list[Line] = []
    for ln in lines:
        if ln.protect or ln.protect_sentences or ln.is_blank() or ln.line_comment:
            out.append(ln)
        else:
            out.extend(split_line(ln, cfg))
    logger.debug("Sentence split: %d -> %d lines", len(lines), len(out))
    return out
