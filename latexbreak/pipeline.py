from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from .config import BreakConfig
from .grammar import build_rules
from .linebreaks import insert_linebreaks
from .models import Line, lines_from_strings
from .paragraphs import merge_paragraphs, remove_duplicate_blank_lines
from .regions import mark_math, mark_verbatim
from .sentences import split_sentences
from .text_utils import collapse_double_spaces, join_lines, mark_comment_lines, split_rows, trim_lines

logger = logging.getLogger(__name__)


class LatexBreaker:
    """Runs the line-breaking passes over a LaTeX document.

    The pass order is fixed: verbatim regions are detected on the raw input,
    math regions only after macro line breaks have been inserted.
    """

    def __init__(self, cfg: Optional[BreakConfig] = None):
        self.cfg = cfg or BreakConfig()
        self.rules = build_rules(self.cfg.macro_breaks)

    def run(self, rows: Iterable[str]) -> list[Line]:
        cfg = self.cfg
        lines = lines_from_strings(rows)
        logger.debug("Processing %d lines with %d macro rules", len(lines), len(self.rules))

        lines = mark_verbatim(lines, cfg)
        lines = trim_lines(lines)
        lines = mark_comment_lines(lines)
        if cfg.remove_newlines:
            lines = remove_duplicate_blank_lines(lines)
            lines = merge_paragraphs(lines, cfg)
        lines = insert_linebreaks(lines, self.rules, cfg.newline)
        lines = mark_math(lines, cfg)
        if cfg.break_after_sentences:
            lines = split_sentences(lines, cfg)
        lines = trim_lines(lines)
        lines = collapse_double_spaces(lines)
        return lines

    def process(self, rows: Iterable[str]) -> str:
        return join_lines(self.run(rows), self.cfg.newline)

    def process_text(self, text: str) -> str:
        return self.process(split_rows(text))

    def process_file(self, path: str | Path) -> str:
        p = Path(path)
        return self.process_text(p.read_text(encoding="utf-8"))


def break_latex(text: str, cfg: Optional[BreakConfig] = None) -> str:
    return LatexBreaker(cfg).process_text(text)
