from __future__ import annotations


class LatexBreakError(Exception):
    """Base class for every error raised by latexbreak."""


class ConfigError(LatexBreakError, ValueError):
    """The configuration could not be parsed or holds an invalid value."""


class UnbalancedRegionError(LatexBreakError):
    """An end marker was seen while no region was open."""

    def __init__(self, line_number: int, content: str):
        self.line_number = line_number
        self.content = content
        super().__init__(f"unbalanced region end marker at line {line_number}: {content!r}")


class GrammarInvariantError(LatexBreakError):
    """The comment-split grammar failed to match a line."""
