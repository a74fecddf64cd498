"""
Argument grammar and macro rewrite rules.

A macro invocation is `<lead>\\<name><args>` where `lead` is any character
except a backslash (or the start of the text, so `\\\\[4cm]` is not read as
`\\[`), `name` is a configured regular sub-expression and `args` is a run of
balanced `{...}` / `[...]` groups. Each bracket kind is balanced on its own:
square brackets inside a curly group are plain text and vice versa.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from .errors import GrammarInvariantError
from .models import BreakMode, MacroBreak

_CLOSERS = {"{": "}", "[": "]"}

# Everything up to the first '%' that is not written as '\%'.
_COMMENT_SPLIT_RE = re.compile(r"(?P<prefix>(?:[^%\\]|\\%|\\(?!%))*)(?P<suffix>(?:%.*)?)", re.DOTALL)

# A character that would extend a command name: \part -> \partial, \part*.
_CONTINUATION_RE = re.compile(r"[^\\\s\[{]")
_LEAD_RE = re.compile(r"(?P<lead>[^\\]|^)\\")
_NO_GUARD_SUFFIXES = ("[", "{", "\\")


def match_balanced(text: str, pos: int) -> Optional[int]:
    """Return the offset just past the group opened at `pos`, or None if it never closes."""
    if pos >= len(text) or text[pos] not in _CLOSERS:
        return None
    opener = text[pos]
    closer = _CLOSERS[opener]
    depth = 0
    for i in range(pos, len(text)):
        ch = text[i]
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return i + 1
    return None


def match_arguments(text: str, pos: int) -> int:
    """Consume consecutive balanced argument groups starting at `pos`."""
    while True:
        end = match_balanced(text, pos)
        if end is None:
            return pos
        pos = end


def split_comment(content: str) -> tuple[str, str]:
    m = _COMMENT_SPLIT_RE.fullmatch(content)
    if m is None:
        raise GrammarInvariantError(
            f"comment split does not match {content!r}, but it is supposed to match any string"
        )
    return m.group("prefix"), m.group("suffix")


def has_comment(content: str) -> bool:
    return bool(split_comment(content)[1])


@dataclass(frozen=True)
class MacroMatch:
    start: int
    end: int
    lead: str
    macro_start: int
    name_end: int
    name: str
    args: str


class MacroRule:
    def __init__(self, name: str, mode: BreakMode):
        self.name = name
        self.mode = BreakMode(mode)
        # The name is compiled on its own so its groups and backreferences
        # keep the numbering the user wrote.
        self._name = re.compile(name)
        self.has_guard = not name.endswith(_NO_GUARD_SUFFIXES)

    @classmethod
    def from_config(cls, macro: MacroBreak) -> "MacroRule":
        return cls(macro.name, macro.mode)

    def _continues(self, text: str, name_end: int) -> bool:
        return self.has_guard and _CONTINUATION_RE.match(text, name_end) is not None

    def is_guarded(self, text: str, macro_start: int) -> bool:
        """True when the macro at `macro_start` is only a prefix of a longer command name."""
        m = self._name.match(text, macro_start + 1)
        return m is not None and self._continues(text, m.end())

    def finditer(self, text: str) -> Iterator[MacroMatch]:
        # Matches consume their lead character, so the next search starts after
        # the previous invocation and its arguments.
        pos = 0
        while pos < len(text):
            head = _LEAD_RE.search(text, pos)
            if head is None:
                return
            name = self._name.match(text, head.end())
            if name is None:
                pos = head.start() + 1
                continue
            end = match_arguments(text, name.end())
            yield MacroMatch(
                start=head.start(),
                end=end,
                lead=head.group("lead"),
                macro_start=head.end() - 1,
                name_end=name.end(),
                name=name.group(0),
                args=text[name.end():end],
            )
            pos = end

    def render(self, m: MacroMatch, newline: str) -> str:
        before = newline if self.mode in (BreakMode.AROUND, BreakMode.BEFORE) else ""
        after = newline if self.mode in (BreakMode.AROUND, BreakMode.AFTER) else ""
        return f"{m.lead}{before}\\{m.name}{m.args}{after}"

    def apply(self, text: str, newline: str) -> str:
        out: list[str] = []
        last = 0
        for m in self.finditer(text):
            if self._continues(text, m.name_end):
                continue
            out.append(text[last:m.start])
            out.append(self.render(m, newline))
            last = m.end
        out.append(text[last:])
        return "".join(out)

    def __repr__(self) -> str:
        return f"MacroRule({self.name!r}, {self.mode.value!r})"


def build_rules(macro_breaks) -> list[MacroRule]:
    return [MacroRule.from_config(m) for m in macro_breaks]
