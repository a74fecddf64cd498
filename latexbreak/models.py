from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Line(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str
    protect: bool = False  # inside a verbatim region
    protect_sentences: bool = False  # inside a block-math region
    line_comment: bool = False  # comment-only line

    def is_blank(self) -> bool:
        return not self.content.strip()

    def replace(self, **changes) -> "Line":
        return self.model_copy(update=changes)

    def __str__(self) -> str:
        return self.content


class BreakMode(str, Enum):
    AROUND = "around"
    AFTER = "after"
    BEFORE = "before"


class MacroBreak(BaseModel):
    """A configured macro name and where line breaks go relative to it."""

    model_config = ConfigDict(frozen=True)

    name: str
    mode: BreakMode


def lines_from_strings(rows) -> list[Line]:
    return [Line(content=r) for r in rows]
