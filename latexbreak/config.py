from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from re import Pattern
from typing import Optional

from .errors import ConfigError
from .models import BreakMode, MacroBreak

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "latexbreak.config"
CONFIG_ENV_VAR = "LATEXBREAK_CONFIG"

_TRUE_WORDS = {"true", "yes", "on", "1"}
_FALSE_WORDS = {"false", "no", "off", "0"}

_MACRO_KEYS = {
    "break_around_macro": BreakMode.AROUND,
    "break_after_macro": BreakMode.AFTER,
    "break_before_macro": BreakMode.BEFORE,
}
_BOOL_KEYS = {"remove_newlines", "break_after_sentences"}
_PATTERN_KEYS = {
    "begin_protect",
    "end_protect",
    "protect_break_after",
    "protect_break_before",
    "begin_protect_sentences",
    "end_protect_sentences",
    "begin_protect_sentences_inline",
    "end_protect_sentences_inline",
}


@dataclass(frozen=True)
class BreakConfig:
    macro_breaks: tuple[MacroBreak, ...] = ()
    remove_newlines: bool = True
    break_after_sentences: bool = True
    # verbatim regions
    begin_protect: Optional[Pattern[str]] = None
    end_protect: Optional[Pattern[str]] = None
    # soft line breaks kept after / before matching lines
    protect_break_after: Optional[Pattern[str]] = None
    protect_break_before: Optional[Pattern[str]] = None
    # block math
    begin_protect_sentences: Optional[Pattern[str]] = None
    end_protect_sentences: Optional[Pattern[str]] = None
    # inline math
    begin_protect_sentences_inline: Optional[Pattern[str]] = None
    end_protect_sentences_inline: Optional[Pattern[str]] = None
    line_ends: frozenset[str] = field(default_factory=lambda: frozenset(".!?"))
    sentence_separator: Optional[str] = None
    newline: str = "\n"


def _parse_bool(key: str, value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE_WORDS:
        return True
    if v in _FALSE_WORDS:
        return False
    raise ConfigError(f"{key}: expected a boolean, got {value!r}")


def _compile(key: str, value: str) -> Pattern[str]:
    try:
        return re.compile(value)
    except re.error as e:
        raise ConfigError(f"{key}: invalid pattern {value!r}: {e}") from e


def _split_values(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


def parse_config(text: str, base: Optional[BreakConfig] = None) -> BreakConfig:
    """
    Parse `key: value` configuration lines.

    Lines starting with '#' and blank lines are ignored. Macro lists accumulate
    in the order they appear, every other key is last-wins.
    """
    base = base or BreakConfig()
    macro_breaks: list[MacroBreak] = list(base.macro_breaks)
    values: dict = {}

    for lineno, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition(":")
        if not sep:
            raise ConfigError(f"line {lineno}: missing ':' in {raw!r}")
        key = key.strip()
        value = value.strip()

        if key in _MACRO_KEYS:
            for name in _split_values(value):
                _compile(key, name)
                macro_breaks.append(MacroBreak(name=name, mode=_MACRO_KEYS[key]))
        elif key in _BOOL_KEYS:
            values[key] = _parse_bool(key, value)
        elif key in _PATTERN_KEYS:
            values[key] = _compile(key, value) if value else None
        elif key == "line_ends":
            ends = _split_values(value)
            bad = [e for e in ends if len(e) != 1]
            if bad:
                raise ConfigError(f"line_ends: entries must be single characters, got {bad}")
            values[key] = frozenset(ends)
        elif key == "sentence_separator":
            values[key] = value or None
        else:
            raise ConfigError(f"line {lineno}: unknown key {key!r}")

    return replace(base, macro_breaks=tuple(macro_breaks), **values)


def default_config_path() -> Path:
    env = (os.environ.get(CONFIG_ENV_VAR) or "").strip()
    if env:
        return Path(env).expanduser()
    return Path.cwd() / CONFIG_FILE_NAME


def load_config(path: str | Path | None = None) -> BreakConfig:
    p = Path(path) if path is not None else default_config_path()
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config {p}: {e}") from e
    cfg = parse_config(text)
    logger.debug("Loaded %d macro rules from %s", len(cfg.macro_breaks), p)
    return cfg
