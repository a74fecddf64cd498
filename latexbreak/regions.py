from __future__ import annotations

import logging
from dataclasses import dataclass
from re import Pattern
from typing import Optional, Sequence

from .errors import UnbalancedRegionError
from .models import Line

logger = logging.getLogger(__name__)


@dataclass
class RegionScan:
    mask: list[bool]
    depth: int  # open regions left at the end of the document

    @property
    def balanced(self) -> bool:
        return self.depth == 0


def scan_regions(
    contents: Sequence[str],
    begin: Optional[Pattern[str]],
    end: Optional[Pattern[str]],
) -> RegionScan:
    """
    Tag every line that lies inside a begin/end region.

    The lines holding the begin and the end marker are inside the region.
    Regions may nest. An end marker seen at depth zero raises
    UnbalancedRegionError.
    """
    mask: list[bool] = []
    depth = 0
    for i, content in enumerate(contents):
        if begin is not None and begin.search(content):
            depth += 1
        mask.append(depth > 0)
        if end is not None and end.search(content):
            depth -= 1
            if depth < 0:
                raise UnbalancedRegionError(i + 1, content)
    return RegionScan(mask=mask, depth=depth)


def _classify(lines: list[Line], begin, end, flag: str, kind: str) -> list[Line]:
    if begin is None and end is None:
        return list(lines)
    scan = scan_regions([ln.content for ln in lines], begin, end)
    if not scan.balanced:
        logger.warning("%d %s region(s) still open at end of document", scan.depth, kind)
    logger.debug("%d lines inside %s regions", sum(scan.mask), kind)
    return [ln.replace(**{flag: True}) if inside else ln for ln, inside in zip(lines, scan.mask)]


def mark_verbatim(lines: list[Line], cfg) -> list[Line]:
    return _classify(lines, cfg.begin_protect, cfg.end_protect, "protect", "verbatim")


def mark_math(lines: list[Line], cfg) -> list[Line]:
    return _classify(
        lines, cfg.begin_protect_sentences, cfg.end_protect_sentences, "protect_sentences", "math"
    )
