# trapper/app/info.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_INFO_RE = re.compile(
    r"processed:\s*(?P<processed>\d+);\s*"
    r"failed:\s*(?P<failed>\d+);\s*"
    r"total:\s*(?P<total>\d+)"
    r"(?:;\s*seconds spent:\s*(?P<seconds>[0-9.eE+-]+))?"
)


@dataclass(frozen=True)
class SenderInfo:
    processed: int
    failed: int
    total: int
    seconds_spent: Optional[float] = None


def parse_info(info: Optional[str]) -> Optional[SenderInfo]:
    """
    Split a collector info string into counters.

    "processed: 2; failed: 0; total: 2; seconds spent: 0.000055" ->
    SenderInfo(2, 0, 2, 5.5e-05). Returns None when info has another shape.
    """
    if not info:
        return None
    m = _INFO_RE.search(info)
    if m is None:
        return None
    seconds = m.group("seconds")
    return SenderInfo(
        processed=int(m.group("processed")),
        failed=int(m.group("failed")),
        total=int(m.group("total")),
        seconds_spent=float(seconds) if seconds is not None else None,
    )
