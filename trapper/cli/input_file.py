# trapper/cli/input_file.py
from __future__ import annotations

import shlex
from typing import Iterable, List, Optional

from trapper.core.errors import ArgumentError
from trapper.model import Sample


def parse_input_line(
    line: str,
    *,
    with_timestamps: bool = False,
    with_ns: bool = False,
    default_host: Optional[str] = None,
) -> Sample:
    """
    Parse one input line into a Sample.

    Layouts:
        <host> <key> <value>
        <host> <key> <clock> <value>          (with_timestamps)
        <host> <key> <clock> <ns> <value>     (with_timestamps + with_ns)

    A host of "-" stands for default_host.
    """
    try:
        parts = shlex.split(line)
    except ValueError as e:
        raise ArgumentError(f"Cannot parse input line {line!r}: {e}") from None

    expected = 3 + int(with_timestamps) + int(with_timestamps and with_ns)
    if len(parts) != expected:
        raise ArgumentError(
            f"Expected {expected} fields, got {len(parts)}: {line!r}",
            hint="Quote values that contain spaces.",
        )

    host, key = parts[0], parts[1]
    if host == "-":
        if not default_host:
            raise ArgumentError(f"Line uses '-' as host but no default host is set: {line!r}")
        host = default_host

    clock = ns = None
    if with_timestamps:
        clock = _to_int(parts[2], "clock", line)
        if with_ns:
            ns = _to_int(parts[3], "ns", line)

    return Sample(host, key, parts[-1], clock=clock, ns=ns)


def read_input(
    lines: Iterable[str],
    *,
    with_timestamps: bool = False,
    with_ns: bool = False,
    default_host: Optional[str] = None,
) -> List[Sample]:
    samples: List[Sample] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            samples.append(
                parse_input_line(
                    line,
                    with_timestamps=with_timestamps,
                    with_ns=with_ns,
                    default_host=default_host,
                )
            )
        except ArgumentError as e:
            raise ArgumentError(f"line {lineno}: {e.message}", hint=e.hint) from None
    return samples


def _to_int(text: str, what: str, line: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ArgumentError(f"Invalid {what} {text!r} in line {line!r}") from None
