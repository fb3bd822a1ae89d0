# trapper/model/sample.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from trapper.core.errors import ArgumentError

NS_MAX = 999_999_999
CLOCK_MIN = -(1 << 63)
CLOCK_MAX = (1 << 63) - 1


def check_clock(clock: Any, *, what: str = "clock") -> Optional[int]:
    if clock is None:
        return None
    if isinstance(clock, bool) or not isinstance(clock, int):
        raise ArgumentError(f"{what} must be an int, got {type(clock).__name__}")
    if not CLOCK_MIN <= clock <= CLOCK_MAX:
        raise ArgumentError(f"{what}={clock} does not fit in a signed 64-bit integer")
    return clock


def check_ns(ns: Any, *, what: str = "ns") -> Optional[int]:
    if ns is None:
        return None
    if isinstance(ns, bool) or not isinstance(ns, int):
        raise ArgumentError(f"{what} must be an int, got {type(ns).__name__}")
    if not 0 <= ns <= NS_MAX:
        raise ArgumentError(
            f"{what}={ns} out of range",
            hint=f"Nanoseconds must be between 0 and {NS_MAX:,}",
        )
    return ns


@dataclass(frozen=True)
class Sample:
    """
    One metric observation addressed to a host/key pair.

    Immutable: timestamps are attached with with_clock()/with_ns(), which
    return a new Sample and leave this one untouched.

    Attributes:
        host: Monitored host name as registered on the collector.
        key: Item key as registered on the collector.
        value: Item value; numbers are carried in their str() form.
        clock: Optional Unix timestamp (seconds).
        ns: Optional nanoseconds part of the timestamp (0..999_999_999).
    """

    host: str
    key: str
    value: str
    clock: Optional[int] = None
    ns: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("host", "key"):
            v = getattr(self, name)
            if not isinstance(v, str) or not v:
                raise ArgumentError(f"Sample {name} must be a non-empty string, got {v!r}")

        value = self.value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            object.__setattr__(self, "value", str(value))
        elif not isinstance(value, str):
            raise ArgumentError(f"Sample value must be a string, got {type(value).__name__}")

        for name in ("host", "key", "value"):
            try:
                getattr(self, name).encode("utf-8")
            except UnicodeEncodeError as e:
                raise ArgumentError(f"Sample {name} is not encodable as UTF-8: {e.reason}") from None

        check_clock(self.clock)
        check_ns(self.ns)

    def with_clock(self, clock: int) -> "Sample":
        return replace(self, clock=check_clock(clock))

    def with_ns(self, ns: int) -> "Sample":
        return replace(self, ns=check_ns(ns))

    def with_timestamp(self, clock: int, ns: Optional[int] = None) -> "Sample":
        return replace(self, clock=check_clock(clock), ns=check_ns(ns))

    def as_dict(self) -> Dict[str, Any]:
        """Wire form; unset timestamp fields are left out entirely."""
        out: Dict[str, Any] = {"host": self.host, "key": self.key, "value": self.value}
        if self.clock is not None:
            out["clock"] = self.clock
        if self.ns is not None:
            out["ns"] = self.ns
        return out

    def __repr__(self) -> str:
        parts = [f"host={self.host!r}", f"key={self.key!r}", f"value={self.value!r}"]
        if self.clock is not None:
            parts.append(f"clock={self.clock}")
        if self.ns is not None:
            parts.append(f"ns={self.ns}")
        return f"Sample({', '.join(parts)})"
