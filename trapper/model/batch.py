# trapper/model/batch.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from trapper.core.errors import ArgumentError
from .sample import Sample, check_clock, check_ns


@dataclass(frozen=True)
class Batch:
    """
    Ordered, non-empty set of samples submitted in one frame.

    clock/ns apply to the whole submission and are passed through as-is;
    how the collector merges them with per-sample timestamps is its business.
    """

    samples: Tuple[Sample, ...]
    clock: Optional[int] = None
    ns: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.samples, tuple):
            object.__setattr__(self, "samples", tuple(self.samples))
        if not self.samples:
            raise ArgumentError("Batch of samples cannot be empty")
        for i, s in enumerate(self.samples):
            if not isinstance(s, Sample):
                raise ArgumentError(f"Batch item {i} is not a Sample: {type(s).__name__}")
        check_clock(self.clock, what="batch clock")
        check_ns(self.ns, what="batch ns")

    @classmethod
    def of(cls, samples: Iterable[Sample], clock: Optional[int] = None, ns: Optional[int] = None) -> "Batch":
        if samples is None:
            raise ArgumentError("Batch of samples cannot be None")
        if isinstance(samples, Sample):
            samples = (samples,)
        return cls(samples=tuple(samples), clock=clock, ns=ns)

    def __len__(self) -> int:
        return len(self.samples)
