"""Per-phase wall-clock timing and human readable durations."""

from __future__ import annotations

from contextlib import contextmanager
from time import perf_counter
from typing import Dict, Iterator

_UNITS = (
    (1e-6, 1e9, "ns"),
    (1e-3, 1e6, "us"),
    (1.0, 1e3, "ms"),
)


def format_duration(seconds: float) -> str:
    """Render ``seconds`` with a unit chosen by magnitude, e.g. ``12.5 ms``."""
    for limit, scale, unit in _UNITS:
        if seconds < limit:
            return f"{seconds * scale:.6g} {unit}"
    return f"{seconds:.6g} s"


class PhaseTimer:
    """Collects independent elapsed times keyed by phase name.

    Usage::

        timer = PhaseTimer()
        with timer.measure("ingest"):
            ...
        timer.timings  # {"ingest": 0.0123}

    A phase is recorded even when its body raises.
    """

    def __init__(self) -> None:
        self._timings: Dict[str, float] = {}

    @contextmanager
    def measure(self, phase: str) -> Iterator[None]:
        start = perf_counter()
        try:
            yield
        finally:
            self._timings[phase] = perf_counter() - start

    @property
    def timings(self) -> Dict[str, float]:
        return dict(self._timings)
