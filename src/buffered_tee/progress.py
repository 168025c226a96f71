"""Background ticker that rate-limits progress marks on the status stream."""

from __future__ import annotations

import queue
import threading
from typing import Optional

from .logging_utils import get_logger

DEFAULT_TICK_INTERVAL = 0.125


class TickSignal:
    """Single-slot signal: at most one pending tick, consumed without blocking."""

    def __init__(self) -> None:
        self._slot: queue.Queue[bool] = queue.Queue(maxsize=1)

    def signal(self) -> None:
        try:
            self._slot.put_nowait(True)
        except queue.Full:
            pass

    def consume(self) -> bool:
        try:
            return self._slot.get_nowait()
        except queue.Empty:
            return False


class ProgressTicker:
    """Raise a tick every ``interval`` seconds from a background thread.

    The consuming stage calls :meth:`consume_tick` as often as it likes and
    renders a progress mark only when it returns True, so fast I/O never
    produces more than one mark per interval. The tick is raised as soon as
    the ticker starts, so the first consumption is always visible.
    """

    def __init__(self, interval: float = DEFAULT_TICK_INTERVAL):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.interval = interval
        self.logger = get_logger("ProgressTicker")
        self._ticked = TickSignal()
        self._must_stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("ProgressTicker has already been started")
        self._ticked.signal()
        self._thread = threading.Thread(
            target=self._run, name="progress-ticker", daemon=True
        )
        self._thread.start()
        self.logger.debug("Progress ticker started (interval %.3fs)", self.interval)

    def _run(self) -> None:
        while not self._must_stop.wait(self.interval):
            self._ticked.signal()

    def consume_tick(self) -> bool:
        return self._ticked.consume()

    def stop(self) -> None:
        self._must_stop.set()
        if self._thread is not None:
            self._thread.join()
            self.logger.debug("Progress ticker stopped")

    def __enter__(self) -> "ProgressTicker":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
