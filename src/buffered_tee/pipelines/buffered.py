"""Buffered tee pipeline: ingest everything, transform, then fan out."""

from __future__ import annotations

from time import perf_counter
from typing import BinaryIO, Optional

from ..config import TeeConfig
from ..line_store import LineStore
from ..logging_utils import get_logger
from ..progress import ProgressTicker
from ..status import StatusStream
from ..throttle import should_emit
from ..timing import PhaseTimer
from .base import TeeRunStats
from .fanout import write_sinks
from .ingest import ingest_sources
from .transform import TransformResult, transform_lines

EMPTY_INPUT_WARNING = (
    "Input feed is empty (no text lines read). We will SKIP writing the output files!"
)


class BufferedTeePipeline:
    def __init__(
        self,
        config: TeeConfig,
        status: Optional[StatusStream] = None,
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[BinaryIO] = None,
    ):
        self.config = config
        self.status = status or StatusStream()
        self.stdin = stdin
        self.stdout = stdout
        self.logger = get_logger("BufferedTeePipeline")

    def run(self) -> TeeRunStats:
        """Run every phase and return the stats; raises ``TeeError`` on open failures."""
        config = self.config
        show = config.shows_progress
        start = perf_counter()
        timer = PhaseTimer()
        store = LineStore()
        written = 0
        result = TransformResult(sorted=False)

        with ProgressTicker(config.tick_interval) as ticker:

            def render_tick() -> None:
                if ticker.consume_tick():
                    self.status.tick()

            def on_read(count: int) -> None:
                if show and should_emit(count, config.redux):
                    render_tick()

            def on_write(count: int, line: bytes) -> None:
                if config.quiet or not should_emit(count, config.redux):
                    return
                if config.show_progress:
                    render_tick()
                else:
                    self.status.echo(line, cleanup=config.cleanup)

            if show:
                self.status.notice("Reading from input files...")
            with timer.measure("ingest"):
                ingest_sources(
                    config.inputs,
                    store,
                    stdin=self.stdin,
                    on_line=on_read,
                )
            lines_read = len(store)

            if not store:
                if show:
                    self.status.warning(EMPTY_INPUT_WARNING)
            else:
                if show:
                    self.status.end_progress_row()

                if config.sort:
                    with timer.measure("transform"):
                        result = transform_lines(
                            store, sort=config.sort, unique=config.unique
                        )
                    if show:
                        self.status.notice("Sorted.")
                        if result.dropped is not None:
                            self.status.notice(
                                f"Deduplicated; dropped {result.dropped} / "
                                f"{result.remaining} lines."
                            )

                def announce_write() -> None:
                    if show:
                        self.status.notice("Writing to output files...")

                with timer.measure("write"):
                    written = write_sinks(
                        store,
                        config.outputs,
                        append=config.append,
                        stdout=self.stdout,
                        on_line=on_write,
                        on_ready=announce_write,
                    )
                if show:
                    self.status.end_progress_row()

        stats = TeeRunStats(
            lines_read=lines_read,
            lines_written=written,
            duration_seconds=perf_counter() - start,
            duplicates_dropped=result.dropped,
            stage_timings=timer.timings,
        )
        self.logger.debug(
            "Buffered tee read %s lines and wrote %s in %.4fs",
            stats.lines_read,
            stats.lines_written,
            stats.duration_seconds,
        )
        if not config.quiet:
            self.status.summary(stats)
        return stats
