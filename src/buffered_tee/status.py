"""Interactive status stream: notices, progress marks, echoes and the summary."""

from __future__ import annotations

from typing import Dict, Optional

from rich.console import Console
from rich.table import Table

from .pipelines.base import TeeRunStats
from .streams import sanitize
from .timing import format_duration

_STAGE_ORDER = ("ingest", "transform", "write")


def _format_stage_name(key: str) -> str:
    label = key.replace("_", " ").strip()
    return label.title() if label else key


class StatusStream:
    """Writes everything that is not pipeline output to a (stderr) console.

    Progress marks and echoed lines are written straight to the console file
    so that raw line content is not reinterpreted as markup.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True, highlight=False)

    def notice(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)

    def warning(self, message: str) -> None:
        self.console.print(
            f"Warning: {message}", style="yellow", markup=False, soft_wrap=True
        )

    def error(self, message: str) -> None:
        self.console.print(message, style="bold red", markup=False, soft_wrap=True)

    def tick(self) -> None:
        self._write(".")

    def end_progress_row(self) -> None:
        self._write("\n")

    def echo(self, line: bytes, cleanup: bool = False) -> None:
        if cleanup:
            self._write(sanitize(line).decode("ascii") + "\n")
            return
        stream = self.console.file
        raw = getattr(stream, "buffer", None)
        if raw is None:
            self._write(line.decode("utf-8", errors="replace") + "\n")
            return
        # flush pending text first so marks and echoes stay in order
        stream.flush()
        raw.write(line + b"\n")
        raw.flush()

    def _write(self, text: str) -> None:
        stream = self.console.file
        stream.write(text)
        stream.flush()

    def summary(self, stats: TeeRunStats) -> None:
        self.console.print("All done.")
        self.console.print(f"{stats.lines_written} lines written.")
        if stats.duplicates_dropped is not None:
            self.console.print(
                f"{stats.duplicates_dropped} duplicate lines dropped."
            )
        self._print_timings(stats.stage_timings)
        self.console.print(f"Time taken: {format_duration(stats.duration_seconds)}")

    def _print_timings(self, timings: Dict[str, float]) -> None:
        if not timings:
            return
        table = Table(title="Phase Timings", show_header=True, header_style="bold cyan")
        table.add_column("Phase")
        table.add_column("Elapsed", justify="right")
        ordered = [key for key in _STAGE_ORDER if key in timings]
        ordered.extend(key for key in timings if key not in _STAGE_ORDER)
        for stage in ordered:
            table.add_row(_format_stage_name(stage), format_duration(timings[stage]))
        self.console.print(table)
