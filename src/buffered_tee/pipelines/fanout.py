"""Fan-out write stage: copy the buffered lines to every configured sink."""

from __future__ import annotations

import sys
from contextlib import ExitStack
from typing import BinaryIO, Callable, List, Optional, Sequence

from ..exceptions import SinkOpenError
from ..line_store import LineStore
from ..logging_utils import get_logger
from ..streams import is_std_stream

logger = get_logger("FanOut")

WriteHook = Callable[[int, bytes], None]


def _open_sinks(
    stack: ExitStack, sinks: Sequence[str], append: bool
) -> List[BinaryIO]:
    mode = "ab" if append else "wb"
    handles: List[BinaryIO] = []
    for sink in sinks:
        if is_std_stream(sink):
            continue
        try:
            handle = open(sink, mode)
        except OSError as exc:
            raise SinkOpenError(sink) from exc
        handles.append(stack.enter_context(handle))
        logger.debug("Opened %s (%s)", sink, mode)
    return handles


def write_sinks(
    store: LineStore,
    sinks: Sequence[str],
    *,
    append: bool,
    stdout: Optional[BinaryIO] = None,
    on_line: Optional[WriteHook] = None,
    on_ready: Optional[Callable[[], None]] = None,
) -> int:
    """Write every line of ``store`` to all ``sinks``; return the line count.

    All file sinks are opened before the first write; if any of them fails
    :class:`SinkOpenError` is raised and nothing is written. ``on_ready``
    runs once every sink is open. ``on_line`` receives the running write
    count and the line just written. File sinks are closed and stdout is
    flushed before this returns.
    """
    to_stdout = any(is_std_stream(sink) for sink in sinks)
    if to_stdout and stdout is None:
        stdout = sys.stdout.buffer
    written = 0
    with ExitStack() as stack:
        handles = _open_sinks(stack, sinks, append)
        if on_ready is not None:
            on_ready()
        for line in store:
            record = line + b"\n"
            for handle in handles:
                handle.write(record)
            if to_stdout:
                stdout.write(record)
            written += 1
            if on_line is not None:
                on_line(written, line)
        if to_stdout:
            stdout.flush()
    logger.debug("Wrote %s lines to %s sinks", written, len(sinks))
    return written
