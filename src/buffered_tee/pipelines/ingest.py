"""Ingest stage: buffer every line of every input source."""

from __future__ import annotations

import sys
from typing import BinaryIO, Callable, Optional, Sequence

from ..exceptions import SourceOpenError
from ..line_store import LineStore
from ..logging_utils import get_logger
from ..streams import is_std_stream, read_lines

logger = get_logger("Ingest")

LineHook = Callable[[int], None]


def _drain(stream: BinaryIO, store: LineStore, on_line: Optional[LineHook]) -> int:
    read = 0
    for line in read_lines(stream):
        count = store.append(line)
        read += 1
        if on_line is not None:
            on_line(count)
    return read


def ingest_sources(
    sources: Sequence[str],
    store: LineStore,
    *,
    stdin: Optional[BinaryIO] = None,
    on_line: Optional[LineHook] = None,
) -> int:
    """Append the lines of ``sources`` to ``store`` in order.

    ``on_line`` is called after every appended line with the running count
    of lines in the store. Raises :class:`SourceOpenError` when a named file
    cannot be opened; lines from earlier sources stay in the store.
    """
    total = 0
    for source in sources:
        if is_std_stream(source):
            stream = stdin if stdin is not None else sys.stdin.buffer
            read = _drain(stream, store, on_line)
        else:
            try:
                handle = open(source, "rb")
            except OSError as exc:
                raise SourceOpenError(source) from exc
            with handle:
                read = _drain(handle, store, on_line)
        logger.debug("Read %s lines from %s", read, source)
        total += read
    return total
