"""In-memory buffer of text lines shared by the pipeline stages."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple


class LineStore:
    """Ordered, mutable sequence of raw lines (``bytes``, terminator removed).

    Lines are appended during ingest and may then be sorted and
    deduplicated in place before being drained by the write stage.
    """

    def __init__(self, lines: Iterable[bytes] = ()):
        self._lines: List[bytes] = list(lines)

    def append(self, line: bytes) -> int:
        self._lines.append(line)
        return len(self._lines)

    def sort(self) -> None:
        self._lines.sort()

    def drop_adjacent_duplicates(self) -> Tuple[int, int]:
        """Keep one line per run of equal neighbours.

        Returns ``(dropped, remaining)``.
        """
        total = len(self._lines)
        kept: List[bytes] = []
        for line in self._lines:
            if not kept or kept[-1] != line:
                kept.append(line)
        self._lines = kept
        return total - len(kept), len(kept)

    def as_list(self) -> List[bytes]:
        return list(self._lines)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)
