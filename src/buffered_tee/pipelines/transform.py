"""Transform stage: optional bulk sort and adjacent-duplicate removal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..line_store import LineStore


@dataclass
class TransformResult:
    sorted: bool
    dropped: Optional[int] = None
    remaining: Optional[int] = None


def transform_lines(store: LineStore, *, sort: bool, unique: bool) -> TransformResult:
    # unique implies sort; the config layer enforces it before we get here.
    if not sort:
        return TransformResult(sorted=False)
    store.sort()
    if not unique:
        return TransformResult(sorted=True)
    dropped, remaining = store.drop_adjacent_duplicates()
    return TransformResult(sorted=True, dropped=dropped, remaining=remaining)
