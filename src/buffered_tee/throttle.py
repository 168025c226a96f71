"""Redux throttling: decide which processed items produce status output."""

from __future__ import annotations

from typing import Optional


def should_emit(count: int, stride: Optional[int]) -> bool:
    """Return True when item number ``count`` (1-based) should emit status.

    A stride of ``None``, 0 or 1 emits on every item. Larger strides emit on
    items 1, 1 + stride, 1 + 2 * stride, ... so the first item always emits.
    """
    if stride is None or stride <= 1:
        return True
    return count % stride == 1
