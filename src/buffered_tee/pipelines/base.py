"""Shared pipeline models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class TeeRunStats:
    lines_read: int
    lines_written: int
    duration_seconds: float
    duplicates_dropped: Optional[int] = None
    stage_timings: Dict[str, float] = field(default_factory=dict)
