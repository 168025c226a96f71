"""Configuration dataclass and helpers for the buffered tee pipeline."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

import yaml

from .logging_utils import get_logger
from .progress import DEFAULT_TICK_INTERVAL

STD_STREAM = "-"

logger = get_logger("Config")


@dataclass(frozen=True)
class TeeConfig:
    inputs: Tuple[str, ...] = (STD_STREAM,)
    outputs: Tuple[str, ...] = (STD_STREAM,)
    show_progress: bool = False
    append: bool = False
    quiet: bool = False
    unique: bool = False
    sort: bool = False
    cleanup: bool = False
    redux: Optional[int] = None
    tick_interval: float = DEFAULT_TICK_INTERVAL

    @property
    def shows_progress(self) -> bool:
        return self.show_progress and not self.quiet


# YAML keys that differ from the dataclass field names.
_FILE_KEY_ALIASES = {"progress": "show_progress"}


def resolve_config(
    inputs: Sequence[str] = (),
    outputs: Sequence[str] = (),
    *,
    show_progress: bool = False,
    append: bool = False,
    quiet: bool = False,
    unique: bool = False,
    sort: bool = False,
    cleanup: bool = False,
    redux: Optional[int] = None,
    tick_interval: float = DEFAULT_TICK_INTERVAL,
) -> TeeConfig:
    """Apply the defaulting rules and return a validated :class:`TeeConfig`."""
    if redux is not None and redux < 0:
        raise ValueError(f"redux must be a non-negative integer, got {redux}")
    if tick_interval <= 0:
        raise ValueError(f"tick_interval must be positive, got {tick_interval}")

    if not outputs:
        logger.warning(
            "No output files specified. All you'll see is the progress/echo "
            "to stderr/stdout! Use --outfile or -o to specify at least one output file."
        )
        outputs = (STD_STREAM,)

    if not inputs:
        logger.info(
            "No input files specified: STDIN is used instead! "
            "Use --infile or -i to specify at least one input file."
        )
        inputs = (STD_STREAM,)

    if quiet and redux is not None:
        logger.warning("--redux option is ignored when --quiet is enabled.")

    return TeeConfig(
        inputs=tuple(inputs),
        outputs=tuple(outputs),
        show_progress=show_progress,
        append=append,
        quiet=quiet,
        unique=unique,
        sort=sort or unique,
        cleanup=cleanup,
        redux=redux,
        tick_interval=tick_interval,
    )


def load_tee_config(path: str | Path) -> Dict[str, Any]:
    """Read option defaults from a YAML file.

    Returns keyword arguments for :func:`resolve_config`; keys follow the
    :class:`TeeConfig` field names (``progress`` is accepted for
    ``show_progress``).
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    known = {f.name for f in fields(TeeConfig)}
    options: Dict[str, Any] = {}
    for key, value in raw.items():
        name = _FILE_KEY_ALIASES.get(key, key)
        if name not in known:
            raise ValueError(f"Unknown config key '{key}' in {config_path}")
        options[name] = _check_value(key, name, value)
    return options


def _check_value(key: str, name: str, value: Any) -> Any:
    if name in ("inputs", "outputs"):
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return tuple(value)
        raise ValueError(f"Config key '{key}' must be a path or a list of paths")
    if name == "redux":
        if value is None or (isinstance(value, int) and not isinstance(value, bool)):
            return value
        raise ValueError(f"Config key '{key}' must be an integer")
    if name == "tick_interval":
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        raise ValueError(f"Config key '{key}' must be a number of seconds")
    if not isinstance(value, bool):
        raise ValueError(f"Config key '{key}' must be true or false")
    return value
