"""Buffered tee: merge, sort, deduplicate and fan out line-oriented text."""

from .config import TeeConfig, load_tee_config, resolve_config
from .exceptions import SinkOpenError, SourceOpenError, TeeError
from .pipelines.buffered import BufferedTeePipeline
from .throttle import should_emit
from .cli import app

__all__ = [
    "BufferedTeePipeline",
    "SinkOpenError",
    "SourceOpenError",
    "TeeConfig",
    "TeeError",
    "load_tee_config",
    "resolve_config",
    "should_emit",
    "app",
]
