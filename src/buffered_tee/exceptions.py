"""Fatal errors raised while acquiring pipeline sources and sinks."""

from __future__ import annotations


class TeeError(Exception):
    """Base class for errors that abort a pipeline run."""


class SourceOpenError(TeeError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Error opening input file: {path}")


class SinkOpenError(TeeError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Error opening output file: {path}")
