"""Helpers for std-stream sentinels, line reading and echo sanitizing."""

from __future__ import annotations

from typing import BinaryIO, Iterator

STD_STREAM_NAMES = frozenset({".", "-", "/dev/stdin", "/dev/stdout"})

# Every byte outside printable ASCII [32, 126] maps to '.'.
_SANITIZE_TABLE = bytes(b if 32 <= b <= 126 else ord(".") for b in range(256))


def is_std_stream(name: str) -> bool:
    return name in STD_STREAM_NAMES


def read_lines(stream: BinaryIO) -> Iterator[bytes]:
    """Yield lines from a binary stream without their LF or CRLF terminator."""
    for line in stream:
        if line.endswith(b"\n"):
            line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
        yield line


def sanitize(line: bytes) -> bytes:
    return line.translate(_SANITIZE_TABLE)
