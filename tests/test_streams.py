import io

import pytest

from buffered_tee.streams import is_std_stream, read_lines, sanitize


@pytest.mark.parametrize("name", [".", "-", "/dev/stdin", "/dev/stdout"])
def test_std_stream_sentinels(name):
    assert is_std_stream(name)


@pytest.mark.parametrize("name", ["", "out.txt", "./-", "/dev/stderr", "--"])
def test_regular_paths_are_not_sentinels(name):
    assert not is_std_stream(name)


def test_read_lines_normalises_terminators():
    stream = io.BytesIO(b"alpha\r\nbeta\n\ngamma")
    assert list(read_lines(stream)) == [b"alpha", b"beta", b"", b"gamma"]


def test_read_lines_on_empty_stream():
    assert list(read_lines(io.BytesIO(b""))) == []


def test_read_lines_keeps_inner_control_bytes():
    stream = io.BytesIO(b"a\x00b\tc\x1b[0m\n")
    assert list(read_lines(stream)) == [b"a\x00b\tc\x1b[0m"]


def test_sanitize_replaces_non_printable_bytes():
    assert sanitize(b"a\tb\x7f~ \xc3\xa9\x00") == b"a.b.~ ..."


def test_sanitize_keeps_printable_ascii():
    printable = bytes(range(32, 127))
    assert sanitize(printable) == printable
