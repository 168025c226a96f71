from buffered_tee.line_store import LineStore
from buffered_tee.pipelines.transform import transform_lines


def test_no_sort_keeps_ingest_order():
    store = LineStore([b"c", b"a", b"b", b"a"])
    result = transform_lines(store, sort=False, unique=False)
    assert not result.sorted
    assert result.dropped is None
    assert store.as_list() == [b"c", b"a", b"b", b"a"]


def test_sort_is_bytewise():
    store = LineStore([b"\xc3\xa9", b"a", b"B", b"", b"ab"])
    transform_lines(store, sort=True, unique=False)
    lines = store.as_list()
    assert lines == [b"", b"B", b"a", b"ab", b"\xc3\xa9"]
    assert all(left <= right for left, right in zip(lines, lines[1:]))


def test_unique_drops_adjacent_duplicates_after_sort():
    lines = [b"b", b"a", b"b", b"c", b"a", b"a"]
    store = LineStore(lines)
    result = transform_lines(store, sort=True, unique=True)
    assert store.as_list() == [b"a", b"b", b"c"]
    assert result.dropped == 3
    assert result.remaining == 3
    assert result.dropped + result.remaining == len(lines)


def test_unique_on_distinct_lines_drops_nothing():
    store = LineStore([b"z", b"y"])
    result = transform_lines(store, sort=True, unique=True)
    assert (result.dropped, result.remaining) == (0, 2)


def test_line_store_append_returns_running_count():
    store = LineStore()
    assert not store
    assert store.append(b"x") == 1
    assert store.append(b"y") == 2
    assert len(store) == 2
