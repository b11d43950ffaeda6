import pytest

from forkcheck.gc import GarbageCollector


def test_track_returns_object_and_counts():
    gc = GarbageCollector()
    block = bytearray(4)
    assert gc.track(block) is block
    assert len(gc) == 1
    assert block in gc


def test_iteration_keeps_allocation_order():
    gc = GarbageCollector()
    items = [object(), object(), object()]
    for item in items:
        gc.track(item)
    assert list(gc) == items


def test_release_removes_only_the_identical_object():
    gc = GarbageCollector()
    first = [1]
    second = [1]
    gc.track(first)
    gc.track(second)
    gc.release(second)
    assert list(gc) == [first]
    assert list(gc)[0] is first


def test_release_none_and_unknown_are_ignored():
    released = []
    gc = GarbageCollector(finalizer=released.append)
    kept = object()
    gc.track(kept)
    gc.release(None)
    gc.release(object())
    assert list(gc) == [kept]
    assert released == []


def test_release_calls_finalizer():
    released = []
    gc = GarbageCollector(finalizer=released.append)
    block = object()
    gc.track(block)
    gc.release(block)
    assert released == [block]
    assert len(gc) == 0


def test_clear_releases_everything_in_order():
    released = []
    gc = GarbageCollector(finalizer=released.append)
    items = [object() for _ in range(3)]
    for item in items:
        gc.track(item)
    gc.clear()
    assert released == items
    assert len(gc) == 0


def test_exit_clears_and_raises_status():
    released = []
    gc = GarbageCollector(finalizer=released.append)
    block = object()
    gc.track(block)
    with pytest.raises(SystemExit) as info:
        gc.exit(3)
    assert info.value.code == 3
    assert released == [block]
    assert len(gc) == 0


def test_tracking_none_is_fatal(capsys):
    gc = GarbageCollector()
    gc.track(object())
    with pytest.raises(SystemExit) as info:
        gc.track(None)
    assert info.value.code == 1
    assert capsys.readouterr().err == "Fatal: malloc fail\n"
    assert len(gc) == 0


def test_context_manager_clears_on_exit():
    released = []
    with GarbageCollector(finalizer=released.append) as gc:
        block = gc.track(object())
        assert len(gc) == 1
    assert released == [block]
    assert len(gc) == 0