import pytest

from modregistry.ratelimit.errors import ReadWriteError
from modregistry.ratelimit.store import MemoryStore


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def test_set():
    store = MemoryStore()
    assert store.set("hello", 30, 5) is None
    assert "hello" in store


def test_get():
    store = MemoryStore()
    store.set("hello", 30, 5)
    assert store.get("hello") == 30


def test_expiry():
    store = MemoryStore()
    store.set("hello", 30, 3)
    dur = store.expire("hello")
    assert 0 <= dur <= 3


def test_get_missing_is_none():
    assert MemoryStore().get("nobody") is None


def test_entry_vanishes_after_expiry():
    clock = FakeClock()
    store = MemoryStore(clock=clock)
    store.set("hello", 30, 5)
    clock.now += 4.5
    assert store.get("hello") == 30
    clock.now += 1
    assert store.get("hello") is None
    assert len(store) == 0


def test_expire_counts_down_with_clock():
    clock = FakeClock()
    store = MemoryStore(clock=clock)
    store.set("hello", 30, 5)
    assert store.expire("hello") == 5
    clock.now += 2
    assert store.expire("hello") == 3


def test_update_decrements_and_floors_at_zero():
    store = MemoryStore()
    store.set("k", 3, 60)
    assert store.update("k", 1) == 2
    assert store.get("k") == 2
    assert store.update("k", 5) == 0
    assert store.get("k") == 0


def test_update_missing_raises():
    with pytest.raises(ReadWriteError, match="read failed"):
        MemoryStore().update("missing", 1)


def test_expire_missing_raises():
    with pytest.raises(ReadWriteError, match="read failed"):
        MemoryStore().expire("missing")


def test_remove_returns_value_and_deletes():
    store = MemoryStore()
    store.set("k", 7, 60)
    assert store.remove("k") == 7
    assert store.get("k") is None
    with pytest.raises(ReadWriteError, match="remove failed"):
        store.remove("k")


def test_negative_inputs_rejected():
    store = MemoryStore()
    with pytest.raises(ValueError):
        store.set("k", -1, 5)
    with pytest.raises(ValueError):
        store.set("k", 1, -5)