import pytest

from microui.pool import (
    GrowPool,
    GrowStack,
    PoolExhaustedError,
    PoolItem,
    pool_get,
    pool_init,
    pool_update,
)


def test_grow_pool_fixed():
    p = GrowPool(4, 100, factory=int)
    items = [p.alloc() for _ in range(4)]
    assert len(items) == 4
    assert p.grown == 0
    assert len(p) == 4


def test_grow_pool_growth():
    p = GrowPool(2, 10)
    for _ in range(2):
        p.alloc()
    p.alloc()
    assert p.grown >= 1
    assert len(p) == 3


def test_grow_pool_exhausted():
    p = GrowPool(2, 2)
    with pytest.raises(PoolExhaustedError):
        for _ in range(3):
            p.alloc()


def test_grow_pool_returns_distinct_objects():
    p = GrowPool(2, 5, factory=list)
    first, second, third = p.alloc(), p.alloc(), p.alloc()
    assert len({id(first), id(second), id(third)}) == 3


def test_grow_stack():
    s = GrowStack()
    s.push(1)
    s.push(2)
    s.push(3)
    assert len(s) == 3
    assert s.peek() == 3
    assert s.pop() == 3
    assert len(s) == 2


def test_grow_stack_empty_returns_none():
    s = GrowStack()
    assert s.pop() is None
    assert s.peek() is None
    assert len(s) == 0


def test_grow_stack_reset():
    s = GrowStack()
    s.push("a")
    s.push("b")
    s.reset()
    assert len(s) == 0
    assert list(s) == []


def test_pool_init_picks_least_recent_slot():
    items = [PoolItem(1, 5), PoolItem(2, 2), PoolItem(3, 7)]
    idx = pool_init(items, 99, 10)
    assert idx == 1
    assert items[1] == PoolItem(99, 10)


def test_pool_init_defaults_to_first_when_all_current():
    items = [PoolItem(1, 10), PoolItem(2, 10)]
    assert pool_init(items, 42, 10) == 0
    assert items[0].id == 42


def test_pool_get_found_and_missing():
    items = [PoolItem(7, 0), PoolItem(8, 0)]
    assert pool_get(items, 8) == 1
    assert pool_get(items, 9) is None


def test_pool_update_sets_frame():
    items = [PoolItem(1, 0)]
    pool_update(items, 0, 33)
    assert items[0].last_update == 33


def test_pool_init_then_get_round_trip():
    items = [PoolItem() for _ in range(4)]
    idx = pool_init(items, 1234, 1)
    assert pool_get(items, 1234) == idx