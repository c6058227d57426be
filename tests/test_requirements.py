import pytest
from markn.generators.requirements import Requirement, RequirementStore
from markn.generators.monitor import Monitor


def _avail(digits, n=10):
    return [d in digits for d in range(n)]


def test_requirement_ok_pick_unpick():
    r = Requirement(_avail({0, 1, 2}), 2)
    assert r.ok(1, left=4) is True
    assert r.ok(5, left=4) is False      # not in the set
    assert r.ok(1, left=1) is False      # needs 2 with 1 place left

    r.pick(1)
    assert r.needs == 1 and r.available[1] is False
    assert r.ok(1, left=3) is False      # already picked
    r.pick(2)
    assert r.ok(0, left=2) is False      # nothing more needed

    r.unpick(2)
    r.unpick(1)
    assert r.needs == 2 and r.available == _avail({0, 1, 2})


def test_shared_availability_between_requirements():
    avail = _avail({0, 1, 2, 3})
    placed, misplaced = Requirement(avail, 1), Requirement(avail, 2)
    placed.pick(3)
    assert misplaced.ok(3, left=3) is False
    placed.unpick(3)
    assert misplaced.ok(3, left=3) is True


def test_store_handles_and_pop():
    store = RequirementStore()
    h0 = store.add(_avail({0}), 1)
    h1 = store.add(_avail({1}), 0)
    assert (h0, h1) == (0, 1) and len(store) == 2
    store[h0].pick(0)
    assert store[0].needs == 0
    store.pop(2)
    assert len(store) == 0
    with pytest.raises(IndexError):
        store.pop()


def test_monitor_pick_is_all_or_nothing():
    store = RequirementStore()
    m = Monitor(store, capacity=4)
    yes = store.add(_avail({7}), 1)
    no = store.add(_avail({7}), 0)   # needs nothing more: rejects
    m.add_requirement(yes)
    m.add_requirement(no)

    assert m.pick(7, left=4) is False
    assert store[yes].needs == 1 and store[yes].available[7] is True

    assert m.remove_requirement() is False
    assert m.pick(7, left=4) is True
    assert store[yes].needs == 0
    m.unpick(7)
    assert store[yes].needs == 1 and store[yes].available[7] is True


def test_monitor_stack_bounds():
    store = RequirementStore()
    m = Monitor(store, capacity=1)
    assert m.remove_requirement() is True   # empty: no-op
    m.add_requirement(store.add(_avail({0}), 1))
    assert m.depth == 1
    with pytest.raises(OverflowError):
        m.add_requirement(store.add(_avail({0}), 1))
    assert m.remove_requirement() is True
    assert m.depth == 0


def test_empty_monitor_accepts_anything():
    m = Monitor(RequirementStore(), capacity=2)
    assert m.pick(3, left=1) is True
    m.unpick(3)
