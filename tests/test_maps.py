import threading
import time

from conctools.maps import ConcMap, Counter


def _join_all(threads):
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_get_missing_returns_default():
    m = ConcMap()
    assert m.get("hello") is None
    assert m.get("hello", 0) == 0


def test_set_then_get():
    m = ConcMap()
    m.set("hello", 71)
    assert m.get("hello") == 71


def test_set_if_absent_keeps_first_value():
    m = ConcMap()
    assert m.set_if_absent("hello", 42) == 42
    assert m.set_if_absent("hello", 84) == 42
    assert m.get("hello") == 42


def test_set_if_absent_concurrent_first_wins():
    m = ConcMap()

    def first():
        time.sleep(0.005)
        m.set_if_absent("hello", 42)

    def second():
        time.sleep(0.02)
        m.set_if_absent("hello", 84)

    _join_all([threading.Thread(target=first), threading.Thread(target=second)])
    assert m.get("hello") == 42


def test_compute_missing_uses_default():
    m = ConcMap()
    assert m.compute("x", lambda v: v + 5, 0) == 5
    assert m.get("x") == 5


def test_compute_concurrent_is_atomic():
    m = ConcMap()

    def work():
        for _ in range(100):
            m.compute("hello", lambda v: v + 1, 0)

    _join_all([threading.Thread(target=work) for _ in range(2)])
    assert m.get("hello") == 2 * 100


def test_counter_missing_value_is_zero():
    counter = Counter()
    assert counter.value("absent") == 0
    assert counter.items() == []


def test_counter_concurrent_increments():
    counter = Counter()
    plan = {"one": 100, "two": 200, "three": 300}

    def make(key, times):
        def work():
            for _ in range(times):
                counter.increment(key)
        return work

    _join_all([threading.Thread(target=make(k, v)) for k, v in plan.items()])
    assert counter.value("two") == plan["two"]
    assert dict(counter.items()) == plan


def test_counter_items_is_snapshot():
    counter = Counter()
    counter.increment("a")
    snapshot = counter.items()
    counter.increment("a")
    assert snapshot == [("a", 1)]
    assert counter.value("a") == 2