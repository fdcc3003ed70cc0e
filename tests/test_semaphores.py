import threading
import time

import pytest

from conctools.semaphores import Barrier, Rendezvous, Semaphore


def test_try_acquire_respects_capacity():
    sema = Semaphore(4)
    results = [sema.try_acquire() for _ in range(12)]
    assert results.count(True) == 4
    assert results.count(False) == 12 - 4


def test_release_frees_a_slot():
    sema = Semaphore(1)
    assert sema.try_acquire() is True
    assert sema.try_acquire() is False
    sema.release()
    assert sema.try_acquire() is True


def test_release_without_acquire_raises():
    sema = Semaphore(2)
    with pytest.raises(ValueError):
        sema.release()


def test_zero_capacity_never_grants():
    sema = Semaphore(0)
    assert sema.try_acquire() is False


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Semaphore(-1)


def test_context_manager_limits_concurrency():
    limit = 4
    sema = Semaphore(limit)
    lock = threading.Lock()
    active = 0
    peak = 0

    def work():
        nonlocal active, peak
        with sema:
            with lock:
                active += 1
                peak = max(peak, active)
            time.sleep(0.01)
            with lock:
                active -= 1

    threads = [threading.Thread(target=work) for _ in range(12)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert 1 <= peak <= limit
    assert sema.try_acquire() is True


def test_barrier_releases_after_all_arrive():
    n = 4
    barrier = Barrier(n)
    events = []
    lock = threading.Lock()

    def work(i):
        time.sleep((i + 1) * 0.005)
        with lock:
            events.append("ready")
        barrier.touch()
        with lock:
            events.append("go")

    threads = [threading.Thread(target=work, args=(i,)) for i in range(n)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert events == ["ready"] * n + ["go"] * n
    with pytest.raises(RuntimeError):
        barrier.touch()


def test_barrier_extra_touch_raises():
    barrier = Barrier(1)
    barrier.touch()
    with pytest.raises(RuntimeError):
        barrier.touch()


def test_barrier_negative_size_rejected():
    with pytest.raises(ValueError):
        Barrier(-2)


def test_rendezvous_waits_for_both():
    rend = Rendezvous()
    events = []
    lock = threading.Lock()

    def first():
        with lock:
            events.append("1 ready")
        rend.ready()
        with lock:
            events.append("1 further")

    def second():
        time.sleep(0.02)
        with lock:
            events.append("2 ready")
        rend.ready()
        with lock:
            events.append("2 further")

    threads = [threading.Thread(target=first), threading.Thread(target=second)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert events[:2] == ["1 ready", "2 ready"]
    assert sorted(events[2:]) == ["1 further", "2 further"]
    with pytest.raises(RuntimeError):
        rend.ready()


def test_rendezvous_third_party_raises():
    rend = Rendezvous()
    worker = threading.Thread(target=rend.ready)
    worker.start()
    rend.ready()
    worker.join()
    with pytest.raises(RuntimeError):
        rend.ready()