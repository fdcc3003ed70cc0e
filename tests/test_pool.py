import threading
import time

import pytest

from conctools.pool import make_pool, run_each, say

PHRASES = [
    "go is awesome",
    "cats are cute",
    "rain is wet",
    "channels are hard",
    "floor is lava",
]


def test_say_prints_each_word(capsys):
    say(3, "go is awesome", max_delay_ms=0)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Worker #3 says: go...",
        "Worker #3 says: is...",
        "Worker #3 says: awesome...",
    ]


def test_say_with_delay_prints_all_words(capsys):
    say(1, "rain is wet", max_delay_ms=5)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len("rain is wet".split())


def test_make_pool_handles_all_and_limits_concurrency(capsys):
    handled = []
    active = []
    peak = []
    lock = threading.Lock()

    def handler(worker_id, phrase):
        with lock:
            active.append(worker_id)
            peak.append(len(active))
        say(worker_id, phrase, max_delay_ms=0)
        time.sleep(0.02)
        with lock:
            active.remove(worker_id)
            handled.append((worker_id, phrase))

    handle, wait = make_pool(2, handler)
    for phrase in PHRASES:
        handle(phrase)
    wait()
    tokens = capsys.readouterr().out.split()
    total_words = sum(len(p.split()) for p in PHRASES)
    assert tokens.count("says:") == total_words
    assert {t for t in tokens if t.startswith("#")} <= {"#0", "#1"}
    assert sorted(p for _, p in handled) == sorted(PHRASES)
    assert max(peak) <= 2


def test_make_pool_wait_blocks_until_done(capsys):
    finished = []

    def handler(worker_id, phrase):
        time.sleep(0.03)
        say(worker_id, phrase, max_delay_ms=0)
        finished.append(phrase)

    handle, wait = make_pool(3, handler)
    for phrase in PHRASES[:3]:
        handle(phrase)
    wait()
    tokens = capsys.readouterr().out.split()
    assert tokens.count("says:") == sum(len(p.split()) for p in PHRASES[:3])
    assert sorted(finished) == sorted(PHRASES[:3])


def test_make_pool_survives_failing_handler(capsys):
    def handler(worker_id, phrase):
        if phrase == "bad":
            raise ValueError(phrase)
        say(worker_id, phrase, max_delay_ms=0)

    handle, wait = make_pool(1, handler)
    handle("bad")
    handle("good")
    wait()
    assert capsys.readouterr().out == "Worker #0 says: good...\n"


def test_make_pool_rejects_empty_pool():
    with pytest.raises(ValueError):
        make_pool(0, lambda worker_id, phrase: None)


def test_run_each_uses_index_as_worker_id():
    handled = {}
    lock = threading.Lock()

    def handler(worker_id, phrase):
        time.sleep(0.01)
        with lock:
            handled[worker_id] = phrase

    run_each(PHRASES, handler)
    assert handled == dict(enumerate(PHRASES))