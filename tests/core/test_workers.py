import threading
import time

import pytest

from sotu_stats.core import run_ordered


def test_results_follow_input_order_when_threaded():
    def slow_first(item: int) -> int:
        time.sleep(0.01 * (4 - item))
        return item * 10

    assert run_ordered(slow_first, range(4), max_workers=4) == [0, 10, 20, 30]


def test_single_worker_runs_inline():
    threads = []

    def record_thread(item: int) -> int:
        threads.append(threading.current_thread())
        return item

    assert run_ordered(record_thread, [1, 2, 3]) == [1, 2, 3]
    assert set(threads) == {threading.current_thread()}


def test_failure_cancels_queued_calls():
    release = threading.Event()
    started = []

    def work(item: int) -> int:
        started.append(item)
        if item == 0:
            raise RuntimeError("boom")
        release.wait(timeout=5)
        return item

    try:
        with pytest.raises(RuntimeError, match="boom"):
            run_ordered(work, range(10), max_workers=2)
    finally:
        release.set()

    # at most the failing call plus one in-flight call per worker
    assert 0 in started
    assert len(started) <= 3
