import threading
import time

import pytest

from voxelworlds.constants import THREAD_AMOUNT
from voxelworlds.thread_pool import ThreadPool, default_pool


def test_all_tasks_run_before_shutdown_returns():
    results = []
    pool = ThreadPool(3)
    for i in range(50):
        pool.enqueue(lambda i=i: (time.sleep(0.001), results.append(i)))
    pool.shutdown()
    assert sorted(results) == list(range(50))


def test_context_manager_drains_queue():
    results = []
    with ThreadPool(2) as pool:
        for i in range(20):
            pool.enqueue(lambda i=i: results.append(i * i))
    assert sorted(results) == [i * i for i in range(20)]


def test_enqueue_after_shutdown_raises():
    pool = ThreadPool(1)
    pool.shutdown()
    with pytest.raises(RuntimeError):
        pool.enqueue(lambda: None)


def test_failing_task_does_not_stop_worker():
    done = []
    pool = ThreadPool(1)
    pool.enqueue(lambda: 1 / 0)
    pool.enqueue(lambda: done.append(True))
    pool.shutdown()
    assert done == [True]


def test_tasks_run_concurrently():
    barrier = threading.Barrier(2, timeout=5)
    passed = []
    with ThreadPool(2) as pool:
        for _ in range(2):
            pool.enqueue(lambda: passed.append(barrier.wait()))
    assert sorted(passed) == [0, 1]


def test_negative_thread_count_rejected():
    with pytest.raises(ValueError):
        ThreadPool(-1)


def test_default_pool_is_shared_and_sized():
    pool = default_pool()
    assert default_pool() is pool
    assert pool.num_threads == THREAD_AMOUNT


def test_default_pool_runs_tasks():
    event = threading.Event()
    default_pool().enqueue(event.set)
    assert event.wait(timeout=5)