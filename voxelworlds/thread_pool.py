"""A fixed-size pool of worker threads fed from a shared queue."""

from __future__ import annotations

import atexit
import functools
import logging
import threading
from collections import deque
from typing import Callable

from voxelworlds.constants import THREAD_AMOUNT

_log = logging.getLogger(__name__)


class ThreadPool:
    """Runs queued callables on worker threads; shutdown drains the queue."""

    def __init__(self, num_threads: int) -> None:
        if num_threads < 0:
            raise ValueError("num_threads must not be negative")
        self._tasks: deque[Callable[[], object]] = deque()
        self._condition = threading.Condition()
        self._stopped = False
        self._workers = [
            threading.Thread(target=self._work, name=f"worker-{i}", daemon=True)
            for i in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    @property
    def num_threads(self) -> int:
        return len(self._workers)

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stopped or bool(self._tasks))
                if self._stopped and not self._tasks:
                    return
                task = self._tasks.popleft()
            try:
                task()
            except Exception:
                _log.exception("task raised an exception")

    def enqueue(self, task: Callable[[], object]) -> None:
        """Queue a callable taking no arguments."""
        with self._condition:
            if self._stopped:
                raise RuntimeError("cannot enqueue on a pool that has been shut down")
            self._tasks.append(task)
            self._condition.notify()

    def shutdown(self) -> None:
        """Stop accepting tasks, finish the queued ones and join the workers."""
        with self._condition:
            self._stopped = True
            self._condition.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


@functools.lru_cache(maxsize=None)
def default_pool() -> ThreadPool:
    """The shared pool of THREAD_AMOUNT workers, created on first use."""
    pool = ThreadPool(THREAD_AMOUNT)
    atexit.register(pool.shutdown)
    return pool