"""Thread pool helper shared by the fetch and analysis stages."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def run_ordered(func: Callable[[T], R], items: Iterable[T], max_workers: int = 1) -> List[R]:
    """Apply ``func`` to every item and return the results in input order.

    With ``max_workers > 1`` the calls run on a thread pool. The first
    exception cancels every call that has not started yet and is re-raised
    without waiting for the queue to drain.
    """

    pending = list(items)
    if max_workers <= 1 or len(pending) <= 1:
        return [func(item) for item in pending]

    executor = ThreadPoolExecutor(max_workers=max_workers)
    try:
        futures = [executor.submit(func, item) for item in pending]
        for future in as_completed(futures):
            future.result()
    except BaseException:
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    executor.shutdown(wait=True)
    return [future.result() for future in futures]


__all__ = ["run_ordered"]
