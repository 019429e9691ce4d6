"""Parallel dispatch of independent synthesis tasks.

Each task is submitted to a thread pool as a self-contained unit of work and
returns its own result; there is no shared mutable state, so nothing beyond
collecting the futures is needed. NumPy releases the GIL inside the heavy
array kernels, which keeps threads worthwhile for CPU-bound synthesis.
"""

from __future__ import annotations

import logging
import multiprocessing as mp
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TypeVar

from threadpoolctl import threadpool_limits

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger("peaksynth.parallel")

MAX_EFFECTIVE_WORKERS = 16


def optimal_worker_count(n_tasks: int, requested: int | None = None) -> int:
    """Calculate the number of workers to use for ``n_tasks`` tasks.

    Args:
        n_tasks: Number of independent tasks
        requested: Explicit worker count; capped by the task count only

    Returns
    -------
        Worker count, at least 1
    """
    if requested is not None:
        return max(1, min(requested, n_tasks))
    return max(1, min(MAX_EFFECTIVE_WORKERS, mp.cpu_count(), n_tasks))


def run_parallel(
    worker: Callable[[T], R],
    tasks: Sequence[T],
    *,
    n_workers: int | None = None,
    progress_callback: Callable[[R], None] | None = None,
) -> list[R]:
    """Run ``worker`` over every task and return the results in task order.

    ``worker`` is expected to report its own failures through its return
    value. Exceptions escaping workers are logged and re-raised here once all
    other tasks have finished: a single one as is, several as an
    ``ExceptionGroup``.

    Args:
        worker: Function applied to each task
        tasks: Independent units of work
        n_workers: Number of threads (default: CPU count, capped at 16)
        progress_callback: Called with each result as soon as it completes
    """
    n_workers = optimal_worker_count(len(tasks), n_workers)
    results: list[R | None] = [None] * len(tasks)

    # Keep BLAS single-threaded so it does not fight with the worker threads
    with threadpool_limits(limits=1, user_api="blas"):
        if n_workers > 1 and len(tasks) > 1:
            errors: list[BaseException] = []
            with ThreadPoolExecutor(max_workers=n_workers) as executor:
                futures = {executor.submit(worker, task): i for i, task in enumerate(tasks)}
                for future in as_completed(futures):
                    exc = future.exception()
                    if exc is not None:
                        logger.error(
                            "Task %d raised %s: %s", futures[future], type(exc).__name__, exc
                        )
                        errors.append(exc)
                        continue
                    result = future.result()
                    results[futures[future]] = result
                    if progress_callback is not None:
                        progress_callback(result)
            if len(errors) > 1:
                msg = f"{len(errors)} of {len(tasks)} tasks raised"
                raise BaseExceptionGroup(msg, errors)
            if errors:
                raise errors[0]
        else:
            for i, task in enumerate(tasks):
                result = worker(task)
                results[i] = result
                if progress_callback is not None:
                    progress_callback(result)

    return results  # type: ignore[return-value]
