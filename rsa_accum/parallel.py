"""
Parallel Work Distribution

A parallel map over an indexed collection. Every unit of work is pure,
so results go into a pre-sized list where each slot has exactly one
writer and no locking is needed. Output order always matches input order.
"""

import logging
from concurrent.futures import (
    Executor,
    Future,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

WORKER_MODES = ("thread", "process", "serial")


def _make_executor(mode: str, max_workers: Optional[int]) -> Executor:
    if mode == "thread":
        return ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="rsa-accum")
    if mode == "process":
        return ProcessPoolExecutor(max_workers=max_workers)
    raise ValueError(f"Unknown worker mode: {mode!r} (expected one of {WORKER_MODES})")


def _collect(executor: Executor, func: Callable[[T], R], args: Sequence[T]) -> List[R]:
    results: List[Optional[R]] = [None] * len(args)
    futures: Dict[Future, int] = {executor.submit(func, arg): i for i, arg in enumerate(args)}

    # Idle workers pull the next queued unit; completion order is irrelevant
    for future in as_completed(futures):
        results[futures[future]] = future.result()

    return results  # type: ignore[return-value]


def parallel_map(
    func: Callable[[T], R],
    args: Sequence[T],
    *,
    executor: Optional[Executor] = None,
    max_workers: Optional[int] = None,
    mode: str = "thread",
) -> List[R]:
    """
    Apply func to every element of args across a worker pool.

    Blocks until every unit has completed. The first exception raised by a
    unit propagates to the caller.

    Thread mode only overlaps work that releases the GIL. CPU-bound big-int
    arithmetic such as pow() does not, so use mode="process" (or pass a
    ProcessPoolExecutor) when the work should actually run in parallel.

    Args:
        func: Pure function of one argument. Must be picklable in process mode.
        args: Inputs, one unit of work per element
        executor: Existing executor to use; it is not shut down afterwards
        max_workers: Pool size when a pool is created here
        mode: "thread", "process" or "serial" (ignored when executor is given)

    Returns:
        List[R]: results[i] == func(args[i])

    Raises:
        ValueError: If mode is unknown
    """
    if mode not in WORKER_MODES:
        raise ValueError(f"Unknown worker mode: {mode!r} (expected one of {WORKER_MODES})")

    if not args:
        return []

    if executor is not None:
        return _collect(executor, func, args)

    if mode == "serial":
        return [func(arg) for arg in args]

    logger.debug(f"Distributing {len(args)} units across {mode} pool (max_workers={max_workers})")
    with _make_executor(mode, max_workers) as pool:
        return _collect(pool, func, args)
