"""Row-parallel execution."""

from __future__ import annotations
from typing import Callable, List, Optional, Sequence, TypeVar
from concurrent.futures import ThreadPoolExecutor

from .config import EngineConfig, get_config
from ..utils.debug import debug_print

T = TypeVar("T")


def num_workers(lo: int, hi: int, config: Optional[EngineConfig] = None) -> int:
    """Number of workers used for the range [lo, hi): never more than rows, at least 1."""
    if config is None:
        config = get_config()
    return max(1, min(config.max_workers, hi - lo))


def parallel(
    lo: int,
    hi: int,
    fn: Callable[[Sequence[int]], T],
    config: Optional[EngineConfig] = None
) -> List[T]:
    """
    Distribute the integers of [lo, hi) over a bounded pool of workers.

    Worker k owns rows lo+k, lo+k+n, lo+k+2n, ... and receives them as one
    increasing sequence, so per-worker setup (scratch scanlines, partial
    accumulators) happens once inside fn.

    Args:
        lo: First row (inclusive)
        hi: Last row (exclusive)
        fn: Called once per worker with that worker's rows
        config: Engine configuration, defaults to the process-wide one

    Returns:
        Per-worker return values of fn, in worker order. [] if hi <= lo.

    Notes:
        - Blocks until every worker is done
        - An exception raised by fn propagates after all workers finish
    """
    if hi <= lo:
        return []

    n = num_workers(lo, hi, config)
    chunks = [range(lo + k, hi, n) for k in range(n)]
    debug_print(f"[parallel] rows [{lo}, {hi}) over {n} worker(s)")

    if n == 1:
        return [fn(chunks[0])]

    with ThreadPoolExecutor(max_workers=n) as pool:
        futures = [pool.submit(fn, rows) for rows in chunks]
    return [f.result() for f in futures]


def parallel_rows(
    lo: int,
    hi: int,
    callback: Callable[[int], None],
    config: Optional[EngineConfig] = None
):
    """Invoke callback(y) exactly once for every y in [lo, hi)."""
    def worker(rows):
        for y in rows:
            callback(y)

    parallel(lo, hi, worker, config)
