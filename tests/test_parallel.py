"""Tests for the row executor."""

import threading

import pytest

from raster import EngineConfig, parallel, parallel_rows
from raster.core import num_workers


def test_every_row_exactly_once():
    seen = []
    lock = threading.Lock()

    def record(y):
        with lock:
            seen.append(y)

    parallel_rows(3, 40, record, EngineConfig(max_workers=4))
    assert sorted(seen) == list(range(3, 40))


def test_worker_rows_are_increasing_and_disjoint():
    chunks = parallel(0, 10, list, EngineConfig(max_workers=3))
    assert len(chunks) == 3
    for rows in chunks:
        assert rows == sorted(rows)
    assert sorted(y for rows in chunks for y in rows) == list(range(10))


def test_empty_range_dispatches_nothing():
    calls = []
    assert parallel(5, 5, calls.append) == []
    assert parallel(7, 2, calls.append) == []
    assert calls == []


def test_workers_capped_by_rows():
    cfg = EngineConfig(max_workers=16)
    assert num_workers(0, 3, cfg) == 3
    assert len(parallel(0, 3, list, cfg)) == 3


def test_single_worker_runs_inline():
    caller = threading.get_ident()
    idents = parallel(0, 5, lambda rows: threading.get_ident(), EngineConfig(max_workers=1))
    assert idents == [caller]


def test_partial_results_in_worker_order():
    assert parallel(0, 4, lambda rows: list(rows)[0], EngineConfig(max_workers=4)) == [0, 1, 2, 3]


def test_worker_exception_propagates():
    def boom(rows):
        raise RuntimeError("bad row")

    with pytest.raises(RuntimeError, match="bad row"):
        parallel(0, 8, boom, EngineConfig(max_workers=2))
