"""Fold drivers: sequential collection and partitioned, order-preserving merge."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import Executor, Future
from typing import Any

from runsplit._collector import Collector
from runsplit._reducer import RunAccumulator


def _scan(items: Iterable[Any], collector: Collector) -> RunAccumulator[Any]:
    acc = collector.supplier()
    push = collector.accumulator
    for x in items:
        acc = push(acc, x)
    return acc


def collect(items: Iterable[Any], collector: Collector) -> Any:
    return collector.finisher(_scan(items, collector))


def split_at(seq: Sequence[Any], cuts: Iterable[int]) -> list[Sequence[Any]]:
    """Cut ``seq`` into contiguous chunks at the given indices.

    Cut points are clamped to ``[0, len(seq)]`` and sorted; repeated cuts
    yield empty chunks. ``n`` cuts always produce ``n + 1`` chunks.
    """
    n = len(seq)
    bounds = sorted(min(max(int(c), 0), n) for c in cuts)
    chunks: list[Sequence[Any]] = []
    lo = 0
    for hi in bounds:
        chunks.append(seq[lo:hi])
        lo = hi
    chunks.append(seq[lo:])
    return chunks


def _merge_ordered(collector: Collector, parts: list[RunAccumulator[Any]]) -> RunAccumulator[Any]:
    # Balanced pairwise merge; each pair keeps left before right.
    if not parts:
        return collector.supplier()
    while len(parts) > 1:
        merged: list[RunAccumulator[Any]] = []
        for i in range(0, len(parts) - 1, 2):
            merged.append(collector.combiner(parts[i], parts[i + 1]))
        if len(parts) % 2 == 1:
            merged.append(parts[-1])
        parts = merged
    return parts[0]


def collect_partitioned(
    chunks: Iterable[Iterable[Any]],
    collector: Collector,
    *,
    executor: Executor | None = None,
) -> Any:
    """Reduce each chunk into its own accumulator, then merge them in order.

    ``chunks`` must be contiguous, in input order. When ``executor`` is given
    the per-chunk scans are submitted to it; the caller owns its lifecycle.
    Exceptions raised by the split predicate propagate unchanged.
    """
    if executor is None:
        parts = [_scan(chunk, collector) for chunk in chunks]
    else:
        futures: list[Future[RunAccumulator[Any]]] = [
            executor.submit(_scan, chunk, collector) for chunk in chunks
        ]
        parts = [f.result() for f in futures]
    return collector.finisher(_merge_ordered(collector, parts))
