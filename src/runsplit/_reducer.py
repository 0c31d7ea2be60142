"""The run-splitting accumulator.

A ``RunAccumulator`` scans a contiguous range of the input. Elements that
arrive before the first split point in that range are parked in a leading
buffer; once a run opens, every non-trigger element goes to the last run.
Two accumulators over adjacent ranges merge with ``combine``: the right
side's leading buffer continues the left side's last open run.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")

SplitPredicate = Callable[[Any], bool]
Factory = Callable[[], Any]


class AccumulatorStateError(RuntimeError):
    """Raised when a finished or consumed accumulator is used again."""


class RunAccumulator(Generic[T]):
    __slots__ = (
        "split_predicate",
        "exclude_trigger",
        "inner_factory",
        "outer_factory",
        "leading_buffer",
        "runs",
        "_state",
    )

    def __init__(
        self,
        split_predicate: SplitPredicate,
        exclude_trigger: bool,
        inner_factory: Factory,
        outer_factory: Factory,
    ) -> None:
        self.split_predicate = split_predicate
        self.exclude_trigger = exclude_trigger
        self.inner_factory = inner_factory
        self.outer_factory = outer_factory
        self.leading_buffer: list[T] = []
        self.runs: Any = outer_factory()
        self._state = "open"  # "open" | "consumed" | "finished"

    def __repr__(self) -> str:
        n_runs = len(self.runs) if self.runs is not None else 0
        return f"RunAccumulator(state={self._state!r}, leading={len(self.leading_buffer)}, runs={n_runs})"

    @property
    def state(self) -> str:
        return self._state

    def _require_open(self, op: str) -> None:
        if self._state != "open":
            raise AccumulatorStateError(f"cannot {op}: accumulator already {self._state}")

    def push(self, element: T) -> RunAccumulator[T]:
        self._require_open("push")
        if self.split_predicate(element):
            run = self.inner_factory()
            if not self.exclude_trigger:
                run.append(element)
            self.runs.append(run)
        elif len(self.runs) > 0:
            self.runs[-1].append(element)
        else:
            self.leading_buffer.append(element)
        return self

    def combine(self, right: RunAccumulator[T]) -> RunAccumulator[T]:
        """Merge ``right`` (the range immediately after ours) into ``self``.

        ``right`` is consumed and must not be used afterwards.
        """
        self._require_open("combine")
        if right is self:
            raise AccumulatorStateError("cannot combine an accumulator with itself")
        right._require_open("combine")

        if len(self.runs) > 0:
            self.runs[-1].extend(right.leading_buffer)
        else:
            self.leading_buffer.extend(right.leading_buffer)
        self.runs.extend(right.runs)

        right._state = "consumed"
        right.leading_buffer = []
        right.runs = None
        return self

    def finish(self) -> Any:
        self._require_open("finish")
        runs = self.runs
        if self.leading_buffer:
            head = self.inner_factory()
            head.extend(self.leading_buffer)
            runs.insert(0, head)
        self._state = "finished"
        self.leading_buffer = []
        self.runs = None
        return runs
