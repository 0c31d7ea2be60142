from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from typing import Any

from runsplit._reducer import Factory, RunAccumulator, SplitPredicate


class ConfigurationError(ValueError):
    """Invalid arguments passed to a collector constructor."""


@dataclasses.dataclass(frozen=True)
class Collector:
    """The four callbacks a fold driver needs to reduce a sequence into runs."""

    supplier: Callable[[], RunAccumulator[Any]]
    accumulator: Callable[[RunAccumulator[Any], Any], RunAccumulator[Any]]
    combiner: Callable[[RunAccumulator[Any], RunAccumulator[Any]], RunAccumulator[Any]]
    finisher: Callable[[RunAccumulator[Any]], Any]
    split_when: SplitPredicate
    exclude_trigger: bool = False


def _require_callable(name: str, value: Any) -> None:
    if value is None:
        raise ConfigurationError(f"'{name}' must not be None")
    if not callable(value):
        raise ConfigurationError(f"'{name}' must be callable, got {type(value).__name__}")


def collector_of(
    split_when: SplitPredicate,
    exclude_trigger: bool = False,
    inner_factory: Factory = list,
    outer_factory: Factory = list,
) -> Collector:
    _require_callable("split_when", split_when)
    _require_callable("inner_factory", inner_factory)
    _require_callable("outer_factory", outer_factory)
    exclude = bool(exclude_trigger)

    def supplier() -> RunAccumulator[Any]:
        return RunAccumulator(split_when, exclude, inner_factory, outer_factory)

    return Collector(
        supplier=supplier,
        accumulator=RunAccumulator.push,
        combiner=RunAccumulator.combine,
        finisher=RunAccumulator.finish,
        split_when=split_when,
        exclude_trigger=exclude,
    )


def split_runs(
    items: Iterable[Any],
    split_when: SplitPredicate,
    exclude_trigger: bool = False,
    inner_factory: Factory = list,
    outer_factory: Factory = list,
) -> Any:
    """Split ``items`` into runs in a single sequential pass.

    >>> split_runs(range(10), lambda i: i % 4 == 0)
    [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9]]
    """
    from runsplit._fold import collect

    return collect(items, collector_of(split_when, exclude_trigger, inner_factory, outer_factory))
