"""Property checks for a ``Collector`` driven by hypothesis.

Three checks are run per collector:

- ``empty_input``: finishing an untouched accumulator yields no runs.
- ``matches_reference``: a sequential scan agrees with a naive
  list-building splitter using the same predicate and trigger policy.
- ``partition_invariance``: cutting the input at arbitrary points,
  scanning each chunk separately and merging the partial accumulators
  gives exactly the sequential result.
"""

from __future__ import annotations

import dataclasses
import time
from collections.abc import Callable
from typing import Any

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st
from hypothesis.errors import FailedHealthCheck

from runsplit._collector import Collector
from runsplit._fold import collect, collect_partitioned, split_at
from runsplit._util import _as_lists, _jsonable, _qualified_name


@dataclasses.dataclass
class CheckResult:
    collector: str
    check: str
    status: str  # "pass" | "fail" | "error"
    details: dict[str, Any]
    duration_s: float = 0.0

    def to_json(self) -> dict[str, Any]:
        return {
            "collector": self.collector,
            "check": self.check,
            "status": self.status,
            "details": self.details,
            "duration_s": round(self.duration_s, 3),
        }


def reference_runs(items: list[Any], split_when: Callable[[Any], bool], exclude_trigger: bool) -> list[list[Any]]:
    """Slow, obviously-correct splitter used as the oracle."""
    leading: list[Any] = []
    runs: list[list[Any]] = []
    for x in items:
        if split_when(x):
            runs.append([] if exclude_trigger else [x])
        elif runs:
            runs[-1].append(x)
        else:
            leading.append(x)
    if leading:
        runs.insert(0, leading)
    return runs


@st.composite
def _cut_inputs(draw: Any, elements: st.SearchStrategy[Any], max_size: int) -> tuple[list[Any], list[int]]:
    xs = draw(st.lists(elements, max_size=max_size))
    cuts = draw(st.lists(st.integers(min_value=0, max_value=len(xs)), max_size=len(xs) + 1))
    return xs, cuts


def _default_eq(a: Any, b: Any) -> bool:
    return bool(a == b)


def check_collector(
    collector: Collector,
    elements: st.SearchStrategy[Any],
    *,
    max_examples: int = 200,
    deadline_ms: int | None = None,
    max_size: int = 30,
    eq: Callable[[Any, Any], bool] | None = None,
    name: str | None = None,
    on_result: Callable[[CheckResult], None] | None = None,
) -> list[CheckResult]:
    cname = name or _qualified_name(collector.split_when)
    same = eq or _default_eq
    results: list[CheckResult] = []

    def _emit(result: CheckResult) -> None:
        results.append(result)
        if on_result is not None:
            on_result(result)

    # 1) Empty input
    t0 = time.monotonic()
    try:
        empty = collector.finisher(collector.supplier())
        if len(empty) == 0:
            _emit(CheckResult(cname, "empty_input", "pass", {}, duration_s=time.monotonic() - t0))
        else:
            _emit(CheckResult(
                cname, "empty_input", "fail",
                {"result": _jsonable(empty)},
                duration_s=time.monotonic() - t0,
            ))
    except Exception as e:
        _emit(CheckResult(
            cname, "empty_input", "error",
            {"error": f"{type(e).__name__}: {e}"},
            duration_s=time.monotonic() - t0,
        ))

    hypothesis_settings = settings(
        max_examples=max_examples,
        deadline=deadline_ms,
        suppress_health_check=[HealthCheck.too_slow, HealthCheck.filter_too_much],
        derandomize=False,
    )

    # 2) Sequential scan against the reference splitter
    t1 = time.monotonic()
    ref_ce: list[dict[str, Any] | None] = [None]

    @hypothesis_settings
    @given(st.lists(elements, max_size=max_size))
    def prop_reference(xs: list[Any]) -> None:
        got = _as_lists(collect(xs, collector))
        want = reference_runs(xs, collector.split_when, collector.exclude_trigger)
        if got != want:
            ref_ce[0] = {"items": _jsonable(xs), "result": _jsonable(got), "expected": _jsonable(want)}
            raise AssertionError("sequential scan != reference")

    _emit(_run_property(cname, "matches_reference", prop_reference, ref_ce, t1, max_examples))

    # 3) Partitioned reduction against the sequential scan
    t2 = time.monotonic()
    part_ce: list[dict[str, Any] | None] = [None]

    @hypothesis_settings
    @given(_cut_inputs(elements, max_size))
    def prop_partition(case: tuple[list[Any], list[int]]) -> None:
        xs, cuts = case
        sequential = collect(xs, collector)
        partitioned = collect_partitioned(split_at(xs, cuts), collector)
        if not same(partitioned, sequential):
            part_ce[0] = {
                "items": _jsonable(xs),
                "cuts": sorted(cuts),
                "sequential": _jsonable(sequential),
                "partitioned": _jsonable(partitioned),
            }
            raise AssertionError("partitioned != sequential")

    _emit(_run_property(cname, "partition_invariance", prop_partition, part_ce, t2, max_examples))

    return results


def _run_property(
    cname: str,
    check: str,
    prop: Callable[[], None],
    shrunk_ce: list[dict[str, Any] | None],
    started: float,
    max_examples: int,
) -> CheckResult:
    try:
        prop()
    except FailedHealthCheck as e:
        return CheckResult(
            cname, check, "fail",
            {"error": f"FailedHealthCheck: {e}"},
            duration_s=time.monotonic() - started,
        )
    except AssertionError as e:
        return CheckResult(
            cname, check, "fail",
            {"error": str(e), "counterexample": shrunk_ce[0]},
            duration_s=time.monotonic() - started,
        )
    except Exception as e:
        return CheckResult(
            cname, check, "error",
            {"error": f"{type(e).__name__}: {e}"},
            duration_s=time.monotonic() - started,
        )
    return CheckResult(
        cname, check, "pass",
        {"max_examples": max_examples},
        duration_s=time.monotonic() - started,
    )
