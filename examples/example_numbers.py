"""Numeric and record splitting with plain predicates."""

from __future__ import annotations

from collections import deque

from runsplit import collect, collector_of, split_runs


def weeks(days: int = 28) -> list[list[int]]:
    return split_runs(range(days), lambda i: i % 7 == 0)


def sentences(words: list[str]) -> list[list[str]]:
    # A capitalised word opens a sentence.
    return split_runs(words, lambda s: s[:1].isupper())


def entries_between_sevens(n: int = 28) -> list[list[tuple[int, str]]]:
    records = [(i, f"str_{i}") for i in range(n)]
    return collect(records, collector_of(lambda kv: "7" in kv[1], exclude_trigger=True))


def weeks_as_deques(days: int = 28) -> deque[deque[int]]:
    return collect(range(days), collector_of(lambda i: i % 7 == 0, False, deque, deque))
