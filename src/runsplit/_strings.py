"""Predicate adapters for splitting sequences of strings on a delimiter."""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Any

from runsplit._collector import Collector, ConfigurationError, collector_of
from runsplit._reducer import Factory


class StrMatch(enum.Enum):
    EQUALS = "equals"
    STARTS_WITH = "starts-with"
    ENDS_WITH = "ends-with"
    CONTAINS = "contains"

    @classmethod
    def parse(cls, value: StrMatch | str) -> StrMatch:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-")
            for m in cls:
                if m.value == key:
                    return m
        choices = ", ".join(m.value for m in cls)
        raise ConfigurationError(f"unknown match method {value!r} (expected one of: {choices})")


def string_predicate(
    delimiter: str,
    match: StrMatch | str = StrMatch.EQUALS,
    ignore_case: bool = False,
) -> Callable[[str], bool]:
    if not isinstance(delimiter, str):
        raise ConfigurationError(f"'delimiter' must be a str, got {type(delimiter).__name__}")
    if delimiter == "":
        raise ConfigurationError("'delimiter' must not be empty")
    method = StrMatch.parse(match)

    if ignore_case:
        needle = delimiter.casefold()

        def fold(s: str) -> str:
            return s.casefold()
    else:
        needle = delimiter

        def fold(s: str) -> str:
            return s

    if method is StrMatch.EQUALS:
        def pred(s: str) -> bool:
            return fold(s) == needle
    elif method is StrMatch.STARTS_WITH:
        def pred(s: str) -> bool:
            return fold(s).startswith(needle)
    elif method is StrMatch.ENDS_WITH:
        def pred(s: str) -> bool:
            return fold(s).endswith(needle)
    else:
        def pred(s: str) -> bool:
            return needle in fold(s)

    case = "nocase" if ignore_case else "case"
    pred.__qualname__ = f"string_predicate[{method.value}:{delimiter!r}:{case}]"
    return pred


def for_strings(
    delimiter: str,
    exclude_trigger: bool = False,
    ignore_case: bool = False,
    match: StrMatch | str = StrMatch.EQUALS,
    inner_factory: Factory = list,
    outer_factory: Factory = list,
) -> Collector:
    """Collector that starts a new run at every string matching ``delimiter``.

    >>> from runsplit import collect
    >>> collect([":", "a", "b", ": c", "d"], for_strings(":", True, match="starts-with"))
    [['a', 'b'], ['d']]
    """
    pred: Any = string_predicate(delimiter, match, ignore_case)
    return collector_of(pred, exclude_trigger, inner_factory, outer_factory)
