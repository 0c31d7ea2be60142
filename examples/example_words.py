"""Splitting word streams on a delimiter word.

Each function reproduces one demo run with ``for_strings``; the parallel
variant drives the same collector through ``collect_partitioned``.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from runsplit import StrMatch, collect, collect_partitioned, for_strings, split_at

WORDS = ["word", "hello", "dude", "word", "and word2", "stackoverflow", "question", "ask", "word", "example"]
MIXED_CASE = ["word", "hello", "dude", "Word", "and word2", "stackoverflow", "question", "ask", "WORD", "example"]
COLON_LINES = [":", "first", "subsequence", ": this is", "second", "subsequence", ":", "the", "last", "subsequence"]


def split_on_word() -> list[list[str]]:
    # Exact match, delimiter dropped.
    return collect(WORDS, for_strings("word", exclude_trigger=True))


def split_on_word_any_case(workers: int = 3) -> list[list[str]]:
    collector = for_strings("word", exclude_trigger=False, ignore_case=True)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return collect_partitioned(split_at(MIXED_CASE, [2, 5, 7]), collector, executor=pool)


def split_on_colon_prefix() -> list[list[str]]:
    return collect(COLON_LINES, for_strings(":", True, False, StrMatch.STARTS_WITH))
