"""Tests for the example modules under examples/."""

from __future__ import annotations

from collections import deque


class TestWordExamples:
    def test_split_on_word(self):
        from example_words import split_on_word

        assert split_on_word() == [
            ["hello", "dude"],
            ["and word2", "stackoverflow", "question", "ask"],
            ["example"],
        ]

    def test_split_on_word_any_case_in_parallel(self):
        from example_words import split_on_word_any_case

        assert split_on_word_any_case() == [
            ["word", "hello", "dude"],
            ["Word", "and word2", "stackoverflow", "question", "ask"],
            ["WORD", "example"],
        ]

    def test_split_on_colon_prefix(self):
        from example_words import split_on_colon_prefix

        assert split_on_colon_prefix() == [
            ["first", "subsequence"],
            ["second", "subsequence"],
            ["the", "last", "subsequence"],
        ]


class TestNumberExamples:
    def test_weeks(self):
        from example_numbers import weeks

        assert weeks() == [
            [0, 1, 2, 3, 4, 5, 6],
            [7, 8, 9, 10, 11, 12, 13],
            [14, 15, 16, 17, 18, 19, 20],
            [21, 22, 23, 24, 25, 26, 27],
        ]

    def test_sentences(self):
        from example_numbers import sentences

        words = "The first sentence. And the second sentence. Finally the last sentence.".split()
        assert sentences(words) == [
            ["The", "first", "sentence."],
            ["And", "the", "second", "sentence."],
            ["Finally", "the", "last", "sentence."],
        ]

    def test_entries_between_sevens(self):
        from example_numbers import entries_between_sevens

        runs = entries_between_sevens()
        assert [[k for k, _ in r] for r in runs] == [
            list(range(0, 7)),
            list(range(8, 17)),
            list(range(18, 27)),
            [],
        ]

    def test_weeks_as_deques(self):
        from example_numbers import weeks_as_deques

        runs = weeks_as_deques()
        assert isinstance(runs, deque)
        assert [list(r) for r in runs][0] == list(range(7))
        assert len(runs) == 4


class TestBuggyExample:
    def test_sequential_scan_hides_the_bug(self):
        from example_buggy import correct, lossy

        from runsplit import collect

        xs = [1, 0, 2, 3, 0, 4]
        assert collect(xs, lossy) == collect(xs, correct)

    def test_partitioned_scan_exposes_the_bug(self):
        from example_buggy import correct, lossy

        from runsplit import collect_partitioned

        chunks = [[0, 1], [2, 0]]
        assert collect_partitioned(chunks, correct) == [[0, 1, 2], [0]]
        assert collect_partitioned(chunks, lossy) == [[0, 1], [0]]
