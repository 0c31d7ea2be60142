"""Tests for check_collector and CheckResult."""

from __future__ import annotations

from hypothesis import strategies as st

from runsplit import CheckResult, check_collector, collector_of, for_strings


# ---------------------------------------------------------------------------
# CheckResult
# ---------------------------------------------------------------------------

class TestCheckResult:
    def test_to_json(self):
        r = CheckResult("c", "partition_invariance", "pass", {"key": "val"}, duration_s=1.2345)
        j = r.to_json()
        assert j["collector"] == "c"
        assert j["check"] == "partition_invariance"
        assert j["status"] == "pass"
        assert j["details"] == {"key": "val"}
        assert j["duration_s"] == 1.234  # rounded to 3 decimals

    def test_default_duration(self):
        assert CheckResult("c", "x", "pass", {}).duration_s == 0.0


# ---------------------------------------------------------------------------
# check_collector
# ---------------------------------------------------------------------------

class TestCheckCollector:
    def test_correct_collector_passes(self):
        results = check_collector(collector_of(lambda x: x == 0), st.integers(0, 3), max_examples=100)
        assert [r.check for r in results] == ["empty_input", "matches_reference", "partition_invariance"]
        assert all(r.status == "pass" for r in results)

    def test_string_collector_passes(self):
        results = check_collector(
            for_strings("word", exclude_trigger=True, ignore_case=True),
            st.sampled_from(["word", "WORD", "a", "b"]),
            max_examples=100,
        )
        assert all(r.status == "pass" for r in results)

    def test_lossy_combine_caught(self):
        from example_buggy import lossy

        results = check_collector(lossy, st.integers(0, 2), max_examples=300)
        by_check = {r.check: r for r in results}
        assert by_check["matches_reference"].status == "pass"
        part = by_check["partition_invariance"]
        assert part.status == "fail"
        ce = part.details["counterexample"]
        assert set(ce) == {"items", "cuts", "sequential", "partitioned"}
        assert ce["sequential"] != ce["partitioned"]

    def test_predicate_error_reported(self):
        def pred(x):
            raise RuntimeError("nope")

        results = check_collector(collector_of(pred), st.integers(), max_examples=20)
        assert results[0].status == "pass"  # empty input never calls the predicate
        assert {r.status for r in results[1:]} == {"error"}
        assert "RuntimeError" in results[1].details["error"]

    def test_on_result_callback(self):
        seen = []
        results = check_collector(collector_of(bool), st.booleans(), max_examples=20, on_result=seen.append)
        assert seen == results

    def test_name_defaults_to_predicate(self):
        def is_marker(x):
            return x == 0

        results = check_collector(collector_of(is_marker), st.integers(0, 1), max_examples=10)
        assert results[0].collector.endswith("is_marker")

    def test_custom_eq(self):
        results = check_collector(
            collector_of(bool),
            st.booleans(),
            max_examples=10,
            eq=lambda a, b: False,
            name="never-equal",
        )
        assert results[-1].status == "fail"
        assert results[-1].collector == "never-equal"
