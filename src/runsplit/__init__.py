from runsplit._cli import main
from runsplit._collector import Collector, ConfigurationError, collector_of, split_runs
from runsplit._fold import collect, collect_partitioned, split_at
from runsplit._reducer import AccumulatorStateError, RunAccumulator
from runsplit._strings import StrMatch, for_strings, string_predicate
from runsplit._verify import CheckResult, check_collector, reference_runs

__all__ = [
    "AccumulatorStateError",
    "CheckResult",
    "Collector",
    "ConfigurationError",
    "RunAccumulator",
    "StrMatch",
    "check_collector",
    "collect",
    "collect_partitioned",
    "collector_of",
    "for_strings",
    "main",
    "reference_runs",
    "split_at",
    "split_runs",
    "string_predicate",
]
