"""A collector whose merge step is wrong, for exercising ``check_collector``.

Bug: ``combine`` drops the right-hand leading buffer when the left side
already has an open run. Sequential scans never call ``combine``, so the
defect only shows up once the input is partitioned.
"""

from __future__ import annotations

import dataclasses

from runsplit import RunAccumulator, collector_of


def _lossy_combine(left: RunAccumulator[int], right: RunAccumulator[int]) -> RunAccumulator[int]:
    if len(left.runs) == 0:
        left.leading_buffer.extend(right.leading_buffer)
    # BUG: missing `left.runs[-1].extend(right.leading_buffer)` here.
    left.runs.extend(right.runs)
    return left


def is_zero(x: int) -> bool:
    return x == 0


correct = collector_of(is_zero)
lossy = dataclasses.replace(correct, combiner=_lossy_combine)
