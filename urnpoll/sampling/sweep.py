"""
urnpoll.sampling.sweep
======================

Standard error as a function of sample size.

We do not know p, so we cannot compute the standard error of a poll before
running it. For planning we assume a value (the lessons use p = 0.51, a close
race) and evaluate sqrt(p(1-p)/N) over candidate sample sizes. This is an
analytic projection; no beads are drawn.

Examples
--------
>>> from urnpoll.sampling.sweep import sweep
>>> result = sweep(0.51, [1000])
>>> round(result.standard_errors[0], 4)
0.0158
>>> sweep(0.5, [100, 10, 1000]).sample_sizes
[100, 10, 1000]
"""

from __future__ import annotations
from typing import Iterable, List

import numpy as np

from urnpoll.core.errors import check_positive_int, check_proportion
from urnpoll.core.model import SweepPoint, SweepResult
from urnpoll.stats.common.statistical import proportion_standard_error


def sweep(assumed_proportion: float, sample_sizes: Iterable[int]) -> SweepResult:
    """Evaluate the standard error for each sample size, in the given order.

    Args:
        assumed_proportion: Planning value for p, in [0, 1]
        sample_sizes: Sample sizes to evaluate (each >= 1); not re-sorted

    Returns:
        A `SweepResult` with one point per requested size.
    """
    p = check_proportion("assumed_proportion", assumed_proportion)
    # Validate everything before computing anything.
    sizes = [check_positive_int("sample_sizes", n) for n in sample_sizes]
    points = tuple(SweepPoint(n, proportion_standard_error(p, n)) for n in sizes)
    return SweepResult(assumed_proportion=p, points=points)


def sample_size_grid(start: int = 100, stop: int = 25_000, num: int = 100) -> List[int]:
    """Evenly spaced integer sample sizes from `start` to `stop` inclusive.

    >>> sample_size_grid(100, 500, 5)
    [100, 200, 300, 400, 500]
    """
    start = check_positive_int("start", start)
    stop = check_positive_int("stop", stop)
    num = check_positive_int("num", num)
    grid = np.rint(np.linspace(start, stop, num)).astype(np.int64)
    return [int(n) for n in grid]
