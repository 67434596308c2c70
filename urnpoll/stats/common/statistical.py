"""
urnpoll.stats.common.statistical
================================

Core statistical operations for a single proportion.

If X_1, ..., X_N are independent draws of 0/1 beads from an urn whose blue
share is p, the sample average has expected value p and standard error
    SE(X̄) = sqrt(p(1-p)/N)
The spread 2p - 1 is a linear function of p, so its standard error is 2·SE.

These functions take p either as the unknown parameter (for planning, with an
assumed value) or as the observed sample proportion (plug-in estimate).
"""

from __future__ import annotations
import math
from typing import Tuple

from scipy.stats import norm

from urnpoll.core.errors import (
    InvalidParameterError,
    check_positive_int,
    check_proportion,
)


def proportion_standard_error(p: float, n: int) -> float:
    """Return sqrt(p(1-p)/n).

    Args:
        p: Proportion in [0, 1]
        n: Sample size (>= 1)

    Returns:
        Standard error of the sample proportion. Exactly 0.0 when p is 0 or 1.

    Examples:
        >>> proportion_standard_error(0.5, 25)
        0.1
        >>> proportion_standard_error(1.0, 10)
        0.0
    """
    p = check_proportion("p", p)
    n = check_positive_int("n", n)
    return math.sqrt(p * (1 - p) / n)


def spread_from_proportion(p: float) -> float:
    """Return the spread 2p - 1.

    >>> spread_from_proportion(0.75)
    0.5
    """
    p = check_proportion("p", p)
    return 2 * p - 1


def spread_standard_error(p: float, n: int) -> float:
    """Standard error of the estimated spread, 2·sqrt(p(1-p)/n)."""
    return 2 * proportion_standard_error(p, n)


def z_critical(level: float = 0.95) -> float:
    """Two-sided standard normal quantile for a confidence `level` in (0, 1).

    >>> round(z_critical(0.95), 2)
    1.96
    """
    if isinstance(level, bool) or not (0.0 < float(level) < 1.0):
        raise InvalidParameterError("level", level, "must be in (0, 1)")
    return float(norm.ppf(1 - (1 - level) / 2))


def margin_of_error(p: float, n: int, level: float = 0.95) -> float:
    """Normal-approximation margin of error z·SE."""
    return z_critical(level) * proportion_standard_error(p, n)


def confidence_interval(
    p: float, n: int, level: float = 0.95
) -> Tuple[float, float]:
    """Return (p - moe, p + moe); the bounds are not clipped to [0, 1]."""
    moe = margin_of_error(p, n, level)
    return p - moe, p + moe


def required_sample_size(assumed_p: float, target_se: float) -> int:
    """Smallest N with sqrt(p(1-p)/N) <= target_se.

    Args:
        assumed_p: Planning value for the proportion
        target_se: Desired standard error (> 0)

    Returns:
        Required sample size (at least 1)

    Examples:
        >>> required_sample_size(0.5, 0.05)
        100
    """
    p = check_proportion("assumed_p", assumed_p)
    if isinstance(target_se, bool) or not (float(target_se) > 0.0):
        raise InvalidParameterError("target_se", target_se, "must be > 0")
    if math.isinf(target_se):
        return 1
    exact = p * (1 - p) / float(target_se) ** 2
    # Tolerance absorbs rounding in the division, e.g. 0.25 / 0.05**2.
    return max(1, math.ceil(exact - 1e-9))
