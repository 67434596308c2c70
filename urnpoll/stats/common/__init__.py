"""
Generic statistical building blocks shared across the package.
"""

from urnpoll.stats.common.statistical import (
    confidence_interval,
    margin_of_error,
    proportion_standard_error,
    required_sample_size,
    spread_from_proportion,
    spread_standard_error,
    z_critical,
)

__all__ = [
    "confidence_interval",
    "margin_of_error",
    "proportion_standard_error",
    "required_sample_size",
    "spread_from_proportion",
    "spread_standard_error",
    "z_critical",
]
