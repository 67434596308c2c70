"""
urnpoll.sampling.estimator
==========================

Turn a sample into an estimate of p.

The estimate is the sample average X̄ of the 0/1 observations, i.e. the
proportion of blue beads in the poll. Its standard error is the plug-in
formula sqrt(X̄(1-X̄)/N). The estimator only ever sees the sample; it never
reads the urn's true proportion.

Examples
--------
>>> from urnpoll.core.model import Sample
>>> from urnpoll.sampling.estimator import estimate
>>> r = estimate(Sample(observations=(1,) * 12 + (0,) * 13))
>>> r.point_estimate, r.sample_size
(0.48, 25)
>>> estimate(Sample(observations=(1, 1, 1))).standard_error
0.0
"""

from __future__ import annotations

from urnpoll.core.errors import InvalidParameterError
from urnpoll.core.model import EstimateResult, Sample
from urnpoll.stats.common.statistical import proportion_standard_error


def estimate(sample: Sample) -> EstimateResult:
    """Return the sample proportion and its standard error."""
    n = len(sample.observations)
    if n == 0:
        raise InvalidParameterError("sample", sample, "must contain at least one observation")
    p_hat = sample.n_blue / n
    return EstimateResult(
        point_estimate=p_hat,
        standard_error=proportion_standard_error(p_hat, n),
        sample_size=n,
    )
