"""
urnpoll — opinion polls modelled as draws from an urn.

Pollsters face a simple problem: the proportion of voters who favour a
candidate is unknown, and the only way to learn about it short of running the
election is to ask a sample. urnpoll centres on the classic sampling model
for that problem: an urn of blue and red beads stands in for the electorate,
a poll is an independent, with-replacement draw of N beads, and the share of
blue beads in the draw is the point estimate of the parameter p.

The package keeps the pieces separate:

- `core`: the urn (`Population`) and the immutable values that flow through
  the library (`Sample`, `EstimateResult`, `SweepResult`).
- `sampling`: drawing polls with an injected random generator, estimating
  p and its standard error, and projecting standard error over sample sizes.
- `stats`: closed-form formulas shared across the package.
- `runtime`: runners that repeat polls and run small simulation studies.
- `reporting`: Polars tables for whatever renders the results.
- `api`: helpers named after the course vocabulary (`take_poll`, ...).

Example
-------
>>> import urnpoll
>>> assert hasattr(urnpoll, "core")
>>> assert hasattr(urnpoll, "sampling")
>>> urnpoll.__version__
'0.1.0'
"""

from urnpoll import core, sampling, stats
from urnpoll.__version__ import __version__

__all__ = ["core", "sampling", "stats", "__version__"]
