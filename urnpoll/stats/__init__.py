"""
Statistical formulas for the urn model.

1. **Common** (urnpoll.stats.common):
   Closed-form, theory-agnostic building blocks: the standard error of a
   proportion, the spread and its standard error, normal-approximation margins
   of error and the sample size needed for a target standard error.

The sampling and estimation code in `urnpoll.sampling` composes these
functions; nothing here draws random numbers.

Example:
--------
>>> from urnpoll.stats.common.statistical import proportion_standard_error
>>> round(proportion_standard_error(0.51, 1000), 4)
0.0158
"""
