"""
Polls as draws from the urn.

- `sampler`: `draw` / `draw_repeated` with an injected random generator
- `estimator`: sample proportion and its standard error
- `sweep`: analytic standard error over a sequence of sample sizes

Example
-------
>>> from urnpoll.core.population import Population
>>> from urnpoll.sampling import draw, estimate
>>> urn = Population.create(10_000, 0.5)
>>> result = estimate(draw(urn, 25, random_source=1))
>>> result.sample_size
25
>>> 0.0 <= result.point_estimate <= 1.0
True
"""

from urnpoll.sampling.estimator import estimate
from urnpoll.sampling.sampler import draw, draw_repeated, make_rng
from urnpoll.sampling.sweep import sample_size_grid, sweep

__all__ = [
    "draw",
    "draw_repeated",
    "estimate",
    "make_rng",
    "sample_size_grid",
    "sweep",
]
