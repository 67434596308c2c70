"""
urnpoll.sampling.sampler
========================

Draw polls from an urn.

Each bead is drawn independently and put back before the next draw, so the
composition of the urn never changes and the observations are i.i.d.
Bernoulli(p). Randomness is injected: pass a `numpy.random.Generator` (or an
integer seed) and the same inputs reproduce the same sample.

Examples
--------
>>> from urnpoll.core.population import Population
>>> from urnpoll.sampling.sampler import draw, draw_repeated
>>> urn = Population.create(10_000, 0.5)
>>> draw(urn, 25, random_source=2016) == draw(urn, 25, random_source=2016)
True
>>> len(draw_repeated(urn, 25, trials=4, random_source=7))
4
"""

from __future__ import annotations
import logging
from typing import List, Union

import numpy as np
from scipy.stats import bernoulli

from urnpoll.core.errors import InvalidParameterError, check_positive_int
from urnpoll.core.model import Sample
from urnpoll.core.names import Label
from urnpoll.core.population import Population

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


def make_rng(random_source: RandomSource = None) -> np.random.Generator:
    """Return a Generator for `random_source`.

    A Generator is returned as is (its state is shared with the caller); an
    int is used as a seed; None draws fresh entropy from the OS.
    """
    if isinstance(random_source, np.random.Generator):
        return random_source
    if random_source is None or (
        isinstance(random_source, (int, np.integer))
        and not isinstance(random_source, bool)
        and random_source >= 0
    ):
        return np.random.default_rng(random_source)
    raise InvalidParameterError(
        "random_source", random_source, "must be a numpy Generator, a non-negative int seed or None"
    )


def draw(
    population: Population,
    sample_size: int,
    random_source: RandomSource = None,
) -> Sample:
    """Draw `sample_size` beads with replacement.

    Args:
        population: The urn to sample from
        sample_size: Number of beads (>= 1)
        random_source: Generator, seed or None

    Returns:
        A `Sample` of exactly `sample_size` observations (1 = blue).
    """
    n = check_positive_int("sample_size", sample_size)
    rng = make_rng(random_source)
    p = population.label_distribution()[Label.BLUE]
    values = bernoulli.rvs(p, size=n, random_state=rng)
    logger.debug("Drew %d beads from urn of size %d", n, population.size)
    return Sample(observations=tuple(int(v) for v in values), source=population)


def draw_repeated(
    population: Population,
    sample_size: int,
    trials: int,
    random_source: RandomSource = None,
) -> List[Sample]:
    """Draw `trials` independent polls of `sample_size` beads each.

    All polls consume the same generator one after another, so each poll gets
    fresh entropy and the whole sequence is reproducible from one seed.
    """
    n = check_positive_int("sample_size", sample_size)
    k = check_positive_int("trials", trials)
    rng = make_rng(random_source)
    logger.debug("Drawing %d polls of size %d", k, n)
    return [draw(population, n, rng) for _ in range(k)]

