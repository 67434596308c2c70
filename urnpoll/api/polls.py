"""
urnpoll.api.polls
=================

Poll helpers named after the lessons.

This module wraps the urn, the sampler and the estimator behind the terms a
student meets in the course: take a poll, take it again, and ask how large a
poll has to be. Every argument left out is read from a `PollConfig`
(the lesson defaults unless one is passed), including the seed.

Examples
--------
>>> from urnpoll.api.polls import repeated_polls, standard_error_curve, poll_size_for
>>> polls = repeated_polls(25, times=4, random_source=2016)
>>> len(polls)
4
>>> all(0.0 <= r.point_estimate <= 1.0 for r in polls)
True
>>> round(standard_error_curve(0.51, [1000]).standard_errors[0], 4)
0.0158
>>> poll_size_for(0.01, assumed_proportion=0.5)
2500

A seeded configuration makes the defaults reproducible:

>>> from urnpoll.config import PollConfig
>>> cfg = PollConfig(seed=7, trials=3)
>>> repeated_polls(config=cfg) == repeated_polls(config=cfg)
True
>>> len(repeated_polls(config=cfg))
3
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from urnpoll.config import PollConfig
from urnpoll.core.model import EstimateResult, SweepResult
from urnpoll.core.population import Population
from urnpoll.sampling.estimator import estimate
from urnpoll.sampling.sampler import RandomSource, draw, draw_repeated
from urnpoll.sampling.sweep import sweep
from urnpoll.stats.common.statistical import required_sample_size


def default_urn(config: Optional[PollConfig] = None) -> Population:
    """The urn used throughout the lessons unless another is given."""
    return (config or PollConfig()).build_population()


def _resolve(
    config: Optional[PollConfig],
    urn: Optional[Population],
    random_source: RandomSource,
) -> Tuple[PollConfig, Population, RandomSource]:
    cfg = config or PollConfig()
    cfg.validate()
    population = cfg.build_population() if urn is None else urn
    rng = cfg.build_rng() if random_source is None else random_source
    return cfg, population, rng


def take_poll(
    sample_size: Optional[int] = None,
    urn: Optional[Population] = None,
    random_source: RandomSource = None,
    config: Optional[PollConfig] = None,
) -> EstimateResult:
    """
    Draw one poll of `sample_size` beads and estimate p.

    Parameters
    ----------
    sample_size : int, optional
        Beads in the poll; `config.sample_size` when omitted
    urn : Population, optional
        Urn to poll; the configured urn when omitted
    random_source : numpy Generator, int or None
        Source of randomness; when omitted, a generator seeded with
        `config.seed` (fresh entropy if that is None)
    config : PollConfig, optional
        Defaults for everything left out; `PollConfig()` when omitted

    Returns
    -------
    EstimateResult
        Sample proportion, its standard error and the sample size
    """
    cfg, population, rng = _resolve(config, urn, random_source)
    n = cfg.sample_size if sample_size is None else sample_size
    return estimate(draw(population, n, rng))


def repeated_polls(
    sample_size: Optional[int] = None,
    times: Optional[int] = None,
    urn: Optional[Population] = None,
    random_source: RandomSource = None,
    config: Optional[PollConfig] = None,
) -> List[EstimateResult]:
    """Take the same poll `times` times (`config.trials` by default).

    Each poll draws fresh beads from one shared generator.
    """
    cfg, population, rng = _resolve(config, urn, random_source)
    n = cfg.sample_size if sample_size is None else sample_size
    k = cfg.trials if times is None else times
    return [estimate(s) for s in draw_repeated(population, n, k, rng)]


def standard_error_curve(
    assumed_proportion: Optional[float] = None,
    sample_sizes: Optional[Sequence[int]] = None,
    config: Optional[PollConfig] = None,
) -> SweepResult:
    """Standard error versus sample size under an assumed p.

    Defaults to `config.assumed_proportion` (0.51) and `config.sweep_sizes`
    (100 evenly spaced sizes from 100 to 25,000).
    """
    cfg = config or PollConfig()
    p = cfg.assumed_proportion if assumed_proportion is None else assumed_proportion
    sizes = cfg.sweep_sizes if sample_sizes is None else sample_sizes
    return sweep(p, sizes)


def poll_size_for(
    target_se: float,
    assumed_proportion: Optional[float] = None,
    config: Optional[PollConfig] = None,
) -> int:
    """How large a poll gives a standard error of at most `target_se`."""
    cfg = config or PollConfig()
    p = cfg.assumed_proportion if assumed_proportion is None else assumed_proportion
    return required_sample_size(p, target_se)
