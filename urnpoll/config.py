"""
urnpoll.config
==============

Configuration for a poll exercise: which urn, how large a poll, how many
repetitions and which planning proportion to sweep.

Defaults follow the lessons: an urn of 10,000 beads split evenly, polls of 25
beads taken four times, and a standard-error curve under the assumption
p = 0.51.

Examples
--------
>>> cfg = PollConfig()
>>> cfg.validate()
>>> cfg.build_population().size
10000
>>> PollConfig.from_mapping({"sample_size": 0}).validate()
Traceback (most recent call last):
...
urnpoll.core.errors.InvalidParameterError: Invalid sample_size=0: must be >= 1
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import tomli

from urnpoll.core.errors import (
    InvalidParameterError,
    check_positive_int,
    check_proportion,
)
from urnpoll.core.population import Population
from urnpoll.sampling.sampler import make_rng
from urnpoll.sampling.sweep import sample_size_grid

logger = logging.getLogger(__name__)

# 100 evenly spaced sizes from 100 to 25,000, the range of the SE-versus-N plot.
DEFAULT_SWEEP_SIZES: Tuple[int, ...] = tuple(sample_size_grid(100, 25_000, 100))


@dataclass
class PollConfig:
    """
    Configuration for an urn poll exercise.

    Parameters
    ----------
    population_size : int, default=10000
        Number of beads in the urn
    true_proportion : float, default=0.5
        Share of blue beads
    sample_size : int, default=25
        Beads per poll
    trials : int, default=4
        Number of repeated polls
    assumed_proportion : float, default=0.51
        Planning value of p for the standard-error curve
    sweep_sizes : tuple of int, default=DEFAULT_SWEEP_SIZES
        Sample sizes for the standard-error curve (100 sizes, 100 to 25,000)
    seed : int, optional
        Seed for the random generator; None means fresh entropy
    """

    population_size: int = 10_000
    true_proportion: float = 0.5
    sample_size: int = 25
    trials: int = 4
    assumed_proportion: float = 0.51
    sweep_sizes: Tuple[int, ...] = field(default=DEFAULT_SWEEP_SIZES)
    seed: Optional[int] = None

    def validate(self) -> None:
        """Validate configuration values."""
        check_positive_int("population_size", self.population_size)
        check_proportion("true_proportion", self.true_proportion)
        check_positive_int("sample_size", self.sample_size)
        check_positive_int("trials", self.trials)
        check_proportion("assumed_proportion", self.assumed_proportion)
        for n in self.sweep_sizes:
            check_positive_int("sweep_sizes", n)
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0
        ):
            raise InvalidParameterError("seed", self.seed, "must be a non-negative int")

    def build_population(self) -> Population:
        return Population.create(self.population_size, self.true_proportion)

    def build_rng(self) -> np.random.Generator:
        """Generator seeded with `seed`, or fresh entropy when it is None."""
        return make_rng(self.seed)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PollConfig":
        """Build from a plain mapping; unknown keys are rejected."""
        if not isinstance(data, Mapping):
            raise InvalidParameterError("config", data, "must be a table of settings")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidParameterError("config", unknown, "unknown keys")
        values = dict(data)
        if "sweep_sizes" in values:
            sizes = values["sweep_sizes"]
            if isinstance(sizes, (str, bytes)) or not isinstance(sizes, Sequence):
                raise InvalidParameterError("sweep_sizes", sizes, "must be a list of integers")
            values["sweep_sizes"] = tuple(sizes)
        return cls(**values)


def load_config(path: Union[str, Path]) -> PollConfig:
    """
    Load and validate a `PollConfig` from a TOML file.

    The settings may sit at the top level or under a ``[poll]`` table.
    """
    path = Path(path)
    with path.open("rb") as f:
        data = tomli.load(f)
    cfg = PollConfig.from_mapping(data.get("poll", data))
    cfg.validate()
    logger.debug("Loaded poll config from %s", path)
    return cfg
