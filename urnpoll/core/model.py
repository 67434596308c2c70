"""
urnpoll.core.model
==================

Immutable values passed between the sampler, the estimator and callers.

- `Sample`: one poll, an ordered tuple of 0/1 observations
- `EstimateResult`: point estimate and standard error of one poll
- `SweepPoint` / `SweepResult`: analytic standard error per sample size
- TypedDict row contracts used by reporting (mypy-friendly)

Examples
--------
>>> from urnpoll.core.model import Sample
>>> s = Sample(observations=(1, 0, 1, 1))
>>> s.size, s.n_blue, s.n_red
(4, 3, 1)
>>> Sample(observations=(1, 2))
Traceback (most recent call last):
...
urnpoll.core.errors.InvalidParameterError: Invalid observations=2: must be 0 or 1
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Any,
    Iterator,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
    TypedDict,
)

import polars as pl

from urnpoll.core.errors import InvalidParameterError
from urnpoll.stats.common.statistical import (
    confidence_interval,
    margin_of_error,
)

if TYPE_CHECKING:
    from urnpoll.core.population import Population


# --- Typed rows used in reporting tables (mypy-friendly) ---


class EstimateRow(TypedDict):
    poll: int
    sample_size: int
    point_estimate: float
    standard_error: float
    spread: float


# --- Typed objects ---


@dataclass(frozen=True)
class Sample:
    """
    One poll: `observations[i]` is 1 for a blue bead and 0 for a red one.

    Attributes:
        observations: Draws in the order they were taken
        source: Population the sample came from (traceability only)
    """

    observations: Tuple[int, ...]
    source: Optional["Population"] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        raw = tuple(self.observations)
        for x in raw:
            if x not in (0, 1):
                raise InvalidParameterError("observations", x, "must be 0 or 1")
        object.__setattr__(self, "observations", tuple(int(x) for x in raw))

    def __len__(self) -> int:
        return len(self.observations)

    @property
    def size(self) -> int:
        return len(self.observations)

    @property
    def n_blue(self) -> int:
        return sum(self.observations)

    @property
    def n_red(self) -> int:
        return len(self.observations) - self.n_blue


@dataclass(frozen=True)
class EstimateResult:
    """
    Point estimate of p from one sample and its standard error.

    The standard error is the plug-in value sqrt(p̂(1-p̂)/N); it is exactly
    0.0 when every bead in the sample has the same colour.
    """

    point_estimate: float
    standard_error: float
    sample_size: int

    @property
    def spread(self) -> float:
        """Estimated spread 2p̂ - 1."""
        return 2 * self.point_estimate - 1

    @property
    def spread_standard_error(self) -> float:
        return 2 * self.standard_error

    def margin_of_error(self, level: float = 0.95) -> float:
        return margin_of_error(self.point_estimate, self.sample_size, level)

    def confidence_interval(self, level: float = 0.95) -> Tuple[float, float]:
        return confidence_interval(self.point_estimate, self.sample_size, level)

    def as_dict(self) -> dict[str, Any]:
        return {
            "sample_size": self.sample_size,
            "point_estimate": self.point_estimate,
            "standard_error": self.standard_error,
            "spread": self.spread,
        }


class SweepPoint(NamedTuple):
    sample_size: int
    standard_error: float


@dataclass(frozen=True)
class SweepResult:
    """
    Standard error projected over sample sizes under an assumed proportion.

    Points keep the order in which the sample sizes were requested.
    """

    assumed_proportion: float
    points: Tuple[SweepPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[SweepPoint]:
        return iter(self.points)

    @property
    def sample_sizes(self) -> Sequence[int]:
        return [pt.sample_size for pt in self.points]

    @property
    def standard_errors(self) -> Sequence[float]:
        return [pt.standard_error for pt in self.points]

    def to_polars(self) -> pl.DataFrame:
        """Two-column frame (sample_size, standard_error) in request order."""
        return pl.DataFrame(
            {
                "sample_size": self.sample_sizes,
                "standard_error": self.standard_errors,
            },
            schema={"sample_size": pl.Int64, "standard_error": pl.Float64},
        )
