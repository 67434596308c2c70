"""
urnpoll.reporting.polls
=======================

Poll reporter that turns estimates and sweep curves into Polars frames.

Rendering (tables, plots) is left to the caller; this module only shapes
the numbers.

Examples
--------
>>> from urnpoll.core.model import EstimateResult
>>> from urnpoll.reporting.polls import PollReporter
>>> rep = PollReporter.from_estimates([
...     EstimateResult(point_estimate=0.44, standard_error=0.0993, sample_size=25),
...     EstimateResult(point_estimate=0.60, standard_error=0.0980, sample_size=25),
... ])
>>> rep.estimates_table().height
2
>>> rep.summary()["polls"]
2
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

import polars as pl

from urnpoll.core.errors import InvalidParameterError
from urnpoll.core.model import EstimateResult, EstimateRow, SweepResult
from urnpoll.stats.common.statistical import z_critical

_ESTIMATE_SCHEMA = {
    "poll": pl.Int64,
    "sample_size": pl.Int64,
    "point_estimate": pl.Float64,
    "standard_error": pl.Float64,
    "spread": pl.Float64,
}
_SWEEP_COLUMNS = ("sample_size", "standard_error", "assumed_proportion")


@dataclass
class PollReporter:
    """
    Poll results view backed by a Polars DataFrame.

    A reporter holds either per-poll estimates (`from_estimates`) or a
    standard-error curve (`from_sweep`); each table method only accepts its
    own kind of frame.
    """

    df: pl.DataFrame

    @property
    def kind(self) -> str:
        """Frame kind read from the columns: estimates, sweep or unknown."""
        columns = set(self.df.columns)
        if set(_ESTIMATE_SCHEMA) <= columns:
            return "estimates"
        if set(_SWEEP_COLUMNS) <= columns:
            return "sweep"
        return "unknown"

    def _require(self, kind: str, method: str) -> None:
        if self.kind != kind:
            raise InvalidParameterError(
                "reporter", self.kind, f"{method}() needs a reporter built from {kind}"
            )

    @classmethod
    def from_estimates(cls, results: Iterable[EstimateResult]) -> "PollReporter":
        """One row per poll, numbered from 1 in the order given."""
        rows: List[EstimateRow] = [
            {
                "poll": i,
                "sample_size": r.sample_size,
                "point_estimate": r.point_estimate,
                "standard_error": r.standard_error,
                "spread": r.spread,
            }
            for i, r in enumerate(results, start=1)
        ]
        return cls(pl.DataFrame(rows, schema=_ESTIMATE_SCHEMA))

    @classmethod
    def from_sweep(cls, result: SweepResult) -> "PollReporter":
        """One row per sample size, in request order."""
        df = result.to_polars().with_columns(
            pl.lit(result.assumed_proportion).alias("assumed_proportion")
        )
        return cls(df)

    def estimates_table(self, level: float = 0.95) -> pl.DataFrame:
        """
        Returns the estimate rows with a margin of error and interval bounds.

        Columns: poll, sample_size, point_estimate, standard_error, spread,
        moe, lower, upper
        """
        self._require("estimates", "estimates_table")
        z = z_critical(level)
        return self.df.with_columns(
            (pl.col("standard_error") * z).alias("moe"),
        ).with_columns(
            (pl.col("point_estimate") - pl.col("moe")).alias("lower"),
            (pl.col("point_estimate") + pl.col("moe")).alias("upper"),
        )

    def sweep_table(self, percent: bool = False) -> pl.DataFrame:
        """Sample size against standard error, optionally in percentage points."""
        self._require("sweep", "sweep_table")
        if not percent:
            return self.df.select("sample_size", "standard_error")
        return self.df.select(
            "sample_size",
            (pl.col("standard_error") * 100).alias("standard_error_pct"),
        )

    def summary(self) -> Dict[str, Any]:
        """Range and spread of the point estimates."""
        self._require("estimates", "summary")
        if self.df.is_empty():
            return {"polls": 0}
        col = self.df.get_column("point_estimate")
        return {
            "polls": self.df.height,
            "min_estimate": col.min(),
            "max_estimate": col.max(),
            "mean_estimate": col.mean(),
            "empirical_se": col.std() if self.df.height > 1 else 0.0,
        }
