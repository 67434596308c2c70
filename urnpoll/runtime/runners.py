"""
urnpoll.runtime.runners
=======================

Runners that execute polls with a shared random generator.

The sample proportion is a random variable: run `take_poll(25)` four times
and you get four different answers. Runners make that visible. `PollRunner`
keeps the history of repeated polls of one size; `BatchRunner` repeats the
exercise for several sample sizes and compares how much the estimates
actually vary with the standard error the formula predicts.

Examples
--------
>>> from urnpoll.core.population import Population
>>> from urnpoll.runtime.runners import BatchRunner
>>> urn = Population.create(10_000, 0.5)
>>> rows = BatchRunner(urn, [25, 100], trials=200, random_source=3).run()
>>> [row.sample_size for row in rows]
[25, 100]
>>> rows[0].empirical_se > rows[1].empirical_se
True
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import numpy as np

from urnpoll.core.errors import check_positive_int
from urnpoll.core.model import EstimateResult
from urnpoll.core.population import Population
from urnpoll.sampling.estimator import estimate
from urnpoll.sampling.sampler import RandomSource, draw, draw_repeated, make_rng

logger = logging.getLogger(__name__)


class PollRunner:
    """
    Repeated polls of a fixed size against one urn.

    Provides:
    - One poll at a time or a batch of polls
    - A history of every estimate taken
    - Summary statistics of the estimates
    """

    def __init__(
        self,
        population: Population,
        sample_size: int,
        random_source: RandomSource = None,
    ):
        self.population = population
        self.sample_size = check_positive_int("sample_size", sample_size)
        self._rng = make_rng(random_source)
        self._results_history: List[EstimateResult] = []

    def take(self) -> EstimateResult:
        """Run one poll and store its estimate."""
        result = estimate(draw(self.population, self.sample_size, self._rng))
        self._results_history.append(result)
        return result

    def take_many(self, trials: int) -> List[EstimateResult]:
        """Run `trials` polls and store their estimates."""
        samples = draw_repeated(self.population, self.sample_size, trials, self._rng)
        results = [estimate(s) for s in samples]
        self._results_history.extend(results)
        return results

    def get_results_history(self) -> List[EstimateResult]:
        """Get history of all estimates."""
        return self._results_history.copy()

    def get_summary(self) -> Dict[str, Any]:
        """Summary of the point estimates taken so far."""
        estimates = np.array([r.point_estimate for r in self._results_history])
        summary: Dict[str, Any] = {
            "runner_type": "poll",
            "sample_size": self.sample_size,
            "total_polls": len(estimates),
        }
        if len(estimates):
            summary.update(
                {
                    "mean_estimate": float(estimates.mean()),
                    "min_estimate": float(estimates.min()),
                    "max_estimate": float(estimates.max()),
                    "empirical_se": (
                        float(estimates.std(ddof=1)) if len(estimates) > 1 else 0.0
                    ),
                }
            )
        return summary

    def reset(self) -> None:
        """Forget the history; the generator keeps its state."""
        self._results_history.clear()


@dataclass(frozen=True)
class SimulationRow:
    """One sample size of a simulation study."""

    sample_size: int
    trials: int
    mean_estimate: float
    empirical_se: float
    mean_analytic_se: float


class BatchRunner:
    """
    Simulation study over several sample sizes.

    For each size, draws `trials` polls and reports the average estimate, the
    standard deviation of the estimates (empirical SE) and the average
    plug-in standard error. Useful to see the law of large numbers at work
    and to check the SE formula against simulation.
    """

    def __init__(
        self,
        population: Population,
        sample_sizes: Sequence[int],
        trials: int = 1000,
        random_source: RandomSource = None,
    ):
        self.population = population
        self.sample_sizes = [check_positive_int("sample_sizes", n) for n in sample_sizes]
        self.trials = check_positive_int("trials", trials)
        self._rng = make_rng(random_source)

    def run(self) -> List[SimulationRow]:
        """Run every sample size in order and return one row per size."""
        rows = []
        for n in self.sample_sizes:
            runner = PollRunner(self.population, n, self._rng)
            results = runner.take_many(self.trials)
            estimates = np.array([r.point_estimate for r in results])
            analytic = np.array([r.standard_error for r in results])
            rows.append(
                SimulationRow(
                    sample_size=n,
                    trials=self.trials,
                    mean_estimate=float(estimates.mean()),
                    empirical_se=(
                        float(estimates.std(ddof=1)) if self.trials > 1 else 0.0
                    ),
                    mean_analytic_se=float(analytic.mean()),
                )
            )
            logger.debug(
                "Simulated %d polls of size %d: empirical SE %.4f",
                self.trials,
                n,
                rows[-1].empirical_se,
            )
        return rows
