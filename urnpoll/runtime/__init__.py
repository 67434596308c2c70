"""
Runners that repeat polls against an urn.

- `PollRunner`: repeated polls of one size, with a result history
- `BatchRunner`: a simulation study across several sample sizes

Example
-------
>>> from urnpoll.core.population import Population
>>> from urnpoll.runtime import PollRunner
>>> runner = PollRunner(Population.create(10_000, 0.5), sample_size=25, random_source=1)
>>> len(runner.take_many(4))
4
"""

from urnpoll.runtime.runners import BatchRunner, PollRunner, SimulationRow

__all__ = ["BatchRunner", "PollRunner", "SimulationRow"]
