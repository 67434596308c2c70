"""
Tabular views of poll results for a presentation layer.
"""

from urnpoll.reporting.polls import PollReporter

__all__ = ["PollReporter"]
