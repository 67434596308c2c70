"""
Course-vocabulary entry points.

>>> from urnpoll.api import take_poll
>>> take_poll(25, random_source=1).sample_size
25
"""

from urnpoll.api.polls import (
    default_urn,
    poll_size_for,
    repeated_polls,
    standard_error_curve,
    take_poll,
)

__all__ = [
    "default_urn",
    "poll_size_for",
    "repeated_polls",
    "standard_error_curve",
    "take_poll",
]
