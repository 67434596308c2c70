"""
urnpoll.core.errors
===================

The one error kind raised by the package.

Every operation either returns an immutable value or fails synchronously with
`InvalidParameterError`. The error is a `ValueError` so callers that already
catch `ValueError` keep working.

Examples
--------
>>> err = InvalidParameterError("sample_size", 0, "must be >= 1")
>>> str(err)
'Invalid sample_size=0: must be >= 1'
>>> isinstance(err, ValueError)
True
"""

from __future__ import annotations
import math
import numbers
from typing import Any


class InvalidParameterError(ValueError):
    """Raised when an input violates its documented constraint."""

    def __init__(self, parameter: str, value: Any, reason: str) -> None:
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {parameter}={value!r}: {reason}")


def check_proportion(name: str, value: Any) -> float:
    """Return `value` as a float, failing unless it lies in [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(name, value, "must be a real number in [0, 1]")
    p = float(value)
    if math.isnan(p) or not (0.0 <= p <= 1.0):
        raise InvalidParameterError(name, value, "must be in [0, 1]")
    return p


def check_positive_int(name: str, value: Any) -> int:
    """Return `value` as an int, failing unless it is an integer >= 1."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(name, value, "must be an integer")
    if value < 1:
        raise InvalidParameterError(name, value, "must be >= 1")
    return int(value)
