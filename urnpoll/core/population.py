"""
urnpoll.core.population
=======================

The urn: a finite, fixed-composition population of blue and red beads.

The proportion of blue beads is the *parameter* p. It is fixed when the urn
is built and is read by the sampler (to draw beads) and by test oracles; the
estimator never sees it, it only ever receives a `Sample`.

Examples
--------
>>> from urnpoll.core.population import Population
>>> from urnpoll.core.names import Label
>>> urn = Population.create(10_000, 0.5)
>>> urn.label_distribution()[Label.BLUE]
0.5
>>> Population.from_labels(["blue", "red", "red", "blue"]).true_proportion
0.5
>>> Population.create(0, 0.5)
Traceback (most recent call last):
...
urnpoll.core.errors.InvalidParameterError: Invalid size=0: must be >= 1
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

from urnpoll.core.errors import (
    InvalidParameterError,
    check_positive_int,
    check_proportion,
)
from urnpoll.core.names import Label, LabelLike


def _coerce_label(value: LabelLike) -> Label:
    if isinstance(value, Label):
        return value
    if isinstance(value, str):
        try:
            return Label(value.lower())
        except ValueError:
            raise InvalidParameterError("labels", value, "unknown label") from None
    if value in (0, 1):
        return Label.from_code(int(value))
    raise InvalidParameterError("labels", value, "unknown label")


@dataclass(frozen=True)
class Population:
    """
    Immutable urn of binary-labelled items.

    Attributes:
        size: Total number of beads in the urn
        true_proportion: Fraction of blue beads (the parameter p)
        labels: The explicit multiset of beads, when the urn was built from one
    """

    size: int
    true_proportion: float
    labels: Optional[Tuple[Label, ...]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        check_positive_int("size", self.size)
        check_proportion("true_proportion", self.true_proportion)
        if self.labels is None:
            return
        beads = tuple(_coerce_label(v) for v in self.labels)
        if len(beads) != self.size:
            raise InvalidParameterError(
                "labels", len(beads), f"must hold exactly size={self.size} beads"
            )
        n_blue = sum(1 for b in beads if b is Label.BLUE)
        if not math.isclose(n_blue / self.size, self.true_proportion):
            raise InvalidParameterError(
                "true_proportion",
                self.true_proportion,
                f"does not match the blue share of labels ({n_blue}/{self.size})",
            )
        object.__setattr__(self, "labels", beads)

    @classmethod
    def create(cls, size: int, true_proportion: float) -> "Population":
        """Build an urn of `size` beads with a blue share of `true_proportion`."""
        return cls(
            size=check_positive_int("size", size),
            true_proportion=check_proportion("true_proportion", true_proportion),
        )

    @classmethod
    def from_labels(cls, labels: Iterable[LabelLike]) -> "Population":
        """Build an urn from an explicit list of beads.

        Accepts `Label` members, "blue"/"red" strings or 1/0 codes.
        """
        beads = tuple(_coerce_label(v) for v in labels)
        if not beads:
            raise InvalidParameterError("labels", beads, "must not be empty")
        n_blue = sum(1 for b in beads if b is Label.BLUE)
        return cls(size=len(beads), true_proportion=n_blue / len(beads), labels=beads)

    def label_distribution(self) -> Dict[Label, float]:
        """Two-outcome distribution consumed by the sampler."""
        p = self.true_proportion
        return {Label.BLUE: p, Label.RED: 1.0 - p}

    @property
    def spread(self) -> float:
        """Signed margin `2p - 1` between blue and red."""
        return 2.0 * self.true_proportion - 1.0
