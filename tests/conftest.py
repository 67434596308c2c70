"""Shared fixtures for urnpoll tests."""

from __future__ import annotations

import numpy as np
import pytest

from urnpoll.core.population import Population


@pytest.fixture
def urn() -> Population:
    """The lesson urn: 10,000 beads, half of them blue."""
    return Population.create(10_000, 0.5)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(2016)
