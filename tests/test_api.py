"""Tests for the course-vocabulary helpers."""

from __future__ import annotations

import pytest

from urnpoll.api import (
    default_urn,
    poll_size_for,
    repeated_polls,
    standard_error_curve,
    take_poll,
)
from urnpoll.config import PollConfig
from urnpoll.core.errors import InvalidParameterError
from urnpoll.core.population import Population


def test_default_urn() -> None:
    urn = default_urn()
    assert urn.size == 10_000
    assert urn.true_proportion == pytest.approx(0.5)


def test_take_poll_is_reproducible() -> None:
    assert take_poll(25, random_source=1) == take_poll(25, random_source=1)
    assert take_poll(25, random_source=1).sample_size == 25


def test_take_poll_uses_given_urn() -> None:
    all_blue = Population.create(100, 1.0)
    result = take_poll(25, urn=all_blue, random_source=1)
    assert result.point_estimate == 1.0
    assert result.standard_error == 0.0


def test_repeated_polls_vary() -> None:
    polls = repeated_polls(100, times=4, random_source=2016)
    assert len(polls) == 4
    assert all(0.0 <= p.point_estimate <= 1.0 for p in polls)
    assert len({p.point_estimate for p in polls}) > 1


def test_standard_error_curve_defaults() -> None:
    curve = standard_error_curve()
    assert curve.assumed_proportion == pytest.approx(0.51)
    assert len(curve) == 100
    assert curve.sample_sizes[0] == 100
    assert curve.sample_sizes[-1] == 25_000


def test_poll_size_for_one_percent() -> None:
    n = poll_size_for(0.01)
    assert 2_490 <= n <= 2_500
    with pytest.raises(InvalidParameterError):
        poll_size_for(0.0)


def test_invalid_poll_size_is_rejected() -> None:
    with pytest.raises(InvalidParameterError):
        take_poll(0, random_source=1)


# ---------------------------------------------------------------------------
# Defaults from PollConfig


def test_defaults_come_from_config() -> None:
    cfg = PollConfig(sample_size=40, trials=3, seed=11)
    polls = repeated_polls(config=cfg)
    assert len(polls) == 3
    assert all(p.sample_size == 40 for p in polls)
    assert take_poll(config=cfg).sample_size == 40


def test_config_seed_makes_polls_reproducible() -> None:
    cfg = PollConfig(seed=2016)
    assert take_poll(config=cfg) == take_poll(config=cfg)
    assert repeated_polls(config=cfg) == repeated_polls(config=cfg)
    assert repeated_polls(config=cfg) == repeated_polls(
        cfg.sample_size, cfg.trials, random_source=2016
    )


def test_explicit_arguments_override_config() -> None:
    cfg = PollConfig(sample_size=40, trials=3, seed=1)
    polls = repeated_polls(10, times=2, config=cfg)
    assert [p.sample_size for p in polls] == [10, 10]


def test_config_urn_is_used() -> None:
    cfg = PollConfig(population_size=50, true_proportion=1.0, seed=3)
    assert default_urn(cfg).size == 50
    assert take_poll(config=cfg).point_estimate == 1.0


def test_curve_and_poll_size_read_config() -> None:
    cfg = PollConfig(assumed_proportion=0.5, sweep_sizes=(400, 100))
    curve = standard_error_curve(config=cfg)
    assert curve.sample_sizes == [400, 100]
    assert curve.standard_errors[1] == pytest.approx(0.05)
    assert poll_size_for(0.05, config=cfg) == 100


def test_lesson_defaults_agree() -> None:
    assert standard_error_curve().sample_sizes == list(PollConfig().sweep_sizes)


def test_invalid_config_is_rejected() -> None:
    with pytest.raises(InvalidParameterError):
        take_poll(config=PollConfig(sample_size=0))
