"""Unit tests for the sample-proportion estimator."""

from __future__ import annotations

import math

import pytest

from urnpoll.core.errors import InvalidParameterError
from urnpoll.core.model import EstimateResult, Sample
from urnpoll.sampling.estimator import estimate


def test_estimate_is_mean_and_plug_in_se() -> None:
    sample = Sample(observations=(1,) * 12 + (0,) * 13)
    result = estimate(sample)
    assert result.point_estimate == pytest.approx(0.48)
    assert result.sample_size == 25
    assert result.standard_error == pytest.approx(math.sqrt(0.48 * 0.52 / 25))


def test_estimate_is_pure() -> None:
    sample = Sample(observations=(1, 0, 0, 1, 1, 0, 1))
    assert estimate(sample) == estimate(sample)


@pytest.mark.parametrize("bead", [0, 1])
def test_identical_observations_give_zero_se(bead: int) -> None:
    result = estimate(Sample(observations=(bead,) * 40))
    assert result.point_estimate == float(bead)
    assert result.standard_error == 0.0
    assert not math.isnan(result.standard_error)


def test_single_observation() -> None:
    result = estimate(Sample(observations=(1,)))
    assert result == EstimateResult(point_estimate=1.0, standard_error=0.0, sample_size=1)


def test_empty_sample_is_rejected() -> None:
    with pytest.raises(InvalidParameterError):
        estimate(Sample(observations=()))


def test_sample_rejects_non_binary_observations() -> None:
    with pytest.raises(InvalidParameterError):
        Sample(observations=(0, 1, 2))
    with pytest.raises(InvalidParameterError):
        Sample(observations=(0.5,))  # type: ignore[arg-type]


def test_sample_accepts_a_generator() -> None:
    sample = Sample(observations=(x for x in [1, 0, 1]))  # type: ignore[arg-type]
    assert sample.observations == (1, 0, 1)
    assert estimate(sample).point_estimate == pytest.approx(2 / 3)


def test_sample_rejects_bad_values_from_an_iterator() -> None:
    with pytest.raises(InvalidParameterError):
        Sample(observations=iter([1, 3]))  # type: ignore[arg-type]


def test_sample_normalises_observations_to_int_tuple() -> None:
    sample = Sample(observations=[True, False, 1])  # type: ignore[arg-type]
    assert sample.observations == (1, 0, 1)
    assert (sample.n_blue, sample.n_red, sample.size) == (2, 1, 3)


# ---------------------------------------------------------------------------
# Derived quantities


def test_spread_and_its_standard_error() -> None:
    result = estimate(Sample(observations=(1,) * 12 + (0,) * 13))
    assert result.spread == pytest.approx(-0.04)
    assert result.spread_standard_error == pytest.approx(2 * result.standard_error)


def test_confidence_interval_is_centred_on_estimate() -> None:
    result = EstimateResult(point_estimate=0.48, standard_error=0.1, sample_size=25)
    lower, upper = result.confidence_interval(0.95)
    assert (lower + upper) / 2 == pytest.approx(0.48)
    assert upper - lower == pytest.approx(2 * result.margin_of_error(0.95))
    assert result.margin_of_error(0.95) == pytest.approx(1.96 * math.sqrt(0.48 * 0.52 / 25), rel=1e-3)


def test_as_dict_has_all_fields() -> None:
    row = EstimateResult(point_estimate=0.6, standard_error=0.098, sample_size=25).as_dict()
    assert set(row) == {"sample_size", "point_estimate", "standard_error", "spread"}
    assert row["spread"] == pytest.approx(0.2)
