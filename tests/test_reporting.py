"""Unit tests for the Polars poll reporter."""

from __future__ import annotations

import pytest

from urnpoll.core.errors import InvalidParameterError
from urnpoll.core.model import EstimateResult
from urnpoll.reporting.polls import PollReporter
from urnpoll.sampling.sweep import sweep


@pytest.fixture
def four_polls() -> list[EstimateResult]:
    return [
        EstimateResult(point_estimate=p, standard_error=(p * (1 - p) / 25) ** 0.5, sample_size=25)
        for p in (0.44, 0.48, 0.56, 0.60)
    ]


def test_estimates_table_adds_interval(four_polls: list[EstimateResult]) -> None:
    table = PollReporter.from_estimates(four_polls).estimates_table(0.95)
    assert table.columns == [
        "poll",
        "sample_size",
        "point_estimate",
        "standard_error",
        "spread",
        "moe",
        "lower",
        "upper",
    ]
    assert table.get_column("poll").to_list() == [1, 2, 3, 4]
    row = table.row(0, named=True)
    assert row["moe"] == pytest.approx(four_polls[0].margin_of_error(0.95))
    assert row["lower"] == pytest.approx(0.44 - row["moe"])
    assert row["upper"] == pytest.approx(0.44 + row["moe"])


def test_summary_reports_range(four_polls: list[EstimateResult]) -> None:
    summary = PollReporter.from_estimates(four_polls).summary()
    assert summary["polls"] == 4
    assert summary["min_estimate"] == pytest.approx(0.44)
    assert summary["max_estimate"] == pytest.approx(0.60)
    assert summary["mean_estimate"] == pytest.approx(0.52)


def test_summary_of_empty_report() -> None:
    rep = PollReporter.from_estimates([])
    assert rep.df.height == 0
    assert rep.summary() == {"polls": 0}


def test_sweep_table_keeps_order_and_percent() -> None:
    rep = PollReporter.from_sweep(sweep(0.51, [1000, 100]))
    assert rep.df.get_column("assumed_proportion").to_list() == [0.51, 0.51]
    assert rep.sweep_table().get_column("sample_size").to_list() == [1000, 100]
    pct = rep.sweep_table(percent=True).get_column("standard_error_pct").to_list()
    assert pct[0] == pytest.approx(1.58, abs=0.01)


# ---------------------------------------------------------------------------
# Frame kinds


def test_reporter_kind_follows_constructor(four_polls: list[EstimateResult]) -> None:
    assert PollReporter.from_estimates(four_polls).kind == "estimates"
    assert PollReporter.from_estimates([]).kind == "estimates"
    assert PollReporter.from_sweep(sweep(0.5, [10, 100])).kind == "sweep"


def test_sweep_reporter_rejects_estimate_tables() -> None:
    rep = PollReporter.from_sweep(sweep(0.5, [10, 100]))
    with pytest.raises(InvalidParameterError, match="estimates_table"):
        rep.estimates_table()
    with pytest.raises(InvalidParameterError, match="summary"):
        rep.summary()


def test_estimates_reporter_rejects_sweep_table(four_polls: list[EstimateResult]) -> None:
    rep = PollReporter.from_estimates(four_polls)
    with pytest.raises(InvalidParameterError, match="sweep_table"):
        rep.sweep_table()
    with pytest.raises(InvalidParameterError):
        rep.sweep_table(percent=True)
