from __future__ import annotations

from math import isclose

import pytest

from sipcalc.core.formatting import (
    build_breakdown_rows,
    build_chart_series,
    display_row,
    effective_cagr_percent,
    format_inr,
    round_half_up,
    summarize,
)
from sipcalc.core.simulation import simulate
from sipcalc.core.tax import compute_tax
from sipcalc.models import LumpsumInput


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "₹0"),
        (999, "₹999"),
        (1000, "₹1,000"),
        (99999.4, "₹99,999"),
        (100000, "₹1,00,000"),
        (126825.03, "₹1,26,825"),
        (12345678, "₹1,23,45,678"),
        (2.5, "₹3"),
        (-1500, "-₹1,500"),
    ],
)
def test_format_inr_uses_indian_grouping(value, expected):
    assert format_inr(value) == expected


def test_round_half_up_rounds_halves_away_from_zero():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_rows_and_chart_follow_the_trajectory(sip_input):
    trajectory = simulate(sip_input)

    rows = build_breakdown_rows(trajectory)
    chart = build_chart_series(trajectory)

    assert [row.year for row in rows] == list(range(1, 11))
    assert rows[-1].nominal_value == trajectory.final_future_value
    assert rows[3].principal_contributed == trajectory.principal_contributed_this_year[3]
    assert rows[3].interest_accrued == trajectory.interest_accrued_this_year[3]
    assert rows[3].real_value == trajectory.year_end_real_value[3]

    assert chart.labels == [str(year) for year in range(1, 11)]
    assert chart.nominal == [round_half_up(v) for v in trajectory.year_end_nominal_value]
    assert all(isinstance(value, int) for value in chart.real)


def test_rounding_never_leaks_into_the_trajectory(sip_input):
    trajectory = simulate(sip_input)
    build_chart_series(trajectory)

    assert any(value != int(value) for value in trajectory.year_end_nominal_value)


def test_display_row_formats_every_amount(lumpsum_input):
    row = build_breakdown_rows(simulate(lumpsum_input))[0]

    shown = display_row(row)

    assert shown["year"] == "1"
    assert shown["principal_contributed"] == "₹1,00,000"
    assert shown["nominal_value"] == format_inr(row.nominal_value)
    assert set(shown) == {
        "year",
        "nominal_value",
        "principal_contributed",
        "interest_accrued",
        "real_value",
    }


def test_effective_cagr_of_annual_lumpsum_equals_rate():
    assert isclose(effective_cagr_percent(121000, 100000, 2), 10.0, rel_tol=1e-9)
    assert effective_cagr_percent(5000, 0, 3) == 0.0


def test_summary_for_lumpsum():
    payload = LumpsumInput(
        principal_amount=100000,
        tenure_years=1,
        annual_return_percent=12.5,
        annual_inflation_percent=5,
        compounding_frequency=1,
    )
    trajectory = simulate(payload)
    tax = compute_tax(
        trajectory.final_future_value, trajectory.total_principal_invested, payload.tax_policy
    )

    summary = summarize(payload, trajectory, tax)

    assert summary.headline == "Lumpsum · 1 yrs · 12.5% p.a. · Infl 5%"
    assert isclose(summary.future_value, 112500, rel_tol=1e-12)
    assert isclose(summary.inflation_adjusted_value, 112500 / 1.05, rel_tol=1e-12)
    assert summary.inflation_adjusted_value == trajectory.year_end_real_value[-1]
    assert summary.total_invested == 100000
    assert isclose(summary.total_gain, 12500, rel_tol=1e-9)
    assert isclose(summary.effective_cagr_percent, 12.5, rel_tol=1e-9)
    assert summary.tax_info == "LTCG: taxable ₹0, tax ₹0, post-tax ₹1,12,500"


@pytest.mark.parametrize(
    "value, expected",
    [(float("inf"), "₹∞"), (float("-inf"), "-₹∞"), (float("nan"), "₹NaN")],
)
def test_format_inr_renders_non_finite_amounts(value, expected):
    assert format_inr(value) == expected
