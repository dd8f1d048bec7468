"""Turn trajectories and tax outcomes into table, chart and summary records.

Rounding to whole rupees happens here and nowhere else; none of the rounded
figures are fed back into the engine.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Union

from sipcalc.models import LumpsumInput, Mode, SipInput
from sipcalc.schemas.report import (
    BreakdownRow,
    CalculationReport,
    ChartSeries,
    Summary,
)
from sipcalc.schemas.results import TaxOutcome, YearlyTrajectory

RUPEE = "₹"


def round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _group_indian(digits: str) -> str:
    # last three digits, then pairs: 1,23,45,678
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: List[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(value: float) -> str:
    """Whole-rupee currency string with Indian digit grouping.

    Unvalidated tax settings can push tax figures to infinity or NaN; those
    render as ``₹∞``, ``-₹∞`` and ``₹NaN`` instead of failing.
    """
    if math.isnan(value):
        return f"{RUPEE}NaN"
    if math.isinf(value):
        return f"-{RUPEE}∞" if value < 0 else f"{RUPEE}∞"
    amount = round_half_up(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}{RUPEE}{_group_indian(str(abs(amount)))}"


def format_number(value: float) -> str:
    """Plain number without a trailing ``.0`` (``12`` not ``12.0``, ``12.5`` stays)."""
    return f"{value:g}"


def build_breakdown_rows(trajectory: YearlyTrajectory) -> List[BreakdownRow]:
    return [
        BreakdownRow(
            year=index + 1,
            nominal_value=nominal,
            principal_contributed=principal,
            interest_accrued=interest,
            real_value=real,
        )
        for index, (nominal, principal, interest, real) in enumerate(
            zip(
                trajectory.year_end_nominal_value,
                trajectory.principal_contributed_this_year,
                trajectory.interest_accrued_this_year,
                trajectory.year_end_real_value,
            )
        )
    ]


def display_row(row: BreakdownRow) -> Dict[str, str]:
    return {
        "year": str(row.year),
        "nominal_value": format_inr(row.nominal_value),
        "principal_contributed": format_inr(row.principal_contributed),
        "interest_accrued": format_inr(row.interest_accrued),
        "real_value": format_inr(row.real_value),
    }


def build_chart_series(trajectory: YearlyTrajectory) -> ChartSeries:
    return ChartSeries(
        labels=[str(year) for year in range(1, trajectory.years + 1)],
        nominal=[round_half_up(value) for value in trajectory.year_end_nominal_value],
        real=[round_half_up(value) for value in trajectory.year_end_real_value],
    )


def effective_cagr_percent(final_value: float, invested: float, years: int) -> float:
    """Annualised growth from total invested to final value; 0 when nothing was invested."""
    if invested <= 0:
        return 0.0
    return ((final_value / invested) ** (1 / years) - 1) * 100


def summarize(
    payload: Union[SipInput, LumpsumInput],
    trajectory: YearlyTrajectory,
    tax: TaxOutcome,
) -> Summary:
    label = "SIP" if payload.mode == Mode.SIP else "Lumpsum"
    years = int(payload.tenure_years)
    headline = (
        f"{label} · {years} yrs · "
        f"{format_number(payload.annual_return_percent)}% p.a. · "
        f"Infl {format_number(payload.annual_inflation_percent)}%"
    )
    tax_info = (
        f"LTCG: taxable {format_inr(tax.taxable_gain)}, "
        f"tax {format_inr(tax.tax_amount)}, "
        f"post-tax {format_inr(tax.post_tax_future_value)}"
    )
    final = trajectory.final_future_value
    return Summary(
        future_value=final,
        inflation_adjusted_value=final
        / (1 + payload.annual_inflation_percent / 100) ** years,
        total_invested=trajectory.total_principal_invested,
        total_gain=tax.gain,
        effective_cagr_percent=effective_cagr_percent(
            final, trajectory.total_principal_invested, years
        ),
        headline=headline,
        tax_info=tax_info,
    )


def build_report(
    payload: Union[SipInput, LumpsumInput],
    trajectory: YearlyTrajectory,
    tax: TaxOutcome,
) -> CalculationReport:
    return CalculationReport(
        input=payload,
        trajectory=trajectory,
        tax=tax,
        summary=summarize(payload, trajectory, tax),
        rows=build_breakdown_rows(trajectory),
        chart=build_chart_series(trajectory),
    )
