"""Presentation-ready records handed to the rendering layer."""

from typing import List

from pydantic import BaseModel, ConfigDict

from sipcalc.models import InvestmentInput
from sipcalc.schemas.results import TaxOutcome, YearlyTrajectory


class BreakdownRow(BaseModel):
    """One table row; amounts stay unrounded, see ``formatting.display_row``."""

    model_config = ConfigDict(frozen=True)

    year: int
    nominal_value: float
    principal_contributed: float
    interest_accrued: float
    real_value: float


class ChartSeries(BaseModel):
    """Nominal and real lines keyed by year labels, in whole currency units."""

    model_config = ConfigDict(frozen=True)

    labels: List[str]
    nominal: List[int]
    real: List[int]


class Summary(BaseModel):
    model_config = ConfigDict(frozen=True)

    future_value: float
    inflation_adjusted_value: float
    total_invested: float
    total_gain: float
    effective_cagr_percent: float
    headline: str
    tax_info: str


class CalculationReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    input: InvestmentInput
    trajectory: YearlyTrajectory
    tax: TaxOutcome
    summary: Summary
    rows: List[BreakdownRow]
    chart: ChartSeries
