"""Month-by-month compounding for SIP and lumpsum investments."""

from __future__ import annotations

import logging
from typing import List, Union

from sipcalc.models import LumpsumInput, SipInput
from sipcalc.schemas.results import YearlyTrajectory

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def real_value(nominal: float, annual_inflation_percent: float, years: float) -> float:
    """Discount ``nominal`` by ``years`` of compounded inflation."""
    return nominal / (1 + annual_inflation_percent / 100) ** years


def simulate_sip(payload: SipInput) -> YearlyTrajectory:
    """
    Accumulate a monthly contribution that steps up once a year.

    Order of operations (per month):
      1) Interest accrues on the balance carried in from last month.
      2) This month's contribution is added (it earns nothing this month).
    At every 12th month the year is snapshotted and the contribution grows
    by the step-up percentage.
    """
    months = int(payload.tenure_years) * MONTHS_PER_YEAR
    monthly_rate = payload.annual_return_percent / 100 / 12
    step_up_factor = 1 + payload.annual_step_up_percent / 100

    current_amount = payload.monthly_amount
    future_value = 0.0
    invested = 0.0
    principal_this_year = 0.0
    interest_this_year = 0.0

    nominal: List[float] = []
    real: List[float] = []
    principal: List[float] = []
    interest: List[float] = []

    for month in range(1, months + 1):
        interest_this_month = future_value * monthly_rate
        future_value = future_value * (1 + monthly_rate) + current_amount
        invested += current_amount
        principal_this_year += current_amount
        interest_this_year += interest_this_month

        if month % MONTHS_PER_YEAR == 0:
            year = month // MONTHS_PER_YEAR
            nominal.append(future_value)
            real.append(real_value(future_value, payload.annual_inflation_percent, year))
            principal.append(principal_this_year)
            interest.append(interest_this_year)
            principal_this_year = 0.0
            interest_this_year = 0.0
            current_amount *= step_up_factor

    logger.debug(
        "SIP over %s years: invested=%s final=%s", payload.tenure_years, invested, future_value
    )
    return YearlyTrajectory(
        year_end_nominal_value=tuple(nominal),
        year_end_real_value=tuple(real),
        principal_contributed_this_year=tuple(principal),
        interest_accrued_this_year=tuple(interest),
        total_principal_invested=invested,
        final_future_value=future_value,
    )


def simulate_lumpsum(payload: LumpsumInput) -> YearlyTrajectory:
    """
    Grow a single principal with no further contributions.

    Interest is credited every ``12 / compounding_frequency`` months at the
    matching fraction of the annual rate; the default of 12 compounds
    monthly. The whole principal is attributed to the first year.
    """
    months = int(payload.tenure_years) * MONTHS_PER_YEAR
    months_per_period = MONTHS_PER_YEAR // payload.compounding_frequency
    period_rate = payload.annual_return_percent / 100 / payload.compounding_frequency

    future_value = float(payload.principal_amount)
    interest_this_year = 0.0

    nominal: List[float] = []
    real: List[float] = []
    principal: List[float] = []
    interest: List[float] = []

    for month in range(1, months + 1):
        if month % months_per_period == 0:
            interest_this_year += future_value * period_rate
            future_value = future_value * (1 + period_rate)

        if month % MONTHS_PER_YEAR == 0:
            year = month // MONTHS_PER_YEAR
            nominal.append(future_value)
            real.append(real_value(future_value, payload.annual_inflation_percent, year))
            principal.append(float(payload.principal_amount) if year == 1 else 0.0)
            interest.append(interest_this_year)
            interest_this_year = 0.0

    logger.debug(
        "Lumpsum over %s years at %s periods/yr: final=%s",
        payload.tenure_years,
        payload.compounding_frequency,
        future_value,
    )
    return YearlyTrajectory(
        year_end_nominal_value=tuple(nominal),
        year_end_real_value=tuple(real),
        principal_contributed_this_year=tuple(principal),
        interest_accrued_this_year=tuple(interest),
        total_principal_invested=float(payload.principal_amount),
        final_future_value=future_value,
    )


def simulate(payload: Union[SipInput, LumpsumInput]) -> YearlyTrajectory:
    """Project an already validated input year by year."""
    if isinstance(payload, SipInput):
        return simulate_sip(payload)
    return simulate_lumpsum(payload)
