"""Range checks run before any simulation."""

from __future__ import annotations

import logging
import math
from typing import Optional, Union

from sipcalc.config import INPUT_LIMITS, InputLimits
from sipcalc.core.formatting import format_inr, format_number
from sipcalc.models import LumpsumInput, SipInput
from sipcalc.schemas.results import Invalid, Valid, ValidationResult

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def sip_amount_message(limits: InputLimits = INPUT_LIMITS) -> str:
    return f"Monthly SIP must be between ₹0 and {format_inr(limits.max_monthly_amount)}."


def lumpsum_amount_message(limits: InputLimits = INPUT_LIMITS) -> str:
    return f"Lumpsum must be between ₹0 and {format_inr(limits.max_principal_amount)}."


def tenure_message(limits: InputLimits = INPUT_LIMITS) -> str:
    return f"Tenure must be between {limits.min_tenure_years} and {limits.max_tenure_years} years."


def return_message(limits: InputLimits = INPUT_LIMITS) -> str:
    return f"Return must be between 0% and {format_number(limits.max_return_percent)}% p.a."


def inflation_message(limits: InputLimits = INPUT_LIMITS) -> str:
    return f"Inflation must be between 0% and {format_number(limits.max_inflation_percent)}% p.a."


def _within(value: float, low: float, high: float) -> bool:
    # NaN fails every comparison, so it lands outside any range
    return low <= value <= high


def _first_error(payload: Union[SipInput, LumpsumInput], limits: InputLimits) -> Optional[str]:
    if isinstance(payload, SipInput):
        if not _within(payload.monthly_amount, 0, limits.max_monthly_amount):
            return sip_amount_message(limits)
    elif not _within(payload.principal_amount, 0, limits.max_principal_amount):
        return lumpsum_amount_message(limits)

    tenure = payload.tenure_years
    if (
        not math.isfinite(tenure)
        or tenure != int(tenure)
        or not _within(tenure, limits.min_tenure_years, limits.max_tenure_years)
    ):
        return tenure_message(limits)

    if not _within(payload.annual_return_percent, 0, limits.max_return_percent):
        return return_message(limits)

    if not _within(payload.annual_inflation_percent, 0, limits.max_inflation_percent):
        return inflation_message(limits)

    return None


def validate(
    payload: Union[SipInput, LumpsumInput],
    limits: InputLimits = INPUT_LIMITS,
) -> ValidationResult:
    """Check the active mode's amount, then tenure, return and inflation.

    The first failing rule decides the reason. Tax policy fields are passed
    through untouched.
    """
    reason = _first_error(payload, limits)
    if reason is None:
        return Valid()
    logger.debug("Rejected %s input: %s", payload.mode, reason)
    return Invalid(reason=reason)


def ensure_valid(
    payload: Union[SipInput, LumpsumInput],
    limits: InputLimits = INPUT_LIMITS,
) -> None:
    result = validate(payload, limits)
    if isinstance(result, Invalid):
        raise InvalidInputError(result.reason)
