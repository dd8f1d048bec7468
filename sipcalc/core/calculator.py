"""End-to-end calculation: validate, simulate, tax, then build the report."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from pydantic import ValidationError

from sipcalc.core.formatting import build_report
from sipcalc.core.simulation import simulate
from sipcalc.core.tax import compute_tax
from sipcalc.core.validation import InvalidInputError, ensure_valid
from sipcalc.models import LumpsumInput, SipInput, parse_form
from sipcalc.schemas.report import CalculationReport

logger = logging.getLogger(__name__)


def calculate(payload: Union[SipInput, LumpsumInput]) -> CalculationReport:
    """Run one calculation; raises ``InvalidInputError`` before any simulation work."""
    ensure_valid(payload)

    trajectory = simulate(payload)
    tax = compute_tax(
        trajectory.final_future_value,
        trajectory.total_principal_invested,
        payload.tax_policy,
    )
    return build_report(payload, trajectory, tax)


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def calculate_form(raw: Mapping[str, Any]) -> CalculationReport:
    """Coerce raw form values and calculate, reporting bad values as ``InvalidInputError``."""
    try:
        payload = parse_form(raw)
    except ValidationError as exc:
        logger.debug("Form values failed type coercion: %s", exc)
        raise InvalidInputError(_describe(exc)) from exc
    except ValueError as exc:
        raise InvalidInputError(str(exc)) from exc
    return calculate(payload)
