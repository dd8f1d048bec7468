from __future__ import annotations

import math
from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Mode(str, Enum):
    SIP = "sip"
    LUMPSUM = "lumpsum"


class TaxPolicy(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    use_default_ltcg_policy: bool = True
    custom_exemption_amount: float = 0.0
    custom_tax_rate_percent: float = 0.0
    apply_cess: bool = True


class _InvestmentBase(BaseModel):
    # ranges are checked by core.validation, not at construction
    model_config = ConfigDict(extra="forbid", frozen=True)

    # whole years; non-integral values are rejected by core.validation
    tenure_years: float
    annual_return_percent: float
    annual_inflation_percent: float
    tax_policy: TaxPolicy = Field(default_factory=TaxPolicy)


class SipInput(_InvestmentBase):
    mode: Literal["sip"] = "sip"

    monthly_amount: float
    annual_step_up_percent: float = 0.0


class LumpsumInput(_InvestmentBase):
    mode: Literal["lumpsum"] = "lumpsum"

    principal_amount: float
    # periods per year; interest is credited every 12 / frequency months
    compounding_frequency: Literal[1, 2, 3, 4, 6, 12] = 12


InvestmentInput = Annotated[Union[SipInput, LumpsumInput], Field(discriminator="mode")]

_input_adapter = TypeAdapter(InvestmentInput)


def load_input(payload: Mapping[str, Any]) -> Union[SipInput, LumpsumInput]:
    """Build the mode-specific input from a plain mapping keyed by field name."""
    return _input_adapter.validate_python(dict(payload))


def _numeric(value: Any) -> float:
    """Blank, missing and non-numeric form values count as zero."""
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "on", "yes", "checked"}
    return bool(value)


def _whole(value: float) -> Union[int, float]:
    # "4.0" from a select becomes 4 so it matches the frequency literal
    return int(value) if math.isfinite(value) and value.is_integer() else value


def parse_form(raw: Mapping[str, Any]) -> Union[SipInput, LumpsumInput]:
    """Translate calculator form fields into an input record.

    Keys follow the form: ``mode``, ``sipAmount``, ``stepUp``,
    ``lumpsumAmount``, ``compFreq``, ``tenure``, ``returnRate``,
    ``inflation``, ``applyDefaultLTCG``, ``customExemption``, ``customRate``
    and ``applyCess``. Only the active mode's amount fields are read.
    """
    mode = Mode(str(raw.get("mode", Mode.SIP.value)).strip().lower())

    policy = TaxPolicy(
        use_default_ltcg_policy=_flag(raw.get("applyDefaultLTCG", True)),
        custom_exemption_amount=_numeric(raw.get("customExemption")),
        custom_tax_rate_percent=_numeric(raw.get("customRate")),
        apply_cess=_flag(raw.get("applyCess", True)),
    )
    shared = {
        "tenure_years": _numeric(raw.get("tenure")),
        "annual_return_percent": _numeric(raw.get("returnRate")),
        "annual_inflation_percent": _numeric(raw.get("inflation")),
        "tax_policy": policy,
    }

    if mode == Mode.SIP:
        return SipInput(
            monthly_amount=_numeric(raw.get("sipAmount")),
            annual_step_up_percent=_numeric(raw.get("stepUp")),
            **shared,
        )

    frequency = raw.get("compFreq")
    extra = {}
    if frequency not in (None, ""):
        extra["compounding_frequency"] = _whole(_numeric(frequency))
    return LumpsumInput(
        principal_amount=_numeric(raw.get("lumpsumAmount")),
        **extra,
        **shared,
    )
