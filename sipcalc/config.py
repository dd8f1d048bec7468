"""Input limits and default tax policy used across the calculator."""

from pydantic import BaseModel, ConfigDict


class InputLimits(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_monthly_amount: float = 500_000
    max_principal_amount: float = 1_000_000_000
    min_tenure_years: int = 1
    max_tenure_years: int = 35
    max_return_percent: float = 20
    max_inflation_percent: float = 10


class LtcgDefaults(BaseModel):
    """Flat-rate LTCG policy applied when the caller opts into the default."""

    model_config = ConfigDict(frozen=True)

    exemption_threshold: float = 125_000
    tax_rate_percent: float = 12.5
    cess_rate_percent: float = 4


INPUT_LIMITS = InputLimits()
DEFAULT_LTCG = LtcgDefaults()
