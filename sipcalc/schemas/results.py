"""Data contracts produced by validation, simulation and tax calculation."""

from typing import Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Valid(BaseModel):
    """Input passed every range rule."""

    model_config = ConfigDict(frozen=True)

    status: Literal["valid"] = "valid"

    def __bool__(self) -> bool:
        return True


class Invalid(BaseModel):
    """Input broke a range rule; ``reason`` is shown to the user as-is."""

    model_config = ConfigDict(frozen=True)

    status: Literal["invalid"] = "invalid"
    reason: str

    def __bool__(self) -> bool:
        return False


ValidationResult = Union[Valid, Invalid]


class YearlyTrajectory(BaseModel):
    """Year-end snapshots of one simulation, index ``i`` is the end of year ``i + 1``."""

    model_config = ConfigDict(frozen=True)

    year_end_nominal_value: Tuple[float, ...] = Field(
        ..., description="Balance at each year end, before inflation."
    )
    year_end_real_value: Tuple[float, ...] = Field(
        ..., description="Year-end balance discounted by cumulative inflation."
    )
    principal_contributed_this_year: Tuple[float, ...]
    interest_accrued_this_year: Tuple[float, ...]
    total_principal_invested: float
    final_future_value: float

    @model_validator(mode="after")
    def ensure_consistency(self) -> "YearlyTrajectory":
        lengths = {
            len(self.year_end_nominal_value),
            len(self.year_end_real_value),
            len(self.principal_contributed_this_year),
            len(self.interest_accrued_this_year),
        }
        if len(lengths) != 1:
            raise ValueError("trajectory sequences must have equal length")
        if not self.year_end_nominal_value:
            raise ValueError("trajectory must cover at least one year")
        if self.final_future_value != self.year_end_nominal_value[-1]:
            raise ValueError("final_future_value must equal the last year-end nominal value")
        return self

    @property
    def years(self) -> int:
        return len(self.year_end_nominal_value)


class TaxOutcome(BaseModel):
    """LTCG tax on the gain of one trajectory."""

    model_config = ConfigDict(frozen=True)

    gain: float = Field(..., ge=0)
    exemption_threshold: float
    tax_rate_percent: float
    cess_rate_percent: float
    taxable_gain: float = Field(..., ge=0)
    tax_amount: float
    post_tax_future_value: float
