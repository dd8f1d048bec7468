from __future__ import annotations

import pytest

from sipcalc.models import LumpsumInput, SipInput, TaxPolicy


@pytest.fixture()
def sip_input() -> SipInput:
    return SipInput(
        monthly_amount=10000,
        annual_step_up_percent=10,
        tenure_years=10,
        annual_return_percent=12,
        annual_inflation_percent=6,
    )


@pytest.fixture()
def lumpsum_input() -> LumpsumInput:
    return LumpsumInput(
        principal_amount=100000,
        tenure_years=5,
        annual_return_percent=12,
        annual_inflation_percent=6,
    )


@pytest.fixture()
def custom_policy() -> TaxPolicy:
    return TaxPolicy(
        use_default_ltcg_policy=False,
        custom_exemption_amount=50000,
        custom_tax_rate_percent=20,
        apply_cess=False,
    )
