"""Flat-rate long-term capital gains tax with an exemption and optional cess."""

from __future__ import annotations

import logging

from sipcalc.config import DEFAULT_LTCG, LtcgDefaults
from sipcalc.models import TaxPolicy
from sipcalc.schemas.results import TaxOutcome

logger = logging.getLogger(__name__)


def compute_tax(
    final_future_value: float,
    total_principal_invested: float,
    policy: TaxPolicy,
    defaults: LtcgDefaults = DEFAULT_LTCG,
) -> TaxOutcome:
    """
    Tax the nominal gain of a projection.

    Custom exemption and rate are used verbatim when the default policy is
    switched off. Cess is a surcharge on the computed tax, not on the gain.
    """
    gain = max(0.0, final_future_value - total_principal_invested)

    if policy.use_default_ltcg_policy:
        exemption = defaults.exemption_threshold
        rate = defaults.tax_rate_percent
    else:
        exemption = policy.custom_exemption_amount
        rate = policy.custom_tax_rate_percent

    cess_rate = defaults.cess_rate_percent if policy.apply_cess else 0.0

    taxable_gain = max(0.0, gain - exemption)
    tax = taxable_gain * (rate / 100)
    tax += tax * (cess_rate / 100)

    logger.debug("LTCG gain=%s taxable=%s tax=%s", gain, taxable_gain, tax)
    return TaxOutcome(
        gain=gain,
        exemption_threshold=exemption,
        tax_rate_percent=rate,
        cess_rate_percent=cess_rate,
        taxable_gain=taxable_gain,
        tax_amount=tax,
        post_tax_future_value=final_future_value - tax,
    )
