"""SIP and lumpsum future-value projections with inflation and LTCG tax."""

from sipcalc.core.calculator import calculate, calculate_form
from sipcalc.core.simulation import simulate
from sipcalc.core.tax import compute_tax
from sipcalc.core.validation import InvalidInputError, ensure_valid, validate
from sipcalc.models import LumpsumInput, Mode, SipInput, TaxPolicy, load_input, parse_form

__all__ = [
    "InvalidInputError",
    "LumpsumInput",
    "Mode",
    "SipInput",
    "TaxPolicy",
    "calculate",
    "calculate_form",
    "compute_tax",
    "ensure_valid",
    "load_input",
    "parse_form",
    "simulate",
    "validate",
]
