# Requires Python 3.12+
"""
EMI Amortization — reducing-balance loan schedules.

Computes the Equated Monthly Installment for a level-payment loan and the
month-by-month split of each installment into principal and interest.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Annuity primitives
from emi_amortization.annuity import (
    MONTHS_PER_YEAR,
    monthly_rate,
    payment_factor,
    level_payment,
    balance_factor,
    balance_factors,
    interest_factors,
)

# Schedule
from emi_amortization.schedule import (
    MONEY_DECIMALS,
    DEFAULT_DATE_FORMAT,
    LoanInput,
    PaymentRecord,
    AmortizationResult,
    run_amortization,
    calculate_amortization,
)

# Solvers
from emi_amortization.solvers import (
    implied_annual_rate,
)

__all__ = [
    "__version__",
    # Annuity primitives
    "MONTHS_PER_YEAR",
    "monthly_rate",
    "payment_factor",
    "level_payment",
    "balance_factor",
    "balance_factors",
    "interest_factors",
    # Schedule
    "MONEY_DECIMALS",
    "DEFAULT_DATE_FORMAT",
    "LoanInput",
    "PaymentRecord",
    "AmortizationResult",
    "run_amortization",
    "calculate_amortization",
    # Solvers
    "implied_annual_rate",
]
