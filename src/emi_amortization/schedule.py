# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import datetime as dt
import logging
import math
import warnings
from dataclasses import dataclass, field

import numpy as np
from dateutil.relativedelta import relativedelta

from .annuity import MONTHS_PER_YEAR, level_payment, monthly_rate

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

MONEY_DECIMALS = 2
DEFAULT_DATE_FORMAT = "%x"  # locale's date representation

# Tolerance for treating tenure_years × 12 as a whole number of months
WHOLE_MONTH_TOLERANCE = 1e-9


# =============================================================================
# Schedule containers
# =============================================================================

@dataclass(frozen=True)
class LoanInput:
    """
    Loan terms in the caller's units.

    - principal: amount borrowed (currency units)
    - annual_rate: annual interest rate in percentage points (8.5 for 8.5%)
    - tenure_years: loan term in years
    """
    principal: float
    annual_rate: float
    tenure_years: float

    def is_valid(self) -> bool:
        """True if every input is finite and strictly positive."""
        values = (self.principal, self.annual_rate, self.tenure_years)
        return all(math.isfinite(v) and v > 0 for v in values)

    @property
    def monthly_rate(self) -> float:
        """Per-period rate as a decimal (annual_rate / 12 / 100)."""
        return monthly_rate(self.annual_rate)

    @property
    def tenure_months(self) -> int:
        """
        Number of whole monthly periods.

        tenure_years × 12 is used as is when it is a whole number. A fractional
        month count is rounded to the nearest month with a warning.
        """
        months = self.tenure_years * MONTHS_PER_YEAR
        whole = round(months)
        if abs(months - whole) > WHOLE_MONTH_TOLERANCE:
            warnings.warn(
                f"tenure_years={self.tenure_years} is {months:.4f} months, "
                f"rounding to {whole} whole months"
            )
            logger.debug("Rounded tenure of %s months to %d", months, whole)
        return int(whole)


@dataclass(frozen=True)
class PaymentRecord:
    """One period of an amortization schedule. Monetary fields are rounded."""
    payment_number: int
    due_date: dt.date
    emi: float
    principal: float
    interest: float
    remaining_balance: float
    date_format: str = field(default=DEFAULT_DATE_FORMAT, repr=False)

    @property
    def payment_date(self) -> str:
        """Due date formatted for display."""
        return self.due_date.strftime(self.date_format)

    def to_dict(self) -> dict[str, int | float | str]:
        return {
            "paymentNumber": self.payment_number,
            "paymentDate": self.payment_date,
            "emi": self.emi,
            "principal": self.principal,
            "interest": self.interest,
            "remainingBalance": self.remaining_balance,
        }


@dataclass(frozen=True)
class AmortizationResult:
    """
    Summary and schedule for a level-payment loan.

    monthly_emi and total_payable derive from the unrounded EMI; total_interest
    is the unrounded sum of per-period interest, rounded once.
    """
    monthly_emi: float
    total_interest: float
    total_payable: float
    amortization_schedule: list[PaymentRecord]

    @property
    def tenure_months(self) -> int:
        return len(self.amortization_schedule)

    def to_dict(self) -> dict[str, object]:
        return {
            "monthlyEmi": self.monthly_emi,
            "totalInterest": self.total_interest,
            "totalPayable": self.total_payable,
            "amortizationSchedule": [rec.to_dict() for rec in self.amortization_schedule],
        }

    def to_arrays(self) -> dict[str, np.ndarray]:
        """Column arrays of the schedule keyed by field name."""
        rows = self.amortization_schedule
        return {
            "payment_number": np.array([rec.payment_number for rec in rows], dtype=np.int64),
            "emi": np.array([rec.emi for rec in rows], dtype=np.float64),
            "principal": np.array([rec.principal for rec in rows], dtype=np.float64),
            "interest": np.array([rec.interest for rec in rows], dtype=np.float64),
            "remaining_balance": np.array([rec.remaining_balance for rec in rows], dtype=np.float64),
        }


# =============================================================================
# Reducing-balance amortization
# =============================================================================

def run_amortization(
    loan: LoanInput,
    start_date: dt.date | None = None,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> AmortizationResult | None:
    """
    Generate the reducing-balance schedule for a LoanInput.

    Each period accrues interest on the outstanding (unrounded) balance at the
    monthly rate; the rest of the EMI reduces principal. Rounding to
    MONEY_DECIMALS is applied only to the emitted fields, never to the running
    balance or the interest accumulator. The final balance is set to exactly
    zero to absorb floating-point drift.

    Rounding is Python round(), i.e. round-half-even on the binary value, so
    an exact binary tie such as 0.125 becomes 0.12 (JavaScript toFixed would
    give 0.13). Values that merely look like ties in decimal, such as 2.675,
    are stored slightly below the tie and round down either way.

    Payment i falls i calendar months after start_date (today if omitted).
    Dates are offset from the anchor rather than chained, so an anchor on the
    31st is clamped in short months and restored in long ones. A final
    payment date beyond datetime.MAXYEAR cannot be represented, so such a
    tenure yields None.

    Args:
        loan: Loan terms
        start_date: Anchor date; payment 1 is one month later
        date_format: strftime format for PaymentRecord.payment_date

    Returns:
        AmortizationResult, or None if the loan terms are invalid, the
        payment dates run past the calendar, or the amounts overflow a float
    """
    if not loan.is_valid():
        logger.debug("Rejected loan input %r", loan)
        return None

    tenure_months = loan.tenure_months
    if tenure_months <= 0:
        logger.debug("Rejected loan input %r: tenure rounds to zero months", loan)
        return None

    anchor = start_date if start_date is not None else dt.date.today()
    last_month = anchor.year * MONTHS_PER_YEAR + anchor.month - 1 + tenure_months
    if last_month > dt.MAXYEAR * MONTHS_PER_YEAR + MONTHS_PER_YEAR - 1:
        logger.debug("Rejected loan input %r: payment dates run past year %d", loan, dt.MAXYEAR)
        return None

    rate = loan.monthly_rate
    emi = level_payment(loan.principal, loan.annual_rate, tenure_months)
    if not math.isfinite(emi * tenure_months):
        logger.debug("Rejected loan input %r: payments overflow a float", loan)
        return None

    remaining_balance = loan.principal
    total_interest = 0.0
    schedule: list[PaymentRecord] = []

    for i in range(1, tenure_months + 1):
        interest_for_month = remaining_balance * rate
        principal_for_month = emi - interest_for_month
        remaining_balance -= principal_for_month
        total_interest += interest_for_month

        if i == tenure_months:
            remaining_balance = 0.0

        schedule.append(PaymentRecord(
            payment_number=i,
            due_date=anchor + relativedelta(months=i),
            emi=round(emi, MONEY_DECIMALS),
            principal=round(principal_for_month, MONEY_DECIMALS),
            interest=round(interest_for_month, MONEY_DECIMALS),
            remaining_balance=round(remaining_balance, MONEY_DECIMALS),
            date_format=date_format,
        ))

    return AmortizationResult(
        monthly_emi=round(emi, MONEY_DECIMALS),
        total_interest=round(total_interest, MONEY_DECIMALS),
        total_payable=round(emi * tenure_months, MONEY_DECIMALS),
        amortization_schedule=schedule,
    )


def calculate_amortization(
    principal: float,
    annual_rate: float,
    tenure_years: float,
    start_date: dt.date | None = None,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> AmortizationResult | None:
    """
    Calculate the EMI and full amortization schedule for a loan.

    Convenience wrapper that packs the scalar inputs into a LoanInput and
    calls run_amortization.

    Args:
        principal: Amount borrowed
        annual_rate: Annual interest rate as percentage (e.g., 8.5 for 8.5%)
        tenure_years: Loan term in years
        start_date: Anchor date for payment dates (default: today)
        date_format: strftime format for payment dates (default: locale)

    Returns:
        AmortizationResult, or None if any input is zero, negative or
        non-finite. Callers must handle None as "cannot compute".

    Example:
        >>> result = calculate_amortization(100_000, 8.5, 1)
        >>> result.monthly_emi, len(result.amortization_schedule)
        (8721.98, 12)
    """
    return run_amortization(
        LoanInput(principal=principal, annual_rate=annual_rate, tenure_years=tenure_years),
        start_date=start_date,
        date_format=date_format,
    )
