# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import math
import warnings
import numpy as np

__version__ = "0.1.0"

MONTHS_PER_YEAR = 12


# =============================================================================
# Level-payment (annuity) primitives
# =============================================================================

def monthly_rate(annual_rate: float) -> float:
    """
    Convert an annual rate in percentage points to a per-period decimal rate.

    Formula:
        r = annual_rate / 12 / 100

    Args:
        annual_rate: Annual interest rate as percentage (e.g., 8.5 for 8.5%)

    Returns:
        Monthly rate as a decimal fraction (e.g., 0.0070833... for 8.5%)
    """
    return annual_rate / MONTHS_PER_YEAR / 100.0


def payment_factor(
        annual_rate: float,
        term: int
) -> float:
    """
    Calculate the level monthly payment per unit of principal for a
    fully amortizing loan (the reducing-balance EMI factor).

    Formula:
        AF(n) = r × (1 + r)^n / [(1 + r)^n - 1]

    Where:
        r = Monthly rate (annual_rate / 1200)
        n = Term in months

    Equivalently AF(n) = r / [1 - (1 + r)^-n], the inverse of the present
    value annuity factor. This discounted form is the one evaluated, via
    log1p/expm1, so tiny rates do not cancel to zero and long terms or large
    rates do not overflow. Paying AF(n) each period, with interest accruing on
    the outstanding balance at r, retires one unit of principal in exactly
    n periods.

    Args:
        annual_rate: Annual interest rate as percentage (e.g., 8.5 for 8.5%)
        term: Number of monthly periods (n)

    Returns:
        Payment per unit of principal

    Raises:
        ValueError: If term is not positive
        ValueError: If annual_rate is negative
        Warning: If the monthly rate is zero

    Example:
        >>> payment_factor(8.5, 12)
        0.08721975...  # i.e. 8,721.98 per 100,000 borrowed
    """
    if term <= 0:
        raise ValueError(f"term must be positive, got {term}")
    if annual_rate < 0:
        raise ValueError(f"annual_rate must be non-negative, got {annual_rate}")
    r = monthly_rate(annual_rate)
    if r == 0.0:
        warnings.warn("monthly rate is zero, returning straight-line repayment")
        return 1.0 / term

    return r / -math.expm1(-term * math.log1p(r))


def level_payment(
        principal: float,
        annual_rate: float,
        term: int
) -> float:
    """
    Calculate the unrounded EMI for a loan.

    Args:
        principal: Amount borrowed
        annual_rate: Annual interest rate as percentage
        term: Number of monthly periods

    Returns:
        Fixed monthly installment (unrounded)

    Raises:
        ValueError: If principal is negative (plus payment_factor errors)
    """
    if principal < 0:
        raise ValueError(f"principal must be non-negative, got {principal}")
    return principal * payment_factor(annual_rate, term)


def balance_factor(
        annual_rate: float,
        term: int,
        age: int
) -> float:
    """
    Outstanding balance as a fraction of the original principal after
    `age` level payments have been made.

    Formula:
        BAL(k) = [(1 + r)^n - (1 + r)^k] / [(1 + r)^n - 1]

    Evaluated as the overflow-free discounted form

        BAL(k) = [1 - (1 + r)^(k - n)] / [1 - (1 + r)^-n]

    At k = 0 this is 1.0 and at k = n it is 0.0. The closed form is what the
    period-by-period loop in the schedule converges to in exact arithmetic,
    so it is the reference the loop is checked against.

    Args:
        annual_rate: Annual interest rate as percentage
        term: Original term in months (n)
        age: Payments already made (k)

    Returns:
        Balance factor (fraction of principal)

    Raises:
        ValueError: If term is not positive
        ValueError: If age is negative or exceeds term
        ValueError: If annual_rate is negative
        Warning: If the monthly rate is zero
    """
    if term <= 0:
        raise ValueError(f"term must be positive, got {term}")
    if age < 0:
        raise ValueError(f"age must be non-negative, got {age}")
    if age > term:
        raise ValueError(f"age cannot exceed term, got {age} > {term}")
    if annual_rate < 0:
        raise ValueError(f"annual_rate must be non-negative, got {annual_rate}")
    if age == term:
        return 0.0
    r = monthly_rate(annual_rate)
    if r == 0.0:
        warnings.warn("monthly rate is zero, returning straight-line balance")
        return (term - age) / term

    log_growth = math.log1p(r)
    return math.expm1((age - term) * log_growth) / math.expm1(-term * log_growth)


def balance_factors(
        annual_rate: float,
        term: int
) -> np.ndarray:
    """
    Vectorized balance factors for every age of the loan.

    INDEXING CONVENTION:
    --------------------
        balances[0] = 1.0       (origination, before the first payment)
        balances[k] = BAL(k)    (after payment k)
        balances[n] = 0.0       (maturity)

    Args:
        annual_rate: Annual interest rate as percentage
        term: Term in months

    Returns:
        ndarray of length term + 1

    Raises:
        ValueError: If term is not positive
        ValueError: If annual_rate is negative
    """
    if term <= 0:
        raise ValueError(f"term must be positive, got {term}")
    if annual_rate < 0:
        raise ValueError(f"annual_rate must be non-negative, got {annual_rate}")

    ages = np.arange(term + 1, dtype=np.float64)
    r = monthly_rate(annual_rate)
    if r == 0.0:
        warnings.warn("monthly rate is zero, returning straight-line balances")
        balances = (term - ages) / term
    else:
        log_growth = np.log1p(r)
        balances = np.expm1((ages - term) * log_growth) / np.expm1(-term * log_growth)
    # Pin both ends; the closed form leaves ~1e-16 residue
    balances[0] = 1.0
    balances[-1] = 0.0
    return balances


def interest_factors(
        annual_rate: float,
        term: int
) -> np.ndarray:
    """
    Per-period interest as a fraction of the original principal.

    interest[k - 1] = BAL(k - 1) × r for periods k = 1..n, so the vector has
    length n and is non-increasing for any positive rate.

    Args:
        annual_rate: Annual interest rate as percentage
        term: Term in months

    Returns:
        ndarray of length term
    """
    balances = balance_factors(annual_rate, term)
    return balances[:-1] * monthly_rate(annual_rate)
