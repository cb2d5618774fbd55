# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import logging

from scipy.optimize import brentq

from . import annuity

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Search bracket for the annual rate, in percentage points
MIN_ANNUAL_RATE = 1e-9
MAX_ANNUAL_RATE = 1000.0


# =============================================================================
# Implied rate recovery
# =============================================================================

def implied_annual_rate(
        principal: float,
        emi: float,
        tenure_months: int,
        tolerance: float = 1e-10,
        max_iterations: int = 200,
) -> float:
    """
    Recover the annual rate (percentage) implied by a quoted EMI.

    The EMI formula has no closed-form inverse in the rate, so the rate is
    found numerically. Uses Brent's method (scipy.optimize.brentq) on

        f(rate) = level_payment(principal, rate, n) - emi

    which is strictly increasing in the rate. At rate -> 0 the payment tends
    to principal / n, so a positive root exists only when emi × n > principal.

    Args:
        principal: Amount borrowed
        emi: Quoted monthly installment
        tenure_months: Number of monthly periods
        tolerance: Absolute tolerance on the rate (percentage points)
        max_iterations: Iteration cap passed to brentq

    Returns:
        Annual rate as percentage (e.g., 8.5 for 8.5%)

    Raises:
        ValueError: If principal, emi or tenure_months is not positive
        ValueError: If emi × tenure_months does not exceed principal
        ValueError: If no rate in the search bracket reproduces emi

    Example:
        >>> implied_annual_rate(100_000, 8721.98, 12)
        8.50...
    """
    if principal <= 0:
        raise ValueError(f"principal must be positive, got {principal}")
    if emi <= 0:
        raise ValueError(f"emi must be positive, got {emi}")
    if tenure_months <= 0:
        raise ValueError(f"tenure_months must be positive, got {tenure_months}")
    if emi * tenure_months <= principal:
        raise ValueError(
            f"emi {emi} over {tenure_months} months does not exceed principal "
            f"{principal}; no positive rate exists"
        )

    def objective(annual_rate: float) -> float:
        return annuity.level_payment(principal, annual_rate, tenure_months) - emi

    try:
        rate = brentq(
            objective,
            MIN_ANNUAL_RATE, MAX_ANNUAL_RATE,
            xtol=tolerance,
            maxiter=max_iterations,
        )
    except ValueError as e:
        # brentq raises ValueError if the bracket does not contain a sign change
        raise ValueError(
            f"Could not find annual rate for principal={principal}, emi={emi}, "
            f"tenure_months={tenure_months}. Original error: {e}"
        ) from e

    logger.debug("Implied annual rate %.6f%% for emi %s over %d months", rate, emi, tenure_months)
    return float(rate)
