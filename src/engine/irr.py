"""IRR computation by bisection on the NPV function.

Pure functions. No I/O.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from src.config import settings
from src.models.results import IRRResult

from src.engine.errors import NonConvergent

logger = logging.getLogger(__name__)

FOUR_PLACES = Decimal("0.0001")

LOWER_BOUND = Decimal("-0.999")
UPPER_BOUND = Decimal("2.0")
FALLBACK_GUESS = Decimal("0.1")


def npv(rate: Decimal, cash_flows: list[Decimal]) -> Decimal:
    """NPV = sum(cf[t] / (1 + rate)^t), t starting at 0."""
    return sum(
        (cf / (1 + rate) ** t for t, cf in enumerate(cash_flows)),
        Decimal("0"),
    )


def _rough_guess(cash_flows: list[Decimal]) -> Decimal:
    """Annualized total return: |sum(cf) / cf[0]|^(1/years) - 1."""
    years = len(cash_flows) - 1
    total = sum(cash_flows, Decimal("0"))
    return abs(total / cash_flows[0]) ** (Decimal("1") / years) - 1


def solve_irr(
    cash_flows: list[Decimal],
    max_iterations: int | None = None,
    precision: Decimal | None = None,
    strict: bool = False,
) -> IRRResult:
    """Find the rate at which the NPV of `cash_flows` is zero.

    cash_flows[0] should be negative (initial investment), later flows are
    distributions. Sentinels:
      - first flow non-negative (nothing invested): 0
      - no positive flow after the first (total loss): -1

    Bisects between -99.9% and 200%. NPV falls as the rate rises for an
    outflow-then-inflows profile, so a positive NPV moves the lower bound up.
    Sequences with several sign changes may not bracket a unique root.

    If the iteration budget runs out, the last midpoint is returned with
    converged=False, or NonConvergent is raised when strict is set.
    """
    if max_iterations is None:
        max_iterations = settings.irr_max_iterations
    if precision is None:
        precision = Decimal(str(settings.irr_precision))

    if not cash_flows or cash_flows[0] >= 0:
        return IRRResult(rate=Decimal("0"), converged=True)

    if not any(cf > 0 for cf in cash_flows[1:]):
        return IRRResult(rate=Decimal("-1"), converged=True)

    low = LOWER_BOUND
    high = UPPER_BOUND

    guess = _rough_guess(cash_flows)
    mid = guess if low < guess < high else FALLBACK_GUESS

    for i in range(max_iterations):
        value = npv(mid, cash_flows)

        if abs(value) < precision:
            return IRRResult(rate=mid, converged=True, iterations=i + 1)

        if value > 0:
            low = mid
        else:
            high = mid

        mid = (low + high) / 2

    if strict:
        raise NonConvergent(mid, max_iterations)
    logger.warning(
        "IRR did not converge after %d iterations, using %s", max_iterations, mid
    )
    return IRRResult(rate=mid, converged=False, iterations=max_iterations)


def calculate_irr(cash_flows: list[Decimal]) -> Decimal:
    """Best-effort IRR rate, without the convergence flag."""
    return solve_irr(cash_flows).rate


def compute_equity_multiple(
    total_cash_returned: Decimal, total_cash_invested: Decimal
) -> Decimal:
    """Equity multiple = total cash out / total cash in."""
    if total_cash_invested == 0:
        return Decimal("0")
    return (total_cash_returned / total_cash_invested).quantize(FOUR_PLACES, ROUND_HALF_UP)
