"""Annual distribution waterfall with a cumulative, non-compounding preferred return.

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PreferredReturnState:
    """Preferred-return balances threaded from one year to the next."""
    unpaid: Decimal = Decimal("0")  # Owed but not yet paid
    accumulated_paid: Decimal = Decimal("0")  # Running total paid during the hold


@dataclass(frozen=True)
class Distribution:
    preferred_return_paid: Decimal
    remaining_cash_flow: Decimal
    lp_distribution: Decimal
    gp_distribution: Decimal


def annual_preferred_return(equity_required: Decimal, preferred_rate: Decimal) -> Decimal:
    return equity_required * preferred_rate


def distribute(
    cash_flow_after_debt_service: Decimal,
    preferred_owed: Decimal,
    state: PreferredReturnState,
    lp_split: Decimal,
) -> tuple[Distribution, PreferredReturnState]:
    """Run one year of the waterfall.

    1. If cash flow covers this year's preferred return plus any unpaid
       balance, pay both in full and clear the balance.
    2. Otherwise pay all available cash and carry the shortfall forward.
       Negative cash flow is paid through as a negative amount (an LP
       capital call), which adds to the shortfall. The carry is simple:
       no interest accrues on it.
    3. Cash left after the preferred return is split LP / GP.

    Returns the year's distribution and the state to carry into next year.
    """
    if cash_flow_after_debt_service >= preferred_owed + state.unpaid:
        paid = preferred_owed + state.unpaid
        unpaid = Decimal("0")
    else:
        paid = cash_flow_after_debt_service
        unpaid = state.unpaid + (preferred_owed - paid)

    remaining = max(Decimal("0"), cash_flow_after_debt_service - paid)
    lp_share = remaining * lp_split
    # GP takes the remainder so the split never leaks a rounding difference
    gp_share = remaining - lp_share

    distribution = Distribution(
        preferred_return_paid=paid,
        remaining_cash_flow=remaining,
        lp_distribution=paid + lp_share,
        gp_distribution=gp_share,
    )
    next_state = PreferredReturnState(
        unpaid=unpaid,
        accumulated_paid=state.accumulated_paid + paid,
    )
    return distribution, next_state
