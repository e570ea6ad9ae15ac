"""Portfolio valuation series, Year 0 (acquisition) through the end of the hold.

Pure functions. No I/O.
"""

from decimal import Decimal

from src.models.assumptions import PortfolioAssumptions
from src.models.results import AcquisitionSummary, ValuationPoint


def portfolio_value(assumptions: PortfolioAssumptions, year: int) -> Decimal:
    """Market value of all homes at the end of `year` ((1 + appreciation)^year)."""
    growth = (1 + assumptions.home_price_appreciation) ** year
    return sum(
        (u.count * u.market_value * growth for u in assumptions.unit_types),
        Decimal("0"),
    )


def valuation_series(
    assumptions: PortfolioAssumptions,
    acquisition: AcquisitionSummary,
) -> list[ValuationPoint]:
    """One point per year 0..N.

    Debt stays at the original loan amount for every point: the loan is
    interest-only over the hold.
    """
    debt = acquisition.loan_amount
    points: list[ValuationPoint] = []
    for year in range(0, assumptions.hold_period_years + 1):
        value = portfolio_value(assumptions, year)
        points.append(ValuationPoint(
            year=year,
            portfolio_value=value,
            portfolio_cost=acquisition.total_acquisition_cost,
            portfolio_debt=debt,
            lp_equity=value - debt,
        ))
    return points
