"""Cash flow analysis: rental income, itemized expenses, NOI, DSCR, cash yield.

Pure functions: Decimal in, Decimal out. No I/O.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from src.models.assumptions import PortfolioAssumptions

logger = logging.getLogger(__name__)

FOUR_PLACES = Decimal("0.0001")


def rent_growth_factor(assumptions: PortfolioAssumptions, year: int) -> Decimal:
    """(1 + rent growth)^(year - 1); year 1 rents are the input rents."""
    return (1 + assumptions.annual_rent_growth) ** (year - 1)


def potential_rental_income(assumptions: PortfolioAssumptions, year: int) -> Decimal:
    """Gross scheduled rent for all homes in a given year (1-indexed)."""
    growth = rent_growth_factor(assumptions, year)
    return sum(
        (u.count * u.monthly_rent * 12 * growth for u in assumptions.unit_types),
        Decimal("0"),
    )


def effective_rental_income(assumptions: PortfolioAssumptions, year: int) -> Decimal:
    """Potential rent less vacancy."""
    return potential_rental_income(assumptions, year) * (1 - assumptions.vacancy_rate)


def property_value(assumptions: PortfolioAssumptions, year: int) -> Decimal:
    """Portfolio market value used as the property tax base for a projection year.

    Uses (1 + appreciation)^(year - 1): year 1 is taxed on today's value.
    The valuation series appreciates with exponent `year` instead.
    """
    growth = (1 + assumptions.home_price_appreciation) ** (year - 1)
    return sum(
        (u.count * u.market_value * growth for u in assumptions.unit_types),
        Decimal("0"),
    )


def operating_expenses(
    assumptions: PortfolioAssumptions,
    rental_income: Decimal,
    portfolio_value: Decimal,
) -> dict[str, Decimal]:
    """Itemized operating expenses for one year.

    Management and maintenance are a share of effective rent, property tax a
    share of portfolio value, and the rest fixed per home.
    """
    homes = assumptions.total_homes
    management = rental_income * assumptions.property_management_fee
    maintenance = rental_income * assumptions.maintenance_cost
    property_taxes = portfolio_value * assumptions.property_tax_rate
    insurance = homes * assumptions.insurance_cost_per_home
    hoa_fees = homes * assumptions.hoa_fees_per_home
    other = homes * assumptions.other_expenses_per_home

    total = management + maintenance + property_taxes + insurance + hoa_fees + other

    return {
        "property_management": management,
        "maintenance": maintenance,
        "property_taxes": property_taxes,
        "insurance": insurance,
        "hoa_fees": hoa_fees,
        "other_expenses": other,
        "total": total,
    }


def noi(assumptions: PortfolioAssumptions, year: int) -> Decimal:
    """Net Operating Income = effective rent - operating expenses."""
    income = effective_rental_income(assumptions, year)
    expenses = operating_expenses(assumptions, income, property_value(assumptions, year))
    return income - expenses["total"]


def dscr(noi_amount: Decimal, annual_debt_service: Decimal) -> Decimal:
    """Debt Service Coverage Ratio = NOI / annual debt service.

    Returns 0 when there is no debt service.
    """
    if annual_debt_service == 0:
        logger.debug("No debt service, reporting DSCR as 0")
        return Decimal("0")
    return (noi_amount / annual_debt_service).quantize(FOUR_PLACES, ROUND_HALF_UP)


def cash_yield(lp_distribution: Decimal, equity_required: Decimal) -> Decimal:
    """LP distribution as a percent (x100) of required equity."""
    if equity_required == 0:
        logger.debug("No equity, reporting cash yield as 0")
        return Decimal("0")
    return lp_distribution / equity_required * 100
