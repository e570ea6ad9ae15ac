from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from src.engine.errors import InvalidAssumptions


class ExitStrategy(Enum):
    PORTFOLIO = "portfolio"  # Bulk sale at an exit cap rate
    INDIVIDUAL = "individual"  # Homes sold one by one at a premium


@dataclass(frozen=True)
class UnitType:
    """Economics of one home type in the portfolio."""
    name: str
    count: int
    acquisition_price: Decimal
    market_value: Decimal
    monthly_rent: Decimal


@dataclass(frozen=True)
class PortfolioAssumptions:
    # Fund structure
    total_homes: int = 500
    bed3_count: int = 250
    bed4_count: int = 250
    preferred_return: Decimal = Decimal("0.08")
    lp_split: Decimal = Decimal("0.80")
    gp_split: Decimal = Decimal("0.20")

    # Financing
    loan_to_value: Decimal = Decimal("0.60")
    interest_rate: Decimal = Decimal("0.055")  # Annual
    interest_only: bool = True
    interest_only_period: int = 10  # Years
    loan_term_years: int = 30  # Only used by the balance helper

    # Appreciation & growth
    home_price_appreciation: Decimal = Decimal("0.03")
    annual_rent_growth: Decimal = Decimal("0.03")

    # 3 bed
    acquisition_price_3bed: Decimal = Decimal("240000")
    market_value_3bed: Decimal = Decimal("310000")
    monthly_rent_3bed: Decimal = Decimal("2100")

    # 4 bed
    acquisition_price_4bed: Decimal = Decimal("311695")
    market_value_4bed: Decimal = Decimal("360000")
    monthly_rent_4bed: Decimal = Decimal("2400")

    # Operating
    vacancy_rate: Decimal = Decimal("0.05")
    property_management_fee: Decimal = Decimal("0.08")  # % of effective rent
    maintenance_cost: Decimal = Decimal("0.05")  # % of effective rent
    property_tax_rate: Decimal = Decimal("0.01")  # % of property value
    insurance_cost_per_home: Decimal = Decimal("1200")  # Annual
    hoa_fees_per_home: Decimal = Decimal("0")  # Annual
    other_expenses_per_home: Decimal = Decimal("0")  # Annual

    # Exit
    hold_period_years: int = 7
    exit_strategy: ExitStrategy = ExitStrategy.PORTFOLIO
    portfolio_exit_cap_rate: Decimal = Decimal("0.055")
    brokerage_fee: Decimal = Decimal("0.05")
    individual_sales_premium: Decimal = Decimal("0.05")

    @property
    def unit_types(self) -> tuple[UnitType, UnitType]:
        return (
            UnitType(
                name="3 Bed",
                count=self.bed3_count,
                acquisition_price=self.acquisition_price_3bed,
                market_value=self.market_value_3bed,
                monthly_rent=self.monthly_rent_3bed,
            ),
            UnitType(
                name="4 Bed",
                count=self.bed4_count,
                acquisition_price=self.acquisition_price_4bed,
                market_value=self.market_value_4bed,
                monthly_rent=self.monthly_rent_4bed,
            ),
        )

    @property
    def total_acquisition_cost(self) -> Decimal:
        return sum((u.count * u.acquisition_price for u in self.unit_types), Decimal("0"))

    @property
    def loan_amount(self) -> Decimal:
        return self.total_acquisition_cost * self.loan_to_value

    @property
    def equity_required(self) -> Decimal:
        return self.total_acquisition_cost - self.loan_amount

    @property
    def initial_portfolio_value(self) -> Decimal:
        return sum((u.count * u.market_value for u in self.unit_types), Decimal("0"))


def validate_assumptions(assumptions: PortfolioAssumptions) -> None:
    """Raise InvalidAssumptions if the projection cannot be run on these inputs."""
    if assumptions.lp_split + assumptions.gp_split != Decimal("1"):
        raise InvalidAssumptions(
            f"LP/GP split must sum to 1, got {assumptions.lp_split} + {assumptions.gp_split}"
        )
    if assumptions.hold_period_years < 1:
        raise InvalidAssumptions(
            f"Hold period must be at least 1 year, got {assumptions.hold_period_years}"
        )
    if assumptions.bed3_count < 0 or assumptions.bed4_count < 0:
        raise InvalidAssumptions("Unit counts cannot be negative")
    # Cash yield, equity multiple and IRR are all relative to equity
    if assumptions.equity_required <= 0:
        raise InvalidAssumptions(
            f"Required equity must be positive, got {assumptions.equity_required} "
            f"(LTV {assumptions.loan_to_value})"
        )
    if (
        assumptions.exit_strategy == ExitStrategy.PORTFOLIO
        and assumptions.portfolio_exit_cap_rate <= 0
    ):
        raise InvalidAssumptions("Portfolio exit requires a positive exit cap rate")
