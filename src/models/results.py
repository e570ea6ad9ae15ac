from dataclasses import dataclass, field
from decimal import Decimal

from src.models.assumptions import ExitStrategy


@dataclass(frozen=True)
class AcquisitionSummary:
    total_homes: int = 0
    total_acquisition_cost: Decimal = Decimal("0")
    loan_amount: Decimal = Decimal("0")
    equity_required: Decimal = Decimal("0")
    loan_to_value: Decimal = Decimal("0")
    annual_interest_only_payment: Decimal = Decimal("0")


@dataclass(frozen=True)
class AnnualCashFlow:
    year: int

    # Income
    potential_rental_income: Decimal = Decimal("0")
    vacancy_loss: Decimal = Decimal("0")
    rental_income: Decimal = Decimal("0")  # Effective, after vacancy

    # Expenses
    property_management: Decimal = Decimal("0")
    maintenance: Decimal = Decimal("0")
    property_taxes: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    hoa_fees: Decimal = Decimal("0")
    other_expenses: Decimal = Decimal("0")
    operating_expenses: Decimal = Decimal("0")

    # Operations
    noi: Decimal = Decimal("0")
    debt_service: Decimal = Decimal("0")
    cash_flow_after_debt_service: Decimal = Decimal("0")

    # Waterfall
    preferred_return_paid: Decimal = Decimal("0")
    unpaid_preferred_return: Decimal = Decimal("0")  # Carried into next year
    lp_distribution: Decimal = Decimal("0")
    gp_distribution: Decimal = Decimal("0")

    # Metrics
    dscr: Decimal = Decimal("0")
    cash_yield: Decimal = Decimal("0")  # Percent, x100

    # Tax base for the year (appreciation exponent is year - 1)
    property_value: Decimal = Decimal("0")

    @property
    def remaining_cash_flow(self) -> Decimal:
        return max(Decimal("0"), self.cash_flow_after_debt_service - self.preferred_return_paid)


@dataclass(frozen=True)
class ValuationPoint:
    year: int
    portfolio_value: Decimal = Decimal("0")
    portfolio_cost: Decimal = Decimal("0")
    portfolio_debt: Decimal = Decimal("0")  # Held at the original loan amount
    lp_equity: Decimal = Decimal("0")

    @property
    def label(self) -> str:
        return f"Year {self.year}"

    @property
    def value(self) -> Decimal:
        """Chart series value; same as portfolio_value."""
        return self.portfolio_value


@dataclass(frozen=True)
class ExitSummary:
    exit_strategy: ExitStrategy = ExitStrategy.PORTFOLIO
    gross_sale_proceeds: Decimal = Decimal("0")
    selling_costs: Decimal = Decimal("0")
    net_sale_proceeds: Decimal = Decimal("0")
    remaining_loan_balance: Decimal = Decimal("0")
    net_proceeds_after_debt: Decimal = Decimal("0")

    # Waterfall
    return_of_capital: Decimal = Decimal("0")
    preferred_return_at_exit: Decimal = Decimal("0")  # Paid during hold + still unpaid
    residual_proceeds: Decimal = Decimal("0")
    lp_profit: Decimal = Decimal("0")
    gp_profit: Decimal = Decimal("0")
    total_to_lps: Decimal = Decimal("0")


@dataclass(frozen=True)
class IRRResult:
    rate: Decimal
    converged: bool
    iterations: int = 0


@dataclass(frozen=True)
class ReturnMetrics:
    irr: Decimal = Decimal("0")
    irr_converged: bool = True
    equity_multiple: Decimal = Decimal("0")
    total_cash_to_lps: Decimal = Decimal("0")
    average_annual_cash_yield: Decimal = Decimal("0")  # Percent, x100
    irr_cash_flows: tuple[Decimal, ...] = ()


@dataclass(frozen=True)
class ProjectionResult:
    acquisition_summary: AcquisitionSummary = field(default_factory=AcquisitionSummary)
    cash_flows: tuple[AnnualCashFlow, ...] = ()
    exit_summary: ExitSummary = field(default_factory=ExitSummary)
    returns: ReturnMetrics = field(default_factory=ReturnMetrics)
    portfolio_value: tuple[ValuationPoint, ...] = ()
    accumulated_preferred_return: Decimal = Decimal("0")
