"""Report data: the projection reshaped into the sections of the printable report.

Pure functions. No I/O.
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP

from src.config import settings
from src.models.assumptions import ExitStrategy, PortfolioAssumptions
from src.models.results import ProjectionResult

FOUR_PLACES = Decimal("0.0001")

RATE_SHOCK = Decimal("0.01")  # +1% interest rate
RENT_SHOCK = Decimal("0.05")  # -5% rental income


@dataclass(frozen=True)
class KeyMetrics:
    irr: Decimal
    cash_on_cash_return: Decimal  # Fraction, not x100
    cap_rate: Decimal
    equity_multiple: Decimal
    payback_period: int | None  # Years; None if equity is never returned


@dataclass(frozen=True)
class FinancingSummary:
    total_acquisition_cost: Decimal
    loan_amount: Decimal
    equity_required: Decimal
    loan_to_value: Decimal
    interest_rate: Decimal
    interest_only: bool
    interest_only_period: int
    loan_term_years: int
    annual_debt_service: Decimal


@dataclass(frozen=True)
class UnitIncome:
    name: str
    count: int
    monthly_rent: Decimal
    annual_income: Decimal  # Year 1, after vacancy


@dataclass(frozen=True)
class ExpenseBreakdown:
    property_management: Decimal
    maintenance: Decimal
    property_taxes: Decimal
    insurance: Decimal
    hoa_fees: Decimal
    other_expenses: Decimal
    vacancy_loss: Decimal
    total_operating_expenses: Decimal


@dataclass(frozen=True)
class ExitAnalysis:
    exit_strategy: ExitStrategy
    exit_value: Decimal
    average_home_price: Decimal
    transaction_costs: Decimal
    remaining_loan_balance: Decimal
    net_proceeds: Decimal
    estimated_irr: Decimal


@dataclass(frozen=True)
class RiskAnalysis:
    break_even_occupancy: Decimal
    debt_service_coverage_ratio: Decimal
    interest_rate_sensitivity: Decimal  # Annual cash flow change, +1% rate
    rental_income_sensitivity: Decimal  # Annual cash flow change, -5% rent


@dataclass(frozen=True)
class ReportData:
    title: str
    fund_name: str
    total_homes: int
    hold_period_years: int
    selected_exit_strategy: ExitStrategy
    metrics: KeyMetrics
    financing: FinancingSummary
    rental_income: list[UnitIncome]
    total_annual_income: Decimal
    expenses: ExpenseBreakdown
    exits: list[ExitAnalysis] = field(default_factory=list)
    risk: RiskAnalysis | None = None


def payback_period(result: ProjectionResult) -> int | None:
    """First year in which cumulative LP cash (exit included) covers equity."""
    equity = result.acquisition_summary.equity_required
    cumulative = Decimal("0")
    for year, cf in enumerate(result.returns.irr_cash_flows[1:], start=1):
        cumulative += cf
        if cumulative >= equity:
            return year
    return None


def cap_rate(result: ProjectionResult) -> Decimal:
    """Going-in cap rate: year 1 NOI / Year 0 portfolio value."""
    value = result.portfolio_value[0].portfolio_value
    if value == 0:
        return Decimal("0")
    return (result.cash_flows[0].noi / value).quantize(FOUR_PLACES, ROUND_HALF_UP)


def exit_analysis(result: ProjectionResult) -> ExitAnalysis:
    exit_ = result.exit_summary
    homes = result.acquisition_summary.total_homes
    avg_price = exit_.gross_sale_proceeds / homes if homes else Decimal("0")
    return ExitAnalysis(
        exit_strategy=exit_.exit_strategy,
        exit_value=exit_.gross_sale_proceeds,
        average_home_price=avg_price,
        transaction_costs=exit_.selling_costs,
        remaining_loan_balance=exit_.remaining_loan_balance,
        net_proceeds=exit_.net_proceeds_after_debt,
        estimated_irr=result.returns.irr,
    )


def risk_analysis(assumptions: PortfolioAssumptions, result: ProjectionResult) -> RiskAnalysis:
    """Year 1 risk measures.

    Break-even occupancy treats the year 1 expense load (including the
    rent-driven fees at full occupancy) as fixed.
    """
    year1 = result.cash_flows[0]
    obligations = year1.operating_expenses + year1.debt_service
    if year1.potential_rental_income == 0:
        break_even = Decimal("0")
    else:
        break_even = (obligations / year1.potential_rental_income).quantize(
            FOUR_PLACES, ROUND_HALF_UP
        )

    rate_impact = -result.acquisition_summary.loan_amount * RATE_SHOCK
    rent_driven = assumptions.property_management_fee + assumptions.maintenance_cost
    rent_impact = -year1.rental_income * RENT_SHOCK * (1 - rent_driven)

    return RiskAnalysis(
        break_even_occupancy=break_even,
        debt_service_coverage_ratio=year1.dscr,
        interest_rate_sensitivity=rate_impact,
        rental_income_sensitivity=rent_impact,
    )


def build_report(
    assumptions: PortfolioAssumptions,
    result: ProjectionResult,
    comparison: dict[ExitStrategy, ProjectionResult] | None = None,
) -> ReportData:
    """Assemble report sections from a projection.

    `comparison` adds one exit analysis per strategy; without it only the
    projected strategy is shown.
    """
    acq = result.acquisition_summary
    year1 = result.cash_flows[0]

    metrics = KeyMetrics(
        irr=result.returns.irr,
        cash_on_cash_return=result.returns.average_annual_cash_yield / 100,
        cap_rate=cap_rate(result),
        equity_multiple=result.returns.equity_multiple,
        payback_period=payback_period(result),
    )

    financing = FinancingSummary(
        total_acquisition_cost=acq.total_acquisition_cost,
        loan_amount=acq.loan_amount,
        equity_required=acq.equity_required,
        loan_to_value=acq.loan_to_value,
        interest_rate=assumptions.interest_rate,
        interest_only=assumptions.interest_only,
        interest_only_period=assumptions.interest_only_period,
        loan_term_years=assumptions.loan_term_years,
        annual_debt_service=acq.annual_interest_only_payment,
    )

    occupancy = 1 - assumptions.vacancy_rate
    rental_income = [
        UnitIncome(
            name=u.name,
            count=u.count,
            monthly_rent=u.monthly_rent,
            annual_income=u.count * u.monthly_rent * 12 * occupancy,
        )
        for u in assumptions.unit_types
    ]

    expenses = ExpenseBreakdown(
        property_management=year1.property_management,
        maintenance=year1.maintenance,
        property_taxes=year1.property_taxes,
        insurance=year1.insurance,
        hoa_fees=year1.hoa_fees,
        other_expenses=year1.other_expenses,
        vacancy_loss=year1.vacancy_loss,
        total_operating_expenses=year1.operating_expenses,
    )

    if comparison:
        exits = [exit_analysis(comparison[s]) for s in ExitStrategy if s in comparison]
    else:
        exits = [exit_analysis(result)]

    return ReportData(
        title=settings.report_title,
        fund_name=settings.fund_name,
        total_homes=acq.total_homes,
        hold_period_years=assumptions.hold_period_years,
        selected_exit_strategy=assumptions.exit_strategy,
        metrics=metrics,
        financing=financing,
        rental_income=rental_income,
        total_annual_income=year1.rental_income,
        expenses=expenses,
        exits=exits,
        risk=risk_analysis(assumptions, result),
    )
