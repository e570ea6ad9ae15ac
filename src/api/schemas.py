"""Pydantic schemas for API request/response models.

Fields are exposed in camelCase (lpDistribution, totalToLPs, ...) and
accepted in either camelCase or snake_case.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.models.assumptions import ExitStrategy


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---- Request schemas ----

class AssumptionsRequest(CamelModel):
    """Assumption overrides. Omitted fields keep the model defaults."""

    # Fund structure
    total_homes: int | None = None
    bed3_count: int | None = None
    bed4_count: int | None = None
    preferred_return: Decimal | None = None
    lp_split: Decimal | None = None
    gp_split: Decimal | None = None

    # Financing
    loan_to_value: Decimal | None = None
    interest_rate: Decimal | None = None
    interest_only: bool | None = None
    interest_only_period: int | None = None
    loan_term_years: int | None = None

    # Growth
    home_price_appreciation: Decimal | None = None
    annual_rent_growth: Decimal | None = None

    # Unit economics
    acquisition_price_3bed: Decimal | None = None
    market_value_3bed: Decimal | None = None
    monthly_rent_3bed: Decimal | None = None
    acquisition_price_4bed: Decimal | None = None
    market_value_4bed: Decimal | None = None
    monthly_rent_4bed: Decimal | None = None

    # Operating
    vacancy_rate: Decimal | None = None
    property_management_fee: Decimal | None = None
    maintenance_cost: Decimal | None = None
    property_tax_rate: Decimal | None = None
    insurance_cost_per_home: Decimal | None = None
    hoa_fees_per_home: Decimal | None = None
    other_expenses_per_home: Decimal | None = None

    # Exit
    hold_period_years: int | None = None
    exit_strategy: ExitStrategy | None = None
    portfolio_exit_cap_rate: Decimal | None = None
    brokerage_fee: Decimal | None = None
    individual_sales_premium: Decimal | None = None


# ---- Response schemas ----

class AssumptionsResponse(CamelModel):
    total_homes: int
    bed3_count: int
    bed4_count: int
    preferred_return: Decimal
    lp_split: Decimal
    gp_split: Decimal
    loan_to_value: Decimal
    interest_rate: Decimal
    interest_only: bool
    interest_only_period: int
    loan_term_years: int
    home_price_appreciation: Decimal
    annual_rent_growth: Decimal
    acquisition_price_3bed: Decimal
    market_value_3bed: Decimal
    monthly_rent_3bed: Decimal
    acquisition_price_4bed: Decimal
    market_value_4bed: Decimal
    monthly_rent_4bed: Decimal
    vacancy_rate: Decimal
    property_management_fee: Decimal
    maintenance_cost: Decimal
    property_tax_rate: Decimal
    insurance_cost_per_home: Decimal
    hoa_fees_per_home: Decimal
    other_expenses_per_home: Decimal
    hold_period_years: int
    exit_strategy: ExitStrategy
    portfolio_exit_cap_rate: Decimal
    brokerage_fee: Decimal
    individual_sales_premium: Decimal


class AcquisitionSummaryResponse(CamelModel):
    total_homes: int
    total_acquisition_cost: Decimal
    loan_amount: Decimal
    equity_required: Decimal
    loan_to_value: Decimal
    annual_interest_only_payment: Decimal


class CashFlowResponse(CamelModel):
    year: int
    potential_rental_income: Decimal
    vacancy_loss: Decimal
    rental_income: Decimal
    property_management: Decimal
    maintenance: Decimal
    property_taxes: Decimal
    insurance: Decimal
    hoa_fees: Decimal
    other_expenses: Decimal
    operating_expenses: Decimal
    noi: Decimal
    debt_service: Decimal
    cash_flow_after_debt_service: Decimal
    preferred_return_paid: Decimal
    unpaid_preferred_return: Decimal
    lp_distribution: Decimal
    gp_distribution: Decimal
    dscr: Decimal
    cash_yield: Decimal


class ValuationPointResponse(CamelModel):
    year: int
    label: str
    portfolio_value: Decimal
    portfolio_cost: Decimal
    portfolio_debt: Decimal
    lp_equity: Decimal
    value: Decimal


class ExitSummaryResponse(CamelModel):
    exit_strategy: ExitStrategy
    gross_sale_proceeds: Decimal
    selling_costs: Decimal
    net_sale_proceeds: Decimal
    remaining_loan_balance: Decimal
    net_proceeds_after_debt: Decimal
    return_of_capital: Decimal
    preferred_return_at_exit: Decimal
    residual_proceeds: Decimal
    lp_profit: Decimal
    gp_profit: Decimal
    total_to_lps: Decimal = Field(alias="totalToLPs")


class ReturnsResponse(CamelModel):
    irr: Decimal
    irr_converged: bool
    equity_multiple: Decimal
    total_cash_to_lps: Decimal = Field(alias="totalCashToLPs")
    average_annual_cash_yield: Decimal


class ProjectionResponse(CamelModel):
    acquisition_summary: AcquisitionSummaryResponse
    cash_flows: list[CashFlowResponse]
    exit_summary: ExitSummaryResponse
    returns: ReturnsResponse
    portfolio_value: list[ValuationPointResponse] = Field(alias="portfolioValueChartData")


class KeyMetricsResponse(CamelModel):
    irr: Decimal
    cash_on_cash_return: Decimal
    cap_rate: Decimal
    equity_multiple: Decimal
    payback_period: int | None = None


class FinancingResponse(CamelModel):
    total_acquisition_cost: Decimal
    loan_amount: Decimal
    equity_required: Decimal
    loan_to_value: Decimal
    interest_rate: Decimal
    interest_only: bool
    interest_only_period: int
    loan_term_years: int
    annual_debt_service: Decimal


class UnitIncomeResponse(CamelModel):
    name: str
    count: int
    monthly_rent: Decimal
    annual_income: Decimal


class ExpenseBreakdownResponse(CamelModel):
    property_management: Decimal
    maintenance: Decimal
    property_taxes: Decimal
    insurance: Decimal
    hoa_fees: Decimal
    other_expenses: Decimal
    vacancy_loss: Decimal
    total_operating_expenses: Decimal


class ExitAnalysisResponse(CamelModel):
    exit_strategy: ExitStrategy
    exit_value: Decimal
    average_home_price: Decimal
    transaction_costs: Decimal
    remaining_loan_balance: Decimal
    net_proceeds: Decimal
    estimated_irr: Decimal


class RiskAnalysisResponse(CamelModel):
    break_even_occupancy: Decimal
    debt_service_coverage_ratio: Decimal
    interest_rate_sensitivity: Decimal
    rental_income_sensitivity: Decimal


class ReportResponse(CamelModel):
    title: str
    fund_name: str
    total_homes: int
    hold_period_years: int
    selected_exit_strategy: ExitStrategy
    metrics: KeyMetricsResponse
    financing: FinancingResponse
    rental_income: list[UnitIncomeResponse]
    total_annual_income: Decimal
    expenses: ExpenseBreakdownResponse
    exits: list[ExitAnalysisResponse]
    risk: RiskAnalysisResponse | None = None
