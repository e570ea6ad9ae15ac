"""Canonical test fixtures used across all tests.

Fixture: 500-home BTR portfolio (250 3-bed / 250 4-bed), 60% LTV,
5.5% interest-only, 8% preferred return, 80/20 LP/GP, 7-year hold,
portfolio exit at a 5.5% cap rate.
"""

from dataclasses import replace

import pytest
from decimal import Decimal

from src.models.assumptions import ExitStrategy, PortfolioAssumptions


@pytest.fixture
def canonical_assumptions() -> PortfolioAssumptions:
    """The model's default portfolio, spelled out."""
    return PortfolioAssumptions(
        total_homes=500,
        bed3_count=250,
        bed4_count=250,
        preferred_return=Decimal("0.08"),
        lp_split=Decimal("0.80"),
        gp_split=Decimal("0.20"),
        loan_to_value=Decimal("0.60"),
        interest_rate=Decimal("0.055"),
        interest_only=True,
        interest_only_period=10,
        home_price_appreciation=Decimal("0.03"),
        annual_rent_growth=Decimal("0.03"),
        acquisition_price_3bed=Decimal("240000"),
        market_value_3bed=Decimal("310000"),
        monthly_rent_3bed=Decimal("2100"),
        acquisition_price_4bed=Decimal("311695"),
        market_value_4bed=Decimal("360000"),
        monthly_rent_4bed=Decimal("2400"),
        vacancy_rate=Decimal("0.05"),
        property_management_fee=Decimal("0.08"),
        maintenance_cost=Decimal("0.05"),
        property_tax_rate=Decimal("0.01"),
        insurance_cost_per_home=Decimal("1200"),
        hoa_fees_per_home=Decimal("0"),
        other_expenses_per_home=Decimal("0"),
        hold_period_years=7,
        exit_strategy=ExitStrategy.PORTFOLIO,
        portfolio_exit_cap_rate=Decimal("0.055"),
        brokerage_fee=Decimal("0.05"),
        individual_sales_premium=Decimal("0.05"),
    )


@pytest.fixture
def individual_exit_assumptions(canonical_assumptions) -> PortfolioAssumptions:
    """Same portfolio, sold home by home."""
    return replace(canonical_assumptions, exit_strategy=ExitStrategy.INDIVIDUAL)


@pytest.fixture
def distressed_assumptions(canonical_assumptions) -> PortfolioAssumptions:
    """15% debt: interest exceeds NOI every year, so every year is a deficit."""
    return replace(canonical_assumptions, interest_rate=Decimal("0.15"))


@pytest.fixture
def unlevered_assumptions(canonical_assumptions) -> PortfolioAssumptions:
    """All-equity purchase: no debt service."""
    return replace(canonical_assumptions, loan_to_value=Decimal("0"))
