"""Projection orchestrator: composes all engine sub-modules into a full projection.

Pure computation. No I/O. PortfolioAssumptions in, ProjectionResult out.
"""

import logging
from dataclasses import replace
from decimal import Decimal

from src.models.assumptions import ExitStrategy, PortfolioAssumptions, validate_assumptions
from src.models.results import AnnualCashFlow, ProjectionResult, ReturnMetrics

from src.engine.acquisition import size_acquisition
from src.engine.cashflow import (
    potential_rental_income,
    effective_rental_income,
    property_value,
    operating_expenses,
    dscr,
    cash_yield,
)
from src.engine.waterfall import PreferredReturnState, annual_preferred_return, distribute
from src.engine.valuation import valuation_series
from src.engine.disposition import compute_disposition
from src.engine.irr import solve_irr, compute_equity_multiple

logger = logging.getLogger(__name__)


def project(assumptions: PortfolioAssumptions) -> ProjectionResult:
    """Run the complete projection.

    Returns ProjectionResult with the acquisition summary, yearly cash flows,
    valuation series, exit waterfall and LP return metrics.

    Raises InvalidAssumptions if the inputs cannot be projected.
    """
    validate_assumptions(assumptions)

    acquisition = size_acquisition(assumptions)
    equity = acquisition.equity_required
    debt_service = acquisition.annual_interest_only_payment
    preferred_owed = annual_preferred_return(equity, assumptions.preferred_return)

    cash_flows: list[AnnualCashFlow] = []
    pref_state = PreferredReturnState()

    for year in range(1, assumptions.hold_period_years + 1):
        # Income
        potential = potential_rental_income(assumptions, year)
        income = effective_rental_income(assumptions, year)

        # Expenses
        value = property_value(assumptions, year)
        expenses = operating_expenses(assumptions, income, value)

        # NOI & cash flow
        year_noi = income - expenses["total"]
        cfads = year_noi - debt_service

        # Waterfall
        dist, pref_state = distribute(cfads, preferred_owed, pref_state, assumptions.lp_split)

        cash_flows.append(AnnualCashFlow(
            year=year,
            potential_rental_income=potential,
            vacancy_loss=potential - income,
            rental_income=income,
            property_management=expenses["property_management"],
            maintenance=expenses["maintenance"],
            property_taxes=expenses["property_taxes"],
            insurance=expenses["insurance"],
            hoa_fees=expenses["hoa_fees"],
            other_expenses=expenses["other_expenses"],
            operating_expenses=expenses["total"],
            noi=year_noi,
            debt_service=debt_service,
            cash_flow_after_debt_service=cfads,
            preferred_return_paid=dist.preferred_return_paid,
            unpaid_preferred_return=pref_state.unpaid,
            lp_distribution=dist.lp_distribution,
            gp_distribution=dist.gp_distribution,
            dscr=dscr(year_noi, debt_service),
            cash_yield=cash_yield(dist.lp_distribution, equity),
            property_value=value,
        ))

    valuation = valuation_series(assumptions, acquisition)

    # Disposition: interest-only, so the full loan is repaid at sale
    exit_summary = compute_disposition(
        assumptions=assumptions,
        final_year_noi=cash_flows[-1].noi,
        loan_balance=acquisition.loan_amount,
        equity_required=equity,
        accumulated_preferred_return=pref_state.accumulated_paid,
        unpaid_preferred_return=pref_state.unpaid,
    )

    # LP cash flows for IRR: exit proceeds fold into the final year
    irr_cfs: list[Decimal] = [-equity] + [cf.lp_distribution for cf in cash_flows]
    irr_cfs[-1] += exit_summary.total_to_lps - pref_state.accumulated_paid
    irr = solve_irr(irr_cfs)

    avg_yield = sum((cf.cash_yield for cf in cash_flows), Decimal("0")) / len(cash_flows)

    returns = ReturnMetrics(
        irr=irr.rate,
        irr_converged=irr.converged,
        equity_multiple=compute_equity_multiple(exit_summary.total_to_lps, equity),
        total_cash_to_lps=exit_summary.total_to_lps,
        average_annual_cash_yield=avg_yield,
        irr_cash_flows=tuple(irr_cfs),
    )

    logger.debug(
        "Projected %d homes over %d years: IRR %s, multiple %s",
        acquisition.total_homes,
        assumptions.hold_period_years,
        returns.irr,
        returns.equity_multiple,
    )

    return ProjectionResult(
        acquisition_summary=acquisition,
        cash_flows=tuple(cash_flows),
        exit_summary=exit_summary,
        returns=returns,
        portfolio_value=tuple(valuation),
        accumulated_preferred_return=pref_state.accumulated_paid,
    )


def compare_exit_strategies(
    assumptions: PortfolioAssumptions,
) -> dict[ExitStrategy, ProjectionResult]:
    """Project the same deal under every exit strategy."""
    return {
        strategy: project(replace(assumptions, exit_strategy=strategy))
        for strategy in ExitStrategy
    }
