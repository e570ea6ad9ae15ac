"""Portfolio disposition (sale) and exit waterfall.

Pure functions. No I/O.
"""

from decimal import Decimal

from src.models.assumptions import ExitStrategy, PortfolioAssumptions
from src.models.results import ExitSummary

from src.engine.valuation import portfolio_value


def gross_sale_proceeds(assumptions: PortfolioAssumptions, final_year_noi: Decimal) -> Decimal:
    """Sale price under the chosen exit strategy.

    Portfolio: direct capitalization of the final year's NOI.
    Individual: appreciated market value of every home plus a retail premium.
    """
    if assumptions.exit_strategy == ExitStrategy.PORTFOLIO:
        return final_year_noi / assumptions.portfolio_exit_cap_rate
    exit_value = portfolio_value(assumptions, assumptions.hold_period_years)
    return exit_value * (1 + assumptions.individual_sales_premium)


def compute_disposition(
    assumptions: PortfolioAssumptions,
    final_year_noi: Decimal,
    loan_balance: Decimal,
    equity_required: Decimal,
    accumulated_preferred_return: Decimal,
    unpaid_preferred_return: Decimal,
) -> ExitSummary:
    """Compute sale proceeds and run them through the exit waterfall.

    Args:
        assumptions: Portfolio assumptions (exit strategy, fees, splits)
        final_year_noi: NOI of the last hold year (portfolio exit only)
        loan_balance: Debt repaid at sale
        equity_required: LP capital returned first
        accumulated_preferred_return: Preferred return already paid during the hold
        unpaid_preferred_return: Preferred return owed but not yet paid
    """
    gross = gross_sale_proceeds(assumptions, final_year_noi)
    selling_costs = gross * assumptions.brokerage_fee
    net_sale_proceeds = gross - selling_costs
    net_after_debt = net_sale_proceeds - loan_balance

    # Paid preferred return already left the deal during the hold, so only
    # the unpaid balance comes out of sale proceeds. LPs are still credited
    # with the full preferred return in total_to_lps.
    return_of_capital = equity_required
    preferred_at_exit = accumulated_preferred_return + unpaid_preferred_return
    residual = net_after_debt - return_of_capital - unpaid_preferred_return

    if residual > 0:
        lp_profit = residual * assumptions.lp_split
        gp_profit = residual * assumptions.gp_split
    else:
        lp_profit = Decimal("0")
        gp_profit = Decimal("0")

    return ExitSummary(
        exit_strategy=assumptions.exit_strategy,
        gross_sale_proceeds=gross,
        selling_costs=selling_costs,
        net_sale_proceeds=net_sale_proceeds,
        remaining_loan_balance=loan_balance,
        net_proceeds_after_debt=net_after_debt,
        return_of_capital=return_of_capital,
        preferred_return_at_exit=preferred_at_exit,
        residual_proceeds=residual,
        lp_profit=lp_profit,
        gp_profit=gp_profit,
        total_to_lps=return_of_capital + preferred_at_exit + lp_profit,
    )
