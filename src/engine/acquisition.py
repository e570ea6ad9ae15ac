"""Acquisition sizing: total cost, loan, equity, interest-only payment.

Pure function. No I/O.
"""

from src.models.assumptions import PortfolioAssumptions
from src.models.results import AcquisitionSummary

from src.engine.debt import interest_only_payment


def size_acquisition(assumptions: PortfolioAssumptions) -> AcquisitionSummary:
    """Size the purchase: sum of count x price over unit types, split into debt and equity."""
    total_cost = assumptions.total_acquisition_cost
    loan_amount = total_cost * assumptions.loan_to_value
    equity_required = total_cost - loan_amount

    return AcquisitionSummary(
        total_homes=assumptions.total_homes,
        total_acquisition_cost=total_cost,
        loan_amount=loan_amount,
        equity_required=equity_required,
        loan_to_value=assumptions.loan_to_value,
        annual_interest_only_payment=interest_only_payment(loan_amount, assumptions.interest_rate),
    )
