"""Debt service and loan balance helpers.

Pure functions: Decimal in, Decimal out. No I/O.

The projection services the loan interest-only at a constant annual payment
and carries the original principal to exit. remaining_loan_balance() is
available to callers but is not part of the per-year projection.
"""

from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")


def interest_only_payment(principal: Decimal, annual_rate: Decimal) -> Decimal:
    """Annual interest-only debt service."""
    return principal * annual_rate


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_years: int) -> Decimal:
    """Calculate fixed monthly mortgage payment."""
    if principal <= 0:
        return Decimal("0")
    if annual_rate <= 0:
        return (principal / (term_years * 12)).quantize(TWO_PLACES, ROUND_HALF_UP)

    r = annual_rate / 12
    n = term_years * 12
    # M = P * r / (1 - (1+r)^-n)
    return (principal * r / (1 - (1 + r) ** -n)).quantize(TWO_PLACES, ROUND_HALF_UP)


def remaining_loan_balance(
    principal: Decimal,
    annual_rate: Decimal,
    term_years: int,
    elapsed_years: int,
) -> Decimal:
    """Balance left after elapsed_years of level monthly payments, floored at zero."""
    if principal <= 0:
        return Decimal("0")
    r = annual_rate / 12
    n = term_years * 12
    if annual_rate <= 0:
        pmt = principal / n
    else:
        pmt = principal * r / (1 - (1 + r) ** -n)

    balance = principal
    for _ in range(elapsed_years * 12):
        interest = balance * r
        balance -= pmt - interest

    return max(Decimal("0"), balance).quantize(TWO_PLACES, ROUND_HALF_UP)
