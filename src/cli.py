"""Terminal report for a BTR portfolio projection.

Usage:
    python -m src.cli
    python -m src.cli --hold-years 10 --exit-strategy individual
    python -m src.cli --ltv 0.65 --cap-rate 0.06 --pdf BTR_Financial_Report.pdf
"""

import argparse
import logging
import sys
from dataclasses import replace
from decimal import Decimal
from pathlib import Path

from src.config import settings
from src.engine.errors import InvalidAssumptions
from src.engine.proforma import compare_exit_strategies, project
from src.models.assumptions import ExitStrategy, PortfolioAssumptions
from src.models.results import ProjectionResult
from src.reporting.formatting import dollar, multiple, pct, ratio
from src.reporting.pdf import render_pdf
from src.reporting.summary import ReportData, build_report

logger = logging.getLogger(__name__)


# ── Helpers ──────────────────────────────────────────────────────────────────

def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_acquisition(result: ProjectionResult) -> None:
    acq = result.acquisition_summary
    _header("Acquisition")
    print(f"  Total Homes:          {acq.total_homes}")
    print(f"  Acquisition Cost:     {dollar(acq.total_acquisition_cost)}")
    print(f"  Loan Amount:          {dollar(acq.loan_amount)} ({pct(acq.loan_to_value)} LTV)")
    print(f"  Equity Required:      {dollar(acq.equity_required)}")
    print(f"  Annual Debt Service:  {dollar(acq.annual_interest_only_payment)}")


def print_returns(result: ProjectionResult, report: ReportData) -> None:
    r = result.returns
    _header("LP Returns")
    converged = "" if r.irr_converged else " (approximate)"
    print(f"  IRR:                  {pct(r.irr)}{converged}")
    print(f"  Equity Multiple:      {multiple(r.equity_multiple)}")
    print(f"  Avg Cash Yield:       {float(r.average_annual_cash_yield):.2f}%")
    print(f"  Total Cash to LPs:    {dollar(r.total_cash_to_lps)}")
    print(f"  Going-in Cap Rate:    {pct(report.metrics.cap_rate)}")
    payback = report.metrics.payback_period
    print(f"  Payback Period:       {f'{payback} years' if payback else 'not within hold'}")


def print_cashflow_table(result: ProjectionResult) -> None:
    _header("Annual Cash Flow")
    print(
        f"  {'Yr':>3}  {'Income':>12}  {'NOI':>12}  {'Debt Svc':>12}"
        f"  {'Pref Paid':>12}  {'LP Dist':>12}  {'DSCR':>5}  {'Yield':>6}"
    )
    print(f"  {'--':>3}  {'-' * 12}  {'-' * 12}  {'-' * 12}  {'-' * 12}  {'-' * 12}  {'-' * 5}  {'-' * 6}")
    for cf in result.cash_flows:
        print(
            f"  {cf.year:>3}  {dollar(cf.rental_income):>12}  {dollar(cf.noi):>12}"
            f"  {dollar(cf.debt_service):>12}  {dollar(cf.preferred_return_paid):>12}"
            f"  {dollar(cf.lp_distribution):>12}  {ratio(cf.dscr):>5}  {float(cf.cash_yield):>5.2f}%"
        )
    unpaid = result.cash_flows[-1].unpaid_preferred_return
    if unpaid > 0:
        print(f"\n  Unpaid preferred return at exit: {dollar(unpaid)}")


def print_exit(result: ProjectionResult) -> None:
    ex = result.exit_summary
    _header(f"Exit ({ex.exit_strategy.value})")
    print(f"  Gross Sale Proceeds:  {dollar(ex.gross_sale_proceeds)}")
    print(f"  Selling Costs:        {dollar(ex.selling_costs)}")
    print(f"  Net Sale Proceeds:    {dollar(ex.net_sale_proceeds)}")
    print(f"  Loan Repayment:       {dollar(ex.remaining_loan_balance)}")
    print(f"  Net After Debt:       {dollar(ex.net_proceeds_after_debt)}")
    print()
    print(f"  Return of Capital:    {dollar(ex.return_of_capital)}")
    print(f"  Preferred Return:     {dollar(ex.preferred_return_at_exit)}")
    print(f"  LP Profit:            {dollar(ex.lp_profit)}")
    print(f"  GP Profit:            {dollar(ex.gp_profit)}")
    print(f"  Total to LPs:         {dollar(ex.total_to_lps)}")


def print_exit_comparison(report: ReportData) -> None:
    if len(report.exits) < 2:
        return
    _header("Exit Strategy Comparison")
    for ex in report.exits:
        print(
            f"  {ex.exit_strategy.value:<12} value {dollar(ex.exit_value):>14}"
            f"  net {dollar(ex.net_proceeds):>14}  IRR {pct(ex.estimated_irr):>7}"
        )


def print_risk(report: ReportData) -> None:
    if report.risk is None:
        return
    r = report.risk
    _header("Risk Analysis")
    print(f"  Break-even Occupancy: {pct(r.break_even_occupancy)}")
    print(f"  Year 1 DSCR:          {ratio(r.debt_service_coverage_ratio)}")
    print(f"  +1% Interest Rate:    {dollar(r.interest_rate_sensitivity)}/yr")
    print(f"  -5% Rental Income:    {dollar(r.rental_income_sensitivity)}/yr")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Project cash flows and LP returns for a build-to-rent portfolio"
    )
    parser.add_argument("--bed3", type=int, help="Number of 3-bed homes")
    parser.add_argument("--bed4", type=int, help="Number of 4-bed homes")
    parser.add_argument("--ltv", type=Decimal, help="Loan-to-value, e.g. 0.60")
    parser.add_argument("--interest-rate", type=Decimal, help="Annual interest rate, e.g. 0.055")
    parser.add_argument("--preferred-return", type=Decimal, help="LP preferred return, e.g. 0.08")
    parser.add_argument("--lp-split", type=Decimal, help="LP share of profits; GP gets the rest")
    parser.add_argument("--hold-years", type=int, help="Hold period in years")
    parser.add_argument(
        "--exit-strategy",
        choices=[s.value for s in ExitStrategy],
        help="Portfolio cap-rate sale or individual home sales",
    )
    parser.add_argument("--cap-rate", type=Decimal, help="Portfolio exit cap rate")
    parser.add_argument("--pdf", type=Path, help="Also write the printable report to this path")
    return parser


def assumptions_from_args(args: argparse.Namespace) -> PortfolioAssumptions:
    """Defaults with CLI overrides applied."""
    assumptions = PortfolioAssumptions()
    overrides: dict = {}

    field_map = {
        "bed3": "bed3_count",
        "bed4": "bed4_count",
        "ltv": "loan_to_value",
        "interest_rate": "interest_rate",
        "preferred_return": "preferred_return",
        "hold_years": "hold_period_years",
        "cap_rate": "portfolio_exit_cap_rate",
    }
    for cli_name, field_name in field_map.items():
        val = getattr(args, cli_name)
        if val is not None:
            overrides[field_name] = val

    if args.bed3 is not None or args.bed4 is not None:
        overrides["total_homes"] = (
            overrides.get("bed3_count", assumptions.bed3_count)
            + overrides.get("bed4_count", assumptions.bed4_count)
        )
    if args.lp_split is not None:
        overrides["lp_split"] = args.lp_split
        overrides["gp_split"] = 1 - args.lp_split
    if args.exit_strategy is not None:
        overrides["exit_strategy"] = ExitStrategy(args.exit_strategy)

    return replace(assumptions, **overrides)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=settings.log_level)
    args = build_parser().parse_args(argv)
    assumptions = assumptions_from_args(args)

    try:
        result = project(assumptions)
    except InvalidAssumptions as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    try:
        comparison = compare_exit_strategies(assumptions)
    except InvalidAssumptions as e:
        logger.info("Skipping exit comparison: %s", e)
        comparison = None

    report = build_report(assumptions, result, comparison)

    print_acquisition(result)
    print_returns(result, report)
    print_cashflow_table(result)
    print_exit(result)
    print_exit_comparison(report)
    print_risk(report)
    print()

    if args.pdf is not None:
        args.pdf.write_bytes(render_pdf(report, result))
        print(f"Report written to {args.pdf}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
