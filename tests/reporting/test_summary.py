from dataclasses import replace
from decimal import Decimal

from src.engine.proforma import compare_exit_strategies, project
from src.models.assumptions import ExitStrategy
from src.reporting.summary import build_report, cap_rate, payback_period, risk_analysis


class TestKeyMetrics:
    def test_cap_rate(self, canonical_assumptions):
        # 8,882,750 / 167,500,000
        assert cap_rate(project(canonical_assumptions)) == Decimal("0.0530")

    def test_payback_in_exit_year(self, canonical_assumptions):
        assert payback_period(project(canonical_assumptions)) == 7

    def test_no_payback_without_exit(self, canonical_assumptions):
        # Operating distributions alone never return the equity
        result = project(canonical_assumptions)
        returns = replace(result.returns, irr_cash_flows=result.returns.irr_cash_flows[:-1])
        assert payback_period(replace(result, returns=returns)) is None

    def test_metrics_from_result(self, canonical_assumptions):
        result = project(canonical_assumptions)
        report = build_report(canonical_assumptions, result)
        assert report.metrics.irr == result.returns.irr
        assert report.metrics.equity_multiple == result.returns.equity_multiple
        assert report.metrics.cash_on_cash_return == result.returns.average_annual_cash_yield / 100


class TestBreakdowns:
    def test_financing(self, canonical_assumptions):
        report = build_report(canonical_assumptions, project(canonical_assumptions))
        assert report.financing.total_acquisition_cost == Decimal("137923750")
        assert report.financing.annual_debt_service == Decimal("4551483.75")
        assert report.financing.interest_only
        assert report.financing.loan_term_years == 30

    def test_rental_income_by_unit_type(self, canonical_assumptions):
        report = build_report(canonical_assumptions, project(canonical_assumptions))
        incomes = {u.name: u.annual_income for u in report.rental_income}
        assert incomes == {"3 Bed": Decimal("5985000"), "4 Bed": Decimal("6840000")}
        assert report.total_annual_income == Decimal("12825000")

    def test_expenses_are_year_1(self, canonical_assumptions):
        report = build_report(canonical_assumptions, project(canonical_assumptions))
        assert report.expenses.total_operating_expenses == Decimal("3942250")
        assert report.expenses.vacancy_loss == Decimal("675000")
        assert report.expenses.property_taxes == Decimal("1675000")


class TestExitAnalysis:
    def test_selected_strategy_only(self, canonical_assumptions):
        result = project(canonical_assumptions)
        report = build_report(canonical_assumptions, result)
        assert len(report.exits) == 1
        ex = report.exits[0]
        assert ex.exit_strategy == ExitStrategy.PORTFOLIO
        assert ex.exit_value == result.exit_summary.gross_sale_proceeds
        assert ex.net_proceeds == result.exit_summary.net_proceeds_after_debt
        assert ex.average_home_price == ex.exit_value / 500

    def test_comparison(self, canonical_assumptions):
        comparison = compare_exit_strategies(canonical_assumptions)
        report = build_report(canonical_assumptions, comparison[ExitStrategy.PORTFOLIO], comparison)
        assert [ex.exit_strategy for ex in report.exits] == [
            ExitStrategy.PORTFOLIO,
            ExitStrategy.INDIVIDUAL,
        ]
        assert report.exits[1].estimated_irr == comparison[ExitStrategy.INDIVIDUAL].returns.irr


class TestRiskAnalysis:
    def test_canonical(self, canonical_assumptions):
        risk = risk_analysis(canonical_assumptions, project(canonical_assumptions))
        # (3,942,250 + 4,551,483.75) / 13,500,000
        assert risk.break_even_occupancy == Decimal("0.6292")
        assert risk.debt_service_coverage_ratio == Decimal("1.9516")
        assert risk.interest_rate_sensitivity == Decimal("-827542.5")
        # 12,825,000 * 5% * (1 - 8% - 5%)
        assert risk.rental_income_sensitivity == Decimal("-557887.5")

    def test_unlevered_has_no_rate_risk(self, unlevered_assumptions):
        risk = risk_analysis(unlevered_assumptions, project(unlevered_assumptions))
        assert risk.interest_rate_sensitivity == Decimal("0")
        assert risk.debt_service_coverage_ratio == Decimal("0")
