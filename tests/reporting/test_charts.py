import pytest

from src.engine.proforma import project
from src.reporting.charts import cash_flow_figure, portfolio_value_figure


@pytest.fixture
def result(canonical_assumptions):
    return project(canonical_assumptions)


class TestPortfolioValueFigure:
    def test_four_series(self, result):
        fig = portfolio_value_figure(result)
        assert [t.name for t in fig.data] == [
            "Portfolio Value", "Portfolio Cost", "Portfolio Debt", "LP Equity",
        ]

    def test_year_0_through_exit(self, result):
        trace = portfolio_value_figure(result).data[0]
        assert list(trace.x) == [f"Year {n}" for n in range(8)]
        assert trace.y[0] == pytest.approx(167_500_000)

    def test_debt_flat(self, result):
        debt = portfolio_value_figure(result).data[2]
        assert list(debt.y) == pytest.approx([82_754_250] * 8)


class TestCashFlowFigure:
    def test_grouped_bars(self, result):
        fig = cash_flow_figure(result)
        assert [t.name for t in fig.data] == ["NOI", "Debt Service", "LP Distribution"]
        assert fig.layout.barmode == "group"

    def test_one_bar_per_year(self, result):
        for trace in cash_flow_figure(result).data:
            assert len(trace.x) == 7

    def test_values_match_projection(self, result):
        noi = cash_flow_figure(result).data[0]
        assert noi.y[0] == pytest.approx(8_882_750)
