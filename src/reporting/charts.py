"""Plotly figures for the portfolio value and cash flow charts."""

import plotly.graph_objects as go

from src.models.results import ProjectionResult

COLORS = {
    "portfolio_value": "#00A3FF",
    "portfolio_cost": "#FF5252",
    "portfolio_debt": "#FFD600",
    "lp_equity": "#00E676",
    "noi": "#00C853",
    "debt_service": "#D500F9",
    "lp_distribution": "#FFC400",
}


def portfolio_value_figure(result: ProjectionResult) -> go.Figure:
    """Value, cost, debt and LP equity from Year 0 through exit."""
    points = result.portfolio_value
    years = [p.label for p in points]

    fig = go.Figure()
    for name, attr in (
        ("Portfolio Value", "portfolio_value"),
        ("Portfolio Cost", "portfolio_cost"),
        ("Portfolio Debt", "portfolio_debt"),
        ("LP Equity", "lp_equity"),
    ):
        fig.add_trace(go.Scatter(
            x=years,
            y=[float(getattr(p, attr)) for p in points],
            mode="lines+markers",
            name=name,
            line=dict(color=COLORS[attr], width=3 if attr == "portfolio_value" else 2),
        ))
    fig.update_layout(title="Portfolio Value Over Time", xaxis_title="Year", yaxis_title="$")
    return fig


def cash_flow_figure(result: ProjectionResult) -> go.Figure:
    """NOI, debt service and LP distribution per hold year."""
    years = [f"Year {cf.year}" for cf in result.cash_flows]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=years,
        y=[float(cf.noi) for cf in result.cash_flows],
        name="NOI",
        marker_color=COLORS["noi"],
    ))
    fig.add_trace(go.Bar(
        x=years,
        y=[float(cf.debt_service) for cf in result.cash_flows],
        name="Debt Service",
        marker_color=COLORS["debt_service"],
    ))
    fig.add_trace(go.Bar(
        x=years,
        y=[float(cf.lp_distribution) for cf in result.cash_flows],
        name="LP Distribution",
        marker_color=COLORS["lp_distribution"],
    ))
    fig.update_layout(title="Annual Cash Flow Projection", barmode="group", xaxis_title="Year", yaxis_title="$")
    return fig
