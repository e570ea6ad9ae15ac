"""Projection routes: the primary API entry point."""

import json
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from src.api.schemas import (
    AssumptionsRequest,
    AssumptionsResponse,
    ProjectionResponse,
    ReportResponse,
)
from src.engine.errors import InvalidAssumptions
from src.engine.proforma import compare_exit_strategies, project
from src.models.assumptions import PortfolioAssumptions
from src.models.results import ProjectionResult
from src.reporting.charts import cash_flow_figure, portfolio_value_figure
from src.reporting.pdf import render_pdf
from src.reporting.summary import ReportData, build_report

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["projection"])


def _build_assumptions(req: AssumptionsRequest) -> PortfolioAssumptions:
    """Apply request overrides on top of the default assumption set.

    The home count follows the unit counts; an explicit total must agree.
    """
    overrides = req.model_dump(exclude_none=True)
    defaults = PortfolioAssumptions()
    homes = (
        overrides.get("bed3_count", defaults.bed3_count)
        + overrides.get("bed4_count", defaults.bed4_count)
    )
    if overrides.get("total_homes", homes) != homes:
        raise HTTPException(
            status_code=422,
            detail=f"Total homes ({overrides['total_homes']}) must equal "
                   f"3-bed + 4-bed count ({homes})",
        )
    overrides["total_homes"] = homes
    return PortfolioAssumptions(**overrides)


def _run(req: AssumptionsRequest) -> tuple[PortfolioAssumptions, ProjectionResult]:
    assumptions = _build_assumptions(req)
    try:
        result = project(assumptions)
    except InvalidAssumptions as e:
        raise HTTPException(status_code=422, detail=str(e))
    logger.info(
        "Projection: %d homes, %d-year hold, %s exit, IRR %s",
        assumptions.total_homes,
        assumptions.hold_period_years,
        assumptions.exit_strategy.value,
        result.returns.irr,
    )
    return assumptions, result


def _report(req: AssumptionsRequest) -> tuple[ReportData, ProjectionResult]:
    assumptions, result = _run(req)
    try:
        comparison = compare_exit_strategies(assumptions)
    except InvalidAssumptions as e:
        # The other strategy can be invalid (e.g. no exit cap rate); show only the chosen one
        logger.info("Skipping exit comparison: %s", e)
        comparison = None
    return build_report(assumptions, result, comparison), result


@router.get("/defaults", response_model=AssumptionsResponse)
async def defaults():
    """Default assumption set of the model."""
    return AssumptionsResponse.model_validate(PortfolioAssumptions())


@router.post("/project", response_model=ProjectionResponse)
async def run_projection(req: AssumptionsRequest):
    """Assumption overrides -> full projection."""
    _, result = _run(req)
    return ProjectionResponse.model_validate(result)


@router.post("/report", response_model=ReportResponse)
async def report(req: AssumptionsRequest):
    """Report sections: metrics, breakdowns, exit comparison, risk."""
    report_data, _ = _report(req)
    return ReportResponse.model_validate(report_data)


@router.post("/report/pdf")
async def report_pdf(req: AssumptionsRequest):
    """Printable report as a PDF download."""
    report_data, result = _report(req)
    return Response(
        content=render_pdf(report_data, result),
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="BTR_Financial_Report.pdf"'},
    )


@router.post("/charts")
async def charts(req: AssumptionsRequest):
    """Plotly figure JSON for the portfolio value and cash flow charts."""
    _, result = _run(req)
    return {
        "portfolioValue": json.loads(portfolio_value_figure(result).to_json()),
        "cashFlow": json.loads(cash_flow_figure(result).to_json()),
    }
