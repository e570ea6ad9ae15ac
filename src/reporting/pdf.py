"""Printable PDF report rendered with reportlab (landscape A4)."""

import io
import logging
from datetime import date

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from src.models.assumptions import ExitStrategy
from src.models.results import ProjectionResult
from src.reporting.formatting import dollar, multiple, pct, ratio
from src.reporting.summary import ReportData

logger = logging.getLogger(__name__)

EXIT_TITLES = {
    ExitStrategy.PORTFOLIO: "Portfolio Sale",
    ExitStrategy.INDIVIDUAL: "Individual Home Sales",
}

DISCLAIMER = (
    "This report is generated for informational purposes only and should not be "
    "considered as financial advice. All projections are estimates based on the "
    "provided inputs and assumptions. Actual results may vary."
)

_TABLE_STYLE = TableStyle([
    ("FONTSIZE", (0, 0), (-1, -1), 9),
    ("LINEBELOW", (0, 0), (-1, -1), 0.25, colors.lightgrey),
    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
])

_GRID_STYLE = TableStyle([
    ("FONTSIZE", (0, 0), (-1, -1), 8),
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#1a1a2e")),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
    ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
])


def _kv_table(rows: list[tuple[str, str]]) -> Table:
    table = Table(rows, colWidths=[120 * mm, 60 * mm], hAlign="LEFT")
    table.setStyle(_TABLE_STYLE)
    return table


def _grid(header: list[str], rows: list[list[str]]) -> Table:
    table = Table([header] + rows, repeatRows=1, hAlign="LEFT")
    table.setStyle(_GRID_STYLE)
    return table


def _payback(years: int | None) -> str:
    return f"{years} years" if years is not None else "Not within hold"


def build_story(report: ReportData, result: ProjectionResult) -> list:
    """Flowables for every report section, in page order."""
    styles = getSampleStyleSheet()
    h2 = styles["Heading2"]
    h3 = styles["Heading3"]
    story = []

    story.append(Paragraph(report.title, styles["Title"]))
    story.append(Paragraph(f"Generated on: {date.today():%m/%d/%Y}", styles["Normal"]))
    story.append(Spacer(1, 12))

    # Project overview
    story.append(Paragraph("Project Overview", h2))
    story.append(Paragraph("Portfolio Structure", h3))
    structure = [
        ("Investment Type:", "Build-to-Rent (BTR)"),
        ("Fund Structure:", report.fund_name),
        ("Total Homes:", str(report.total_homes)),
    ]
    structure += [(f"{u.name} Homes:", str(u.count)) for u in report.rental_income]
    structure.append(("Investment Timeline:", f"{report.hold_period_years} years"))
    story.append(_kv_table(structure))

    m = report.metrics
    story.append(Paragraph("Financial Summary", h3))
    story.append(_kv_table([
        ("IRR:", pct(m.irr)),
        ("Cash-on-Cash Return:", pct(m.cash_on_cash_return)),
        ("Cap Rate:", pct(m.cap_rate)),
        ("Equity Multiple:", multiple(m.equity_multiple)),
        ("Payback Period:", _payback(m.payback_period)),
    ]))
    story.append(PageBreak())

    # Financing
    f = report.financing
    story.append(Paragraph("Financing", h2))
    loan_structure = f"Interest-only, {f.interest_only_period} years" if f.interest_only else "Amortizing"
    story.append(_kv_table([
        ("Total Acquisition Cost:", dollar(f.total_acquisition_cost)),
        ("Loan Amount:", f"{dollar(f.loan_amount)} ({pct(f.loan_to_value)} LTV)"),
        ("Equity Requirement:", dollar(f.equity_required)),
        ("Interest Rate:", pct(f.interest_rate)),
        ("Loan Structure:", loan_structure),
        ("Loan Term:", f"{f.loan_term_years} years"),
        ("Annual Debt Service:", dollar(f.annual_debt_service)),
    ]))

    # Rental income
    story.append(Paragraph("Rental Income", h2))
    story.append(_grid(
        ["Home Type", "Homes", "Monthly Rent", "Annual Income"],
        [
            [u.name, str(u.count), dollar(u.monthly_rent), dollar(u.annual_income)]
            for u in report.rental_income
        ] + [["Total", str(report.total_homes), "", dollar(report.total_annual_income)]],
    ))

    # Operating expenses
    e = report.expenses
    story.append(Paragraph("Operating Expenses", h2))
    story.append(_kv_table([
        ("Property Management:", dollar(e.property_management)),
        ("Maintenance:", dollar(e.maintenance)),
        ("Property Taxes:", dollar(e.property_taxes)),
        ("Insurance:", dollar(e.insurance)),
        ("HOA Fees:", dollar(e.hoa_fees)),
        ("Vacancy Loss:", dollar(e.vacancy_loss)),
        ("Other Expenses:", dollar(e.other_expenses)),
        ("Total Operating Expenses:", dollar(e.total_operating_expenses)),
    ]))
    story.append(PageBreak())

    # Cash flow table
    story.append(Paragraph("Cash Flow Analysis", h2))
    story.append(_grid(
        ["Year", "Rental Income", "Expenses", "NOI", "Debt Service",
         "Cash Flow", "Pref Paid", "Unpaid Pref", "LP Dist.", "GP Dist.", "DSCR", "Yield"],
        [
            [
                f"Year {cf.year}",
                dollar(cf.rental_income),
                dollar(cf.operating_expenses),
                dollar(cf.noi),
                dollar(cf.debt_service),
                dollar(cf.cash_flow_after_debt_service),
                dollar(cf.preferred_return_paid),
                dollar(cf.unpaid_preferred_return),
                dollar(cf.lp_distribution),
                dollar(cf.gp_distribution),
                ratio(cf.dscr),
                f"{float(cf.cash_yield):.2f}%",
            ]
            for cf in result.cash_flows
        ],
    ))

    # Exit strategies
    story.append(Paragraph("Exit Strategy Analysis", h2))
    for ex in report.exits:
        title = EXIT_TITLES[ex.exit_strategy]
        if ex.exit_strategy == report.selected_exit_strategy:
            title += " (selected)"
        story.append(Paragraph(title, h3))
        story.append(_kv_table([
            ("Estimated Exit Value:", dollar(ex.exit_value)),
            ("Average Home Price:", dollar(ex.average_home_price)),
            ("Transaction Costs:", dollar(ex.transaction_costs)),
            ("Remaining Loan Balance:", dollar(ex.remaining_loan_balance)),
            ("Net Proceeds:", dollar(ex.net_proceeds)),
            ("Estimated IRR:", pct(ex.estimated_irr)),
        ]))
    story.append(PageBreak())

    # Valuation
    story.append(Paragraph("Portfolio Value Projection", h2))
    story.append(_grid(
        ["Year", "Portfolio Value", "Portfolio Cost", "Debt", "LP Equity"],
        [
            [p.label, dollar(p.portfolio_value), dollar(p.portfolio_cost),
             dollar(p.portfolio_debt), dollar(p.lp_equity)]
            for p in result.portfolio_value
        ],
    ))

    # Risk
    if report.risk is not None:
        r = report.risk
        story.append(Paragraph("Risk Analysis", h2))
        story.append(_kv_table([
            ("Break-even Occupancy:", pct(r.break_even_occupancy)),
            ("Debt Service Coverage Ratio:", ratio(r.debt_service_coverage_ratio)),
            ("Sensitivity to 1% Interest Rate Increase:", dollar(r.interest_rate_sensitivity)),
            ("Sensitivity to 5% Decrease in Rental Income:", dollar(r.rental_income_sensitivity)),
        ]))

    story.append(Spacer(1, 18))
    story.append(Paragraph(DISCLAIMER, styles["Italic"]))
    story.append(Paragraph(f"© {date.today().year} BTR Financial Model", styles["Normal"]))
    return story


def render_pdf(report: ReportData, result: ProjectionResult) -> bytes:
    """Render the report to PDF bytes."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=20 * mm,
        bottomMargin=20 * mm,
        title=report.title,
    )
    doc.build(build_story(report, result))
    pdf = buffer.getvalue()
    logger.info("Rendered %d-byte PDF report", len(pdf))
    return pdf
