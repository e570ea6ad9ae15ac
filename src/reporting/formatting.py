"""Display formatting shared by the PDF report and the CLI."""

from decimal import Decimal


def pct(v) -> str:
    """Format a fractional rate as a percentage string."""
    return f"{float(v) * 100:.2f}%"


def dollar(v) -> str:
    return f"${float(v):,.0f}"


def multiple(v) -> str:
    return f"{float(v):.2f}x"


def ratio(v: Decimal | None) -> str:
    if v is None:
        return "n/a"
    return f"{float(v):.2f}"
