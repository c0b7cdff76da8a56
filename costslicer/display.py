"""
Breakdown display — the four-row cost table shown to the user.

Rounding lives here and only here; the estimator hands back exact floats.
"""

from typing import List, Optional

from .config import settings
from .schemas import BreakdownRow, CostBreakdown

# Breakdown field -> row label, in display order
BREAKDOWN_LABELS = {
    "electricity_cost": "Electricity Cost",
    "filament_cost": "Filament Cost",
    "depreciation_cost": "Printer Depreciation",
    "total_cost": "Total Cost",
}


def format_amount(value: float, decimals: Optional[int] = None) -> str:
    """Fixed-point amount, e.g. 6.224 -> '6.22'."""
    if decimals is None:
        decimals = settings.DISPLAY_DECIMALS
    return f"{value:.{decimals}f}"


def breakdown_rows(breakdown: CostBreakdown, decimals: Optional[int] = None) -> List[BreakdownRow]:
    """Build the display rows for a breakdown, total last."""
    return [
        BreakdownRow(label=label, amount=format_amount(getattr(breakdown, field), decimals))
        for field, label in BREAKDOWN_LABELS.items()
    ]


def amount_header(currency: str) -> str:
    """Column header for the amount column."""
    return f"Amount ({currency})"
