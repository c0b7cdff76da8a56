"""
Estimate endpoints — the form-facing side of the estimator.

POST /api/estimate          — raw form values in, cost breakdown + display rows out
GET  /api/estimate/defaults — pre-filled rates and the currency choices

Parsing and validation of the raw values happen here; the estimator only
ever sees clean numbers.
"""

import logging
import math
from typing import Optional

from fastapi import APIRouter, HTTPException

from ..config import settings
from ..cost_estimator import estimate_job
from ..display import amount_header, breakdown_rows
from ..parsing import (
    InputError,
    TIME_FORMAT_MESSAGE,
    minutes_from_entry,
    parse_number,
    parse_number_or_default,
    parse_print_time,
)
from ..schemas import (
    Depreciation,
    EstimateDefaults,
    EstimateRequest,
    EstimateResponse,
    PrintJobInput,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/estimate", tags=["estimate"])

OUT_OF_RANGE_MESSAGE = (
    "The entered values are too large to estimate. Please check the numbers and try again."
)


def resolve_currency(value: Optional[str]) -> str:
    """Currency label for display. Blank falls back to the configured default."""
    if value is None or not value.strip():
        return settings.DEFAULT_CURRENCY
    currency = value.strip().upper()
    if currency not in settings.CURRENCIES:
        raise InputError(
            f"Unsupported currency '{value}'. Choose one of {', '.join(settings.CURRENCIES)}."
        )
    return currency


def resolve_print_time(request: EstimateRequest) -> int:
    """
    Print time in minutes.
    Text entry ('4h30m') wins; otherwise the HH / MM boxes; neither is an error.
    """
    if request.print_time is not None and request.print_time.strip():
        return parse_print_time(request.print_time)
    if request.hours is not None or request.minutes is not None:
        return minutes_from_entry(request.hours, request.minutes)
    raise InputError(TIME_FORMAT_MESSAGE)


def resolve_depreciation(request: EstimateRequest) -> Optional[Depreciation]:
    """Depreciation terms when requested. Both printer fields are then required."""
    if not request.include_depreciation:
        return None
    printer_cost = parse_number(request.printer_cost, "printer cost")
    printer_lifespan = parse_number(request.printer_lifespan, "printer lifespan")
    if printer_lifespan <= 0:
        raise InputError("Invalid printer lifespan. Lifespan must be greater than zero years.")
    return Depreciation.from_flag(True, printer_cost, printer_lifespan)


def build_job(request: EstimateRequest) -> PrintJobInput:
    """Turn raw form values into a fully-resolved PrintJobInput."""
    return PrintJobInput(
        duration_minutes=resolve_print_time(request),
        filament_grams=parse_number(request.filament_weight, "filament weight"),
        electricity_rate_per_kwh=parse_number_or_default(
            request.electricity_cost, "electricity cost", settings.DEFAULT_ELECTRICITY_RATE,
        ),
        printer_power_kw=parse_number_or_default(
            request.printer_power, "printer power", settings.DEFAULT_PRINTER_POWER_KW,
        ),
        filament_rate_per_kg=parse_number_or_default(
            request.filament_cost, "filament cost", settings.DEFAULT_FILAMENT_RATE,
        ),
        depreciation=resolve_depreciation(request),
    )


@router.post("", response_model=EstimateResponse)
def create_estimate(request: EstimateRequest):
    """
    Estimate the cost of one print job.

    Returns the exact breakdown plus four display rows rounded to two decimals.
    Bad input, or values so large the total overflows, come back as a 400
    with a single descriptive message.
    """
    try:
        currency = resolve_currency(request.currency)
        job = build_job(request)
    except InputError as e:
        logger.warning("Rejected estimate input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    breakdown = estimate_job(job)
    if not math.isfinite(breakdown.total_cost):
        # JSON has no infinity; an overflowing breakdown would serialize as null
        logger.warning("Rejected estimate: non-finite total from %s", job)
        raise HTTPException(status_code=400, detail=OUT_OF_RANGE_MESSAGE)

    logger.info(
        "Estimate: %s min, %s g, depreciation=%s -> total %.4f %s",
        job.duration_minutes, job.filament_grams, job.include_depreciation,
        breakdown.total_cost, currency,
    )

    return EstimateResponse(
        currency=currency,
        amount_header=amount_header(currency),
        print_time_minutes=job.duration_minutes,
        include_depreciation=job.include_depreciation,
        breakdown=breakdown,
        rows=breakdown_rows(breakdown),
    )


@router.get("/defaults", response_model=EstimateDefaults)
def get_defaults():
    """Values the estimate form starts out with."""
    return EstimateDefaults(
        electricity_cost=settings.DEFAULT_ELECTRICITY_RATE,
        printer_power=settings.DEFAULT_PRINTER_POWER_KW,
        filament_cost=settings.DEFAULT_FILAMENT_RATE,
        currency=settings.DEFAULT_CURRENCY,
        currencies=settings.CURRENCIES,
    )
