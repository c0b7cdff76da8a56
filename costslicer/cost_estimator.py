"""
Cost Estimator — print job cost breakdown.

Pure math. No I/O, no validation, no rounding.
Callers hand in fully-resolved numbers (minutes, grams, rates); display
rounding and input parsing happen upstream/downstream.

Input: duration, filament mass, rates, optional Depreciation terms
Output: CostBreakdown (electricity, filament, depreciation, total)
"""

from typing import Optional

from .schemas import CostBreakdown, Depreciation, PrintJobInput

# Unit conversions: 365-day year, 24-hour day
MINUTES_PER_HOUR = 60
GRAMS_PER_KG = 1000
HOURS_PER_YEAR = 365 * 24


def minutes_to_hours(minutes: float) -> float:
    return minutes / MINUTES_PER_HOUR


def grams_to_kg(grams: float) -> float:
    return grams / GRAMS_PER_KG


def years_to_hours(years: float) -> float:
    return years * HOURS_PER_YEAR


def electricity_cost(print_time_hours: float, printer_power_kw: float,
                     electricity_rate: float) -> float:
    """Energy drawn over the job (kWh) times the price per kWh."""
    return print_time_hours * printer_power_kw * electricity_rate


def filament_cost(filament_grams: float, filament_rate: float) -> float:
    """Filament mass in kg times the price per kg."""
    return grams_to_kg(filament_grams) * filament_rate


def depreciation_cost(print_time_hours: float,
                      depreciation: Optional[Depreciation]) -> float:
    """
    Straight-line amortization of the equipment over its lifetime hours,
    charged for the hours this job occupies the printer.
    Zero when no depreciation terms are given.
    """
    if depreciation is None:
        return 0.0
    lifespan_hours = years_to_hours(depreciation.equipment_lifespan_years)
    return (depreciation.equipment_cost / lifespan_hours) * print_time_hours


def calculate_print_cost(
    duration_minutes: float,
    filament_grams: float,
    electricity_rate: float,
    printer_power: float,
    filament_rate: float,
    depreciation: Optional[Depreciation] = None,
) -> CostBreakdown:
    """
    Compute the cost breakdown of one print job.

    Args:
        duration_minutes: print time in minutes
        filament_grams: filament used, grams
        electricity_rate: price per kWh
        printer_power: printer draw in kW
        filament_rate: price per kg of filament
        depreciation: equipment terms, or None to skip depreciation

    Returns:
        CostBreakdown where total_cost is the exact sum of the three parts.
    """
    print_time_hours = minutes_to_hours(duration_minutes)

    electricity = electricity_cost(print_time_hours, printer_power, electricity_rate)
    filament = filament_cost(filament_grams, filament_rate)
    equipment = depreciation_cost(print_time_hours, depreciation)

    return CostBreakdown(
        electricity_cost=electricity,
        filament_cost=filament,
        depreciation_cost=equipment,
        total_cost=electricity + filament + equipment,
    )


def estimate_job(job: PrintJobInput) -> CostBreakdown:
    """Same as calculate_print_cost, taking a PrintJobInput snapshot."""
    return calculate_print_cost(
        duration_minutes=job.duration_minutes,
        filament_grams=job.filament_grams,
        electricity_rate=job.electricity_rate_per_kwh,
        printer_power=job.printer_power_kw,
        filament_rate=job.filament_rate_per_kg,
        depreciation=job.depreciation,
    )
