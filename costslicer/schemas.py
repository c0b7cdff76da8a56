from pydantic import BaseModel, Field
from typing import Optional, List, Union


# --- Estimator types ---

class Depreciation(BaseModel):
    """
    Equipment amortization terms for a print job.

    Present only when depreciation is charged, so a job without depreciation
    carries no equipment fields at all.
    """
    equipment_cost: float
    equipment_lifespan_years: float = Field(gt=0)

    class Config:
        frozen = True

    @classmethod
    def from_flag(cls, include: bool, equipment_cost: float,
                  equipment_lifespan_years: float) -> Optional["Depreciation"]:
        """Build terms from the flag + two fields form. None when the flag is off."""
        if not include:
            return None
        return cls(
            equipment_cost=equipment_cost,
            equipment_lifespan_years=equipment_lifespan_years,
        )


class PrintJobInput(BaseModel):
    duration_minutes: float
    filament_grams: float
    electricity_rate_per_kwh: float
    printer_power_kw: float
    filament_rate_per_kg: float
    depreciation: Optional[Depreciation] = None

    class Config:
        frozen = True

    @property
    def include_depreciation(self) -> bool:
        return self.depreciation is not None


class CostBreakdown(BaseModel):
    electricity_cost: float
    filament_cost: float
    depreciation_cost: float
    total_cost: float

    class Config:
        frozen = True


# --- API schemas ---

# Raw form values: text straight from an input box, or an already-numeric JSON value
RawNumber = Optional[Union[float, str]]


class EstimateRequest(BaseModel):
    print_time: Optional[str] = None     # "4h30m", "45m", "2h"
    hours: RawNumber = None              # structured entry, used when print_time is absent
    minutes: RawNumber = None
    filament_weight: RawNumber = None    # grams
    electricity_cost: RawNumber = None   # per kWh, settings default when omitted
    printer_power: RawNumber = None      # kW, settings default when omitted
    filament_cost: RawNumber = None      # per kg, settings default when omitted
    include_depreciation: bool = False
    printer_cost: RawNumber = None
    printer_lifespan: RawNumber = None   # years
    currency: Optional[str] = None


class BreakdownRow(BaseModel):
    label: str
    amount: str


class EstimateResponse(BaseModel):
    currency: str
    amount_header: str
    print_time_minutes: float
    include_depreciation: bool
    breakdown: CostBreakdown
    rows: List[BreakdownRow]


class EstimateDefaults(BaseModel):
    electricity_cost: float
    printer_power: float
    filament_cost: float
    currency: str
    currencies: List[str]
