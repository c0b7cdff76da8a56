from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "cost-slicer"
    LOG_LEVEL: str = "INFO"

    # Form defaults
    DEFAULT_ELECTRICITY_RATE: float = 1.36   # per kWh
    DEFAULT_PRINTER_POWER_KW: float = 0.200  # typical FDM printer under load
    DEFAULT_FILAMENT_RATE: float = 100.0     # per kg

    # Display label only, never converted
    DEFAULT_CURRENCY: str = "PLN"
    CURRENCIES: List[str] = ["PLN", "USD", "EUR"]

    DISPLAY_DECIMALS: int = 2

    class Config:
        env_file = ".env"


settings = Settings()
