"""
Shared test fixtures — test client and sample form bodies.
"""

import pytest
from fastapi.testclient import TestClient

from costslicer.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def form_body():
    """Form values for scenario A: 4h30m, 50 g, default-ish rates, no depreciation."""
    return {
        "print_time": "4h30m",
        "filament_weight": "50",
        "electricity_cost": "1.36",
        "printer_power": "0.200",
        "filament_cost": "100",
        "currency": "PLN",
    }
