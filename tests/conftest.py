"""
conftest.py — Shared Test Fixtures for the thread summarizer

Provides a FastAPI TestClient and a handful of realistic vendor email
threads used across the service and router tests.

Business Rules:
- Rate limiting is disabled for tests (no 429s from repeated calls)
- Threads are plain strings; extraction has no external dependencies

Called by: all test files via pytest autodiscovery
Depends on: app.main
"""

import os
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")  # Must be set before importing app modules

import pytest
from fastapi.testclient import TestClient

ACME_THREAD = (
    "From: Acme Aluminum\n"
    "Price: $24.99 per unit. ESG rating: A+. ISO 9001 certified. "
    "5% discount for orders over 1000 units. Lead time is 3 weeks."
)

FULL_THREAD = """From: Jane Smith, Northwind Metals <jane.smith@northwind-metals.com>
To: procurement@company.com
Subject: RE: Quote for 6061-T6 aluminum rods

Hi team,

Thanks for your patience. Our price is $18.50 per rod for 6061-T6, or $17.25 per rod above 5,000 pieces.
Shipping: $350 per truckload. A setup fee of $200 applies to custom lengths.
We offer a 3% discount for orders over 2,000 rods and volume pricing above 10,000 rods.

Delivery terms: FOB Cleveland. Lead time is 4-6 weeks from PO.
Payment terms: Net 30. Warranty: 12 months against material defects. Minimum order quantity: 500 rods.

Our plant is carbon neutral and runs on renewable energy. All rods contain 75% recycled content.
We are ISO 9001:2015 certified and material conforms to ASTM B221 grade 6061.
Tensile strength is 310 MPa. Every lot passes hardness testing and quality control inspection.
MSDS sheets are provided with each shipment. Our staff complete annual safety training.

Best regards,
Jane Smith
Northwind Metals | +1 216-555-0142
"""


@pytest.fixture()
def acme_thread() -> str:
    return ACME_THREAD


@pytest.fixture()
def full_thread() -> str:
    return FULL_THREAD


@pytest.fixture()
def client():
    """FastAPI TestClient with the summaries router mounted."""
    from app.main import app

    with TestClient(app) as c:
        yield c
