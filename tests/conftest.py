"""Shared test fixtures — the example car used across the EMI pages."""

from __future__ import annotations

import pytest

from autovinci_pricing.config import FinancingRequest, LoanInput, OnRoadQuoteRequest


CAR_PRICE = 1_050_000  # 10,50,000


@pytest.fixture
def car_price() -> float:
    return float(CAR_PRICE)


@pytest.fixture
def standard_loan() -> LoanInput:
    """10,50,000 car, 20% down → 8,40,000 financed at 9.5% for 5 years."""
    return LoanInput(principal=840_000, annual_rate_percent=9.5, term_months=60)


@pytest.fixture
def financing_request() -> FinancingRequest:
    return FinancingRequest(
        car_price=CAR_PRICE,
        down_payment_pct=20,
        tenure_months=60,
        annual_rate_percent=9.5,
    )


@pytest.fixture
def on_road_request() -> OnRoadQuoteRequest:
    return OnRoadQuoteRequest(ex_showroom_price=CAR_PRICE)


def emi_formula(principal: float, annual_rate_percent: float, term_months: int) -> float:
    """Unrounded closed-form EMI, for comparing against the engine."""
    r = annual_rate_percent / 100 / 12
    factor = (1 + r) ** term_months
    return principal * r * factor / (factor - 1)
