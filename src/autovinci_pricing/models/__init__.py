"""Result models — calculator output contracts."""

from autovinci_pricing.models.results import (
    AmortizationRow,
    AmortizationSchedule,
    BankEmiQuote,
    EligibilityResult,
    FinancingPlan,
    LenderListing,
    LoanResult,
    OnRoadQuote,
    PriceBreakdownResult,
)

__all__ = [
    "AmortizationRow",
    "AmortizationSchedule",
    "BankEmiQuote",
    "EligibilityResult",
    "FinancingPlan",
    "LenderListing",
    "LoanResult",
    "OnRoadQuote",
    "PriceBreakdownResult",
]
