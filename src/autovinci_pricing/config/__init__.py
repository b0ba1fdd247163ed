"""Configuration models — calculator inputs and rule sets."""

from autovinci_pricing.config.loan import FinancingRequest, LoanInput, tenure_months_from_years
from autovinci_pricing.config.breakdown import LineItem, PriceBreakdownInput
from autovinci_pricing.config.surcharges import (
    FlatSurcharge,
    PercentSurcharge,
    PriceBracket,
    SurchargeRule,
    TieredSurcharge,
    CITY_REGISTRATION_FEES,
    DEFAULT_REGISTRATION_CITY,
    city_on_road_rules,
    default_on_road_rules,
    resolve_city,
)
from autovinci_pricing.config.quote import OnRoadQuoteRequest
from autovinci_pricing.config.banks import DEFAULT_BANK_OFFERS, LENDER_DIRECTORY, BankOffer, LenderProfile, LenderType
from autovinci_pricing.config.eligibility import EligibilityInput, EligibilityPolicy

__all__ = [
    "LoanInput",
    "FinancingRequest",
    "tenure_months_from_years",
    "LineItem",
    "PriceBreakdownInput",
    "PercentSurcharge",
    "FlatSurcharge",
    "PriceBracket",
    "TieredSurcharge",
    "SurchargeRule",
    "default_on_road_rules",
    "city_on_road_rules",
    "resolve_city",
    "CITY_REGISTRATION_FEES",
    "DEFAULT_REGISTRATION_CITY",
    "OnRoadQuoteRequest",
    "BankOffer",
    "DEFAULT_BANK_OFFERS",
    "LenderProfile",
    "LenderType",
    "LENDER_DIRECTORY",
    "EligibilityInput",
    "EligibilityPolicy",
]
