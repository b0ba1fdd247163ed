"""Surcharge rules — how registration, insurance, tax and handling are priced.

Three rule kinds, selected by ``kind``:

  percent — amount = round(ex_showroom × percent / 100)
  flat    — a fixed amount
  tiered  — first bracket whose ``below`` bound exceeds the price wins
            (strict less-than, ascending); ``otherwise`` is the catch-all

``city_on_road_rules`` swaps the 10 % registration for a per-city flat fee.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator


class PercentSurcharge(BaseModel):
    """Surcharge proportional to the ex-showroom price."""

    kind: Literal["percent"] = "percent"
    label: str = Field(min_length=1)
    percent: float = Field(ge=0, le=100, description="Percent of ex-showroom price (10 = 10%)")


class FlatSurcharge(BaseModel):
    """Fixed surcharge regardless of price."""

    kind: Literal["flat"] = "flat"
    label: str = Field(min_length=1)
    amount: float = Field(ge=0, description="Fixed amount (₹)")


class PriceBracket(BaseModel):
    """Applies when ex-showroom price < ``below``."""

    below: float = Field(gt=0, description="Exclusive upper bound of the bracket (₹)")
    amount: float = Field(ge=0, description="Surcharge inside this bracket (₹)")


class TieredSurcharge(BaseModel):
    """Flat amount chosen by price bracket (e.g. insurance by price band)."""

    kind: Literal["tiered"] = "tiered"
    label: str = Field(min_length=1)
    brackets: list[PriceBracket] = Field(min_length=1, description="Ascending by ``below``")
    otherwise: float = Field(ge=0, description="Catch-all amount for prices above every bracket (₹)")

    @model_validator(mode="after")
    def _brackets_ascending(self) -> "TieredSurcharge":
        bounds = [b.below for b in self.brackets]
        if any(lo >= hi for lo, hi in zip(bounds, bounds[1:])):
            raise ValueError(f"brackets must be strictly ascending, got {bounds}")
        return self


SurchargeRule = Annotated[
    Union[PercentSurcharge, FlatSurcharge, TieredSurcharge],
    Field(discriminator="kind"),
]


def default_on_road_rules() -> list[SurchargeRule]:
    """Surcharges applied on the on-road price page, in display order."""
    return [
        PercentSurcharge(label="Registration (RTO)", percent=10.0),
        TieredSurcharge(
            label="Insurance",
            brackets=[
                PriceBracket(below=1_000_000, amount=25_000),
                PriceBracket(below=1_500_000, amount=32_000),
            ],
            otherwise=45_000,
        ),
        PercentSurcharge(label="TCS", percent=1.0),
        FlatSurcharge(label="Handling & logistics", amount=15_000),
    ]


# Flat registration charge by city (₹), from the price-in-city page.
CITY_REGISTRATION_FEES: dict[str, float] = {
    "Delhi": 52_000,
    "Mumbai": 68_000,
    "Bangalore": 61_000,
    "Chennai": 58_000,
    "Hyderabad": 55_000,
    "Kolkata": 48_000,
    "Pune": 63_000,
    "Ahmedabad": 50_000,
    "Jaipur": 47_000,
    "Lucknow": 45_000,
}
DEFAULT_REGISTRATION_CITY = "Delhi"

_CITY_LOOKUP = {name.lower(): name for name in CITY_REGISTRATION_FEES}


def resolve_city(city: str) -> str:
    """Canonical city name; unknown cities fall back to Delhi."""
    return _CITY_LOOKUP.get(city.strip().lower(), DEFAULT_REGISTRATION_CITY)


def city_on_road_rules(city: str) -> list[SurchargeRule]:
    """Default on-road rules with registration priced as the city's flat fee."""
    name = resolve_city(city)
    rules = default_on_road_rules()
    rules[0] = FlatSurcharge(label=f"Registration (RTO, {name})", amount=CITY_REGISTRATION_FEES[name])
    return rules
