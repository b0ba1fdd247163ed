"""Price breakdown inputs — ex-showroom price plus resolved surcharges."""

from pydantic import BaseModel, Field


class LineItem(BaseModel):
    """One labelled amount on a price breakdown (e.g. "Registration (RTO)")."""

    label: str = Field(min_length=1, description="Display label")
    amount: float = Field(ge=0, description="Amount (₹). Negative surcharges are rejected.")


class PriceBreakdownInput(BaseModel):
    """Ex-showroom price and the surcharges to add on top, in display order."""

    ex_showroom_price: float = Field(gt=0, description="Base vehicle price before taxes and fees (₹)")
    surcharges: list[LineItem] = Field(default_factory=list)
