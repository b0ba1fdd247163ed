"""Domain exceptions for the pricing calculators."""


class PricingError(Exception):
    """Base exception for the pricing domain."""

    code = "pricing_error"


class InvalidLoanInputError(PricingError, ValueError):
    """Principal, rate or term is outside the range a loan can have."""

    code = "invalid_loan_input"


class InvalidSurchargeError(PricingError, ValueError):
    """A surcharge rule or line item is malformed (negative, unordered brackets)."""

    code = "invalid_surcharge"


class InvalidAmountError(PricingError, ValueError):
    """A display string could not be parsed back into a rupee amount."""

    code = "invalid_amount"
