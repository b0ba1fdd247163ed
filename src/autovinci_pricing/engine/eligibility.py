"""Loan eligibility — income-multiple estimate before a bureau pull.

  net_income      = monthly_income − existing_emi
  eligible_amount = min(max(net_income, 0) × income_multiple, max_loan_amount)
"""

from __future__ import annotations

from autovinci_pricing.config.eligibility import EligibilityInput, EligibilityPolicy
from autovinci_pricing.engine.amortization import monthly_installment
from autovinci_pricing.formatting import format_inr
from autovinci_pricing.models.results import EligibilityResult


def check_eligibility(
    applicant: EligibilityInput,
    policy: EligibilityPolicy | None = None,
) -> EligibilityResult:
    """Estimate how much an applicant can borrow and at what indicative rate."""
    if policy is None:
        policy = EligibilityPolicy()

    net_income = applicant.monthly_income - applicant.existing_emi
    eligible_amount = min(max(net_income, 0.0) * policy.income_multiple, policy.max_loan_amount)

    rate = (
        policy.salaried_rate_percent
        if applicant.employment == "Salaried"
        else policy.other_rate_percent
    )
    emi = monthly_installment(eligible_amount, rate, policy.indicative_tenure_months)

    return EligibilityResult(
        net_monthly_income=net_income,
        eligible_amount=eligible_amount,
        eligible=eligible_amount > 0,
        indicative_rate_percent=rate,
        indicative_tenure_months=policy.indicative_tenure_months,
        indicative_emi=emi,
        low_credit_score=applicant.credit_band in policy.low_credit_bands,
        eligible_amount_display=format_inr(eligible_amount, symbol=True),
    )
