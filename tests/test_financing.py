"""Tests for engine/financing.py — EMI calculator, on-road quote, bank comparison."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from autovinci_pricing.config import (
    DEFAULT_BANK_OFFERS,
    LENDER_DIRECTORY,
    BankOffer,
    FinancingRequest,
    LenderProfile,
    OnRoadQuoteRequest,
    tenure_months_from_years,
)
from autovinci_pricing.engine.amortization import monthly_installment
from autovinci_pricing.engine.financing import (
    compare_bank_offers,
    list_lenders,
    plan_financing,
    quote_on_road,
    starting_emi,
)


# ═══════════════════════════════════════════════════════════════════════════
# plan_financing
# ═══════════════════════════════════════════════════════════════════════════

class TestPlanFinancing:
    def test_down_payment_and_principal(self, financing_request: FinancingRequest):
        plan = plan_financing(financing_request)
        assert plan.down_payment == 210_000
        assert plan.principal == 840_000

    def test_emi_matches_engine(self, financing_request: FinancingRequest):
        plan = plan_financing(financing_request)
        assert plan.monthly_installment == monthly_installment(840_000, 9.5, 60)

    def test_totals_include_down_payment(self, financing_request: FinancingRequest):
        plan = plan_financing(financing_request)
        assert plan.total_paid == plan.monthly_installment * 60 + 210_000
        assert plan.total_interest == plan.total_paid - 1_050_000
        assert plan.total_interest > 0

    def test_shares_sum_to_hundred(self, financing_request: FinancingRequest):
        plan = plan_financing(financing_request)
        assert plan.principal_share_pct + plan.interest_share_pct == 100
        # 8,40,000 of roughly 10,58,500 repaid is principal
        assert plan.principal_share_pct == 79

    def test_interest_pct_of_price(self, financing_request: FinancingRequest):
        plan = plan_financing(financing_request)
        expected = round(plan.total_interest / 1_050_000 * 100, 1)
        assert plan.interest_pct_of_price == pytest.approx(expected)

    def test_display_strings(self, financing_request: FinancingRequest):
        plan = plan_financing(financing_request)
        assert plan.monthly_installment_display.startswith("₹17,6")
        assert plan.total_paid_display.endswith(" L")

    def test_paid_in_full(self):
        plan = plan_financing(FinancingRequest(car_price=800_000, down_payment_pct=100))
        assert plan.principal == 0
        assert plan.monthly_installment == 0
        assert plan.total_paid == 800_000
        assert plan.total_interest == 0
        assert plan.principal_share_pct == 0
        assert plan.interest_share_pct == 0

    def test_fractional_price_paid_in_full(self):
        """Half-up rounding of a 100% down payment must not exceed the price."""
        plan = plan_financing(FinancingRequest(car_price=100.5, down_payment_pct=100))
        assert plan.down_payment == 100.5
        assert plan.principal == 0
        assert plan.monthly_installment == 0
        assert plan.total_paid == 100.5
        assert plan.total_interest == 0

    def test_near_full_down_payment_never_negative_principal(self):
        plan = plan_financing(FinancingRequest(car_price=1_050_000.5, down_payment_pct=99.99996))
        assert plan.down_payment <= 1_050_000.5
        assert plan.principal >= 0

    def test_zero_rate_no_interest(self):
        plan = plan_financing(FinancingRequest(
            car_price=600_000, down_payment_pct=0, tenure_months=60, annual_rate_percent=0,
        ))
        assert plan.monthly_installment == 10_000
        assert plan.total_interest == 0
        assert plan.principal_share_pct == 100
        assert plan.interest_share_pct == 0

    def test_longer_tenure_more_interest(self):
        short = plan_financing(FinancingRequest(car_price=1_000_000, tenure_months=36))
        long = plan_financing(FinancingRequest(car_price=1_000_000, tenure_months=84))
        assert long.monthly_installment < short.monthly_installment
        assert long.total_interest > short.total_interest


class TestTenureFromYears:
    def test_whole_years(self):
        assert tenure_months_from_years(5) == 60

    def test_fractional_years(self):
        assert tenure_months_from_years(2.5) == 30

    def test_too_short(self):
        with pytest.raises(ValueError):
            tenure_months_from_years(0)


# ═══════════════════════════════════════════════════════════════════════════
# quote_on_road
# ═══════════════════════════════════════════════════════════════════════════

class TestOnRoadQuote:
    def test_finances_on_road_total_by_default(self, on_road_request: OnRoadQuoteRequest):
        quote = quote_on_road(on_road_request)
        assert quote.finance_basis == "on_road"
        assert quote.breakdown.total == 1_212_500
        assert quote.financing.car_price == 1_212_500
        assert quote.financing.down_payment == 242_500

    def test_ex_showroom_basis(self):
        quote = quote_on_road(OnRoadQuoteRequest(
            ex_showroom_price=1_050_000, finance_basis="ex_showroom",
        ))
        assert quote.financing.car_price == 1_050_000
        assert quote.financing.principal == 840_000
        assert quote.financing.monthly_installment == monthly_installment(840_000, 8.75, 60)
        # Breakdown is still the full on-road price
        assert quote.breakdown.total == 1_212_500

    def test_display_strings(self, on_road_request: OnRoadQuoteRequest):
        quote = quote_on_road(on_road_request)
        assert quote.line_item_displays["Registration (RTO)"] == "₹1.05 L"
        assert quote.line_item_displays["Insurance"] == "₹32,000"
        assert quote.total_display.startswith("₹12.1")

    def test_fractional_price_paid_in_full(self):
        quote = quote_on_road(OnRoadQuoteRequest(
            ex_showroom_price=1_050_000.5, down_payment_pct=100, finance_basis="ex_showroom",
        ))
        assert quote.financing.principal == 0
        assert quote.financing.monthly_installment == 0

    def test_city_registration(self):
        quote = quote_on_road(OnRoadQuoteRequest(ex_showroom_price=1_050_000, city="Mumbai"))
        assert quote.breakdown.line_items[0].amount == 68_000
        # 10,50,000 + 68,000 + 32,000 + 10,500 + 15,000
        assert quote.breakdown.total == 1_175_500
        assert quote.financing.car_price == 1_175_500

    def test_unknown_basis_rejected(self):
        with pytest.raises(ValidationError):
            OnRoadQuoteRequest(ex_showroom_price=1_050_000, finance_basis="invoice")


# ═══════════════════════════════════════════════════════════════════════════
# compare_bank_offers / starting_emi
# ═══════════════════════════════════════════════════════════════════════════

class TestBankComparison:
    def test_one_quote_per_bank(self):
        quotes = compare_bank_offers(800_000, 60)
        assert len(quotes) == len(DEFAULT_BANK_OFFERS)

    def test_sorted_cheapest_first(self):
        quotes = compare_bank_offers(800_000, 60)
        assert [q.bank for q in quotes] == [
            "Bank of Baroda", "SBI", "HDFC Bank", "ICICI Bank", "Axis Bank", "Kotak",
        ]
        emis = [q.monthly_installment for q in quotes]
        assert emis == sorted(emis)

    def test_ties_keep_rate_card_order(self):
        quotes = compare_bank_offers(100, 12)
        assert len({q.monthly_installment for q in quotes}) == 1
        assert [q.bank for q in quotes] == [o.bank for o in DEFAULT_BANK_OFFERS]

    def test_total_interest(self):
        quotes = compare_bank_offers(800_000, 60)
        for q in quotes:
            assert q.total_interest == q.monthly_installment * 60 - 800_000

    def test_custom_offers(self):
        offers = [BankOffer(bank="Dealer finance", annual_rate_percent=0)]
        quotes = compare_bank_offers(600_000, 60, offers)
        assert quotes[0].monthly_installment == 10_000
        assert quotes[0].total_interest == 0


def test_starting_emi():
    assert starting_emi(1_000_000) == monthly_installment(800_000, 9.0, 84)


def test_starting_emi_overrides():
    assert starting_emi(1_000_000, down_payment_pct=50, annual_rate_percent=0, tenure_months=50) == 10_000


# ═══════════════════════════════════════════════════════════════════════════
# list_lenders
# ═══════════════════════════════════════════════════════════════════════════

class TestLenderDirectory:
    def test_all_lenders_by_rate(self):
        listings = list_lenders()
        assert len(listings) == len(LENDER_DIRECTORY)
        rates = [lender.annual_rate_percent for lender in listings]
        assert rates == sorted(rates)
        # SBI and Bank of Baroda tie at 8.60; directory order is kept
        assert [lender.bank for lender in listings[:2]] == ["SBI", "Bank of Baroda"]
        assert listings[-1].bank == "Bajaj Finance"

    def test_filter_by_type(self):
        public = list_lenders(lender_type="Public")
        assert {lender.bank for lender in public} == {"SBI", "Bank of Baroda", "PNB"}
        nbfc = list_lenders(lender_type="NBFC")
        assert [lender.bank for lender in nbfc] == ["Bajaj Finance"]
        assert nbfc[0].max_tenure_months == 60

    def test_sort_by_max_amount(self):
        listings = list_lenders(sort_by="max_amount")
        amounts = [lender.max_amount for lender in listings]
        assert amounts == sorted(amounts, reverse=True)
        assert listings[0].bank == "SBI"
        assert listings[0].max_amount_display == "₹75.00 L"

    def test_filter_and_sort(self):
        listings = list_lenders(lender_type="Private", sort_by="max_amount")
        assert [lender.bank for lender in listings] == ["HDFC Bank", "ICICI Bank", "Axis Bank", "Kotak"]

    def test_custom_directory(self):
        custom = [LenderProfile(
            bank="Dealer NBFC", lender_type="NBFC", annual_rate_percent=11,
            max_tenure_months=48, max_amount=1_500_000, processing_fee_pct=1.5,
        )]
        listings = list_lenders(lenders=custom)
        assert listings[0].processing_fee_pct == 1.5
        assert list_lenders(lender_type="Public", lenders=custom) == []
