from __future__ import annotations

from decimal import Decimal
from itertools import permutations

import pytest

from src.training_office.training_office.core.enums import PaymentStatus
from src.training_office.training_office.core.exceptions import InvalidLineItem, ValidationError
from src.training_office.training_office.fees.calculator import (
    clamp_discount_percent,
    compute_ledger,
    derive_payment_status,
    round_money,
)
from src.training_office.training_office.fees.model import LedgerSummary, LineItem

VAT = Decimal("0.05")


def course(price, discount=0, quantity=1):
    return LineItem(unit_price=price, discount_percent=discount, quantity=quantity)


def test_empty_ledger_is_all_zero_and_pending():
    summary = compute_ledger([], VAT, 0)

    assert summary == LedgerSummary.zero()
    assert summary.payment_status == PaymentStatus.PENDING
    assert summary.as_dict()["grand_total"] == "0.00"


def test_missing_amount_paid_counts_as_zero():
    assert compute_ledger([course(100)], 0).amount_paid == Decimal("0.00")
    assert compute_ledger([course(100)], 0, None).payment_status == PaymentStatus.PENDING


def test_vat_applies_after_discount():
    summary = compute_ledger([course(1000, 10)], VAT, 0)

    assert summary.subtotal == Decimal("1000.00")
    assert summary.discount_amount == Decimal("100.00")
    assert summary.net_after_discount == Decimal("900.00")
    assert summary.vat == Decimal("45.00")
    assert summary.grand_total == Decimal("945.00")


@pytest.mark.parametrize(
    "paid, status, balance",
    [
        ("945.00", PaymentStatus.PAID, "0.00"),
        ("500.00", PaymentStatus.PARTIAL, "445.00"),
        (0, PaymentStatus.PENDING, "945.00"),
        ("1000", PaymentStatus.PAID, "-55.00"),
    ],
)
def test_payment_status_boundaries(paid, status, balance):
    summary = compute_ledger([course(1000, 10)], VAT, paid)

    assert summary.payment_status == status
    assert summary.balance_due == Decimal(balance)


def test_discount_above_limit_is_clamped_not_rejected():
    clamped = compute_ledger([course(1000, 35)], VAT, 0)
    at_limit = compute_ledger([course(1000, 20)], VAT, 0)

    assert clamped == at_limit
    assert clamped.discount_amount == Decimal("200.00")


def test_negative_discount_is_clamped_to_zero():
    assert compute_ledger([course(1000, -5)], 0).discount_amount == Decimal("0.00")


def test_discount_is_per_line():
    summary = compute_ledger([course(1000, 10), course(500, 0, quantity=2)], 0)

    assert summary.subtotal == Decimal("2000.00")
    assert summary.discount_amount == Decimal("100.00")
    assert summary.grand_total == Decimal("1900.00")


@pytest.mark.parametrize(
    "item, field",
    [
        (LineItem(unit_price=-100), "unit_price"),
        (LineItem(unit_price=100, quantity=-1), "quantity"),
        (LineItem(unit_price="abc"), "unit_price"),
        (LineItem(unit_price=None), "unit_price"),
        (LineItem(unit_price=float("inf")), "unit_price"),
        (LineItem(unit_price=100, discount_percent="ten"), "discount_percent"),
    ],
)
def test_invalid_line_item_is_raised(item, field):
    with pytest.raises(InvalidLineItem) as exc:
        compute_ledger([course(10), item], VAT, 0)

    assert exc.value.field == field
    assert exc.value.index == 1


def test_negative_price_example():
    with pytest.raises(InvalidLineItem):
        compute_ledger([LineItem(unit_price=-100, quantity=1, discount_percent=0)], Decimal("0.05"), 0)


@pytest.mark.parametrize("vat_rate, paid", [("-0.05", 0), ("0.05", "-1"), ("x", 0)])
def test_bad_vat_rate_or_payment_is_a_validation_error(vat_rate, paid):
    with pytest.raises(ValidationError) as exc:
        compute_ledger([course(100)], vat_rate, paid)

    assert not isinstance(exc.value, InvalidLineItem)


def test_line_order_does_not_change_totals():
    items = [course("199.99", 15, 3), course("1250.5", 20), course("0.33", 0, 7)]
    results = {compute_ledger(list(p), VAT, "300") for p in permutations(items)}

    assert len(results) == 1


def test_same_inputs_give_identical_summaries():
    items = [course("333.333", "12.5", 2), course(75, 0)]

    assert compute_ledger(items, VAT, "100") == compute_ledger(items, VAT, "100")


def test_rounding_happens_once_at_the_end():
    items = [course("33.335", 0, 3)]
    first = compute_ledger(items, VAT, 0)

    for _ in range(50):
        assert compute_ledger(items, VAT, 0) == first

    # 100.005 + 5.00025 rounded once, not 100.01 + 5.00 re-rounded per step
    assert first.subtotal == Decimal("100.01")
    assert first.vat == Decimal("5.00")
    assert first.grand_total == Decimal("105.01")


def test_floats_round_half_up_from_their_decimal_text():
    assert compute_ledger([course(2.675)], 0).grand_total == Decimal("2.68")
    assert compute_ledger([course("0.125")], 0).grand_total == Decimal("0.13")


def test_round_money_never_returns_negative_zero():
    assert str(round_money(Decimal("-0.001"))) == "0.00"


def test_clamp_discount_percent():
    assert clamp_discount_percent(None) == 0
    assert clamp_discount_percent("") == 0
    assert clamp_discount_percent("12.5") == Decimal("12.5")
    assert clamp_discount_percent(35) == Decimal("20")
    assert clamp_discount_percent(35, Decimal("30")) == Decimal("30")


def test_derive_payment_status():
    assert derive_payment_status(Decimal("0"), Decimal("0")) == PaymentStatus.PENDING
    assert derive_payment_status(Decimal("0"), Decimal("10")) == PaymentStatus.PAID
    assert derive_payment_status(Decimal("5"), Decimal("10")) == PaymentStatus.PARTIAL
    assert derive_payment_status(Decimal("5"), Decimal("0")) == PaymentStatus.PENDING


@pytest.mark.parametrize(
    "item, field",
    [
        (LineItem(unit_price="1e27"), "unit_price"),
        (LineItem(unit_price="1e999999"), "unit_price"),
        (LineItem(unit_price="10", quantity="1e15"), "quantity"),
    ],
)
def test_oversized_line_amount_is_invalid_line_item(item, field):
    with pytest.raises(InvalidLineItem) as exc:
        compute_ledger([item], VAT, 0)

    assert exc.value.field == field
    assert "too large" in str(exc.value)


@pytest.mark.parametrize("vat_rate, paid", [("1e999999", 0), ("0.05", "1e30")])
def test_oversized_vat_rate_or_payment_is_a_validation_error(vat_rate, paid):
    with pytest.raises(ValidationError) as exc:
        compute_ledger([course(100)], vat_rate, paid)

    assert not isinstance(exc.value, InvalidLineItem)


def test_huge_discount_is_still_clamped():
    assert compute_ledger([course(1000, "1e999999")], 0).discount_amount == Decimal("200.00")


def test_largest_accepted_amounts_still_round():
    summary = compute_ledger([course("999999999999.99", 0, "999999999999")], VAT, 0)

    assert summary.subtotal == Decimal("999999999998990000000000.01")
    assert summary.payment_status == PaymentStatus.PENDING


def test_status_uses_unrounded_payment_and_balance():
    tiny_payment = compute_ledger([course(100)], 0, "0.004")
    overpaid_by_a_fraction = compute_ledger([course(100)], 0, "100.001")

    assert tiny_payment.amount_paid == Decimal("0.00")
    assert tiny_payment.balance_due == Decimal("100.00")
    assert tiny_payment.payment_status == PaymentStatus.PARTIAL
    assert overpaid_by_a_fraction.balance_due == Decimal("0.00")
    assert overpaid_by_a_fraction.payment_status == PaymentStatus.PAID
