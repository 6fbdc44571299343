from datetime import date
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.exceptions import ValidationError

from payment.exceptions import InvalidPaymentMethod
from payment.models import Payment
from payment.services.payment_service import recalculate_payment, split_payment

DUE = date(2025, 10, 1)


def test_cash_settles_full_total():
    payment = split_payment("CASH", Decimal("900"))

    assert payment["paid_amount"] == Decimal("900.00")
    assert payment["remaining_amount"] == Decimal("0.00")
    assert payment["remaining_due_date"] is None
    assert payment["status"] == Payment.PaymentStatus.COMPLETED


def test_cash_with_matching_amount():
    payment = split_payment("cash", Decimal("900"), {"amount": "900.00"})

    assert payment["method"] == Payment.PaymentMethod.CASH
    assert payment["paid_amount"] == Decimal("900.00")


def test_cash_partial_amount_rejected():
    with pytest.raises(ValidationError) as exc_info:
        split_payment("CASH", Decimal("900"), {"amount": "500"})

    assert "amount" in exc_info.value.detail


def test_credit_partial_payment():
    payment = split_payment(
        "CREDIT", Decimal("900"),
        {"paid_amount": Decimal("300"), "remaining_due_date": DUE},
    )

    assert payment["paid_amount"] == Decimal("300.00")
    assert payment["remaining_amount"] == Decimal("600.00")
    assert payment["remaining_due_date"] == DUE
    assert payment["status"] == Payment.PaymentStatus.PARTIALLY_PAID


def test_credit_remaining_requires_due_date():
    with pytest.raises(ValidationError) as exc_info:
        split_payment("CREDIT", Decimal("900"), {"paid_amount": Decimal("300")})

    assert "remaining_due_date" in exc_info.value.detail


def test_credit_paid_in_full_drops_due_date():
    payment = split_payment(
        "CREDIT", Decimal("900"),
        {"paid_amount": Decimal("900"), "remaining_due_date": DUE},
    )

    assert payment["remaining_amount"] == Decimal("0.00")
    assert payment["remaining_due_date"] is None
    assert payment["status"] == Payment.PaymentStatus.COMPLETED


def test_credit_nothing_paid_yet():
    payment = split_payment("CREDIT", Decimal("900"), {"remaining_due_date": DUE})

    assert payment["paid_amount"] == Decimal("0.00")
    assert payment["remaining_amount"] == Decimal("900.00")


def test_credit_overpayment_rejected():
    with pytest.raises(ValidationError) as exc_info:
        split_payment(
            "CREDIT", Decimal("900"),
            {"paid_amount": Decimal("901"), "remaining_due_date": DUE},
        )

    assert "paid_amount" in exc_info.value.detail


def test_missing_method_rejected():
    with pytest.raises(ValidationError) as exc_info:
        split_payment(None, Decimal("900"))

    assert "method" in exc_info.value.detail


def test_unknown_method_lists_valid_methods():
    with pytest.raises(InvalidPaymentMethod) as exc_info:
        split_payment("CHEQUE", Decimal("900"))

    assert "CASH, CREDIT" in str(exc_info.value.detail["method"][0])


def test_payment_date_defaults_to_today():
    payment = split_payment("CASH", Decimal("10"))

    assert payment["payment_date"] == timezone.localdate()


@pytest.mark.parametrize(
    "method,data,total",
    [
        ("CASH", {}, Decimal("123.45")),
        ("CREDIT", {"paid_amount": Decimal("0.01"), "remaining_due_date": DUE},
         Decimal("123.45")),
        ("CREDIT", {"paid_amount": Decimal("123.45")}, Decimal("123.45")),
    ],
)
def test_paid_plus_remaining_equals_total(method, data, total):
    payment = split_payment(method, total, data)

    assert payment["paid_amount"] + payment["remaining_amount"] == payment["total_amount"]


def test_recalculate_keeps_credit_deposit():
    payment = Payment(
        method=Payment.PaymentMethod.CREDIT,
        total_amount=Decimal("900.00"),
        paid_amount=Decimal("300.00"),
        remaining_amount=Decimal("600.00"),
        payment_date=date(2025, 9, 1),
        remaining_due_date=DUE,
        status=Payment.PaymentStatus.PARTIALLY_PAID,
    )

    fields = recalculate_payment(payment, Decimal("1200.00"))

    assert fields["paid_amount"] == Decimal("300.00")
    assert fields["remaining_amount"] == Decimal("900.00")
    assert fields["payment_date"] == date(2025, 9, 1)
    assert fields["remaining_due_date"] == DUE


def test_recalculate_cash_follows_new_total():
    payment = Payment(
        method=Payment.PaymentMethod.CASH,
        total_amount=Decimal("900.00"),
        paid_amount=Decimal("900.00"),
        remaining_amount=Decimal("0.00"),
        payment_date=date(2025, 9, 1),
        status=Payment.PaymentStatus.COMPLETED,
    )

    fields = recalculate_payment(payment, Decimal("600.00"))

    assert fields["paid_amount"] == Decimal("600.00")
    assert fields["remaining_amount"] == Decimal("0.00")
