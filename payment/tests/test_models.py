from datetime import date
from decimal import Decimal

import pytest
from django.db import IntegrityError, transaction

from booking.tests.helpers import sample_booking, sample_hotel, sample_room_type
from payment.models import Payment


@pytest.fixture
def booking():
    return sample_booking(sample_room_type(sample_hotel()))


def make_payment(booking, **params):
    defaults = {
        "method": Payment.PaymentMethod.CREDIT,
        "total_amount": Decimal("300.00"),
        "paid_amount": Decimal("100.00"),
        "remaining_amount": Decimal("200.00"),
        "remaining_due_date": date(2025, 9, 30),
        "status": Payment.PaymentStatus.PARTIALLY_PAID,
    }
    defaults.update(params)
    return Payment.objects.create(booking=booking, **defaults)


@pytest.mark.django_db
def test_partially_paid_credit_is_stored(booking):
    payment = make_payment(booking)

    assert payment.pk is not None


@pytest.mark.django_db
@pytest.mark.parametrize(
    "params",
    [
        {"remaining_due_date": None},
        {"status": Payment.PaymentStatus.COMPLETED},
        {"paid_amount": Decimal("300.00"), "remaining_amount": Decimal("0.00")},
        {"method": Payment.PaymentMethod.CASH},
        {"remaining_amount": Decimal("-1.00")},
    ],
)
def test_inconsistent_payment_rejected(booking, params):
    with pytest.raises(IntegrityError):
        with transaction.atomic():
            make_payment(booking, **params)
