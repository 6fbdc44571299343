from decimal import Decimal, InvalidOperation

from django.utils import timezone
from rest_framework.exceptions import ValidationError

from payment.exceptions import InvalidPaymentMethod
from payment.models import Payment

TWO_PLACES = Decimal("0.01")


def to_amount(value, field: str) -> Decimal:
    try:
        amount = Decimal(str(value)).quantize(TWO_PLACES)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({field: "A valid amount is required."})
    if amount < 0:
        raise ValidationError({field: "Amount cannot be negative."})
    return amount


def split_payment(method, total_amount, payment_data: dict | None = None) -> dict:
    """
    Map a payment method and the booking total to the fields of a Payment.

    CASH settles the whole total on the payment date. CREDIT collects
    `paid_amount` now and leaves the rest due on `remaining_due_date`.
    Pure: nothing is read from or written to the database.
    """
    payment_data = payment_data or {}

    if not method:
        raise ValidationError({"method": "Payment method is required."})
    method = str(method).upper()
    if method not in Payment.PaymentMethod.values:
        raise InvalidPaymentMethod(method)

    total = to_amount(total_amount, "total_amount")
    payment_date = payment_data.get("payment_date") or timezone.localdate()

    if method == Payment.PaymentMethod.CASH:
        amount = payment_data.get("amount")
        paid = total if amount is None else to_amount(amount, "amount")
        if paid != total:
            raise ValidationError(
                {"amount": f"Cash payments must settle the full total of {total}."}
            )
        return {
            "method": Payment.PaymentMethod.CASH,
            "total_amount": total,
            "paid_amount": paid,
            "remaining_amount": Decimal("0.00"),
            "payment_date": payment_date,
            "remaining_due_date": None,
            "status": Payment.PaymentStatus.COMPLETED,
        }

    paid_amount = payment_data.get("paid_amount")
    paid = Decimal("0.00") if paid_amount is None else to_amount(paid_amount, "paid_amount")
    if paid > total:
        raise ValidationError(
            {"paid_amount": f"Paid amount cannot exceed the total of {total}."}
        )

    remaining = total - paid
    due_date = payment_data.get("remaining_due_date")
    if remaining > 0 and not due_date:
        raise ValidationError(
            {"remaining_due_date": "Due date is required for credit payments with remaining amount."}
        )

    return {
        "method": Payment.PaymentMethod.CREDIT,
        "total_amount": total,
        "paid_amount": paid,
        "remaining_amount": remaining,
        "payment_date": payment_date,
        "remaining_due_date": due_date if remaining > 0 else None,
        "status": (
            Payment.PaymentStatus.PARTIALLY_PAID
            if remaining > 0
            else Payment.PaymentStatus.COMPLETED
        ),
    }


def recalculate_payment(payment: Payment, total_amount) -> dict:
    """Re-split an existing payment against a new booking total."""
    payment_data = {
        "payment_date": payment.payment_date,
        "remaining_due_date": payment.remaining_due_date,
    }
    if payment.method == Payment.PaymentMethod.CREDIT:
        payment_data["paid_amount"] = payment.paid_amount
    return split_payment(payment.method, total_amount, payment_data)
