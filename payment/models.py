from django.db import models
from django.db.models import ForeignKey, Q
from django.utils import timezone

from booking.models import Booking


class Payment(models.Model):
    class PaymentMethod(models.TextChoices):
        CASH = "CASH"
        CREDIT = "CREDIT"

    class PaymentStatus(models.TextChoices):
        COMPLETED = "COMPLETED"
        PARTIALLY_PAID = "PARTIALLY_PAID"

    booking = ForeignKey(Booking, related_name="payments",
                         on_delete=models.PROTECT)
    method = models.CharField(choices=PaymentMethod, max_length=10)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    paid_amount = models.DecimalField(max_digits=12, decimal_places=2)
    remaining_amount = models.DecimalField(max_digits=12, decimal_places=2)
    payment_date = models.DateField(default=timezone.localdate)
    remaining_due_date = models.DateField(null=True, blank=True)
    status = models.CharField(choices=PaymentStatus, max_length=20)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at", "-id")
        constraints = [
            models.CheckConstraint(
                condition=Q(remaining_amount__gte=0, paid_amount__gte=0),
                name="payment_amounts_non_negative",
            ),
            models.CheckConstraint(
                condition=~Q(method="CASH") | Q(remaining_amount=0),
                name="cash_payment_settled",
            ),
            models.CheckConstraint(
                condition=(
                    Q(status="COMPLETED", remaining_amount=0)
                    | Q(status="PARTIALLY_PAID", remaining_amount__gt=0,
                        remaining_due_date__isnull=False)
                ),
                name="payment_status_matches_remaining",
            ),
        ]

    def __str__(self):
        return f"{self.method} {self.paid_amount}/{self.total_amount} for {self.booking_id}"
