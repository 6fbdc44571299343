from django.conf import settings
from django.db import models
from django.db.models import F, ForeignKey, Q

from guest.models import Guest
from room.models import Hotel, RoomType


class Booking(models.Model):
    class BookingStatus(models.TextChoices):
        PENDING = "PENDING"
        CONFIRMED = "CONFIRMED"
        CHECKED_IN = "CHECKED_IN"
        CHECKED_OUT = "CHECKED_OUT"
        CANCELLED = "CANCELLED"

    TERMINAL_STATUSES = (BookingStatus.CHECKED_OUT, BookingStatus.CANCELLED)

    ALLOWED_TRANSITIONS = {
        BookingStatus.PENDING: (BookingStatus.CONFIRMED, BookingStatus.CANCELLED),
        BookingStatus.CONFIRMED: (BookingStatus.CHECKED_IN, BookingStatus.CANCELLED),
        BookingStatus.CHECKED_IN: (BookingStatus.CHECKED_OUT, BookingStatus.CANCELLED),
    }

    res_id = models.CharField(max_length=20, unique=True)
    hotel = ForeignKey(Hotel, on_delete=models.PROTECT, related_name="bookings")
    room = ForeignKey(RoomType, on_delete=models.PROTECT, related_name="bookings")
    guest = ForeignKey(Guest, on_delete=models.PROTECT, related_name="bookings")
    number_of_rooms = models.PositiveIntegerField(default=1)
    check_in_date = models.DateField()
    check_out_date = models.DateField()
    number_of_nights = models.PositiveIntegerField()
    room_rate = models.DecimalField(max_digits=10, decimal_places=2)
    alternative_rate = models.DecimalField(max_digits=10, decimal_places=2,
                                           null=True, blank=True)
    use_alternative_rate = models.BooleanField(default=False)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    rate_code = models.CharField(max_length=30, default="STANDARD")
    status = models.CharField(choices=BookingStatus, max_length=20,
                              default=BookingStatus.PENDING)
    assigned_room_no = models.CharField(max_length=20, blank=True)
    check_in_time = models.DateTimeField(null=True, blank=True)
    check_out_time = models.DateTimeField(null=True, blank=True)
    special_requests = models.JSONField(default=list, blank=True)
    notes = models.TextField(blank=True)
    created_by = ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
                            null=True, blank=True, related_name="bookings")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at", "-id")
        constraints = [
            models.CheckConstraint(
                condition=Q(check_out_date__gt=F("check_in_date")),
                name="check_out_after_check_in",
            ),
            models.CheckConstraint(
                condition=Q(number_of_rooms__gte=1),
                name="booking_at_least_one_room",
            ),
        ]

    def __str__(self):
        return self.res_id

    @property
    def is_terminal(self) -> bool:
        return self.status in self.TERMINAL_STATUSES

    def can_transition_to(self, new_status) -> bool:
        return new_status in self.ALLOWED_TRANSITIONS.get(self.status, ())
