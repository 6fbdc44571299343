from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import F, Q


class Hotel(models.Model):
    name = models.CharField(max_length=255)
    code = models.CharField(max_length=20, unique=True)
    address = models.CharField(max_length=255, blank=True)
    is_active = models.BooleanField(default=True)

    def __str__(self):
        return f"{self.name} ({self.code})"


class RoomType(models.Model):
    """
    A category of rooms within a hotel. `quantity` is the number of physical
    rooms of this type, i.e. the ceiling for overlapping bookings on any date.
    """

    class BoardType(models.TextChoices):
        ROOM_ONLY = "ROOM_ONLY"
        BED_BREAKFAST = "BED_BREAKFAST"
        HALF_BOARD = "HALF_BOARD"
        FULL_BOARD = "FULL_BOARD"
        ALL_INCLUSIVE = "ALL_INCLUSIVE"

    hotel = models.ForeignKey(Hotel, on_delete=models.CASCADE,
                              related_name="room_types")
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    board_type = models.CharField(choices=BoardType, max_length=20,
                                  default=BoardType.ROOM_ONLY)
    capacity = models.PositiveIntegerField(default=1)
    quantity = models.PositiveIntegerField()
    base_price = models.DecimalField(max_digits=10, decimal_places=2,
                                     validators=[MinValueValidator(0)])
    alternative_price = models.DecimalField(max_digits=10, decimal_places=2,
                                            null=True, blank=True,
                                            validators=[MinValueValidator(0)])
    available_from = models.DateField(null=True, blank=True)
    available_to = models.DateField(null=True, blank=True)
    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ("hotel", "name")
        constraints = [
            models.CheckConstraint(
                condition=Q(base_price__gte=0),
                name="room_type_base_price_non_negative",
            ),
            models.CheckConstraint(
                condition=(
                    Q(available_from__isnull=True, available_to__isnull=True)
                    | Q(available_from__isnull=False, available_to__isnull=False)
                ),
                name="room_type_window_both_or_neither",
            ),
            models.CheckConstraint(
                condition=(
                    Q(available_from__isnull=True)
                    | Q(available_to__gte=F("available_from"))
                ),
                name="room_type_window_ordered",
            ),
        ]

    def __str__(self):
        return f"{self.name} @ {self.hotel.code}"

    @property
    def has_availability_window(self) -> bool:
        return self.available_from is not None or self.available_to is not None
