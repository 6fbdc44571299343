from datetime import date
from decimal import Decimal

from rest_framework.exceptions import ValidationError

from room.models import RoomType


def resolve_rate(room_type: RoomType, use_alternative_rate: bool,
                 alternative_rate: Decimal | None = None) -> Decimal:
    """
    Nightly rate to charge. A caller-supplied alternative rate wins over the
    room type's alternative price; the base price applies otherwise.
    """
    if use_alternative_rate:
        rate = alternative_rate if alternative_rate is not None else room_type.alternative_price
        if rate is not None:
            return Decimal(rate)
    return Decimal(room_type.base_price)


def calculate_nights(check_in: date, check_out: date) -> int:
    nights = (check_out - check_in).days
    if nights <= 0:
        raise ValidationError(
            {"check_out_date": "Check-out date must be after check-in date."}
        )
    return nights


def compute_total(nightly_rate: Decimal, nights: int, rooms: int) -> Decimal:
    return Decimal(nightly_rate) * nights * rooms
