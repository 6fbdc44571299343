from datetime import date, timedelta

from django.db.models import IntegerField, Q, Sum
from django.db.models.functions import Coalesce
from rest_framework.exceptions import ValidationError

from booking.models import Booking
from room.models import RoomType


def validate_stay_request(check_in: date, check_out: date, requested_rooms: int) -> None:
    """Reject malformed availability requests before touching the database."""
    if check_out <= check_in:
        raise ValidationError(
            {"check_out_date": "Check-out date must be after check-in date."}
        )
    if requested_rooms is None or requested_rooms < 1:
        raise ValidationError(
            {"number_of_rooms": "Number of rooms must be at least 1."}
        )


def overlapping_bookings(check_in: date, check_out: date):
    """Bookings that commit inventory on at least one night of the range."""
    return Booking.objects.exclude(
        status=Booking.BookingStatus.CANCELLED
    ).filter(
        check_in_date__lt=check_out,
        check_out_date__gt=check_in,
    )


def booked_rooms(room_type: RoomType, check_in: date, check_out: date,
                 exclude_booking_id=None) -> int:
    bookings = overlapping_bookings(check_in, check_out).filter(room=room_type)
    if exclude_booking_id is not None:
        bookings = bookings.exclude(pk=exclude_booking_id)
    return bookings.aggregate(
        total=Coalesce(Sum("number_of_rooms"), 0, output_field=IntegerField())
    )["total"]


def is_within_availability_period(room_type: RoomType, check_in: date,
                                  check_out: date) -> bool:
    if room_type.available_from and check_in < room_type.available_from:
        return False
    if room_type.available_to and check_out > room_type.available_to:
        return False
    return True


def evaluate_room_type(room_type: RoomType, booked: int, check_in: date,
                       check_out: date, requested_rooms: int) -> dict:
    within_period = is_within_availability_period(room_type, check_in, check_out)
    total_available = max(0, room_type.quantity - booked)
    return {
        "room_type": room_type,
        "is_available": within_period and total_available >= requested_rooms,
        "total_available": total_available,
        "requested_rooms": requested_rooms,
        "booked_rooms": booked,
        "is_within_availability_period": within_period,
    }


def room_type_availability(room_type: RoomType, check_in: date, check_out: date,
                           requested_rooms: int, exclude_booking_id=None) -> dict:
    validate_stay_request(check_in, check_out, requested_rooms)
    booked = booked_rooms(room_type, check_in, check_out, exclude_booking_id)
    return evaluate_room_type(room_type, booked, check_in, check_out, requested_rooms)


def check_availability(hotel, check_in: date, check_out: date, requested_rooms: int,
                       room_type_id=None, board_type=None, capacity=None) -> list[dict]:
    """
    Point-in-time availability of every active room type of a hotel.

    Booked rooms are summed in a single query over non-cancelled bookings
    whose half-open stay interval overlaps [check_in, check_out).
    """
    validate_stay_request(check_in, check_out, requested_rooms)

    room_types = RoomType.objects.filter(hotel=hotel, is_active=True)
    if room_type_id:
        room_types = room_types.filter(pk=room_type_id)
    if board_type:
        room_types = room_types.filter(board_type=board_type.upper())
    if capacity:
        room_types = room_types.filter(capacity__gte=capacity)

    room_types = room_types.select_related("hotel").annotate(
        committed_rooms=Coalesce(
            Sum(
                "bookings__number_of_rooms",
                filter=Q(
                    bookings__check_in_date__lt=check_out,
                    bookings__check_out_date__gt=check_in,
                ) & ~Q(bookings__status=Booking.BookingStatus.CANCELLED),
            ),
            0,
            output_field=IntegerField(),
        )
    ).order_by("id")

    return [
        evaluate_room_type(
            room_type, room_type.committed_rooms, check_in, check_out, requested_rooms
        )
        for room_type in room_types
    ]


def summarize(results: list[dict]) -> dict:
    available = sum(1 for result in results if result["is_available"])
    return {
        "total_rooms": len(results),
        "available_rooms": available,
        "unavailable_rooms": len(results) - available,
    }


def daily_availability(room_type: RoomType, date_from: date, date_to: date) -> list[dict]:
    """Free rooms of one type for every date in [date_from, date_to]."""
    bookings = overlapping_bookings(
        date_from, date_to + timedelta(days=1)
    ).filter(room=room_type)

    committed = {}
    for booking in bookings:
        current = max(booking.check_in_date, date_from)
        last = min(booking.check_out_date, date_to + timedelta(days=1))
        while current < last:
            committed[current] = committed.get(current, 0) + booking.number_of_rooms
            current += timedelta(days=1)

    calendar = []
    current_date = date_from
    while current_date <= date_to:
        free = max(0, room_type.quantity - committed.get(current_date, 0))
        calendar.append({
            "date": current_date,
            "available_rooms": free,
            "available": free > 0,
        })
        current_date += timedelta(days=1)
    return calendar
