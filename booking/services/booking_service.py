"""
Transactional write path for bookings.

Every operation runs in a single ``transaction.atomic()`` block so that a
booking and its payment are written together or not at all. Operations
that add committed inventory lock the room type row with
``select_for_update()`` before re-checking availability, which serializes
concurrent admissions for the same room type.
"""
import logging
import random

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from booking.exceptions import RoomUnavailable
from booking.models import Booking
from guest.models import Guest
from payment.models import Payment
from payment.services.payment_service import recalculate_payment, split_payment
from room.models import Hotel, RoomType
from room.services.availability import room_type_availability, validate_stay_request
from room.services.pricing import calculate_nights, compute_total, resolve_rate

logger = logging.getLogger(__name__)

STAY_FIELDS = (
    "check_in_date",
    "check_out_date",
    "number_of_rooms",
    "use_alternative_rate",
    "alternative_rate",
)

DETAIL_FIELDS = (
    "rate_code",
    "assigned_room_no",
    "check_in_time",
    "check_out_time",
    "special_requests",
    "notes",
)


def make_res_id() -> str:
    return f"RES-{timezone.now().year}-{random.randint(0, 999999):06d}"


def allocate_res_id() -> str:
    for _ in range(10):
        ref = make_res_id()
        if not Booking.objects.filter(res_id=ref).exists():
            return ref
    raise RuntimeError("could not allocate reservation id")


def _get_hotel(hotel_id) -> Hotel:
    try:
        return Hotel.objects.get(pk=hotel_id)
    except Hotel.DoesNotExist:
        raise NotFound(f"Hotel {hotel_id} not found.")


def _lock_room_type(room_type_id) -> RoomType:
    try:
        return RoomType.objects.select_for_update().get(pk=room_type_id)
    except RoomType.DoesNotExist:
        raise NotFound(f"Room {room_type_id} not found.")


def _lock_booking(booking_id) -> Booking:
    try:
        return Booking.objects.select_for_update().get(pk=booking_id)
    except Booking.DoesNotExist:
        raise NotFound(f"Booking {booking_id} not found.")


def _ensure_available(room_type, check_in, check_out, number_of_rooms,
                      exclude_booking_id=None) -> None:
    availability = room_type_availability(
        room_type, check_in, check_out, number_of_rooms, exclude_booking_id
    )
    if availability["is_available"]:
        return

    logger.warning(
        f"Rejected {number_of_rooms} room(s) of RoomType {room_type.id} "
        f"for {check_in} - {check_out}: "
        f"{availability['total_available']} available"
    )
    if not availability["is_within_availability_period"]:
        raise RoomUnavailable(
            "Selected dates are outside the room's availability period."
        )
    raise RoomUnavailable(
        f"Only {availability['total_available']} room(s) available "
        f"for selected dates, {number_of_rooms} requested."
    )


def save_guest(guest_data: dict, guest: Guest | None = None) -> Guest:
    """Create a guest profile, or update the given/referenced one."""
    guest_data = dict(guest_data)
    guest_id = guest_data.pop("id", None)

    if guest is None and guest_id is not None:
        try:
            guest = Guest.objects.get(pk=guest_id)
        except Guest.DoesNotExist:
            raise NotFound(f"Guest {guest_id} not found.")

    if guest is None:
        profile_id = guest_data.get("profile_id")
        if profile_id and Guest.objects.filter(profile_id=profile_id).exists():
            raise ValidationError(
                {"guest_data": {"profile_id": f"Profile {profile_id} already exists."}}
            )
        return Guest.objects.create(**guest_data)

    guest_data.pop("profile_id", None)
    for attr, value in guest_data.items():
        setattr(guest, attr, value)
    guest.save()
    return guest


def _write_payment(booking: Booking, payment_fields: dict) -> Payment:
    """Replace the booking's active payment, creating it if there is none."""
    payment = booking.payments.order_by("-created_at", "-id").first()
    if payment is None:
        return Payment.objects.create(booking=booking, **payment_fields)

    for attr, value in payment_fields.items():
        setattr(payment, attr, value)
    payment.save()
    return payment


def create_booking(data: dict, user=None) -> Booking:
    check_in = data.get("check_in_date")
    check_out = data.get("check_out_date")
    number_of_rooms = data.get("number_of_rooms", 1)
    if check_in is None or check_out is None:
        raise ValidationError(
            {"check_in_date": "Check-in and check-out dates are required."}
        )
    validate_stay_request(check_in, check_out, number_of_rooms)

    payment_data = data.get("payment_data")
    if not payment_data:
        raise ValidationError({"payment_data": "Payment data is required."})

    status = data.get("status") or Booking.BookingStatus.PENDING
    if status not in (Booking.BookingStatus.PENDING, Booking.BookingStatus.CONFIRMED):
        raise ValidationError(
            {"status": "New bookings must be PENDING or CONFIRMED."}
        )

    use_alternative_rate = data.get("use_alternative_rate", False)
    alternative_rate = data.get("alternative_rate")

    with transaction.atomic():
        room_type = _lock_room_type(data.get("room"))
        hotel = _get_hotel(data.get("hotel") or room_type.hotel_id)
        if room_type.hotel_id != hotel.pk:
            raise ValidationError(
                {"room": f"Room {room_type.pk} does not belong to hotel {hotel.pk}."}
            )
        if not room_type.is_active:
            raise RoomUnavailable("Room is not available.")

        _ensure_available(room_type, check_in, check_out, number_of_rooms)

        room_rate = resolve_rate(room_type, use_alternative_rate, alternative_rate)
        nights = calculate_nights(check_in, check_out)
        total_amount = compute_total(room_rate, nights, number_of_rooms)
        payment_fields = split_payment(
            payment_data.get("method"), total_amount, payment_data
        )

        guest = save_guest(data.get("guest_data") or {})
        booking = Booking.objects.create(
            res_id=allocate_res_id(),
            hotel=hotel,
            room=room_type,
            guest=guest,
            number_of_rooms=number_of_rooms,
            check_in_date=check_in,
            check_out_date=check_out,
            number_of_nights=nights,
            room_rate=room_rate,
            alternative_rate=alternative_rate,
            use_alternative_rate=use_alternative_rate,
            total_amount=total_amount,
            rate_code=data.get("rate_code") or "STANDARD",
            status=status,
            assigned_room_no=data.get("assigned_room_no", ""),
            special_requests=data.get("special_requests", []),
            notes=data.get("notes", ""),
            created_by=user if user is not None and user.is_authenticated else None,
        )
        Payment.objects.create(booking=booking, **payment_fields)

    logger.info(
        f"Created booking {booking.res_id}: {number_of_rooms} x RoomType "
        f"{room_type.id} for {nights} night(s), total {total_amount}"
    )
    return booking


def update_booking(booking_id, data: dict) -> Booking:
    """
    Apply a partial update. Nights and total are recomputed from scratch
    whenever a stay field is supplied; the active payment is replaced from
    `payment_data` or re-split against the new total.
    """
    with transaction.atomic():
        booking = _lock_booking(booking_id)

        if any(field in data for field in STAY_FIELDS):
            if booking.is_terminal:
                raise ValidationError(
                    {"status": f"Cannot change the stay of a {booking.status} booking."}
                )

            check_in = data.get("check_in_date", booking.check_in_date)
            check_out = data.get("check_out_date", booking.check_out_date)
            number_of_rooms = data.get("number_of_rooms", booking.number_of_rooms)
            validate_stay_request(check_in, check_out, number_of_rooms)

            inventory_changed = (check_in, check_out, number_of_rooms) != (
                booking.check_in_date,
                booking.check_out_date,
                booking.number_of_rooms,
            )
            if inventory_changed:
                room_type = _lock_room_type(booking.room_id)
                _ensure_available(
                    room_type, check_in, check_out, number_of_rooms,
                    exclude_booking_id=booking.pk,
                )
            else:
                room_type = booking.room

            use_alternative_rate = data.get(
                "use_alternative_rate", booking.use_alternative_rate
            )
            alternative_rate = data.get("alternative_rate", booking.alternative_rate)
            room_rate = resolve_rate(room_type, use_alternative_rate, alternative_rate)
            nights = calculate_nights(check_in, check_out)

            booking.check_in_date = check_in
            booking.check_out_date = check_out
            booking.number_of_rooms = number_of_rooms
            booking.use_alternative_rate = use_alternative_rate
            booking.alternative_rate = alternative_rate
            booking.room_rate = room_rate
            booking.number_of_nights = nights
            booking.total_amount = compute_total(room_rate, nights, number_of_rooms)

        if data.get("guest_data"):
            save_guest(data["guest_data"], guest=booking.guest)

        for field in DETAIL_FIELDS:
            if field in data:
                setattr(booking, field, data[field])

        booking.save()

        payment_data = data.get("payment_data")
        if payment_data:
            _write_payment(
                booking,
                split_payment(payment_data.get("method"), booking.total_amount, payment_data),
            )
        else:
            payment = booking.payments.order_by("-created_at", "-id").first()
            if payment is not None and payment.total_amount != booking.total_amount:
                _write_payment(booking, recalculate_payment(payment, booking.total_amount))

    logger.info(f"Updated booking {booking.res_id}")
    return booking


def cancel_booking(booking_id) -> Booking:
    """Soft cancel. Cancelling twice is a no-op."""
    with transaction.atomic():
        booking = _lock_booking(booking_id)

        if booking.status == Booking.BookingStatus.CANCELLED:
            return booking

        if not booking.can_transition_to(Booking.BookingStatus.CANCELLED):
            raise ValidationError(
                {"status": f"A {booking.status} booking cannot be cancelled."}
            )

        booking.status = Booking.BookingStatus.CANCELLED
        booking.save(update_fields=["status", "updated_at"])

    logger.info(f"Cancelled booking {booking.res_id}")
    return booking


def change_status(booking_id, new_status) -> Booking:
    """Move a booking forward: confirm, check in or check out."""
    if new_status == Booking.BookingStatus.CANCELLED:
        return cancel_booking(booking_id)

    with transaction.atomic():
        booking = _lock_booking(booking_id)

        if not booking.can_transition_to(new_status):
            raise ValidationError(
                {"status": f"Cannot move booking from {booking.status} to {new_status}."}
            )

        booking.status = new_status
        update_fields = ["status", "updated_at"]
        if new_status == Booking.BookingStatus.CHECKED_IN:
            booking.check_in_time = timezone.now()
            update_fields.append("check_in_time")
        elif new_status == Booking.BookingStatus.CHECKED_OUT:
            booking.check_out_time = timezone.now()
            update_fields.append("check_out_time")
        booking.save(update_fields=update_fields)

    logger.info(f"Booking {booking.res_id} is now {new_status}")
    return booking


def delete_booking(booking_id) -> None:
    """Remove a booking and its payments for good. Administrative cleanup only."""
    with transaction.atomic():
        booking = _lock_booking(booking_id)
        res_id = booking.res_id
        Payment.objects.filter(booking=booking).delete()
        booking.delete()

    logger.info(f"Deleted booking {res_id} and its payments")
