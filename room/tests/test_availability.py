from datetime import date
from decimal import Decimal

from django.test import TestCase
from rest_framework.exceptions import ValidationError

from booking.models import Booking
from booking.services import booking_service
from booking.tests.helpers import sample_booking, sample_hotel, sample_room_type
from room.models import RoomType
from room.services.availability import (
    booked_rooms,
    check_availability,
    daily_availability,
    room_type_availability,
    summarize,
)

SEPT_5 = date(2025, 9, 5)
SEPT_6 = date(2025, 9, 6)
SEPT_7 = date(2025, 9, 7)
SEPT_8 = date(2025, 9, 8)


class RoomTypeAvailabilityTests(TestCase):
    def setUp(self):
        self.hotel = sample_hotel()
        self.room_type = sample_room_type(self.hotel, quantity=5)

    def test_empty_room_type_is_fully_available(self):
        result = room_type_availability(self.room_type, SEPT_5, SEPT_8, 3)

        self.assertTrue(result["is_available"])
        self.assertEqual(result["total_available"], 5)
        self.assertEqual(result["booked_rooms"], 0)
        self.assertTrue(result["is_within_availability_period"])

    def test_overlapping_request_after_booking(self):
        booking = sample_booking(self.room_type, number_of_rooms=3)
        self.assertEqual(booking.total_amount, Decimal("900.00"))

        result = room_type_availability(self.room_type, SEPT_6, SEPT_7, 3)

        self.assertFalse(result["is_available"])
        self.assertEqual(result["total_available"], 2)
        self.assertEqual(result["booked_rooms"], 3)

    def test_back_to_back_stays_do_not_overlap(self):
        sample_booking(self.room_type, number_of_rooms=5,
                       check_in=SEPT_5, check_out=SEPT_7)

        result = room_type_availability(self.room_type, SEPT_7, SEPT_8, 5)

        self.assertTrue(result["is_available"])
        self.assertEqual(result["total_available"], 5)

    def test_cancelled_bookings_release_inventory(self):
        booking = sample_booking(self.room_type, number_of_rooms=5)
        booking_service.cancel_booking(booking.id)

        self.assertEqual(booked_rooms(self.room_type, SEPT_5, SEPT_8), 0)

    def test_checked_out_bookings_still_count(self):
        booking = sample_booking(self.room_type, number_of_rooms=2)
        Booking.objects.filter(pk=booking.pk).update(
            status=Booking.BookingStatus.CHECKED_OUT
        )

        self.assertEqual(booked_rooms(self.room_type, SEPT_5, SEPT_8), 2)

    def test_exclude_booking_id(self):
        booking = sample_booking(self.room_type, number_of_rooms=4)

        self.assertEqual(
            booked_rooms(self.room_type, SEPT_5, SEPT_8, exclude_booking_id=booking.id),
            0,
        )

    def test_zero_quantity_is_never_available(self):
        room_type = sample_room_type(self.hotel, name="Closed", quantity=0)

        result = room_type_availability(room_type, SEPT_5, SEPT_8, 1)

        self.assertFalse(result["is_available"])
        self.assertEqual(result["total_available"], 0)

    def test_outside_availability_period(self):
        room_type = sample_room_type(
            self.hotel,
            name="Seasonal",
            available_from=date(2025, 6, 1),
            available_to=date(2025, 9, 7),
        )

        result = room_type_availability(room_type, SEPT_5, SEPT_8, 1)

        self.assertFalse(result["is_available"])
        self.assertFalse(result["is_within_availability_period"])
        self.assertEqual(result["total_available"], 5)

    def test_check_out_on_last_day_of_period(self):
        room_type = sample_room_type(
            self.hotel,
            name="Seasonal",
            available_from=SEPT_5,
            available_to=SEPT_8,
        )

        result = room_type_availability(room_type, SEPT_5, SEPT_8, 1)

        self.assertTrue(result["is_available"])

    def test_invalid_dates_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            room_type_availability(self.room_type, SEPT_8, SEPT_5, 1)

        self.assertIn("check_out_date", ctx.exception.detail)

    def test_non_positive_room_count_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            room_type_availability(self.room_type, SEPT_5, SEPT_8, 0)

        self.assertIn("number_of_rooms", ctx.exception.detail)


class HotelAvailabilityTests(TestCase):
    def setUp(self):
        self.hotel = sample_hotel()
        self.double = sample_room_type(self.hotel, name="Double", quantity=2)
        self.suite = sample_room_type(
            self.hotel,
            name="Suite",
            capacity=4,
            quantity=1,
            board_type=RoomType.BoardType.HALF_BOARD,
            base_price=Decimal("250.00"),
        )
        sample_room_type(self.hotel, name="Retired", is_active=False)
        sample_room_type(sample_hotel(name="Other", code="OTH"), name="Elsewhere")

    def test_only_active_room_types_of_hotel(self):
        results = check_availability(self.hotel, SEPT_5, SEPT_8, 1)

        self.assertEqual(
            [result["room_type"].id for result in results],
            [self.double.id, self.suite.id],
        )

    def test_committed_rooms_per_type(self):
        sample_booking(self.suite)
        sample_booking(self.double, check_in=SEPT_7, check_out=date(2025, 9, 10))

        results = {
            result["room_type"].id: result
            for result in check_availability(self.hotel, SEPT_5, SEPT_8, 1)
        }

        self.assertFalse(results[self.suite.id]["is_available"])
        self.assertEqual(results[self.suite.id]["total_available"], 0)
        self.assertTrue(results[self.double.id]["is_available"])
        self.assertEqual(results[self.double.id]["booked_rooms"], 1)

    def test_filters(self):
        by_board = check_availability(self.hotel, SEPT_5, SEPT_8, 1,
                                      board_type="half_board")
        by_capacity = check_availability(self.hotel, SEPT_5, SEPT_8, 1, capacity=3)
        by_id = check_availability(self.hotel, SEPT_5, SEPT_8, 1,
                                   room_type_id=self.double.id)

        self.assertEqual([r["room_type"] for r in by_board], [self.suite])
        self.assertEqual([r["room_type"] for r in by_capacity], [self.suite])
        self.assertEqual([r["room_type"] for r in by_id], [self.double])

    def test_summary(self):
        sample_booking(self.suite)

        summary = summarize(check_availability(self.hotel, SEPT_5, SEPT_8, 1))

        self.assertEqual(
            summary,
            {"total_rooms": 2, "available_rooms": 1, "unavailable_rooms": 1},
        )


class DailyAvailabilityTests(TestCase):
    def setUp(self):
        self.room_type = sample_room_type(sample_hotel(), quantity=3)

    def test_calendar_counts_each_night(self):
        sample_booking(self.room_type, number_of_rooms=2, check_in=SEPT_5, check_out=SEPT_7)
        sample_booking(self.room_type, number_of_rooms=1, check_in=SEPT_6, check_out=SEPT_8)

        calendar = daily_availability(self.room_type, SEPT_5, SEPT_8)

        self.assertEqual(
            [(day["date"], day["available_rooms"]) for day in calendar],
            [(SEPT_5, 1), (SEPT_6, 0), (SEPT_7, 2), (SEPT_8, 3)],
        )
        self.assertFalse(calendar[1]["available"])
