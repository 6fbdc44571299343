from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from booking.models import Booking
from booking.tests.helpers import sample_booking, sample_hotel, sample_room_type


class BookingFlowsTests(APITestCase):
    def setUp(self):
        self.user = get_user_model().objects.create_user(
            email="test@test.com",
            password="testpass123",
        )
        self.client.force_authenticate(self.user)

        self.room_type = sample_room_type(sample_hotel(), quantity=2)

    def create_booking(self, booking_status=Booking.BookingStatus.PENDING):
        booking = sample_booking(self.room_type)
        if booking_status != booking.status:
            Booking.objects.filter(pk=booking.pk).update(status=booking_status)
            booking.refresh_from_db()
        return booking

    def post_action(self, name, booking):
        url = reverse(f"booking:booking-{name}", args=[booking.id])
        return self.client.post(url)

    def test_cancel_booking_ok(self):
        booking = self.create_booking()

        response = self.post_action("cancel", booking)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        booking.refresh_from_db()
        self.assertEqual(booking.status, Booking.BookingStatus.CANCELLED)

    def test_cancel_twice_ok(self):
        booking = self.create_booking(Booking.BookingStatus.CANCELLED)

        response = self.post_action("cancel", booking)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], Booking.BookingStatus.CANCELLED)

    def test_cancel_checked_out_booking(self):
        booking = self.create_booking(Booking.BookingStatus.CHECKED_OUT)

        response = self.post_action("cancel", booking)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("status", response.data)

    def test_confirm_ok(self):
        booking = self.create_booking()

        response = self.post_action("confirm", booking)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], Booking.BookingStatus.CONFIRMED)

    def test_check_in_ok(self):
        booking = self.create_booking(Booking.BookingStatus.CONFIRMED)

        response = self.post_action("check-in", booking)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        booking.refresh_from_db()
        self.assertEqual(booking.status, Booking.BookingStatus.CHECKED_IN)
        self.assertIsNotNone(booking.check_in_time)

    def test_check_in_pending_booking(self):
        booking = self.create_booking()

        response = self.post_action("check-in", booking)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_check_out_ok(self):
        booking = self.create_booking(Booking.BookingStatus.CHECKED_IN)

        response = self.post_action("check-out", booking)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        booking.refresh_from_db()
        self.assertEqual(booking.status, Booking.BookingStatus.CHECKED_OUT)
        self.assertIsNotNone(booking.check_out_time)

    def test_cancelled_booking_frees_the_room(self):
        first = self.create_booking()
        self.create_booking()

        response = self.client.post(
            reverse("booking:booking-list"),
            {
                "hotel": self.room_type.hotel_id,
                "room": self.room_type.id,
                "guest_data": {"full_name": "Late Comer"},
                "check_in_date": "2025-09-05",
                "check_out_date": "2025-09-08",
                "payment_data": {"method": "CASH"},
            },
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

        self.post_action("cancel", first)
        response = self.client.post(
            reverse("booking:booking-list"),
            {
                "hotel": self.room_type.hotel_id,
                "room": self.room_type.id,
                "guest_data": {"full_name": "Late Comer"},
                "check_in_date": "2025-09-05",
                "check_out_date": "2025-09-08",
                "payment_data": {"method": "CASH"},
            },
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["guest"]["first_name"], "Late")
