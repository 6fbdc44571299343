from datetime import date

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from booking.tests.helpers import sample_booking, sample_hotel, sample_room_type


class RoomTypeViewSetTest(APITestCase):
    def setUp(self):
        self.user = get_user_model().objects.create_user(
            email="desk@test.com", password="password123"
        )
        self.hotel = sample_hotel()
        self.room_type = sample_room_type(self.hotel, quantity=2)
        self.other_hotel = sample_hotel(name="Other", code="OTH")
        sample_room_type(self.other_hotel, name="Single")

        self.list_url = reverse("room:rooms-list")
        self.calendar_url = reverse("room:rooms-get-calendar", args=[self.room_type.id])

    def test_authentication_required(self):
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_filtered_by_hotel(self):
        self.client.force_authenticate(self.user)

        response = self.client.get(self.list_url, {"hotel": self.hotel.id})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["hotel_name"], "Seaside")

    def test_rooms_are_read_only(self):
        self.client.force_authenticate(self.user)

        response = self.client.post(self.list_url, {"name": "New"})

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)

    def test_calendar(self):
        self.client.force_authenticate(self.user)
        sample_booking(self.room_type, check_in=date(2025, 9, 5),
                       check_out=date(2025, 9, 6), number_of_rooms=2)

        response = self.client.get(
            self.calendar_url, {"date_from": "2025-09-05", "date_to": "2025-09-06"}
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [(day["date"], day["available_rooms"]) for day in response.data],
            [("2025-09-05", 0), ("2025-09-06", 2)],
        )

    def test_calendar_requires_dates(self):
        self.client.force_authenticate(self.user)

        response = self.client.get(self.calendar_url)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "date_from and date_to are required")

    def test_calendar_rejects_reversed_range(self):
        self.client.force_authenticate(self.user)

        response = self.client.get(
            self.calendar_url, {"date_from": "2025-09-06", "date_to": "2025-09-05"}
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
