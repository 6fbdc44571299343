from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

from django.db import connection
from django.test import TransactionTestCase

from booking.exceptions import RoomUnavailable
from booking.models import Booking
from booking.services import booking_service
from booking.tests.helpers import booking_data, sample_hotel, sample_room_type


class ConcurrentAdmissionTests(TransactionTestCase):
    """Concurrent creates for the last room of a type."""

    def setUp(self):
        self.room_type = sample_room_type(sample_hotel(), quantity=1)

    def test_only_one_booking_wins_the_last_room(self):
        workers = 4
        barrier = Barrier(workers)

        def attempt(index):
            barrier.wait()
            try:
                data = booking_data(self.room_type)
                data["guest_data"] = {"full_name": f"Guest {index}"}
                booking_service.create_booking(data)
                return "created"
            except RoomUnavailable:
                return "unavailable"
            except Exception as exc:
                return f"{type(exc).__name__}: {exc}"
            finally:
                connection.close()

        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(attempt, range(workers)))

        self.assertEqual(sorted(outcomes), ["created"] + ["unavailable"] * (workers - 1))
        self.assertEqual(
            Booking.objects.filter(room=self.room_type).count(), 1
        )
