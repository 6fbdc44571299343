from datetime import date
from decimal import Decimal

from booking.services import booking_service
from room.models import Hotel, RoomType


def sample_hotel(**params) -> Hotel:
    defaults = {"name": "Seaside", "code": "SEA"}
    defaults.update(params)
    return Hotel.objects.create(**defaults)


def sample_room_type(hotel: Hotel, **params) -> RoomType:
    defaults = {
        "name": "Double",
        "board_type": RoomType.BoardType.BED_BREAKFAST,
        "capacity": 2,
        "quantity": 5,
        "base_price": Decimal("100.00"),
    }
    defaults.update(params)
    return RoomType.objects.create(hotel=hotel, **defaults)


def booking_data(room_type: RoomType, check_in=date(2025, 9, 5),
                 check_out=date(2025, 9, 8), number_of_rooms=1, **params) -> dict:
    data = {
        "hotel": room_type.hotel_id,
        "room": room_type.id,
        "guest_data": {"first_name": "Ada", "last_name": "Lovelace",
                       "email": "ada@example.com"},
        "check_in_date": check_in,
        "check_out_date": check_out,
        "number_of_rooms": number_of_rooms,
        "payment_data": {"method": "CASH"},
    }
    data.update(params)
    return data


def sample_booking(room_type: RoomType, **params):
    return booking_service.create_booking(booking_data(room_type, **params))
