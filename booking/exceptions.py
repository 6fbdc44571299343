from rest_framework import status
from rest_framework.exceptions import APIException


class RoomUnavailable(APIException):
    """
    Thrown when the requested rooms are not free at commit time.
    The caller may retry with another room type or other dates.
    """

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Room is not available for selected dates."
    default_code = "room_unavailable"
