from django.utils.dateparse import parse_date
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ReadOnlyModelViewSet

from room.models import RoomType
from room.serializers import RoomCalendarSerializer, RoomTypeSerializer
from room.services.availability import daily_availability


class RoomTypeViewSet(ReadOnlyModelViewSet):
    queryset = RoomType.objects.select_related("hotel").order_by("id")
    serializer_class = RoomTypeSerializer
    permission_classes = (IsAuthenticated,)

    filterset_fields = ("hotel", "board_type", "capacity", "is_active")

    def get_serializer_class(self):
        if self.action == "get_calendar":
            return RoomCalendarSerializer
        return RoomTypeSerializer

    @extend_schema(
        request=None,
        parameters=[
            OpenApiParameter(
                name="date_from",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="First date (YYYY-MM-DD)",
                required=True,
            ),
            OpenApiParameter(
                name="date_to",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="Last date, inclusive (YYYY-MM-DD)",
                required=True,
            ),
        ],
        responses={
            200: RoomCalendarSerializer(many=True),
            400: {
                "description": "Bad Request",
                "examples": [
                    {"detail": "date_from and date_to are required"},
                    {"detail": "date_from must be before date_to"},
                ],
            },
        },
        description=(
                "Free rooms of this room type for each date in the range.\n\n"
                "Every booking that is not cancelled holds its rooms for each "
                "night from check-in up to (not including) check-out."
        ),
    )
    @action(methods=["GET"], detail=True, url_path="calendar", filter_backends=[])
    def get_calendar(self, request, pk=None):
        room_type = self.get_object()

        date_from_str = request.query_params.get("date_from")
        date_to_str = request.query_params.get("date_to")

        if not date_from_str or not date_to_str:
            return Response(
                {"detail": "date_from and date_to are required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        date_from = parse_date(date_from_str)
        date_to = parse_date(date_to_str)

        if not date_from or not date_to:
            return Response(
                {"detail": "Invalid date format. Use YYYY-MM-DD."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        if date_from > date_to:
            return Response(
                {"detail": "date_from must be before date_to"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        calendar = daily_availability(room_type, date_from, date_to)
        serializer = RoomCalendarSerializer(calendar, many=True)
        return Response(serializer.data)
