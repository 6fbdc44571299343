from django.db.models import Prefetch
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiTypes,
    extend_schema,
)
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.authentication import JWTAuthentication

from booking.filters import BookingFilter
from booking.models import Booking
from booking.pagination import BookingPagination
from booking.serializers import (
    AvailabilityQuerySerializer,
    AvailabilityResponseSerializer,
    BookingCreateSerializer,
    BookingReadSerializer,
    BookingUpdateSerializer,
    BulkAvailabilitySerializer,
)
from booking.services import booking_service
from payment.models import Payment
from room.models import Hotel
from room.services.availability import check_availability, summarize


def _get_hotel(hotel_id) -> Hotel:
    try:
        return Hotel.objects.get(pk=hotel_id)
    except Hotel.DoesNotExist:
        raise NotFound(f"Hotel {hotel_id} not found.")


def _availability_payload(hotel, check_in, check_out, number_of_rooms,
                          available_only=False, **filters) -> dict:
    results = check_availability(
        hotel,
        check_in,
        check_out,
        number_of_rooms,
        room_type_id=filters.get("room"),
        board_type=filters.get("board_type"),
        capacity=filters.get("capacity"),
    )
    summary = summarize(results)
    if available_only:
        results = [result for result in results if result["is_available"]]

    return {
        "check_in_date": check_in,
        "check_out_date": check_out,
        "number_of_rooms": number_of_rooms,
        "results": results,
        "summary": summary,
    }


class BookingViewSet(viewsets.ModelViewSet):
    serializer_class = BookingReadSerializer
    authentication_classes = (JWTAuthentication,)
    permission_classes = [IsAuthenticated]
    filterset_class = BookingFilter
    pagination_class = BookingPagination
    http_method_names = ["get", "post", "put", "patch", "delete", "head", "options"]

    def get_queryset(self):
        return Booking.objects.select_related(
            "hotel", "room", "room__hotel", "guest", "created_by"
        ).prefetch_related(
            Prefetch("payments", queryset=Payment.objects.order_by("-created_at", "-id"))
        )

    def get_permissions(self):
        if self.action == "destroy":
            return [IsAuthenticated(), IsAdminUser()]
        return super().get_permissions()

    def get_serializer_class(self):
        if self.action == "create":
            return BookingCreateSerializer
        if self.action in ("update", "partial_update"):
            return BookingUpdateSerializer
        if self.action == "availability":
            return AvailabilityQuerySerializer
        if self.action == "bulk_availability":
            return BulkAvailabilitySerializer
        return BookingReadSerializer

    def _read(self, booking_id, status_code=status.HTTP_200_OK):
        booking = self.get_queryset().get(pk=booking_id)
        return Response(BookingReadSerializer(booking).data, status=status_code)

    @extend_schema(
        summary="List bookings",
        parameters=[
            OpenApiParameter(
                name="status",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Booking status (PENDING, CONFIRMED, CHECKED_IN, CHECKED_OUT, CANCELLED)",
                required=False,
            ),
            OpenApiParameter(
                name="hotel",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                description="Filter by hotel ID",
                required=False,
            ),
            OpenApiParameter(
                name="room",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                description="Filter by room type ID",
                required=False,
            ),
            OpenApiParameter(
                name="from_date",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="Bookings checking in on or after this date",
                required=False,
            ),
            OpenApiParameter(
                name="to_date",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="Bookings checking out on or before this date",
                required=False,
            ),
            OpenApiParameter(
                name="search",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Reservation id, guest name, email or phone, hotel or room name",
                required=False,
            ),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=BookingCreateSerializer, responses={201: BookingReadSerializer})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = booking_service.create_booking(
            serializer.validated_data, user=request.user
        )
        return self._read(booking.pk, status.HTTP_201_CREATED)

    @extend_schema(request=BookingUpdateSerializer, responses={200: BookingReadSerializer})
    def update(self, request, *args, **kwargs):
        booking = self.get_object()
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        booking = booking_service.update_booking(booking.pk, serializer.validated_data)
        return self._read(booking.pk)

    @extend_schema(request=BookingUpdateSerializer, responses={200: BookingReadSerializer})
    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        booking = self.get_object()
        booking_service.delete_booking(booking.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: BookingReadSerializer})
    @action(detail=True, methods=["post"], url_path="cancel")
    def cancel(self, request, pk=None):
        booking = self.get_object()
        booking_service.cancel_booking(booking.pk)
        return self._read(booking.pk)

    @extend_schema(request=None, responses={200: BookingReadSerializer})
    @action(detail=True, methods=["post"], url_path="confirm")
    def confirm(self, request, pk=None):
        booking = self.get_object()
        booking_service.change_status(booking.pk, Booking.BookingStatus.CONFIRMED)
        return self._read(booking.pk)

    @extend_schema(request=None, responses={200: BookingReadSerializer})
    @action(detail=True, methods=["post"], url_path="check-in")
    def check_in(self, request, pk=None):
        booking = self.get_object()
        booking_service.change_status(booking.pk, Booking.BookingStatus.CHECKED_IN)
        return self._read(booking.pk)

    @extend_schema(request=None, responses={200: BookingReadSerializer})
    @action(detail=True, methods=["post"], url_path="check-out")
    def check_out(self, request, pk=None):
        booking = self.get_object()
        booking_service.change_status(booking.pk, Booking.BookingStatus.CHECKED_OUT)
        return self._read(booking.pk)

    @extend_schema(
        parameters=[AvailabilityQuerySerializer],
        responses={200: AvailabilityResponseSerializer},
        description=(
            "Free rooms per room type of a hotel for a stay.\n\n"
            "A room type is available when it has at least `number_of_rooms` "
            "rooms not held by non-cancelled bookings overlapping the stay, "
            "and the stay falls inside its availability period."
        ),
    )
    @action(detail=False, methods=["get"], url_path="availability", filter_backends=[])
    def availability(self, request):
        query = self.get_serializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = dict(query.validated_data)

        hotel = _get_hotel(params.pop("hotel"))
        payload = _availability_payload(
            hotel,
            params.pop("check_in_date"),
            params.pop("check_out_date"),
            params.pop("number_of_rooms"),
            **params,
        )
        return Response(AvailabilityResponseSerializer(payload).data)

    @extend_schema(
        request=BulkAvailabilitySerializer,
        responses={200: AvailabilityResponseSerializer(many=True)},
    )
    @action(detail=False, methods=["post"], url_path="availability/bulk", filter_backends=[])
    def bulk_availability(self, request):
        query = self.get_serializer(data=request.data)
        query.is_valid(raise_exception=True)
        params = dict(query.validated_data)

        hotel = _get_hotel(params.pop("hotel"))
        date_ranges = params.pop("date_ranges")
        payloads = [
            _availability_payload(
                hotel,
                date_range["check_in_date"],
                date_range["check_out_date"],
                date_range["number_of_rooms"],
                **params,
            )
            for date_range in date_ranges
        ]
        return Response(AvailabilityResponseSerializer(payloads, many=True).data)
