from rest_framework import serializers

from booking.models import Booking
from guest.serializers import GuestDataSerializer, GuestSerializer
from payment.serializers import PaymentDataSerializer, PaymentSerializer
from room.models import RoomType
from room.serializers import RoomTypeSerializer


class BookingReadSerializer(serializers.ModelSerializer):
    hotel_name = serializers.CharField(source="hotel.name", read_only=True)
    room = RoomTypeSerializer(read_only=True)
    guest = GuestSerializer(read_only=True)
    payments = PaymentSerializer(many=True, read_only=True)
    created_by_email = serializers.EmailField(
        source="created_by.email", read_only=True, default=None
    )

    class Meta:
        model = Booking
        fields = (
            "id",
            "res_id",
            "hotel",
            "hotel_name",
            "room",
            "guest",
            "number_of_rooms",
            "check_in_date",
            "check_out_date",
            "number_of_nights",
            "room_rate",
            "alternative_rate",
            "use_alternative_rate",
            "total_amount",
            "rate_code",
            "status",
            "assigned_room_no",
            "check_in_time",
            "check_out_time",
            "special_requests",
            "notes",
            "payments",
            "created_by",
            "created_by_email",
            "created_at",
            "updated_at",
        )


class BookingCreateSerializer(serializers.Serializer):
    """
    Input of a new booking. Availability, rates and the payment split are
    resolved by the booking service, not here.
    """

    hotel = serializers.IntegerField()
    room = serializers.IntegerField()
    guest_data = GuestDataSerializer()
    check_in_date = serializers.DateField()
    check_out_date = serializers.DateField()
    number_of_rooms = serializers.IntegerField(min_value=1, default=1)
    use_alternative_rate = serializers.BooleanField(default=False)
    alternative_rate = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    rate_code = serializers.CharField(max_length=30, required=False)
    status = serializers.ChoiceField(
        choices=(Booking.BookingStatus.PENDING, Booking.BookingStatus.CONFIRMED),
        required=False,
    )
    assigned_room_no = serializers.CharField(max_length=20, required=False, allow_blank=True)
    special_requests = serializers.ListField(
        child=serializers.CharField(), required=False
    )
    notes = serializers.CharField(required=False, allow_blank=True)
    payment_data = PaymentDataSerializer()

    def validate(self, attrs):
        check_in = attrs.get("check_in_date")
        check_out = attrs.get("check_out_date")

        if check_in and check_out and check_out <= check_in:
            raise serializers.ValidationError(
                {"check_out_date": "Check-out date must be after check-in date."}
            )

        return attrs


class BookingUpdateSerializer(serializers.Serializer):
    """Partial update; only the supplied keys reach the booking service."""

    guest_data = GuestDataSerializer(required=False)
    check_in_date = serializers.DateField(required=False)
    check_out_date = serializers.DateField(required=False)
    number_of_rooms = serializers.IntegerField(min_value=1, required=False)
    use_alternative_rate = serializers.BooleanField(required=False)
    alternative_rate = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    rate_code = serializers.CharField(max_length=30, required=False)
    assigned_room_no = serializers.CharField(max_length=20, required=False, allow_blank=True)
    check_in_time = serializers.DateTimeField(required=False, allow_null=True)
    check_out_time = serializers.DateTimeField(required=False, allow_null=True)
    special_requests = serializers.ListField(
        child=serializers.CharField(), required=False
    )
    notes = serializers.CharField(required=False, allow_blank=True)
    payment_data = PaymentDataSerializer(required=False)

    def validate(self, attrs):
        check_in = attrs.get("check_in_date")
        check_out = attrs.get("check_out_date")

        if check_in and check_out and check_out <= check_in:
            raise serializers.ValidationError(
                {"check_out_date": "Check-out date must be after check-in date."}
            )

        return attrs


class AvailabilityQuerySerializer(serializers.Serializer):
    hotel = serializers.IntegerField()
    check_in_date = serializers.DateField()
    check_out_date = serializers.DateField()
    number_of_rooms = serializers.IntegerField(min_value=1, default=1)
    available_only = serializers.BooleanField(default=False)
    room = serializers.IntegerField(required=False)
    board_type = serializers.ChoiceField(choices=RoomType.BoardType, required=False)
    capacity = serializers.IntegerField(min_value=1, required=False)

    def to_internal_value(self, data):
        if hasattr(data, "get") and data.get("board_type"):
            data = {key: data.get(key) for key in data}
            data["board_type"] = str(data["board_type"]).upper()
        return super().to_internal_value(data)

    def validate(self, attrs):
        if attrs["check_out_date"] <= attrs["check_in_date"]:
            raise serializers.ValidationError(
                {"check_out_date": "Check-out date must be after check-in date."}
            )
        return attrs


class DateRangeSerializer(serializers.Serializer):
    check_in_date = serializers.DateField()
    check_out_date = serializers.DateField()
    number_of_rooms = serializers.IntegerField(min_value=1, default=1)

    def validate(self, attrs):
        if attrs["check_out_date"] <= attrs["check_in_date"]:
            raise serializers.ValidationError(
                {"check_out_date": "Check-out date must be after check-in date."}
            )
        return attrs


class BulkAvailabilitySerializer(serializers.Serializer):
    hotel = serializers.IntegerField()
    date_ranges = DateRangeSerializer(many=True, allow_empty=False)
    room = serializers.IntegerField(required=False)
    board_type = serializers.ChoiceField(choices=RoomType.BoardType, required=False)
    capacity = serializers.IntegerField(min_value=1, required=False)


class RoomAvailabilitySerializer(serializers.Serializer):
    room = RoomTypeSerializer(source="room_type")
    is_available = serializers.BooleanField()
    total_available = serializers.IntegerField()
    requested_rooms = serializers.IntegerField()
    booked_rooms = serializers.IntegerField()
    is_within_availability_period = serializers.BooleanField()


class AvailabilitySummarySerializer(serializers.Serializer):
    total_rooms = serializers.IntegerField()
    available_rooms = serializers.IntegerField()
    unavailable_rooms = serializers.IntegerField()


class AvailabilityResponseSerializer(serializers.Serializer):
    check_in_date = serializers.DateField()
    check_out_date = serializers.DateField()
    number_of_rooms = serializers.IntegerField()
    results = RoomAvailabilitySerializer(many=True)
    summary = AvailabilitySummarySerializer()
