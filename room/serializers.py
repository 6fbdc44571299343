from rest_framework import serializers

from room.models import Hotel, RoomType


class HotelSerializer(serializers.ModelSerializer):
    class Meta:
        model = Hotel
        fields = ("id", "name", "code", "address")


class RoomTypeSerializer(serializers.ModelSerializer):
    hotel_name = serializers.CharField(source="hotel.name", read_only=True)

    class Meta:
        model = RoomType
        fields = (
            "id",
            "hotel",
            "hotel_name",
            "name",
            "description",
            "board_type",
            "capacity",
            "quantity",
            "base_price",
            "alternative_price",
            "available_from",
            "available_to",
            "is_active",
        )


class RoomCalendarSerializer(serializers.Serializer):
    date = serializers.DateField()
    available_rooms = serializers.IntegerField()
    available = serializers.BooleanField()
