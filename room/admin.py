from django.contrib import admin

from room.models import Hotel, RoomType


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "code", "is_active")
    search_fields = ("name", "code")


@admin.register(RoomType)
class RoomTypeAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "hotel",
        "name",
        "board_type",
        "quantity",
        "base_price",
        "alternative_price",
        "is_active",
    )
    search_fields = ("name", "hotel__name")
    list_filter = ("hotel", "board_type", "is_active")
