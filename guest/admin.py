from django.contrib import admin

from guest.models import Guest


@admin.register(Guest)
class GuestAdmin(admin.ModelAdmin):
    list_display = ("id", "profile_id", "full_name", "email", "phone", "is_vip")
    search_fields = ("profile_id", "full_name", "email", "phone")
    list_filter = ("is_vip", "guest_classification")
