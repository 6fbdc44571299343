from django.contrib import admin

from notifications.models import TelegramSubscriber


@admin.register(TelegramSubscriber)
class TelegramSubscriberAdmin(admin.ModelAdmin):
    list_display = ("chat_id", "label", "is_active", "created_at")
    list_filter = ("is_active",)
