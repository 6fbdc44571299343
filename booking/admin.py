from django.contrib import admin

from booking.models import Booking
from payment.models import Payment


class PaymentInline(admin.TabularInline):
    model = Payment
    extra = 0
    readonly_fields = (
        "method",
        "total_amount",
        "paid_amount",
        "remaining_amount",
        "payment_date",
        "remaining_due_date",
        "status",
    )
    can_delete = False


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "res_id",
        "hotel",
        "room",
        "guest",
        "number_of_rooms",
        "check_in_date",
        "check_out_date",
        "status",
        "total_amount",
    )

    list_filter = (
        "status",
        "hotel",
        "check_in_date",
        "check_out_date",
    )

    search_fields = (
        "res_id",
        "guest__full_name",
        "guest__email",
        "room__name",
    )

    ordering = ("-check_in_date",)
    inlines = (PaymentInline,)
