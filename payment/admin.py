from django.contrib import admin

from payment.models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "booking",
        "method",
        "total_amount",
        "paid_amount",
        "remaining_amount",
        "remaining_due_date",
        "status",
    )
    list_filter = ("method", "status")
    search_fields = ("booking__res_id",)
