import django_filters
from django.db.models import Q

from booking.models import Booking


class BookingFilter(django_filters.FilterSet):
    from_date = django_filters.DateFilter(
        field_name="check_in_date", lookup_expr="gte"
    )
    to_date = django_filters.DateFilter(
        field_name="check_out_date", lookup_expr="lte"
    )
    status = django_filters.CharFilter(method="filter_status")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Booking
        fields = ["hotel", "room", "status"]

    def filter_status(self, queryset, name, value):
        return queryset.filter(status=value.upper())

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(res_id__icontains=value)
            | Q(guest__full_name__icontains=value)
            | Q(guest__first_name__icontains=value)
            | Q(guest__last_name__icontains=value)
            | Q(guest__email__icontains=value)
            | Q(guest__phone__icontains=value)
            | Q(hotel__name__icontains=value)
            | Q(room__name__icontains=value)
        )
