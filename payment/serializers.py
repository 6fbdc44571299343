from rest_framework import serializers

from payment.models import Payment


class PaymentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Payment
        fields = (
            "id",
            "booking",
            "method",
            "total_amount",
            "paid_amount",
            "remaining_amount",
            "payment_date",
            "remaining_due_date",
            "status",
            "created_at",
        )
        read_only_fields = fields


class PaymentDataSerializer(serializers.Serializer):
    """
    Payment block of a booking request. The method is checked by the
    payment splitter so that unknown methods list the valid ones.
    """

    method = serializers.CharField(max_length=20)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2,
                                      min_value=0, required=False)
    paid_amount = serializers.DecimalField(max_digits=12, decimal_places=2,
                                           min_value=0, required=False)
    payment_date = serializers.DateField(required=False)
    remaining_due_date = serializers.DateField(required=False, allow_null=True)
