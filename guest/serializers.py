from rest_framework import serializers

from guest.models import Guest


class GuestSerializer(serializers.ModelSerializer):
    class Meta:
        model = Guest
        fields = (
            "id",
            "profile_id",
            "first_name",
            "last_name",
            "full_name",
            "email",
            "phone",
            "telephone",
            "nationality",
            "passport_number",
            "date_of_birth",
            "gender",
            "address",
            "city",
            "country",
            "company",
            "guest_classification",
            "travel_agent",
            "source",
            "group",
            "is_vip",
            "notes",
        )


class GuestDataSerializer(GuestSerializer):
    """Guest block of a booking request; `id` selects an existing profile."""

    id = serializers.IntegerField(required=False)
    profile_id = serializers.CharField(max_length=40, required=False)

    def to_internal_value(self, data):
        if hasattr(data, "get") and "gender" in data and data["gender"]:
            data = {**data, "gender": str(data["gender"]).upper()}
        return super().to_internal_value(data)
