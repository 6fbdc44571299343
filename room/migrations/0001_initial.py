import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Hotel",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("code", models.CharField(max_length=20, unique=True)),
                ("address", models.CharField(blank=True, max_length=255)),
                ("is_active", models.BooleanField(default=True)),
            ],
        ),
        migrations.CreateModel(
            name="RoomType",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                (
                    "board_type",
                    models.CharField(
                        choices=[
                            ("ROOM_ONLY", "Room Only"),
                            ("BED_BREAKFAST", "Bed Breakfast"),
                            ("HALF_BOARD", "Half Board"),
                            ("FULL_BOARD", "Full Board"),
                            ("ALL_INCLUSIVE", "All Inclusive"),
                        ],
                        default="ROOM_ONLY",
                        max_length=20,
                    ),
                ),
                ("capacity", models.PositiveIntegerField(default=1)),
                ("quantity", models.PositiveIntegerField()),
                (
                    "base_price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "alternative_price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=10,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("available_from", models.DateField(blank=True, null=True)),
                ("available_to", models.DateField(blank=True, null=True)),
                ("is_active", models.BooleanField(default=True)),
                (
                    "hotel",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="room_types",
                        to="room.hotel",
                    ),
                ),
            ],
            options={
                "ordering": ("hotel", "name"),
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("base_price__gte", 0)),
                        name="room_type_base_price_non_negative",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(
                                ("available_from__isnull", True),
                                ("available_to__isnull", True),
                            ),
                            models.Q(
                                ("available_from__isnull", False),
                                ("available_to__isnull", False),
                            ),
                            _connector="OR",
                        ),
                        name="room_type_window_both_or_neither",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            ("available_from__isnull", True),
                            ("available_to__gte", models.F("available_from")),
                            _connector="OR",
                        ),
                        name="room_type_window_ordered",
                    ),
                ],
            },
        ),
    ]
