from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("payment", "0001_initial"),
    ]

    operations = [
        migrations.AddConstraint(
            model_name="payment",
            constraint=models.CheckConstraint(
                condition=(
                    models.Q(status="COMPLETED", remaining_amount=0)
                    | models.Q(
                        status="PARTIALLY_PAID",
                        remaining_amount__gt=0,
                        remaining_due_date__isnull=False,
                    )
                ),
                name="payment_status_matches_remaining",
            ),
        ),
    ]
