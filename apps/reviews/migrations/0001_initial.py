import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


def rating_validators():
    return [
        django.core.validators.MinValueValidator(1),
        django.core.validators.MaxValueValidator(5),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("bookings", "0001_initial"),
        ("properties", "0001_initial"),
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Review",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("rating", models.FloatField(validators=rating_validators())),
                ("cleanliness", models.PositiveSmallIntegerField(validators=rating_validators())),
                ("accuracy", models.PositiveSmallIntegerField(validators=rating_validators())),
                ("check_in", models.PositiveSmallIntegerField(validators=rating_validators())),
                ("communication", models.PositiveSmallIntegerField(validators=rating_validators())),
                ("location", models.PositiveSmallIntegerField(validators=rating_validators())),
                ("value", models.PositiveSmallIntegerField(validators=rating_validators())),
                ("comment", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "booking",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="review",
                        to="bookings.booking",
                    ),
                ),
                (
                    "property",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="guest_reviews",
                        to="properties.property",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="reviews",
                        to="users.user",
                    ),
                ),
            ],
            options={
                "verbose_name": "Review",
                "verbose_name_plural": "Reviews",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
