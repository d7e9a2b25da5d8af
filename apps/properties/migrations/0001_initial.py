import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Property",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("location", models.CharField(max_length=255)),
                (
                    "price",
                    models.PositiveIntegerField(
                        help_text="Nightly base price in whole dollars.",
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                ("images", models.JSONField(default=list)),
                ("bedrooms", models.PositiveSmallIntegerField(default=0)),
                ("bathrooms", models.PositiveSmallIntegerField(default=0)),
                (
                    "guests",
                    models.PositiveSmallIntegerField(
                        help_text="Maximum number of guests.",
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                ("amenities", models.JSONField(blank=True, default=list)),
                (
                    "rating",
                    models.FloatField(
                        default=0,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(5),
                        ],
                    ),
                ),
                ("reviews", models.PositiveIntegerField(default=0)),
                ("host_name", models.CharField(max_length=255)),
                ("host_avatar", models.CharField(max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Property",
                "verbose_name_plural": "Properties",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="PropertyAvailability",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.CharField(max_length=10)),
                ("is_available", models.BooleanField(default=True)),
                (
                    "price",
                    models.PositiveIntegerField(
                        blank=True,
                        help_text="Price override for this date; empty means the base price.",
                        null=True,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "property",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="availability",
                        to="properties.property",
                    ),
                ),
            ],
            options={
                "verbose_name": "Availability record",
                "verbose_name_plural": "Availability records",
                "ordering": ["property_id", "date"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("property", "date"),
                        name="unique_availability_per_property_date",
                    )
                ],
            },
        ),
    ]
