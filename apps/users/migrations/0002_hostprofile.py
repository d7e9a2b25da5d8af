from django.db import migrations, models

import django.core.validators
import django.db.models.deletion


class Migration(migrations.Migration):

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="HostProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("languages", models.JSONField(blank=True, default=list)),
                (
                    "response_time",
                    models.CharField(
                        choices=[
                            ("within an hour", "Within an hour"),
                            ("within a few hours", "Within a few hours"),
                            ("within a day", "Within a day"),
                            ("a few days or more", "A few days or more"),
                        ],
                        max_length=32,
                    ),
                ),
                (
                    "response_rate",
                    models.PositiveSmallIntegerField(validators=[django.core.validators.MaxValueValidator(100)]),
                ),
                ("superhost_status", models.BooleanField(default=False)),
                ("property_count", models.PositiveIntegerField(default=0)),
                ("total_reviews", models.PositiveIntegerField(default=0)),
                (
                    "average_rating",
                    models.FloatField(
                        default=0,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(5),
                        ],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="host_profile",
                        to="users.user",
                    ),
                ),
            ],
            options={
                "verbose_name": "Host profile",
                "verbose_name_plural": "Host profiles",
                "ordering": ["id"],
            },
        ),
    ]
