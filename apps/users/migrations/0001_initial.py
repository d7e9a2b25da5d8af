from django.db import migrations, models

import django.core.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("name", models.CharField(max_length=255)),
                ("avatar", models.URLField(blank=True, max_length=500)),
                (
                    "phone",
                    models.CharField(
                        blank=True,
                        max_length=20,
                        validators=[
                            django.core.validators.RegexValidator(
                                message="Invalid phone format. Use the international format without spaces.",
                                regex="^\\+?\\d{7,15}$",
                            )
                        ],
                    ),
                ),
                ("bio", models.TextField(blank=True)),
                (
                    "user_type",
                    models.CharField(
                        choices=[("guest", "Guest"), ("host", "Host"), ("both", "Guest and host")],
                        default="guest",
                        max_length=10,
                    ),
                ),
                ("is_verified", models.BooleanField(default=False)),
                ("joined_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Marketplace user",
                "verbose_name_plural": "Marketplace users",
                "ordering": ["id"],
                "indexes": [models.Index(fields=["user_type"], name="users_user_type_idx")],
            },
        ),
    ]
