import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Session",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("ADULT", "Adult"),
                            ("YOUTH", "Youth"),
                            ("COACH", "Coach"),
                            ("FACILITY", "Facility"),
                            ("EVENT", "Event"),
                            ("NEWS", "News"),
                        ],
                        max_length=16,
                    ),
                ),
                ("instructor", models.CharField(blank=True, max_length=255)),
                ("start_time", models.DateTimeField()),
                ("end_time", models.DateTimeField()),
                ("description", models.TextField(blank=True)),
                ("image_url", models.URLField(blank=True, max_length=500, null=True)),
            ],
            options={
                "db_table": "sessions",
                "ordering": ["start_time", "id"],
                "indexes": [
                    models.Index(fields=["end_time"], name="sessions_end_time_idx"),
                    models.Index(fields=["category", "start_time"], name="sessions_category_start_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("start_time__lt", models.F("end_time"))),
                        name="session_starts_before_end",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Registration",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.CharField(max_length=64)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "session",
                    models.ForeignKey(
                        db_constraint=False,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="registrations",
                        to="bookings.session",
                    ),
                ),
            ],
            options={
                "db_table": "registrations",
                "constraints": [
                    models.UniqueConstraint(
                        fields=("user_id", "session"),
                        name="unique_registration_per_user_session",
                    ),
                ],
            },
        ),
    ]
