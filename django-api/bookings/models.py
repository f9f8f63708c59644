"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models
from django.db.models import F, Q


class Session(models.Model):
    """Persistence model for catalog sessions."""

    class Category(models.TextChoices):
        ADULT = "ADULT"
        YOUTH = "YOUTH"
        COACH = "COACH"
        FACILITY = "FACILITY"
        EVENT = "EVENT"
        NEWS = "NEWS"

    title = models.CharField(max_length=255)
    category = models.CharField(max_length=16, choices=Category.choices)
    instructor = models.CharField(max_length=255, blank=True)
    start_time = models.DateTimeField()
    end_time = models.DateTimeField()
    description = models.TextField(blank=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)

    class Meta:
        db_table = "sessions"
        ordering = ["start_time", "id"]
        indexes = [
            models.Index(fields=["end_time"], name="sessions_end_time_idx"),
            models.Index(fields=["category", "start_time"], name="sessions_category_start_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(start_time__lt=F("end_time")),
                name="session_starts_before_end",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.title} - {self.start_time}"


class Registration(models.Model):
    """Persistence model for the (user, session) booking relation.

    No database foreign key: sessions are administered separately and a
    deleted session leaves its registrations behind as orphans.
    """

    user_id = models.CharField(max_length=64)
    session = models.ForeignKey(
        Session,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="registrations",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "registrations"
        constraints = [
            models.UniqueConstraint(
                fields=["user_id", "session"],
                name="unique_registration_per_user_session",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} -> {self.session_id}"
