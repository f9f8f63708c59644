"""Load a demo session catalog, timed relative to now."""

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from bookings.models import Registration, Session

# (title, category, instructor, start offset hours, duration hours, description)
DEMO_SESSIONS = [
    ("Hyrox", "ADULT", "Coach Mia", 1, 1, "High-intensity functional fitness race prep."),
    ("Hyrox", "ADULT", "Coach Sam", 25, 1, "Same class, next day."),
    ("Adult Hockey Drills", "ADULT", "Coach Mock", 3, 1, "Skill session for adult players."),
    ("Youth Skating Fundamentals", "YOUTH", "Coach Test", 5, 1, "Edges, crossovers and stops."),
    ("Private Lesson", "COACH", "Ben", 6, 1, "One-on-one with Ben."),
    ("Shooting Clinic", "COACH", "Ben", 30, 1, "Shot mechanics with Ben."),
    ("Private Lesson", "COACH", "Zen", 8, 1, "One-on-one with Zen."),
    ("Shooting Pad", "FACILITY", "Facility", 7, 1, "Book the shooting pad."),
    ("Golf Simulator", "FACILITY", "Facility", 9, 2, "Book the golf simulator."),
    ("Open House", "EVENT", "East Staff", 48, 3, "Tour the new facility."),
    ("Wolves Win U-15 Championship", "NEWS", "System", -2, 72, "Zen set a playoff scoring record."),
]


class Command(BaseCommand):
    help = "Seed the sessions table with a demo catalog."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete existing sessions and registrations first.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["clear"]:
            Registration.objects.all().delete()
            Session.objects.all().delete()

        now = timezone.now().replace(minute=0, second=0, microsecond=0)
        created = 0
        for title, category, instructor, offset, duration, description in DEMO_SESSIONS:
            start = now + timedelta(hours=offset)
            Session.objects.create(
                title=title,
                category=category,
                instructor=instructor,
                start_time=start,
                end_time=start + timedelta(hours=duration),
                description=description,
            )
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Seeded {created} sessions"))
