"""Session grouping engine.

Clusters raw session rows into bookable offerings: one offering per title
(per instructor for COACH), every NEWS item on its own. Pure functions, no I/O.
"""

from collections.abc import Iterable
from datetime import date, datetime

from bookings.domain.models import Offering, Session
from bookings.domain.value_objects import Category, SessionId

CATALOG_ORDER: tuple[Category, ...] = (
    Category.ADULT,
    Category.YOUTH,
    Category.COACH,
    Category.FACILITY,
    Category.EVENT,
    Category.NEWS,
)


def current_sessions(sessions: Iterable[Session], now: datetime) -> list[Session]:
    """Keep sessions that have not ended yet, preserving input order."""
    return [session for session in sessions if session.is_current(now)]


def sort_by_start(sessions: Iterable[Session]) -> list[Session]:
    """Ascending by start_time; equal start times keep their input order."""
    return sorted(sessions, key=lambda session: session.start_time)


def group_sessions(sessions: Iterable[Session]) -> list[Offering]:
    """Group sessions into offerings in first-seen order.

    Sessions sharing both category and grouping key land in the same
    offering. Duplicate rows (same title and start_time) are kept as
    separate slots.
    """
    order: list[tuple] = []
    members: dict[tuple, list[Session]] = {}

    for session in sessions:
        if session.bookable:
            key = (session.category, session.grouping_key)
        else:
            key = (session.category, session.id)
        if key not in members:
            order.append(key)
            members[key] = []
        members[key].append(session)

    offerings = []
    for key in order:
        slots = sort_by_start(members[key])
        first = slots[0]
        label = first.grouping_key if first.bookable else first.title
        offerings.append(
            Offering(category=first.category, key=label, slots=tuple(slots))
        )
    return offerings


def build_catalog(sessions: Iterable[Session]) -> dict[Category, list[Offering]]:
    """Offerings per category, every category present (possibly empty)."""
    catalog: dict[Category, list[Offering]] = {category: [] for category in CATALOG_ORDER}
    for offering in group_sessions(sessions):
        catalog[offering.category].append(offering)
    return catalog


def find_offering(
    offerings: Iterable[Offering], session_id: SessionId
) -> Offering | None:
    """Return the offering a session belongs to."""
    for offering in offerings:
        if session_id in offering.session_ids:
            return offering
    return None


def sessions_on_day(schedule: Iterable[Session], day: date) -> list[Session]:
    """Filter a schedule down to sessions starting on the given calendar day."""
    return [session for session in schedule if session.start_time.date() == day]
