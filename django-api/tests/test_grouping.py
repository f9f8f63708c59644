"""Unit tests for the session grouping engine."""

from datetime import date

from bookings.domain import Category, SessionId
from bookings.domain.grouping import (
    CATALOG_ORDER,
    build_catalog,
    current_sessions,
    find_offering,
    group_sessions,
    sessions_on_day,
)


class TestGroupSessions:
    def test_same_title_forms_one_offering(self, make_session):
        """Two Hyrox sessions at different times are two slots of one offering."""
        later = make_session(502, title="Hyrox", hours=5)
        earlier = make_session(501, title="Hyrox", hours=1)

        offerings = group_sessions([later, earlier])

        assert len(offerings) == 1
        assert offerings[0].key == "Hyrox"
        assert offerings[0].session_ids == (SessionId(501), SessionId(502))

    def test_title_grouping_ignores_instructor(self, make_session):
        sessions = [
            make_session(1, title="Hyrox", instructor="Coach Mia"),
            make_session(2, title="Hyrox", instructor="Coach Sam", hours=2),
        ]
        assert len(group_sessions(sessions)) == 1

    def test_coach_groups_by_instructor_regardless_of_title(self, make_session):
        sessions = [
            make_session(1, title="Private Lesson", category=Category.COACH, instructor="Ben"),
            make_session(2, title="Private Lesson", category=Category.COACH, instructor="Zen"),
            make_session(3, title="Shooting Clinic", category=Category.COACH, instructor="Ben", hours=3),
        ]

        offerings = group_sessions(sessions)

        assert [o.key for o in offerings] == ["Ben", "Zen"]
        assert offerings[0].session_ids == (SessionId(1), SessionId(3))

    def test_same_key_in_different_categories_stays_apart(self, make_session):
        sessions = [
            make_session(1, title="Skating", category=Category.ADULT),
            make_session(2, title="Skating", category=Category.YOUTH),
        ]
        offerings = group_sessions(sessions)
        assert [(o.category, o.session_ids) for o in offerings] == [
            (Category.ADULT, (SessionId(1),)),
            (Category.YOUTH, (SessionId(2),)),
        ]

    def test_news_items_are_never_merged(self, make_session):
        sessions = [
            make_session(801, title="Big Win", category=Category.NEWS),
            make_session(802, title="Big Win", category=Category.NEWS),
        ]
        offerings = group_sessions(sessions)
        assert len(offerings) == 2
        assert not any(o.bookable for o in offerings)
        assert all(o.default_slot is not None for o in offerings)

    def test_first_seen_order_is_preserved(self, make_session):
        sessions = [
            make_session(1, title="Yoga", hours=9),
            make_session(2, title="Hyrox", hours=1),
            make_session(3, title="Yoga", hours=2),
        ]
        assert [o.key for o in group_sessions(sessions)] == ["Yoga", "Hyrox"]

    def test_duplicate_rows_are_kept_as_separate_slots(self, make_session):
        sessions = [make_session(1, hours=2), make_session(2, hours=2)]
        (offering,) = group_sessions(sessions)
        assert offering.session_ids == (SessionId(1), SessionId(2))

    def test_grouping_is_deterministic(self, make_session):
        sessions = [
            make_session(3, title="Yoga", hours=4),
            make_session(1, title="Hyrox", hours=3),
            make_session(2, title="Hyrox", hours=1),
            make_session(4, title="Ben", category=Category.COACH, instructor="Ben"),
        ]
        assert group_sessions(sessions) == group_sessions(list(sessions))

    def test_single_slot_is_auto_selected(self, make_session):
        (offering,) = group_sessions([make_session(1)])
        assert offering.default_slot.id == SessionId(1)


class TestBuildCatalog:
    def test_every_category_is_present(self, make_session):
        catalog = build_catalog([make_session(1, category=Category.EVENT, title="Open House")])
        assert tuple(catalog) == CATALOG_ORDER
        assert [o.key for o in catalog[Category.EVENT]] == ["Open House"]
        assert catalog[Category.ADULT] == []


def test_current_sessions_drops_ended(make_session, now):
    ended = make_session(1, hours=-3, duration=1)
    running = make_session(2, hours=-1, duration=2)
    upcoming = make_session(3, hours=1)
    assert current_sessions([ended, running, upcoming], now) == [running, upcoming]


def test_find_offering(make_session):
    offerings = group_sessions([make_session(1, title="Hyrox"), make_session(2, title="Yoga")])
    assert find_offering(offerings, SessionId(2)).key == "Yoga"
    assert find_offering(offerings, SessionId(99)) is None


def test_sessions_on_day(make_session, now):
    today = make_session(1, hours=1)
    tomorrow = make_session(2, hours=24)
    assert sessions_on_day([today, tomorrow], now.date()) == [today]
    assert sessions_on_day([today, tomorrow], date(2026, 3, 3)) == [tomorrow]
