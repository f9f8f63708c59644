"""Django ORM implementation of the session store and registration ledger."""

from collections.abc import Iterable
from datetime import datetime

from django.db import DatabaseError, IntegrityError, transaction

from bookings import models
from bookings.domain import Category, Registration, Session, SessionId, UserId
from bookings.stores.interfaces import (
    RegistrationLedger,
    SessionStore,
    StoreError,
    UniqueViolation,
)


def to_domain_session(row: models.Session) -> Session:
    return Session(
        id=SessionId(row.id),
        title=row.title,
        category=Category(row.category),
        instructor=row.instructor,
        start_time=row.start_time,
        end_time=row.end_time,
        description=row.description,
        image_url=row.image_url or None,
    )


def to_domain_registration(row: models.Registration) -> Registration:
    return Registration(
        user_id=UserId(row.user_id),
        session_id=SessionId(row.session_id),
        created_at=row.created_at,
    )


class DjangoSessionStore(SessionStore):
    """Database-backed session catalog using Django ORM."""

    def list_current(self, now: datetime) -> list[Session]:
        try:
            rows = models.Session.objects.filter(end_time__gte=now).order_by(
                "start_time", "id"
            )
            return [to_domain_session(row) for row in rows]
        except DatabaseError as exc:
            raise StoreError("could not list sessions") from exc

    def get_session(self, session_id: SessionId) -> Session | None:
        try:
            row = models.Session.objects.filter(pk=session_id.value).first()
        except DatabaseError as exc:
            raise StoreError("could not load session") from exc
        return to_domain_session(row) if row is not None else None

    def get_sessions(self, session_ids: Iterable[SessionId]) -> dict[SessionId, Session]:
        ids = {session_id.value for session_id in session_ids}
        if not ids:
            return {}
        try:
            rows = list(models.Session.objects.filter(pk__in=ids))
        except DatabaseError as exc:
            raise StoreError("could not load sessions") from exc
        return {SessionId(row.id): to_domain_session(row) for row in rows}


class DjangoRegistrationLedger(RegistrationLedger):
    """Registration ledger backed by the registrations table.

    Uniqueness comes from the unique_registration_per_user_session constraint;
    there is deliberately no existence check before the insert.
    """

    def add(self, user_id: UserId, session_id: SessionId) -> Registration:
        try:
            with transaction.atomic():
                row = models.Registration.objects.create(
                    user_id=user_id.value, session_id=session_id.value
                )
        except IntegrityError as exc:
            raise UniqueViolation(
                f"registration exists for {user_id} / {session_id}"
            ) from exc
        except DatabaseError as exc:
            raise StoreError("could not insert registration") from exc
        return to_domain_registration(row)

    def remove(self, user_id: UserId, session_id: SessionId) -> int:
        try:
            deleted, _ = models.Registration.objects.filter(
                user_id=user_id.value, session_id=session_id.value
            ).delete()
        except DatabaseError as exc:
            raise StoreError("could not delete registration") from exc
        return deleted

    def list_for_user(self, user_id: UserId) -> list[Registration]:
        try:
            rows = models.Registration.objects.filter(user_id=user_id.value).order_by(
                "created_at", "id"
            )
            return [to_domain_registration(row) for row in rows]
        except DatabaseError as exc:
            raise StoreError("could not list registrations") from exc
