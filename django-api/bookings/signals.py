"""Django signals for cache invalidation."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from bookings.cache import invalidate_sessions
from bookings.models import Session


@receiver([post_save, post_delete], sender=Session)
def invalidate_session_cache(sender, instance, **kwargs):
    """Invalidate the current-session list when a session is saved or deleted."""
    invalidate_sessions()
