import logging

from django.contrib.auth.signals import user_logged_in, user_logged_out, user_login_failed
from django.dispatch import receiver

from apps.notifications.store import NotificationStore
from .session import SessionEvent

logger = logging.getLogger(__name__)


# SIGNAL 1: SIGN IN → resolve the CRM profile
@receiver(user_logged_in)
def on_signed_in(sender, request, user, **kwargs):
    session = getattr(request, 'crm_session', None)
    if session is None:
        return
    session.on_session_changed(SessionEvent.SIGNED_IN, user)
    logger.info("Signed in: %s (%s)", user.email, session.state.value)


# SIGNAL 2: SIGN OUT → forget the profile and stop serving its notifications
@receiver(user_logged_out)
def on_signed_out(sender, request, user, **kwargs):
    session = getattr(request, 'crm_session', None)
    if session is None:
        return

    if session.profile is not None and session.profile.pk is not None:
        NotificationStore(session.profile).clear()

    session.on_session_changed(SessionEvent.SIGNED_OUT)
    if user is not None:
        logger.info("Signed out: %s", user.email)


# SIGNAL 3: FAILED LOGIN (audit trail)
@receiver(user_login_failed)
def on_login_failed(sender, credentials, request=None, **kwargs):
    logger.warning("Failed login attempt for %s", credentials.get('username'))
