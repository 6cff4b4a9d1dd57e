"""
Session store
=============

Owns "who is logged in" for one request.

    UNAUTHENTICATED → RESOLVING → AUTHENTICATED
                                → DISABLED
    any state → UNAUTHENTICATED on sign-out

restore_session() runs in SessionProfileMiddleware before any view.
on_session_changed() is driven by the user_logged_in / user_logged_out signals
and by password updates. Both go through _resolve(), which holds a lock so only
one resolution runs at a time; Profile.auth_id is unique, so racing requests
still end up on the same profile row.
"""

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.contrib.auth import authenticate, login, logout, update_session_auth_hash
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from .models import Profile
from .permissions import is_valid_role

logger = logging.getLogger(__name__)

User = get_user_model()


class SessionState(enum.Enum):
    UNAUTHENTICATED = 'unauthenticated'
    RESOLVING = 'resolving'
    AUTHENTICATED = 'authenticated'
    DISABLED = 'disabled'


class SessionEvent(enum.Enum):
    SIGNED_IN = 'SIGNED_IN'
    SIGNED_OUT = 'SIGNED_OUT'
    TOKEN_REFRESHED = 'TOKEN_REFRESHED'
    USER_UPDATED = 'USER_UPDATED'


@dataclass
class AuthOutcome:
    """Result of login/signup/password update. error is None on success."""
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None


# PROFILE RESOLUTION
def default_role_for(identity):
    role = identity.metadata.get('role') if identity.metadata else None
    if role and is_valid_role(role):
        return role
    return settings.CRM_DEFAULT_ROLE


def build_default_profile(identity):
    """Unsaved Profile synthesized from an identity that has none yet"""
    metadata = identity.metadata or {}
    name = metadata.get('full_name') or identity.email.split('@')[0] or 'User'
    return Profile(
        auth_id=identity.auth_id,
        name=name,
        email=identity.email,
        role=default_role_for(identity),
        enabled=True,
        last_login=timezone.now(),
    )


def touch_last_login(profile):
    """Best effort: a failed update is logged and otherwise ignored"""
    now = timezone.now()
    try:
        Profile.objects.filter(pk=profile.pk).update(last_login=now)
        profile.last_login = now
    except DatabaseError:
        logger.warning("Failed to update last login for profile %s", profile.pk, exc_info=True)


def resolve_profile(identity, record_login=False):
    """
    Find the CRM profile of an authenticated identity, creating it on first sight

    last_login of an existing profile is only written when record_login is set
    (sign-in and token refresh), not on every restored request.

    Steps:
    1. Look up Profile by auth_id
    2. Missing → synthesize a default profile and persist it
    3. Re-read it so the result carries its database id
    4. Re-read failed → return the unsaved draft

    Returns:
        Profile: possibly unsaved (pk is None) when persistence failed
    """
    profile = Profile.objects.filter(auth_id=identity.auth_id).first()

    if profile is not None:
        if record_login:
            touch_last_login(profile)
        return profile

    logger.warning("Profile missing for %s, creating one", identity.email)
    draft = build_default_profile(identity)

    try:
        with transaction.atomic():
            Profile.objects.get_or_create(
                auth_id=identity.auth_id,
                defaults={
                    'name': draft.name,
                    'email': draft.email,
                    'role': draft.role,
                    'enabled': draft.enabled,
                    'last_login': draft.last_login,
                },
            )
    except IntegrityError:
        # Another request created it first
        logger.info("Profile for %s created concurrently", identity.email)
    except DatabaseError:
        logger.exception("Could not persist profile for %s", identity.email)
        return draft

    try:
        synced = Profile.objects.filter(auth_id=identity.auth_id).first()
    except DatabaseError:
        logger.exception("Could not re-read profile for %s", identity.email)
        synced = None

    return synced or draft


# SESSION STORE
class SessionStore:
    """
    Per-request holder of the signed-in identity and its CRM profile

    Attached to the request as request.crm_session by SessionProfileMiddleware.
    """

    def __init__(self, request):
        self.request = request
        self.state = SessionState.UNAUTHENTICATED
        self.identity = None
        self.profile = None
        self._lock = threading.Lock()

    def __repr__(self):
        return f"<SessionStore {self.state.value} {self.profile!r}>"

    @property
    def current_user(self):
        """The profile of an enabled, resolved session; None otherwise"""
        if self.state is SessionState.AUTHENTICATED:
            return self.profile
        return None

    @property
    def is_authenticated(self):
        return self.current_user is not None

    # LIFECYCLE
    def restore_session(self):
        identity = getattr(self.request, 'user', None)
        if identity is None or not identity.is_authenticated:
            self._clear()
            return self.state
        return self._resolve(identity)

    def on_session_changed(self, event, identity=None):
        """
        Backend session change (sign in, sign out, token refresh, user update)

        Args:
            event (SessionEvent): what happened
            identity (User): identity now attached to the session, if any
        """
        logger.debug("Session event %s for %s", event.value, identity)

        if event is SessionEvent.SIGNED_OUT or identity is None:
            self._clear()
            return self.state

        record_login = event in (SessionEvent.SIGNED_IN, SessionEvent.TOKEN_REFRESHED)
        return self._resolve(identity, record_login=record_login)

    def _resolve(self, identity, record_login=False):
        with self._lock:
            self.state = SessionState.RESOLVING
            self.identity = identity
            try:
                profile = resolve_profile(identity, record_login=record_login)
            except Exception:
                # Never leave the request stuck in RESOLVING
                logger.exception("Error resolving profile for %s", identity)
                self.profile = None
                self.state = SessionState.UNAUTHENTICATED
                return self.state

            self.profile = profile
            self.state = SessionState.AUTHENTICATED if profile.enabled else SessionState.DISABLED
            return self.state

    def _clear(self):
        with self._lock:
            self.identity = None
            self.profile = None
            self.state = SessionState.UNAUTHENTICATED

    # AUTHENTICATION
    def login(self, email, password):
        """
        Password sign-in

        Returns:
            AuthOutcome: error set for invalid credentials or disabled profiles
        """
        identity = authenticate(self.request, username=(email or '').strip().lower(), password=password)
        if identity is None:
            return AuthOutcome(error='Invalid login credentials')

        # Fires user_logged_in → on_session_changed(SIGNED_IN)
        login(self.request, identity)

        if self.state is SessionState.DISABLED:
            logout(self.request)
            return AuthOutcome(error='Your account has been disabled. Please contact an administrator.')
        if self.state is not SessionState.AUTHENTICATED:
            logout(self.request)
            return AuthOutcome(error='Could not load your profile. Please try again.')

        return AuthOutcome()

    def signup(self, email, password):
        """Create an identity; the profile is created on first sign-in"""
        email = (email or '').strip().lower()
        if not email or not password:
            return AuthOutcome(error='Please enter email and password')
        if User.objects.filter(email=email).exists():
            return AuthOutcome(error='User already registered')

        try:
            validate_password(password)
        except ValidationError as e:
            return AuthOutcome(error=' '.join(e.messages))

        try:
            User.objects.create_user(email=email, password=password)
        except IntegrityError:
            return AuthOutcome(error='User already registered')

        logger.info("New identity signed up: %s", email)
        return AuthOutcome()

    def logout(self):
        # Fires user_logged_out → on_session_changed(SIGNED_OUT)
        logout(self.request)
        self._clear()

    def update_password(self, new_password):
        identity = self.identity
        if identity is None:
            return AuthOutcome(error='Not signed in')

        try:
            validate_password(new_password, user=identity)
        except ValidationError as e:
            return AuthOutcome(error=' '.join(e.messages))

        identity.set_password(new_password)
        identity.save(update_fields=['password'])
        update_session_auth_hash(self.request, identity)
        self.on_session_changed(SessionEvent.USER_UPDATED, identity)
        return AuthOutcome()
