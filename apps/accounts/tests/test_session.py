"""
Tests for the session store
===========================

Test Cases:
1. resolve_profile (lazy creation, defaults, fallbacks)
2. SessionStore state machine (restore, sign-in, sign-out, disabled)
3. login / signup / update_password outcomes

Run tests:
    python manage.py test apps.accounts.tests.test_session
"""

from unittest import mock

from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.contrib.messages.middleware import MessageMiddleware
from django.contrib.sessions.middleware import SessionMiddleware
from django.db import DatabaseError
from django.test import TestCase, RequestFactory, override_settings

from apps.accounts.models import Profile
from apps.accounts.permissions import CUSTOMER, MARKETING_EXECUTIVE, SALES_EXECUTIVE
from apps.accounts.services import admin_create_user
from apps.accounts.session import (
    SessionEvent,
    SessionState,
    SessionStore,
    build_default_profile,
    resolve_profile,
)

User = get_user_model()


class ResolveProfileTest(TestCase):

    def setUp(self):
        self.identity = User.objects.create_user(email='new.person@crm.com', password='secret123')

    def test_creates_profile_on_first_sight(self):
        profile = resolve_profile(self.identity)

        self.assertIsNotNone(profile.pk)
        self.assertEqual(profile.auth_id, self.identity.auth_id)
        self.assertEqual(profile.email, 'new.person@crm.com')
        self.assertTrue(profile.enabled)

    def test_resolving_twice_keeps_one_profile(self):
        first = resolve_profile(self.identity)
        second = resolve_profile(self.identity)

        self.assertEqual(first.pk, second.pk)
        self.assertEqual(Profile.objects.filter(auth_id=self.identity.auth_id).count(), 1)

    def test_default_role_comes_from_settings(self):
        self.assertEqual(resolve_profile(self.identity).role, CUSTOMER)

    @override_settings(CRM_DEFAULT_ROLE=SALES_EXECUTIVE)
    def test_default_role_is_configurable(self):
        self.assertEqual(resolve_profile(self.identity).role, SALES_EXECUTIVE)

    def test_metadata_role_and_name_win(self):
        self.identity.metadata = {'full_name': 'Mona Marketing', 'role': MARKETING_EXECUTIVE}
        self.identity.save()

        profile = resolve_profile(self.identity)
        self.assertEqual(profile.name, 'Mona Marketing')
        self.assertEqual(profile.role, MARKETING_EXECUTIVE)

    def test_unknown_metadata_role_ignored(self):
        self.identity.metadata = {'role': 'Overlord'}
        self.assertEqual(build_default_profile(self.identity).role, CUSTOMER)

    def test_name_falls_back_to_email_local_part(self):
        self.assertEqual(build_default_profile(self.identity).name, 'new.person')

    def test_existing_profile_gets_last_login_on_sign_in(self):
        profile = Profile.objects.create(auth_id=self.identity.auth_id, name='Old', email=self.identity.email)
        self.assertIsNone(profile.last_login)

        resolved = resolve_profile(self.identity, record_login=True)

        self.assertEqual(resolved.pk, profile.pk)
        profile.refresh_from_db()
        self.assertIsNotNone(profile.last_login)

    def test_plain_resolution_leaves_last_login_alone(self):
        profile = Profile.objects.create(auth_id=self.identity.auth_id, name='Old', email=self.identity.email)

        resolve_profile(self.identity)

        profile.refresh_from_db()
        self.assertIsNone(profile.last_login)

    def test_failed_persist_returns_unsaved_draft(self):
        with mock.patch.object(Profile.objects, 'get_or_create', side_effect=DatabaseError('down')):
            profile = resolve_profile(self.identity)

        self.assertIsNone(profile.pk)
        self.assertEqual(profile.auth_id, self.identity.auth_id)
        self.assertFalse(Profile.objects.exists())


class SessionStoreTest(TestCase):

    def setUp(self):
        self.factory = RequestFactory()
        self.profile = admin_create_user(
            email='sara@crm.com',
            password='secret123',
            name='Sara Sales',
            role=SALES_EXECUTIVE,
        )
        self.identity = self.profile.get_identity()

    def _make_store(self, user=None):
        request = self.factory.post('/login/')
        SessionMiddleware(lambda x: None).process_request(request)
        MessageMiddleware(lambda x: None).process_request(request)
        request.user = user or AnonymousUser()
        request.crm_session = SessionStore(request)
        return request.crm_session

    def test_restore_without_identity_is_unauthenticated(self):
        store = self._make_store()

        self.assertEqual(store.restore_session(), SessionState.UNAUTHENTICATED)
        self.assertIsNone(store.current_user)
        self.assertFalse(store.is_authenticated)

    def test_restore_with_identity_resolves_profile(self):
        store = self._make_store(self.identity)

        self.assertEqual(store.restore_session(), SessionState.AUTHENTICATED)
        self.assertEqual(store.current_user.pk, self.profile.pk)

    def test_disabled_profile_has_no_current_user(self):
        Profile.objects.filter(pk=self.profile.pk).update(enabled=False)
        store = self._make_store(self.identity)

        self.assertEqual(store.restore_session(), SessionState.DISABLED)
        self.assertIsNone(store.current_user)

    def test_signed_out_event_clears_profile(self):
        store = self._make_store(self.identity)
        store.restore_session()

        store.on_session_changed(SessionEvent.SIGNED_OUT)

        self.assertEqual(store.state, SessionState.UNAUTHENTICATED)
        self.assertIsNone(store.profile)

    def test_restore_does_not_record_a_login(self):
        store = self._make_store(self.identity)

        store.restore_session()

        self.profile.refresh_from_db()
        self.assertIsNone(self.profile.last_login)

    def test_signed_in_event_records_login(self):
        store = self._make_store()

        store.on_session_changed(SessionEvent.SIGNED_IN, self.identity)

        self.profile.refresh_from_db()
        self.assertIsNotNone(self.profile.last_login)

    def test_token_refresh_resolves_again(self):
        store = self._make_store()
        state = store.on_session_changed(SessionEvent.TOKEN_REFRESHED, self.identity)
        self.assertEqual(state, SessionState.AUTHENTICATED)

    def test_resolution_error_ends_unauthenticated(self):
        store = self._make_store(self.identity)

        with mock.patch('apps.accounts.session.resolve_profile', side_effect=RuntimeError('boom')):
            state = store.restore_session()

        self.assertEqual(state, SessionState.UNAUTHENTICATED)
        self.assertIsNone(store.current_user)

    def test_login_success(self):
        store = self._make_store()
        outcome = store.login('SARA@crm.com', 'secret123')

        self.assertTrue(outcome.ok)
        self.assertEqual(store.state, SessionState.AUTHENTICATED)
        self.assertEqual(store.current_user.pk, self.profile.pk)

    def test_login_invalid_credentials(self):
        store = self._make_store()
        outcome = store.login('sara@crm.com', 'wrong-password')

        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.error, 'Invalid login credentials')
        self.assertEqual(store.state, SessionState.UNAUTHENTICATED)

    def test_login_refused_for_disabled_profile(self):
        Profile.objects.filter(pk=self.profile.pk).update(enabled=False)
        store = self._make_store()

        outcome = store.login('sara@crm.com', 'secret123')

        self.assertFalse(outcome.ok)
        self.assertIn('disabled', outcome.error)
        self.assertIsNone(store.current_user)

    def test_logout(self):
        store = self._make_store()
        store.login('sara@crm.com', 'secret123')

        store.logout()

        self.assertEqual(store.state, SessionState.UNAUTHENTICATED)
        self.assertIsNone(store.current_user)

    def test_signup_creates_identity_only(self):
        store = self._make_store()
        outcome = store.signup('Fresh@crm.com', 'secret123')

        self.assertTrue(outcome.ok)
        identity = User.objects.get(email='fresh@crm.com')
        self.assertFalse(Profile.objects.filter(auth_id=identity.auth_id).exists())

    def test_signup_duplicate_email(self):
        outcome = self._make_store().signup('sara@crm.com', 'secret123')
        self.assertEqual(outcome.error, 'User already registered')

    def test_signup_requires_both_fields(self):
        outcome = self._make_store().signup('', '')
        self.assertEqual(outcome.error, 'Please enter email and password')

    def test_signup_short_password(self):
        outcome = self._make_store().signup('short@crm.com', '123')

        self.assertFalse(outcome.ok)
        self.assertFalse(User.objects.filter(email='short@crm.com').exists())

    def test_update_password(self):
        store = self._make_store()
        store.login('sara@crm.com', 'secret123')

        outcome = store.update_password('brand-new-pass')

        self.assertTrue(outcome.ok)
        self.identity.refresh_from_db()
        self.assertTrue(self.identity.check_password('brand-new-pass'))
        self.assertEqual(store.state, SessionState.AUTHENTICATED)

    def test_update_password_requires_sign_in(self):
        outcome = self._make_store().update_password('brand-new-pass')
        self.assertEqual(outcome.error, 'Not signed in')
