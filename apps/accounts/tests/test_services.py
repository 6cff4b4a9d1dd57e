"""
Tests for the privileged user procedures

Run tests:
    python manage.py test apps.accounts.tests.test_services
"""

from django.contrib.auth import get_user_model
from django.test import TestCase

from apps.accounts.models import Profile
from apps.accounts.permissions import SALES_MANAGER, SUPPORT_EXECUTIVE
from apps.accounts.services import (
    AdminOperationError,
    admin_create_user,
    admin_delete_user,
    admin_update_password,
    update_profile,
)
from apps.leads.models import Lead

User = get_user_model()


class AdminCreateUserTest(TestCase):

    def test_creates_identity_and_profile(self):
        profile = admin_create_user('Maya@CRM.com', 'secret123', 'Maya Manager', SALES_MANAGER)

        identity = User.objects.get(email='maya@crm.com')
        self.assertEqual(profile.auth_id, identity.auth_id)
        self.assertEqual(profile.role, SALES_MANAGER)
        self.assertEqual(identity.metadata['role'], SALES_MANAGER)
        self.assertTrue(identity.check_password('secret123'))

    def test_duplicate_email_rejected(self):
        admin_create_user('maya@crm.com', 'secret123', 'Maya', SALES_MANAGER)

        with self.assertRaises(AdminOperationError):
            admin_create_user('maya@crm.com', 'secret123', 'Maya Again', SALES_MANAGER)
        self.assertEqual(Profile.objects.count(), 1)

    def test_unknown_role_rejected(self):
        with self.assertRaises(AdminOperationError):
            admin_create_user('x@crm.com', 'secret123', 'X', 'Overlord')
        self.assertFalse(User.objects.filter(email='x@crm.com').exists())

    def test_short_password_rejected(self):
        with self.assertRaises(AdminOperationError):
            admin_create_user('x@crm.com', '123', 'X', SALES_MANAGER)


class AdminDeleteUserTest(TestCase):

    def test_deletes_profile_and_identity_and_unassigns_records(self):
        profile = admin_create_user('gone@crm.com', 'secret123', 'Gone', SUPPORT_EXECUTIVE)
        lead = Lead.objects.create(name='Kept Lead', assigned_to=profile)

        admin_delete_user(profile)

        self.assertFalse(Profile.objects.filter(email='gone@crm.com').exists())
        self.assertFalse(User.objects.filter(email='gone@crm.com').exists())
        lead.refresh_from_db()
        self.assertIsNone(lead.assigned_to)


class AdminUpdatePasswordTest(TestCase):

    def test_sets_new_password(self):
        profile = admin_create_user('pw@crm.com', 'secret123', 'Pw', SUPPORT_EXECUTIVE)

        admin_update_password(profile, 'another-pass')

        self.assertTrue(User.objects.get(email='pw@crm.com').check_password('another-pass'))

    def test_profile_without_login(self):
        profile = Profile.objects.create(name='No Login', email='nologin@crm.com')

        with self.assertRaises(AdminOperationError):
            admin_update_password(profile, 'another-pass')


class UpdateProfileTest(TestCase):

    def test_updates_role_and_enabled(self):
        profile = Profile.objects.create(name='P', email='p@crm.com')

        update_profile(profile, role=SALES_MANAGER, enabled=False)

        profile.refresh_from_db()
        self.assertEqual(profile.role, SALES_MANAGER)
        self.assertFalse(profile.enabled)

    def test_rejects_unknown_role(self):
        profile = Profile.objects.create(name='P', email='p@crm.com')

        with self.assertRaises(AdminOperationError):
            update_profile(profile, role='Overlord')
