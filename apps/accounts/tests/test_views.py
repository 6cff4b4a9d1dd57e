"""
Tests for the authentication and user-management views
=======================================================

Test Coverage:
1. login / signup / logout
2. User management (System Admin only)
3. Security page (password change, login activity)

Run tests:
    python manage.py test apps.accounts.tests.test_views
"""

from unittest import mock

from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.db import DatabaseError
from django.test import TestCase, Client
from django.urls import reverse

from apps.accounts.models import Profile
from apps.accounts.permissions import SYSTEM_ADMIN, SALES_EXECUTIVE, MARKETING_EXECUTIVE
from apps.accounts.services import admin_create_user

User = get_user_model()


class LoginViewTest(TestCase):

    def setUp(self):
        cache.clear()
        self.client = Client()
        self.url = reverse('accounts:login')
        self.profile = admin_create_user('sara@crm.com', 'secret123', 'Sara Sales', SALES_EXECUTIVE)

    def test_login_page_renders(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'accounts/login.html')

    def test_successful_login_redirects_to_dashboard(self):
        response = self.client.post(self.url, {'email': 'sara@crm.com', 'password': 'secret123'})
        self.assertRedirects(response, reverse('core:dashboard'))

    def test_next_parameter_is_honoured(self):
        response = self.client.post(
            f"{self.url}?next={reverse('leads:lead_list')}",
            {'email': 'sara@crm.com', 'password': 'secret123'},
        )
        self.assertRedirects(response, reverse('leads:lead_list'))

    def test_offsite_next_parameter_is_ignored(self):
        response = self.client.post(
            f"{self.url}?next=//evil.example/phish",
            {'email': 'sara@crm.com', 'password': 'secret123'},
        )
        self.assertRedirects(response, reverse('core:dashboard'))

    def test_invalid_credentials_shown_inline(self):
        response = self.client.post(self.url, {'email': 'sara@crm.com', 'password': 'nope'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['error'], 'Invalid login credentials')

    def test_disabled_profile_cannot_login(self):
        Profile.objects.filter(pk=self.profile.pk).update(enabled=False)

        response = self.client.post(self.url, {'email': 'sara@crm.com', 'password': 'secret123'})

        self.assertEqual(response.status_code, 200)
        self.assertIn('disabled', response.context['error'])
        self.assertNotIn('_auth_user_id', self.client.session)

    def test_signed_in_user_redirected_away(self):
        self.client.login(email='sara@crm.com', password='secret123')
        response = self.client.get(self.url)
        self.assertRedirects(response, reverse('core:dashboard'))

    def test_first_login_creates_profile(self):
        User.objects.create_user(email='self@crm.com', password='secret123')

        self.client.post(self.url, {'email': 'self@crm.com', 'password': 'secret123'})

        self.assertTrue(Profile.objects.filter(email='self@crm.com').exists())


class SignupViewTest(TestCase):

    def setUp(self):
        self.client = Client()
        self.url = reverse('accounts:signup')

    def test_signup_redirects_to_login(self):
        response = self.client.post(self.url, {'email': 'new@crm.com', 'password': 'secret123'})

        self.assertRedirects(response, reverse('accounts:login'))
        self.assertTrue(User.objects.filter(email='new@crm.com').exists())

    def test_duplicate_signup_shows_error(self):
        User.objects.create_user(email='new@crm.com', password='secret123')

        response = self.client.post(self.url, {'email': 'new@crm.com', 'password': 'secret123'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['error'], 'User already registered')


class LogoutViewTest(TestCase):

    def test_logout(self):
        cache.clear()
        admin_create_user('sara@crm.com', 'secret123', 'Sara', SALES_EXECUTIVE)
        self.client.login(email='sara@crm.com', password='secret123')

        response = self.client.get(reverse('accounts:logout'))

        self.assertRedirects(response, reverse('accounts:login'))
        response = self.client.get(reverse('core:dashboard'))
        self.assertRedirects(response, reverse('accounts:login'))


class UserManagementViewTest(TestCase):

    def setUp(self):
        cache.clear()
        self.client = Client()
        self.admin = admin_create_user('admin@crm.com', 'secret123', 'Ada Admin', SYSTEM_ADMIN)
        self.member = admin_create_user('sara@crm.com', 'secret123', 'Sara Sales', SALES_EXECUTIVE)
        self.client.login(email='admin@crm.com', password='secret123')

    def test_user_list(self):
        response = self.client.get(reverse('accounts:user_list'))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.context['users']), 2)

    def test_user_list_search(self):
        response = self.client.get(reverse('accounts:user_list'), {'search': 'sara'})
        self.assertEqual([p.pk for p in response.context['users']], [self.member.pk])

    def test_non_admin_redirected_to_dashboard(self):
        client = Client()
        client.login(email='sara@crm.com', password='secret123')

        response = client.get(reverse('accounts:user_list'))

        self.assertRedirects(response, reverse('core:dashboard'))

    def test_create_user(self):
        response = self.client.post(reverse('accounts:user_create'), {
            'name': 'Mona Marketing',
            'email': 'mona@crm.com',
            'role': MARKETING_EXECUTIVE,
            'password': 'secret123',
        })

        self.assertRedirects(response, reverse('accounts:user_list'))
        profile = Profile.objects.get(email='mona@crm.com')
        self.assertEqual(profile.role, MARKETING_EXECUTIVE)

    def test_edit_user_role_and_password(self):
        response = self.client.post(reverse('accounts:user_edit', args=[self.member.pk]), {
            'name': 'Sara Manager',
            'role': 'Sales Manager',
            'enabled': 'on',
            'new_password': 'changed123',
        })

        self.assertRedirects(response, reverse('accounts:user_list'))
        self.member.refresh_from_db()
        self.assertEqual(self.member.role, 'Sales Manager')
        self.assertTrue(self.member.get_identity().check_password('changed123'))

    def test_failed_password_step_rolls_back_profile_changes(self):
        with mock.patch('apps.accounts.views.admin_update_password', side_effect=DatabaseError('down')):
            response = self.client.post(reverse('accounts:user_edit', args=[self.member.pk]), {
                'name': 'Sara Promoted',
                'role': SYSTEM_ADMIN,
                'enabled': 'on',
                'new_password': 'changed123',
            })

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Failed to update user')
        self.member.refresh_from_db()
        self.assertEqual(self.member.role, SALES_EXECUTIVE)
        self.assertEqual(self.member.name, 'Sara Sales')
        self.assertTrue(self.member.get_identity().check_password('secret123'))

    def test_rejected_password_changes_nothing(self):
        response = self.client.post(reverse('accounts:user_edit', args=[self.member.pk]), {
            'name': 'Sara Sales',
            'role': 'Sales Manager',
            'enabled': 'on',
            'new_password': 'abc',
        })

        self.assertEqual(response.status_code, 200)
        self.member.refresh_from_db()
        self.assertEqual(self.member.role, SALES_EXECUTIVE)

    def test_cannot_demote_self(self):
        response = self.client.post(reverse('accounts:user_edit', args=[self.admin.pk]), {
            'name': 'Ada Admin',
            'role': SALES_EXECUTIVE,
            'enabled': 'on',
        })

        self.assertContains(response, 'You cannot demote or disable your own account.')
        self.admin.refresh_from_db()
        self.assertEqual(self.admin.role, SYSTEM_ADMIN)

    def test_cannot_disable_self_through_edit(self):
        self.client.post(reverse('accounts:user_edit', args=[self.admin.pk]), {
            'name': 'Ada Admin',
            'role': SYSTEM_ADMIN,
        })

        self.admin.refresh_from_db()
        self.assertTrue(self.admin.enabled)

    def test_toggle_status(self):
        self.client.post(reverse('accounts:user_toggle_status', args=[self.member.pk]))

        self.member.refresh_from_db()
        self.assertFalse(self.member.enabled)

    def test_cannot_disable_self(self):
        self.client.post(reverse('accounts:user_toggle_status', args=[self.admin.pk]))

        self.admin.refresh_from_db()
        self.assertTrue(self.admin.enabled)

    def test_delete_user(self):
        response = self.client.get(reverse('accounts:user_delete', args=[self.member.pk]))
        self.assertTemplateUsed(response, 'core/entity_confirm_delete.html')

        self.client.post(reverse('accounts:user_delete', args=[self.member.pk]))

        self.assertFalse(Profile.objects.filter(pk=self.member.pk).exists())
        self.assertFalse(User.objects.filter(email='sara@crm.com').exists())


class SecurityViewTest(TestCase):

    def setUp(self):
        cache.clear()
        self.client = Client()
        admin_create_user('admin@crm.com', 'secret123', 'Ada Admin', SYSTEM_ADMIN)
        self.client.post(reverse('accounts:login'), {'email': 'admin@crm.com', 'password': 'secret123'})

    def test_security_page_lists_recent_logins(self):
        response = self.client.get(reverse('accounts:security'))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.context['recent_logins']), 1)

    def test_page_views_do_not_move_last_login(self):
        signed_in_at = Profile.objects.get(email='admin@crm.com').last_login
        self.assertIsNotNone(signed_in_at)

        self.client.get(reverse('notifications:poll'))
        self.client.get(reverse('core:dashboard'))

        self.assertEqual(Profile.objects.get(email='admin@crm.com').last_login, signed_in_at)

    def test_password_mismatch(self):
        response = self.client.post(reverse('accounts:security'), {
            'new_password': 'changed123',
            'confirm_password': 'different',
        })

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.context['form'].errors)

    def test_password_change_keeps_session(self):
        response = self.client.post(reverse('accounts:security'), {
            'new_password': 'changed123',
            'confirm_password': 'changed123',
        })

        self.assertRedirects(response, reverse('accounts:security'))
        self.assertTrue(User.objects.get(email='admin@crm.com').check_password('changed123'))
        self.assertEqual(self.client.get(reverse('core:dashboard')).status_code, 200)
