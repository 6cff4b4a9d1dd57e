"""
Contact and account views tests

Run tests:
    python manage.py test apps.contacts.tests.test_views
"""

from unittest import mock

from django.core.cache import cache
from django.db import DatabaseError
from django.test import TestCase, Client
from django.urls import reverse

from apps.accounts.permissions import SUPPORT_EXECUTIVE, MARKETING_EXECUTIVE
from apps.accounts.services import admin_create_user
from apps.contacts.models import Account, Contact


class ContactViewsTest(TestCase):

    def setUp(self):
        cache.clear()
        self.client = Client()
        admin_create_user('sam@crm.com', 'secret123', 'Sam Support', SUPPORT_EXECUTIVE)
        self.client.login(email='sam@crm.com', password='secret123')

        self.acme = Account.objects.create(name='Acme', industry='Technology')
        self.alice = Contact.objects.create(first_name='Alice', last_name='Smith', email='alice@acme.com', account=self.acme)
        self.bob = Contact.objects.create(first_name='Bob', last_name='Jones')

    def test_list(self):
        response = self.client.get(reverse('contacts:contact_list'))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['contacts'], [self.alice, self.bob])
        self.assertEqual(response.context['accounts'], [self.acme])

    def test_search_by_last_name(self):
        response = self.client.get(reverse('contacts:contact_list'), {'search': 'jones'})
        self.assertEqual(response.context['contacts'], [self.bob])

    def test_filter_by_account(self):
        response = self.client.get(reverse('contacts:contact_list'), {'account': self.acme.pk})
        self.assertEqual(response.context['contacts'], [self.alice])

    def test_invalid_account_filter_is_ignored(self):
        response = self.client.get(reverse('contacts:contact_list'), {'account': 'acme'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.context['contacts']), 2)

    def test_create(self):
        response = self.client.post(reverse('contacts:contact_create'), {
            'first_name': 'Carol', 'last_name': 'White', 'email': 'carol@acme.com',
            'account': self.acme.pk, 'position': 'CTO',
        })

        self.assertRedirects(response, reverse('contacts:contact_list'))
        self.assertEqual(Contact.objects.get(first_name='Carol').account, self.acme)

    def test_create_requires_first_name(self):
        response = self.client.post(reverse('contacts:contact_create'), {'last_name': 'White'})

        self.assertEqual(response.status_code, 200)
        self.assertIn('first_name', response.context['form'].errors)

    def test_edit(self):
        response = self.client.post(reverse('contacts:contact_edit', args=[self.bob.pk]), {
            'first_name': 'Bob', 'last_name': 'Jones', 'account': self.acme.pk,
        })

        self.assertRedirects(response, reverse('contacts:contact_list'))
        self.bob.refresh_from_db()
        self.assertEqual(self.bob.account, self.acme)

    def test_failed_edit_keeps_original(self):
        with mock.patch.object(Contact, 'save', side_effect=DatabaseError('down')):
            response = self.client.post(reverse('contacts:contact_edit', args=[self.bob.pk]), {
                'first_name': 'Robert', 'last_name': 'Jones',
            })

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Failed to update contact')
        self.bob.refresh_from_db()
        self.assertEqual(self.bob.first_name, 'Bob')

    def test_delete(self):
        response = self.client.post(reverse('contacts:contact_delete', args=[self.bob.pk]))

        self.assertRedirects(response, reverse('contacts:contact_list'))
        self.assertFalse(Contact.objects.filter(pk=self.bob.pk).exists())


class AccountViewsTest(TestCase):

    def setUp(self):
        cache.clear()
        self.client = Client()
        admin_create_user('sam@crm.com', 'secret123', 'Sam Support', SUPPORT_EXECUTIVE)
        self.client.login(email='sam@crm.com', password='secret123')

        self.acme = Account.objects.create(name='Acme', industry='Technology')
        self.bank = Account.objects.create(name='First Bank', industry='Finance')

    def test_list_and_industry_filter(self):
        response = self.client.get(reverse('contacts:account_list'))
        self.assertEqual(response.context['accounts'], [self.acme, self.bank])

        response = self.client.get(reverse('contacts:account_list'), {'industry': 'Finance'})
        self.assertEqual(response.context['accounts'], [self.bank])

    def test_create(self):
        response = self.client.post(reverse('contacts:account_create'), {
            'name': 'Initech', 'industry': 'Technology', 'website': 'https://initech.example',
            'employees': '120', 'annual_revenue': '5000000',
        })

        self.assertRedirects(response, reverse('contacts:account_list'))
        self.assertEqual(Account.objects.get(name='Initech').employees, 120)

    def test_failed_edit_keeps_original(self):
        with mock.patch.object(Account, 'save', side_effect=DatabaseError('down')):
            response = self.client.post(reverse('contacts:account_edit', args=[self.acme.pk]), {
                'name': 'Acme Corp', 'industry': 'Technology', 'employees': '0', 'annual_revenue': '0',
            })

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Failed to update account')
        self.acme.refresh_from_db()
        self.assertEqual(self.acme.name, 'Acme')

    def test_delete_keeps_contacts(self):
        contact = Contact.objects.create(first_name='Alice', account=self.acme)

        self.client.post(reverse('contacts:account_delete', args=[self.acme.pk]))

        contact.refresh_from_db()
        self.assertIsNone(contact.account)

    def test_marketing_cannot_open_accounts(self):
        admin_create_user('mia@crm.com', 'secret123', 'Mia', MARKETING_EXECUTIVE)
        client = Client()
        client.login(email='mia@crm.com', password='secret123')

        response = client.get(reverse('contacts:account_list'))
        self.assertRedirects(response, reverse('core:dashboard'))
