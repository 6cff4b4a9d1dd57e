"""
Lead views tests

Test Coverage:
1. List: search, filters, module gate
2. Create / edit / delete

Run tests:
    python manage.py test apps.leads.tests.test_views
"""

from unittest import mock

from django.core.cache import cache
from django.db import DatabaseError
from django.test import TestCase, Client
from django.urls import reverse

from apps.accounts.permissions import MARKETING_EXECUTIVE, SUPPORT_EXECUTIVE
from apps.accounts.services import admin_create_user
from apps.leads.models import Lead


class LeadViewsTest(TestCase):

    def setUp(self):
        cache.clear()
        self.client = Client()
        self.profile = admin_create_user('mia@crm.com', 'secret123', 'Mia Marketing', MARKETING_EXECUTIVE)
        self.client.login(email='mia@crm.com', password='secret123')

        self.acme = Lead.objects.create(name='Alice Acme', company='Acme', email='alice@acme.com', status='Qualified', source='Referral')
        self.globex = Lead.objects.create(name='Bob Globex', company='Globex', status='New', source='Website')

    def test_list(self):
        response = self.client.get(reverse('leads:lead_list'))

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'leads/lead_list.html')
        self.assertEqual(len(response.context['leads']), 2)

    def test_search_matches_company_and_email(self):
        response = self.client.get(reverse('leads:lead_list'), {'search': 'acme'})
        self.assertEqual(response.context['leads'], [self.acme])

        response = self.client.get(reverse('leads:lead_list'), {'search': 'ALICE@'})
        self.assertEqual(response.context['leads'], [self.acme])

    def test_filters(self):
        response = self.client.get(reverse('leads:lead_list'), {'status': 'New'})
        self.assertEqual(response.context['leads'], [self.globex])
        self.assertEqual(response.context['filters']['status'], 'New')

        response = self.client.get(reverse('leads:lead_list'), {'status': 'New', 'source': 'Referral'})
        self.assertEqual(response.context['leads'], [])

    def test_role_without_leads_is_redirected(self):
        admin_create_user('sam@crm.com', 'secret123', 'Sam Support', SUPPORT_EXECUTIVE)
        client = Client()
        client.login(email='sam@crm.com', password='secret123')

        response = client.get(reverse('leads:lead_list'))
        self.assertRedirects(response, reverse('core:dashboard'))

    def test_create(self):
        response = self.client.post(reverse('leads:lead_create'), {
            'name': 'Carol Initech',
            'company': 'Initech',
            'status': 'Contacted',
            'source': 'Event',
            'assigned_to': self.profile.pk,
            'value': '2500',
        })

        self.assertRedirects(response, reverse('leads:lead_list'))
        lead = Lead.objects.get(name='Carol Initech')
        self.assertEqual(lead.assigned_to, self.profile)

    def test_create_invalid_rerenders_form(self):
        response = self.client.post(reverse('leads:lead_create'), {'name': '', 'status': 'New', 'source': 'Website', 'value': '0'})

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'core/entity_form.html')
        self.assertIn('name', response.context['form'].errors)

    def test_create_database_failure(self):
        with mock.patch.object(Lead, 'save', side_effect=DatabaseError('down')):
            response = self.client.post(reverse('leads:lead_create'), {
                'name': 'Carol Initech', 'status': 'New', 'source': 'Website', 'value': '0',
            })

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Failed to create lead')
        self.assertFalse(Lead.objects.filter(name='Carol Initech').exists())

    def test_edit(self):
        response = self.client.post(reverse('leads:lead_edit', args=[self.globex.pk]), {
            'name': 'Bob Globex', 'company': 'Globex', 'status': 'Lost', 'source': 'Website', 'value': '0',
        })

        self.assertRedirects(response, reverse('leads:lead_list'))
        self.globex.refresh_from_db()
        self.assertEqual(self.globex.status, 'Lost')

    def test_failed_edit_keeps_original(self):
        with mock.patch.object(Lead, 'save', side_effect=DatabaseError('down')):
            response = self.client.post(reverse('leads:lead_edit', args=[self.globex.pk]), {
                'name': 'Bob Globex', 'status': 'Lost', 'source': 'Website', 'value': '0',
            })

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Failed to update lead')
        self.globex.refresh_from_db()
        self.assertEqual(self.globex.status, 'New')

    def test_edit_missing_lead(self):
        response = self.client.get(reverse('leads:lead_edit', args=[9999]))
        self.assertEqual(response.status_code, 404)

    def test_delete_confirm_then_delete(self):
        url = reverse('leads:lead_delete', args=[self.acme.pk])

        response = self.client.get(url)
        self.assertTemplateUsed(response, 'core/entity_confirm_delete.html')

        response = self.client.post(url)
        self.assertRedirects(response, reverse('leads:lead_list'))
        self.assertFalse(Lead.objects.filter(pk=self.acme.pk).exists())
