"""
Tests for the list and mutation helpers shared by the entity screens

Run tests:
    python manage.py test apps.core.tests.test_utils
"""

from unittest import mock

from django.contrib.messages import get_messages
from django.contrib.messages.middleware import MessageMiddleware
from django.contrib.sessions.middleware import SessionMiddleware
from django.db import DatabaseError
from django.test import TestCase, RequestFactory

from apps.core.utils import load_list, search_filter, apply_filters, save_form, delete_instance
from apps.leads.forms import LeadForm
from apps.leads.models import Lead


class CoreUtilsTest(TestCase):

    def setUp(self):
        self.factory = RequestFactory()
        self.acme = Lead.objects.create(name='Alice', company='Acme', status='New')
        self.globex = Lead.objects.create(name='Bob', company='Globex', status='Lost')

    def _request(self, params=None):
        request = self.factory.get('/leads/', params or {})
        SessionMiddleware(lambda x: None).process_request(request)
        MessageMiddleware(lambda x: None).process_request(request)
        return request

    def _messages(self, request):
        return [str(m) for m in get_messages(request)]

    def test_load_list_failure_returns_empty_and_flashes(self):
        request = self._request()
        queryset = mock.MagicMock()
        queryset.__iter__.side_effect = DatabaseError('down')

        self.assertEqual(load_list(request, queryset, 'Failed to load leads'), [])
        self.assertEqual(self._messages(request), ['Failed to load leads'])

    def test_search_filter(self):
        qs = search_filter(Lead.objects.all(), 'glob', ['name', 'company'])
        self.assertEqual(list(qs), [self.globex])

        self.assertEqual(search_filter(Lead.objects.all(), '', ['name']).count(), 2)

    def test_apply_filters(self):
        qs, active = apply_filters(self._request({'status': 'Lost', 'source': ''}), Lead.objects.all(), ['status', 'source'])

        self.assertEqual(list(qs), [self.globex])
        self.assertEqual(active, {'status': 'Lost', 'source': ''})

    def test_apply_filters_ignores_invalid_values(self):
        qs, active = apply_filters(self._request({'assigned_to': 'abc'}), Lead.objects.all(), ['assigned_to'])

        self.assertEqual(qs.count(), 2)
        self.assertEqual(active['assigned_to'], '')

    def test_save_form(self):
        request = self._request()
        form = LeadForm(data={'name': 'Carol', 'status': 'New', 'source': 'Website', 'value': '0'})
        self.assertTrue(form.is_valid())

        lead = save_form(request, form, 'Lead "{}" created successfully', 'Failed to create lead')

        self.assertEqual(lead.name, 'Carol')
        self.assertEqual(self._messages(request), ['Lead "Carol" created successfully'])

    def test_save_form_failure(self):
        request = self._request()
        form = LeadForm(data={'name': 'Carol', 'status': 'New', 'source': 'Website', 'value': '0'})
        self.assertTrue(form.is_valid())

        with mock.patch.object(Lead, 'save', side_effect=DatabaseError('down')):
            result = save_form(request, form, 'Lead "{}" created successfully', 'Failed to create lead')

        self.assertIsNone(result)
        self.assertEqual(self._messages(request), ['Failed to create lead'])

    def test_delete_instance(self):
        request = self._request()

        self.assertTrue(delete_instance(request, self.acme, 'Failed to delete lead'))
        self.assertFalse(Lead.objects.filter(name='Alice').exists())
        self.assertEqual(self._messages(request), ['"Alice" deleted successfully'])

    def test_delete_instance_failure(self):
        request = self._request()

        with mock.patch.object(Lead, 'delete', side_effect=DatabaseError('down')):
            self.assertFalse(delete_instance(request, self.acme, 'Failed to delete lead'))

        self.assertTrue(Lead.objects.filter(name='Alice').exists())
