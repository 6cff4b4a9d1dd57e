"""
Lead model and form tests

Run tests:
    python manage.py test apps.leads.tests.test_models
"""

from django.test import TestCase

from apps.leads.forms import LeadForm
from apps.leads.models import Lead


class LeadModelTest(TestCase):

    def test_defaults(self):
        lead = Lead.objects.create(name='Jane Smith')

        self.assertEqual(lead.status, Lead.STATUS_NEW)
        self.assertEqual(lead.source, 'Website')
        self.assertEqual(lead.value, 0)
        self.assertIsNone(lead.assigned_to)
        self.assertEqual(str(lead), 'Jane Smith')

    def test_initials(self):
        self.assertEqual(Lead(name='jane smith').get_initials(), 'JS')
        self.assertEqual(Lead(name='Cher').get_initials(), 'C')
        self.assertEqual(Lead(name='').get_initials(), '?')

    def test_lost_lead_is_not_open(self):
        self.assertTrue(Lead(name='A', status=Lead.STATUS_QUALIFIED).is_open())
        self.assertFalse(Lead(name='A', status=Lead.STATUS_LOST).is_open())

    def test_newest_first(self):
        first = Lead.objects.create(name='First')
        second = Lead.objects.create(name='Second')

        self.assertEqual(list(Lead.objects.all()), [second, first])


class LeadFormTest(TestCase):

    def _data(self, **overrides):
        data = {'name': 'Jane Smith', 'status': 'New', 'source': 'Referral', 'value': '1500'}
        data.update(overrides)
        return data

    def test_valid(self):
        self.assertTrue(LeadForm(data=self._data()).is_valid())

    def test_name_too_short(self):
        form = LeadForm(data=self._data(name=' J '))
        self.assertFalse(form.is_valid())
        self.assertIn('name', form.errors)

    def test_negative_value_rejected(self):
        form = LeadForm(data=self._data(value='-5'))
        self.assertFalse(form.is_valid())
        self.assertIn('value', form.errors)

    def test_unknown_status_rejected(self):
        form = LeadForm(data=self._data(status='Won'))
        self.assertFalse(form.is_valid())
