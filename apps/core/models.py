import datetime

from django.db import models
from django.utils.translation import gettext_lazy as _


class OrganizationSettings(models.Model):
    """
    Organization-wide settings

    There is exactly one row; use OrganizationSettings.load() to read it.
    Holidays are stored as a sorted list of ISO dates ("2026-12-25").
    """

    SINGLETON_PK = 1

    company_name = models.CharField(_('company name'), max_length=200, default='CRM Pro')
    currency = models.CharField(_('currency'), max_length=3, default='USD', help_text=_('ISO 4217 code, e.g. USD'))
    timezone = models.CharField(_('timezone'), max_length=50, default='UTC')
    working_hours_start = models.TimeField(_('working hours start'), default=datetime.time(9, 0))
    working_hours_end = models.TimeField(_('working hours end'), default=datetime.time(17, 0))
    holidays = models.JSONField(_('holidays'), default=list, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('organization settings')
        verbose_name_plural = _('organization settings')

    def __str__(self):
        return self.company_name

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        settings_row, _created = cls.objects.get_or_create(pk=cls.SINGLETON_PK)
        return settings_row

    def add_holiday(self, day):
        """Add a date; returns False if it was already listed"""
        value = day.isoformat()
        if value in self.holidays:
            return False
        self.holidays = sorted(self.holidays + [value])
        return True

    def remove_holiday(self, value):
        if value not in self.holidays:
            return False
        self.holidays = [d for d in self.holidays if d != value]
        return True
