from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.accounts.models import Profile


class Notification(models.Model):

    TYPE_CHOICES = [
        ('info', _('Info')),
        ('success', _('Success')),
        ('warning', _('Warning')),
        ('error', _('Error')),
    ]

    user = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name='notifications', help_text=_('Who receives this notification'))
    title = models.CharField(max_length=200)
    message = models.TextField(blank=True)
    type = models.CharField(max_length=10, choices=TYPE_CHOICES, default='info')
    read = models.BooleanField(default=False, db_index=True)
    link = models.CharField(max_length=255, blank=True, help_text=_('Optional in-app path, e.g. /tasks/'))
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        verbose_name = _('Notification')
        verbose_name_plural = _('Notifications')
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.title} → {self.user.name}"
