from django.db import models
from django.utils import timezone

from apps.accounts.models import Profile

RELATED_TO_CHOICES = [
    ('Lead', 'Lead'),
    ('Contact', 'Contact'),
    ('Deal', 'Deal'),
    ('Account', 'Account'),
]


class Task(models.Model):

    TYPE_CHOICES = [
        ('Task', 'Task'),
        ('Call', 'Call'),
        ('Meeting', 'Meeting'),
        ('Follow-up', 'Follow-up'),
    ]

    PRIORITY_CHOICES = [
        ('Low', 'Low'),
        ('Medium', 'Medium'),
        ('High', 'High'),
    ]

    STATUS_PENDING = 'Pending'
    STATUS_IN_PROGRESS = 'In Progress'
    STATUS_COMPLETED = 'Completed'

    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_IN_PROGRESS, 'In Progress'),
        (STATUS_COMPLETED, 'Completed'),
    ]

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default='Task')
    priority = models.CharField(max_length=10, choices=PRIORITY_CHOICES, default='Medium', db_index=True)
    due_date = models.DateField(null=True, blank=True, db_index=True)
    assigned_to = models.ForeignKey(Profile, on_delete=models.SET_NULL, null=True, blank=True, related_name='assigned_tasks')
    related_to_type = models.CharField(max_length=20, choices=RELATED_TO_CHOICES, blank=True)
    related_to_id = models.PositiveBigIntegerField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = 'Task'
        verbose_name_plural = 'Tasks'
        ordering = ['due_date', '-created_at']

    def __str__(self):
        return self.title

    def is_completed(self):
        return self.status == self.STATUS_COMPLETED

    def is_overdue(self):
        return bool(self.due_date) and not self.is_completed() and self.due_date < timezone.localdate()


class Communication(models.Model):

    TYPE_CHOICES = [
        ('Email', 'Email'),
        ('Call', 'Call'),
        ('Note', 'Note'),
        ('Document', 'Document'),
    ]

    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default='Note', db_index=True)
    subject = models.CharField(max_length=200)
    content = models.TextField(blank=True)
    related_to_type = models.CharField(max_length=20, choices=RELATED_TO_CHOICES, blank=True)
    related_to_id = models.PositiveBigIntegerField(null=True, blank=True)
    created_by = models.ForeignKey(Profile, on_delete=models.SET_NULL, null=True, blank=True, related_name='communications')

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        verbose_name = 'Communication'
        verbose_name_plural = 'Communications'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.subject
