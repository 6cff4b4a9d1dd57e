from django.db import models

from apps.accounts.models import Profile


class Lead(models.Model):

    STATUS_NEW = 'New'
    STATUS_CONTACTED = 'Contacted'
    STATUS_QUALIFIED = 'Qualified'
    STATUS_LOST = 'Lost'

    STATUS_CHOICES = [
        (STATUS_NEW, 'New'),
        (STATUS_CONTACTED, 'Contacted'),
        (STATUS_QUALIFIED, 'Qualified'),
        (STATUS_LOST, 'Lost'),
    ]

    SOURCE_CHOICES = [
        ('Website', 'Website'),
        ('Referral', 'Referral'),
        ('Social Media', 'Social Media'),
        ('Email Campaign', 'Email Campaign'),
        ('Cold Call', 'Cold Call'),
        ('Event', 'Event'),
        ('Other', 'Other'),
    ]

    # Basic Information
    name = models.CharField(max_length=200, help_text="Lead's full name")
    email = models.EmailField(blank=True, help_text='Email address (optional)')
    phone = models.CharField(max_length=30, blank=True)
    company = models.CharField(max_length=200, blank=True, help_text='Company the lead works for')

    # Classification
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_NEW, db_index=True)
    source = models.CharField(max_length=30, choices=SOURCE_CHOICES, default='Website', db_index=True, help_text='Where did this lead come from?')

    # Assignment & value
    assigned_to = models.ForeignKey(Profile, on_delete=models.SET_NULL, null=True, blank=True, related_name='assigned_leads', help_text='Who is responsible for this lead')
    value = models.DecimalField(max_digits=12, decimal_places=2, default=0, help_text='Estimated value')
    notes = models.TextField(blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Lead'
        verbose_name_plural = 'Leads'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.name

    def get_initials(self):
        parts = self.name.split()
        if len(parts) >= 2:
            return f"{parts[0][0]}{parts[1][0]}".upper()
        elif len(parts) == 1:
            return parts[0][0].upper()
        return "?"

    def is_open(self):
        return self.status != self.STATUS_LOST
