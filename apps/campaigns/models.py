from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models


class Campaign(models.Model):

    TYPE_CHOICES = [
        ('Email', 'Email'),
        ('Social Media', 'Social Media'),
        ('Event', 'Event'),
        ('Webinar', 'Webinar'),
        ('Advertising', 'Advertising'),
        ('Other', 'Other'),
    ]

    STATUS_CHOICES = [
        ('Planning', 'Planning'),
        ('Active', 'Active'),
        ('Completed', 'Completed'),
        ('Cancelled', 'Cancelled'),
    ]

    name = models.CharField(max_length=200)
    type = models.CharField(max_length=30, choices=TYPE_CHOICES, default='Email')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='Planning', db_index=True)
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    budget = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    leads_generated = models.PositiveIntegerField(default=0)
    conversion_rate = models.DecimalField(max_digits=5, decimal_places=2, default=0, validators=[MinValueValidator(0), MaxValueValidator(100)], help_text='Percent of generated leads that converted')

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = 'Campaign'
        verbose_name_plural = 'Campaigns'
        ordering = ['-start_date', '-id']

    def __str__(self):
        return self.name

    @property
    def cost_per_lead(self):
        if not self.leads_generated:
            return None
        return self.budget / self.leads_generated
