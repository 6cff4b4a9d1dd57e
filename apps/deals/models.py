from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models

from apps.accounts.models import Profile
from apps.contacts.models import Account, Contact


class Deal(models.Model):

    STAGE_PROSPECTING = 'Prospecting'
    STAGE_PROPOSAL = 'Proposal'
    STAGE_NEGOTIATION = 'Negotiation'
    STAGE_CLOSED_WON = 'Closed Won'
    STAGE_CLOSED_LOST = 'Closed Lost'

    STAGE_CHOICES = [
        (STAGE_PROSPECTING, 'Prospecting'),
        (STAGE_PROPOSAL, 'Proposal'),
        (STAGE_NEGOTIATION, 'Negotiation'),
        (STAGE_CLOSED_WON, 'Closed Won'),
        (STAGE_CLOSED_LOST, 'Closed Lost'),
    ]

    # Stages that still count towards the pipeline
    OPEN_STAGES = (STAGE_PROSPECTING, STAGE_PROPOSAL, STAGE_NEGOTIATION)

    title = models.CharField(max_length=200)
    account = models.ForeignKey(Account, on_delete=models.SET_NULL, null=True, blank=True, related_name='deals')
    contact = models.ForeignKey(Contact, on_delete=models.SET_NULL, null=True, blank=True, related_name='deals')
    value = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    stage = models.CharField(max_length=20, choices=STAGE_CHOICES, default=STAGE_PROSPECTING, db_index=True)
    probability = models.PositiveSmallIntegerField(default=10, validators=[MinValueValidator(0), MaxValueValidator(100)], help_text='Chance of closing, 0-100')
    expected_close_date = models.DateField(null=True, blank=True)
    assigned_to = models.ForeignKey(Profile, on_delete=models.SET_NULL, null=True, blank=True, related_name='assigned_deals')
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Deal'
        verbose_name_plural = 'Deals'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title

    def is_open(self):
        return self.stage in self.OPEN_STAGES

    @property
    def weighted_value(self):
        return self.value * self.probability / 100
