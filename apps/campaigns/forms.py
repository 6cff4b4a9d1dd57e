from django import forms
from django.utils.translation import gettext_lazy as _

from apps.core.forms import entity_helper, style_widgets
from .models import Campaign


class CampaignForm(forms.ModelForm):

    class Meta:
        model = Campaign
        fields = ['name', 'type', 'status', 'start_date', 'end_date', 'budget', 'leads_generated', 'conversion_rate']
        widgets = {
            'start_date': forms.DateInput(attrs={'type': 'date'}),
            'end_date': forms.DateInput(attrs={'type': 'date'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_widgets(self)
        self.helper = entity_helper(
            _('Campaign'),
            'campaigns:campaign_list',
            'name',
            ('type', 'status'),
            ('start_date', 'end_date'),
            ('budget', 'leads_generated', 'conversion_rate'),
        )

    def clean(self):
        cleaned_data = super().clean()
        start = cleaned_data.get('start_date')
        end = cleaned_data.get('end_date')

        if start and end and end < start:
            self.add_error('end_date', 'End date cannot be before the start date')

        return cleaned_data
