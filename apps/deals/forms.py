from django import forms
from django.utils.translation import gettext_lazy as _

from apps.accounts.models import Profile
from apps.core.forms import entity_helper, style_widgets
from .models import Deal


class DealForm(forms.ModelForm):

    class Meta:
        model = Deal
        fields = ['title', 'account', 'contact', 'value', 'stage', 'probability', 'expected_close_date', 'assigned_to', 'notes']
        widgets = {
            'expected_close_date': forms.DateInput(attrs={'type': 'date'}),
            'notes': forms.Textarea(attrs={'rows': 4}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['assigned_to'].queryset = Profile.objects.filter(enabled=True).order_by('name')
        self.fields['assigned_to'].empty_label = "Unassigned"
        style_widgets(self)
        self.helper = entity_helper(
            _('Deal'),
            'deals:deal_list',
            'title',
            ('account', 'contact'),
            ('value', 'stage', 'probability'),
            ('expected_close_date', 'assigned_to'),
            'notes',
        )

    def clean(self):
        cleaned_data = super().clean()
        account = cleaned_data.get('account')
        contact = cleaned_data.get('contact')

        if account and contact and contact.account_id and contact.account_id != account.pk:
            self.add_error('contact', 'This contact belongs to a different account')

        return cleaned_data
