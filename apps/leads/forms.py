from django import forms
from django.utils.translation import gettext_lazy as _

from apps.accounts.models import Profile
from apps.core.forms import entity_helper, style_widgets
from .models import Lead


class LeadForm(forms.ModelForm):

    class Meta:
        model = Lead
        fields = ['name', 'email', 'phone', 'company', 'status', 'source', 'assigned_to', 'value', 'notes']
        widgets = {
            'name': forms.TextInput(attrs={'placeholder': 'e.g. Jane Smith', 'autofocus': True}),
            'notes': forms.Textarea(attrs={'rows': 4, 'placeholder': 'Add any notes here...'}),
        }
        error_messages = {
            'name': {'required': 'Name is required', 'max_length': 'Name is too long (max 200 characters)'},
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['assigned_to'].queryset = Profile.objects.filter(enabled=True).order_by('name')
        self.fields['assigned_to'].empty_label = "Unassigned"
        style_widgets(self)

        self.helper = entity_helper(
            _('Lead'),
            'leads:lead_list',
            ('name', 'company'),
            ('email', 'phone'),
            ('status', 'source'),
            ('assigned_to', 'value'),
            'notes',
        )

    def clean_name(self):
        name = self.cleaned_data.get('name', '').strip()
        if len(name) < 2:
            raise forms.ValidationError('Name must be at least 2 characters')
        return name

    def clean_value(self):
        value = self.cleaned_data.get('value')
        if value is not None and value < 0:
            raise forms.ValidationError('Value cannot be negative')
        return value


class LeadFilterForm(forms.Form):
    search = forms.CharField(required=False, widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Search name, email or company...'}))
    status = forms.ChoiceField(required=False, choices=[('', 'All Statuses')] + Lead.STATUS_CHOICES, widget=forms.Select(attrs={'class': 'form-select'}))
    source = forms.ChoiceField(required=False, choices=[('', 'All Sources')] + Lead.SOURCE_CHOICES, widget=forms.Select(attrs={'class': 'form-select'}))
