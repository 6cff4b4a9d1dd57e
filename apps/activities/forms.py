from django import forms
from django.utils.translation import gettext_lazy as _

from apps.accounts.models import Profile
from apps.core.forms import entity_helper, style_widgets
from .models import Task, Communication


class RelatedRecordMixin:
    """related_to_type and related_to_id are set together or not at all"""

    def clean(self):
        cleaned_data = super().clean()
        related_type = cleaned_data.get('related_to_type')
        related_id = cleaned_data.get('related_to_id')

        if related_type and related_id is None:
            self.add_error('related_to_id', 'Pick the record this relates to')
        elif related_id is not None and not related_type:
            self.add_error('related_to_type', 'Pick what kind of record this relates to')

        return cleaned_data


class TaskForm(RelatedRecordMixin, forms.ModelForm):

    class Meta:
        model = Task
        fields = ['title', 'description', 'type', 'priority', 'status', 'due_date', 'assigned_to', 'related_to_type', 'related_to_id']
        widgets = {
            'description': forms.Textarea(attrs={'rows': 3}),
            'due_date': forms.DateInput(attrs={'type': 'date'}),
        }
        labels = {
            'related_to_type': 'Related to',
            'related_to_id': 'Record ID',
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['assigned_to'].queryset = Profile.objects.filter(enabled=True).order_by('name')
        self.fields['assigned_to'].empty_label = "Unassigned"
        style_widgets(self)
        self.helper = entity_helper(
            _('Task'),
            'activities:task_list',
            'title',
            'description',
            ('type', 'priority', 'status'),
            ('due_date', 'assigned_to'),
            ('related_to_type', 'related_to_id'),
        )


class CommunicationForm(RelatedRecordMixin, forms.ModelForm):

    class Meta:
        model = Communication
        fields = ['type', 'subject', 'content', 'related_to_type', 'related_to_id']
        widgets = {
            'content': forms.Textarea(attrs={'rows': 5}),
        }
        labels = {
            'related_to_type': 'Related to',
            'related_to_id': 'Record ID',
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_widgets(self)
        self.helper = entity_helper(
            _('Communication'),
            'activities:communication_list',
            ('type', 'subject'),
            'content',
            ('related_to_type', 'related_to_id'),
        )
