from django import forms
from django.utils.translation import gettext_lazy as _
from crispy_forms.helper import FormHelper
from crispy_forms.layout import Layout, Fieldset, Submit, Div, HTML
from crispy_forms.bootstrap import FormActions

from .models import OrganizationSettings


def entity_helper(legend, cancel_url, *rows, submit_text=_('Save')):
    """
    Crispy helper used by every entity form

    Each row is a field name or a tuple of field names laid out side by side.
    """
    layout_rows = []
    for row in rows:
        if isinstance(row, str):
            layout_rows.append(row)
            continue
        width = 12 // len(row)
        layout_rows.append(Div(*[Div(name, css_class=f'col-md-{width}') for name in row], css_class='row'))

    helper = FormHelper()
    helper.form_method = 'post'
    helper.layout = Layout(
        Fieldset(legend, *layout_rows),
        FormActions(
            Submit('submit', submit_text, css_class='btn btn-primary'),
            HTML(f'<a href="{{% url \'{cancel_url}\' %}}" class="btn btn-secondary">Cancel</a>'),
        )
    )
    return helper


def style_widgets(form):
    """Bootstrap classes on every widget"""
    for field in form.fields.values():
        widget = field.widget
        if isinstance(widget, (forms.Select, forms.SelectMultiple)):
            css_class = 'form-select'
        elif isinstance(widget, forms.CheckboxInput):
            css_class = 'form-check-input'
        else:
            css_class = 'form-control'
        widget.attrs.setdefault('class', css_class)


# ORGANIZATION SETTINGS
class OrganizationSettingsForm(forms.ModelForm):

    class Meta:
        model = OrganizationSettings
        fields = ['company_name', 'currency', 'timezone', 'working_hours_start', 'working_hours_end']
        widgets = {
            'working_hours_start': forms.TimeInput(attrs={'type': 'time'}, format='%H:%M'),
            'working_hours_end': forms.TimeInput(attrs={'type': 'time'}, format='%H:%M'),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_widgets(self)
        self.helper = entity_helper(
            _('Organization'),
            'core:dashboard',
            'company_name',
            ('currency', 'timezone'),
            ('working_hours_start', 'working_hours_end'),
            submit_text=_('Save Settings'),
        )

    def clean(self):
        cleaned_data = super().clean()
        start = cleaned_data.get('working_hours_start')
        end = cleaned_data.get('working_hours_end')

        if start and end and start >= end:
            raise forms.ValidationError(_('Working hours must end after they start.'))

        return cleaned_data


class HolidayForm(forms.Form):
    date = forms.DateField(
        label=_('Holiday'),
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'})
    )
