from django import forms
from django.utils.translation import gettext_lazy as _
from crispy_forms.helper import FormHelper
from crispy_forms.layout import Layout, Fieldset, Submit, Div, Field, HTML
from crispy_forms.bootstrap import FormActions

from .models import Profile
from .permissions import ROLE_CHOICES, SALES_EXECUTIVE

MIN_PASSWORD_LENGTH = 6


# LOGIN FORM
class LoginForm(forms.Form):
    email = forms.EmailField(
        label=_('Email Address'),
        max_length=255,
        required=True,
        widget=forms.EmailInput(attrs={
            'class': 'form-control',
            'placeholder': _('you@company.com'),
            'autofocus': True,
        })
    )

    password = forms.CharField(
        label=_('Password'),
        required=True,
        widget=forms.PasswordInput(attrs={
            'class': 'form-control',
            'placeholder': _('Enter your password'),
        })
    )

    remember = forms.BooleanField(
        label=_('Remember me'),
        required=False,
        initial=False,
        widget=forms.CheckboxInput(attrs={
            'class': 'form-check-input',
        })
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.helper = FormHelper()
        self.helper.form_method = 'post'
        self.helper.layout = Layout(
            Field('email', css_class='mb-3'),
            Field('password', css_class='mb-3'),
            Field('remember', css_class='mb-3'),
            FormActions(
                Submit('submit', _('Sign in'), css_class='btn btn-primary w-100')
            )
        )

    def clean_email(self):
        email = self.cleaned_data.get('email', '')
        return email.lower().strip()


# SIGNUP FORM
class SignupForm(forms.Form):
    email = forms.EmailField(
        label=_('Email Address'),
        max_length=255,
        widget=forms.EmailInput(attrs={'class': 'form-control', 'autofocus': True})
    )
    password = forms.CharField(
        label=_('Password'),
        min_length=MIN_PASSWORD_LENGTH,
        widget=forms.PasswordInput(attrs={'class': 'form-control'})
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.helper = FormHelper()
        self.helper.form_method = 'post'
        self.helper.add_input(Submit('submit', _('Create account'), css_class='btn btn-primary w-100'))

    def clean_email(self):
        return self.cleaned_data.get('email', '').lower().strip()


# ADMIN: CREATE USER
class UserCreateForm(forms.Form):
    name = forms.CharField(label=_('Full Name'), max_length=150, widget=forms.TextInput(attrs={'class': 'form-control'}))
    email = forms.EmailField(label=_('Email Address'), max_length=255, widget=forms.EmailInput(attrs={'class': 'form-control'}))
    role = forms.ChoiceField(label=_('Role'), choices=ROLE_CHOICES, initial=SALES_EXECUTIVE, widget=forms.Select(attrs={'class': 'form-select'}))
    password = forms.CharField(
        label=_('Password'),
        min_length=MIN_PASSWORD_LENGTH,
        widget=forms.PasswordInput(attrs={'class': 'form-control'}),
        help_text=_('At least 6 characters'),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.helper = FormHelper()
        self.helper.form_method = 'post'
        self.helper.layout = Layout(
            Fieldset(
                _('New User'),
                Div(
                    Div('name', css_class='col-md-6'),
                    Div('email', css_class='col-md-6'),
                    css_class='row'
                ),
                Div(
                    Div('role', css_class='col-md-6'),
                    Div('password', css_class='col-md-6'),
                    css_class='row'
                ),
            ),
            FormActions(
                Submit('submit', _('Create'), css_class='btn btn-primary'),
                HTML('<a href="{% url \'accounts:user_list\' %}" class="btn btn-secondary">Cancel</a>'),
            )
        )

    def clean_email(self):
        return self.cleaned_data.get('email', '').lower().strip()


# ADMIN: EDIT USER
class UserEditForm(forms.ModelForm):
    """Role and status; a new password is optional"""

    new_password = forms.CharField(
        label=_('New Password'),
        required=False,
        min_length=MIN_PASSWORD_LENGTH,
        widget=forms.PasswordInput(attrs={'class': 'form-control'}),
        help_text=_('Leave empty to keep the current password'),
    )

    class Meta:
        model = Profile
        fields = ['name', 'role', 'enabled']
        widgets = {
            'name': forms.TextInput(attrs={'class': 'form-control'}),
            'role': forms.Select(attrs={'class': 'form-select'}),
            'enabled': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.helper = FormHelper()
        self.helper.form_method = 'post'
        self.helper.layout = Layout(
            Fieldset(
                _('Role & Status'),
                'name',
                Div(
                    Div('role', css_class='col-md-6'),
                    Div('enabled', css_class='col-md-6'),
                    css_class='row'
                ),
                'new_password',
            ),
            FormActions(
                Submit('submit', _('Update'), css_class='btn btn-primary'),
                HTML('<a href="{% url \'accounts:user_list\' %}" class="btn btn-secondary">Cancel</a>'),
            )
        )


# SECURITY: CHANGE OWN PASSWORD
class PasswordUpdateForm(forms.Form):
    new_password = forms.CharField(
        label=_('New password'),
        widget=forms.PasswordInput(attrs={'class': 'form-control'})
    )
    confirm_password = forms.CharField(
        label=_('Confirm password'),
        widget=forms.PasswordInput(attrs={'class': 'form-control'})
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.helper = FormHelper()
        self.helper.form_method = 'post'
        self.helper.add_input(Submit('submit', _('Update password'), css_class='btn btn-primary'))

    def clean(self):
        cleaned_data = super().clean()
        new_password = cleaned_data.get('new_password')
        confirm_password = cleaned_data.get('confirm_password')

        if new_password and confirm_password:
            if new_password != confirm_password:
                raise forms.ValidationError(_('Passwords do not match.'))
            if len(new_password) < MIN_PASSWORD_LENGTH:
                raise forms.ValidationError(_('Password must be at least 6 characters.'))

        return cleaned_data
