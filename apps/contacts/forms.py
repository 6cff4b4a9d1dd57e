from django import forms
from django.utils.translation import gettext_lazy as _

from apps.core.forms import entity_helper, style_widgets
from .models import Account, Contact


class AccountForm(forms.ModelForm):

    class Meta:
        model = Account
        fields = ['name', 'industry', 'website', 'phone', 'address', 'employees', 'annual_revenue']
        widgets = {
            'address': forms.Textarea(attrs={'rows': 3}),
            'website': forms.URLInput(attrs={'placeholder': 'https://'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_widgets(self)
        self.helper = entity_helper(
            _('Account'),
            'contacts:account_list',
            ('name', 'industry'),
            ('website', 'phone'),
            'address',
            ('employees', 'annual_revenue'),
        )


class ContactForm(forms.ModelForm):

    class Meta:
        model = Contact
        fields = ['first_name', 'last_name', 'email', 'phone', 'account', 'position']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['account'].empty_label = "No account"
        style_widgets(self)
        self.helper = entity_helper(
            _('Contact'),
            'contacts:contact_list',
            ('first_name', 'last_name'),
            ('email', 'phone'),
            ('account', 'position'),
        )
