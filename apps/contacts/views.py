from django.shortcuts import render, redirect, get_object_or_404

from apps.accounts.decorators import module_required
from apps.accounts.permissions import ACCOUNTS, CONTACTS
from apps.core.utils import load_list, search_filter, apply_filters, save_form, delete_instance
from .forms import AccountForm, ContactForm
from .models import Account, Contact


def _render_form(request, form, title, active_page, obj=None):
    context = {
        'form': form,
        'object': obj,
        'form_title': title,
        'active_page': active_page,
    }
    return render(request, 'core/entity_form.html', context)


def _render_delete(request, obj, cancel_url, active_page):
    context = {
        'object': obj,
        'object_label': str(obj),
        'cancel_url': cancel_url,
        'active_page': active_page,
    }
    return render(request, 'core/entity_confirm_delete.html', context)


# CONTACTS
@module_required(CONTACTS)
def contact_list_view(request):
    search_query = request.GET.get('search', '').strip()

    contacts = Contact.objects.select_related('account')
    contacts = search_filter(contacts, search_query, ['first_name', 'last_name', 'email'])
    contacts, filters = apply_filters(request, contacts, ['account'])

    context = {
        'contacts': load_list(request, contacts, 'Failed to load contacts'),
        'accounts': load_list(request, Account.objects.only('id', 'name'), 'Failed to load accounts'),
        'search_query': search_query,
        'filters': filters,
        'active_page': 'contacts',
    }
    return render(request, 'contacts/contact_list.html', context)


@module_required(CONTACTS)
def contact_create_view(request):
    form = ContactForm(request.POST or None)
    if request.method == 'POST' and form.is_valid():
        if save_form(request, form, 'Contact "{}" created successfully', 'Failed to create contact'):
            return redirect('contacts:contact_list')
    return _render_form(request, form, 'Add Contact', 'contacts')


@module_required(CONTACTS)
def contact_edit_view(request, pk):
    contact = get_object_or_404(Contact, pk=pk)
    form = ContactForm(request.POST or None, instance=contact)
    if request.method == 'POST' and form.is_valid():
        if save_form(request, form, 'Contact "{}" updated successfully', 'Failed to update contact'):
            return redirect('contacts:contact_list')
    return _render_form(request, form, f'Edit Contact: {contact.full_name}', 'contacts', contact)


@module_required(CONTACTS)
def contact_delete_view(request, pk):
    contact = get_object_or_404(Contact, pk=pk)
    if request.method == 'POST':
        delete_instance(request, contact, 'Failed to delete contact')
        return redirect('contacts:contact_list')
    return _render_delete(request, contact, 'contacts:contact_list', 'contacts')


# ACCOUNTS
@module_required(ACCOUNTS)
def account_list_view(request):
    search_query = request.GET.get('search', '').strip()

    accounts = search_filter(Account.objects.all(), search_query, ['name', 'industry'])
    accounts, filters = apply_filters(request, accounts, ['industry'])

    context = {
        'accounts': load_list(request, accounts, 'Failed to load accounts'),
        'industry_choices': Account.INDUSTRY_CHOICES,
        'search_query': search_query,
        'filters': filters,
        'active_page': 'accounts',
    }
    return render(request, 'contacts/account_list.html', context)


@module_required(ACCOUNTS)
def account_create_view(request):
    form = AccountForm(request.POST or None)
    if request.method == 'POST' and form.is_valid():
        if save_form(request, form, 'Account "{}" created successfully', 'Failed to create account'):
            return redirect('contacts:account_list')
    return _render_form(request, form, 'Add Account', 'accounts')


@module_required(ACCOUNTS)
def account_edit_view(request, pk):
    account = get_object_or_404(Account, pk=pk)
    form = AccountForm(request.POST or None, instance=account)
    if request.method == 'POST' and form.is_valid():
        if save_form(request, form, 'Account "{}" updated successfully', 'Failed to update account'):
            return redirect('contacts:account_list')
    return _render_form(request, form, f'Edit Account: {account.name}', 'accounts', account)


@module_required(ACCOUNTS)
def account_delete_view(request, pk):
    account = get_object_or_404(Account, pk=pk)
    if request.method == 'POST':
        delete_instance(request, account, 'Failed to delete account')
        return redirect('contacts:account_list')
    return _render_delete(request, account, 'contacts:account_list', 'accounts')
