import logging

from django.shortcuts import render, redirect, get_object_or_404

from apps.accounts.decorators import module_required
from apps.accounts.permissions import LEADS
from apps.core.utils import load_list, search_filter, apply_filters, save_form, delete_instance
from .forms import LeadForm, LeadFilterForm
from .models import Lead

logger = logging.getLogger(__name__)


@module_required(LEADS)
def lead_list_view(request):
    """
    Leads list with search and filters

    GET parameters:
    - search: name, email or company
    - status / source: exact match
    """
    search_query = request.GET.get('search', '').strip()

    leads = Lead.objects.select_related('assigned_to')
    leads = search_filter(leads, search_query, ['name', 'email', 'company'])
    leads, filters = apply_filters(request, leads, ['status', 'source'])

    context = {
        'leads': load_list(request, leads, 'Failed to load leads'),
        'filter_form': LeadFilterForm(request.GET or None),
        'search_query': search_query,
        'filters': filters,
        'active_page': 'leads',
    }
    return render(request, 'leads/lead_list.html', context)


@module_required(LEADS)
def lead_create_view(request):
    if request.method == 'POST':
        form = LeadForm(request.POST)
        if form.is_valid():
            lead = save_form(request, form, 'Lead "{}" created successfully', 'Failed to create lead')
            if lead is not None:
                logger.info("Lead %s created by profile %s", lead.pk, request.crm_session.current_user.pk)
                return redirect('leads:lead_list')
    else:
        form = LeadForm()

    context = {
        'form': form,
        'form_title': 'Add Lead',
        'active_page': 'leads',
    }
    return render(request, 'core/entity_form.html', context)


@module_required(LEADS)
def lead_edit_view(request, pk):
    lead = get_object_or_404(Lead, pk=pk)

    if request.method == 'POST':
        form = LeadForm(request.POST, instance=lead)
        if form.is_valid():
            if save_form(request, form, 'Lead "{}" updated successfully', 'Failed to update lead'):
                return redirect('leads:lead_list')
    else:
        form = LeadForm(instance=lead)

    context = {
        'form': form,
        'object': lead,
        'form_title': f'Edit Lead: {lead.name}',
        'active_page': 'leads',
    }
    return render(request, 'core/entity_form.html', context)


@module_required(LEADS)
def lead_delete_view(request, pk):
    lead = get_object_or_404(Lead, pk=pk)

    if request.method == 'POST':
        delete_instance(request, lead, 'Failed to delete lead')
        return redirect('leads:lead_list')

    context = {
        'object': lead,
        'object_label': lead.name,
        'cancel_url': 'leads:lead_list',
        'active_page': 'leads',
    }
    return render(request, 'core/entity_confirm_delete.html', context)
