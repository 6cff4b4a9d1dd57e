from django.shortcuts import render, redirect, get_object_or_404

from apps.accounts.decorators import module_required
from apps.accounts.permissions import CAMPAIGNS
from apps.core.utils import load_list, search_filter, apply_filters, save_form, delete_instance
from .forms import CampaignForm
from .models import Campaign


@module_required(CAMPAIGNS)
def campaign_list_view(request):
    search_query = request.GET.get('search', '').strip()

    campaigns = search_filter(Campaign.objects.all(), search_query, ['name'])
    campaigns, filters = apply_filters(request, campaigns, ['status'])

    context = {
        'campaigns': load_list(request, campaigns, 'Failed to load campaigns'),
        'status_choices': Campaign.STATUS_CHOICES,
        'search_query': search_query,
        'filters': filters,
        'active_page': 'campaigns',
    }
    return render(request, 'campaigns/campaign_list.html', context)


@module_required(CAMPAIGNS)
def campaign_create_view(request):
    form = CampaignForm(request.POST or None)
    if request.method == 'POST' and form.is_valid():
        if save_form(request, form, 'Campaign "{}" created successfully', 'Failed to create campaign'):
            return redirect('campaigns:campaign_list')

    context = {
        'form': form,
        'form_title': 'Add Campaign',
        'active_page': 'campaigns',
    }
    return render(request, 'core/entity_form.html', context)


@module_required(CAMPAIGNS)
def campaign_edit_view(request, pk):
    campaign = get_object_or_404(Campaign, pk=pk)
    form = CampaignForm(request.POST or None, instance=campaign)
    if request.method == 'POST' and form.is_valid():
        if save_form(request, form, 'Campaign "{}" updated successfully', 'Failed to update campaign'):
            return redirect('campaigns:campaign_list')

    context = {
        'form': form,
        'object': campaign,
        'form_title': f'Edit Campaign: {campaign.name}',
        'active_page': 'campaigns',
    }
    return render(request, 'core/entity_form.html', context)


@module_required(CAMPAIGNS)
def campaign_delete_view(request, pk):
    campaign = get_object_or_404(Campaign, pk=pk)

    if request.method == 'POST':
        delete_instance(request, campaign, 'Failed to delete campaign')
        return redirect('campaigns:campaign_list')

    context = {
        'object': campaign,
        'object_label': campaign.name,
        'cancel_url': 'campaigns:campaign_list',
        'active_page': 'campaigns',
    }
    return render(request, 'core/entity_confirm_delete.html', context)
