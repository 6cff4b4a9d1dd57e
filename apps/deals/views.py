from django.shortcuts import render, redirect, get_object_or_404

from apps.accounts.decorators import module_required
from apps.accounts.permissions import DEALS
from apps.core.utils import load_list, search_filter, apply_filters, save_form, delete_instance
from .forms import DealForm
from .models import Deal


@module_required(DEALS)
def deal_list_view(request):
    search_query = request.GET.get('search', '').strip()

    deals = Deal.objects.select_related('account', 'contact', 'assigned_to')
    deals = search_filter(deals, search_query, ['title'])
    deals, filters = apply_filters(request, deals, ['stage'])
    deals = load_list(request, deals, 'Failed to load deals')

    context = {
        'deals': deals,
        'open_value': sum(d.value for d in deals if d.is_open()),
        'stage_choices': Deal.STAGE_CHOICES,
        'search_query': search_query,
        'filters': filters,
        'active_page': 'deals',
    }
    return render(request, 'deals/deal_list.html', context)


@module_required(DEALS)
def deal_create_view(request):
    form = DealForm(request.POST or None)
    if request.method == 'POST' and form.is_valid():
        if save_form(request, form, 'Deal "{}" created successfully', 'Failed to create deal'):
            return redirect('deals:deal_list')

    context = {
        'form': form,
        'form_title': 'Add Deal',
        'active_page': 'deals',
    }
    return render(request, 'core/entity_form.html', context)


@module_required(DEALS)
def deal_edit_view(request, pk):
    deal = get_object_or_404(Deal, pk=pk)
    form = DealForm(request.POST or None, instance=deal)
    if request.method == 'POST' and form.is_valid():
        if save_form(request, form, 'Deal "{}" updated successfully', 'Failed to update deal'):
            return redirect('deals:deal_list')

    context = {
        'form': form,
        'object': deal,
        'form_title': f'Edit Deal: {deal.title}',
        'active_page': 'deals',
    }
    return render(request, 'core/entity_form.html', context)


@module_required(DEALS)
def deal_delete_view(request, pk):
    deal = get_object_or_404(Deal, pk=pk)

    if request.method == 'POST':
        delete_instance(request, deal, 'Failed to delete deal')
        return redirect('deals:deal_list')

    context = {
        'object': deal,
        'object_label': deal.title,
        'cancel_url': 'deals:deal_list',
        'active_page': 'deals',
    }
    return render(request, 'core/entity_confirm_delete.html', context)
