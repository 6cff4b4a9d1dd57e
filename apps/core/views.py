import logging

from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import render, redirect
from django.views.decorators.http import require_POST

from apps.accounts.decorators import admin_required, module_required
from apps.accounts.permissions import DASHBOARD, REPORTS
from .forms import OrganizationSettingsForm, HolidayForm
from .models import OrganizationSettings
from .reports import REPORT_BUILDERS, build_report, dashboard_data, export_csv, export_excel

logger = logging.getLogger(__name__)

EMPTY_DASHBOARD = {
    'kpis': {
        'total_leads': 0,
        'qualified_leads': 0,
        'total_deals': 0,
        'pipeline_value': 0,
        'pending_tasks': 0,
    },
    'charts': {'lead_status': [], 'deal_stages': [], 'monthly_revenue': []},
}


def home_view(request):
    """Public landing page; signed-in users go straight to the dashboard"""
    if request.crm_session.is_authenticated:
        return redirect('core:dashboard')
    return render(request, 'core/home.html')


@module_required(DASHBOARD)
def dashboard_view(request):
    try:
        data = dashboard_data()
    except DatabaseError:
        logger.exception("Failed to load dashboard data")
        messages.error(request, 'Failed to load dashboard data')
        data = EMPTY_DASHBOARD

    context = {
        'kpis': data['kpis'],
        'charts': data['charts'],
        'active_page': 'dashboard',
    }
    return render(request, 'core/dashboard.html', context)


# REPORTS
def _report_type(request):
    report_type = request.GET.get('type', 'sales')
    return report_type if report_type in REPORT_BUILDERS else 'sales'


@module_required(REPORTS)
def reports_view(request):
    report_type = _report_type(request)

    try:
        report = build_report(report_type)
    except DatabaseError:
        logger.exception("Failed to build %s report", report_type)
        messages.error(request, 'Failed to load report data')
        report = {'summary': {}, 'headers': [], 'rows': [], 'charts': {}}

    context = {
        'report_type': report_type,
        'report_types': list(REPORT_BUILDERS),
        'report': report,
        'active_page': 'reports',
    }
    return render(request, 'core/reports.html', context)


@module_required(REPORTS)
def report_export_view(request):
    report_type = _report_type(request)
    export_format = request.GET.get('format', 'excel')

    if export_format not in ('excel', 'csv'):
        messages.error(request, 'Invalid export format')
        return redirect('core:reports')

    try:
        report = build_report(report_type)
    except DatabaseError:
        logger.exception("Failed to export %s report", report_type)
        messages.error(request, 'Failed to export report')
        return redirect('core:reports')

    logger.info("Exporting %s report as %s", report_type, export_format)
    if export_format == 'excel':
        return export_excel(report_type, report)
    return export_csv(report_type, report)


# ORGANIZATION (System Admin)
@admin_required
def organization_view(request):
    try:
        organization = OrganizationSettings.load()
    except DatabaseError:
        logger.exception("Failed to load organization settings")
        messages.error(request, 'Failed to load organization settings')
        return redirect('core:dashboard')

    if request.method == 'POST':
        form = OrganizationSettingsForm(request.POST, instance=organization)
        if form.is_valid():
            try:
                form.save()
            except DatabaseError:
                logger.exception("Failed to save organization settings")
                messages.error(request, 'Failed to save organization settings')
            else:
                messages.success(request, 'Organization settings updated successfully.')
                return redirect('core:organization')
    else:
        form = OrganizationSettingsForm(instance=organization)

    context = {
        'organization': organization,
        'form': form,
        'holiday_form': HolidayForm(),
        'active_page': 'organization',
    }
    return render(request, 'core/organization.html', context)


def _save_holidays(request, organization, success_message):
    try:
        organization.save(update_fields=['holidays', 'updated_at'])
    except DatabaseError:
        logger.exception("Failed to save holidays")
        messages.error(request, 'Failed to update holidays')
    else:
        messages.success(request, success_message)


@admin_required
@require_POST
def holiday_add_view(request):
    form = HolidayForm(request.POST)
    if not form.is_valid():
        messages.error(request, 'Please enter a valid date')
        return redirect('core:organization')

    organization = OrganizationSettings.load()
    day = form.cleaned_data['date']
    if organization.add_holiday(day):
        _save_holidays(request, organization, f'Holiday {day.isoformat()} added')
    else:
        messages.info(request, f'{day.isoformat()} is already a holiday')

    return redirect('core:organization')


@admin_required
@require_POST
def holiday_remove_view(request):
    organization = OrganizationSettings.load()
    value = request.POST.get('date', '')
    if organization.remove_holiday(value):
        _save_holidays(request, organization, f'Holiday {value} removed')
    else:
        messages.error(request, 'Holiday not found')

    return redirect('core:organization')
