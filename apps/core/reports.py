"""
Dashboard and report data

Each report builder returns a dict with:
- summary: headline figures
- headers / rows: the table that is rendered and exported
- charts: series for the page's charts

Monthly figures group Closed Won deals by the month of expected_close_date.
"""
import csv
from decimal import Decimal

import openpyxl
from openpyxl.styles import Font, PatternFill
from django.db.models import Count, Sum
from django.http import HttpResponse
from django.utils import timezone

from apps.activities.models import Task
from apps.campaigns.models import Campaign
from apps.deals.models import Deal
from apps.leads.models import Lead

MONTHS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']


def _counts_by(queryset, field, choices):
    """Count per choice, in choice order, dropping empty buckets"""
    count_map = {item[field]: item['count'] for item in queryset.values(field).annotate(count=Count('id'))}
    return [
        {'name': label, 'value': count_map[value]}
        for value, label in choices
        if count_map.get(value)
    ]


def monthly_won_revenue():
    """[{'month': 'Jan', 'revenue': Decimal, 'deals': int}, ...] in calendar order"""
    data = {}
    won = Deal.objects.filter(stage=Deal.STAGE_CLOSED_WON, expected_close_date__isnull=False)

    for value, close_date in won.values_list('value', 'expected_close_date'):
        month = MONTHS[close_date.month - 1]
        bucket = data.setdefault(month, {'revenue': Decimal('0'), 'deals': 0})
        bucket['revenue'] += value
        bucket['deals'] += 1

    return [
        {'month': month, 'revenue': data[month]['revenue'], 'deals': data[month]['deals']}
        for month in MONTHS
        if month in data
    ]


def dashboard_data():
    leads = Lead.objects.all()
    deals = Deal.objects.all()

    kpis = {
        'total_leads': leads.count(),
        'qualified_leads': leads.filter(status=Lead.STATUS_QUALIFIED).count(),
        'total_deals': deals.count(),
        'pipeline_value': deals.aggregate(total=Sum('value'))['total'] or Decimal('0'),
        'pending_tasks': Task.objects.filter(
            status__in=[Task.STATUS_PENDING, Task.STATUS_IN_PROGRESS]
        ).count(),
    }

    charts = {
        'lead_status': _counts_by(leads, 'status', Lead.STATUS_CHOICES),
        'deal_stages': _counts_by(deals, 'stage', Deal.STAGE_CHOICES),
        'monthly_revenue': [
            {'month': row['month'], 'revenue': float(row['revenue'])}
            for row in monthly_won_revenue()
        ],
    }

    return {'kpis': kpis, 'charts': charts}


# REPORTS
def sales_report():
    deals = Deal.objects.all()
    total_revenue = deals.aggregate(total=Sum('value'))['total'] or Decimal('0')
    won = deals.filter(stage=Deal.STAGE_CLOSED_WON)
    won_revenue = won.aggregate(total=Sum('value'))['total'] or Decimal('0')
    lead_count = Lead.objects.count()
    monthly = monthly_won_revenue()

    return {
        'summary': {
            'Total Pipeline': total_revenue,
            'Won Revenue': won_revenue,
            'Won Deals': won.count(),
            'Conversion Rate (%)': round(won.count() / lead_count * 100, 1) if lead_count else 0,
        },
        'headers': ['Month', 'Revenue', 'Deals Won'],
        'rows': [[row['month'], row['revenue'], row['deals']] for row in monthly],
        'charts': {
            'monthly_revenue': [{'month': row['month'], 'revenue': float(row['revenue'])} for row in monthly],
        },
    }


def leads_report():
    leads = Lead.objects.select_related('assigned_to')

    return {
        'summary': {
            'Total Leads': leads.count(),
            'Qualified Leads': leads.filter(status=Lead.STATUS_QUALIFIED).count(),
            'Total Lead Value': leads.aggregate(total=Sum('value'))['total'] or Decimal('0'),
        },
        'headers': ['ID', 'Name', 'Company', 'Email', 'Status', 'Source', 'Assigned To', 'Value', 'Created Date'],
        'rows': [
            [
                lead.id,
                lead.name,
                lead.company,
                lead.email,
                lead.status,
                lead.source,
                lead.assigned_to.name if lead.assigned_to else '',
                lead.value,
                lead.created_at.strftime('%Y-%m-%d %H:%M'),
            ]
            for lead in leads
        ],
        'charts': {
            'by_source': _counts_by(leads, 'source', Lead.SOURCE_CHOICES),
            'by_status': _counts_by(leads, 'status', Lead.STATUS_CHOICES),
        },
    }


def deals_report():
    deals = Deal.objects.select_related('account', 'assigned_to')

    stage_totals = {
        item['stage']: item
        for item in deals.values('stage').annotate(count=Count('id'), total=Sum('value'))
    }

    return {
        'summary': {
            'Total Deals': deals.count(),
            'Open Deals': deals.filter(stage__in=Deal.OPEN_STAGES).count(),
            'Total Value': deals.aggregate(total=Sum('value'))['total'] or Decimal('0'),
        },
        'headers': ['Stage', 'Deals', 'Value'],
        'rows': [
            [label, stage_totals[value]['count'], stage_totals[value]['total'] or Decimal('0')]
            for value, label in Deal.STAGE_CHOICES
            if value in stage_totals
        ],
        'charts': {
            'by_stage': _counts_by(deals, 'stage', Deal.STAGE_CHOICES),
        },
    }


def campaigns_report():
    campaigns = list(Campaign.objects.all())
    count = len(campaigns)

    return {
        'summary': {
            'Campaigns': count,
            'Active Campaigns': sum(1 for c in campaigns if c.status == 'Active'),
            'Leads Generated': sum(c.leads_generated for c in campaigns),
            'Avg Conversion Rate (%)': round(sum(c.conversion_rate for c in campaigns) / count, 1) if count else 0,
        },
        'headers': ['Name', 'Type', 'Status', 'Start Date', 'End Date', 'Budget', 'Leads Generated', 'Conversion Rate (%)'],
        'rows': [
            [
                c.name,
                c.type,
                c.status,
                c.start_date.isoformat() if c.start_date else '',
                c.end_date.isoformat() if c.end_date else '',
                c.budget,
                c.leads_generated,
                c.conversion_rate,
            ]
            for c in campaigns
        ],
        'charts': {
            'leads_by_campaign': [{'name': c.name, 'value': c.leads_generated} for c in campaigns],
        },
    }


REPORT_BUILDERS = {
    'sales': sales_report,
    'leads': leads_report,
    'deals': deals_report,
    'campaigns': campaigns_report,
}


def build_report(report_type):
    """
    Raises:
        KeyError: unknown report type
    """
    return REPORT_BUILDERS[report_type]()


# EXPORT
def _export_filename(report_type, extension):
    return f'{report_type}_report_{timezone.now().strftime("%Y%m%d_%H%M%S")}.{extension}'


def export_excel(report_type, report):
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = report_type.capitalize()

    # Write headers with styling
    for col, header in enumerate(report['headers'], start=1):
        cell = ws.cell(row=1, column=col, value=header)
        cell.font = Font(bold=True, color="FFFFFF")
        cell.fill = PatternFill(start_color="2563EB", end_color="2563EB", fill_type="solid")

    for row_index, row in enumerate(report['rows'], start=2):
        for col, value in enumerate(row, start=1):
            ws.cell(row=row_index, column=col, value=value)

    # Adjust column widths
    for col in ws.columns:
        max_length = max(len(str(cell.value)) if cell.value is not None else 0 for cell in col)
        ws.column_dimensions[col[0].column_letter].width = min(max_length + 2, 50)

    summary = wb.create_sheet('Summary')
    for row_index, (label, value) in enumerate(report['summary'].items(), start=1):
        summary.cell(row=row_index, column=1, value=label).font = Font(bold=True)
        summary.cell(row=row_index, column=2, value=value)

    response = HttpResponse(
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="{_export_filename(report_type, "xlsx")}"'
    wb.save(response)
    return response


def export_csv(report_type, report):
    response = HttpResponse(content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename="{_export_filename(report_type, "csv")}"'

    # Write BOM for Excel UTF-8 compatibility
    response.write('\ufeff')

    writer = csv.writer(response)
    writer.writerow(report['headers'])
    for row in report['rows']:
        writer.writerow(row)

    return response
