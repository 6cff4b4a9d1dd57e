from django.contrib import admin
from django.utils.html import format_html

from .models import Lead

STATUS_COLORS = {
    Lead.STATUS_NEW: '#0d6efd',
    Lead.STATUS_CONTACTED: '#ffc107',
    Lead.STATUS_QUALIFIED: '#198754',
    Lead.STATUS_LOST: '#6c757d',
}


@admin.register(Lead)
class LeadAdmin(admin.ModelAdmin):
    list_display = ['name', 'company', 'email', 'status_badge', 'source', 'assigned_to', 'value', 'created_at']
    list_filter = ['status', 'source', 'created_at']
    search_fields = ['name', 'email', 'company', 'phone']
    list_select_related = ['assigned_to']
    readonly_fields = ['created_at', 'updated_at']
    list_per_page = 25

    @admin.display(description='Status', ordering='status')
    def status_badge(self, obj):
        return format_html(
            '<span style="background:{};color:#fff;padding:2px 8px;border-radius:3px">{}</span>',
            STATUS_COLORS.get(obj.status, '#6c757d'),
            obj.get_status_display(),
        )
