from django.contrib import admin

from .models import Deal


@admin.register(Deal)
class DealAdmin(admin.ModelAdmin):
    list_display = ['title', 'account', 'stage', 'value', 'probability', 'expected_close_date', 'assigned_to']
    list_filter = ['stage', 'expected_close_date']
    search_fields = ['title', 'account__name', 'notes']
    list_select_related = ['account', 'assigned_to']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'created_at'
