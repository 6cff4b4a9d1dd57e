from django.contrib import admin

from .models import OrganizationSettings


@admin.register(OrganizationSettings)
class OrganizationSettingsAdmin(admin.ModelAdmin):
    list_display = ['company_name', 'currency', 'timezone', 'working_hours_start', 'working_hours_end', 'updated_at']
    readonly_fields = ['updated_at']

    def has_add_permission(self, request):
        return not OrganizationSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
