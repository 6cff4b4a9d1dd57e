from django.contrib import admin

from .models import Campaign


@admin.register(Campaign)
class CampaignAdmin(admin.ModelAdmin):
    list_display = ['name', 'type', 'status', 'start_date', 'end_date', 'budget', 'leads_generated', 'conversion_rate']
    list_filter = ['status', 'type']
    search_fields = ['name']
