from django.contrib import admin

from .models import Task, Communication


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['title', 'type', 'priority', 'status', 'due_date', 'assigned_to', 'related_to_type']
    list_filter = ['status', 'priority', 'type', 'due_date']
    search_fields = ['title', 'description']
    list_select_related = ['assigned_to']
    actions = ['mark_completed']

    @admin.action(description='Mark selected tasks as completed')
    def mark_completed(self, request, queryset):
        updated = queryset.update(status=Task.STATUS_COMPLETED)
        self.message_user(request, f'{updated} task(s) marked as completed.')


@admin.register(Communication)
class CommunicationAdmin(admin.ModelAdmin):
    list_display = ['subject', 'type', 'related_to_type', 'related_to_id', 'created_by', 'created_at']
    list_filter = ['type', 'related_to_type']
    search_fields = ['subject', 'content']
    list_select_related = ['created_by']
