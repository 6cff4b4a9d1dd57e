from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _
from django.utils.html import format_html

from .models import User, Profile
from .permissions import SYSTEM_ADMIN


# CUSTOM USER ADMIN (identities)
@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ('email', 'auth_id', 'is_active', 'is_staff', 'date_joined')
    list_filter = ('is_active', 'is_staff', 'is_superuser', 'date_joined')
    search_fields = ('email',)
    ordering = ('-date_joined',)
    list_per_page = 25
    readonly_fields = ('auth_id', 'date_joined', 'last_login')

    fieldsets = (
        (_('Login Credentials'), {
            'fields': ('email', 'password', 'auth_id'),
            'classes': ('wide',),
            'description': _('Email is used for login. Password is stored encrypted.')
        }),
        (_('Metadata'), {
            'fields': ('metadata',),
        }),
        (_('Permissions'), {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        (_('Important Dates'), {
            'fields': ('last_login', 'date_joined'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'password1', 'password2'),
        }),
    )


# PROFILE ADMIN (CRM users)
@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'role_badge', 'enabled', 'last_login')
    list_filter = ('role', 'enabled')
    search_fields = ('name', 'email')
    readonly_fields = ('auth_id', 'last_login', 'created_at', 'updated_at')
    list_per_page = 25

    @admin.display(description=_('Role'), ordering='role')
    def role_badge(self, obj):
        color = '#dc3545' if obj.role == SYSTEM_ADMIN else '#0d6efd'
        return format_html(
            '<span style="background:{};color:#fff;padding:2px 8px;border-radius:3px">{}</span>',
            color,
            obj.role,
        )
