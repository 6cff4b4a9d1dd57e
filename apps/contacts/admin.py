from django.contrib import admin

from .models import Account, Contact


class ContactInline(admin.TabularInline):
    model = Contact
    extra = 0
    fields = ['first_name', 'last_name', 'email', 'phone', 'position']


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ['name', 'industry', 'phone', 'employees', 'annual_revenue', 'contact_count']
    list_filter = ['industry']
    search_fields = ['name', 'industry', 'website']
    inlines = [ContactInline]

    @admin.display(description='Contacts')
    def contact_count(self, obj):
        return obj.contacts.count()


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'email', 'phone', 'account', 'position']
    list_filter = ['account']
    search_fields = ['first_name', 'last_name', 'email']
    list_select_related = ['account']
