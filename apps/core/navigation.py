"""
Sidebar menu

MENU_ITEMS is the master list, in display order. compose_menu() keeps the
entries a role may see and never reorders them.
"""

from collections import namedtuple

from apps.accounts import permissions
from apps.accounts.permissions import SYSTEM_ADMIN, is_allowed

NavItem = namedtuple('NavItem', ['label', 'url_name', 'module', 'admin_only', 'icon'])

MENU_ITEMS = (
    NavItem('Dashboard', 'core:dashboard', permissions.DASHBOARD, False, 'fas fa-chart-line'),
    NavItem('Leads', 'leads:lead_list', permissions.LEADS, False, 'fas fa-bullseye'),
    NavItem('Contacts', 'contacts:contact_list', permissions.CONTACTS, False, 'fas fa-address-book'),
    NavItem('Accounts', 'contacts:account_list', permissions.ACCOUNTS, False, 'fas fa-building'),
    NavItem('Deals', 'deals:deal_list', permissions.DEALS, False, 'fas fa-handshake'),
    NavItem('Tasks', 'activities:task_list', permissions.TASKS, False, 'fas fa-check-square'),
    NavItem('Communications', 'activities:communication_list', permissions.COMMUNICATIONS, False, 'fas fa-phone'),
    NavItem('Campaigns', 'campaigns:campaign_list', permissions.CAMPAIGNS, False, 'fas fa-bullhorn'),
    NavItem('Reports', 'core:reports', permissions.REPORTS, False, 'fas fa-chart-bar'),
    NavItem('Users', 'accounts:user_list', permissions.USERS, True, 'fas fa-users'),
    NavItem('Organization', 'core:organization', permissions.ORGANIZATION, True, 'fas fa-cog'),
    NavItem('Security', 'accounts:security', permissions.SECURITY, True, 'fas fa-shield-alt'),
)

# Header "+" menu; filtered with compose_menu like the sidebar
QUICK_ADD_ITEMS = (
    NavItem('Add Lead', 'leads:lead_create', permissions.LEADS, False, 'fas fa-user-plus'),
    NavItem('Add Deal', 'deals:deal_create', permissions.DEALS, False, 'fas fa-chart-line'),
    NavItem('Add Task', 'activities:task_create', permissions.TASKS, False, 'fas fa-check-square'),
)


def compose_menu(role, items=MENU_ITEMS):
    """
    Menu entries visible to a role, in master-list order

    Example:
        >>> [i.label for i in compose_menu('Marketing Executive')]
        ['Dashboard', 'Leads', 'Campaigns', 'Reports']
    """
    visible = []
    for item in items:
        if item.admin_only and role != SYSTEM_ADMIN:
            continue
        if not is_allowed(role, item.module):
            continue
        visible.append(item)
    return visible
