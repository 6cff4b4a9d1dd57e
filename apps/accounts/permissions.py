# Role → module permission table
#
# Roles are a closed set of labels. Each role maps to the feature modules it
# may open (menu entries and module-gated views). System Admin holds the
# wildcard and therefore every module, including ones added later.
# Roles missing from the table get nothing.
# ==============================================================================

from types import MappingProxyType


# ROLES
SYSTEM_ADMIN = 'System Admin'
SALES_MANAGER = 'Sales Manager'
SALES_EXECUTIVE = 'Sales Executive'
MARKETING_EXECUTIVE = 'Marketing Executive'
SUPPORT_EXECUTIVE = 'Support Executive'
CUSTOMER = 'Customer'

ROLES = (
    SYSTEM_ADMIN,
    SALES_MANAGER,
    SALES_EXECUTIVE,
    MARKETING_EXECUTIVE,
    SUPPORT_EXECUTIVE,
    CUSTOMER,
)

ROLE_CHOICES = [(role, role) for role in ROLES]


# MODULES
DASHBOARD = 'dashboard'
LEADS = 'leads'
CONTACTS = 'contacts'
ACCOUNTS = 'accounts'
DEALS = 'deals'
TASKS = 'tasks'
COMMUNICATIONS = 'communications'
CAMPAIGNS = 'campaigns'
REPORTS = 'reports'
USERS = 'users'
ORGANIZATION = 'organization'
SECURITY = 'security'
TICKETS = 'tickets'
NOTIFICATIONS = 'notifications'

ALL_MODULES = '*'


# PERMISSION TABLE
ROLE_PERMISSIONS = MappingProxyType({
    SYSTEM_ADMIN: frozenset([ALL_MODULES]),
    SALES_MANAGER: frozenset([
        DASHBOARD, DEALS, REPORTS, LEADS, CONTACTS, ACCOUNTS, TASKS, COMMUNICATIONS,
    ]),
    SALES_EXECUTIVE: frozenset([
        DASHBOARD, LEADS, CONTACTS, ACCOUNTS, DEALS, TASKS, COMMUNICATIONS,
    ]),
    MARKETING_EXECUTIVE: frozenset([DASHBOARD, CAMPAIGNS, LEADS, REPORTS]),
    SUPPORT_EXECUTIVE: frozenset([DASHBOARD, CONTACTS, ACCOUNTS, COMMUNICATIONS]),
    CUSTOMER: frozenset([DASHBOARD, TICKETS]),
})


def allowed_modules(role):
    """
    Modules configured for a role

    Returns:
        frozenset: configured modules (contains ALL_MODULES for the wildcard),
        empty for unknown roles
    """
    return ROLE_PERMISSIONS.get(role, frozenset())


def is_allowed(role, module):
    """
    Can this role open this module?

    Example:
        >>> is_allowed('System Admin', 'security')
        True
        >>> is_allowed('Customer', 'deals')
        False
    """
    modules = allowed_modules(role)
    return ALL_MODULES in modules or module in modules


def is_valid_role(role):
    return role in ROLES
