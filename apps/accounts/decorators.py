# Route guard
#
# 1. evaluate_access - pure decision: render, or where to redirect
# 2. protected - view decorator built on evaluate_access
# 3. admin_required / module_required - shortcuts
#
# Decision order:
# - no signed-in profile        → login
# - required role not matched   → dashboard
# - required module not allowed → dashboard
# - otherwise                   → render the view
# ==============================================================================

from functools import wraps

from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import redirect
from django.utils.translation import gettext_lazy as _

from .permissions import SYSTEM_ADMIN, is_allowed

LOGIN_REDIRECT = 'accounts:login'
DASHBOARD_REDIRECT = 'core:dashboard'


def evaluate_access(current_user, required_role=None, required_module=None):
    """
    Decide whether current_user may open a view

    Args:
        current_user (Profile | None): signed-in profile
        required_role (str, optional): exact role needed
        required_module (str, optional): module the role must be allowed

    Returns:
        None to render the view, otherwise the URL name to redirect to
    """
    if current_user is None:
        return LOGIN_REDIRECT

    if required_role and current_user.role != required_role:
        return DASHBOARD_REDIRECT

    if required_module and not is_allowed(current_user.role, required_module):
        return DASHBOARD_REDIRECT

    return None


def get_current_user(request):
    session = getattr(request, 'crm_session', None)
    return session.current_user if session is not None else None


def _is_ajax(request):
    return request.headers.get('X-Requested-With') == 'XMLHttpRequest'


def protected(required_role=None, required_module=None):
    """
    Decorator: guard a view with the route guard

    Usage:
        @protected(required_module='deals')
        def deal_list_view(request):
            ...

        @protected(required_role='System Admin')
        def user_list_view(request):
            ...
    """

    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            target = evaluate_access(get_current_user(request), required_role, required_module)

            if target is None:
                return view_func(request, *args, **kwargs)

            if target == LOGIN_REDIRECT:
                if _is_ajax(request):
                    return JsonResponse({'success': False, 'error': 'Authentication required'}, status=401)
                messages.error(request, _('Please login to continue.'))
                return redirect(target)

            if _is_ajax(request):
                return JsonResponse({'success': False, 'error': 'Permission denied'}, status=403)
            messages.error(request, _('You do not have permission to access this page.'))
            return redirect(target)

        return wrapper

    return decorator


def login_required(view_func):
    """Decorator: any signed-in, enabled profile"""
    return protected()(view_func)


def admin_required(view_func):
    """Decorator: only System Admin"""
    return protected(required_role=SYSTEM_ADMIN)(view_func)


def module_required(module):
    """Decorator: role must be allowed to open the module"""
    return protected(required_module=module)
