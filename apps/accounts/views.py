import logging

from django.contrib import messages
from django.db import DatabaseError, transaction
from django.db.models import Q
from django.shortcuts import render, redirect, get_object_or_404
from django.utils.http import url_has_allowed_host_and_scheme
from django.utils.translation import gettext_lazy as _
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_POST

from .decorators import admin_required
from .forms import LoginForm, SignupForm, UserCreateForm, UserEditForm, PasswordUpdateForm
from .models import Profile
from .permissions import SYSTEM_ADMIN
from .services import (
    AdminOperationError,
    admin_create_user,
    admin_delete_user,
    admin_update_password,
    update_profile,
)

logger = logging.getLogger(__name__)


# AUTHENTICATION VIEWS
@never_cache
def login_view(request):
    # If already logged in, redirect to dashboard
    if request.crm_session.is_authenticated:
        return redirect('core:dashboard')

    error = None

    if request.method == 'POST':
        form = LoginForm(request.POST)

        if form.is_valid():
            outcome = request.crm_session.login(
                form.cleaned_data['email'],
                form.cleaned_data['password'],
            )

            if outcome.ok:
                if form.cleaned_data.get('remember'):
                    request.session.set_expiry(30 * 24 * 60 * 60)
                else:
                    # Session expires when browser closes
                    request.session.set_expiry(0)

                profile = request.crm_session.current_user
                messages.success(request, _('Welcome back, {}!').format(profile.name))

                next_url = request.GET.get('next')
                if next_url and url_has_allowed_host_and_scheme(
                    next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
                ):
                    return redirect(next_url)
                return redirect('core:dashboard')

            # Authentication errors are shown inline, verbatim
            error = outcome.error
        else:
            error = _('Please enter email and password')
    else:
        form = LoginForm()

    context = {
        'form': form,
        'error': error,
        'page_title': _('Login'),
    }

    return render(request, 'accounts/login.html', context)


@never_cache
def signup_view(request):
    if request.crm_session.is_authenticated:
        return redirect('core:dashboard')

    error = None

    if request.method == 'POST':
        form = SignupForm(request.POST)
        if form.is_valid():
            outcome = request.crm_session.signup(
                form.cleaned_data['email'],
                form.cleaned_data['password'],
            )
            if outcome.ok:
                messages.success(request, _('Account created! You can now sign in.'))
                return redirect('accounts:login')
            error = outcome.error
    else:
        form = SignupForm()

    context = {
        'form': form,
        'error': error,
        'page_title': _('Create Account'),
    }
    return render(request, 'accounts/signup.html', context)


def logout_view(request):
    request.crm_session.logout()
    messages.success(request, _('You have been logged out successfully.'))
    return redirect('accounts:login')


# USER MANAGEMENT (System Admin)
@admin_required
def user_list_view(request):
    search_query = request.GET.get('search', '').strip()

    try:
        users = Profile.objects.all().order_by('name')
        if search_query:
            users = users.filter(
                Q(name__icontains=search_query) |
                Q(email__icontains=search_query) |
                Q(role__icontains=search_query)
            )
        users = list(users)
    except DatabaseError:
        logger.exception("Failed to load users")
        messages.error(request, _('Failed to load users'))
        users = []

    context = {
        'users': users,
        'search_query': search_query,
        'active_page': 'users',
    }
    return render(request, 'accounts/user_list.html', context)


@admin_required
def user_create_view(request):
    if request.method == 'POST':
        form = UserCreateForm(request.POST)
        if form.is_valid():
            try:
                profile = admin_create_user(
                    email=form.cleaned_data['email'],
                    password=form.cleaned_data['password'],
                    name=form.cleaned_data['name'],
                    role=form.cleaned_data['role'],
                )
            except (AdminOperationError, DatabaseError) as e:
                logger.warning("Create user failed: %s", e)
                messages.error(request, _('Failed to create user: {}').format(e))
            else:
                messages.success(request, _('User "{}" created successfully').format(profile.name))
                return redirect('accounts:user_list')
    else:
        form = UserCreateForm()

    context = {
        'form': form,
        'form_title': _('Create User'),
        'active_page': 'users',
    }
    return render(request, 'accounts/user_form.html', context)


@admin_required
def user_edit_view(request, pk):
    profile = get_object_or_404(Profile, pk=pk)

    if request.method == 'POST':
        form = UserEditForm(request.POST, instance=Profile.objects.get(pk=pk))
        is_self = profile.pk == request.crm_session.current_user.pk

        if form.is_valid() and is_self and (
            form.cleaned_data['role'] != SYSTEM_ADMIN or not form.cleaned_data['enabled']
        ):
            messages.error(request, _('You cannot demote or disable your own account.'))
        elif form.is_valid():
            new_password = form.cleaned_data.get('new_password')
            try:
                # Profile changes and the password land together or not at all
                with transaction.atomic():
                    updated = update_profile(
                        form.instance,
                        name=form.cleaned_data['name'],
                        role=form.cleaned_data['role'],
                        enabled=form.cleaned_data['enabled'],
                    )
                    if new_password:
                        admin_update_password(updated, new_password)
            except (AdminOperationError, DatabaseError) as e:
                logger.warning("Update user %s failed: %s", pk, e)
                messages.error(request, _('Failed to update user: {}').format(e))
            else:
                if new_password:
                    messages.info(request, _('Password updated.'))
                messages.success(request, _('User "{}" updated successfully').format(updated.name))
                return redirect('accounts:user_list')
    else:
        form = UserEditForm(instance=profile)

    context = {
        'form': form,
        'profile': profile,
        'form_title': _('Edit User'),
        'active_page': 'users',
    }
    return render(request, 'accounts/user_form.html', context)


@admin_required
@require_POST
def user_toggle_status_view(request, pk):
    profile = get_object_or_404(Profile, pk=pk)

    if profile.pk == request.crm_session.current_user.pk:
        messages.error(request, _('You cannot disable your own account.'))
        return redirect('accounts:user_list')

    try:
        update_profile(profile, enabled=not profile.enabled)
    except DatabaseError:
        logger.exception("Toggle status failed for profile %s", pk)
        messages.error(request, _('Failed to update user status'))
    else:
        state = _('enabled') if profile.enabled else _('disabled')
        messages.success(request, _('User "{}" {}').format(profile.name, state))

    return redirect('accounts:user_list')


@admin_required
def user_delete_view(request, pk):
    profile = get_object_or_404(Profile, pk=pk)

    if profile.pk == request.crm_session.current_user.pk:
        messages.error(request, _('You cannot delete your own account.'))
        return redirect('accounts:user_list')

    if request.method == 'POST':
        try:
            admin_delete_user(profile)
        except DatabaseError as e:
            logger.exception("Delete user failed for profile %s", pk)
            messages.error(request, _('Failed to delete user: {}').format(e))
        else:
            messages.success(request, _('User deleted successfully.'))
        return redirect('accounts:user_list')

    context = {
        'object': profile,
        'object_label': profile.name,
        'cancel_url': 'accounts:user_list',
        'active_page': 'users',
    }
    return render(request, 'core/entity_confirm_delete.html', context)


# SECURITY (System Admin)
@admin_required
def security_view(request):
    if request.method == 'POST':
        form = PasswordUpdateForm(request.POST)
        if form.is_valid():
            outcome = request.crm_session.update_password(form.cleaned_data['new_password'])
            if outcome.ok:
                messages.success(request, _('Password updated successfully.'))
                return redirect('accounts:security')
            messages.error(request, outcome.error)
    else:
        form = PasswordUpdateForm()

    try:
        recent_logins = list(
            Profile.objects.filter(last_login__isnull=False).order_by('-last_login')[:10]
        )
    except DatabaseError:
        logger.exception("Failed to load login activity")
        messages.error(request, _('Failed to load login activity'))
        recent_logins = []

    context = {
        'form': form,
        'recent_logins': recent_logins,
        'active_page': 'security',
    }
    return render(request, 'accounts/security.html', context)
