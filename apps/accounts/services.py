"""
Privileged user-lifecycle procedures

These run with full database privilege on behalf of a System Admin, the way the
hosted backend's admin_create_user / admin_delete_user / admin_update_password
procedures do. Views must guard them with @admin_required.
"""

import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from .models import Profile
from .permissions import is_valid_role

logger = logging.getLogger(__name__)

User = get_user_model()


class AdminOperationError(Exception):
    """A privileged user operation was rejected"""


def _check_password(password, user=None):
    try:
        validate_password(password, user=user)
    except ValidationError as e:
        raise AdminOperationError(' '.join(e.messages)) from e


@transaction.atomic
def admin_create_user(email, password, name, role):
    """
    Create an identity and its CRM profile in one step

    Returns:
        Profile: the new profile

    Raises:
        AdminOperationError: invalid role/password or email already registered
    """
    email = (email or '').strip().lower()
    if not email:
        raise AdminOperationError('Email is required')
    if not is_valid_role(role):
        raise AdminOperationError(f'Unknown role: {role}')
    if User.objects.filter(email=email).exists():
        raise AdminOperationError('A user with this email already exists')
    _check_password(password)

    try:
        identity = User.objects.create_user(
            email=email,
            password=password,
            metadata={'full_name': name, 'role': role},
        )
        profile = Profile.objects.create(
            auth_id=identity.auth_id,
            name=name or email.split('@')[0],
            email=email,
            role=role,
            enabled=True,
        )
    except IntegrityError as e:
        raise AdminOperationError('A user with this email already exists') from e

    logger.info("Admin created user %s as %s", email, role)
    return profile


@transaction.atomic
def admin_delete_user(profile):
    """
    Delete a profile and the identity linked to it

    CRM records assigned to the profile keep existing with no assignee.
    """
    identity = profile.get_identity()
    email = profile.email

    profile.delete()
    if identity is not None:
        identity.delete()

    logger.info("Admin deleted user %s", email)


@transaction.atomic
def admin_update_password(profile, new_password):
    """
    Set a new password on the identity behind a profile

    Raises:
        AdminOperationError: no identity linked, or password rejected
    """
    identity = profile.get_identity()
    if identity is None:
        raise AdminOperationError('This user has no login')

    _check_password(new_password, user=identity)
    identity.set_password(new_password)
    identity.save(update_fields=['password'])

    logger.info("Admin updated password for %s", profile.email)


def update_profile(profile, **changes):
    """
    Update role / enabled / name on a profile

    Role changes are limited to the known roles.
    """
    role = changes.get('role')
    if role is not None and not is_valid_role(role):
        raise AdminOperationError(f'Unknown role: {role}')

    for field, value in changes.items():
        setattr(profile, field, value)
    profile.save()
    return profile
