# Models:
# 1. User - Session identity (email login, stable external auth_id)
# 2. Profile - CRM user record (name, role, enabled flag, last login)

import uuid

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin, BaseUserManager
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .permissions import ROLE_CHOICES, SYSTEM_ADMIN, SALES_EXECUTIVE, is_allowed



# USER MANAGER (handles user creation)
class UserManager(BaseUserManager):
    """
    Custom user manager for User model

    Provides methods to:
    - Create regular users
    - Create superusers (admins)
    - Handle email-based authentication
    """

    def create_user(self, email, password=None, **extra_fields):
        """
        Create and save a regular user

        Args:
            email (str): User's email address (required)
            password (str): User's password (required)
            **extra_fields: Additional fields (metadata, is_staff, etc.)

        Raises:
            ValueError: If email is not provided

        Example:
            user = User.objects.create_user(
                email='sales@crm.com',
                password='securepass123',
                metadata={'full_name': 'Sara Sales', 'role': 'Sales Executive'},
            )
        """
        if not email:
            raise ValueError(_('Users must have an email address'))

        email = self.normalize_email(email).lower()

        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)

        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)

        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Create and save a superuser

        Superusers sign into the CRM as System Admin and can open the Django admin
        """
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('metadata', {'role': SYSTEM_ADMIN})

        if extra_fields.get('is_staff') is not True:
            raise ValueError(_('Superuser must have is_staff=True'))
        if extra_fields.get('is_superuser') is not True:
            raise ValueError(_('Superuser must have is_superuser=True'))

        return self.create_user(email, password, **extra_fields)



# USER MODEL
class User(AbstractBaseUser, PermissionsMixin):
    """
    Authenticated identity

    Only knows how to sign in. Everything the CRM needs to know about a person
    (name, role, enabled) lives on Profile, linked through auth_id.
    """

    email = models.EmailField(_('email address'), unique=True, max_length=255, db_index=True, help_text=_('Required. Used for login.'))
    auth_id = models.UUIDField(_('auth id'), default=uuid.uuid4, unique=True, editable=False, help_text=_('Stable external identifier of this identity'))
    metadata = models.JSONField(_('metadata'), default=dict, blank=True, help_text=_('Sign-up metadata, e.g. {"full_name": ..., "role": ...}'))
    is_active = models.BooleanField(_('active'), default=True)
    is_staff = models.BooleanField(_('staff status'), default=False, help_text=_('Designates whether the user can log into admin site.'))
    date_joined = models.DateTimeField(_('date joined'), default=timezone.now)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        verbose_name = _('user')
        verbose_name_plural = _('users')
        ordering = ['-date_joined']

    def __str__(self):
        return self.email

    def get_full_name(self):
        return self.metadata.get('full_name') or self.email

    def get_short_name(self):
        return self.email.split('@')[0]



# PROFILE MODEL (CRM user)
class Profile(models.Model):
    """
    Application-level user record

    Created lazily the first time an identity signs in (see session.resolve_profile)
    or up front by an administrator (services.admin_create_user).
    CRM records (leads, deals, tasks, notifications) point at profiles, not identities.
    """

    auth_id = models.UUIDField(_('auth id'), unique=True, null=True, blank=True, help_text=_('auth_id of the identity this profile belongs to'))
    name = models.CharField(_('name'), max_length=150)
    email = models.EmailField(_('email address'), max_length=255)
    role = models.CharField(_('role'), max_length=30, choices=ROLE_CHOICES, default=SALES_EXECUTIVE, db_index=True)
    enabled = models.BooleanField(_('enabled'), default=True, help_text=_('Disabled profiles cannot sign in'))
    last_login = models.DateTimeField(_('last login'), null=True, blank=True)
    created_at = models.DateTimeField(_('created at'), auto_now_add=True)
    updated_at = models.DateTimeField(_('updated at'), auto_now=True)

    class Meta:
        verbose_name = _('profile')
        verbose_name_plural = _('profiles')
        ordering = ['name']
        indexes = [
            models.Index(fields=['email'], name='profile_email_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.role})"

    def get_initials(self):
        parts = self.name.split()
        if len(parts) >= 2:
            return f"{parts[0][0]}{parts[1][0]}".upper()
        return (self.name or self.email or 'U')[0].upper()

    def is_admin(self):
        return self.role == SYSTEM_ADMIN

    def has_permission(self, module):
        return is_allowed(self.role, module)

    def get_identity(self):
        """The User this profile is linked to, or None"""
        if self.auth_id is None:
            return None
        return User.objects.filter(auth_id=self.auth_id).first()
