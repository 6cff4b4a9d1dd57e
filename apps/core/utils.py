"""
Helpers shared by the entity screens

- load_list: evaluate a list queryset; on a database error flash a banner and return []
- save_form / delete_instance: run a mutation in a transaction; on failure flash and log
- apply_filters: exact-match filters from GET parameters
"""
import logging

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.db.models import Q

logger = logging.getLogger(__name__)


def load_list(request, queryset, error_message):
    """
    Evaluate queryset for a list screen

    Returns:
        list: the rows, or [] when the database could not be read
    """
    try:
        return list(queryset)
    except DatabaseError:
        logger.exception(error_message)
        messages.error(request, error_message)
        return []


def search_filter(queryset, search_query, fields):
    """OR of icontains lookups over fields"""
    if not search_query:
        return queryset

    condition = Q()
    for field in fields:
        condition |= Q(**{f'{field}__icontains': search_query})
    return queryset.filter(condition)


def apply_filters(request, queryset, fields):
    """
    Apply ?<field>=<value> filters for the given field names

    Returns:
        tuple: (filtered queryset, dict of the active filter values)
    """
    active = {}
    for field in fields:
        value = request.GET.get(field, '').strip()
        if value:
            try:
                queryset = queryset.filter(**{field: value})
            except (ValueError, ValidationError):
                logger.warning("Ignoring invalid filter %s=%r", field, value)
                value = ''
        active[field] = value
    return queryset, active


def save_form(request, form, success_message, error_message):
    """
    Save a valid ModelForm atomically

    Returns:
        The saved instance, or None if the save failed (nothing is applied)
    """
    try:
        with transaction.atomic():
            obj = form.save()
    except DatabaseError:
        logger.exception(error_message)
        messages.error(request, error_message)
        return None

    messages.success(request, success_message.format(obj))
    return obj


def delete_instance(request, obj, error_message):
    label = str(obj)
    try:
        with transaction.atomic():
            obj.delete()
    except DatabaseError:
        logger.exception(error_message)
        messages.error(request, error_message)
        return False

    messages.success(request, f'"{label}" deleted successfully')
    return True
