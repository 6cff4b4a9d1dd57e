from django.contrib import messages
from django.shortcuts import render, redirect
from django.views.decorators.http import require_POST

from apps.accounts.decorators import login_required
from .store import NotificationError, NotificationStore


def _store(request):
    return NotificationStore(request.crm_session.current_user)


@login_required
def notification_list_view(request):
    store = _store(request)
    notifications = store.notifications

    context = {
        'notifications': notifications,
        'unread_count': sum(1 for n in notifications if not n['read']),
        'active_page': 'notifications',
    }
    return render(request, 'notifications/notification_list.html', context)


@login_required
@require_POST
def notification_mark_read_view(request, notification_id):
    try:
        _store(request).mark_read(notification_id)
    except NotificationError as e:
        messages.error(request, str(e))
    return redirect('notifications:notification_list')


@login_required
@require_POST
def notification_mark_all_read_view(request):
    try:
        _store(request).mark_all_read()
    except NotificationError as e:
        messages.error(request, str(e))
    return redirect('notifications:notification_list')


@login_required
@require_POST
def notification_delete_view(request, notification_id):
    try:
        _store(request).remove(notification_id)
    except NotificationError as e:
        messages.error(request, str(e))
    return redirect('notifications:notification_list')
