import logging

from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import render, redirect, get_object_or_404
from django.views.decorators.http import require_POST

from apps.accounts.decorators import module_required
from apps.accounts.permissions import TASKS, COMMUNICATIONS
from apps.core.utils import load_list, search_filter, apply_filters, save_form, delete_instance
from apps.notifications.store import NotificationError
from .forms import TaskForm, CommunicationForm
from .models import Task, Communication, RELATED_TO_CHOICES
from .services import notify_assignee

logger = logging.getLogger(__name__)


def _notify(request, task):
    try:
        notify_assignee(task)
    except NotificationError:
        messages.warning(request, f'Task saved, but {task.assigned_to.name} could not be notified')


# TASKS
@module_required(TASKS)
def task_list_view(request):
    search_query = request.GET.get('search', '').strip()

    tasks = Task.objects.select_related('assigned_to')
    tasks = search_filter(tasks, search_query, ['title', 'description'])
    tasks, filters = apply_filters(request, tasks, ['status', 'priority', 'type'])

    context = {
        'tasks': load_list(request, tasks, 'Failed to load tasks'),
        'status_choices': Task.STATUS_CHOICES,
        'priority_choices': Task.PRIORITY_CHOICES,
        'type_choices': Task.TYPE_CHOICES,
        'search_query': search_query,
        'filters': filters,
        'active_page': 'tasks',
    }
    return render(request, 'activities/task_list.html', context)


@module_required(TASKS)
def task_create_view(request):
    form = TaskForm(request.POST or None)
    if request.method == 'POST' and form.is_valid():
        task = save_form(request, form, 'Task "{}" created successfully', 'Failed to create task')
        if task is not None:
            _notify(request, task)
            return redirect('activities:task_list')

    context = {
        'form': form,
        'form_title': 'Add Task',
        'active_page': 'tasks',
    }
    return render(request, 'core/entity_form.html', context)


@module_required(TASKS)
def task_edit_view(request, pk):
    task = get_object_or_404(Task, pk=pk)
    previous_assignee = task.assigned_to_id

    form = TaskForm(request.POST or None, instance=task)
    if request.method == 'POST' and form.is_valid():
        saved = save_form(request, form, 'Task "{}" updated successfully', 'Failed to update task')
        if saved is not None:
            if saved.assigned_to_id != previous_assignee:
                _notify(request, saved)
            return redirect('activities:task_list')

    context = {
        'form': form,
        'object': task,
        'form_title': f'Edit Task: {task.title}',
        'active_page': 'tasks',
    }
    return render(request, 'core/entity_form.html', context)


@module_required(TASKS)
@require_POST
def task_complete_view(request, pk):
    task = get_object_or_404(Task, pk=pk)

    try:
        Task.objects.filter(pk=task.pk).update(status=Task.STATUS_COMPLETED)
    except DatabaseError:
        logger.exception("Failed to complete task %s", pk)
        messages.error(request, 'Failed to update task')
    else:
        messages.success(request, f'Task "{task.title}" marked as completed')

    return redirect('activities:task_list')


@module_required(TASKS)
def task_delete_view(request, pk):
    task = get_object_or_404(Task, pk=pk)

    if request.method == 'POST':
        delete_instance(request, task, 'Failed to delete task')
        return redirect('activities:task_list')

    context = {
        'object': task,
        'object_label': task.title,
        'cancel_url': 'activities:task_list',
        'active_page': 'tasks',
    }
    return render(request, 'core/entity_confirm_delete.html', context)


# COMMUNICATIONS
@module_required(COMMUNICATIONS)
def communication_list_view(request):
    search_query = request.GET.get('search', '').strip()

    communications = Communication.objects.select_related('created_by')
    communications = search_filter(communications, search_query, ['subject', 'content'])
    communications, filters = apply_filters(request, communications, ['type', 'related_to_type'])

    context = {
        'communications': load_list(request, communications, 'Failed to load communications'),
        'type_choices': Communication.TYPE_CHOICES,
        'related_choices': RELATED_TO_CHOICES,
        'search_query': search_query,
        'filters': filters,
        'active_page': 'communications',
    }
    return render(request, 'activities/communication_list.html', context)


@module_required(COMMUNICATIONS)
def communication_create_view(request):
    form = CommunicationForm(request.POST or None)
    if request.method == 'POST' and form.is_valid():
        form.instance.created_by = request.crm_session.current_user
        if save_form(request, form, 'Communication "{}" logged successfully', 'Failed to log communication'):
            return redirect('activities:communication_list')

    context = {
        'form': form,
        'form_title': 'Log Communication',
        'active_page': 'communications',
    }
    return render(request, 'core/entity_form.html', context)


@module_required(COMMUNICATIONS)
def communication_edit_view(request, pk):
    communication = get_object_or_404(Communication, pk=pk)
    form = CommunicationForm(request.POST or None, instance=communication)
    if request.method == 'POST' and form.is_valid():
        if save_form(request, form, 'Communication "{}" updated successfully', 'Failed to update communication'):
            return redirect('activities:communication_list')

    context = {
        'form': form,
        'object': communication,
        'form_title': f'Edit Communication: {communication.subject}',
        'active_page': 'communications',
    }
    return render(request, 'core/entity_form.html', context)


@module_required(COMMUNICATIONS)
def communication_delete_view(request, pk):
    communication = get_object_or_404(Communication, pk=pk)

    if request.method == 'POST':
        delete_instance(request, communication, 'Failed to delete communication')
        return redirect('activities:communication_list')

    context = {
        'object': communication,
        'object_label': communication.subject,
        'cancel_url': 'activities:communication_list',
        'active_page': 'communications',
    }
    return render(request, 'core/entity_confirm_delete.html', context)
