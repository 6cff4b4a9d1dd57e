from django.urls import path
from . import views

app_name = 'activities'

urlpatterns = [
    path('tasks/', views.task_list_view, name='task_list'),
    path('tasks/create/', views.task_create_view, name='task_create'),
    path('tasks/<int:pk>/edit/', views.task_edit_view, name='task_edit'),
    path('tasks/<int:pk>/complete/', views.task_complete_view, name='task_complete'),
    path('tasks/<int:pk>/delete/', views.task_delete_view, name='task_delete'),

    path('communications/', views.communication_list_view, name='communication_list'),
    path('communications/create/', views.communication_create_view, name='communication_create'),
    path('communications/<int:pk>/edit/', views.communication_edit_view, name='communication_edit'),
    path('communications/<int:pk>/delete/', views.communication_delete_view, name='communication_delete'),
]
