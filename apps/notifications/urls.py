from django.urls import path
from . import views
from .api import NotificationPollView

app_name = 'notifications'

urlpatterns = [
    path('', views.notification_list_view, name='notification_list'),
    path('read-all/', views.notification_mark_all_read_view, name='notification_mark_all_read'),
    path('<str:notification_id>/read/', views.notification_mark_read_view, name='notification_mark_read'),
    path('<str:notification_id>/delete/', views.notification_delete_view, name='notification_delete'),
    path('api/', NotificationPollView.as_view(), name='poll'),
]
