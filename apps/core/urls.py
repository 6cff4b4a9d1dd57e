from django.urls import path
from . import views


app_name = 'core'

urlpatterns = [
    path('', views.home_view, name='home'),
    path('dashboard/', views.dashboard_view, name='dashboard'),
    path('reports/', views.reports_view, name='reports'),
    path('reports/export/', views.report_export_view, name='report_export'),
    path('organization/', views.organization_view, name='organization'),
    path('organization/holidays/add/', views.holiday_add_view, name='holiday_add'),
    path('organization/holidays/remove/', views.holiday_remove_view, name='holiday_remove'),
]
