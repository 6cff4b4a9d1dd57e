from django.urls import path
from . import views

app_name = 'leads'

urlpatterns = [
    path('', views.lead_list_view, name='lead_list'),
    path('create/', views.lead_create_view, name='lead_create'),
    path('<int:pk>/edit/', views.lead_edit_view, name='lead_edit'),
    path('<int:pk>/delete/', views.lead_delete_view, name='lead_delete'),
]
