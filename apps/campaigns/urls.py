from django.urls import path
from . import views

app_name = 'campaigns'

urlpatterns = [
    path('', views.campaign_list_view, name='campaign_list'),
    path('create/', views.campaign_create_view, name='campaign_create'),
    path('<int:pk>/edit/', views.campaign_edit_view, name='campaign_edit'),
    path('<int:pk>/delete/', views.campaign_delete_view, name='campaign_delete'),
]
