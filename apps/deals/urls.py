from django.urls import path
from . import views

app_name = 'deals'

urlpatterns = [
    path('', views.deal_list_view, name='deal_list'),
    path('create/', views.deal_create_view, name='deal_create'),
    path('<int:pk>/edit/', views.deal_edit_view, name='deal_edit'),
    path('<int:pk>/delete/', views.deal_delete_view, name='deal_delete'),
]
