from django.urls import path
from . import views

app_name = 'contacts'

urlpatterns = [
    path('contacts/', views.contact_list_view, name='contact_list'),
    path('contacts/create/', views.contact_create_view, name='contact_create'),
    path('contacts/<int:pk>/edit/', views.contact_edit_view, name='contact_edit'),
    path('contacts/<int:pk>/delete/', views.contact_delete_view, name='contact_delete'),

    path('accounts/', views.account_list_view, name='account_list'),
    path('accounts/create/', views.account_create_view, name='account_create'),
    path('accounts/<int:pk>/edit/', views.account_edit_view, name='account_edit'),
    path('accounts/<int:pk>/delete/', views.account_delete_view, name='account_delete'),
]
