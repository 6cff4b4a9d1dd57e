from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [

    path('login/', views.login_view, name='login'),
    path('signup/', views.signup_view, name='signup'),
    path('logout/', views.logout_view, name='logout'),
    path('users/', views.user_list_view, name='user_list'),
    path('users/create/', views.user_create_view, name='user_create'),
    path('users/<int:pk>/edit/', views.user_edit_view, name='user_edit'),
    path('users/<int:pk>/toggle-status/', views.user_toggle_status_view, name='user_toggle_status'),
    path('users/<int:pk>/delete/', views.user_delete_view, name='user_delete'),
    path('security/', views.security_view, name='security'),
]
