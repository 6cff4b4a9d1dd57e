from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

# Main URL Configuration
# Routes all requests to appropriate apps

urlpatterns = [

    path('admin/', admin.site.urls),
    path('', include('apps.core.urls')),
    path('', include('apps.accounts.urls')),
    path('leads/', include('apps.leads.urls')),
    path('', include('apps.contacts.urls')),
    path('deals/', include('apps.deals.urls')),
    path('', include('apps.activities.urls')),
    path('campaigns/', include('apps.campaigns.urls')),
    path('notifications/', include('apps.notifications.urls')),

]

if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
