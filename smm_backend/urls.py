"""
Root URL configuration: admin plus the versioned API.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include('smm_backend.api_urls')),
]

handler404 = 'smm_backend.views.not_found'
handler500 = 'smm_backend.views.server_error'
