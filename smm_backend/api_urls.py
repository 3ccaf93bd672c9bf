"""
API URL routing for smm_backend.
All API endpoints are prefixed with /api/v1/
"""
from django.urls import path, include

from .views import health_check

urlpatterns = [
    # Health check (no auth) - GET /api/v1/health/
    path('health/', health_check),
    # Business profile + competitors
    path('', include('companies.urls')),
    # Site ingestion (sitemap crawl + product extraction)
    path('', include('catalog.urls')),
    # Weekly content plans, posts and CSV export
    path('', include('content.urls')),
    # On-page SEO audit
    path('seo/', include('seo.urls')),
]
