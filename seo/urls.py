"""
URL routing for SEO app.
"""
from django.urls import path

from . import views

urlpatterns = [
    path('audit/', views.seo_audit, name='seo-audit'),
    path('pages/', views.seo_page_list, name='seo-pages'),
]
