"""
URL routing for catalog app.
"""
from django.urls import path

from . import views

urlpatterns = [
    path('ingest/', views.ingest_site, name='ingest'),
]
