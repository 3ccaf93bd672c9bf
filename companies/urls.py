"""
URL routing for companies app.
"""
from django.urls import path

from . import views

urlpatterns = [
    path('company/', views.company, name='company'),
    path('competitors/', views.competitors, name='competitors'),
]
