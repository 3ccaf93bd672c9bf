"""
URL routing for content app.
"""
from django.urls import path

from . import views

urlpatterns = [
    path('plan/week/', views.plan_week, name='plan-week'),
    path('plans/', views.plan_list, name='plan-list'),
    path('posts/', views.post_list, name='post-list'),
    path('export/csv/', views.export_csv, name='export-csv'),
]
