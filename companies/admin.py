from django.contrib import admin
from .models import Company, Competitor


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ('name', 'site_url', 'tone', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('name', 'site_url')
    readonly_fields = ('created_at', 'updated_at')


@admin.register(Competitor)
class CompetitorAdmin(admin.ModelAdmin):
    list_display = ('name', 'url', 'company', 'created_at')
    search_fields = ('name', 'url', 'company__name')
    readonly_fields = ('created_at',)
