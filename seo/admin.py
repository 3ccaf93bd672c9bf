from django.contrib import admin
from .models import SeoPage


@admin.register(SeoPage)
class SeoPageAdmin(admin.ModelAdmin):
    list_display = ('url', 'company', 'score', 'last_checked')
    list_filter = ('company', 'last_checked')
    search_fields = ('url', 'title', 'company__name')
    readonly_fields = ('last_checked',)
