from django.contrib import admin
from .models import ContentPlan, Post


@admin.register(ContentPlan)
class ContentPlanAdmin(admin.ModelAdmin):
    list_display = ('id', 'company', 'week_start', 'status', 'created_at')
    list_filter = ('status', 'company', 'created_at')
    search_fields = ('company__name',)
    readonly_fields = ('created_at', 'snapshot')


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ('plan', 'platform', 'scheduled_at', 'status')
    list_filter = ('platform', 'status')
    search_fields = ('caption', 'hashtags')
