from django.contrib import admin
from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('title', 'company', 'price', 'url', 'created_at')
    list_filter = ('company', 'created_at')
    search_fields = ('title', 'url', 'company__name')
    readonly_fields = ('created_at',)
