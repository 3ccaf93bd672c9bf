"""
Product model: postable items extracted from a company's website.
"""
from django.db import models
from companies.models import Company

TITLE_MAX_LENGTH = 500
PRICE_MAX_LENGTH = 64


class Product(models.Model):
    company = models.ForeignKey(Company, on_delete=models.CASCADE, related_name='products')
    title = models.CharField(max_length=TITLE_MAX_LENGTH)
    url = models.URLField(max_length=2000)
    summary = models.TextField(blank=True)
    price = models.CharField(max_length=PRICE_MAX_LENGTH, blank=True, null=True,
        help_text="Raw price token as found on the page, e.g. R499")
    images = models.JSONField(default=list, blank=True)
    tags = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'product'
        ordering = ['id']
        indexes = [
            models.Index(fields=['company', 'id'], name='product_company_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.company.name})"
