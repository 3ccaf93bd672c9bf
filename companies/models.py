"""
Company (business profile) and Competitor models.
"""
from django.db import models


class Company(models.Model):
    """
    The business being marketed.
    Products, content plans and SEO pages all hang off a company.
    """
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    tone = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        help_text="Free-text style hint for generated copy"
    )
    site_url = models.URLField(help_text="Base URL of the business website")
    logo_url = models.URLField(blank=True, null=True)
    socials = models.JSONField(
        default=dict,
        blank=True,
        help_text="Social handles keyed by platform, e.g. {'x': '@vinet'}"
    )
    colors = models.JSONField(
        default=dict,
        blank=True,
        help_text="Brand colours keyed by role, e.g. {'primary': '#0055aa'}"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'company'
        ordering = ['-id']
        verbose_name_plural = 'companies'

    def __str__(self):
        return f"{self.name} ({self.site_url})"


class Competitor(models.Model):
    """A competitor site tracked for a company. Append-only, no dedup."""
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name='competitors'
    )
    name = models.CharField(max_length=255, blank=True, null=True)
    url = models.URLField()
    socials = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'competitor'
        ordering = ['id']

    def __str__(self):
        return f"{self.name or self.url} (competitor of {self.company.name})"
