"""
SEO models: one audited page snapshot per (company, url).
"""
from django.db import models
from companies.models import Company


class SeoPage(models.Model):
    """
    Latest on-page audit of a URL. Re-auditing overwrites the row.
    """
    company = models.ForeignKey(Company, on_delete=models.CASCADE, related_name='seo_pages')
    url = models.URLField(max_length=2000)
    title = models.CharField(max_length=500, blank=True)
    h1 = models.CharField(max_length=500, blank=True)
    meta_desc = models.TextField(blank=True)
    score = models.PositiveSmallIntegerField(default=0)
    issues = models.JSONField(default=list, blank=True)
    last_checked = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'seo_page'
        ordering = ['-last_checked', '-id']
        unique_together = [['company', 'url']]

    def __str__(self):
        return f"{self.url} ({self.score})"
