"""
Content plan and post models.
"""
from django.db import models
from companies.models import Company


class ContentPlan(models.Model):
    """
    One generated week of posts for a company.
    `snapshot` keeps the plan exactly as generated; the Post rows are created from it.
    """
    STATUS_CHOICES = [
        ('draft', 'Draft'),
    ]

    company = models.ForeignKey(Company, on_delete=models.CASCADE, related_name='content_plans')
    week_start = models.DateField()
    platform = models.CharField(max_length=32, default='multi')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='draft')
    snapshot = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'content_plan'
        ordering = ['-id']

    def __str__(self):
        return f"Plan {self.id}: {self.company.name}, week of {self.week_start}"


class Post(models.Model):
    PLATFORM_CHOICES = [
        ('facebook', 'Facebook'),
        ('instagram', 'Instagram'),
        ('linkedin', 'LinkedIn'),
        ('x', 'X'),
    ]
    STATUS_CHOICES = [
        ('draft', 'Draft'),
        ('published', 'Published'),
        ('failed', 'Failed'),
    ]

    plan = models.ForeignKey(ContentPlan, on_delete=models.CASCADE, related_name='posts')
    platform = models.CharField(max_length=32, choices=PLATFORM_CHOICES)
    caption = models.TextField()
    hashtags = models.TextField(blank=True, help_text="Space-joined hashtags")
    image_prompt = models.TextField(blank=True)
    scheduled_at = models.DateTimeField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='draft')

    class Meta:
        db_table = 'post'
        ordering = ['scheduled_at', 'id']
        indexes = [
            models.Index(fields=['plan', 'scheduled_at'], name='post_plan_scheduled_idx'),
        ]

    def __str__(self):
        return f"{self.get_platform_display()} post at {self.scheduled_at:%Y-%m-%d %H:%M}"
