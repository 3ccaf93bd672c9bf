"""
Serializers for SEO pages and audit requests.
"""
from rest_framework import serializers
from .models import SeoPage


class AuditRequestSerializer(serializers.Serializer):
    """Query string for GET /api/v1/seo/audit/."""
    company_id = serializers.IntegerField(min_value=1)
    url = serializers.URLField()


class SeoPageSerializer(serializers.ModelSerializer):
    """Serializer for SeoPage model."""

    class Meta:
        model = SeoPage
        fields = ('id', 'url', 'title', 'h1', 'meta_desc', 'score', 'last_checked', 'issues')
        read_only_fields = fields
