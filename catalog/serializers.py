"""
Request schemas for catalog endpoints.
"""
from django.conf import settings
from rest_framework import serializers


class IngestRequestSerializer(serializers.Serializer):
    """Request body for POST /api/v1/ingest/."""
    company_id = serializers.IntegerField(min_value=1)
    limit = serializers.IntegerField(min_value=1, max_value=500, required=False)

    def validate(self, attrs):
        attrs.setdefault('limit', settings.SMM_INGEST_DEFAULT_LIMIT)
        return attrs
