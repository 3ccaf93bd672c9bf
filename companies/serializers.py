"""
Serializers for Company and Competitor, plus request schemas for their endpoints.
"""
import json

from rest_framework import serializers
from .models import Company, Competitor


class LenientJSONObjectField(serializers.Field):
    """
    JSON object field that accepts a dict or a JSON-encoded string.

    The form client posts socials/colors as free text; anything that does not
    decode to an object is stored as an empty object instead of failing the request.
    """
    def to_internal_value(self, data):
        if isinstance(data, str):
            try:
                data = json.loads(data) if data.strip() else {}
            except ValueError:
                return {}
        if not isinstance(data, dict):
            return {}
        return data

    def to_representation(self, value):
        if isinstance(value, str):
            return self.to_internal_value(value)
        return value or {}


class CompanySerializer(serializers.ModelSerializer):
    """Serializer for Company model (business profile)."""
    socials = LenientJSONObjectField(required=False, default=dict)
    colors = LenientJSONObjectField(required=False, default=dict)

    class Meta:
        model = Company
        fields = (
            'id', 'name', 'description', 'tone', 'site_url', 'logo_url',
            'socials', 'colors', 'created_at', 'updated_at',
        )
        read_only_fields = ('id', 'created_at', 'updated_at')
        extra_kwargs = {
            'description': {'required': False, 'allow_blank': True, 'allow_null': True},
            'tone': {'required': False, 'allow_blank': True, 'allow_null': True},
            'logo_url': {'required': False, 'allow_blank': True, 'allow_null': True},
        }

    def validate(self, attrs):
        # Blank optional strings are stored as NULL
        for field in ('description', 'tone', 'logo_url'):
            if attrs.get(field) == '':
                attrs[field] = None
        return attrs


class CompetitorInputSerializer(serializers.Serializer):
    """One competitor entry in an add request."""
    name = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    url = serializers.URLField()
    socials = LenientJSONObjectField(required=False, default=dict)


class CompetitorsAddSerializer(serializers.Serializer):
    """Request body for POST /api/v1/competitors/."""
    company_id = serializers.IntegerField(min_value=1)
    competitors = CompetitorInputSerializer(many=True, required=False, default=list)


class CompanyQuerySerializer(serializers.Serializer):
    """Query string for endpoints addressed by ?company_id=."""
    company_id = serializers.IntegerField(min_value=1)


class CompetitorSerializer(serializers.ModelSerializer):
    """Serializer for Competitor model."""
    socials = LenientJSONObjectField(required=False, default=dict)

    class Meta:
        model = Competitor
        fields = ('id', 'company_id', 'name', 'url', 'socials', 'created_at')
        read_only_fields = fields
