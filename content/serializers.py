"""
Serializers for content plans and posts, plus request schemas for their endpoints.
"""
from rest_framework import serializers

from scraping.products import dedupe_by
from .models import ContentPlan, Post
from .planner import PLATFORMS


class PlanRequestSerializer(serializers.Serializer):
    """Request body for POST /api/v1/plan/week/."""
    company_id = serializers.IntegerField(min_value=1)
    week_start = serializers.DateField()
    platforms = serializers.ListField(
        child=serializers.ChoiceField(choices=PLATFORMS),
        required=False,
        allow_empty=False,
    )

    def validate_platforms(self, value):
        """Repeated platforms would double-post every day; keep the first of each."""
        return dedupe_by(value, lambda p: p)

    def validate(self, attrs):
        attrs.setdefault('platforms', list(PLATFORMS))
        return attrs


class PlanQuerySerializer(serializers.Serializer):
    """Query string for GET /api/v1/posts/ and body for POST /api/v1/export/csv/."""
    plan_id = serializers.IntegerField(min_value=1)


class ContentPlanListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for plan lists."""

    class Meta:
        model = ContentPlan
        fields = ('id', 'week_start', 'platform', 'status')


class PostSerializer(serializers.ModelSerializer):
    """Serializer for Post model."""

    class Meta:
        model = Post
        fields = (
            'id', 'platform', 'scheduled_at', 'caption',
            'hashtags', 'image_prompt', 'status',
        )
        read_only_fields = fields
