"""
Content plan endpoints: weekly plan generation, listings and CSV export.
"""
import logging
import time

from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from django.db import transaction
from django.utils.dateparse import parse_datetime
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from companies.lookups import get_company_or_404, invalid_request
from companies.serializers import CompanyQuerySerializer
from .exporter import to_csv
from .models import ContentPlan, Post
from .planner import build_weekly_plan
from .serializers import (
    ContentPlanListSerializer,
    PlanQuerySerializer,
    PlanRequestSerializer,
    PostSerializer,
)

logger = logging.getLogger(__name__)

PLAN_LIST_LIMIT = 20
EXPORT_FIELDS = (
    'id', 'plan_id', 'platform', 'caption', 'hashtags',
    'image_prompt', 'scheduled_at', 'status',
)


def save_plan(company, week_start, plan_json):
    """
    Persist a generated plan and one draft Post per planned post.

    The snapshot and the rows are written in one transaction so they never disagree.
    """
    with transaction.atomic():
        plan = ContentPlan.objects.create(
            company=company,
            week_start=week_start,
            platform='multi',
            status='draft',
            snapshot=plan_json,
        )
        Post.objects.bulk_create([
            Post(
                plan=plan,
                platform=post['platform'],
                caption=post['caption'],
                hashtags=' '.join(post['hashtags']),
                image_prompt=post['image_prompt'],
                scheduled_at=parse_datetime(post['scheduled_at']),
                status='draft',
            )
            for post in plan_json['posts']
        ])
    return plan


@api_view(['POST'])
def plan_week(request):
    """
    POST /api/v1/plan/week/
    Body: { "company_id": 1, "week_start": "2026-10-19", "platforms": ["facebook", "x"] }

    Returns: { "plan_id": ..., "count": 7 * len(platforms) }
    """
    serializer = PlanRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return invalid_request(serializer)

    data = serializer.validated_data
    company, err = get_company_or_404(data['company_id'])
    if err:
        return err

    products = company.products.order_by('id')[:settings.SMM_PLAN_PRODUCT_LIMIT]
    plan_json = build_weekly_plan(company, products, data['platforms'], start=data['week_start'])
    plan = save_plan(company, data['week_start'], plan_json)

    logger.info("Created plan %s for company %s with %d posts", plan.id, company.id, plan_json['count'])
    return Response({'plan_id': plan.id, 'count': plan_json['count']}, status=status.HTTP_201_CREATED)


@api_view(['GET'])
def plan_list(request):
    """GET /api/v1/plans/?company_id=1 (latest plans first)."""
    query = CompanyQuerySerializer(data=request.query_params)
    if not query.is_valid():
        return invalid_request(query)

    plans = ContentPlan.objects.filter(
        company_id=query.validated_data['company_id']
    ).order_by('-id')[:PLAN_LIST_LIMIT]
    return Response({'plans': ContentPlanListSerializer(plans, many=True).data})


@api_view(['GET'])
def post_list(request):
    """GET /api/v1/posts/?plan_id=1 (posts of a plan in schedule order)."""
    query = PlanQuerySerializer(data=request.query_params)
    if not query.is_valid():
        return invalid_request(query)

    posts = Post.objects.filter(plan_id=query.validated_data['plan_id']).order_by('scheduled_at', 'id')
    return Response({'posts': PostSerializer(posts, many=True).data})


def export_rows(plan):
    """Post rows of a plan as flat dicts, timestamps in ISO 8601 UTC."""
    rows = []
    for row in plan.posts.order_by('scheduled_at', 'id').values(*EXPORT_FIELDS):
        row['scheduled_at'] = row['scheduled_at'].strftime('%Y-%m-%dT%H:%M:%SZ')
        rows.append(row)
    return rows


@api_view(['POST'])
def export_csv(request):
    """
    POST /api/v1/export/csv/
    Body: { "plan_id": 1 }

    Writes the plan's posts as CSV to the default storage.
    Returns: { "storage_key": "...", "csv": "...", "count": n }
    """
    serializer = PlanQuerySerializer(data=request.data)
    if not serializer.is_valid():
        return invalid_request(serializer)

    plan = ContentPlan.objects.filter(id=serializer.validated_data['plan_id']).first()
    if plan is None:
        return Response({'error': 'plan not found'}, status=status.HTTP_404_NOT_FOUND)

    rows = export_rows(plan)
    csv_text = to_csv(rows)
    key = f"{settings.SMM_EXPORT_PREFIX}/plan_{plan.id}_{int(time.time() * 1000)}.csv"
    storage_key = default_storage.save(key, ContentFile(csv_text.encode('utf-8')))

    logger.info("Exported plan %s (%d posts) to %s", plan.id, len(rows), storage_key)
    return Response({'storage_key': storage_key, 'csv': csv_text, 'count': len(rows)})
