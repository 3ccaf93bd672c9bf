"""
Business profile and competitor endpoints.
"""
import logging

from django.db import transaction
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .competitors import analyze_competitors
from .lookups import get_company_or_404, invalid_request
from .models import Company, Competitor
from .serializers import (
    CompanyQuerySerializer,
    CompanySerializer,
    CompetitorsAddSerializer,
    CompetitorSerializer,
)

logger = logging.getLogger(__name__)


@api_view(['GET', 'POST'])
def company(request):
    """
    POST /api/v1/company/: create a business profile. Returns { "id": ... }.
    GET  /api/v1/company/: latest business profile, or null when none exists.
    """
    if request.method == 'GET':
        latest = Company.objects.order_by('-id').first()
        return Response({'company': CompanySerializer(latest).data if latest else None})

    serializer = CompanySerializer(data=request.data)
    if not serializer.is_valid():
        return invalid_request(serializer)

    created = serializer.save()
    logger.info("Created company %s (%s)", created.id, created.site_url)
    return Response({'id': created.id}, status=status.HTTP_201_CREATED)


@api_view(['GET', 'POST'])
def competitors(request):
    """
    POST /api/v1/competitors/
    Body: { "company_id": 1, "competitors": [{ "name": "...", "url": "...", "socials": {} }] }
    Returns: { "added": n }

    GET /api/v1/competitors/?company_id=1
    Returns: { "competitors": [...], "analysis": [...] }. Analysis fetches every competitor page.
    """
    if request.method == 'GET':
        query = CompanyQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return invalid_request(query)

        company_obj, err = get_company_or_404(query.validated_data['company_id'])
        if err:
            return err

        rows = list(company_obj.competitors.all())
        return Response({
            'competitors': CompetitorSerializer(rows, many=True).data,
            'analysis': analyze_competitors(rows),
        })

    serializer = CompetitorsAddSerializer(data=request.data)
    if not serializer.is_valid():
        return invalid_request(serializer)

    company_obj, err = get_company_or_404(serializer.validated_data['company_id'])
    if err:
        return err

    entries = serializer.validated_data['competitors']
    with transaction.atomic():
        Competitor.objects.bulk_create([
            Competitor(
                company=company_obj,
                name=entry.get('name') or None,
                url=entry['url'],
                socials=entry.get('socials') or {},
            )
            for entry in entries
        ])

    return Response({'added': len(entries)}, status=status.HTTP_201_CREATED)
