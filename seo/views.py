"""
SEO audit views.
Runs on-page audits and lists stored audit snapshots.
"""
import logging

from django.utils import timezone
from rest_framework.decorators import api_view
from rest_framework.response import Response

from companies.lookups import get_company_or_404, invalid_request
from companies.serializers import CompanyQuerySerializer
from .auditor import audit_page
from .models import SeoPage
from .serializers import AuditRequestSerializer, SeoPageSerializer

logger = logging.getLogger(__name__)

PAGE_LIST_LIMIT = 100


def save_audit(company, audit):
    """Upsert the audit snapshot for (company, url); a re-audit replaces the previous one."""
    page, _ = SeoPage.objects.update_or_create(
        company=company,
        url=audit['url'],
        defaults={
            'title': audit['title'][:500],
            'h1': audit['h1'][:500],
            'meta_desc': audit['meta_desc'],
            'score': audit['score'],
            'issues': audit['issues'],
            'last_checked': timezone.now(),
        },
    )
    return page


@api_view(['GET'])
def seo_audit(request):
    """
    Audit one page and store the result.

    GET /api/v1/seo/audit/?company_id=1&url=https://example.com
    Returns: { "url", "title", "h1", "meta_desc", "score", "issues": [{ "id", "msg" }] }
    """
    query = AuditRequestSerializer(data=request.query_params)
    if not query.is_valid():
        return invalid_request(query)

    company, err = get_company_or_404(query.validated_data['company_id'])
    if err:
        return err

    audit = audit_page(query.validated_data['url'])
    save_audit(company, audit)

    logger.info("Audited %s for company %s: score %s", audit['url'], company.id, audit['score'])
    return Response(audit)


@api_view(['GET'])
def seo_page_list(request):
    """
    List audited pages for a company, most recently checked first.

    GET /api/v1/seo/pages/?company_id=1
    """
    query = CompanyQuerySerializer(data=request.query_params)
    if not query.is_valid():
        return invalid_request(query)

    pages = SeoPage.objects.filter(
        company_id=query.validated_data['company_id']
    ).order_by('-last_checked', '-id')[:PAGE_LIST_LIMIT]
    return Response({'pages': SeoPageSerializer(pages, many=True).data})
