"""
Site ingestion endpoint: crawl the company website and store extracted products.
"""
import logging

from django.core.cache import caches
from django.db import transaction
from rest_framework.decorators import api_view
from rest_framework.response import Response

from companies.lookups import get_company_or_404, invalid_request
from scraping.crawler import crawl_site
from scraping.products import extract_products
from .models import PRICE_MAX_LENGTH, TITLE_MAX_LENGTH, Product
from .serializers import IngestRequestSerializer

logger = logging.getLogger(__name__)


def save_products(company, records):
    """Insert extracted records for a company as one batch, clipped to the column widths."""
    with transaction.atomic():
        return Product.objects.bulk_create([
            Product(
                company=company,
                title=r.title[:TITLE_MAX_LENGTH],
                url=r.url,
                summary=r.summary,
                price=r.price[:PRICE_MAX_LENGTH] if r.price else None,
                images=list(r.images),
                tags=list(r.tags),
            )
            for r in records
        ])


@api_view(['POST'])
def ingest_site(request):
    """
    POST /api/v1/ingest/
    Body: { "company_id": 1, "limit": 20 }

    Returns: { "pages": <pages fetched>, "products": <products stored> }
    """
    serializer = IngestRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return invalid_request(serializer)

    company, err = get_company_or_404(serializer.validated_data['company_id'])
    if err:
        return err

    limit = serializer.validated_data['limit']
    pages = crawl_site(company.site_url, limit, caches['sitemaps'])
    products = extract_products(pages)
    save_products(company, products)

    logger.info(
        "Ingested %s for company %s: %d pages, %d products",
        company.site_url, company.id, len(pages), len(products),
    )
    return Response({'pages': len(pages), 'products': len(products)})
