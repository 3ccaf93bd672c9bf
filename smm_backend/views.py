"""
Project-level views: liveness check and the JSON error handlers.
"""
import logging

from django.http import JsonResponse
from django.views.decorators.http import require_GET

from scraping.html_rules import RULESET_VERSION

logger = logging.getLogger(__name__)

SERVICE_NAME = 'smm-backend'


@require_GET
def health_check(request):
    """
    GET /api/v1/health/
    Returns: { "status": "ok", "service": ..., "ruleset": <extraction ruleset version> }
    """
    return JsonResponse({'status': 'ok', 'service': SERVICE_NAME, 'ruleset': RULESET_VERSION})


def not_found(request, exception=None):
    # Same {'error': ...} shape the API views return
    return JsonResponse({'error': 'not found', 'path': request.path}, status=404)


def server_error(request):
    logger.error("Unhandled error on %s %s", request.method, request.path)
    return JsonResponse({'error': 'internal server error'}, status=500)
