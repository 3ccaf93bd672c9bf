"""
Request middleware for smm_backend.
"""
from django.middleware.common import CommonMiddleware

API_PREFIX = '/api/'


class APICommonMiddleware(CommonMiddleware):
    """
    CommonMiddleware with APPEND_SLASH turned off under API_PREFIX.

    A slash redirect would drop the body of POST /api/v1/ingest, so a slashless
    API path answers with the JSON 404 instead. Admin and other routes keep
    the usual redirect.
    """
    def should_redirect_with_slash(self, request):
        if request.path_info.startswith(API_PREFIX):
            return False
        return super().should_redirect_with_slash(request)
