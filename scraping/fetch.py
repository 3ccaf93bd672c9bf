"""
HTTP page fetching shared by the crawler, the SEO auditor and competitor analysis.

Every fetch returns a FetchOutcome instead of raising: callers working on a
batch keep going past a failed URL, single-target callers turn the failure
into their own result shape.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


@dataclass
class FetchOutcome:
    """Result of fetching one URL: success carries html, failure carries a reason."""
    url: str
    ok: bool
    html: str = ''
    status_code: Optional[int] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, url: str, html: str, status_code: int) -> 'FetchOutcome':
        return cls(url=url, ok=True, html=html, status_code=status_code)

    @classmethod
    def failure(cls, url: str, reason: str, status_code: Optional[int] = None) -> 'FetchOutcome':
        return cls(url=url, ok=False, status_code=status_code, reason=reason)


def default_headers() -> dict:
    return {'User-Agent': settings.SMM_USER_AGENT}


def fetch_html(url: str, session=None) -> FetchOutcome:
    """
    GET a URL and return its body as text.

    Args:
        url: Absolute URL to fetch
        session: Optional requests.Session (or anything with the same .get signature)

    Returns:
        FetchOutcome.success for 2xx responses; FetchOutcome.failure with
        "HTTP <status>" for other statuses, or the exception text for network errors.
    """
    http = session or requests
    try:
        resp = http.get(url, headers=default_headers(), timeout=settings.SMM_FETCH_TIMEOUT)
    except requests.RequestException as exc:
        logger.warning("Fetch %s failed: %s", url, exc)
        return FetchOutcome.failure(url, str(exc))

    if not 200 <= resp.status_code < 300:
        logger.warning("Fetch %s failed: HTTP %s", url, resp.status_code)
        return FetchOutcome.failure(url, f"HTTP {resp.status_code}", status_code=resp.status_code)

    return FetchOutcome.success(url, resp.text, resp.status_code)
