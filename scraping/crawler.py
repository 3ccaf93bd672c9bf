"""
Site crawler: sitemap discovery plus page fetch.

The crawler does not follow links. It resolves the site's sitemap into a
bounded URL list (falling back to the site URL itself), caches that list, and
fetches each URL independently.
"""
import logging
from dataclasses import dataclass
from typing import List
from urllib.parse import urljoin

from django.conf import settings

from .fetch import FetchOutcome, fetch_html
from .html_rules import extract_sitemap_locations

logger = logging.getLogger(__name__)


@dataclass
class RawPage:
    url: str
    html: str


def sitemap_cache_key(site_url: str) -> str:
    return f"sitemap:{site_url}"


def resolve_urls(site_url: str, limit: int, cache, session=None) -> List[str]:
    """
    Resolve the list of URLs to crawl for a site.

    A cached list is reused as-is while it lives, even if the sitemap has
    changed since. On a cache miss the sitemap at the site root is fetched;
    when it fails or lists nothing the crawl falls back to [site_url]. The
    resolved list (fallback included) is cached for SITEMAP_CACHE_TTL seconds.
    """
    key = sitemap_cache_key(site_url)
    cached = cache.get(key)
    if cached:
        return list(cached)

    urls: List[str] = []
    outcome = fetch_html(urljoin(site_url, '/sitemap.xml'), session=session)
    if outcome.ok:
        urls = extract_sitemap_locations(outcome.html)[:limit]

    if not urls:
        logger.info("No sitemap URLs for %s, crawling the site URL only", site_url)
        urls = [site_url]

    cache.set(key, urls, timeout=settings.SITEMAP_CACHE_TTL)
    return urls


def fetch_pages(urls: List[str], session=None) -> List[FetchOutcome]:
    """Fetch each URL in order; one outcome per URL."""
    return [fetch_html(url, session=session) for url in urls]


def crawl_site(site_url: str, limit: int, cache, session=None) -> List[RawPage]:
    """
    Crawl up to `limit` pages of a site.

    Args:
        site_url: Base URL of the business website
        limit: Maximum number of URLs to resolve and fetch
        cache: Django cache (BaseCache) used for the resolved URL list
        session: Optional requests.Session used for every fetch

    Returns:
        RawPage list for the fetches that succeeded, in resolved URL order.
        Failed fetches are skipped; the list may be empty.
    """
    urls = resolve_urls(site_url, limit, cache, session=session)[:limit]
    outcomes = fetch_pages(urls, session=session)

    pages = [RawPage(url=o.url, html=o.html) for o in outcomes if o.ok]
    skipped = len(outcomes) - len(pages)
    if skipped:
        logger.warning("Crawl of %s skipped %d of %d pages", site_url, skipped, len(outcomes))
    return pages
