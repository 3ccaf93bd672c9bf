"""
Weekly content plan builder.

Turns a company profile and its extracted products into seven days of posts
for every requested platform. Captions, hashtags and image prompts come from
fixed string templates; no language model is involved. Given the same start
date the output is fully deterministic.
"""
import re
from datetime import date, timedelta
from typing import Dict, List, Optional

from django.conf import settings
from django.utils import timezone

from scraping.products import ProductRecord, dedupe_by

PLATFORMS = ('facebook', 'instagram', 'linkedin', 'x')
PLAN_DAYS = 7
POST_TIME_UTC = '09:00:00Z'
CAPTION_SUMMARY_CHARS = 140
MAX_TAG_HASHTAGS = 3
DEFAULT_HEADLINE = 'Our services'
ELLIPSIS = '…'
WHITESPACE_RE = re.compile(r'\s+')


def truncate(text: Optional[str], limit: int) -> str:
    """Cut text to `limit` characters, the last one being an ellipsis when cut."""
    text = text or ''
    if len(text) > limit:
        return text[:limit - 1] + ELLIPSIS
    return text


def caption_template(product) -> str:
    line = f"{product.title or DEFAULT_HEADLINE} — {truncate(product.summary, CAPTION_SUMMARY_CHARS)}"
    return f"{line}\n{settings.SMM_CONTACT_LINE}".strip()


def base_hashtags(product) -> List[str]:
    tags = list(settings.SMM_BASE_HASHTAGS)
    product_tags = getattr(product, 'tags', None) or []
    tags.extend('#' + WHITESPACE_RE.sub('', t) for t in product_tags[:MAX_TAG_HASHTAGS])
    return dedupe_by(tags, lambda t: t)


def image_prompt(product, company) -> str:
    # Brand colours are stored on the company but not substituted here
    return (
        f"Minimal ad tile for {company.name}. Headline: {product.title}. "
        f"Colors: brand palette if available. Include logo if available."
    )


def fallback_record(company) -> ProductRecord:
    """Stand-in subject used when a company has no extracted products."""
    return ProductRecord(
        title=company.name,
        url=company.site_url or '',
        summary=company.description or '',
    )


def plan_days(start: date) -> List[date]:
    return [start + timedelta(days=offset) for offset in range(PLAN_DAYS)]


def build_weekly_plan(company, products, platforms, start: Optional[date] = None) -> Dict:
    """
    Build a week of posts.

    Args:
        company: object with .name, .description, .site_url (Company)
        products: sequence of objects with .title, .summary, .tags (Product or ProductRecord)
        platforms: platform names; duplicates are kept and yield duplicate posts
        start: first day of the plan, defaults to today on the server's calendar

    Returns:
        {'posts': [...], 'count': len(posts)} where each post has platform,
        scheduled_at, caption, hashtags (list) and image_prompt.
    """
    start = start or timezone.localdate()
    products = list(products)

    posts = []
    for offset, day in enumerate(plan_days(start)):
        if products:
            product = products[offset % max(1, len(products))]
        else:
            product = fallback_record(company)

        for platform in platforms:
            posts.append({
                'platform': platform,
                'scheduled_at': f"{day.isoformat()}T{POST_TIME_UTC}",
                'caption': caption_template(product),
                'hashtags': base_hashtags(product),
                'image_prompt': image_prompt(product, company),
            })

    return {'posts': posts, 'count': len(posts)}
