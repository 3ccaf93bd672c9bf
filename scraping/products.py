"""
Product extraction from crawled pages.

Any page carrying an h2/h3 heading is treated as describing one postable
item (a product, plan or service). Pure: no I/O, no Django models.
"""
import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from .html_rules import (
    extract_heading_texts,
    extract_image_sources,
    extract_price_tokens,
    visible_text,
)

SUMMARY_WORDS = 40
MAX_IMAGES = 3

# tag -> pattern; each probe runs independently against the raw page
TAG_PROBES = [
    ('fibre', re.compile(r'fibre|fiber', re.I)),
    ('wireless', re.compile(r'wireless|wifi', re.I)),
    ('voip', re.compile(r'voip', re.I)),
    ('hosting', re.compile(r'hosting|domain', re.I)),
]


@dataclass
class ProductRecord:
    title: str
    url: str
    summary: str = ''
    price: Optional[str] = None
    images: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)


def summarize(html: str, max_words: int = SUMMARY_WORDS) -> str:
    """First `max_words` words of the page's visible text."""
    return ' '.join(visible_text(html).split()[:max_words])


def guess_tags(html: str) -> List[str]:
    return [tag for tag, pattern in TAG_PROBES if pattern.search(html or '')]


def dedupe_by(items: Iterable, key: Callable) -> list:
    """Drop items whose key was already seen; first occurrence wins, order kept."""
    seen = set()
    out = []
    for item in items:
        k = key(item)
        if k in seen:
            continue
        seen.add(k)
        out.append(item)
    return out


def extract_products(pages) -> List[ProductRecord]:
    """
    Build product records from raw pages.

    Args:
        pages: iterable of objects with .url and .html (RawPage)

    Returns:
        One ProductRecord per page that has a heading, deduplicated by (title, url).
    """
    items = []
    for page in pages:
        titles = extract_heading_texts(page.html)
        if not titles:
            continue

        prices = extract_price_tokens(page.html)
        items.append(ProductRecord(
            title=titles[0],
            url=page.url,
            summary=summarize(page.html),
            price=prices[0] if prices else None,
            images=extract_image_sources(page.html)[:MAX_IMAGES],
            tags=guess_tags(page.html),
        ))

    return dedupe_by(items, lambda p: (p.title, p.url))
