"""
HTML extraction ruleset.

Pulls titles, headings, prices, images, links and meta tags out of raw HTML
with regular expressions. No DOM is built: every function takes the page
source as a string and returns plain values. Absence of a pattern yields an
empty result, never an exception.

Bump RULESET_VERSION whenever a pattern changes so stored extractions can be
traced back to the rules that produced them.
"""
import re
from typing import List

RULESET_VERSION = '1.1'

TITLE_RE = re.compile(r'<title>(.*?)</title>', re.I)
H1_RE = re.compile(r'<h1[^>]*>(.*?)</h1>', re.I)
META_DESCRIPTION_RE = re.compile(
    r'<meta[^>]*name=["\']description["\'][^>]*content=["\']([^"\']*)["\'][^>]*>', re.I
)
HEADING_RE = re.compile(r'<(h2|h3)[^>]*>(.*?)</\1>', re.I)
# "R" immediately followed by digits, with optional ,/. separated digit groups: R499, R1,299.00, ZAR1000
PRICE_RE = re.compile(r'R\d+(?:[.,]\d+)*')
IMG_SRC_RE = re.compile(r'<img[^>]*src=["\']([^"\']+)["\']', re.I)
IMG_MISSING_ALT_RE = re.compile(r'<img\b(?![^>]*alt=)[^>]*>', re.I)
LINK_RE = re.compile(r'<a\b[^>]*href=', re.I)
SITEMAP_LOC_RE = re.compile(r'<loc>(.*?)</loc>', re.I | re.S)

TAG_RE = re.compile(r'<[^>]+>')
WHITESPACE_RE = re.compile(r'\s+')
SCRIPT_RE = re.compile(r'<script[\s\S]*?</script>', re.I)
STYLE_RE = re.compile(r'<style[\s\S]*?</style>', re.I)


def strip_tags(text: str) -> str:
    """Remove all markup and collapse whitespace."""
    if not text:
        return ''
    return WHITESPACE_RE.sub(' ', TAG_RE.sub('', text)).strip()


def _first_group(pattern: re.Pattern, html: str) -> str:
    match = pattern.search(html or '')
    return match.group(1) if match else ''


def extract_title(html: str) -> str:
    return _first_group(TITLE_RE, html)


def extract_h1(html: str) -> str:
    return _first_group(H1_RE, html)


def extract_meta_description(html: str) -> str:
    return _first_group(META_DESCRIPTION_RE, html)


def extract_heading_texts(html: str) -> List[str]:
    """All h2/h3 inner texts in document order, tags stripped."""
    return [strip_tags(m.group(2)) for m in HEADING_RE.finditer(html or '')]


def extract_price_tokens(html: str) -> List[str]:
    return PRICE_RE.findall(html or '')


def extract_image_sources(html: str) -> List[str]:
    return IMG_SRC_RE.findall(html or '')


def extract_link_count(html: str) -> int:
    return len(LINK_RE.findall(html or ''))


def count_images_missing_alt(html: str) -> int:
    return len(IMG_MISSING_ALT_RE.findall(html or ''))


def extract_sitemap_locations(xml: str) -> List[str]:
    """<loc> entries of a sitemap document, surrounding whitespace trimmed."""
    return [loc.strip() for loc in SITEMAP_LOC_RE.findall(xml or '') if loc.strip()]


def visible_text(html: str) -> str:
    """Human-readable page text with script and style blocks removed."""
    html = SCRIPT_RE.sub(' ', html or '')
    html = STYLE_RE.sub(' ', html)
    return strip_tags(html)
