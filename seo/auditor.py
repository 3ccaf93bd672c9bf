"""
On-page SEO quick check.

Fetches one URL and scores it against a fixed rule set. Each failed rule adds
an issue and costs ISSUE_PENALTY points; the score never drops below zero.
A failed fetch is a terminal zero-score result, not an exception.
"""
import logging
from typing import Dict, List

from scraping.fetch import fetch_html
from scraping.html_rules import (
    count_images_missing_alt,
    extract_h1,
    extract_link_count,
    extract_meta_description,
    extract_title,
    strip_tags,
)

logger = logging.getLogger(__name__)

MAX_SCORE = 100
ISSUE_PENALTY = 12
MIN_LINKS = 5


def score_for(issue_count: int) -> int:
    return max(0, MAX_SCORE - ISSUE_PENALTY * issue_count)


def check_html(html: str) -> Dict:
    """
    Run the rule set over a page's HTML.

    Rules, in order: title, h1, meta description, images without alt,
    fewer than MIN_LINKS links.
    """
    title = extract_title(html)
    h1 = extract_h1(html)
    meta_desc = extract_meta_description(html)
    missing_alt = count_images_missing_alt(html)
    links = extract_link_count(html)

    issues: List[Dict] = []
    if not title:
        issues.append({'id': 'title', 'msg': 'Missing <title>'})
    if not h1:
        issues.append({'id': 'h1', 'msg': 'Missing <h1>'})
    if not meta_desc:
        issues.append({'id': 'meta', 'msg': 'Missing meta description'})
    if missing_alt > 0:
        issues.append({'id': 'img_alt', 'msg': f"{missing_alt} images missing alt"})
    if links < MIN_LINKS:
        issues.append({'id': 'links', 'msg': 'Low internal link count'})

    return {
        'title': strip_tags(title),
        'h1': strip_tags(h1),
        'meta_desc': strip_tags(meta_desc),
        'score': score_for(len(issues)),
        'issues': issues,
    }


def audit_page(url: str, session=None) -> Dict:
    """
    Audit a single page.

    Returns:
        {url, title, h1, meta_desc, score, issues}. On a non-2xx response the
        score is 0 with one issue {'id': 'fetch', 'msg': 'HTTP <status>'}.
    """
    outcome = fetch_html(url, session=session)
    if not outcome.ok:
        if outcome.status_code is not None:
            msg = f"HTTP {outcome.status_code}"
        else:
            msg = f"Fetch failed: {outcome.reason}"
        logger.warning("Audit of %s could not fetch the page: %s", url, msg)
        return {
            'url': url,
            'title': '',
            'h1': '',
            'meta_desc': '',
            'score': 0,
            'issues': [{'id': 'fetch', 'msg': msg}],
        }

    return {'url': url, **check_html(outcome.html)}
