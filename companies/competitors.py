"""
Competitor snapshot: fetch each competitor page and pull its title.

The cadence and topic fields are fixed placeholders until real
social-feed analysis exists.
"""
import logging
from typing import Dict, List

from scraping.fetch import fetch_html
from scraping.html_rules import extract_title, strip_tags

logger = logging.getLogger(__name__)

CADENCE_GUESS = 'weekly'
TOPIC_GUESS = ['pricing', 'coverage', 'support']


def analyze_competitors(competitors, session=None) -> List[Dict]:
    """
    Snapshot a list of competitors.

    Args:
        competitors: iterable of objects with .id and .url (Competitor rows)
        session: Optional requests.Session used for every fetch

    Returns:
        One dict per competitor, in input order. A failed fetch yields
        {id, url, error: 'fetch_failed'} for that item only.
    """
    out = []
    for competitor in competitors:
        outcome = fetch_html(competitor.url, session=session)
        if not outcome.ok:
            logger.warning("Competitor %s fetch failed: %s", competitor.url, outcome.reason)
            out.append({'id': competitor.id, 'url': competitor.url, 'error': 'fetch_failed'})
            continue

        out.append({
            'id': competitor.id,
            'url': competitor.url,
            'title': strip_tags(extract_title(outcome.html)),
            'cadence_guess': CADENCE_GUESS,
            'topic_guess': list(TOPIC_GUESS),
        })
    return out
