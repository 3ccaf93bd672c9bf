"""
Tests for the scraping package - extraction rules, crawler and product extraction.
"""
import pytest
import requests
from django.core.cache import caches

from scraping import html_rules
from scraping.crawler import RawPage, crawl_site, resolve_urls, sitemap_cache_key
from scraping.fetch import fetch_html
from scraping.products import ProductRecord, dedupe_by, extract_products, guess_tags, summarize


SITE = 'https://shop.example.com'
SITEMAP = 'https://shop.example.com/sitemap.xml'


def _sitemap(*urls):
    locs = ''.join(f"<url><loc>{u}</loc></url>" for u in urls)
    return f'<?xml version="1.0"?><urlset>{locs}</urlset>'


@pytest.fixture
def sitemap_cache():
    return caches['sitemaps']


class TestHtmlRules:

    def test_title_h1_meta(self):
        html = (
            '<html><head><title>Vinet <b>Fibre</b></title>'
            '<meta name="description" content="Fast fibre in the Cape"></head>'
            '<body><h1 class="hero">Home Fibre</h1></body></html>'
        )
        assert html_rules.extract_title(html) == 'Vinet <b>Fibre</b>'
        assert html_rules.extract_h1(html) == 'Home Fibre'
        assert html_rules.extract_meta_description(html) == 'Fast fibre in the Cape'

    def test_missing_patterns_yield_empty(self):
        assert html_rules.extract_title('<p>nothing</p>') == ''
        assert html_rules.extract_h1('') == ''
        assert html_rules.extract_meta_description(None) == ''
        assert html_rules.extract_heading_texts('<p>none</p>') == []
        assert html_rules.extract_price_tokens('free') == []
        assert html_rules.extract_image_sources('') == []
        assert html_rules.extract_link_count('') == 0
        assert html_rules.count_images_missing_alt('') == 0

    def test_entities_not_decoded(self):
        assert html_rules.extract_title('<title>Fish &amp; Chips</title>') == 'Fish &amp; Chips'

    def test_heading_texts_in_document_order(self):
        html = '<h3>Third</h3><h2 id="a"> Fibre   <em>100</em> </h2><h2>Wireless</h2>'
        assert html_rules.extract_heading_texts(html) == ['Third', 'Fibre 100', 'Wireless']

    def test_price_tokens(self):
        html = '<p>R499 per month, was R1,299.00. Install R 50.</p><p>Order 30 now</p>'
        assert html_rules.extract_price_tokens(html) == ['R499', 'R1,299.00']

    def test_price_token_inside_currency_code(self):
        assert html_rules.extract_price_tokens('Only ZAR1000 a year') == ['R1000']

    def test_image_and_link_counts(self):
        html = (
            '<img src="a.jpg"><img alt="b" src=\'b.png\'><img src="c.gif" alt="">'
            '<a href="/one">1</a><a class="x" href="/two">2</a><a name="anchor">3</a>'
        )
        assert html_rules.extract_image_sources(html) == ['a.jpg', 'b.png', 'c.gif']
        assert html_rules.count_images_missing_alt(html) == 1
        assert html_rules.extract_link_count(html) == 2

    def test_strip_tags_collapses_whitespace(self):
        assert html_rules.strip_tags('  <p>Hello\n\n  <b>world</b></p> ') == 'Hello world'
        assert html_rules.strip_tags('') == ''

    def test_visible_text_drops_script_and_style(self):
        html = '<style>.a{color:red}</style><p>Keep</p><script>var x = 1;</script><p>this</p>'
        assert html_rules.visible_text(html) == 'Keep this'

    def test_sitemap_locations(self):
        xml = _sitemap('https://a.example/1', ' https://a.example/2 ')
        assert html_rules.extract_sitemap_locations(xml) == ['https://a.example/1', 'https://a.example/2']


class TestFetch:

    def test_success(self, fake_session, settings):
        settings.SMM_USER_AGENT = 'SMM/1.0'
        session = fake_session({SITE: (200, '<p>ok</p>')})
        outcome = fetch_html(SITE, session=session)
        assert outcome.ok
        assert outcome.html == '<p>ok</p>'
        assert session.calls[0]['headers'] == {'User-Agent': 'SMM/1.0'}

    def test_non_2xx_is_failure(self, fake_session):
        outcome = fetch_html(SITE, session=fake_session({SITE: (503, 'down')}))
        assert not outcome.ok
        assert outcome.status_code == 503
        assert outcome.reason == 'HTTP 503'

    def test_network_error_is_failure(self, fake_session):
        outcome = fetch_html(SITE, session=fake_session({SITE: requests.Timeout('slow')}))
        assert not outcome.ok
        assert outcome.status_code is None
        assert 'slow' in outcome.reason


class TestCrawler:

    def test_sitemap_urls_are_crawled_in_order(self, fake_session, sitemap_cache):
        session = fake_session({
            SITEMAP: (200, _sitemap(f"{SITE}/a", f"{SITE}/b")),
            f"{SITE}/a": (200, '<h2>A</h2>'),
            f"{SITE}/b": (200, '<h2>B</h2>'),
        })
        pages = crawl_site(SITE, 20, sitemap_cache, session=session)
        assert pages == [RawPage(f"{SITE}/a", '<h2>A</h2>'), RawPage(f"{SITE}/b", '<h2>B</h2>')]

    def test_sitemap_failure_falls_back_to_site_url(self, fake_session, sitemap_cache):
        session = fake_session({SITEMAP: (404, 'nope'), SITE: (200, '<h2>Home</h2>')})
        pages = crawl_site(SITE, 20, sitemap_cache, session=session)

        page_fetches = [c['url'] for c in session.calls if c['url'] != SITEMAP]
        assert page_fetches == [SITE]
        assert [p.url for p in pages] == [SITE]

    def test_empty_sitemap_falls_back_to_site_url(self, fake_session, sitemap_cache):
        session = fake_session({SITEMAP: (200, _sitemap()), SITE: (200, '<p>home</p>')})
        assert resolve_urls(SITE, 20, sitemap_cache, session=session) == [SITE]

    def test_limit_caps_urls(self, fake_session, sitemap_cache):
        urls = [f"{SITE}/p{i}" for i in range(10)]
        routes = {u: (200, '<p>x</p>') for u in urls}
        routes[SITEMAP] = (200, _sitemap(*urls))
        session = fake_session(routes)
        pages = crawl_site(SITE, 3, sitemap_cache, session=session)
        assert [p.url for p in pages] == urls[:3]

    def test_failed_pages_are_skipped(self, fake_session, sitemap_cache):
        session = fake_session({
            SITEMAP: (200, _sitemap(f"{SITE}/ok", f"{SITE}/gone", f"{SITE}/down", f"{SITE}/ok2")),
            f"{SITE}/ok": (200, 'one'),
            f"{SITE}/gone": (404, ''),
            f"{SITE}/down": requests.ConnectionError('refused'),
            f"{SITE}/ok2": (200, 'two'),
        })
        pages = crawl_site(SITE, 20, sitemap_cache, session=session)
        assert [p.url for p in pages] == [f"{SITE}/ok", f"{SITE}/ok2"]

    def test_everything_failing_returns_empty(self, fake_session, sitemap_cache):
        assert crawl_site(SITE, 20, sitemap_cache, session=fake_session({})) == []

    def test_resolved_urls_are_cached(self, fake_session, sitemap_cache):
        first = fake_session({SITEMAP: (200, _sitemap(f"{SITE}/old"))})
        assert resolve_urls(SITE, 20, sitemap_cache, session=first) == [f"{SITE}/old"]
        assert sitemap_cache.get(sitemap_cache_key(SITE)) == [f"{SITE}/old"]

        # The sitemap changed, but the cached list is reused without refetching
        second = fake_session({SITEMAP: (200, _sitemap(f"{SITE}/new"))})
        assert resolve_urls(SITE, 20, sitemap_cache, session=second) == [f"{SITE}/old"]
        assert second.calls == []

    def test_expired_cache_refetches(self, fake_session, sitemap_cache, settings):
        settings.SITEMAP_CACHE_TTL = 3600
        sitemap_cache.delete(sitemap_cache_key(SITE))
        session = fake_session({SITEMAP: (200, _sitemap(f"{SITE}/new"))})
        assert resolve_urls(SITE, 20, sitemap_cache, session=session) == [f"{SITE}/new"]
        assert [c['url'] for c in session.calls] == [SITEMAP]


class TestProductExtraction:

    def test_fibre_scenario(self):
        page = RawPage(
            url=f"{SITE}/fibre",
            html='<h2>Fibre 100</h2><p>R499 per month fibre</p><img src="a.jpg">',
        )
        products = extract_products([page])
        assert len(products) == 1
        product = products[0]
        assert product.title == 'Fibre 100'
        assert product.price == 'R499'
        assert 'fibre' in product.tags
        assert product.images == ['a.jpg']
        assert product.url == f"{SITE}/fibre"

    def test_pages_without_headings_are_ignored(self):
        assert extract_products([RawPage(SITE, '<h1>Only h1</h1><p>text</p>')]) == []

    def test_first_heading_is_title_and_images_capped(self):
        imgs = ''.join(f'<img src="{i}.jpg">' for i in range(5))
        product = extract_products([RawPage(SITE, f'<h3>First</h3><h2>Second</h2>{imgs}')])[0]
        assert product.title == 'First'
        assert product.images == ['0.jpg', '1.jpg', '2.jpg']
        assert product.price is None

    def test_duplicate_title_and_url_keeps_first(self):
        pages = [
            RawPage(SITE, '<h2>Same</h2> <p>first summary</p>'),
            RawPage(SITE, '<h2>Same</h2> <p>second summary</p>'),
            RawPage(f"{SITE}/other", '<h2>Same</h2> <p>other url</p>'),
        ]
        products = extract_products(pages)
        assert [(p.url, p.summary) for p in products] == [
            (SITE, 'Same first summary'),
            (f"{SITE}/other", 'Same other url'),
        ]

    def test_summary_is_first_forty_words(self):
        words = ' '.join(f"w{i}" for i in range(60))
        summary = summarize(f'<script>ignored()</script><p>{words}</p>')
        assert summary.split() == [f"w{i}" for i in range(40)]

    def test_tags_are_independent_probes(self):
        assert guess_tags('Fiber and WiFi with VoIP and Domain hosting') == ['fibre', 'wireless', 'voip', 'hosting']
        assert guess_tags('plain page') == []

    def test_dedupe_by_preserves_order(self):
        assert dedupe_by(['b', 'a', 'b', 'c', 'a'], lambda x: x) == ['b', 'a', 'c']

    def test_record_defaults(self):
        record = ProductRecord(title='T', url=SITE)
        assert record.images == [] and record.tags == [] and record.price is None
