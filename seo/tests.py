"""
Tests for seo app - page auditor and audit endpoints.
"""
import pytest
import requests
from rest_framework.test import APIClient

from seo.auditor import audit_page, check_html, score_for


PAGE = 'https://vinet.example.com/fibre'
LINKS = ''.join(f'<a href="/l{i}">{i}</a>' for i in range(6))
GOOD_PAGE = (
    '<html><head><title>Fibre  <b>Deals</b></title>'
    '<meta name="description" content="Fast fibre"></head>'
    f'<body><h1>Fibre</h1><img src="a.jpg" alt="router">{LINKS}</body></html>'
)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def create_company():
    def _create_company(name="Vinet", site_url="https://vinet.example.com"):
        from companies.models import Company
        return Company.objects.create(name=name, site_url=site_url)
    return _create_company


class TestAuditor:

    def test_clean_page_scores_100(self):
        result = check_html(GOOD_PAGE)
        assert result['score'] == 100
        assert result['issues'] == []
        assert result['title'] == 'Fibre Deals'
        assert result['h1'] == 'Fibre'
        assert result['meta_desc'] == 'Fast fibre'

    def test_missing_title_h1_meta(self):
        result = check_html(f'<html><body><p>Hello</p>{LINKS}</body></html>')
        assert [i['id'] for i in result['issues']] == ['title', 'h1', 'meta']
        assert result['score'] == 64

    def test_all_rules_in_order(self):
        result = check_html('<img src="a.jpg"><img src="b.jpg"><a href="/x">x</a>')
        assert [i['id'] for i in result['issues']] == ['title', 'h1', 'meta', 'img_alt', 'links']
        assert result['issues'][3]['msg'] == '2 images missing alt'
        assert result['score'] == 40

    def test_score_is_monotonic_and_bounded(self):
        scores = [score_for(n) for n in range(20)]
        assert scores == sorted(scores, reverse=True)
        assert all(0 <= s <= 100 for s in scores)
        assert score_for(0) == 100
        assert score_for(1) == 88
        assert score_for(9) == 0

    def test_non_2xx_is_zero_score(self, fake_session):
        result = audit_page(PAGE, session=fake_session({PAGE: (404, 'missing')}))
        assert result['score'] == 0
        assert result['issues'] == [{'id': 'fetch', 'msg': 'HTTP 404'}]
        assert result['url'] == PAGE

    def test_network_error_is_zero_score(self, fake_session):
        result = audit_page(PAGE, session=fake_session({PAGE: requests.ConnectionError('refused')}))
        assert result['score'] == 0
        assert result['issues'][0]['id'] == 'fetch'
        assert result['title'] == ''

    def test_audit_is_idempotent(self, fake_session):
        session = fake_session({PAGE: (200, '<title>T</title><img src="x.png">')})
        assert audit_page(PAGE, session=session) == audit_page(PAGE, session=session)


@pytest.mark.django_db
class TestAuditEndpoint:

    def test_audit_stores_result(self, api_client, create_company, fake_web):
        from seo.models import SeoPage
        company = create_company()
        fake_web({PAGE: (200, f'<html><body><p>Hello</p>{LINKS}</body></html>')})

        response = api_client.get('/api/v1/seo/audit/', {'company_id': company.id, 'url': PAGE})
        assert response.status_code == 200
        assert response.data['score'] == 64
        assert {i['id'] for i in response.data['issues']} == {'title', 'h1', 'meta'}

        page = SeoPage.objects.get(company=company, url=PAGE)
        assert page.score == 64
        assert page.last_checked is not None

    def test_reaudit_overwrites(self, api_client, create_company, fake_web):
        from seo.models import SeoPage
        company = create_company()
        fake_web({PAGE: (500, '')})
        api_client.get('/api/v1/seo/audit/', {'company_id': company.id, 'url': PAGE})

        fake_web({PAGE: (200, GOOD_PAGE)})
        response = api_client.get('/api/v1/seo/audit/', {'company_id': company.id, 'url': PAGE})
        assert response.data['score'] == 100

        pages = SeoPage.objects.filter(company=company, url=PAGE)
        assert pages.count() == 1
        assert pages[0].score == 100
        assert pages[0].issues == []
        assert pages[0].title == 'Fibre Deals'

    def test_fetch_failure_is_recorded(self, api_client, create_company, fake_web):
        company = create_company()
        fake_web({PAGE: (503, '')})
        response = api_client.get('/api/v1/seo/audit/', {'company_id': company.id, 'url': PAGE})
        assert response.status_code == 200
        assert response.data['score'] == 0
        assert response.data['issues'] == [{'id': 'fetch', 'msg': 'HTTP 503'}]

    def test_audit_requires_url_and_company(self, api_client, fake_web):
        session = fake_web({})
        assert api_client.get('/api/v1/seo/audit/', {'url': PAGE}).status_code == 400
        assert api_client.get('/api/v1/seo/audit/', {'company_id': 1}).status_code == 400
        assert session.calls == []

    def test_audit_unknown_company(self, api_client, fake_web):
        session = fake_web({})
        response = api_client.get('/api/v1/seo/audit/', {'company_id': 999, 'url': PAGE})
        assert response.status_code == 404
        assert session.calls == []

    def test_list_pages(self, api_client, create_company, fake_web):
        company = create_company()
        other = 'https://vinet.example.com/about'
        fake_web({PAGE: (200, GOOD_PAGE), other: (404, '')})
        api_client.get('/api/v1/seo/audit/', {'company_id': company.id, 'url': PAGE})
        api_client.get('/api/v1/seo/audit/', {'company_id': company.id, 'url': other})

        response = api_client.get('/api/v1/seo/pages/', {'company_id': company.id})
        assert response.status_code == 200
        assert [p['url'] for p in response.data['pages']] == [other, PAGE]
        assert response.data['pages'][0]['issues'] == [{'id': 'fetch', 'msg': 'HTTP 404'}]
