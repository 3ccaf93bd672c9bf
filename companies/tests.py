"""
Tests for companies app - business profile and competitor endpoints.
"""
import pytest
from rest_framework.test import APIClient

from companies.competitors import analyze_competitors


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def create_company():
    def _create_company(name="Vinet", site_url="https://vinet.example.com", **kwargs):
        from companies.models import Company
        return Company.objects.create(name=name, site_url=site_url, **kwargs)
    return _create_company


@pytest.mark.django_db
class TestCompany:

    def test_create_company(self, api_client):
        from companies.models import Company

        response = api_client.post('/api/v1/company/', {
            'name': 'Vinet',
            'description': 'Internet provider',
            'tone': 'friendly',
            'site_url': 'https://vinet.example.com',
            'socials': {'x': '@vinet'},
            'colors': {'primary': '#0055aa'},
        }, format='json')
        assert response.status_code == 201
        company = Company.objects.get(id=response.data['id'])
        assert company.socials == {'x': '@vinet'}
        assert company.colors == {'primary': '#0055aa'}

    def test_create_company_missing_site_url(self, api_client):
        response = api_client.post('/api/v1/company/', {'name': 'Vinet'}, format='json')
        assert response.status_code == 400
        assert 'site_url' in response.data['error']

    def test_malformed_socials_json_becomes_empty_object(self, api_client):
        from companies.models import Company

        response = api_client.post('/api/v1/company/', {
            'name': 'Vinet',
            'site_url': 'https://vinet.example.com',
            'socials': '{not json',
            'colors': '{"primary": "#fff"}',
        }, format='json')
        assert response.status_code == 201
        company = Company.objects.get(id=response.data['id'])
        assert company.socials == {}
        assert company.colors == {'primary': '#fff'}

    def test_get_latest_company(self, api_client, create_company):
        create_company(name='Old')
        latest = create_company(name='New')

        response = api_client.get('/api/v1/company/')
        assert response.status_code == 200
        assert response.data['company']['id'] == latest.id
        assert response.data['company']['name'] == 'New'

    def test_get_company_when_none(self, api_client):
        response = api_client.get('/api/v1/company/')
        assert response.status_code == 200
        assert response.data['company'] is None


@pytest.mark.django_db
class TestCompetitors:

    def test_add_competitors(self, api_client, create_company):
        from companies.models import Competitor
        company = create_company()

        response = api_client.post('/api/v1/competitors/', {
            'company_id': company.id,
            'competitors': [
                {'name': 'Rival', 'url': 'https://rival.example.com', 'socials': {'x': '@rival'}},
                {'url': 'https://rival.example.com'},
            ],
        }, format='json')
        assert response.status_code == 201
        assert response.data['added'] == 2
        # Append-only: the same URL twice gives two rows
        assert Competitor.objects.filter(company=company).count() == 2

    def test_add_competitors_requires_company_id(self, api_client):
        response = api_client.post('/api/v1/competitors/', {'competitors': []}, format='json')
        assert response.status_code == 400

    def test_add_competitors_unknown_company(self, api_client):
        response = api_client.post('/api/v1/competitors/', {
            'company_id': 999,
            'competitors': [{'url': 'https://rival.example.com'}],
        }, format='json')
        assert response.status_code == 404
        assert response.data['error'] == 'company not found'

    def test_list_with_analysis(self, api_client, create_company, fake_web):
        from companies.models import Competitor
        company = create_company()
        up = Competitor.objects.create(company=company, name='Up', url='https://up.example.com')
        down = Competitor.objects.create(company=company, name='Down', url='https://down.example.com')
        fake_web({'https://up.example.com': (200, '<title>Up ISP</title>')})

        response = api_client.get('/api/v1/competitors/', {'company_id': company.id})
        assert response.status_code == 200
        assert [c['id'] for c in response.data['competitors']] == [up.id, down.id]
        assert response.data['analysis'] == [
            {
                'id': up.id,
                'url': 'https://up.example.com',
                'title': 'Up ISP',
                'cadence_guess': 'weekly',
                'topic_guess': ['pricing', 'coverage', 'support'],
            },
            {'id': down.id, 'url': 'https://down.example.com', 'error': 'fetch_failed'},
        ]

    def test_list_requires_company_id(self, api_client):
        response = api_client.get('/api/v1/competitors/')
        assert response.status_code == 400


class TestCompetitorSnapshot:

    class Row:
        def __init__(self, id, url):
            self.id = id
            self.url = url

    def test_non_2xx_is_isolated_failure(self, fake_session):
        session = fake_session({
            'https://a.example': (500, '<title>Error</title>'),
            'https://b.example': (200, '<title>B</title>'),
        })
        result = analyze_competitors(
            [self.Row(1, 'https://a.example'), self.Row(2, 'https://b.example')],
            session=session,
        )
        assert result[0] == {'id': 1, 'url': 'https://a.example', 'error': 'fetch_failed'}
        assert result[1]['title'] == 'B'

    def test_missing_title_is_empty(self, fake_session):
        session = fake_session({'https://a.example': (200, '<p>no title</p>')})
        assert analyze_competitors([self.Row(1, 'https://a.example')], session=session)[0]['title'] == ''

    def test_empty_list(self):
        assert analyze_competitors([]) == []
