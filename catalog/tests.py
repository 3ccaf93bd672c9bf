"""
Tests for catalog app - site ingestion endpoint.
"""
import pytest
from rest_framework.test import APIClient


SITE = 'https://vinet.example.com'


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def create_company():
    def _create_company(name="Vinet", site_url=SITE):
        from companies.models import Company
        return Company.objects.create(name=name, site_url=site_url)
    return _create_company


def _sitemap(*urls):
    return '<urlset>' + ''.join(f"<url><loc>{u}</loc></url>" for u in urls) + '</urlset>'


@pytest.mark.django_db
class TestIngest:

    def test_ingest_stores_products(self, api_client, create_company, fake_web):
        from catalog.models import Product
        company = create_company()
        fake_web({
            f"{SITE}/sitemap.xml": (200, _sitemap(f"{SITE}/fibre", f"{SITE}/about", f"{SITE}/broken")),
            f"{SITE}/fibre": (200, '<h2>Fibre 100</h2><p>R499 per month fibre</p><img src="a.jpg">'),
            f"{SITE}/about": (200, '<h1>About us</h1><p>No product headings here</p>'),
            f"{SITE}/broken": (500, ''),
        })

        response = api_client.post('/api/v1/ingest/', {'company_id': company.id}, format='json')
        assert response.status_code == 200
        assert response.data == {'pages': 2, 'products': 1}

        product = Product.objects.get(company=company)
        assert product.title == 'Fibre 100'
        assert product.url == f"{SITE}/fibre"
        assert product.price == 'R499'
        assert product.images == ['a.jpg']
        assert product.tags == ['fibre']

    def test_ingest_respects_limit(self, api_client, create_company, fake_web):
        company = create_company()
        urls = [f"{SITE}/p{i}" for i in range(5)]
        routes = {u: (200, f'<h2>Plan {i}</h2>') for i, u in enumerate(urls)}
        routes[f"{SITE}/sitemap.xml"] = (200, _sitemap(*urls))
        session = fake_web(routes)

        response = api_client.post('/api/v1/ingest/', {'company_id': company.id, 'limit': 2}, format='json')
        assert response.data == {'pages': 2, 'products': 2}
        assert [c['url'] for c in session.calls] == [f"{SITE}/sitemap.xml"] + urls[:2]

    def test_ingest_with_unreachable_site(self, api_client, create_company, fake_web):
        from catalog.models import Product
        company = create_company()
        fake_web({})

        response = api_client.post('/api/v1/ingest/', {'company_id': company.id}, format='json')
        assert response.status_code == 200
        assert response.data == {'pages': 0, 'products': 0}
        assert not Product.objects.exists()

    def test_ingest_requires_company_id(self, api_client):
        response = api_client.post('/api/v1/ingest/', {}, format='json')
        assert response.status_code == 400

    def test_ingest_unknown_company(self, api_client, fake_web):
        session = fake_web({})
        response = api_client.post('/api/v1/ingest/', {'company_id': 42}, format='json')
        assert response.status_code == 404
        assert session.calls == []

    def test_long_heading_is_clipped_to_title_column(self, api_client, create_company, fake_web):
        from catalog.models import TITLE_MAX_LENGTH, Product
        company = create_company()
        heading = 'Fibre ' + 'x' * 600
        fake_web({
            f"{SITE}/sitemap.xml": (200, _sitemap(f"{SITE}/long")),
            f"{SITE}/long": (200, f'<h2>{heading}</h2><p>R499</p>'),
        })

        response = api_client.post('/api/v1/ingest/', {'company_id': company.id}, format='json')
        assert response.status_code == 200
        assert response.data == {'pages': 1, 'products': 1}

        product = Product.objects.get(company=company)
        assert len(product.title) == TITLE_MAX_LENGTH
        assert product.title == heading[:TITLE_MAX_LENGTH]


@pytest.mark.django_db
class TestSaveProducts:

    def test_values_fit_their_columns(self, create_company):
        from catalog.models import PRICE_MAX_LENGTH, TITLE_MAX_LENGTH, Product
        from catalog.views import save_products
        from scraping.products import ProductRecord
        company = create_company()
        price = 'R1' + ',000' * 40
        record = ProductRecord(title='T' * 900, url=f"{SITE}/p", price=price)

        save_products(company, [record])
        product = Product.objects.get(company=company)
        assert product.title == 'T' * TITLE_MAX_LENGTH
        assert product.price == price[:PRICE_MAX_LENGTH]

    def test_missing_price_stays_null(self, create_company):
        from catalog.models import Product
        from catalog.views import save_products
        from scraping.products import ProductRecord
        company = create_company()

        save_products(company, [ProductRecord(title="Plan", url=f"{SITE}/p")])
        product = Product.objects.get(company=company)
        assert product.price is None
