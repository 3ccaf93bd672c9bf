"""
Tests for content app - weekly plan builder, CSV exporter and plan endpoints.
"""
import csv
import io
from collections import Counter
from datetime import date, timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from companies.models import Company
from content.exporter import EMPTY_EXPORT, to_csv
from content.planner import PLATFORMS, base_hashtags, build_weekly_plan, caption_template, truncate
from scraping.products import ProductRecord


SITE = 'https://vinet.example.com'


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def company():
    return Company(name='Vinet', description='Connecting the Western Cape', site_url=SITE)


@pytest.fixture
def products():
    return [
        ProductRecord(title='Fibre 100', url=f"{SITE}/fibre", summary='Fast fibre', tags=['fibre']),
        ProductRecord(title='Wireless 20', url=f"{SITE}/wireless", summary='Rural wireless', tags=['wireless']),
        ProductRecord(title='Hosting', url=f"{SITE}/hosting", summary='Web hosting', tags=[]),
    ]


@pytest.fixture
def create_company():
    def _create_company(name="Vinet", site_url=SITE, description='Connecting the Western Cape'):
        return Company.objects.create(name=name, site_url=site_url, description=description)
    return _create_company


class TestWeeklyPlanBuilder:

    def test_seven_days_per_platform(self, company, products):
        start = date(2026, 10, 19)
        plan = build_weekly_plan(company, products, ['facebook', 'x'], start=start)

        assert plan['count'] == len(plan['posts']) == 14
        days = Counter(p['scheduled_at'] for p in plan['posts'])
        assert days == {f"{start + timedelta(days=d)}T09:00:00Z": 2 for d in range(7)}

    def test_defaults_to_today(self, company, products):
        plan = build_weekly_plan(company, products, list(PLATFORMS))
        today = timezone.localdate()
        expected = [f"{today + timedelta(days=d)}T09:00:00Z" for d in range(7)]
        assert sorted(set(p['scheduled_at'] for p in plan['posts'])) == expected
        assert plan['count'] == 28

    def test_products_rotate_by_day(self, company, products):
        plan = build_weekly_plan(company, products, ['linkedin'], start=date(2026, 1, 1))
        headlines = [p['caption'].split(' — ')[0] for p in plan['posts']]
        assert headlines == [
            'Fibre 100', 'Wireless 20', 'Hosting',
            'Fibre 100', 'Wireless 20', 'Hosting',
            'Fibre 100',
        ]

    def test_no_products_uses_company(self, company):
        plan = build_weekly_plan(company, [], ['instagram'], start=date(2026, 1, 1))
        assert plan['count'] == 7
        assert plan['posts'][0]['caption'].startswith('Vinet — Connecting the Western Cape\n')
        assert 'Headline: Vinet.' in plan['posts'][0]['image_prompt']

    def test_duplicate_platforms_are_not_deduplicated(self, company, products):
        plan = build_weekly_plan(company, products, ['x', 'x'], start=date(2026, 1, 1))
        assert plan['count'] == 14

    def test_caption_shape(self, company, settings):
        settings.SMM_CONTACT_LINE = 'Call 123'
        long_summary = 'a' * 200
        product = ProductRecord(title='Fibre', url=SITE, summary=long_summary)
        caption = build_weekly_plan(company, [product], ['x'], start=date(2026, 1, 1))['posts'][0]['caption']
        line, contact = caption.split('\n')
        assert line == 'Fibre — ' + 'a' * 139 + '…'
        assert contact == 'Call 123'

    def test_caption_is_shared_across_platforms(self, products):
        company = Company(name='Vinet', site_url=SITE, tone='playful')
        plan = build_weekly_plan(company, products[:1], list(PLATFORMS), start=date(2026, 1, 1))
        first_day = plan['posts'][:len(PLATFORMS)]
        assert {p['caption'] for p in first_day} == {caption_template(products[0])}

    def test_untitled_product_gets_default_headline(self, company):
        product = ProductRecord(title='', url=SITE, summary='Summary')
        caption = build_weekly_plan(company, [product], ['x'], start=date(2026, 1, 1))['posts'][0]['caption']
        assert caption.startswith('Our services — Summary')

    def test_truncate(self):
        assert truncate('short', 140) == 'short'
        assert truncate(None, 10) == ''
        assert truncate('abcdefghijk', 10) == 'abcdefghi…'
        assert len(truncate('x' * 500, 140)) == 140

    def test_hashtags(self, settings):
        settings.SMM_BASE_HASHTAGS = ['#Vinet', '#Internet', '#Connectivity', '#Fibre', '#Wireless']
        product = ProductRecord(title='T', url=SITE, tags=['Fibre', 'web hosting', 'voip', 'wireless'])
        assert base_hashtags(product) == [
            '#Vinet', '#Internet', '#Connectivity', '#Fibre', '#Wireless', '#webhosting', '#voip',
        ]

    def test_image_prompt_ignores_brand_colors(self, products):
        branded = Company(name='Vinet', site_url=SITE, colors={'primary': '#0055aa'})
        prompt = build_weekly_plan(branded, products, ['x'], start=date(2026, 1, 1))['posts'][0]['image_prompt']
        assert prompt == (
            'Minimal ad tile for Vinet. Headline: Fibre 100. '
            'Colors: brand palette if available. Include logo if available.'
        )

    def test_deterministic(self, company, products):
        start = date(2026, 3, 2)
        assert build_weekly_plan(company, products, ['x'], start=start) == \
            build_weekly_plan(company, products, ['x'], start=start)


class TestCsvExporter:

    def test_empty_rows(self):
        assert to_csv([]) == 'platform,scheduled_at,caption,hashtags\n'
        assert to_csv([]) == EMPTY_EXPORT

    def test_every_field_quoted(self):
        text = to_csv([
            {'platform': 'x', 'caption': 'Hello', 'status': None},
            {'platform': 'facebook', 'caption': 'Bye', 'status': 'draft'},
        ])
        assert text == 'platform,caption,status\n"x","Hello",""\n"facebook","Bye","draft"'

    def test_round_trip_with_quotes_and_newlines(self):
        rows = [
            {'platform': 'x', 'caption': 'Say "hi"\nChat to us', 'hashtags': '#a #b'},
            {'platform': 'linkedin', 'caption': 'a, b', 'hashtags': ''},
        ]
        parsed = list(csv.reader(io.StringIO(to_csv(rows))))
        assert parsed[0] == ['platform', 'caption', 'hashtags']
        assert parsed[1:] == [list(r.values()) for r in rows]


@pytest.mark.django_db
class TestPlanEndpoints:

    def _add_products(self, company, n=2):
        from catalog.models import Product
        for i in range(n):
            Product.objects.create(
                company=company, title=f"Plan {i}", url=f"{SITE}/p{i}",
                summary=f"Summary {i}", tags=['fibre'],
            )

    def test_plans_only_have_a_draft_state(self):
        from content.models import ContentPlan
        assert [value for value, _ in ContentPlan.STATUS_CHOICES] == ['draft']
        assert ContentPlan._meta.get_field('status').default == 'draft'

    def test_plan_week_all_platforms(self, api_client, create_company):
        from content.models import ContentPlan, Post
        company = create_company()
        self._add_products(company)

        response = api_client.post('/api/v1/plan/week/', {
            'company_id': company.id,
            'week_start': '2026-10-19',
        }, format='json')
        assert response.status_code == 201
        assert response.data['count'] == 28

        plan = ContentPlan.objects.get(id=response.data['plan_id'])
        assert plan.status == 'draft'
        assert plan.week_start == date(2026, 10, 19)
        assert plan.snapshot['count'] == 28

        posts = Post.objects.filter(plan=plan)
        assert posts.count() == 28
        assert all(p.status == 'draft' for p in posts)
        assert Counter(p.platform for p in posts) == {p: 7 for p in PLATFORMS}
        days = Counter(p.scheduled_at.date() for p in posts)
        assert days == {date(2026, 10, 19) + timedelta(days=d): 4 for d in range(7)}
        assert all((p.scheduled_at.hour, p.scheduled_at.minute) == (9, 0) for p in posts)

    def test_rows_match_snapshot(self, api_client, create_company):
        from content.models import ContentPlan
        company = create_company()
        self._add_products(company, n=1)

        response = api_client.post('/api/v1/plan/week/', {
            'company_id': company.id,
            'week_start': '2026-10-19',
            'platforms': ['x'],
        }, format='json')
        plan = ContentPlan.objects.get(id=response.data['plan_id'])
        rows = list(plan.posts.order_by('scheduled_at', 'id'))
        for row, post in zip(rows, plan.snapshot['posts']):
            assert row.caption == post['caption']
            assert row.hashtags == ' '.join(post['hashtags'])
            assert row.image_prompt == post['image_prompt']

    def test_duplicate_platforms_collapse(self, api_client, create_company):
        company = create_company()
        response = api_client.post('/api/v1/plan/week/', {
            'company_id': company.id,
            'week_start': '2026-10-19',
            'platforms': ['x', 'facebook', 'x'],
        }, format='json')
        assert response.status_code == 201
        assert response.data['count'] == 14

    def test_unknown_platform(self, api_client, create_company):
        company = create_company()
        response = api_client.post('/api/v1/plan/week/', {
            'company_id': company.id,
            'week_start': '2026-10-19',
            'platforms': ['myspace'],
        }, format='json')
        assert response.status_code == 400

    def test_missing_week_start(self, api_client, create_company):
        from content.models import ContentPlan
        company = create_company()
        response = api_client.post('/api/v1/plan/week/', {'company_id': company.id}, format='json')
        assert response.status_code == 400
        assert not ContentPlan.objects.exists()

    def test_unknown_company(self, api_client):
        response = api_client.post('/api/v1/plan/week/', {
            'company_id': 999,
            'week_start': '2026-10-19',
        }, format='json')
        assert response.status_code == 404

    def test_plan_and_post_listings(self, api_client, create_company):
        company = create_company()
        first = api_client.post('/api/v1/plan/week/', {
            'company_id': company.id, 'week_start': '2026-10-19', 'platforms': ['x'],
        }, format='json').data['plan_id']
        second = api_client.post('/api/v1/plan/week/', {
            'company_id': company.id, 'week_start': '2026-10-26', 'platforms': ['x'],
        }, format='json').data['plan_id']

        plans = api_client.get('/api/v1/plans/', {'company_id': company.id}).data['plans']
        assert [p['id'] for p in plans] == [second, first]
        assert plans[0]['week_start'] == '2026-10-26'

        posts = api_client.get('/api/v1/posts/', {'plan_id': first}).data['posts']
        assert len(posts) == 7
        assert [p['scheduled_at'] for p in posts] == sorted(p['scheduled_at'] for p in posts)
        assert posts[0]['scheduled_at'] == '2026-10-19T09:00:00Z'

    def test_listings_require_ids(self, api_client):
        assert api_client.get('/api/v1/plans/').status_code == 400
        assert api_client.get('/api/v1/posts/').status_code == 400


@pytest.mark.django_db
class TestExportEndpoint:

    @pytest.fixture(autouse=True)
    def media_root(self, settings, tmp_path):
        settings.MEDIA_ROOT = tmp_path
        return tmp_path

    def test_export_plan(self, api_client, create_company, media_root):
        company = create_company()
        plan_id = api_client.post('/api/v1/plan/week/', {
            'company_id': company.id, 'week_start': '2026-10-19', 'platforms': ['facebook', 'x'],
        }, format='json').data['plan_id']

        response = api_client.post('/api/v1/export/csv/', {'plan_id': plan_id}, format='json')
        assert response.status_code == 200
        assert response.data['count'] == 14
        assert response.data['storage_key'].startswith(f"exports/plan_{plan_id}_")

        stored = (media_root / response.data['storage_key']).read_text(encoding='utf-8')
        assert stored == response.data['csv']

        rows = list(csv.reader(io.StringIO(stored)))
        assert rows[0] == ['id', 'plan_id', 'platform', 'caption', 'hashtags', 'image_prompt', 'scheduled_at', 'status']
        assert len(rows) == 15
        assert rows[1][6] == '2026-10-19T09:00:00Z'
        assert rows[-1][6] == '2026-10-25T09:00:00Z'

    def test_export_empty_plan(self, api_client, create_company):
        from content.models import ContentPlan
        company = create_company()
        plan = ContentPlan.objects.create(company=company, week_start=date(2026, 10, 19))

        response = api_client.post('/api/v1/export/csv/', {'plan_id': plan.id}, format='json')
        assert response.status_code == 200
        assert response.data['csv'] == 'platform,scheduled_at,caption,hashtags\n'
        assert response.data['count'] == 0

    def test_export_unknown_plan(self, api_client):
        response = api_client.post('/api/v1/export/csv/', {'plan_id': 999}, format='json')
        assert response.status_code == 404

    def test_export_requires_plan_id(self, api_client):
        response = api_client.post('/api/v1/export/csv/', {}, format='json')
        assert response.status_code == 400
