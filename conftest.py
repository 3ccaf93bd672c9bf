"""
Shared test fixtures: an offline stand-in for requests and a clean sitemap cache.
"""
import pytest
import requests
from django.core.cache import caches


class FakeResponse:
    def __init__(self, status_code=200, text=''):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """
    Answers GETs from a {url: (status, body) | Exception} map.
    Unknown URLs raise ConnectionError, like an unreachable host.
    """
    def __init__(self, routes):
        self.routes = dict(routes)
        self.calls = []

    def get(self, url, headers=None, timeout=None, **kwargs):
        self.calls.append({'url': url, 'headers': headers or {}, 'timeout': timeout})
        route = self.routes.get(url)
        if route is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(route, Exception):
            raise route
        status_code, text = route
        return FakeResponse(status_code, text)


@pytest.fixture
def fake_session():
    def _fake_session(routes):
        return FakeSession(routes)
    return _fake_session


@pytest.fixture
def fake_web(monkeypatch):
    """Route module-level requests.get through a FakeSession."""
    def _install(routes):
        session = FakeSession(routes)
        monkeypatch.setattr(requests, 'get', session.get)
        return session
    return _install


@pytest.fixture(autouse=True)
def clear_sitemap_cache():
    caches['sitemaps'].clear()
    yield
    caches['sitemaps'].clear()
