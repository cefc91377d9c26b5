from datetime import datetime, timedelta, timezone as dt_timezone

import pytest
from django.test import Client

FIXED_NOW = datetime(2024, 1, 17, 12, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def client():
    """Return a Django test client instance."""
    return Client()


@pytest.fixture(autouse=True)
def sitemap_settings(settings, tmp_path):
    """Deterministic sitemap settings for every test."""
    settings.SEO_SITE_URL = "https://example.com"
    settings.SEO_PUBLICATION_NAME = "The Daily Test"
    settings.SEO_SITEMAP_CHUNK_SIZE = 20
    settings.SEO_NEWS_WINDOW_DAYS = 2
    settings.SEO_SITEMAP_MODELS = ["newsroom.Article", "newsroom.Page"]
    settings.SEO_NEWS_MODELS = ["newsroom.Article"]
    settings.SEO_SITEMAP_OUTPUT_DIR = tmp_path / "public"
    settings.LANGUAGE_CODE = "es"
    return settings


@pytest.fixture
def fixed_now():
    """The moment generators treat as now (pass ``lambda: fixed_now``)."""
    return FIXED_NOW


@pytest.fixture
def make_article(db):
    """Factory creating published articles relative to FIXED_NOW."""
    from newsroom.models import Article

    counter = {"n": 0}

    def make(age=timedelta(hours=1), **fields):
        counter["n"] += 1
        n = counter["n"]
        published_at = FIXED_NOW - age
        defaults = {
            "title": f"Article {n}",
            "slug": f"article-{n}",
            "published_at": published_at,
            "updated_at": published_at,
        }
        defaults.update(fields)
        return Article.objects.create(**defaults)

    return make


@pytest.fixture
def page(db):
    from newsroom.models import Page

    return Page.objects.create(
        title="About",
        slug="about",
        updated_at=datetime(2024, 1, 10, 9, 30, tzinfo=dt_timezone.utc),
    )
