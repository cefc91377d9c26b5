"""
Settings access for the seo app.

Every value is read lazily from django.conf.settings so tests can override
them with the pytest-django ``settings`` fixture.
"""

from datetime import timedelta
from pathlib import Path

from django.conf import settings

DEFAULT_CHUNK_SIZE = 20
DEFAULT_NEWS_WINDOW_DAYS = 2
DEFAULT_SITE_URL = "http://localhost:8000"


def site_url() -> str:
    return getattr(settings, "SEO_SITE_URL", DEFAULT_SITE_URL).rstrip("/")


def chunk_size():
    """Records pulled per chunk; ``None`` means the whole source at once."""
    value = getattr(settings, "SEO_SITEMAP_CHUNK_SIZE", DEFAULT_CHUNK_SIZE)
    return int(value) if value else None


def news_window() -> timedelta:
    days = getattr(settings, "SEO_NEWS_WINDOW_DAYS", DEFAULT_NEWS_WINDOW_DAYS)
    return timedelta(days=float(days))


def publication_name() -> str:
    return getattr(settings, "SEO_PUBLICATION_NAME", None) or getattr(
        settings, "APP_NAME", ""
    )


def sitemap_models() -> list:
    return list(getattr(settings, "SEO_SITEMAP_MODELS", []))


def news_models() -> list:
    return list(getattr(settings, "SEO_NEWS_MODELS", []))


def output_dir() -> Path:
    value = getattr(settings, "SEO_SITEMAP_OUTPUT_DIR", None)
    return Path(value) if value else Path(settings.BASE_DIR) / "public"
