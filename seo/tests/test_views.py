"""
Tests for the sitemap endpoints, the generate_sitemaps command and the
regenerate_sitemaps task.
"""

from datetime import timedelta
from io import StringIO

import pytest
from django.core.cache import cache
from django.core.management import CommandError, call_command
from django.urls import reverse
from django.utils import timezone

from newsroom.models import Article
from seo.tasks import regenerate_sitemaps
from seo.tests.helpers import NS, parse

ALL_FILES = [
    "sitemap.xml",
    "sitemap-newsroom.article.xml",
    "sitemap-newsroom.page.xml",
    "sitemap-news.xml",
]


@pytest.mark.django_db
class TestSitemapViews:
    def test_index(self, client, make_article, page):
        make_article()

        response = client.get(reverse("seo:sitemap-index"))

        assert response.status_code == 200
        assert response["Content-Type"] == "application/xml"
        root = parse(response.content.decode("utf-8"))
        assert [loc.text for loc in root.findall("sm:sitemap/sm:loc", NS)] == [
            "https://example.com/sitemap-newsroom.article.xml",
            "https://example.com/sitemap-newsroom.page.xml",
            "https://example.com/sitemap-news.xml",
        ]

    def test_model_sitemap(self, client, page):
        response = client.get(reverse("seo:sitemap-model", kwargs={"label": "newsroom.page"}))

        assert response.status_code == 200
        assert response["Content-Type"] == "application/xml"
        root = parse(response.content.decode("utf-8"))
        assert [loc.text for loc in root.findall("sm:url/sm:loc", NS)] == [
            "https://example.com/about/"
        ]

    def test_model_sitemap_url(self, client, page):
        response = client.get("/sitemap-newsroom.page.xml")
        assert response.status_code == 200

    @pytest.mark.parametrize("label", ["newsroom.missing", "auth.user"])
    def test_unregistered_model(self, client, label):
        response = client.get(reverse("seo:sitemap-model", kwargs={"label": label}))
        assert response.status_code == 404

    def test_news_sitemap(self, client):
        # The view uses the real clock
        Article.objects.create(
            title="Breaking", slug="breaking", published_at=timezone.now() - timedelta(hours=1)
        )
        Article.objects.create(
            title="Old news", slug="old-news", published_at=timezone.now() - timedelta(days=5)
        )

        response = client.get(reverse("seo:sitemap-news"))

        assert response.status_code == 200
        assert response["Content-Type"] == "application/xml"
        root = parse(response.content.decode("utf-8"))
        assert [title.text for title in root.findall("sm:url/news:news/news:title", NS)] == [
            "Breaking"
        ]

    def test_health_check(self, client):
        response = client.get(reverse("health_check"))
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


@pytest.mark.django_db
class TestGenerateSitemapsCommand:
    def test_writes_every_sitemap(self, make_article, page, tmp_path):
        make_article()
        output_dir = tmp_path / "out"
        out = StringIO()

        call_command("generate_sitemaps", output_dir=str(output_dir), stdout=out)

        assert sorted(path.name for path in output_dir.iterdir()) == sorted(ALL_FILES)
        assert "Successfully generated 4 sitemaps" in out.getvalue()
        page_sitemap = (output_dir / "sitemap-newsroom.page.xml").read_text(encoding="utf-8")
        assert "https://example.com/about/" in page_sitemap

    def test_default_output_dir(self, settings):
        call_command("generate_sitemaps", stdout=StringIO())
        assert (settings.SEO_SITEMAP_OUTPUT_DIR / "sitemap.xml").exists()

    def test_missing_model_fails_without_writing(self, settings, tmp_path):
        settings.SEO_SITEMAP_MODELS = ["newsroom.Article", "newsroom.Missing"]
        output_dir = tmp_path / "out"

        with pytest.raises(CommandError, match="newsroom.Missing"):
            call_command("generate_sitemaps", output_dir=str(output_dir), stdout=StringIO())

        assert not output_dir.exists()


@pytest.mark.django_db
class TestRegenerateSitemapsTask:
    def setup_method(self):
        cache.clear()

    def test_returns_written_files(self, tmp_path):
        output_dir = tmp_path / "task"

        result = regenerate_sitemaps(output_dir=str(output_dir))

        assert result == ALL_FILES
        assert (output_dir / "sitemap-news.xml").exists()

    def test_skips_while_locked(self, tmp_path):
        output_dir = tmp_path / "task"
        cache.add(f"task_lock:regenerate_sitemaps::output_dir:{output_dir}", "locked")

        assert regenerate_sitemaps(output_dir=str(output_dir)) is None
        assert not output_dir.exists()

    def test_releases_lock(self, tmp_path):
        output_dir = tmp_path / "task"
        regenerate_sitemaps(output_dir=str(output_dir))
        assert cache.get(f"task_lock:regenerate_sitemaps::output_dir:{output_dir}") is None
