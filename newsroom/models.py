# models.py

from django.db import models
from django.utils import timezone

from seo.enums import RobotsDirective
from seo.sitemaps import HasSitemap


class Article(HasSitemap, models.Model):
    """
    A news article. Translations point at the original through ``original``.
    """
    sitemap_class = "newsroom.sitemaps.ArticleSitemap"

    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    summary = models.TextField(blank=True)
    language = models.CharField(max_length=10, default="es")
    image_url = models.URLField(blank=True)
    is_published = models.BooleanField(default=True)

    original = models.ForeignKey(
        "self",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="translations",
        help_text="Article this one translates (null for originals)",
    )

    published_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["published_at", "pk"]

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return f"/{self.language}/articles/{self.slug}/"


class Page(HasSitemap, models.Model):
    """A static page (about, privacy, ...)."""
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    robots = models.CharField(
        max_length=20,
        choices=RobotsDirective.choices,
        default=RobotsDirective.INDEX_FOLLOW,
    )
    priority = models.DecimalField(
        max_digits=2, decimal_places=1, null=True, blank=True
    )
    updated_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return f"/{self.slug}/"

    @property
    def robots_directive(self):
        return RobotsDirective(self.robots)
