# sitemaps.py - Per-model sitemap descriptors

from typing import NamedTuple

from django.core.exceptions import FieldDoesNotExist, ImproperlyConfigured
from django.db.models import Max, QuerySet
from django.urls import reverse
from pydantic import ValidationError

from seo.exceptions import InvalidNewsMetadata
from seo.news import NewsMetadata
from seo.utils import absolute_url, to_datetime


class Translation(NamedTuple):
    """An alternate-language version of a record (hreflang + absolute URL)."""

    language: str
    href: str


def model_has_field(model, name: str) -> bool:
    if model is None:
        return False
    meta = getattr(model, "_meta", None)
    if meta is None:
        return hasattr(model, name)
    try:
        meta.get_field(name)
    except FieldDoesNotExist:
        return False
    return True


class ModelSitemap:
    """
    Describes how the records of one content model appear in sitemaps.

    Subclasses set ``model`` and override the getters they need, in the
    same spirit as django.contrib.sitemaps.Sitemap. Every getter receives
    the record; returning None (or an empty value) leaves the matching
    element out.
    """

    model = None
    priority = None
    changefreq = None
    lastmod_field = "updated_at"
    translations = False
    images = False
    news = False
    freshness_field = None
    sitemap_url = None

    def __init__(self, model=None):
        if model is not None:
            self.model = model

    def __repr__(self):
        return f"<{type(self).__name__} model={self.label}>"

    @property
    def label(self) -> str:
        if self.model is None:
            return ""
        meta = getattr(self.model, "_meta", None)
        if meta is not None:
            return meta.label_lower
        return self.model.__name__.lower()

    # ---- record source ----

    def get_queryset(self):
        """Return the record source: a QuerySet or any iterable of records."""
        if self.model is None:
            raise ImproperlyConfigured(
                f"{type(self).__name__} needs a model or a get_queryset() override"
            )
        return self.model._default_manager.all()

    # ---- per-record values ----

    def should_be_in_sitemap(self, record) -> bool:
        return True

    def get_url(self, record) -> str:
        get_absolute_url = getattr(record, "get_absolute_url", None)
        if get_absolute_url is None:
            return ""
        return absolute_url(get_absolute_url())

    def get_last_modified(self, record):
        return getattr(record, self.lastmod_field, None)

    def get_priority(self, record):
        return self.priority

    def get_change_frequency(self, record):
        return self.changefreq

    def get_translations(self, record):
        return []

    def get_images(self, record):
        return []

    def get_news_metadata(self, record):
        return {
            "title": str(record),
            "publication_date": getattr(record, self.get_freshness_field(), None),
        }

    # ---- feature flags ----

    def has_translations(self) -> bool:
        return bool(self.translations)

    def has_images(self) -> bool:
        return bool(self.images)

    def is_news_item(self) -> bool:
        return bool(self.news)

    # ---- model-wide values ----

    def get_freshness_field(self) -> str:
        """Timestamp used to decide whether a record is recent enough for news."""
        if self.freshness_field:
            return self.freshness_field
        if model_has_field(self.model, "revised_at"):
            return "revised_at"
        return "published_at"

    def get_sitemap_last_modified(self):
        source = self.get_queryset()
        if isinstance(source, QuerySet):
            return source.aggregate(latest=Max(self.lastmod_field))["latest"]
        values = [to_datetime(self.get_last_modified(record)) for record in source]
        return max((value for value in values if value is not None), default=None)

    def link(self) -> str:
        if self.sitemap_url:
            return absolute_url(self.sitemap_url)
        return absolute_url(reverse("seo:sitemap-model", kwargs={"label": self.label}))

    def news_metadata_for(self, record) -> NewsMetadata:
        """
        Raises:
            InvalidNewsMetadata: also when get_news_metadata() itself fails
                building a NewsMetadata directly.
        """
        try:
            return NewsMetadata.coerce(self.get_news_metadata(record))
        except ValidationError as e:
            raise InvalidNewsMetadata(str(e)) from e


class HasSitemap:
    """
    Model mixin exposing ``Model.sitemap()``.

    Set ``sitemap_class`` to a ModelSitemap subclass (or its dotted path) to
    skip the naming convention lookup.
    """

    sitemap_class = None

    @classmethod
    def sitemap(cls, resolver=None) -> ModelSitemap:
        from seo.resolvers import default_resolver

        return (resolver or default_resolver()).resolve(cls)
