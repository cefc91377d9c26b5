"""
Descriptor resolution: given a model class, return its ModelSitemap.

Resolvers are small strategy objects so projects can choose an explicit
attribute, a naming convention, or both. CachedResolver holds its cache as
plain instance state; whoever creates it decides how long it lives (the
SitemapIndex keeps one per generation run).
"""

import logging

from django.utils.module_loading import import_string

from seo.exceptions import DescriptorNotFound
from seo.sitemaps import ModelSitemap

logger = logging.getLogger(__name__)


def _instantiate(descriptor_class, model) -> ModelSitemap:
    if not (isinstance(descriptor_class, type) and issubclass(descriptor_class, ModelSitemap)):
        raise DescriptorNotFound(
            f"{descriptor_class!r} is not a ModelSitemap subclass (model {model.__name__})"
        )
    return descriptor_class(model)


class DescriptorResolver:
    def resolve(self, model) -> ModelSitemap:
        raise NotImplementedError


class AttributeResolver(DescriptorResolver):
    """Use ``model.sitemap_class`` (a class or a dotted import path)."""

    attribute = "sitemap_class"

    def resolve(self, model):
        descriptor_class = getattr(model, self.attribute, None)
        if not descriptor_class:
            raise DescriptorNotFound(f"{model.__name__} has no {self.attribute}")
        if isinstance(descriptor_class, str):
            try:
                descriptor_class = import_string(descriptor_class)
            except ImportError as e:
                raise DescriptorNotFound(str(e)) from e
        return _instantiate(descriptor_class, model)


class ConventionResolver(DescriptorResolver):
    """
    Guess ``<app package>.sitemaps.<ModelName>Sitemap``.

    For ``newsroom.models.Article`` this looks up
    ``newsroom.sitemaps.ArticleSitemap``.
    """

    module_name = "sitemaps"
    suffix = "Sitemap"

    def guess_path(self, model) -> str:
        meta = getattr(model, "_meta", None)
        if meta is not None and meta.app_config is not None:
            package = meta.app_config.name
        else:
            package = model.__module__.rsplit(".", 1)[0]
        return f"{package}.{self.module_name}.{model.__name__}{self.suffix}"

    def resolve(self, model):
        path = self.guess_path(model)
        try:
            descriptor_class = import_string(path)
        except ImportError as e:
            raise DescriptorNotFound(
                f"No sitemap descriptor for {model.__name__} at {path}"
            ) from e
        return _instantiate(descriptor_class, model)


class ChainResolver(DescriptorResolver):
    """Try each resolver in order; the first one that succeeds wins."""

    def __init__(self, *resolvers):
        self.resolvers = list(resolvers)

    def resolve(self, model):
        errors = []
        for resolver in self.resolvers:
            try:
                return resolver.resolve(model)
            except DescriptorNotFound as e:
                errors.append(str(e))
        raise DescriptorNotFound(
            f"Unable to resolve a sitemap descriptor for {model.__name__}: "
            + "; ".join(errors)
        )


class CachedResolver(DescriptorResolver):
    """Memoize another resolver's results in an explicit dict."""

    def __init__(self, resolver: DescriptorResolver, cache: dict = None):
        self.resolver = resolver
        self.cache = {} if cache is None else cache

    def resolve(self, model):
        if model not in self.cache:
            self.cache[model] = self.resolver.resolve(model)
            logger.debug(f"Resolved {self.cache[model]!r} for {model.__name__}")
        return self.cache[model]

    def clear(self):
        self.cache.clear()


def default_resolver() -> DescriptorResolver:
    """Explicit attribute first, then the naming convention, cached."""
    return CachedResolver(ChainResolver(AttributeResolver(), ConventionResolver()))
