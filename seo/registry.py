# registry.py - The set of content models that get sitemaps

import logging

from django.apps import apps
from django.urls import reverse

from seo import conf
from seo.exceptions import DescriptorNotFound
from seo.resolvers import default_resolver
from seo.utils import absolute_url

logger = logging.getLogger(__name__)


class SitemapIndex:
    """
    Registered content models, the subset that feeds the news sitemap, and
    the resolver used to find each model's descriptor.

    Models may be given as classes or as ``"app_label.ModelName"`` labels;
    labels are resolved when the registry is read, so a model removed from
    the project surfaces as DescriptorNotFound at generation time.
    """

    def __init__(self, models=None, news_models=None, resolver=None, news_url=None):
        self.models = list(conf.sitemap_models() if models is None else models)
        self.news_models = list(conf.news_models() if news_models is None else news_models)
        # One resolver (and so one descriptor cache) per registry instance
        self.resolver = resolver or default_resolver()
        self.news_url = news_url

    @staticmethod
    def load_model(entry):
        if not isinstance(entry, str):
            return entry
        try:
            return apps.get_model(entry)
        except (LookupError, ValueError) as e:
            raise DescriptorNotFound(f"Registered model {entry!r} does not exist") from e

    def get_all_models(self) -> list:
        return [self.load_model(entry) for entry in self.models]

    def get_news_models(self, strict: bool = False) -> list:
        """
        News-eligible model classes. With ``strict=False`` entries that no
        longer exist are logged and left out.
        """
        found = []
        for entry in self.news_models:
            try:
                found.append(self.load_model(entry))
            except DescriptorNotFound as e:
                if strict:
                    raise
                logger.warning(f"Skipping news model: {e}")
        return found

    def has_news(self) -> bool:
        return bool(self.news_models)

    def is_news_model(self, model) -> bool:
        for entry in self.news_models:
            if entry is model:
                return True
            if isinstance(entry, str) and getattr(model, "_meta", None) is not None:
                if entry.lower() == model._meta.label_lower:
                    return True
        return False

    def sitemap_for(self, model):
        return self.resolver.resolve(model)

    def get_model(self, label: str):
        """Return the registered model whose lowercase label matches, or None."""
        for entry in self.models:
            try:
                model = self.load_model(entry)
            except DescriptorNotFound:
                continue
            meta = getattr(model, "_meta", None)
            model_label = meta.label_lower if meta is not None else model.__name__.lower()
            if model_label == label.lower():
                return model
        return None

    def news_link(self) -> str:
        return absolute_url(self.news_url or reverse("seo:sitemap-news"))
