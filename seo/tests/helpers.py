"""In-memory records and descriptors for exercising the engine without a database."""

from types import SimpleNamespace
from xml.etree import ElementTree

from seo.exceptions import DescriptorNotFound
from seo.resolvers import DescriptorResolver
from seo.sitemaps import ModelSitemap

NS = {
    "sm": "http://www.sitemaps.org/schemas/sitemap/0.9",
    "image": "http://www.google.com/schemas/sitemap-image/1.1",
    "news": "http://www.google.com/schemas/sitemap-news/0.9",
    "xhtml": "http://www.w3.org/1999/xhtml",
}


def record(url="https://example.com/a", **fields):
    return SimpleNamespace(url=url, **fields)


def parse(xml: str):
    """Parse generated XML (which carries an encoding declaration) into an Element."""
    return ElementTree.fromstring(xml.encode("utf-8"))


def local_names(element):
    return [child.tag.split("}")[-1] for child in element]


class ListSitemap(ModelSitemap):
    """Descriptor over a plain list; record attributes drive every getter."""

    def __init__(self, records=(), label="tests.record", **options):
        super().__init__()
        self.records = list(records)
        self._label = label
        for name, value in options.items():
            setattr(self, name, value)

    @property
    def label(self):
        return self._label

    def get_queryset(self):
        return list(self.records)

    def should_be_in_sitemap(self, record):
        return getattr(record, "include", True)

    def get_url(self, record):
        return record.url

    def get_priority(self, record):
        return getattr(record, "priority", None)

    def get_change_frequency(self, record):
        return getattr(record, "changefreq", None)

    def get_translations(self, record):
        return getattr(record, "translations", [])

    def get_images(self, record):
        return getattr(record, "images", [])

    def get_news_metadata(self, record):
        return record.news


class StaticResolver(DescriptorResolver):
    """Resolve from a prepared {model: descriptor} mapping."""

    def __init__(self, descriptors):
        self.descriptors = descriptors

    def resolve(self, model):
        try:
            return self.descriptors[model]
        except KeyError:
            raise DescriptorNotFound(f"No descriptor for {model.__name__}") from None
