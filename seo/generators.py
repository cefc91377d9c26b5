"""
Sitemap generators: per-model urlset, sitemap index and news urlset.

Each generate() call builds its own SitemapDocument and NamespaceUsage and
returns the complete XML text; nothing is shared between calls and nothing
is returned when the record source fails part way through.
"""

from datetime import timedelta
import logging
from typing import Callable, Optional

from django.core.exceptions import FieldError
from django.db import DatabaseError
from django.utils import timezone

from seo import conf
from seo.documents import NamespaceUsage, SitemapDocument
from seo.entries import UrlEntrySerializer
from seo.exceptions import DescriptorNotFound, RecordSourceError
from seo.registry import SitemapIndex
from seo.utils import filter_since, format_atom, iter_chunks, to_datetime

logger = logging.getLogger(__name__)

_UNSET = object()


class SitemapGenerator:
    """Writes every record of one descriptor into a ``urlset`` document."""

    def __init__(self, chunk_size=_UNSET, serializer: UrlEntrySerializer = None):
        self.chunk_size = conf.chunk_size() if chunk_size is _UNSET else chunk_size
        self.serializer = serializer or UrlEntrySerializer()

    def generate(self, sitemap) -> str:
        document = SitemapDocument("urlset")
        usage = NamespaceUsage()
        written = self.write_records(document, usage, sitemap, sitemap.get_queryset())
        logger.info(f"Generated sitemap for {sitemap.label or sitemap!r}: {written} urls")
        return document.finalize(usage)

    def write_records(self, document, usage, sitemap, source, force_news=False) -> int:
        """
        Serialize ``source`` chunk by chunk into ``document``.

        Raises:
            RecordSourceError: if fetching a chunk fails.
        """
        written = 0
        chunks = iter_chunks(source, self.chunk_size)
        while True:
            try:
                chunk = next(chunks)
            except StopIteration:
                break
            except (DatabaseError, OSError) as e:
                logger.error(f"Record source failed for {sitemap!r}: {e}")
                raise RecordSourceError(
                    f"Record source failed for {sitemap!r}: {e}"
                ) from e
            for record in chunk:
                if self.serializer.serialize(
                    document, record, sitemap, usage, force_news=force_news
                ):
                    written += 1
        return written


class IndexGenerator:
    """Writes one ``<sitemap>`` entry per registered model, plus the news sitemap."""

    def __init__(self, now: Optional[Callable] = None):
        self.now = now or timezone.now

    def generate(self, index: SitemapIndex) -> str:
        document = SitemapDocument("sitemapindex")
        news_lastmod = None

        for model in index.get_all_models():
            sitemap = index.sitemap_for(model)
            lastmod = to_datetime(sitemap.get_sitemap_last_modified())

            if index.is_news_model(model) and lastmod is not None:
                if news_lastmod is None or lastmod > news_lastmod:
                    news_lastmod = lastmod

            self.add_sitemap(document, sitemap.link(), lastmod)

        if index.has_news():
            self.add_sitemap(document, index.news_link(), news_lastmod or self.now())

        logger.info(f"Generated sitemap index with {len(document)} entries")
        return document.finalize()

    @staticmethod
    def add_sitemap(document, loc, lastmod):
        entry = document.element("sitemap")
        entry.appendChild(document.element("loc", loc))
        lastmod_text = format_atom(lastmod)
        if lastmod_text:
            entry.appendChild(document.element("lastmod", lastmod_text))
        document.append(entry)


class NewsSitemapGenerator(SitemapGenerator):
    """
    Writes recent records of every news-eligible model into one ``urlset``
    with Google News metadata.
    """

    def __init__(
        self,
        chunk_size=_UNSET,
        window: Optional[timedelta] = None,
        now: Optional[Callable] = None,
        serializer: UrlEntrySerializer = None,
    ):
        super().__init__(chunk_size=chunk_size, serializer=serializer)
        self.window = window if window is not None else conf.news_window()
        self.now = now or timezone.now

    def generate(self, index: SitemapIndex) -> str:
        document = SitemapDocument("urlset")
        usage = NamespaceUsage()
        cutoff = self.now() - self.window
        written = 0

        for model in index.get_news_models():
            try:
                sitemap = index.sitemap_for(model)
            except DescriptorNotFound as e:
                logger.warning(f"Skipping news model {model!r}: {e}")
                continue

            field = sitemap.get_freshness_field()
            try:
                source = filter_since(sitemap.get_queryset(), field, cutoff)
            except FieldError as e:
                logger.warning(f"Skipping news model {model!r}: no {field} field ({e})")
                continue
            written += self.write_records(document, usage, sitemap, source, force_news=True)

        logger.info(f"Generated news sitemap: {written} urls since {cutoff.isoformat()}")
        return document.finalize(usage)
