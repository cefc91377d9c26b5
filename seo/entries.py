# entries.py - Serialization of one record into a sitemap <url> element

from decimal import Decimal
import logging
import math
from numbers import Real

from seo.documents import NamespaceUsage, SitemapDocument
from seo.enums import ChangeFrequency
from seo.exceptions import InvalidNewsMetadata
from seo.utils import format_atom

logger = logging.getLogger(__name__)


def format_priority(value):
    """Decimal string for a 0.0-1.0 priority, or None when unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
    elif not isinstance(value, Real) or not math.isfinite(value):
        return None
    if not 0 <= value <= 1:
        return None
    return str(value)


class UrlEntrySerializer:
    """
    Turns one record plus its descriptor into one <url> element.

    Child elements are written in protocol order: loc, lastmod, priority,
    changefreq, then xhtml:link alternates, image:image and news:news.
    Namespace usage is committed to the shared tracker only after the entry
    has been appended, so a dropped record never declares a namespace.
    """

    def serialize(
        self,
        document: SitemapDocument,
        record,
        sitemap,
        usage: NamespaceUsage,
        force_news: bool = False,
    ) -> bool:
        """
        Append the <url> element for ``record`` to ``document``.

        Returns:
            True if an element was written, False if the record was excluded
            by the descriptor or dropped because its news metadata is invalid.
        """
        if not sitemap.should_be_in_sitemap(record):
            return False

        used = []
        url = document.element("url")

        loc = sitemap.get_url(record)
        if loc:
            url.appendChild(document.element("loc", loc))

        lastmod = format_atom(sitemap.get_last_modified(record))
        if lastmod:
            url.appendChild(document.element("lastmod", lastmod))

        priority = sitemap.get_priority(record)
        priority_text = format_priority(priority)
        if priority_text is not None:
            url.appendChild(document.element("priority", priority_text))
        elif priority is not None:
            logger.debug(f"Omitting invalid priority {priority!r} for {loc}")

        changefreq = sitemap.get_change_frequency(record)
        if changefreq in ChangeFrequency.values:
            url.appendChild(document.element("changefreq", changefreq))
        elif changefreq:
            logger.debug(f"Omitting unknown changefreq {changefreq!r} for {loc}")

        if sitemap.has_translations():
            if self.add_translations(document, url, sitemap.get_translations(record)):
                used.append("xhtml")

        if sitemap.has_images():
            if self.add_images(document, url, sitemap.get_images(record)):
                used.append("image")

        if force_news and sitemap.is_news_item():
            try:
                metadata = sitemap.news_metadata_for(record)
            except InvalidNewsMetadata as e:
                logger.warning(f"Dropping {loc or record!r} from news sitemap: {e}")
                return False
            self.add_news(document, url, metadata)
            used.append("news")

        document.append(url)
        for kind in used:
            usage.mark_used(kind)
        return True

    def add_translations(self, document, url, translations) -> bool:
        written = False
        for language, href in translations or []:
            url.appendChild(
                document.element(
                    "xhtml:link", rel="alternate", hreflang=language, href=href
                )
            )
            written = True
        return written

    def add_images(self, document, url, images) -> bool:
        written = False
        for image_url in images or []:
            if not image_url:
                continue
            image = document.element("image:image")
            image.appendChild(document.element("image:loc", image_url))
            url.appendChild(image)
            written = True
        return written

    def add_news(self, document, url, metadata):
        news = document.element("news:news")
        publication = document.element("news:publication")
        publication.appendChild(document.element("news:name", metadata.publication_name))
        publication.appendChild(
            document.element("news:language", metadata.publication_language)
        )
        news.appendChild(publication)
        news.appendChild(
            document.element("news:publication_date", metadata.publication_date_string())
        )
        news.appendChild(document.element("news:title", metadata.title))
        url.appendChild(news)
