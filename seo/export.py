# export.py - Write every sitemap of the registry to a directory

import logging
from pathlib import Path

from seo import conf
from seo.generators import IndexGenerator, NewsSitemapGenerator, SitemapGenerator
from seo.registry import SitemapIndex

logger = logging.getLogger(__name__)

INDEX_FILENAME = "sitemap.xml"
NEWS_FILENAME = "sitemap-news.xml"


def sitemap_filename(sitemap) -> str:
    return f"sitemap-{sitemap.label}.xml"


def write_sitemaps(output_dir=None, index: SitemapIndex = None) -> list:
    """
    Generate the index, one sitemap per registered model and the news
    sitemap, and write them to ``output_dir``.

    Every document is generated before anything is written, so a failing
    record source leaves the directory untouched.

    Returns:
        List of written file paths.
    """
    output_dir = Path(output_dir) if output_dir else conf.output_dir()
    index = index or SitemapIndex()

    documents = {INDEX_FILENAME: IndexGenerator().generate(index)}
    generator = SitemapGenerator()
    for model in index.get_all_models():
        sitemap = index.sitemap_for(model)
        documents[sitemap_filename(sitemap)] = generator.generate(sitemap)
    if index.has_news():
        documents[NEWS_FILENAME] = NewsSitemapGenerator().generate(index)

    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for filename, content in documents.items():
        path = output_dir / filename
        path.write_text(content, encoding="utf-8")
        written.append(path)
    logger.info(f"Wrote {len(written)} sitemaps to {output_dir}")
    return written
