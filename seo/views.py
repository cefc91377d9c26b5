# views.py - Sitemap endpoints

import logging

from django.http import Http404, HttpResponse

from seo.generators import IndexGenerator, NewsSitemapGenerator, SitemapGenerator
from seo.registry import SitemapIndex

logger = logging.getLogger(__name__)

XML_CONTENT_TYPE = "application/xml"


def _xml_response(content):
    return HttpResponse(content, content_type=XML_CONTENT_TYPE)


def sitemap_index(request):
    """sitemap.xml: one entry per registered model plus the news sitemap."""
    return _xml_response(IndexGenerator().generate(SitemapIndex()))


def model_sitemap(request, label):
    """sitemap-<app_label.model>.xml: every record of one registered model."""
    index = SitemapIndex()
    model = index.get_model(label)
    if model is None:
        raise Http404(f"No sitemap registered for {label}")
    return _xml_response(SitemapGenerator().generate(index.sitemap_for(model)))


def news_sitemap(request):
    """sitemap-news.xml: recent records of the news-eligible models."""
    return _xml_response(NewsSitemapGenerator().generate(SitemapIndex()))
