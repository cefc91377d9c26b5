# sitemaps.py

from seo.enums import ChangeFrequency
from seo.sitemaps import ModelSitemap, Translation
from seo.utils import absolute_url


class ArticleSitemap(ModelSitemap):
    """Published articles, with translations, lead image and news metadata."""

    changefreq = ChangeFrequency.DAILY
    priority = 0.8
    translations = True
    images = True
    news = True

    def get_queryset(self):
        return self.model.objects.filter(is_published=True)

    def get_translations(self, article):
        return [
            Translation(translation.language, absolute_url(translation.get_absolute_url()))
            for translation in article.translations.filter(is_published=True).order_by("pk")
        ]

    def get_images(self, article):
        return [article.image_url] if article.image_url else []

    def get_news_metadata(self, article):
        return {
            "publication_language": article.language,
            "publication_date": article.published_at,
            "title": article.title,
        }


class PageSitemap(ModelSitemap):
    changefreq = ChangeFrequency.MONTHLY

    def should_be_in_sitemap(self, page):
        return page.robots_directive.allows_index()

    def get_priority(self, page):
        return page.priority
