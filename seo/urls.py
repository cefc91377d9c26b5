from django.urls import path

from seo import views

app_name = "seo"

urlpatterns = [
    path("sitemap.xml", views.sitemap_index, name="sitemap-index"),
    # Must precede the per-model pattern, which would also match "news"
    path("sitemap-news.xml", views.news_sitemap, name="sitemap-news"),
    path("sitemap-<str:label>.xml", views.model_sitemap, name="sitemap-model"),
]
