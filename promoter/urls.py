"""
URL configuration for the promoter project.

Sitemaps are served at the site root (sitemap.xml, sitemap-news.xml and
one sitemap-<app_label.model>.xml per registered model).
"""

from django.contrib import admin
from django.urls import include, path

from promoter.views import health_check

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("seo.urls")),
    path("health/", health_check, name="health_check"),
]
