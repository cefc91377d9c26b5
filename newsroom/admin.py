from django.contrib import admin

from .models import Article, Page


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    list_display = ("title", "language", "is_published", "published_at", "updated_at")
    list_filter = ("is_published", "language")
    search_fields = ("title", "slug")
    prepopulated_fields = {"slug": ("title",)}


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ("title", "robots", "priority", "updated_at")
    search_fields = ("title", "slug")
