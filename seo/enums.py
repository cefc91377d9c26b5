# enums.py - Fixed vocabularies used by sitemap descriptors

from django.db import models


class ChangeFrequency(models.TextChoices):
    """Values allowed in <changefreq> by the sitemap protocol."""

    ALWAYS = "always", "Always"
    HOURLY = "hourly", "Hourly"
    DAILY = "daily", "Daily"
    WEEKLY = "weekly", "Weekly"
    MONTHLY = "monthly", "Monthly"
    YEARLY = "yearly", "Yearly"
    NEVER = "never", "Never"


class RobotsDirective(models.TextChoices):
    """Commonly combined values for the robots meta tag."""

    INDEX_FOLLOW = "index,follow", "Index, follow"
    NOINDEX_FOLLOW = "noindex,follow", "No index, follow"
    INDEX_NOFOLLOW = "index,nofollow", "Index, no follow"
    NOINDEX_NOFOLLOW = "noindex,nofollow", "No index, no follow"

    @classmethod
    def default(cls):
        return cls.INDEX_FOLLOW

    def allows_index(self) -> bool:
        return self in (RobotsDirective.INDEX_FOLLOW, RobotsDirective.INDEX_NOFOLLOW)

    def allows_follow(self) -> bool:
        return self in (RobotsDirective.INDEX_FOLLOW, RobotsDirective.NOINDEX_FOLLOW)
