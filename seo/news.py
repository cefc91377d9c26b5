# news.py - Google News metadata for news sitemap entries

from collections.abc import Mapping
from datetime import datetime

from django.conf import settings
from django.utils import translation
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from seo import conf
from seo.exceptions import InvalidNewsMetadata
from seo.utils import format_atom


class NewsMetadata(BaseModel):
    """
    Publication metadata for one <news:news> block.

    Immutable once built. Use ``create`` when every value is known and
    ``from_mapping`` for loosely-typed dicts, where the publication name and
    language fall back to the configured publication name and the active
    language.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    publication_name: str = Field(min_length=1)
    publication_language: str = Field(min_length=1)
    publication_date: datetime
    title: str = Field(min_length=1)

    @classmethod
    def create(
        cls,
        *,
        publication_name: str,
        publication_language: str,
        publication_date,
        title: str,
    ) -> "NewsMetadata":
        try:
            return cls(
                publication_name=publication_name,
                publication_language=publication_language,
                publication_date=publication_date,
                title=title,
            )
        except ValidationError as e:
            raise InvalidNewsMetadata(str(e)) from e

    @classmethod
    def from_mapping(cls, data: Mapping) -> "NewsMetadata":
        """
        Build from a dict with ``publication_name``, ``publication_language``
        (or ``language``), ``publication_date`` and ``title`` keys.

        Defaults are applied only for keys that are absent or None; date and
        title are required.
        """
        name = data.get("publication_name")
        if name is None:
            name = conf.publication_name()

        language = data.get("publication_language")
        if language is None:
            language = data.get("language")
        if language is None:
            language = translation.get_language() or settings.LANGUAGE_CODE

        if data.get("publication_date") is None or data.get("title") is None:
            raise InvalidNewsMetadata(
                "News metadata requires publication_date and title"
            )

        return cls.create(
            publication_name=name,
            publication_language=language,
            publication_date=data["publication_date"],
            title=data["title"],
        )

    @classmethod
    def coerce(cls, value) -> "NewsMetadata":
        """Accept either construction form and return a NewsMetadata."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        raise InvalidNewsMetadata(
            f"Expected NewsMetadata or a mapping, got {type(value).__name__}"
        )

    def publication_date_string(self) -> str:
        return format_atom(self.publication_date)

    def to_dict(self) -> dict:
        return {
            "publication_name": self.publication_name,
            "publication_language": self.publication_language,
            "publication_date": self.publication_date_string(),
            "title": self.title,
        }
