# test_news.py - Tests for NewsMetadata construction paths

from datetime import datetime, timezone as dt_timezone

import pytest
from django.utils import translation
from pydantic import ValidationError

from seo.exceptions import InvalidNewsMetadata
from seo.news import NewsMetadata

PUBLISHED = datetime(2024, 1, 16, 8, 30, tzinfo=dt_timezone.utc)


class TestCreate:
    """Typed path: every value is explicit."""

    def test_builds_value(self):
        metadata = NewsMetadata.create(
            publication_name="El Diario",
            publication_language="es",
            publication_date=PUBLISHED,
            title="Titular",
        )
        assert metadata.publication_name == "El Diario"
        assert metadata.publication_language == "es"
        assert metadata.publication_date == PUBLISHED
        assert metadata.title == "Titular"

    def test_requires_every_field(self):
        with pytest.raises(TypeError):
            NewsMetadata.create(publication_date=PUBLISHED, title="Titular")

    @pytest.mark.parametrize("field", ["publication_name", "publication_language", "title"])
    def test_rejects_empty_strings(self, field):
        values = {
            "publication_name": "El Diario",
            "publication_language": "es",
            "publication_date": PUBLISHED,
            "title": "Titular",
        }
        values[field] = "   "
        with pytest.raises(InvalidNewsMetadata):
            NewsMetadata.create(**values)

    def test_rejects_unparseable_date(self):
        with pytest.raises(InvalidNewsMetadata):
            NewsMetadata.create(
                publication_name="El Diario",
                publication_language="es",
                publication_date="yesterday-ish",
                title="Titular",
            )

    def test_is_immutable(self):
        metadata = NewsMetadata.create(
            publication_name="El Diario",
            publication_language="es",
            publication_date=PUBLISHED,
            title="Titular",
        )
        with pytest.raises(ValidationError):
            metadata.title = "Otro"


class TestFromMapping:
    """Loose path: name and language fall back to configuration."""

    def test_defaults_name_and_language(self):
        with translation.override("de"):
            metadata = NewsMetadata.from_mapping(
                {"publication_date": PUBLISHED, "title": "Schlagzeile"}
            )
        assert metadata.publication_name == "The Daily Test"
        assert metadata.publication_language == "de"

    def test_publication_name_falls_back_to_app_name(self, settings):
        settings.SEO_PUBLICATION_NAME = None
        settings.APP_NAME = "Promoter Test"
        metadata = NewsMetadata.from_mapping({"publication_date": PUBLISHED, "title": "T"})
        assert metadata.publication_name == "Promoter Test"

    def test_explicit_values_win(self):
        metadata = NewsMetadata.from_mapping(
            {
                "publication_name": "El Diario",
                "publication_language": "pt",
                "language": "fr",
                "publication_date": PUBLISHED,
                "title": "Manchete",
            }
        )
        assert metadata.publication_name == "El Diario"
        assert metadata.publication_language == "pt"

    def test_language_key_is_accepted(self):
        metadata = NewsMetadata.from_mapping(
            {"language": "fr", "publication_date": PUBLISHED, "title": "Titre"}
        )
        assert metadata.publication_language == "fr"

    def test_none_counts_as_absent(self):
        metadata = NewsMetadata.from_mapping(
            {"publication_name": None, "publication_date": PUBLISHED, "title": "T"}
        )
        assert metadata.publication_name == "The Daily Test"

    def test_present_but_empty_is_not_defaulted(self):
        with pytest.raises(InvalidNewsMetadata):
            NewsMetadata.from_mapping(
                {"publication_name": "", "publication_date": PUBLISHED, "title": "T"}
            )

    def test_parses_iso_date_strings(self):
        metadata = NewsMetadata.from_mapping(
            {"publication_date": "2024-01-16T08:30:00+00:00", "title": "T"}
        )
        assert metadata.publication_date == PUBLISHED

    @pytest.mark.parametrize("missing", ["publication_date", "title"])
    def test_date_and_title_have_no_default(self, missing):
        data = {"publication_date": PUBLISHED, "title": "T"}
        del data[missing]
        with pytest.raises(InvalidNewsMetadata):
            NewsMetadata.from_mapping(data)


class TestCoerce:
    def test_passes_instances_through(self):
        metadata = NewsMetadata.create(
            publication_name="El Diario",
            publication_language="es",
            publication_date=PUBLISHED,
            title="Titular",
        )
        assert NewsMetadata.coerce(metadata) is metadata

    def test_both_forms_produce_equal_values(self):
        typed = NewsMetadata.create(
            publication_name="The Daily Test",
            publication_language="es",
            publication_date=PUBLISHED,
            title="Titular",
        )
        loose = NewsMetadata.coerce(
            {"publication_language": "es", "publication_date": PUBLISHED, "title": "Titular"}
        )
        assert loose == typed

    def test_rejects_other_shapes(self):
        with pytest.raises(InvalidNewsMetadata):
            NewsMetadata.coerce(["Titular"])
        with pytest.raises(InvalidNewsMetadata):
            NewsMetadata.coerce(None)


def test_to_dict_uses_atom_date():
    metadata = NewsMetadata.create(
        publication_name="El Diario",
        publication_language="es",
        publication_date=PUBLISHED,
        title="Titular",
    )
    assert metadata.to_dict() == {
        "publication_name": "El Diario",
        "publication_language": "es",
        "publication_date": "2024-01-16T08:30:00+00:00",
        "title": "Titular",
    }
    assert metadata.publication_date_string() == "2024-01-16T08:30:00+00:00"
