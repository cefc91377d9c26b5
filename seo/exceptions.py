# exceptions.py - Errors raised by the sitemap engine


class SeoError(Exception):
    """Base class for sitemap engine errors."""


class DescriptorNotFound(SeoError, LookupError):
    """A registered model has no usable sitemap descriptor (or no longer exists)."""


class InvalidNewsMetadata(SeoError, ValueError):
    """News metadata for a record is missing required fields."""


class RecordSourceError(SeoError):
    """The record source failed while a chunk was being fetched."""
