# utils.py - Helpers shared by the sitemap generators

from datetime import date, datetime, time
from itertools import islice
import logging

from django.core.paginator import Paginator
from django.db.models import QuerySet
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from seo import conf

logger = logging.getLogger(__name__)


def to_datetime(value):
    """
    Coerce a timestamp-like value into an aware datetime.

    Accepts datetimes, dates and ISO-8601 strings. Naive values are made
    aware in the current time zone. Returns None for anything that cannot
    be interpreted as a timestamp.
    """
    if value is None or value == "":
        return None
    if isinstance(value, str):
        try:
            parsed = parse_datetime(value) or parse_date(value)
        except ValueError:
            parsed = None
        if parsed is None:
            return None
        value = parsed
    if isinstance(value, datetime):
        pass
    elif isinstance(value, date):
        value = datetime.combine(value, time.min)
    else:
        return None
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return value


def format_atom(value):
    """
    Format a timestamp in the Atom / RFC 3339 form used by sitemaps,
    e.g. ``2024-01-15T10:00:00+00:00``. Returns None when the value is not
    a usable timestamp.
    """
    moment = to_datetime(value)
    if moment is None:
        return None
    return moment.isoformat(timespec="seconds")


def absolute_url(path: str) -> str:
    """Prefix a site-relative path with SEO_SITE_URL; absolute URLs pass through."""
    if not path:
        return ""
    if path.startswith(("http://", "https://")):
        return path
    return f"{conf.site_url()}/{path.lstrip('/')}"


def iter_chunks(source, size=None):
    """
    Yield lists of records from a record source, ``size`` records at a time.

    QuerySets are paginated (ordered by primary key when they carry no
    ordering) so only one page is held in memory. Any other iterable is
    consumed lazily in batches. ``size=None`` yields everything as a single
    chunk.

    Args:
        source: A QuerySet or any iterable of records.
        size: Records per chunk, or None for all at once.

    Yields:
        Non-empty lists of records, in source order.
    """
    if isinstance(source, QuerySet):
        if not source.ordered:
            source = source.order_by("pk")
        if size is None:
            chunk = list(source)
            if chunk:
                yield chunk
            return
        paginator = Paginator(source, size)
        for number in paginator.page_range:
            chunk = list(paginator.page(number).object_list)
            if chunk:
                yield chunk
        return

    iterator = iter(source)
    if size is None:
        chunk = list(iterator)
        if chunk:
            yield chunk
        return
    while True:
        chunk = list(islice(iterator, size))
        if not chunk:
            return
        yield chunk


def filter_since(source, field: str, cutoff: datetime):
    """
    Restrict a record source to records whose ``field`` is after ``cutoff``.

    QuerySets are filtered in the database; plain iterables are filtered
    lazily. Records with no value for the field are dropped.
    """
    if isinstance(source, QuerySet):
        return source.filter(**{f"{field}__gt": cutoff})
    return _filter_iterable_since(source, field, cutoff)


def _filter_iterable_since(source, field, cutoff):
    for record in source:
        moment = to_datetime(getattr(record, field, None))
        if moment is not None and moment > cutoff:
            yield record
