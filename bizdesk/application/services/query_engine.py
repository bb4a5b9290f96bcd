"""Generic in-memory query engine: search → filter → date range → sort → paginate.

Works on any record that is either a mapping or an object with attributes
(the entity dataclasses). Field paths are dot-separated (``client.name``).
Stages run in a fixed order so that pagination always applies last.
"""

import dataclasses
import math
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime, timezone
from functools import cmp_to_key
from typing import Any, TypeVar

from bizdesk.application.schemas.query import FILTER_ALL, DateRange, QueryParams
from bizdesk.domain.entities import Page

T = TypeVar("T")

# Candidate fields for date-range filtering; the first one with a value wins.
DATE_FIELD_PRIORITY = (
    "created_at",
    "updated_at",
    "date",
    "start_date",
    "due_date",
    "onboarding_date",
)


def run_query(records: Sequence[T], params: QueryParams | None = None) -> Page[T]:
    """Apply ``params`` to ``records`` and return one page.

    The input sequence is not modified. ``page_size`` defaults to the size of
    the whole collection, so a query without paging returns a single page.
    """
    params = params or QueryParams()
    collection_size = len(records)
    data = list(records)

    if params.search:
        data = search_records(data, params.search)
    if params.filters:
        data = filter_records(data, params.filters)
    if params.date_range is not None:
        data = filter_by_date_range(data, params.date_range, params.date_field)
    if params.sort_by:
        data = sort_records(data, params.sort_by, params.sort_direction)

    return paginate(data, params.page, params.page_size, default_page_size=collection_size)


# ── Field access ────────────────────────────────────────────────────


def get_field(record: Any, path: str) -> Any:
    """Resolve a dot-separated path; any missing step yields None."""
    value = record
    for part in path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


def _top_level_values(record: Any) -> Iterable[Any]:
    if isinstance(record, Mapping):
        return record.values()
    if dataclasses.is_dataclass(record):
        return (getattr(record, f.name) for f in dataclasses.fields(record))
    return vars(record).values()


# ── Stages ──────────────────────────────────────────────────────────


def _searchable_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    # Dates are matched on their ISO form, as they are stored
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return None


def search_records(records: list[T], term: str) -> list[T]:
    """Keep records where some top-level text or date field contains ``term`` (case-insensitive)."""
    needle = term.lower()
    if not needle:
        return records
    kept: list[T] = []
    for record in records:
        for value in _top_level_values(record):
            text = _searchable_text(value)
            if text is not None and needle in text.lower():
                kept.append(record)
                break
    return kept


def _strict_equals(actual: Any, expected: Any) -> bool:
    # ISO strings match date fields by instant, not by type
    if isinstance(actual, (date, datetime)) and isinstance(expected, str):
        wanted = parse_instant(expected)
        return wanted is not None and parse_instant(actual) == wanted
    # bool is an int subclass; True must not match 1
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    return actual == expected


def filter_records(records: list[T], filters: Mapping[str, Any]) -> list[T]:
    """AND together every ``path == value`` filter, skipping ``"all"`` and None."""
    for path, expected in filters.items():
        if expected is None or expected == FILTER_ALL:
            continue
        records = [r for r in records if _strict_equals(get_field(r, path), expected)]
    return records


def parse_instant(value: Any) -> datetime | None:
    """Normalize an ISO string, date or datetime to an aware UTC datetime."""
    if value is None:
        return None
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return None


def primary_date_field(record: Any) -> str | None:
    """Name of the first priority date field the record has a value for."""
    for name in DATE_FIELD_PRIORITY:
        if get_field(record, name) is not None:
            return name
    return None


def filter_by_date_range(
    records: list[T], date_range: DateRange, date_field: str | None = None
) -> list[T]:
    """Keep records whose primary date lies in ``[from, to]``.

    Skipped unless both ends are set. Records with no date field at all are
    not date-bound and always pass.
    """
    if not date_range.from_ or not date_range.to:
        return records
    start = parse_instant(date_range.from_)
    end = parse_instant(date_range.to)
    if start is None or end is None:
        raise ValueError(f"Invalid date range: {date_range.from_!r} .. {date_range.to!r}")

    kept: list[T] = []
    for record in records:
        field_name = date_field or primary_date_field(record)
        raw = get_field(record, field_name) if field_name else None
        if raw is None:
            kept.append(record)
            continue
        instant = parse_instant(raw)
        if instant is not None and start <= instant <= end:
            kept.append(record)
    return kept


def _name_of(value: Any) -> str | None:
    name = get_field(value, "name")
    return name if isinstance(name, str) else None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_values(a: Any, b: Any) -> int:
    """Three-way comparison used for sorting; incomparable pairs are equal."""
    if isinstance(a, str) and isinstance(b, str):
        return _cmp(a.casefold(), b.casefold()) or _cmp(a, b)
    if _is_number(a) and _is_number(b):
        return _cmp(a, b)
    if isinstance(a, (date, datetime)) and isinstance(b, (date, datetime)):
        return _cmp(parse_instant(a), parse_instant(b))
    if a is not None and b is not None and not isinstance(a, (str, int, float)):
        a_name, b_name = _name_of(a), _name_of(b)
        if a_name is not None and b_name is not None:
            return _cmp(a_name.casefold(), b_name.casefold()) or _cmp(a_name, b_name)
    return 0


def sort_records(records: list[T], sort_by: str, direction: str = "asc") -> list[T]:
    """Stable sort on one field path. Ties keep their prior relative order."""
    sign = -1 if direction == "desc" else 1

    def _compare(x: T, y: T) -> int:
        return sign * compare_values(get_field(x, sort_by), get_field(y, sort_by))

    return sorted(records, key=cmp_to_key(_compare))


def paginate(
    records: list[T],
    page: int | None,
    page_size: int | None,
    *,
    default_page_size: int | None = None,
) -> Page[T]:
    """Slice one page. Out-of-range pages are empty but keep correct totals."""
    total = len(records)
    page = page or 1
    if page_size is None:
        page_size = default_page_size if default_page_size is not None else total
    total_pages = math.ceil(total / page_size) if page_size > 0 else 0

    if page_size > 0:
        start = (page - 1) * page_size
        data = records[start : start + page_size]
    else:
        data = []

    return Page(
        data=data,
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
    )
