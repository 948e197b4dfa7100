# furniro/query.py
"""
List-query pipeline shared by the product and blog collections.

A listing request goes through the same fixed stages regardless of the
collection it targets:

1. category filter (``"all"`` disables it)
2. brand filter
3. price range filter
4. free-text search over a per-collection set of fields
5. sort
6. pagination

Each stage only sees the records that survived the previous one and the
source collection is never modified. Stages a collection does not use
(brand/price/sort for blog posts) are simply left unset on the
``ListQuery``.

Query string values arrive as raw strings and are parsed permissively:
malformed numbers never raise, they fall back to "not applied" or to
the collection default.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

ALL_SENTINEL = "all"
SORT_OPTIONS = ("default", "name-asc", "name-desc", "price-asc", "price-desc")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``value``.

    Mirrors the lenient behaviour browsers apply to query strings:
    ``"12"`` and ``"12abc"`` both give 12.

    Parameters
    ----------
    value : Optional[str]
        Raw query-string or body value.

    Returns
    -------
    Optional[int]
        The parsed integer, or ``None`` when ``value`` is missing, has no
        leading digits, or is too long for ``int()`` to convert.
    """
    if value is None:
        return None
    try:
        m = _LEADING_INT.match(str(value))
        return int(m.group(1)) if m else None
    except ValueError:
        # More digits than the interpreter allows for str <-> int
        return None


def _normalize(s: Optional[str]) -> str:
    return (s or "").lower()


def _collation_key(s: str) -> Tuple[str, str]:
    # Accent and case insensitive primary key; lowercase sorts before
    # uppercase when the primary keys tie.
    decomposed = unicodedata.normalize("NFKD", s)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), s.swapcase()


@dataclass
class ListQuery:
    """Parsed parameters of a listing request."""

    page: int = 1
    limit: int = 16
    category: Optional[str] = None
    brand: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    search: Optional[str] = None
    sort: str = "default"

    @classmethod
    def from_params(
        cls,
        default_limit: int,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        category: Optional[str] = None,
        brand: Optional[str] = None,
        min_price: Optional[str] = None,
        max_price: Optional[str] = None,
        search: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> "ListQuery":
        """Build a query from raw query-string values.

        Non-numeric or non-positive ``page`` becomes 1 and non-numeric
        or non-positive ``limit`` becomes ``default_limit``, so the
        pagination arithmetic is always well defined.
        """
        p = parse_int(page)
        lim = parse_int(limit)
        return cls(
            page=p if p is not None and p >= 1 else 1,
            limit=lim if lim is not None and lim >= 1 else default_limit,
            category=category or None,
            brand=brand or None,
            min_price=parse_int(min_price),
            max_price=parse_int(max_price),
            search=search or None,
            sort=sort or "default",
        )


@dataclass
class Page(Generic[T]):
    items: List[T]
    total_items: int
    total_pages: int
    current_page: int
    has_next_page: bool
    has_prev_page: bool


def filter_exact(records: Sequence[T], attr: str, value: Optional[str]) -> List[T]:
    """Keep records whose ``attr`` equals ``value`` ignoring case.

    ``None``, empty and the literal ``"all"`` disable the filter. The
    sentinel check itself is case-sensitive.
    """
    if not value or value == ALL_SENTINEL:
        return list(records)
    wanted = _normalize(value)
    return [r for r in records if _normalize(getattr(r, attr)) == wanted]


def filter_price(
    records: Sequence[T], min_price: Optional[int], max_price: Optional[int]
) -> List[T]:
    items = list(records)
    if min_price is not None:
        items = [r for r in items if getattr(r, "price") >= min_price]
    if max_price is not None:
        items = [r for r in items if getattr(r, "price") <= max_price]
    return items


def filter_search(records: Sequence[T], term: Optional[str], fields: Sequence[str]) -> List[T]:
    """Case-insensitive substring match over any of ``fields``."""
    if not term:
        return list(records)
    needle = term.lower()
    return [r for r in records if any(needle in _normalize(getattr(r, f)) for f in fields)]


def sort_records(records: Sequence[T], sort: Optional[str]) -> List[T]:
    """Order records by ``sort``; unknown tokens keep collection order.

    Python's sort is stable, including with ``reverse=True``, so records
    with equal keys keep their relative position in every mode.
    """
    items = list(records)
    if sort == "name-asc":
        items.sort(key=lambda r: _collation_key(getattr(r, "name")))
    elif sort == "name-desc":
        items.sort(key=lambda r: _collation_key(getattr(r, "name")), reverse=True)
    elif sort == "price-asc":
        items.sort(key=lambda r: getattr(r, "price"))
    elif sort == "price-desc":
        items.sort(key=lambda r: getattr(r, "price"), reverse=True)
    return items


def paginate(records: Sequence[T], page: int, limit: int) -> Page[T]:
    """Slice ``records`` into the requested page.

    ``page`` and ``limit`` must be positive. A start index past the end
    yields an empty page.
    """
    total = len(records)
    start = (page - 1) * limit
    end = start + limit
    return Page(
        items=list(records[start:end]),
        total_items=total,
        total_pages=-(-total // limit),
        current_page=page,
        has_next_page=end < total,
        has_prev_page=start > 0,
    )


def run_query(records: Sequence[T], query: ListQuery, search_fields: Sequence[str]) -> Page[T]:
    """Run every pipeline stage over ``records`` and return one page.

    Parameters
    ----------
    records : Sequence[T]
        Snapshot of the collection; it is never modified.
    query : ListQuery
        Parsed listing parameters. Unset filters are skipped.
    search_fields : Sequence[str]
        Attribute names the ``search`` term is matched against.

    Returns
    -------
    Page[T]
        The requested slice plus totals counted after filtering and
        before pagination.
    """
    items = filter_exact(records, "category", query.category)
    if query.brand:
        items = filter_exact(items, "brand", query.brand)
    if query.min_price is not None or query.max_price is not None:
        items = filter_price(items, query.min_price, query.max_price)
    items = filter_search(items, query.search, search_fields)
    items = sort_records(items, query.sort)
    page = paginate(items, query.page, query.limit)
    logger.debug(
        "query %s matched %d of %d records (page %d/%d)",
        query,
        page.total_items,
        len(records),
        page.current_page,
        page.total_pages,
    )
    return page
