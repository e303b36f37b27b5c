"""
Filtering, ordering and pagination of collection snapshots.

Every list endpoint goes through the same three steps: build a
predicate from the query parameters the resource recognizes, order the
filtered snapshot (newest first for time series, insertion order
otherwise) and cut one page out of it.  Nothing here touches the store;
all functions work on the copies returned by ``DataStore.all``.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Generic, Iterable, List, Mapping, Optional, Sequence, TypeVar

from ..schemas.entity import Entity
from .config import settings
from .errors import QueryValidationError

T = TypeVar("T")
E = TypeVar("E", bound=Entity)

Predicate = Callable[[Entity], bool]

START_DATE = "startDate"
END_DATE = "endDate"


def parse_date(value: str, name: str = "date") -> datetime:
    """Parse an ISO‑8601 date or timestamp; naive values are UTC.

    Raises ``QueryValidationError`` for anything ``fromisoformat`` rejects.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise QueryValidationError(f"Invalid {name}: {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def compose_filter(
    params: Mapping[str, str],
    equality_fields: Iterable[str],
    date_range: bool = False,
) -> Predicate:
    """Build an AND‑combined predicate from recognized query parameters.

    Parameters
    ----------
    params : Mapping[str, str]
        Raw query parameters.  Keys outside ``equality_fields`` and the
        date range keys are ignored.
    equality_fields : Iterable[str]
        Wire names of fields matched by exact, case‑sensitive equality.
    date_range : bool
        Whether ``startDate``/``endDate`` bound ``createdAt`` (both
        inclusive) for this resource.

    Returns
    -------
    Callable
        A predicate over entities.  With no usable parameter it matches
        everything.
    """
    checks: List[Predicate] = []

    for name in equality_fields:
        expected = params.get(name)
        if not expected:
            continue
        checks.append(_equals(name, expected))

    if date_range:
        start_raw = params.get(START_DATE)
        if start_raw:
            start = parse_date(start_raw, START_DATE)
            checks.append(lambda entity: entity.created_at >= start)
        end_raw = params.get(END_DATE)
        if end_raw:
            end = parse_date(end_raw, END_DATE)
            checks.append(lambda entity: entity.created_at <= end)

    if not checks:
        return lambda entity: True
    return lambda entity: all(check(entity) for check in checks)


def _equals(name: str, expected: str) -> Predicate:
    def check(entity: Entity) -> bool:
        value = entity.get_field(name)
        return value is not None and str(value) == expected

    return check


def sort_newest_first(items: Iterable[E]) -> List[E]:
    """Order by ``createdAt`` descending; equal timestamps keep their order."""
    return sorted(items, key=lambda entity: entity.created_at, reverse=True)


@dataclass(frozen=True)
class PageParams:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    total: int = 0


def _parse_int(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_pagination_params(
    params: Mapping[str, str],
    default_limit: Optional[int] = None,
    max_limit: Optional[int] = None,
) -> PageParams:
    """Read ``page`` and ``limit`` from query parameters.

    ``page`` defaults to 1 and is raised to at least 1.  ``limit``
    defaults to ``settings.default_page_limit`` and is clamped to
    ``[1, settings.max_page_limit]``.  Values that are not integers fall
    back to the defaults instead of failing the request.
    """
    default_limit = default_limit or settings.default_page_limit
    max_limit = max_limit or settings.max_page_limit
    page = max(1, _parse_int(params.get("page"), 1))
    limit = min(max_limit, max(1, _parse_int(params.get("limit"), default_limit)))
    return PageParams(page=page, limit=limit)


def paginate(items: Sequence[T], page: int, limit: int) -> Page[T]:
    """Cut page ``page`` of size ``limit`` out of ``items``.

    ``total`` is always the full length of ``items``, also when the
    requested page lies past the end.
    """
    offset = (page - 1) * limit
    return Page(items=list(items[offset:offset + limit]), total=len(items))


def run_query(
    snapshot: Iterable[E],
    params: Mapping[str, str],
    paging: PageParams,
    equality_fields: Iterable[str],
    time_series: bool = False,
) -> Page[E]:
    """Filter, order and paginate one collection snapshot.

    Time series resources are filtered by date range as well and come
    back newest first; the others keep insertion order.
    """
    predicate = compose_filter(params, equality_fields, date_range=time_series)
    matched = [entity for entity in snapshot if predicate(entity)]
    if time_series:
        matched = sort_newest_first(matched)
    return paginate(matched, paging.page, paging.limit)
