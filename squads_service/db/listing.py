"""
List query helper shared by every collection endpoint.

Applies substring search, field sort and page/size pagination to a
SQLAlchemy query for any mapped entity. Entities opt into search by
declaring ``__searchable__`` column names on the model class.
"""
from typing import Tuple

from sqlalchemy import or_

from .schemas.common import ListParams

SORT_DIRECTIONS = ('asc', 'desc')


class InvalidQueryError(ValueError):
    """Raised when list parameters reference something the table cannot order by."""


def parse_sort(sort: str) -> Tuple[str, str]:
    """Split ``field`` or ``field:direction`` into its parts.

    Direction defaults to ``asc``. Only the first ``:`` separates the field
    from the direction.
    """
    field, _, direction = sort.partition(':')
    return field.strip(), (direction.strip() or 'asc')


def searchable_columns(model_class) -> list:
    return [getattr(model_class, name) for name in getattr(model_class, '__searchable__', ())]


def apply_search(query, model_class, q: str | None):
    """Restrict to rows whose searchable columns contain ``q``.

    Models without searchable columns are returned unfiltered.
    """
    if not q:
        return query
    columns = searchable_columns(model_class)
    if not columns:
        return query
    pattern = f"%{q}%"
    return query.filter(or_(*[column.like(pattern) for column in columns]))


def apply_sort(query, model_class, sort: str | None):
    """Order by the requested column, then by primary key for stable pages."""
    id_column = model_class.__table__.c.id
    if not sort:
        return query.order_by(id_column.asc())
    field, direction = parse_sort(sort)
    column = model_class.__table__.c.get(field)
    if column is None:
        raise InvalidQueryError(f"no such column: {field}")
    if direction.lower() not in SORT_DIRECTIONS:
        raise InvalidQueryError(f"invalid sort direction: {direction}")
    ordered = column.desc() if direction.lower() == 'desc' else column.asc()
    if column is id_column:
        return query.order_by(ordered)
    return query.order_by(ordered, id_column.asc())


def apply_pagination(query, params: ListParams):
    return query.offset(params.offset).limit(params.page_size)


def apply_list_query(query, model_class, params: ListParams):
    """Apply search, sort and pagination from ``params`` to ``query``."""
    query = apply_search(query, model_class, params.q)
    query = apply_sort(query, model_class, params.sort)
    return apply_pagination(query, params)
