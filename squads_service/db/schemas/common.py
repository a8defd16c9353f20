"""
Shared request/response shapes: list parameters, status and error bodies.
"""
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

# Largest value a SQLite INTEGER (or Postgres BIGINT) can bind
MAX_INT64 = 2**63 - 1
MIN_INT64 = -(2**63)


def _as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps read back from SQLite."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]


def null_as_empty(value):
    """Treat an explicit JSON null like an omitted string field."""
    return '' if value is None else value


class ListParams(BaseModel):
    """Search, sort and pagination options accepted by list endpoints.

    `page` and `page_size` are floored to 1; see `from_query` for how raw
    query-string values are coerced.
    """
    q: str | None = None
    sort: str | None = None
    page: int = Field(default=DEFAULT_PAGE, ge=1, le=MAX_INT64)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_INT64)

    @property
    def offset(self) -> int:
        return min((self.page - 1) * self.page_size, MAX_INT64)

    @classmethod
    def from_query(
        cls,
        q: str | None = None,
        sort: str | None = None,
        page: str | None = None,
        page_size: str | None = None,
    ) -> "ListParams":
        """Build params from raw query-string values.

        Non-integer values and integers outside the 64-bit range fall back
        to the defaults; integers below 1 are raised to 1.
        """
        return cls(
            q=q or None,
            sort=sort or None,
            page=_coerce_positive(page, DEFAULT_PAGE),
            page_size=_coerce_positive(page_size, DEFAULT_PAGE_SIZE),
        )


def _coerce_positive(raw: str | None, default: int) -> int:
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    if not MIN_INT64 <= value <= MAX_INT64:
        return default
    return max(value, 1)


class StatusResponse(BaseModel):
    status: str


class ErrorResponse(BaseModel):
    error: str
