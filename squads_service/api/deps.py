"""
API dependency helpers.

Provides the list-parameter dependency shared by collection endpoints, the
bounded row id path type, and deferred decoding of update bodies.
"""
from typing import Annotated, Optional, Type, TypeVar

from fastapi import Path, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from squads_service.db import schemas
from squads_service.db.schemas.common import MAX_INT64, MIN_INT64

# Ids outside the 64-bit range cannot match a row; they fail path validation (404)
RowId = Annotated[int, Path(ge=MIN_INT64, le=MAX_INT64)]

PatchT = TypeVar("PatchT", bound=BaseModel)


def get_list_params(
    q: Optional[str] = Query(default=None, description="Substring matched against `name` where the resource has one."),
    sort: Optional[str] = Query(default=None, description="`field` or `field:asc|desc`."),
    page: Optional[str] = Query(default=None, description="1-based page number (default 1)."),
    page_size: Optional[str] = Query(default=None, description="Rows per page (default 10)."),
) -> schemas.ListParams:
    # page/page_size are taken as strings so malformed values fall back to defaults instead of failing the request
    return schemas.ListParams.from_query(q=q, sort=sort, page=page, page_size=page_size)


async def get_raw_body(request: Request) -> bytes:
    """Return the undecoded request body."""
    return await request.body()


def parse_update_body(schema: Type[PatchT], raw: bytes) -> PatchT:
    """Decode an update body after the target row has been found.

    Failures are raised as ``RequestValidationError`` so they reach the
    client as 400 like any other body error.
    """
    try:
        return schema.model_validate_json(raw or b"")
    except ValidationError as exc:
        errors = [{**err, "loc": ("body", *err.get("loc", ()))} for err in exc.errors(include_url=False)]
        raise RequestValidationError(errors)


def update_body_openapi(schema: Type[BaseModel]) -> dict:
    """OpenAPI request body entry for endpoints that read the body by hand."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }
