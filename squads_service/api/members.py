"""
Member API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from squads_service.db import schemas
from squads_service.db.database import get_db
from squads_service.db.repositories import members as repo_members
from squads_service.api.deps import RowId, get_list_params, get_raw_body, parse_update_body, update_body_openapi
from squads_service.api.errors import NOT_FOUND

router = APIRouter(
    prefix="/members",
    tags=["members"],
    responses={404: {"model": schemas.ErrorResponse}, 500: {"model": schemas.ErrorResponse}},
)


@router.post("", response_model=schemas.Member, status_code=status.HTTP_201_CREATED)
def create_member_endpoint(member: schemas.MemberCreate, db: Session = Depends(get_db)):
    return repo_members.create_member(db, member)


@router.get("", response_model=List[schemas.Member])
def list_members_endpoint(
    params: schemas.ListParams = Depends(get_list_params),
    db: Session = Depends(get_db),
):
    return repo_members.get_members(db, params)


@router.get("/{member_id}", response_model=schemas.Member)
def get_member_endpoint(member_id: RowId, db: Session = Depends(get_db)):
    db_member = repo_members.get_member(db, member_id)
    if not db_member:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return db_member


@router.put("/{member_id}", response_model=schemas.Member, openapi_extra=update_body_openapi(schemas.MemberUpdate))
def update_member_endpoint(
    member_id: RowId,
    body: bytes = Depends(get_raw_body),
    db: Session = Depends(get_db),
):
    db_member = repo_members.get_member(db, member_id)
    if not db_member:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    # The body is only decoded once the row is known to exist
    patch = parse_update_body(schemas.MemberUpdate, body)
    return repo_members.update_member(db, db_member, patch)


@router.delete("/{member_id}", response_model=schemas.StatusResponse)
def delete_member_endpoint(member_id: RowId, db: Session = Depends(get_db)):
    repo_members.delete_member(db, member_id)
    return {"status": "deleted"}
