"""
Multisig API endpoints.

CRUD for multisig groups plus the vault/member listings resolved through a
multisig's address.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from squads_service.db import schemas
from squads_service.db.database import get_db
from squads_service.db.repositories import members as repo_members
from squads_service.db.repositories import multisigs as repo_multisigs
from squads_service.db.repositories import vaults as repo_vaults
from squads_service.api.deps import RowId, get_list_params, get_raw_body, parse_update_body, update_body_openapi
from squads_service.api.errors import MULTISIG_NOT_FOUND, NOT_FOUND

router = APIRouter(
    prefix="/multisigs",
    tags=["multisigs"],
    responses={404: {"model": schemas.ErrorResponse}, 500: {"model": schemas.ErrorResponse}},
)


@router.post("", response_model=schemas.Multisig, status_code=status.HTTP_201_CREATED)
def create_multisig_endpoint(
    multisig: schemas.MultisigCreate,
    db: Session = Depends(get_db),
):
    return repo_multisigs.create_multisig(db, multisig)


@router.get("", response_model=List[schemas.Multisig])
def list_multisigs_endpoint(
    params: schemas.ListParams = Depends(get_list_params),
    db: Session = Depends(get_db),
):
    return repo_multisigs.get_multisigs(db, params)


@router.get("/{multisig_id}", response_model=schemas.Multisig)
def get_multisig_endpoint(multisig_id: RowId, db: Session = Depends(get_db)):
    db_multisig = repo_multisigs.get_multisig(db, multisig_id)
    if not db_multisig:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return db_multisig


@router.put("/{multisig_id}", response_model=schemas.Multisig, openapi_extra=update_body_openapi(schemas.MultisigUpdate))
def update_multisig_endpoint(
    multisig_id: RowId,
    body: bytes = Depends(get_raw_body),
    db: Session = Depends(get_db),
):
    db_multisig = repo_multisigs.get_multisig(db, multisig_id)
    if not db_multisig:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    # The body is only decoded once the row is known to exist
    patch = parse_update_body(schemas.MultisigUpdate, body)
    return repo_multisigs.update_multisig(db, db_multisig, patch)


@router.delete("/{multisig_id}", response_model=schemas.StatusResponse)
def delete_multisig_endpoint(multisig_id: RowId, db: Session = Depends(get_db)):
    # Vaults and members referencing this multisig's address are left in place
    repo_multisigs.delete_multisig(db, multisig_id)
    return {"status": "deleted"}


@router.get("/{multisig_id}/vaults", response_model=List[schemas.Vault])
def list_multisig_vaults_endpoint(multisig_id: RowId, db: Session = Depends(get_db)):
    db_multisig = repo_multisigs.get_multisig(db, multisig_id)
    if not db_multisig:
        raise HTTPException(status_code=404, detail=MULTISIG_NOT_FOUND)
    return repo_vaults.get_vaults_by_multisig_address(db, db_multisig.multisig_address)


@router.get("/{multisig_id}/members", response_model=List[schemas.Member])
def list_multisig_members_endpoint(multisig_id: RowId, db: Session = Depends(get_db)):
    db_multisig = repo_multisigs.get_multisig(db, multisig_id)
    if not db_multisig:
        raise HTTPException(status_code=404, detail=MULTISIG_NOT_FOUND)
    return repo_members.get_members_by_multisig_address(db, db_multisig.multisig_address)
