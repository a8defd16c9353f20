"""
Vault API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from squads_service.db import schemas
from squads_service.db.database import get_db
from squads_service.db.repositories import vaults as repo_vaults
from squads_service.api.deps import RowId, get_list_params, get_raw_body, parse_update_body, update_body_openapi
from squads_service.api.errors import NOT_FOUND

router = APIRouter(
    prefix="/vaults",
    tags=["vaults"],
    responses={404: {"model": schemas.ErrorResponse}, 500: {"model": schemas.ErrorResponse}},
)


@router.post("", response_model=schemas.Vault, status_code=status.HTTP_201_CREATED)
def create_vault_endpoint(vault: schemas.VaultCreate, db: Session = Depends(get_db)):
    # multisig_address is stored as given; it need not match an existing multisig
    return repo_vaults.create_vault(db, vault)


@router.get("", response_model=List[schemas.Vault])
def list_vaults_endpoint(
    params: schemas.ListParams = Depends(get_list_params),
    db: Session = Depends(get_db),
):
    return repo_vaults.get_vaults(db, params)


@router.get("/{vault_id}", response_model=schemas.Vault)
def get_vault_endpoint(vault_id: RowId, db: Session = Depends(get_db)):
    db_vault = repo_vaults.get_vault(db, vault_id)
    if not db_vault:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return db_vault


@router.put("/{vault_id}", response_model=schemas.Vault, openapi_extra=update_body_openapi(schemas.VaultUpdate))
def update_vault_endpoint(
    vault_id: RowId,
    body: bytes = Depends(get_raw_body),
    db: Session = Depends(get_db),
):
    db_vault = repo_vaults.get_vault(db, vault_id)
    if not db_vault:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    # The body is only decoded once the row is known to exist
    patch = parse_update_body(schemas.VaultUpdate, body)
    return repo_vaults.update_vault(db, db_vault, patch)


@router.delete("/{vault_id}", response_model=schemas.StatusResponse)
def delete_vault_endpoint(vault_id: RowId, db: Session = Depends(get_db)):
    repo_vaults.delete_vault(db, vault_id)
    return {"status": "deleted"}
