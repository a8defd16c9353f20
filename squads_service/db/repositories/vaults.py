"""
Vault repository functions.

Vaults point at their multisig through the denormalized `multisig_address`
column, so lookups by multisig go through that value rather than a join.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from squads_service.db import models, schemas
from squads_service.db.listing import apply_list_query
from ._session import apply_patch, commit_and_refresh, delete_by_id

logger = logging.getLogger(__name__)


def create_vault(db: Session, vault: schemas.VaultCreate) -> models.Vault:
    db_vault = models.Vault(
        vault_address=vault.vault_address,
        multisig_address=vault.multisig_address,
    )
    db.add(db_vault)
    commit_and_refresh(db, db_vault)
    logger.info("vault_created id=%s multisig_address=%s", db_vault.id, db_vault.multisig_address)
    return db_vault


def get_vault(db: Session, vault_id: int) -> Optional[models.Vault]:
    return db.query(models.Vault).filter(models.Vault.id == vault_id).first()


def get_vaults(db: Session, params: schemas.ListParams) -> List[models.Vault]:
    """List vaults; `params.q` has no effect since vaults have no name."""
    q = db.query(models.Vault)
    return apply_list_query(q, models.Vault, params).all()


def get_vaults_by_multisig_address(db: Session, multisig_address: str) -> List[models.Vault]:
    return (
        db.query(models.Vault)
        .filter(models.Vault.multisig_address == multisig_address)
        .order_by(models.Vault.id.asc())
        .all()
    )


def update_vault(db: Session, db_vault: models.Vault, vault: schemas.VaultUpdate) -> models.Vault:
    fields = apply_patch(db_vault, vault)
    commit_and_refresh(db, db_vault)
    logger.info("vault_updated id=%s fields=%s", db_vault.id, fields)
    return db_vault


def delete_vault(db: Session, vault_id: int) -> bool:
    deleted = delete_by_id(db, models.Vault, vault_id)
    logger.info("vault_deleted id=%s existed=%s", vault_id, deleted)
    return deleted
