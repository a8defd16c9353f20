"""
Multisig repository functions.

Implements create/read/update/delete for multisig groups plus the paged
list query.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from squads_service.db import models, schemas
from squads_service.db.listing import apply_list_query
from ._session import apply_patch, commit_and_refresh, delete_by_id

logger = logging.getLogger(__name__)


def create_multisig(db: Session, multisig: schemas.MultisigCreate) -> models.Multisig:
    db_multisig = models.Multisig(
        multisig_address=multisig.multisig_address,
        name=multisig.name,
        description=multisig.description,
    )
    db.add(db_multisig)
    commit_and_refresh(db, db_multisig)
    logger.info("multisig_created id=%s address=%s", db_multisig.id, db_multisig.multisig_address)
    return db_multisig


def get_multisig(db: Session, multisig_id: int) -> Optional[models.Multisig]:
    return db.query(models.Multisig).filter(models.Multisig.id == multisig_id).first()


def get_multisigs(db: Session, params: schemas.ListParams) -> List[models.Multisig]:
    """List multisigs matching `params` (search on name, sort, pagination)."""
    q = db.query(models.Multisig)
    return apply_list_query(q, models.Multisig, params).all()


def update_multisig(db: Session, db_multisig: models.Multisig, multisig: schemas.MultisigUpdate) -> models.Multisig:
    fields = apply_patch(db_multisig, multisig)
    commit_and_refresh(db, db_multisig)
    logger.info("multisig_updated id=%s fields=%s", db_multisig.id, fields)
    return db_multisig


def delete_multisig(db: Session, multisig_id: int) -> bool:
    deleted = delete_by_id(db, models.Multisig, multisig_id)
    logger.info("multisig_deleted id=%s existed=%s", multisig_id, deleted)
    return deleted
