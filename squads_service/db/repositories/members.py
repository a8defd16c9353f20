"""
Member repository functions.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from squads_service.db import models, schemas
from squads_service.db.listing import apply_list_query
from ._session import apply_patch, commit_and_refresh, delete_by_id

logger = logging.getLogger(__name__)


def create_member(db: Session, member: schemas.MemberCreate) -> models.Member:
    db_member = models.Member(
        member_address=member.member_address,
        name=member.name,
        multisig_address=member.multisig_address,
    )
    db.add(db_member)
    commit_and_refresh(db, db_member)
    logger.info("member_created id=%s multisig_address=%s", db_member.id, db_member.multisig_address)
    return db_member


def get_member(db: Session, member_id: int) -> Optional[models.Member]:
    return db.query(models.Member).filter(models.Member.id == member_id).first()


def get_members(db: Session, params: schemas.ListParams) -> List[models.Member]:
    q = db.query(models.Member)
    return apply_list_query(q, models.Member, params).all()


def get_members_by_multisig_address(db: Session, multisig_address: str) -> List[models.Member]:
    return (
        db.query(models.Member)
        .filter(models.Member.multisig_address == multisig_address)
        .order_by(models.Member.id.asc())
        .all()
    )


def update_member(db: Session, db_member: models.Member, member: schemas.MemberUpdate) -> models.Member:
    fields = apply_patch(db_member, member)
    commit_and_refresh(db, db_member)
    logger.info("member_updated id=%s fields=%s", db_member.id, fields)
    return db_member


def delete_member(db: Session, member_id: int) -> bool:
    deleted = delete_by_id(db, models.Member, member_id)
    logger.info("member_deleted id=%s existed=%s", member_id, deleted)
    return deleted
