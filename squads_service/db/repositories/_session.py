"""
Transaction helpers shared by the repositories.
"""
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from squads_service.db.models import now_utc


def commit_and_refresh(db: Session, instance):
    """Commit the pending unit of work and reload ``instance`` from the database.

    The session is rolled back before the error propagates so the
    connection returns to the pool in a clean state.
    """
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(instance)
    return instance


def apply_patch(instance, patch) -> list:
    """Copy the fields present in ``patch`` onto ``instance``.

    Fields omitted from the request body or sent as null are left untouched.
    Returns the names of the fields that were assigned.
    """
    update_data = patch.model_dump(exclude_unset=True, exclude_none=True)
    for key, value in update_data.items():
        setattr(instance, key, value)
    instance.updated_at = now_utc()
    return sorted(update_data)


def delete_by_id(db: Session, model_class, item_id: int) -> bool:
    """Delete the row with primary key ``item_id``; return whether one existed."""
    try:
        deleted = db.query(model_class).filter(model_class.id == item_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return bool(deleted)
