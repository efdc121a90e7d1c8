"""
services/store.py

Small helpers shared by the CRUD routers: lookup-or-404, partial updates and
commits that turn constraint violations into 400 responses.
"""

import logging

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def get_or_404(db: Session, model, entity_id: str, entity: str):
    obj = db.query(model).filter(model.id == entity_id).first()
    if obj is None:
        raise NotFoundError(entity)
    return obj


def apply_updates(obj, payload: BaseModel, **overrides) -> None:
    """Copy only the fields the client actually sent"""
    values = payload.model_dump(exclude_unset=True)
    values.update(overrides)
    for key, value in values.items():
        setattr(obj, key, value)


def commit(db: Session, conflict_message: str = "Request conflicts with existing data") -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("integrity error: %s", e.orig)
        raise ValidationError(conflict_message)


def save(db: Session, obj, conflict_message: str = "Request conflicts with existing data"):
    db.add(obj)
    commit(db, conflict_message)
    db.refresh(obj)
    return obj
