# backend/services/common.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from services.errors import ConstraintViolationError, NotFoundError

logger = logging.getLogger(__name__)


def commit_or_raise(db: Session, what: str) -> None:
    """Commits the unit of work; store constraint failures roll it back and become ConstraintViolationError."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("%s rejected by the store: %s", what, exc.orig)
        raise ConstraintViolationError(f"{what} violates a store constraint: {exc.orig}") from exc


def get_or_404(db: Session, model, obj_id: int, label: str):
    obj = db.get(model, obj_id)
    if obj is None:
        raise NotFoundError(f"{label} with id {obj_id} not found")
    return obj
