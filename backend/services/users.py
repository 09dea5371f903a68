# backend/services/users.py
import logging
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from models.users import User
from schemas.user import UserCreate
from services.common import commit_or_raise
from services.errors import ConstraintViolationError
from utils.hashing import get_password_hash

logger = logging.getLogger(__name__)


def create_user(db: Session, payload: UserCreate) -> User:
    username = payload.username.strip().lower()

    exists = db.query(User).filter(func.lower(User.username) == username).first()
    if exists:
        raise ConstraintViolationError(f"Username '{username}' is already taken")

    user = User(
        username=username,
        full_name=payload.full_name,
        password_hash=get_password_hash(payload.password),
        role=payload.role,
        is_active=payload.is_active,
    )
    db.add(user)
    commit_or_raise(db, "User")
    db.refresh(user)
    logger.info("User %s registered with role %s", user.username, user.role)
    return user


def get_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id.asc()).all()
