# =============================================================================
# core/services/user_service.py - User Storage
# =============================================================================
# The users table exists in the schema; admin login does not read it.
# =============================================================================

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import DuplicateSlugError
from core.orm import User

logger = logging.getLogger(__name__)


class UserService:

    @staticmethod
    def get_user(db: Session, user_id: str) -> User | None:
        return db.get(User, user_id)

    @staticmethod
    def get_user_by_username(db: Session, username: str) -> User | None:
        return db.scalar(select(User).where(User.username == username))

    @staticmethod
    def create_user(db: Session, username: str, password: str) -> User:
        user = User(username=username, password=password)
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise DuplicateSlugError("user", username)

        db.refresh(user)
        logger.info(f"Created user: {username}")
        return user
