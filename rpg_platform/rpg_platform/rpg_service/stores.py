"""
Persistence boundary for user records.
"""
from typing import Optional
import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .models import User

logger = logging.getLogger(__name__)


class UserStore:
    """User lookups and writes against a single database session."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str) -> Optional[User]:
        """Case-insensitive lookup. Both sides are folded by the database."""
        return (
            self.db.query(User)
            .filter(func.lower(User.username) == func.lower(username))
            .first()
        )

    def find_by_exact_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def exists(self, username: str) -> bool:
        query = self.db.query(User).filter(func.lower(User.username) == func.lower(username))
        return self.db.query(query.exists()).scalar()

    def add(self, user: User) -> User:
        """
        Insert a new user.

        Raises:
            IntegrityError: If the username collides with an existing one
        """
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Rejected duplicate username=%s", user.username)
            raise
        self.db.refresh(user)
        return user

    def update(self, user: User) -> User:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
