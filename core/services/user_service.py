# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Credential checks and registration. Returning None (rather than raising)
# for a failed login or registration lets the login route render the
# problem as a form error.
# =============================================================================

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lib.security import hash_password, verify_password
from lib.tables import User

logger = logging.getLogger(__name__)


class UserService:
    """Service for user lookups, login and registration."""

    @staticmethod
    def get_user(db: Session, user_id: str) -> User | None:
        return db.get(User, user_id)

    @staticmethod
    def find_by_username(db: Session, username: str) -> User | None:
        return db.scalars(select(User).where(User.username == username)).first()

    @staticmethod
    def login(db: Session, username: str, password: str) -> User | None:
        """
        Check a username/password pair.

        Returns:
            The user if the credentials match, None otherwise
        """
        user = UserService.find_by_username(db, username)
        if user is None:
            logger.info(f"Login failed: unknown username {username!r}")
            return None

        if not verify_password(password, user.password_hash):
            logger.info(f"Login failed: bad password for {username!r}")
            return None

        return user

    @staticmethod
    def register(db: Session, username: str, password: str) -> User | None:
        """
        Create a user with a hashed password.

        Returns:
            The new user, or None if the username was taken in the meantime
        """
        user = User(username=username, password_hash=hash_password(password))
        db.add(user)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"Failed to register {username!r}: {e.orig}")
            return None

        db.refresh(user)
        logger.info(f"Registered user: {user.id} ({username})")
        return user
