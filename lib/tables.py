# =============================================================================
# lib/tables.py - ORM Tables
# =============================================================================
# SQLAlchemy declarative models for the two persisted entities:
# - User: registered account, unique username, hashed password
# - Joke: a short text joke owned by exactly one User (its jokester)
#
# Sessions are not stored here; they live entirely in the signed cookie.
# =============================================================================

import datetime
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from lib.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class User(Base):
    """Registered user. Owns zero or more jokes."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    jokes = relationship(
        "Joke",
        back_populates="jokester",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r})"


class Joke(Base):
    """A joke. ``jokester_id`` is the owning user."""

    __tablename__ = "jokes"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    jokester_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    jokester = relationship("User", back_populates="jokes")

    def __repr__(self) -> str:
        return f"Joke(id={self.id!r}, name={self.name!r})"
