# =============================================================================
# core/services/joke_service.py - Joke Business Logic
# =============================================================================
# Handles joke CRUD operations and the ownership rule for deletes.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
import random

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.exceptions import JokeNotFoundError, NoJokesError, NotJokeOwnerError
from lib.tables import Joke

logger = logging.getLogger(__name__)

# How many jokes the sidebar shows
JOKE_LIST_LIMIT = 5


class JokeService:
    """
    Service for joke operations.

    Every method takes the request's ORM session as its first argument.
    """

    @staticmethod
    def find_joke(db: Session, joke_id: str) -> Joke | None:
        """Return the joke with ``joke_id`` or None."""
        return db.get(Joke, joke_id)

    @staticmethod
    def get_joke(db: Session, joke_id: str) -> Joke:
        """
        Get a joke by ID.

        Raises:
            JokeNotFoundError: If the joke doesn't exist
        """
        joke = JokeService.find_joke(db, joke_id)
        if joke is None:
            raise JokeNotFoundError(joke_id)
        return joke

    @staticmethod
    def list_jokes(db: Session, limit: int = JOKE_LIST_LIMIT) -> list[Joke]:
        """Return the newest jokes first."""
        statement = (
            select(Joke)
            .order_by(Joke.created_at.desc(), Joke.id)
            .limit(limit)
        )
        return list(db.scalars(statement))

    @staticmethod
    def count_jokes(db: Session) -> int:
        return db.scalar(select(func.count()).select_from(Joke)) or 0

    @staticmethod
    def random_joke(db: Session) -> Joke:
        """
        Pick a joke uniformly at random.

        Raises:
            NoJokesError: If there are no jokes at all
        """
        count = JokeService.count_jokes(db)
        if count == 0:
            raise NoJokesError()

        statement = (
            select(Joke)
            .order_by(Joke.id)
            .offset(random.randrange(count))
            .limit(1)
        )
        joke = db.scalars(statement).first()
        if joke is None:
            # A delete raced the count
            raise NoJokesError()
        return joke

    @staticmethod
    def create_joke(db: Session, jokester_id: str, name: str, content: str) -> Joke:
        """
        Create a joke owned by ``jokester_id``.

        Returns:
            The persisted joke, with its generated id
        """
        joke = Joke(name=name, content=content, jokester_id=jokester_id)
        db.add(joke)
        try:
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to create joke for user {jokester_id}: {e}")
            raise

        db.refresh(joke)
        logger.info(f"Created joke: {joke.id} for user: {jokester_id}")
        return joke

    @staticmethod
    def delete_joke(db: Session, joke_id: str, user_id: str) -> None:
        """
        Delete a joke on behalf of ``user_id``.

        Raises:
            JokeNotFoundError: If the joke doesn't exist
            NotJokeOwnerError: If user_id isn't the joke's jokester
        """
        joke = JokeService.find_joke(db, joke_id)
        if joke is None:
            raise JokeNotFoundError(joke_id, message="Can't delete what does not exist")

        if joke.jokester_id != user_id:
            logger.warning(f"User {user_id} tried to delete joke {joke_id} owned by {joke.jokester_id}")
            raise NotJokeOwnerError(joke_id, user_id)

        db.delete(joke)
        try:
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to delete joke {joke_id}: {e}")
            raise

        logger.info(f"Deleted joke: {joke_id} for user: {user_id}")
