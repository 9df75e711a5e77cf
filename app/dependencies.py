# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from lib.database import Database


def get_db() -> Iterator[Session]:
    """
    Get an ORM session for the current request.

    The session is closed when the response has been sent.
    """
    db = Database.new_session()
    try:
        yield db
    finally:
        db.close()


# Type alias for dependency injection
DbSessionDep = Annotated[Session, Depends(get_db)]
