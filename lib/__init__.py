# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable building blocks:
# - database.py: SQLAlchemy engine/session singleton
# - tables.py: ORM tables (User, Joke)
# - security.py: Password hashing
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import Base, Database, DatabaseError
from lib.security import hash_password, verify_password

__all__ = [
    # Database
    "Base",
    "Database",
    "DatabaseError",
    # Security
    "hash_password",
    "verify_password",
]
