# =============================================================================
# lib/security.py - Password Hashing
# =============================================================================
# Thin wrapper around a passlib CryptContext so the rest of the code never
# touches hashing schemes directly.
# =============================================================================

from passlib.context import CryptContext

# pbkdf2_sha256 is pure python in passlib, no native backend required
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Return a salted hash of ``password`` suitable for storage."""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored hash. Malformed hashes never match."""
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        return False
