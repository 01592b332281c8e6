"""bcrypt password hashing for account credentials.

The work factor comes from ``security.bcrypt_rounds`` so test runs and
demo seeding can use cheap hashes without touching call sites.
"""

from __future__ import annotations

from typing import Optional

import bcrypt

from cashcards.core.config import get_settings


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    work_factor = rounds if rounds is not None else get_settings().security.bcrypt_rounds
    salt = bcrypt.gensalt(rounds=work_factor)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """Check ``password`` against a stored hash; malformed or missing hashes never match."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


__all__ = ["hash_password", "verify_password"]
