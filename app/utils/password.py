"""bcrypt 기반 비밀번호 해싱 유틸리티.

Password hashing helpers backed by bcrypt.

Only bcrypt hashes are ever persisted in users.password_hash.
"""

import bcrypt


def hash_password(password: str) -> str:
    """Hash a plain text password with a fresh bcrypt salt.

    Args:
        password: Plain text password

    Returns:
        str: Bcrypt hash string (~60 chars)
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain text password against a stored bcrypt hash."""
    return bcrypt.checkpw(
        plain_password.encode("utf-8"), hashed_password.encode("utf-8")
    )
