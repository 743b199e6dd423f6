"""Password hashing with bcrypt.

Stored hashes use the ``$2a$``/``$2b$`` bcrypt formats, so hashes written by
earlier deployments keep verifying.
"""

import bcrypt

from equinox.core.settings import get_settings

# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72
BCRYPT_PREFIX = "$2"


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash a plain password.

    Args:
        password: Plain text password (at most 72 bytes once UTF-8 encoded)
        rounds: bcrypt cost factor, defaults to the BCRYPT_ROUNDS setting

    Returns:
        The bcrypt hash as text
    """
    if rounds is None:
        rounds = get_settings().bcrypt_rounds
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored hash.

    Anything that is not a usable bcrypt hash (plain text left behind by a
    manual edit, truncated values) verifies as False.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def looks_hashed(value: str) -> bool:
    return value.startswith(BCRYPT_PREFIX)


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES
