"""
Password hashing.

bcrypt hashes are stored as UTF-8 strings in members.password.
"""
import bcrypt


def hash_password(password: str, rounds: int = 10) -> str:
    """
    Hash a plain-text password.

    Args:
        password: Plain-text password
        rounds: bcrypt cost factor

    Returns:
        bcrypt hash as a string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain-text password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
