"""
Password hashing with bcrypt.

Hashes are salted crypt-style strings ("$2b$10$..."), opaque to
everything except is_password_matching.
"""

import bcrypt

PASSWORD_HASH_ROUNDS = 10
_ENCODING = "utf-8"


def hash_password(plaintext: str, rounds: int = PASSWORD_HASH_ROUNDS) -> str:
    """Hash a plaintext password with a fresh salt.

    Args:
        plaintext: The password to hash.
        rounds: bcrypt cost factor.

    Returns:
        The encoded bcrypt hash.

    Raises:
        TypeError: If plaintext is not a string.
        ValueError: If bcrypt rejects the input.
    """
    if not isinstance(plaintext, str):
        raise TypeError("Password must be a string")
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(plaintext.encode(_ENCODING), salt).decode(_ENCODING)


def is_password_matching(stored_hash: str, candidate: str) -> bool:
    """Return True if candidate hashes to stored_hash.

    A missing or malformed stored hash never matches.
    """
    if not stored_hash or not isinstance(candidate, str):
        return False
    try:
        return bcrypt.checkpw(candidate.encode(_ENCODING), stored_hash.encode(_ENCODING))
    except ValueError:
        return False
