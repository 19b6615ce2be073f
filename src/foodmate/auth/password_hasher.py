"""Password hashing for user credentials.

Passwords are never stored in plain text. Verification compares digests in
constant time.
"""

import hashlib
import hmac
import secrets

_ALGORITHM = "sha256"
_ITERATIONS = 100_000


def hash_password(password: str, salt: str | None = None) -> str:
    """Hash a password with PBKDF2.

    Args:
        password: Plain-text password
        salt: Optional hex salt, generated when omitted

    Returns:
        str: ``salt$digest`` string suitable for storage

    Raises:
        ValueError: If password is empty
    """
    if not password:
        raise ValueError("password must not be empty")

    salt = salt or secrets.token_hex(8)
    digest = hashlib.pbkdf2_hmac(_ALGORITHM, password.encode(), bytes.fromhex(salt), _ITERATIONS)
    return f"{salt}${digest.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash.

    Returns:
        bool: True if the password matches, False otherwise
    """
    salt, sep, _ = password_hash.partition("$")
    if not sep or not password:
        return False

    try:
        candidate = hash_password(password, salt)
    except ValueError:
        return False

    return hmac.compare_digest(candidate, password_hash)
