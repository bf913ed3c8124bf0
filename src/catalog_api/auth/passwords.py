"""
Module: passwords.py
Description: Password hashing and verification.

Hashes passwords with PBKDF2-SHA256 and verifies them against stored
hashes. The iteration count is the work factor and comes from settings.

Key Components:
- hash_password(): Hash a plaintext password
- verify_password(): Verify a plaintext password against a stored hash

Dependencies: hashlib, secrets
Author: Catalog API Team
"""

import hashlib
import secrets

from catalog_api.utils.logger import get_logger

logger = get_logger(__name__)

PBKDF2_ALGORITHM = 'pbkdf2_sha256'
PBKDF2_DEFAULT_ITERATIONS = 100000
PBKDF2_SALT_LENGTH = 16
PBKDF2_KEY_LENGTH = 32


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac(
        'sha256',
        password.encode('utf-8'),
        salt,
        iterations,
        dklen=PBKDF2_KEY_LENGTH
    )


def hash_password(password: str, iterations: int = PBKDF2_DEFAULT_ITERATIONS) -> str:
    """
    Hash a password using PBKDF2-SHA256.

    Any string is accepted, including an empty one; password strength is
    not this function's concern.

    Args:
        password: Plaintext password
        iterations: PBKDF2 iteration count (work factor)

    Returns:
        Hash string in format: pbkdf2_sha256$iterations$salt$hash

    Raises:
        TypeError: If password is not a string
        ValueError: If iterations is not positive

    Example:
        >>> hash_password("pw1", iterations=1000)
        'pbkdf2_sha256$1000$...'
    """
    if not isinstance(password, str):
        raise TypeError("password must be a string")
    if iterations < 1:
        raise ValueError("iterations must be a positive integer")

    salt = secrets.token_bytes(PBKDF2_SALT_LENGTH)
    key = _derive(password, salt, iterations)

    logger.debug("Password hashed", iterations=iterations)

    return f"{PBKDF2_ALGORITHM}${iterations}${salt.hex()}${key.hex()}"


def verify_password(password: str, hashed: str) -> bool:
    """
    Verify a password against its PBKDF2 hash.

    Args:
        password: Plaintext password to check
        hashed: Stored hash string

    Returns:
        True if the password matches, False otherwise (including for
        malformed hashes)
    """
    if not isinstance(password, str) or not isinstance(hashed, str):
        return False

    parts = hashed.split('$')
    if len(parts) != 4 or parts[0] != PBKDF2_ALGORITHM:
        logger.warning("Invalid password hash format")
        return False

    try:
        iterations = int(parts[1])
        salt = bytes.fromhex(parts[2])
    except ValueError:
        logger.warning("Invalid password hash parameters")
        return False

    if iterations < 1:
        return False

    computed = _derive(password, salt, iterations).hex()

    # Constant-time comparison
    return secrets.compare_digest(computed, parts[3])
