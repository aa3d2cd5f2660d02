"""
Password hashing helpers.

Passwords are hashed with PBKDF2-HMAC-SHA256 and a random 16 byte
salt.  The stored value has the form ``<salt hex>$<digest hex>`` so
it can be verified without any extra bookkeeping.  The API has no
login flow; hashing only keeps plain-text passwords out of the store.
"""

import hashlib
import hmac
import os


ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash of ``password``."""
    salt = os.urandom(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, ITERATIONS)
    return f"{salt.hex()}${digest.hex()}"


def verify_password(password: str, hashed: str) -> bool:
    """Check ``password`` against a value produced by ``hash_password``."""
    try:
        salt_hex, digest_hex = hashed.split("$", 1)
        salt = bytes.fromhex(salt_hex)
    except ValueError:
        return False
    candidate = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, ITERATIONS)
    return hmac.compare_digest(candidate.hex(), digest_hex)
