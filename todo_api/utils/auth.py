from passlib.context import CryptContext

# hex_sha256 is unsalted: the same password always yields the same digest.
# Login depends only on recompute-and-compare, so a salted scheme can be put
# first in this list once stored digests are migrated.
pwd_context = CryptContext(schemes=["hex_sha256"])


def hash_password(password: str) -> str:
    """Return the stored digest for a plaintext password."""
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Check a plaintext password against a stored digest.

    A digest passlib cannot identify (corrupt row, foreign format) verifies
    as False so the caller answers with an authentication failure instead of
    an error.
    """
    if not hashed:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False
