"""Content hashing."""

import hashlib
import hmac

from webterms.domain.value_objects import ContentHash


def hash_bytes(data: bytes) -> str:
    """SHA-256 hex digest of data."""
    return hashlib.sha256(data).hexdigest()


def verify(data: bytes, expected: str) -> bool:
    """Check data against a stored digest. Malformed digests never match."""
    try:
        expected_hash = ContentHash(expected)
    except ValueError:
        return False
    return hmac.compare_digest(hash_bytes(data), expected_hash.value)
