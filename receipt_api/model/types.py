# receipt_api/model/types.py
import secrets
import uuid

from ..errors import RandomSourceError


def new_receipt_id(random_bytes=secrets.token_bytes) -> str:
    """Random UUID string: 128 random bits with version 4 and the RFC 4122 variant.

    ``random_bytes`` is called with a byte count; tests pass a deterministic one.
    """
    try:
        raw = random_bytes(16)
    except OSError as e:
        raise RandomSourceError(f"failed to read random bytes, {e}") from e
    if len(raw) != 16:
        raise RandomSourceError(f"failed to read random bytes, got {len(raw)} of 16")
    # uuid.UUID(version=4) overwrites the version nibble and variant bits
    return str(uuid.UUID(bytes=bytes(raw), version=4))
