"""
Hashing Utilities
Digest helpers shared by the tree builder and the root-hash fast path.

This module provides:
- SHA-256 hashing of raw bytes or text to a lowercase hex digest
- Hashing of two concatenated hex digests (parent hashing)
- A shape check for digest strings

Determinism Notes:
- Text is always encoded as UTF-8 before hashing
- Digests are always lowercase hex, 64 characters; equality checks
  elsewhere compare these strings directly
- Single round: the digest is never re-hashed
"""
from __future__ import annotations

import hashlib
import re
from typing import Union

from hashtree.schemas.errors import InvalidInputException


Block = Union[str, bytes]

DIGEST_HEX_LENGTH = 64

_DIGEST_RE = re.compile(r"^[0-9a-f]{64}$")


def to_bytes(data: Block) -> bytes:
    """
    Normalize a block to bytes.

    Args:
        data: Text (UTF-8 encoded) or raw bytes

    Returns:
        Byte representation of the block

    Raises:
        InvalidInputException: If data is neither str nor bytes
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        return data.encode("utf-8")
    raise InvalidInputException(
        f"Cannot hash block of type {type(data).__name__}",
        details={"type": type(data).__name__},
    )


def hash_hex(data: Block) -> str:
    """
    Compute the SHA-256 digest of a block as lowercase hex.

    Args:
        data: Raw bytes or text to hash

    Returns:
        64-character lowercase hex digest

    Example:
        >>> hash_hex("hello")
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(to_bytes(data)).hexdigest()


def hash_concat_hex(left: str, right: str) -> str:
    """
    Hash the concatenation of two hex digests.

    parent = sha256((left + right).encode("utf-8"))

    The digests are joined as text with no separator or length prefix.

    Args:
        left: Left child digest
        right: Right child digest

    Returns:
        64-character lowercase hex digest
    """
    return hash_hex(left + right)


def is_digest(value: object) -> bool:
    """Return True if value looks like a digest produced by hash_hex."""
    return isinstance(value, str) and _DIGEST_RE.match(value) is not None


__all__ = [
    "Block",
    "DIGEST_HEX_LENGTH",
    "to_bytes",
    "hash_hex",
    "hash_concat_hex",
    "is_digest",
]
