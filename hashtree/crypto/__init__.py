"""
Core cryptographic utilities.

Provides the single-round SHA-256 hasher used for leaves and nodes.
"""
from .hashing import (
    Block,
    DIGEST_HEX_LENGTH,
    to_bytes,
    hash_hex,
    hash_concat_hex,
    is_digest,
)

__all__ = [
    "Block",
    "DIGEST_HEX_LENGTH",
    "to_bytes",
    "hash_hex",
    "hash_concat_hex",
    "is_digest",
]
