"""
Schemas - Tree Summary
File: tree.py

Purpose: Serializable view of an assembled tree for hosts that display
or report it. Holds digests only, never the original blocks.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TreeSummary(BaseModel):
    """Digest-level summary of a MerkleTree."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root_hash: Optional[str] = Field(
        default=None,
        description="Digest of the root node, None for a tree without nodes",
    )
    leaf_count: int = Field(..., ge=0)
    node_count: int = Field(..., ge=0)
    depth: int = Field(..., ge=0, description="Number of levels, leaf level included")
    levels: list[list[str]] = Field(
        default_factory=list,
        description="Digests per level, bottom-up, left-to-right",
    )

    @field_validator("root_hash")
    @classmethod
    def _check_root_hash(cls, v: Optional[str]) -> Optional[str]:
        # hashing imports errors from this package
        from hashtree.crypto.hashing import is_digest

        if v is not None and not is_digest(v):
            raise ValueError(f"root_hash is not a 64-char lowercase hex digest: {v!r}")
        return v
