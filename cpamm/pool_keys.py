"""Order-independent key bytes used when deriving pool addresses."""

from __future__ import annotations

from cpamm.pubkey import Pubkey


def max_key(left: Pubkey, right: Pubkey) -> bytes:
    """Bytes of the greater of two keys, compared by their bytes."""
    return bytes(max(left, right))


def min_key(left: Pubkey, right: Pubkey) -> bytes:
    """Bytes of the lesser of two keys, compared by their bytes."""
    return bytes(min(left, right))