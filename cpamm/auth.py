"""Admin checks and pool creator authority validation."""

from __future__ import annotations

from cpamm.errors import PoolError, require
from cpamm.pubkey import Pubkey

ADMINS = (
    Pubkey.from_base58("5unTfT2kssBuNvHPY6LbJfJpLqEcdMxGYLWHwShaeTLi"),
    Pubkey.from_base58("DHLXnJdACTY83yKwnUkeoDjqi4QBbsYGa1v8tJL76ViX"),
)


def assert_eq_admin(admin: Pubkey) -> bool:
    """Whether ``admin`` is one of the predefined admins."""
    return admin in ADMINS


def validate_pool_creator_authority(pool_creator_authority: Pubkey) -> Pubkey:
    """Return the authority, raising if it is the all-zero key."""
    require(
        pool_creator_authority != Pubkey.default(),
        PoolError.INVALID_POOL_CREATOR_AUTHORITY,
    )
    return pool_creator_authority