"""Quote-token rules for pools that link to an alpha vault."""

from __future__ import annotations

from cpamm.constants import DEFAULT_QUOTE_MINTS
from cpamm.errors import PoolError, require
from cpamm.pubkey import Pubkey


def is_whitelisted_quote_token(mint: Pubkey) -> bool:
    """Whether ``mint`` is one of the supported quote mints."""
    return mint in DEFAULT_QUOTE_MINTS


def validate_quote_token(
    token_mint_a: Pubkey, token_mint_b: Pubkey, has_alpha_vault: bool
) -> None:
    """Raise unless token A is a base token and token B suits the alpha vault setting.

    Token A may never be a whitelisted quote token. When token B is not a
    whitelisted quote token, the pool may not have an alpha vault.
    """
    require(not is_whitelisted_quote_token(token_mint_a), PoolError.INVALID_QUOTE_MINT)
    if not is_whitelisted_quote_token(token_mint_b):
        require(not has_alpha_vault, PoolError.INVALID_QUOTE_MINT)