import pytest

from cpamm.auth import assert_eq_admin, validate_pool_creator_authority
from cpamm.errors import PoolError, PoolException
from cpamm.pubkey import Pubkey

FIRST_ADMIN = "5unTfT2kssBuNvHPY6LbJfJpLqEcdMxGYLWHwShaeTLi"
SECOND_ADMIN = "DHLXnJdACTY83yKwnUkeoDjqi4QBbsYGa1v8tJL76ViX"


@pytest.mark.parametrize("text", [FIRST_ADMIN, SECOND_ADMIN])
def test_known_admins_accepted(text):
    assert assert_eq_admin(Pubkey.from_base58(text)) is True


def test_default_key_is_not_admin():
    assert assert_eq_admin(Pubkey.default()) is False


def test_other_key_is_not_admin():
    assert assert_eq_admin(Pubkey(bytes([7]) * 32)) is False


def test_default_creator_authority_rejected():
    with pytest.raises(PoolException) as info:
        validate_pool_creator_authority(Pubkey.default())
    assert info.value.error is PoolError.INVALID_POOL_CREATOR_AUTHORITY


def test_nonzero_creator_authority_returned():
    key = Pubkey(bytes([1]) * 32)
    assert validate_pool_creator_authority(key) == key