import pytest

from cpamm.errors import ERROR_CODE_OFFSET, PoolError, PoolException, require


def test_first_error_code_is_offset():
    assert PoolError.from_code(ERROR_CODE_OFFSET) is PoolError.MATH_OVERFLOW


def test_codes_are_consecutive():
    errors = list(PoolError)
    looked_up = [
        PoolError.from_code(ERROR_CODE_OFFSET + offset) for offset, _ in enumerate(errors)
    ]
    assert looked_up == errors


def test_last_error_code():
    errors = list(PoolError)
    assert PoolError.from_code(ERROR_CODE_OFFSET + len(errors) - 1) is errors[-1]
    assert errors[-1] is PoolError.INVALID_CONFIG_TYPE


def test_from_code_unknown():
    with pytest.raises(ValueError):
        PoolError.from_code(ERROR_CODE_OFFSET - 1)


def test_from_code_past_end():
    with pytest.raises(ValueError):
        PoolError.from_code(ERROR_CODE_OFFSET + len(list(PoolError)))


def test_exception_carries_error_and_message():
    exc = PoolException(PoolError.INVALID_QUOTE_MINT)
    assert exc.error is PoolError.INVALID_QUOTE_MINT
    assert str(exc) == "Quote token must be SOL,USDC"


def test_require_raises_on_false():
    with pytest.raises(PoolException) as info:
        require(False, PoolError.AMOUNT_IS_ZERO)
    assert info.value.error is PoolError.AMOUNT_IS_ZERO


def test_require_passes_on_true():
    assert require(1 < 2, PoolError.AMOUNT_IS_ZERO) is None
    with pytest.raises(PoolException):
        require(1 > 2, PoolError.AMOUNT_IS_ZERO)