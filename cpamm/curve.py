"""Constant-product curve arithmetic on Q64.64 square-root prices."""

from __future__ import annotations

from enum import Enum

from cpamm.errors import PoolError, PoolException, require

RESOLUTION = 64

U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1
U256_MAX = (1 << 256) - 1

_SHIFT = RESOLUTION * 2


class Rounding(Enum):
    UP = "up"
    DOWN = "down"


def _check_u256(value: int) -> int:
    require(0 <= value <= U256_MAX, PoolError.MATH_OVERFLOW)
    return value


def _sub(left: int, right: int) -> int:
    require(left >= right, PoolError.MATH_OVERFLOW)
    return left - right


def _to_u128(value: int) -> int:
    require(value <= U128_MAX, PoolError.TYPE_CAST_FAILED)
    return value


def _to_u64(value: int) -> int:
    require(value <= U64_MAX, PoolError.MATH_OVERFLOW)
    return value


def mul_div(x: int, y: int, denominator: int, rounding: Rounding) -> int:
    """Compute ``x * y / denominator`` in 256-bit range with the given rounding.

    Raises :class:`PoolException` with MATH_OVERFLOW on a zero denominator or a
    result that does not fit in 256 bits.
    """
    require(denominator != 0, PoolError.MATH_OVERFLOW)
    quotient, remainder = divmod(x * y, denominator)
    if rounding is Rounding.UP and remainder:
        quotient += 1
    return _check_u256(quotient)


def get_initialize_amounts(
    sqrt_min_price: int, sqrt_max_price: int, sqrt_price: int, liquidity: int
) -> tuple[int, int]:
    """Token amounts (base, quote) needed to seed ``liquidity`` at ``sqrt_price``."""
    amount_a = get_delta_amount_a_unsigned(sqrt_price, sqrt_max_price, liquidity, Rounding.UP)
    amount_b = get_delta_amount_b_unsigned(sqrt_min_price, sqrt_price, liquidity, Rounding.UP)
    return amount_a, amount_b


def get_delta_amount_a_unsigned(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, rounding: Rounding
) -> int:
    """Δa = L * (√P_upper - √P_lower) / (√P_upper * √P_lower), limited to u64."""
    return _to_u64(
        get_delta_amount_a_unsigned_unchecked(
            lower_sqrt_price, upper_sqrt_price, liquidity, rounding
        )
    )


def get_delta_amount_a_unsigned_unchecked(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, rounding: Rounding
) -> int:
    """Δa without the u64 limit."""
    delta = _sub(upper_sqrt_price, lower_sqrt_price)
    denominator = _check_u256(lower_sqrt_price * upper_sqrt_price)
    if denominator <= 0:
        raise ValueError("square-root prices must be positive")
    return mul_div(liquidity, delta, denominator, rounding)


def get_delta_amount_b_unsigned(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, rounding: Rounding
) -> int:
    """Δb = L * (√P_upper - √P_lower), limited to u64."""
    return _to_u64(
        get_delta_amount_b_unsigned_unchecked(
            lower_sqrt_price, upper_sqrt_price, liquidity, rounding
        )
    )


def get_delta_amount_b_unsigned_unchecked(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, rounding: Rounding
) -> int:
    """Δb without the u64 limit."""
    delta = _sub(upper_sqrt_price, lower_sqrt_price)
    product = _check_u256(liquidity * delta)
    if rounding is Rounding.UP:
        return -(-product >> _SHIFT)
    return product >> _SHIFT


def get_next_sqrt_price_from_input(
    sqrt_price: int, liquidity: int, amount_in: int, a_for_b: bool
) -> int:
    """Next square-root price after swapping ``amount_in`` into the pool."""
    if sqrt_price <= 0:
        raise ValueError("sqrt_price must be positive")
    if liquidity <= 0:
        raise ValueError("liquidity must be positive")
    if a_for_b:
        return get_next_sqrt_price_from_amount_a_rounding_up(sqrt_price, liquidity, amount_in)
    return get_next_sqrt_price_from_amount_b_rounding_down(sqrt_price, liquidity, amount_in)


def get_next_sqrt_price_from_amount_a_rounding_up(
    sqrt_price: int, liquidity: int, amount: int
) -> int:
    """√P' = √P * L / (L + Δa * √P), rounded up."""
    if amount == 0:
        return sqrt_price
    product = _check_u256(amount * sqrt_price)
    denominator = _check_u256(liquidity + product)
    return _to_u128(mul_div(liquidity, sqrt_price, denominator, Rounding.UP))


def get_next_sqrt_price_from_amount_b_rounding_down(
    sqrt_price: int, liquidity: int, amount: int
) -> int:
    """√P' = √P + Δb / L, rounded down."""
    require(liquidity != 0, PoolError.MATH_OVERFLOW)
    quotient = (amount << _SHIFT) // liquidity
    result = _check_u256(sqrt_price + quotient)
    return _to_u128(result)


__all__ = [
    "PoolException",
    "Rounding",
    "mul_div",
    "get_initialize_amounts",
    "get_delta_amount_a_unsigned",
    "get_delta_amount_a_unsigned_unchecked",
    "get_delta_amount_b_unsigned",
    "get_delta_amount_b_unsigned_unchecked",
    "get_next_sqrt_price_from_input",
    "get_next_sqrt_price_from_amount_a_rounding_up",
    "get_next_sqrt_price_from_amount_b_rounding_down",
]