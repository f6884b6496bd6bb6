# cpamm

Pure-Python building blocks for a constant-product market maker that trades
within a bounded square-root price range. Prices are Q64.64 fixed-point
integers. All arithmetic uses exact Python integers and checks results
against fixed-width limits (u64, u128, u256), raising an error where a value
would not fit.

## Install

```
pip install .
pip install ".[test]"   # with pytest and hypothesis
```

## Modules

- `cpamm.curve`: liquidity and price math.
  - `get_initialize_amounts(sqrt_min_price, sqrt_max_price, sqrt_price, liquidity)`
    returns the `(token_a, token_b)` amounts, rounded up, needed to seed
    `liquidity` at `sqrt_price`.
  - `get_delta_amount_a_unsigned` and `get_delta_amount_b_unsigned` compute
    the token amounts for a liquidity over a price range and raise
    `MATH_OVERFLOW` when the result exceeds u64; the `_unchecked` variants
    return the full value.
  - `get_next_sqrt_price_from_input(sqrt_price, liquidity, amount_in, a_for_b)`
    gives the price after swapping in an amount, using
    `get_next_sqrt_price_from_amount_a_rounding_up` or
    `get_next_sqrt_price_from_amount_b_rounding_down`.
  - `mul_div(x, y, denominator, rounding)` is a multiply-divide with
    `Rounding.UP` or `Rounding.DOWN`.
  - A lower price above the upper one raises `MATH_OVERFLOW`; a zero price
    product, or a non-positive price or liquidity given to
    `get_next_sqrt_price_from_input`, raises `ValueError`.
- `cpamm.errors`: the `PoolError` enum, each member with a `message` and a
  numeric `code` (counted from 6000, looked up with `PoolError.from_code`).
  `PoolException` carries a `PoolError` in its `error` attribute, and
  `require(condition, error)` raises it when the condition is false.
- `cpamm.pubkey`: `Pubkey`, an immutable 32-byte key ordered by its bytes,
  with `Pubkey.from_base58`, `to_base58`, `Pubkey.default()` (all zeros) and
  `bytes(key)`; plus the `b58encode` and `b58decode` helpers.
- `cpamm.constants`: square-root price bounds, fee limits, reward and
  activation durations, account seed prefixes, the treasury key and
  `DEFAULT_QUOTE_MINTS` (SOL and USDC).
- `cpamm.vesting`: `VestingParameters` (cliff point, period frequency, cliff
  liquidity, liquidity per period, number of periods) with `get_cliff_point`,
  `get_total_lock_amount` and `validate(current_point, max_vesting_duration)`,
  which raises `INVALID_VESTING_INFO` for an unacceptable schedule.
- `cpamm.auth`: `assert_eq_admin(admin)` tells whether a key is one of the
  predefined admins; `validate_pool_creator_authority` rejects the all-zero key.
- `cpamm.events`: frozen dataclass records for the events the pool emits,
  such as `EvtCreatePosition`, `EvtLockPosition` and `EvtClaimReward`.
- `cpamm.pool_keys`: `max_key` and `min_key` return the bytes of the greater
  and lesser of two keys, so a pair of mints yields the same seeds in either
  order.
- `cpamm.quote`: `is_whitelisted_quote_token` and `validate_quote_token`,
  which forbids token A being a quote mint and forbids an alpha vault when
  token B is not one.

## Example

```python
from cpamm.constants import MAX_SQRT_PRICE, MIN_SQRT_PRICE
from cpamm.curve import Rounding, get_delta_amount_b_unsigned, get_initialize_amounts
from cpamm.errors import PoolError, PoolException

sqrt_price = 1 << 64  # price 1.0 in Q64.64
amount_a, amount_b = get_initialize_amounts(
    MIN_SQRT_PRICE, MAX_SQRT_PRICE, sqrt_price, 1 << 64
)

try:
    get_delta_amount_b_unsigned(MIN_SQRT_PRICE, MAX_SQRT_PRICE, 1 << 127, Rounding.UP)
except PoolException as exc:
    assert exc.error is PoolError.MATH_OVERFLOW
```

## What this package does not do

It holds no pool, position, config or reward state, performs no swaps,
deposits, withdrawals or token transfers, and keeps no storage. It has no
command-line tool or server. It provides the price math, validation checks,
keys, constants and event records that such a system would use.

## Tests

```
pytest
```