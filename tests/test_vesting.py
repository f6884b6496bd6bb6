import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpamm.constants import MAX_VESTING_TIME_DURATION
from cpamm.errors import PoolError, PoolException
from cpamm.vesting import U64_MAX, U128_MAX, VestingParameters


def make(cliff_point=None, period_frequency=10, cliff_unlock=100, per_period=10, periods=3):
    return VestingParameters(
        cliff_point=cliff_point,
        period_frequency=period_frequency,
        cliff_unlock_liquidity=cliff_unlock,
        liquidity_per_period=per_period,
        number_of_period=periods,
    )


def test_cliff_point_defaults_to_current():
    assert make().get_cliff_point(500) == 500


def test_cliff_point_explicit():
    assert make(cliff_point=700).get_cliff_point(500) == 700


def test_total_lock_amount():
    assert make(cliff_unlock=100, per_period=10, periods=3).get_total_lock_amount() == 130


def test_total_lock_amount_overflow():
    params = make(cliff_unlock=U128_MAX, per_period=1, periods=1)
    with pytest.raises(PoolException) as info:
        params.get_total_lock_amount()
    assert info.value.error is PoolError.MATH_OVERFLOW


def test_cliff_before_current_rejected():
    with pytest.raises(PoolException) as info:
        make(cliff_point=99).validate(100, MAX_VESTING_TIME_DURATION)
    assert info.value.error is PoolError.INVALID_VESTING_INFO


@pytest.mark.parametrize("frequency,per_period", [(0, 10), (10, 0)])
def test_periods_need_frequency_and_amount(frequency, per_period):
    params = make(period_frequency=frequency, per_period=per_period, periods=2)
    with pytest.raises(PoolException) as info:
        params.validate(0, MAX_VESTING_TIME_DURATION)
    assert info.value.error is PoolError.INVALID_VESTING_INFO


def test_duration_at_limit_is_accepted_and_over_limit_rejected():
    current = 1000
    ok = make(cliff_point=current + MAX_VESTING_TIME_DURATION, periods=0, per_period=0)
    ok.validate(current, MAX_VESTING_TIME_DURATION)
    assert ok.get_cliff_point(current) - current == MAX_VESTING_TIME_DURATION

    too_long = make(cliff_point=current + MAX_VESTING_TIME_DURATION + 1, periods=0)
    with pytest.raises(PoolException) as info:
        too_long.validate(current, MAX_VESTING_TIME_DURATION)
    assert info.value.error is PoolError.INVALID_VESTING_INFO


def test_zero_total_rejected():
    params = make(cliff_unlock=0, per_period=0, periods=0)
    with pytest.raises(PoolException) as info:
        params.validate(0, MAX_VESTING_TIME_DURATION)
    assert info.value.error is PoolError.INVALID_VESTING_INFO


def test_period_duration_overflow():
    params = make(period_frequency=U64_MAX, periods=2)
    with pytest.raises(PoolException) as info:
        params.validate(0, U64_MAX)
    assert info.value.error is PoolError.MATH_OVERFLOW


def test_out_of_range_field_rejected():
    with pytest.raises(ValueError):
        make(periods=1 << 16)


@given(
    cliff=st.integers(0, U128_MAX),
    per_period=st.integers(0, 1 << 100),
    periods=st.integers(0, (1 << 16) - 1),
)
def test_total_at_least_cliff_unlock(cliff, per_period, periods):
    params = make(cliff_unlock=cliff, per_period=per_period, periods=periods)
    try:
        total = params.get_total_lock_amount()
    except PoolException as exc:
        assert exc.error is PoolError.MATH_OVERFLOW
    else:
        assert cliff <= total <= U128_MAX