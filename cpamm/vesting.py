"""Vesting schedules for locking position liquidity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cpamm.errors import PoolError, require

U16_MAX = (1 << 16) - 1
U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1


def _check_range(name: str, value: int, upper: int) -> None:
    if not 0 <= value <= upper:
        raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class VestingParameters:
    """How locked liquidity is released: a cliff, then equal periodic releases.

    ``cliff_point`` of ``None`` starts vesting at the current point.
    """

    cliff_point: Optional[int]
    period_frequency: int
    cliff_unlock_liquidity: int
    liquidity_per_period: int
    number_of_period: int

    def __post_init__(self) -> None:
        if self.cliff_point is not None:
            _check_range("cliff_point", self.cliff_point, U64_MAX)
        _check_range("period_frequency", self.period_frequency, U64_MAX)
        _check_range("cliff_unlock_liquidity", self.cliff_unlock_liquidity, U128_MAX)
        _check_range("liquidity_per_period", self.liquidity_per_period, U128_MAX)
        _check_range("number_of_period", self.number_of_period, U16_MAX)

    def get_cliff_point(self, current_point: int) -> int:
        """The cliff point, or ``current_point`` when none was given."""
        return current_point if self.cliff_point is None else self.cliff_point

    def get_total_lock_amount(self) -> int:
        """Cliff liquidity plus all periodic releases, limited to u128."""
        periodic = self.liquidity_per_period * self.number_of_period
        require(periodic <= U128_MAX, PoolError.MATH_OVERFLOW)
        total = self.cliff_unlock_liquidity + periodic
        require(total <= U128_MAX, PoolError.MATH_OVERFLOW)
        return total

    def validate(self, current_point: int, max_vesting_duration: int) -> None:
        """Raise :class:`PoolException` unless the schedule is acceptable."""
        cliff_point = self.get_cliff_point(current_point)
        require(cliff_point >= current_point, PoolError.INVALID_VESTING_INFO)

        if self.number_of_period > 0:
            require(
                self.period_frequency > 0 and self.liquidity_per_period > 0,
                PoolError.INVALID_VESTING_INFO,
            )

        periods_duration = self.period_frequency * self.number_of_period
        require(periods_duration <= U64_MAX, PoolError.MATH_OVERFLOW)
        vesting_duration = (cliff_point - current_point) + periods_duration
        require(vesting_duration <= U64_MAX, PoolError.MATH_OVERFLOW)

        require(vesting_duration <= max_vesting_duration, PoolError.INVALID_VESTING_INFO)
        require(self.get_total_lock_amount() > 0, PoolError.INVALID_VESTING_INFO)