"""Events emitted by pool operations."""

from __future__ import annotations

from dataclasses import dataclass

from cpamm.pubkey import Pubkey


@dataclass(frozen=True)
class EvtCloseConfig:
    config: Pubkey
    admin: Pubkey


@dataclass(frozen=True)
class EvtCreateDynamicConfig:
    config: Pubkey
    pool_creator_authority: Pubkey
    index: int


@dataclass(frozen=True)
class EvtCreateTokenBadge:
    token_mint: Pubkey


@dataclass(frozen=True)
class EvtCreateClaimFeeOperator:
    operator: Pubkey


@dataclass(frozen=True)
class EvtCloseClaimFeeOperator:
    claim_fee_operator: Pubkey
    operator: Pubkey


@dataclass(frozen=True)
class EvtClaimPositionFee:
    pool: Pubkey
    position: Pubkey
    owner: Pubkey
    fee_a_claimed: int
    fee_b_claimed: int


@dataclass(frozen=True)
class EvtCreatePosition:
    pool: Pubkey
    owner: Pubkey
    position: Pubkey
    position_nft_mint: Pubkey


@dataclass(frozen=True)
class EvtClosePosition:
    pool: Pubkey
    owner: Pubkey
    position: Pubkey
    position_nft_mint: Pubkey


@dataclass(frozen=True)
class EvtLockPosition:
    pool: Pubkey
    position: Pubkey
    owner: Pubkey
    vesting: Pubkey
    cliff_point: int
    period_frequency: int
    cliff_unlock_liquidity: int
    liquidity_per_period: int
    number_of_period: int


@dataclass(frozen=True)
class EvtPermanentLockPosition:
    pool: Pubkey
    position: Pubkey
    lock_liquidity_amount: int
    total_permanent_locked_liquidity: int


@dataclass(frozen=True)
class EvtClaimProtocolFee:
    pool: Pubkey
    token_a_amount: int
    token_b_amount: int


@dataclass(frozen=True)
class EvtClaimPartnerFee:
    pool: Pubkey
    token_a_amount: int
    token_b_amount: int


@dataclass(frozen=True)
class EvtSetPoolStatus:
    pool: Pubkey
    status: int


@dataclass(frozen=True)
class EvtInitializeReward:
    pool: Pubkey
    reward_mint: Pubkey
    funder: Pubkey
    reward_index: int
    reward_duration: int


@dataclass(frozen=True)
class EvtFundReward:
    pool: Pubkey
    funder: Pubkey
    mint_reward: Pubkey
    reward_index: int
    amount: int
    transfer_fee_excluded_amount_in: int


@dataclass(frozen=True)
class EvtClaimReward:
    pool: Pubkey
    position: Pubkey
    owner: Pubkey
    mint_reward: Pubkey
    reward_index: int
    total_reward: int


@dataclass(frozen=True)
class EvtUpdateRewardDuration:
    pool: Pubkey
    reward_index: int
    old_reward_duration: int
    new_reward_duration: int


@dataclass(frozen=True)
class EvtUpdateRewardFunder:
    pool: Pubkey
    reward_index: int
    old_funder: Pubkey
    new_funder: Pubkey


@dataclass(frozen=True)
class EvtWithdrawIneligibleReward:
    pool: Pubkey
    reward_mint: Pubkey
    amount: int