"""Committee, validator and system state payloads."""

from __future__ import annotations

from pydantic import Field

from suirpc.models.base import SuiModel


class SuiCommittee(SuiModel):
    epoch: int
    # (authority public key, voting power) pairs
    validators: list[tuple[str, int]] = Field(default_factory=list)


class SuiValidatorSummary(SuiModel):
    sui_address: str
    protocol_pubkey_bytes: str | None = None
    name: str = ""
    description: str = ""
    image_url: str = ""
    project_url: str = ""
    net_address: str = ""
    voting_power: int = 0
    gas_price: int = 0
    commission_rate: int = 0
    next_epoch_stake: int = 0
    staking_pool_id: str | None = None
    staking_pool_sui_balance: int = 0


class SuiSystemStateSummary(SuiModel):
    epoch: int
    protocol_version: int
    system_state_version: int = 0
    storage_fund_total_object_storage_rebates: int = 0
    storage_fund_non_refundable_balance: int = 0
    reference_gas_price: int
    safe_mode: bool = False
    epoch_start_timestamp_ms: int = 0
    epoch_duration_ms: int = 0
    total_stake: int = 0
    active_validators: list[SuiValidatorSummary] = Field(default_factory=list)


class Validators(SuiModel):
    """Body of ``sui_getValidators``."""
    value: list[SuiValidatorSummary] = Field(alias="result")
