"""Checkpoint payloads."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from suirpc.models.base import SuiModel


class CheckpointId(SuiModel):
    """Checkpoint selector: a checkpoint digest or a sequence number as string."""
    digest: str

    @classmethod
    def from_sequence_number(cls, sequence_number: int) -> "CheckpointId":
        return cls(digest=str(sequence_number))


class GasCostSummary(SuiModel):
    computation_cost: int = 0
    storage_cost: int = 0
    storage_rebate: int = 0
    non_refundable_storage_fee: int = 0


class Checkpoint(SuiModel):
    epoch: int
    sequence_number: int
    digest: str
    network_total_transactions: int
    previous_digest: str | None = None
    epoch_rolling_gas_cost_summary: GasCostSummary = Field(default_factory=GasCostSummary)
    timestamp_ms: int
    transactions: list[str] = Field(default_factory=list)
    checkpoint_commitments: list[Any] = Field(default_factory=list)
    validator_signature: str | None = None


class CheckpointSummary(SuiModel):
    epoch: int
    sequence_number: int
    network_total_transactions: int
    content_digest: str
    previous_digest: str | None = None
    epoch_rolling_gas_cost_summary: GasCostSummary = Field(default_factory=GasCostSummary)
    timestamp_ms: int


class CheckpointSequenceNumber(SuiModel):
    """Body of ``sui_getLatestCheckpointSequenceNumber``."""
    value: int = Field(alias="result")
