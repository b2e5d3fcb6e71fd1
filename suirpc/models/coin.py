"""Coin balances, metadata and supply."""

from __future__ import annotations

from pydantic import Field

from suirpc.models.base import SuiModel

SUI_COIN_TYPE = "0x2::sui::SUI"


class Balance(SuiModel):
    coin_type: str
    coin_object_count: int = 0
    total_balance: int
    locked_balance: dict[str, int] = Field(default_factory=dict)


class SuiCoinMetadata(SuiModel):
    decimals: int
    name: str
    symbol: str
    description: str = ""
    icon_url: str | None = None
    id: str | None = None


class Supply(SuiModel):
    value: int
