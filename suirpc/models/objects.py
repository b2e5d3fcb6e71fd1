"""Owned object listings."""

from __future__ import annotations

from pydantic import Field

from suirpc.models.base import Digest, SuiModel, TransactionDigest
from suirpc.models.transaction import ObjectOwner


class SuiObjectData(SuiModel):
    """Object entry exactly as the node lists it."""
    object_id: str
    version: int
    digest: str
    type: str
    owner: ObjectOwner
    previous_transaction: str


class SuiObjectResult(SuiModel):
    """Body of ``sui_getObjectsOwnedByAddress``."""
    value: list[SuiObjectData] = Field(alias="result")


class SuiObjectInfo(SuiModel):
    object_id: str
    version: int
    digest: Digest
    type: str
    owner: ObjectOwner
    previous_transaction: TransactionDigest

    @classmethod
    def from_data(cls, data: SuiObjectData) -> "SuiObjectInfo":
        return cls(
            object_id=data.object_id,
            version=data.version,
            digest=Digest(data.digest),
            type=data.type,
            owner=data.owner,
            previous_transaction=TransactionDigest(data.previous_transaction),
        )
