"""Shared pydantic base and identifier types for Sui values."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic.alias_generators import to_camel


class SuiModel(BaseModel):
    """Base for node payloads: camelCase on the wire, unknown keys ignored."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SuiAddress(RootModel[str]):
    """Hex account address (``0x``-prefixed)."""

    @property
    def pub_key(self) -> str:
        return self.root

    def __str__(self) -> str:
        return self.root


class ObjectID(RootModel[str]):
    def __str__(self) -> str:
        return self.root


class Digest(RootModel[str]):
    def __str__(self) -> str:
        return self.root


class TransactionDigest(RootModel[str]):
    def __str__(self) -> str:
        return self.root


class CheckpointDigest(RootModel[str]):
    def __str__(self) -> str:
        return self.root


class TypeTag(RootModel[str]):
    """Move type tag, e.g. ``0x2::sui::SUI``."""

    def __str__(self) -> str:
        return self.root


# Gas payment is referenced by coin object id.
Gas = ObjectID
