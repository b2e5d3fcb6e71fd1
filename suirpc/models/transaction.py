"""Transaction requests, effects, events and responses."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import Field, JsonValue, Tag

from suirpc.models.base import SuiModel, TransactionDigest
from suirpc.models.checkpoint import GasCostSummary
from suirpc.models.polymorphic import tagged_with_default


class SuiTransactionBuilderMode(str, Enum):
    """Builder mode argument; values are sent as is."""
    REGULAR = "Commit"
    DEV_INSPECT = ""


class ExecuteTransactionRequestType(str, Enum):
    IMMEDIATE_RETURN = "ImmediateReturn"
    WAIT_FOR_TX_CERT = "WaitForTxCert"
    WAIT_FOR_EFFECTS_CERT = "WaitForEffectsCert"
    WAIT_FOR_LOCAL_EXECUTION = "WaitForLocalExecution"


# Arbitrary JSON argument accepted by Move call arguments.
SuiJsonValue = JsonValue


class TransferObjectRequestParams(SuiModel):
    recipient: str
    object_id: str


class MoveCallRequestParams(SuiModel):
    package_object_id: str
    module: str
    function: str
    type_arguments: list[str] = Field(default_factory=list)
    arguments: list[SuiJsonValue] = Field(default_factory=list)


class RPCTransactionRequestParams(SuiModel):
    """One entry of a batch transaction; exactly one member is set."""
    transfer_object_request_params: TransferObjectRequestParams | None = None
    move_call_request_params: MoveCallRequestParams | None = None


class TransactionBlockResponseOptions(SuiModel):
    show_input: bool = False
    show_raw_input: bool = False
    show_effects: bool = False
    show_events: bool = False
    show_object_changes: bool = False
    show_balance_changes: bool = False


class TransactionQuery(SuiModel):
    """Filter for ``sui_getTransactions``; set exactly one member."""
    input_object: str | None = Field(default=None, alias="InputObject")
    mutated_object: str | None = Field(default=None, alias="MutatedObject")
    from_address: str | None = Field(default=None, alias="FromAddress")
    to_address: str | None = Field(default=None, alias="ToAddress")
    move_function: dict[str, Any] | None = Field(default=None, alias="MoveFunction")


class SuiObjectRef(SuiModel):
    object_id: str
    version: int
    digest: str


# Owner is either a bare string ("Immutable") or a single-key object
# ({"AddressOwner": ...}, {"ObjectOwner": ...}, {"Shared": {...}}).
ObjectOwner = Union[str, dict[str, Any]]


class OwnedObjectRef(SuiModel):
    owner: ObjectOwner
    reference: SuiObjectRef


class MutatedObject(SuiModel):
    """Mutated object effect; default for any unrecognized tag."""
    type: str | None = None
    owner: ObjectOwner | None = None
    reference: SuiObjectRef


class MutatedObjectShared(SuiModel):
    """Mutated effect on a shared object."""
    type: Literal["mutatedShared"] = "mutatedShared"
    owner: ObjectOwner | None = None
    reference: SuiObjectRef
    initial_shared_version: int | None = None


MUTATE_OBJECT_DEFAULT_TAG = "mutated"

MutateObject = Annotated[
    Union[
        Annotated[MutatedObjectShared, Tag("mutatedShared")],
        Annotated[MutatedObject, Tag(MUTATE_OBJECT_DEFAULT_TAG)],
    ],
    tagged_with_default({"mutatedShared", MUTATE_OBJECT_DEFAULT_TAG}, MUTATE_OBJECT_DEFAULT_TAG),
]


class EventID(SuiModel):
    tx_digest: str
    event_seq: int


class GenericEvent(SuiModel):
    """Event record; default for any event whose tag is not modelled."""
    type: str | None = None
    id: EventID | None = None
    package_id: str | None = None
    transaction_module: str | None = None
    sender: str | None = None
    parsed_json: Any = None
    bcs: str | None = None
    timestamp_ms: int | None = None


class MoveEvent(SuiModel):
    type: Literal["moveEvent"] = "moveEvent"
    package_id: str
    transaction_module: str
    sender: str
    fields: dict[str, Any] = Field(default_factory=dict)
    bcs: str | None = None


class CoinBalanceChangeEvent(SuiModel):
    type: Literal["coinBalanceChange"] = "coinBalanceChange"
    package_id: str
    transaction_module: str
    sender: str
    change_type: str
    owner: ObjectOwner | None = None
    coin_type: str
    coin_object_id: str
    version: int
    amount: int


EVENT_DEFAULT_TAG = "event"

Event = Annotated[
    Union[
        Annotated[MoveEvent, Tag("moveEvent")],
        Annotated[CoinBalanceChangeEvent, Tag("coinBalanceChange")],
        Annotated[GenericEvent, Tag(EVENT_DEFAULT_TAG)],
    ],
    tagged_with_default({"moveEvent", "coinBalanceChange", EVENT_DEFAULT_TAG}, EVENT_DEFAULT_TAG),
]


class ExecutionStatus(SuiModel):
    status: str
    error: str | None = None


class TransactionEffects(SuiModel):
    status: ExecutionStatus
    executed_epoch: int | None = None
    gas_used: GasCostSummary = Field(default_factory=GasCostSummary)
    transaction_digest: str
    created: list[OwnedObjectRef] = Field(default_factory=list)
    mutated: list[MutateObject] = Field(default_factory=list)
    unwrapped: list[OwnedObjectRef] = Field(default_factory=list)
    deleted: list[SuiObjectRef] = Field(default_factory=list)
    wrapped: list[SuiObjectRef] = Field(default_factory=list)
    gas_object: OwnedObjectRef | None = None
    events_digest: str | None = None
    dependencies: list[str] = Field(default_factory=list)


class BalanceChange(SuiModel):
    owner: ObjectOwner
    coin_type: str
    amount: int


class TransactionBlockResponse(SuiModel):
    digest: str
    transaction: Any = None
    raw_transaction: str | None = None
    effects: TransactionEffects | None = None
    events: list[Event] = Field(default_factory=list)
    object_changes: list[dict[str, Any]] | None = None
    balance_changes: list[BalanceChange] | None = None
    timestamp_ms: int | None = None
    checkpoint: int | None = None
    confirmed_local_execution: bool | None = None
    errors: list[str] = Field(default_factory=list)


class TransactionBytes(SuiModel):
    tx_bytes: str
    gas: list[SuiObjectRef] | SuiObjectRef
    input_objects: list[Any] = Field(default_factory=list)


class DevInspectResults(SuiModel):
    effects: TransactionEffects
    events: list[Event] = Field(default_factory=list)
    results: list[Any] | None = None
    error: str | None = None


class DryRunTransactionResponse(SuiModel):
    effects: TransactionEffects
    events: list[Event] = Field(default_factory=list)
    object_changes: list[dict[str, Any]] = Field(default_factory=list)
    balance_changes: list[BalanceChange] = Field(default_factory=list)
    input: Any = None


class TransactionsPage(SuiModel):
    data: list[str] = Field(default_factory=list)
    next_cursor: str | None = None


class TransactionNumber(SuiModel):
    """Body of ``sui_getTotalTransactionNumber``."""
    value: int = Field(alias="result")


class TransactionDigests(SuiModel):
    """Body of ``sui_getTransactionsInRange``."""
    value: list[TransactionDigest] = Field(alias="result")


class GasPrice(SuiModel):
    """Body of ``sui_getReferenceGasPrice``."""
    value: int = Field(alias="result")
