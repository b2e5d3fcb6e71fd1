"""Sui value types exchanged with a full node."""

from suirpc.models.base import (
    CheckpointDigest,
    Digest,
    Gas,
    ObjectID,
    SuiAddress,
    SuiModel,
    TransactionDigest,
    TypeTag,
)
from suirpc.models.checkpoint import (
    Checkpoint,
    CheckpointId,
    CheckpointSequenceNumber,
    CheckpointSummary,
    GasCostSummary,
)
from suirpc.models.coin import SUI_COIN_TYPE, Balance, SuiCoinMetadata, Supply
from suirpc.models.governance import (
    SuiCommittee,
    SuiSystemStateSummary,
    SuiValidatorSummary,
    Validators,
)
from suirpc.models.objects import SuiObjectData, SuiObjectInfo, SuiObjectResult
from suirpc.models.transaction import (
    BalanceChange,
    CoinBalanceChangeEvent,
    DevInspectResults,
    DryRunTransactionResponse,
    Event,
    EventID,
    ExecuteTransactionRequestType,
    ExecutionStatus,
    GasPrice,
    GenericEvent,
    MoveCallRequestParams,
    MoveEvent,
    MutatedObject,
    MutatedObjectShared,
    MutateObject,
    OwnedObjectRef,
    RPCTransactionRequestParams,
    SuiJsonValue,
    SuiObjectRef,
    SuiTransactionBuilderMode,
    TransactionBlockResponse,
    TransactionBlockResponseOptions,
    TransactionBytes,
    TransactionDigests,
    TransactionEffects,
    TransactionNumber,
    TransactionQuery,
    TransactionsPage,
    TransferObjectRequestParams,
)

__all__ = [
    "Balance",
    "BalanceChange",
    "Checkpoint",
    "CheckpointDigest",
    "CheckpointId",
    "CheckpointSequenceNumber",
    "CheckpointSummary",
    "CoinBalanceChangeEvent",
    "DevInspectResults",
    "Digest",
    "DryRunTransactionResponse",
    "Event",
    "EventID",
    "ExecuteTransactionRequestType",
    "ExecutionStatus",
    "Gas",
    "GasCostSummary",
    "GasPrice",
    "GenericEvent",
    "MoveCallRequestParams",
    "MoveEvent",
    "MutatedObject",
    "MutatedObjectShared",
    "MutateObject",
    "ObjectID",
    "OwnedObjectRef",
    "RPCTransactionRequestParams",
    "SUI_COIN_TYPE",
    "SuiAddress",
    "SuiCoinMetadata",
    "SuiCommittee",
    "SuiJsonValue",
    "SuiModel",
    "SuiObjectData",
    "SuiObjectInfo",
    "SuiObjectRef",
    "SuiObjectResult",
    "SuiSystemStateSummary",
    "SuiTransactionBuilderMode",
    "SuiValidatorSummary",
    "Supply",
    "TransactionBlockResponse",
    "TransactionBlockResponseOptions",
    "TransactionBytes",
    "TransactionDigest",
    "TransactionDigests",
    "TransactionEffects",
    "TransactionNumber",
    "TransactionQuery",
    "TransactionsPage",
    "TransferObjectRequestParams",
    "TypeTag",
    "Validators",
]
