"""Typed wrapper around the Sui JSON-RPC API of a full node."""

from __future__ import annotations

from typing import Any, NoReturn

from loguru import logger

from suirpc.client.decoding import RpcResult, decode_plain, decode_result
from suirpc.client.encoding import (
    BoolParam,
    IntParam,
    JsonParam,
    ModelParam,
    Param,
    StrParam,
    encode_request,
)
from suirpc.client.transport import RpcTransport
from suirpc.config.schema import ClientConfig
from suirpc.models import (
    SUI_COIN_TYPE,
    Balance,
    Checkpoint,
    CheckpointDigest,
    CheckpointId,
    CheckpointSequenceNumber,
    CheckpointSummary,
    DevInspectResults,
    DryRunTransactionResponse,
    ExecuteTransactionRequestType,
    Gas,
    GasPrice,
    ObjectID,
    RPCTransactionRequestParams,
    SuiAddress,
    SuiCoinMetadata,
    SuiCommittee,
    SuiJsonValue,
    SuiObjectInfo,
    SuiObjectResult,
    SuiSystemStateSummary,
    SuiTransactionBuilderMode,
    Supply,
    TransactionBlockResponse,
    TransactionBlockResponseOptions,
    TransactionBytes,
    TransactionDigest,
    TransactionDigests,
    TransactionNumber,
    TransactionQuery,
    TransactionsPage,
    TypeTag,
    Validators,
)
from suirpc.utils.exceptions import UnsupportedMethodError


class SuiHttpClient:
    """
    One coroutine per Sui RPC method.

    Every method builds its positional params in the order the node expects,
    posts them through ``_call`` and decodes with the shared decoder. Optional
    arguments left as ``None`` are dropped from the params list rather than
    sent as ``null``.
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self.config.get_http_client()
        self._transport = RpcTransport(self.config)

    async def __aenter__(self) -> "SuiHttpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client when this library created it."""
        await self.config.aclose()

    async def _call(self, method: str, *params: Param) -> bytes:
        """Encode, POST and return the body of a 2xx response."""
        url = self.config.base_url
        logger.debug(f"RPC call {method} -> {url} ({len(params)} params)")
        return await self._transport.send(url, encode_request(method, params))

    @staticmethod
    def _unsupported(method: str) -> NoReturn:
        raise UnsupportedMethodError(method)

    async def is_sui_available(self) -> bool:
        """
        Ping the configured node.

        Returns:
            True when the node answers with a 2xx status; other statuses raise
            TransportError like every other call.
        """
        await self._call("isSuiAvailable")
        return True

    async def batch_transaction(
        self,
        signer: SuiAddress,
        single_transaction_params: list[RPCTransactionRequestParams],
        gas_budget: int,
        gas: Gas | None = None,
        txn_builder_mode: SuiTransactionBuilderMode = SuiTransactionBuilderMode.REGULAR,
    ) -> TransactionBytes:
        """
        Create an unsigned batched transaction.

        Args:
            signer: transaction signer's address
            single_transaction_params: transaction request parameters
            gas_budget: the transaction fails if gas cost exceeds this budget
            gas: gas coin; the node picks one owned by the signer when omitted
            txn_builder_mode: regular commit or dev-inspect
        """
        params: list[Param] = [
            StrParam(signer.pub_key),
            ModelParam(single_transaction_params, list[RPCTransactionRequestParams]),
        ]
        if gas is not None:
            params.append(ModelParam(gas))
        params += [IntParam(gas_budget), StrParam(txn_builder_mode.value)]
        body = await self._call("sui_batchTransaction", *params)
        return decode_plain(body, RpcResult[TransactionBytes]).value

    async def dev_inspect_transaction(
        self,
        sender_address: SuiAddress,
        tx_bytes: str,
        gas_price: int = 0,
        epoch: int | None = None,
    ) -> DevInspectResults:
        params: list[Param] = [StrParam(sender_address.pub_key), StrParam(tx_bytes), IntParam(gas_price)]
        if epoch is not None:
            params.append(IntParam(epoch))
        body = await self._call("sui_devInspectTransaction", *params)
        return decode_plain(body, RpcResult[DevInspectResults]).value

    async def dry_run_transaction(self, tx_bytes: str) -> DryRunTransactionResponse:
        body = await self._call("sui_dryRunTransaction", StrParam(tx_bytes))
        return decode_plain(body, RpcResult[DryRunTransactionResponse]).value

    async def execute_transaction(
        self,
        tx_bytes: str,
        signature: str,
        request_type: ExecuteTransactionRequestType,
    ) -> TransactionBlockResponse:
        body = await self._call(
            "sui_executeTransaction",
            StrParam(tx_bytes),
            StrParam(signature),
            ModelParam(request_type),
        )
        return decode_plain(body, RpcResult[TransactionBlockResponse]).value

    async def execute_transaction_serialized_sig(self) -> NoReturn:
        self._unsupported("sui_executeTransactionSerializedSig")

    async def get_all_balances(self, owner: SuiAddress) -> list[Balance]:
        """Return the total balance of every coin type owned by ``owner``."""
        body = await self._call("suix_getAllBalances", StrParam(owner.pub_key))
        return decode_result(body, list[Balance])

    async def get_balance(self, owner: SuiAddress, coin_type: str = SUI_COIN_TYPE) -> Balance:
        """
        Return the total balance of one coin type owned by ``owner``.

        Args:
            owner: the owner's address
            coin_type: coin type name, SUI when not given
        """
        body = await self._call("suix_getBalance", StrParam(owner.pub_key), StrParam(coin_type))
        return decode_result(body, Balance)

    async def get_all_coins(self) -> NoReturn:
        self._unsupported("suix_getAllCoins")

    async def get_checkpoint(self, checkpoint_id: CheckpointId) -> Checkpoint:
        body = await self._call("sui_getCheckpoint", StrParam(checkpoint_id.digest))
        return decode_result(body, Checkpoint)

    async def get_checkpoint_contents(self) -> NoReturn:
        self._unsupported("sui_getCheckpointContents")

    async def get_checkpoint_contents_by_digest(self) -> NoReturn:
        self._unsupported("sui_getCheckpointContentsByDigest")

    async def get_checkpoint_summary(self) -> NoReturn:
        self._unsupported("sui_getCheckpointSummary")

    async def get_checkpoint_summary_by_digest(self, digest: CheckpointDigest) -> CheckpointSummary:
        body = await self._call("sui_getCheckpointSummaryByDigest", ModelParam(digest))
        return decode_plain(body, RpcResult[CheckpointSummary]).value

    async def get_coin_metadata(self, coin_type: str) -> SuiCoinMetadata:
        """Return metadata (symbol, decimals, ...) for a coin type."""
        body = await self._call("suix_getCoinMetadata", StrParam(coin_type))
        return decode_result(body, SuiCoinMetadata)

    async def get_coins(self) -> NoReturn:
        self._unsupported("suix_getCoins")

    async def get_committee_info(self, epoch: int | None = None) -> SuiCommittee:
        params: list[Param] = [] if epoch is None else [IntParam(epoch)]
        body = await self._call("suix_getCommitteeInfo", *params)
        return decode_result(body, SuiCommittee)

    async def get_delegated_stakes(self) -> NoReturn:
        self._unsupported("suix_getStakes")

    async def get_dynamic_field_object(self) -> NoReturn:
        self._unsupported("suix_getDynamicFieldObject")

    async def get_dynamic_fields(self) -> NoReturn:
        self._unsupported("suix_getDynamicFields")

    async def get_latest_sui_system_state(self) -> SuiSystemStateSummary:
        """Return the latest on-chain SUI system state object."""
        body = await self._call("suix_getLatestSuiSystemState")
        return decode_result(body, SuiSystemStateSummary)

    async def get_events(self) -> NoReturn:
        self._unsupported("sui_getEvents")

    async def get_latest_checkpoint_sequence_number(self) -> CheckpointSequenceNumber:
        """Return the sequence number of the latest executed checkpoint."""
        body = await self._call("sui_getLatestCheckpointSequenceNumber")
        return decode_plain(body, CheckpointSequenceNumber)

    async def get_move_function_arg_types(self) -> NoReturn:
        self._unsupported("sui_getMoveFunctionArgTypes")

    async def get_normalized_move_function(self) -> NoReturn:
        self._unsupported("sui_getNormalizedMoveFunction")

    async def get_normalized_move_module(self) -> NoReturn:
        self._unsupported("sui_getNormalizedMoveModule")

    async def get_normalized_move_modules_by_package(self) -> NoReturn:
        self._unsupported("sui_getNormalizedMoveModulesByPackage")

    async def get_normalized_move_struct(self) -> NoReturn:
        self._unsupported("sui_getNormalizedMoveStruct")

    async def get_object(self) -> NoReturn:
        self._unsupported("sui_getObject")

    async def get_objects_owned_by_address(self, address: SuiAddress) -> list[SuiObjectInfo]:
        """Return the objects owned by ``address``."""
        body = await self._call("sui_getObjectsOwnedByAddress", StrParam(address.pub_key))
        result = decode_plain(body, SuiObjectResult)
        return [SuiObjectInfo.from_data(item) for item in result.value]

    async def get_reference_gas_price(self) -> GasPrice:
        """Return the reference gas price for the network."""
        body = await self._call("sui_getReferenceGasPrice")
        return decode_plain(body, GasPrice)

    async def get_sui_system_state(self) -> NoReturn:
        self._unsupported("sui_getSuiSystemState")

    async def get_total_supply(self, coin_type: str) -> Supply:
        """
        Return the total supply of a coin type.

        Raises:
            ProtocolError: the node rejected the coin type.
        """
        body = await self._call("suix_getTotalSupply", StrParam(coin_type))
        return decode_result(body, Supply)

    async def get_total_transaction_number(self) -> int:
        """Return the total number of transactions known to the node."""
        body = await self._call("sui_getTotalTransactionNumber")
        return decode_plain(body, TransactionNumber).value

    async def get_transaction_block(
        self,
        digest: TransactionDigest,
        options: TransactionBlockResponseOptions,
    ) -> TransactionBlockResponse:
        body = await self._call("sui_getTransactionBlock", StrParam(digest.root), ModelParam(options))
        return decode_result(body, TransactionBlockResponse)

    async def get_transactions(
        self,
        query: TransactionQuery,
        cursor: TransactionDigest,
        limit: int,
        descending_order: bool = False,
    ) -> TransactionsPage:
        body = await self._call(
            "sui_getTransactions",
            ModelParam(query),
            ModelParam(cursor),
            IntParam(limit),
            BoolParam(descending_order),
        )
        return decode_plain(body, RpcResult[TransactionsPage]).value

    async def get_transactions_in_range(self, start: int, end: int) -> TransactionDigests:
        body = await self._call("sui_getTransactionsInRange", IntParam(start), IntParam(end))
        return decode_plain(body, TransactionDigests)

    async def get_validators(self) -> Validators:
        body = await self._call("sui_getValidators")
        return decode_plain(body, Validators)

    async def merge_coins(
        self,
        signer: SuiAddress,
        primary_coin: ObjectID,
        coin_to_merge: ObjectID,
        gas: Gas,
        gas_budget: int,
    ) -> TransactionBytes:
        body = await self._call(
            "sui_mergeCoins",
            ModelParam(signer),
            ModelParam(primary_coin),
            ModelParam(coin_to_merge),
            ModelParam(gas),
            IntParam(gas_budget),
        )
        return decode_plain(body, RpcResult[TransactionBytes]).value

    async def move_call(
        self,
        signer: SuiAddress,
        package_object_id: ObjectID,
        module: str,
        function: str,
        type_arguments: list[TypeTag],
        arguments: list[SuiJsonValue],
        gas: Gas,
        gas_budget: int,
        execution_mode: SuiTransactionBuilderMode = SuiTransactionBuilderMode.REGULAR,
    ) -> TransactionBytes:
        body = await self._call(
            "sui_moveCall",
            ModelParam(signer),
            ModelParam(package_object_id),
            StrParam(module),
            StrParam(function),
            ModelParam(type_arguments, list[TypeTag]),
            JsonParam(arguments),
            ModelParam(gas),
            IntParam(gas_budget),
            StrParam(execution_mode.value),
        )
        return decode_plain(body, RpcResult[TransactionBytes]).value

    async def multi_get_transactions(self) -> NoReturn:
        self._unsupported("sui_multiGetTransactions")

    async def pay(self) -> NoReturn:
        self._unsupported("sui_pay")

    async def pay_all_sui(self) -> NoReturn:
        self._unsupported("sui_payAllSui")

    async def pay_sui(self) -> NoReturn:
        self._unsupported("sui_paySui")

    async def publish(self) -> NoReturn:
        self._unsupported("sui_publish")

    async def request_add_delegation(self) -> NoReturn:
        self._unsupported("sui_requestAddDelegation")

    async def request_withdraw_delegation(self) -> NoReturn:
        self._unsupported("sui_requestWithdrawDelegation")

    async def split_coin(self) -> NoReturn:
        self._unsupported("sui_splitCoin")

    async def split_coin_equal(self) -> NoReturn:
        self._unsupported("sui_splitCoinEqual")

    async def submit_transaction(self) -> NoReturn:
        self._unsupported("sui_submitTransaction")

    async def subscribe_event(self) -> NoReturn:
        self._unsupported("sui_subscribeEvent")

    async def tbls_sign_randomness_object(self) -> NoReturn:
        self._unsupported("sui_tblsSignRandomnessObject")

    async def transfer_object(self) -> NoReturn:
        self._unsupported("sui_transferObject")

    async def transfer_sui(self) -> NoReturn:
        self._unsupported("sui_transferSui")

    async def try_get_past_object(self) -> NoReturn:
        self._unsupported("sui_tryGetPastObject")
