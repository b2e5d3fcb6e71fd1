"""Query a devnet balance and the SUI coin metadata."""

from __future__ import annotations

import asyncio
import sys

from loguru import logger

from suirpc import Endpoint, SuiRpcError, create_sui_http_client
from suirpc.models import SuiAddress
from suirpc.utils import configure_logging

ADDRESS = "0x3b1db4d4ea331281835e2b450312f82fc4ab880a"


async def main(address: str) -> int:
    configure_logging(verbose="-v" in sys.argv)
    async with create_sui_http_client(
        endpoint=Endpoint.DEVNET,
        agent_name="suirpc-sample/0.1.0",
        max_retries=10,
    ) as client:
        try:
            balance = await client.get_balance(SuiAddress(address))
            metadata = await client.get_coin_metadata("0x2::sui::SUI")
        except SuiRpcError as e:
            logger.error(f"Query failed: {e}")
            return 1
    print(f"Balance: {balance.total_balance} {metadata.symbol} ({balance.coin_object_count} coins)")
    print(f"Coin metadata: {metadata.model_dump()}")
    return 0


if __name__ == "__main__":
    args = [a for a in sys.argv[1:] if a != "-v"]
    raise SystemExit(asyncio.run(main(args[0] if args else ADDRESS)))
