"""Concurrent calls through one SuiHttpClient."""

import asyncio
import json

import httpx
import pytest

from conftest import make_config, ok
from suirpc.client import SuiHttpClient
from suirpc.models import SuiAddress


class SlowNode:
    """Async handler answering each getBalance with the owner it was asked about."""

    def __init__(self):
        self.release = asyncio.Event()
        self.hold_owner: str | None = None
        self.seen: list[str] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        owner = body["params"][0]
        self.seen.append(owner)
        if owner == self.hold_owner:
            await self.release.wait()
        return httpx.Response(
            200,
            json=ok({"coinType": body["params"][1], "totalBalance": str(len(owner))}),
        )


@pytest.mark.asyncio
async def test_concurrent_calls_get_their_own_results():
    node = SlowNode()
    client = SuiHttpClient(make_config(node))
    owners = [f"0x{'a' * n}" for n in range(1, 9)]

    balances = await asyncio.gather(*(client.get_balance(SuiAddress(o)) for o in owners))

    assert [b.total_balance for b in balances] == [len(o) for o in owners]
    assert sorted(node.seen) == sorted(owners)


@pytest.mark.asyncio
async def test_cancelling_one_call_leaves_siblings_running():
    node = SlowNode()
    node.hold_owner = "0xstuck"
    client = SuiHttpClient(make_config(node))

    stuck = asyncio.create_task(client.get_balance(SuiAddress("0xstuck")))
    siblings = [asyncio.create_task(client.get_balance(SuiAddress(o))) for o in ("0x1", "0x22")]
    while "0xstuck" not in node.seen:
        await asyncio.sleep(0)

    stuck.cancel()
    results = await asyncio.gather(*siblings)

    with pytest.raises(asyncio.CancelledError):
        await stuck
    assert [b.total_balance for b in results] == [3, 4]

    # The client stays usable after a cancelled call.
    again = await client.get_balance(SuiAddress("0x333"))
    assert again.total_balance == 5
