"""Unit tests for market sources and the Solana RPC client."""

import pytest
from unittest.mock import AsyncMock, patch

from lendcurves.core.exceptions import RpcError
from lendcurves.data.sources.snapshot import SnapshotSource
from lendcurves.data.sources.solana_rpc import SolanaRpcClient


class TestSnapshotParsing:
    """Tests for SnapshotSource.parse_snapshot."""

    def test_wrapped(self):
        reserves = SnapshotSource.parse_snapshot({"reserves": {"abc": {"x": 1}}})
        assert reserves == {"abc": {"x": 1}}

    def test_bare_mapping(self):
        assert SnapshotSource.parse_snapshot({"abc": {"x": 1}}) == {"abc": {"x": 1}}

    def test_drops_non_object_entries(self):
        reserves = SnapshotSource.parse_snapshot({"reserves": {"abc": {"x": 1}, "bad": 3}})
        assert list(reserves) == ["abc"]

    @pytest.mark.parametrize("payload", [[], "text", {"reserves": [1, 2]}])
    def test_malformed(self, payload):
        with pytest.raises(ValueError):
            SnapshotSource.parse_snapshot(payload)


class TestSnapshotSource:
    """Tests for SnapshotSource loading."""

    @pytest.fixture
    def source(self, mock_settings):
        return SnapshotSource("https://snapshot.test/reserves", mock_settings)

    @pytest.mark.asyncio
    async def test_load_and_lookup(self, source):
        payload = {"reserves": {"mint1": {"totalSupply": "1"}}}
        with patch.object(source, "_fetch_json", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = payload
            await source.load()

        assert await source.get_reserve("mint1") == {"totalSupply": "1"}
        assert await source.get_reserve("missing") is None

    @pytest.mark.asyncio
    async def test_load_propagates_transport_errors(self, source):
        with patch.object(source, "_fetch_json", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.side_effect = ConnectionError("down")
            with pytest.raises(ConnectionError):
                await source.load()

    @pytest.mark.asyncio
    async def test_close(self, source):
        await source.close()


class TestSolanaRpcClient:
    """Tests for SolanaRpcClient."""

    @pytest.fixture
    def client(self, mock_settings):
        return SolanaRpcClient(mock_settings)

    @pytest.mark.asyncio
    async def test_get_slot(self, client):
        with patch.object(client, "_post_json", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = {"jsonrpc": "2.0", "id": 1, "result": 345678}
            slot = await client.get_slot()

        assert slot == 345678
        payload = mock_post.call_args[0][0]
        assert payload["method"] == "getSlot"
        assert payload["params"] == [{"commitment": "confirmed"}]

    @pytest.mark.asyncio
    async def test_request_ids_increment(self, client):
        with patch.object(client, "_post_json", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = {"result": 1}
            await client.rpc_call("getSlot")
            await client.rpc_call("getSlot")

        ids = [call[0][0]["id"] for call in mock_post.call_args_list]
        assert ids == [1, 2]

    @pytest.mark.asyncio
    async def test_rpc_error(self, client):
        with patch.object(client, "_post_json", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = {"error": {"code": -32005, "message": "Node is behind"}}
            with pytest.raises(RpcError):
                await client.get_slot()
