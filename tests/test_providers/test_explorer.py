"""Tests for the Etherscan V2 explorer client."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.providers.explorer.client import ExplorerClient, _parse_int

TOKEN = "0x1234567890abcdef1234567890abcdef12345678"


def _response(payload: dict) -> MagicMock:
    resp = MagicMock()
    resp.status_code = 200
    resp.json.return_value = payload
    return resp


SOURCE_OK = {
    "status": "1",
    "message": "OK",
    "result": [{
        "SourceCode": "pragma solidity ^0.8.0; contract T {}",
        "ContractName": "TestToken",
        "Proxy": "1",
        "Implementation": "0x00000000000000000000000000000000000000aa",
    }],
}
CREATION_OK = {
    "status": "1",
    "message": "OK",
    "result": [{"contractCreator": "0xcreator", "txHash": "0xtx", "blockNumber": "18000000"}],
}
BLOCK_OK = {"status": "1", "message": "OK", "result": {"blockNumber": "18000000", "timeStamp": "1693526400"}}


def _client(*responses: MagicMock, api_key: str = "key") -> ExplorerClient:
    client = ExplorerClient(api_key, max_rps=0)
    client._client = AsyncMock()
    client._client.get = AsyncMock(side_effect=list(responses))
    return client


class TestParseInt:
    def test_decimal_and_hex(self) -> None:
        assert _parse_int("18000000") == 18_000_000
        assert _parse_int("0x10") == 16
        assert _parse_int("") is None
        assert _parse_int("abc") is None


class TestExplorerClient:
    @pytest.mark.asyncio
    async def test_full_report(self) -> None:
        client = _client(_response(SOURCE_OK), _response(CREATION_OK), _response(BLOCK_OK))

        report = await client.get_contract_report("Base", TOKEN)

        assert report is not None
        assert report.verified is True
        assert report.is_proxy is True
        assert report.implementation == "0x00000000000000000000000000000000000000aa"
        assert report.creator == "0xcreator"
        assert report.creation_block == 18_000_000
        assert report.creation_timestamp == datetime.fromtimestamp(1693526400, tz=UTC)
        first_params = client._client.get.call_args_list[0].kwargs["params"]
        assert first_params["chainid"] == 8453
        assert first_params["action"] == "getsourcecode"

    @pytest.mark.asyncio
    async def test_unverified_source(self) -> None:
        unverified = {"status": "1", "result": [{"SourceCode": "", "ContractName": "", "Proxy": "0"}]}
        client = _client(_response(unverified), _response(CREATION_OK), _response(BLOCK_OK))

        report = await client.get_contract_report("Ethereum", TOKEN)

        assert report is not None
        assert report.verified is False
        assert report.is_proxy is False

    @pytest.mark.asyncio
    async def test_failed_block_lookup_leaves_timestamp_empty(self) -> None:
        block_error = {"status": "0", "message": "NOTOK", "result": "Error! Invalid block"}
        client = _client(_response(SOURCE_OK), _response(CREATION_OK), _response(block_error))

        report = await client.get_contract_report("Ethereum", TOKEN)

        assert report is not None
        assert report.creation_block == 18_000_000
        assert report.creation_timestamp is None

    @pytest.mark.asyncio
    async def test_out_of_range_block_timestamp_keeps_report(self) -> None:
        bad_block = {"status": "1", "message": "OK", "result": {"blockNumber": "18000000", "timeStamp": str(10**17)}}
        client = _client(_response(SOURCE_OK), _response(CREATION_OK), _response(bad_block))

        report = await client.get_contract_report("Ethereum", TOKEN)

        assert report is not None
        assert report.verified is True
        assert report.is_proxy is True
        assert report.creation_block == 18_000_000
        assert report.creation_timestamp is None

    @pytest.mark.asyncio
    async def test_error_status_is_none(self) -> None:
        client = _client(_response({"status": "0", "message": "NOTOK", "result": "Invalid API Key"}))
        assert await client.get_contract_report("Ethereum", TOKEN) is None

    @pytest.mark.asyncio
    async def test_no_api_key_skips_request(self) -> None:
        client = _client(api_key="")
        assert await client.get_contract_report("Ethereum", TOKEN) is None
        client._client.get.assert_not_called()
