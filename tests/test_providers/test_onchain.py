"""Tests for ERC-20 name()/symbol() reads."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.providers.onchain.erc20 import Erc20MetadataReader, OnchainMetadata

TOKEN = "0x1234567890abcdef1234567890abcdef12345678"


def _web3_with(name_result, symbol_result) -> MagicMock:
    contract = MagicMock()
    for fn_name, result in (("name", name_result), ("symbol", symbol_result)):
        call = AsyncMock(side_effect=result) if isinstance(result, Exception) else AsyncMock(return_value=result)
        setattr(contract.functions, fn_name, MagicMock(return_value=MagicMock(call=call)))
    w3 = MagicMock()
    w3.eth.contract.return_value = contract
    return w3


class TestErc20MetadataReader:
    @pytest.mark.asyncio
    async def test_reads_and_strips(self) -> None:
        reader = Erc20MetadataReader({"Ethereum": "http://rpc.local"}, timeout=1.0)
        reader._clients["Ethereum"] = _web3_with(" Test Token ", "TKN")

        meta = await reader.read_metadata("Ethereum", TOKEN)

        assert meta == OnchainMetadata(name="Test Token", symbol="TKN")

    @pytest.mark.asyncio
    async def test_rpc_failure_is_none(self) -> None:
        reader = Erc20MetadataReader({"Ethereum": "http://rpc.local"}, timeout=1.0)
        reader._clients["Ethereum"] = _web3_with(ValueError("execution reverted"), "TKN")

        assert await reader.read_metadata("Ethereum", TOKEN) is None

    @pytest.mark.asyncio
    async def test_non_string_results_are_none(self) -> None:
        reader = Erc20MetadataReader({"Ethereum": "http://rpc.local"}, timeout=1.0)
        reader._clients["Ethereum"] = _web3_with(b"\x00" * 32, "")

        assert await reader.read_metadata("Ethereum", TOKEN) is None

    @pytest.mark.asyncio
    async def test_unconfigured_chain(self) -> None:
        reader = Erc20MetadataReader({"Ethereum": ""})
        assert await reader.read_metadata("Ethereum", TOKEN) is None
        assert await reader.read_metadata("Polygon", TOKEN) is None
