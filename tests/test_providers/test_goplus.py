"""Tests for GoPlus Security API client."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.providers.goplus.client import GoPlusClient, _parse_bool, _parse_report, _parse_tax

TOKEN = "0x1234567890abcdef1234567890abcdef12345678"


def _response(payload: dict, status: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload
    return resp


def _client_returning(*responses: MagicMock) -> GoPlusClient:
    client = GoPlusClient(max_rps=0, base_delay=0)
    client._client = AsyncMock()
    client._client.get = AsyncMock(side_effect=list(responses))
    return client


class TestParsers:
    def test_parse_bool(self) -> None:
        assert _parse_bool("1") is True
        assert _parse_bool("0") is False
        assert _parse_bool(None) is None
        assert _parse_bool("") is None

    def test_parse_tax(self) -> None:
        assert _parse_tax("0.05") == 5.0  # 5%
        assert _parse_tax("0") == 0.0
        assert _parse_tax(None) is None
        assert _parse_tax("n/a") is None

    def test_parse_report_matches_lowercased_key(self) -> None:
        checksummed = "0x1234567890ABCDEF1234567890abcdef12345678"
        report = _parse_report({TOKEN: {"is_honeypot": "0", "holder_count": "42"}}, checksummed)
        assert report is not None
        assert report.holder_count == 42
        assert report.token_address == TOKEN

    def test_parse_report_missing_address(self) -> None:
        assert _parse_report({"0xother": {}}, TOKEN) is None


class TestGoPlusClient:
    @pytest.mark.asyncio
    async def test_honeypot_detection(self) -> None:
        client = _client_returning(
            _response({
                "code": 1,
                "result": {
                    TOKEN: {
                        "is_honeypot": "1",
                        "is_open_source": "0",
                        "is_proxy": "0",
                        "is_mintable": "1",
                        "buy_tax": "0",
                        "sell_tax": "1.0",
                        "holder_count": "50",
                        "token_name": "Trap",
                        "token_symbol": "TRAP",
                    }
                },
            })
        )

        report = await client.get_token_security("Ethereum", TOKEN)

        assert report is not None
        assert report.is_honeypot is True
        assert report.is_mintable is True
        assert report.sell_tax == 100.0
        assert report.token_symbol == "TRAP"

    @pytest.mark.asyncio
    async def test_uses_numeric_chain_id(self) -> None:
        client = _client_returning(_response({"code": 1, "result": {}}))

        await client.get_token_security("BSC", TOKEN)

        path = client._client.get.call_args.args[0]
        params = client._client.get.call_args.kwargs["params"]
        assert path == "/token_security/56"
        assert params == {"contract_addresses": TOKEN}

    @pytest.mark.asyncio
    async def test_empty_result_is_none(self) -> None:
        client = _client_returning(_response({"code": 1, "result": {}}))
        assert await client.get_token_security("Ethereum", TOKEN) is None

    @pytest.mark.asyncio
    async def test_has_token(self) -> None:
        client = _client_returning(
            _response({"code": 1, "result": {TOKEN: {"is_honeypot": "0"}}}),
            _response({"code": 1, "result": {}}),
        )
        assert await client.has_token("Ethereum", TOKEN) is True
        assert await client.has_token("Base", TOKEN) is False

    @pytest.mark.asyncio
    async def test_api_error_is_none(self) -> None:
        client = _client_returning(_response({}, status=404))
        assert await client.get_token_security("Ethereum", TOKEN) is None
