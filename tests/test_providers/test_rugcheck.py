"""Tests for Rugcheck.xyz client and authority model."""

from unittest.mock import AsyncMock, patch

import pytest

from src.providers.rugcheck.client import RugcheckClient, _parse_report
from src.providers.rugcheck.models import LedgerAuthorityReport

MINT = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"
SYSTEM_PROGRAM = "11111111111111111111111111111111"


def test_top_level_authority_wins():
    data = {
        "mintAuthority": None,
        "freezeAuthority": "FreezeAuth1111111111111111111111111111111",
        "token": {"mintAuthority": "StaleMintAuth11111111111111111111111111111"},
        "totalHolders": 321,
        "verification": {"jup_verified": True},
        "tokenMeta": {"name": "Sol Test", "symbol": "SOLT"},
    }
    report = _parse_report(data, MINT)

    assert report.mint_authority is None
    assert report.has_mint_authority is False
    assert report.has_freeze_authority is True
    assert report.holder_count == 321
    assert report.verified is True
    assert report.token_symbol == "SOLT"


def test_falls_back_to_token_block():
    report = _parse_report({"token": {"mintAuthority": "MintAuth1111111111111111111111111111111111"}}, MINT)
    assert report.has_mint_authority is True
    assert report.verified is None


def test_system_program_counts_as_revoked():
    report = LedgerAuthorityReport(mint=MINT, mint_authority=SYSTEM_PROGRAM, freeze_authority="")
    assert report.has_mint_authority is False
    assert report.has_freeze_authority is False


@pytest.mark.asyncio
async def test_client_returns_report():
    client = RugcheckClient(max_rps=100)
    mock_resp = AsyncMock()
    mock_resp.status_code = 200
    mock_resp.json = lambda: {"mintAuthority": None, "freezeAuthority": None, "totalHolders": 10}
    with patch.object(client, "_client") as mock_http:
        mock_http.get = AsyncMock(return_value=mock_resp)
        report = await client.get_authority_report(MINT)

    assert report is not None
    assert report.mint == MINT
    assert report.holder_count == 10
    mock_http.get.assert_awaited_once()
    assert mock_http.get.call_args.args[0] == f"/tokens/{MINT}/report"


@pytest.mark.asyncio
async def test_client_not_found():
    client = RugcheckClient(max_rps=100)
    mock_resp = AsyncMock()
    mock_resp.status_code = 404
    with patch.object(client, "_client") as mock_http:
        mock_http.get = AsyncMock(return_value=mock_resp)
        assert await client.get_authority_report(MINT) is None
