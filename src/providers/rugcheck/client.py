"""Rugcheck.xyz API client: free authority/holder facts for Solana tokens."""

from src.providers.http import JsonApiClient
from src.providers.rugcheck.models import LedgerAuthorityReport

BASE_URL = "https://api.rugcheck.xyz/v1"


class RugcheckClient(JsonApiClient):
    """Async HTTP client for Rugcheck.xyz (free, no API key)."""

    tag = "RUGCHECK"

    def __init__(self, **kwargs) -> None:
        super().__init__(base_url=BASE_URL, **kwargs)

    async def get_authority_report(self, mint: str) -> LedgerAuthorityReport | None:
        """Fetch the full token report from Rugcheck.

        Returns None if token not found or API error.
        """
        data = await self._get_json(f"/tokens/{mint}/report")
        if not isinstance(data, dict) or not data:
            return None
        return _parse_report(data, mint)


def _parse_report(data: dict, mint: str) -> LedgerAuthorityReport:
    """Parse raw JSON into LedgerAuthorityReport.

    Authorities appear at the top level of the report and again under `token`;
    the top-level value wins when both are present.
    """
    token = data.get("token") or {}
    token_meta = data.get("tokenMeta") or {}

    mint_authority = data["mintAuthority"] if "mintAuthority" in data else token.get("mintAuthority")
    freeze_authority = (
        data["freezeAuthority"] if "freezeAuthority" in data else token.get("freezeAuthority")
    )

    holders = data.get("totalHolders")
    verification = data.get("verification")

    return LedgerAuthorityReport(
        mint=mint,
        mint_authority=mint_authority or None,
        freeze_authority=freeze_authority or None,
        holder_count=int(holders) if isinstance(holders, (int, float)) else None,
        verified=bool(verification) if verification is not None else None,
        token_name=token_meta.get("name") or None,
        token_symbol=token_meta.get("symbol") or None,
    )
