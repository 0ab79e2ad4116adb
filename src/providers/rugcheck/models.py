"""Pydantic models for Rugcheck.xyz API responses."""

from pydantic import BaseModel

# System program id: an authority set to it is effectively revoked
NO_AUTHORITY_SENTINELS = frozenset({"11111111111111111111111111111111"})


class LedgerAuthorityReport(BaseModel):
    """Mint/freeze authority facts for a Solana SPL token.

    mint_authority / freeze_authority are None when revoked.
    """

    mint: str
    mint_authority: str | None = None
    freeze_authority: str | None = None
    holder_count: int | None = None
    verified: bool | None = None
    token_name: str | None = None
    token_symbol: str | None = None

    @property
    def has_mint_authority(self) -> bool:
        return _is_live_authority(self.mint_authority)

    @property
    def has_freeze_authority(self) -> bool:
        return _is_live_authority(self.freeze_authority)


def _is_live_authority(value: str | None) -> bool:
    return bool(value) and value not in NO_AUTHORITY_SENTINELS
