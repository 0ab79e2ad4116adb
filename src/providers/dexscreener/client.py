from loguru import logger
from pydantic import ValidationError

from src.providers.dexscreener.models import DexScreenerPair, LiquidityReport
from src.providers.http import JsonApiClient

BASE_URL = "https://api.dexscreener.com"


class DexScreenerClient(JsonApiClient):
    """Async REST client for DexScreener public API (no auth required)."""

    tag = "DEXSCREENER"

    def __init__(self, **kwargs) -> None:
        super().__init__(base_url=BASE_URL, **kwargs)

    async def get_token_pairs(self, token_address: str) -> LiquidityReport | None:
        """All pairs trading this token, on any chain. None if there are none."""
        data = await self._get_json(f"/latest/dex/tokens/{token_address}")
        pairs = _parse_pairs(data)
        # The tokens endpoint also matches pair addresses; keep only pairs with the token as a leg
        pairs = [p for p in pairs if p.references_token(token_address)]
        if not pairs:
            return None
        return LiquidityReport(token_address=token_address, pairs=pairs)

    async def search_pairs(self, address: str) -> list[DexScreenerPair]:
        """Pairs whose pair or leg address matches `address` (pair/token disambiguation)."""
        data = await self._get_json("/latest/dex/search", params={"q": address})
        return _parse_pairs(data)


def _parse_pairs(data: object) -> list[DexScreenerPair]:
    if isinstance(data, list):
        raw = data
    elif isinstance(data, dict):
        raw = data.get("pairs") or data.get("pair") or []
        if not isinstance(raw, list):
            raw = [raw]
    else:
        return []

    pairs = []
    for item in raw:
        try:
            pairs.append(DexScreenerPair.model_validate(item))
        except ValidationError as e:
            logger.debug(f"[DEXSCREENER] Skipping malformed pair: {e.error_count()} errors")
    return pairs
