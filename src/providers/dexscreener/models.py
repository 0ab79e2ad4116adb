from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel


class DexScreenerToken(BaseModel):
    address: str
    name: str | None = None
    symbol: str | None = None

    model_config = {"extra": "ignore"}


class DexScreenerVolume(BaseModel):
    m5: Decimal | None = None
    h1: Decimal | None = None
    h6: Decimal | None = None
    h24: Decimal | None = None

    model_config = {"extra": "ignore"}


class DexScreenerLiquidity(BaseModel):
    usd: Decimal | None = None
    base: Decimal | None = None
    quote: Decimal | None = None

    model_config = {"extra": "ignore"}


class DexScreenerPair(BaseModel):
    chainId: str = ""
    dexId: str = ""
    pairAddress: str = ""
    baseToken: DexScreenerToken | None = None
    quoteToken: DexScreenerToken | None = None
    priceUsd: str | None = None
    volume: DexScreenerVolume | None = None
    liquidity: DexScreenerLiquidity | None = None
    fdv: Decimal | None = None
    pairCreatedAt: int | None = None  # unix ms

    model_config = {"extra": "ignore"}

    @property
    def liquidity_usd(self) -> float | None:
        if self.liquidity is None or self.liquidity.usd is None:
            return None
        return float(self.liquidity.usd)

    @property
    def volume_24h(self) -> float | None:
        if self.volume is None or self.volume.h24 is None:
            return None
        return float(self.volume.h24)

    @property
    def created_at(self) -> datetime | None:
        if not self.pairCreatedAt or self.pairCreatedAt <= 0:
            return None
        try:
            return datetime.fromtimestamp(self.pairCreatedAt / 1000, tz=UTC)
        except (ValueError, OverflowError, OSError):
            # Out-of-range value from the indexer: the creation time is unknown
            return None

    def references_token(self, address: str) -> bool:
        normalized = address.lower()
        return any(
            leg is not None and leg.address.lower() == normalized
            for leg in (self.baseToken, self.quoteToken)
        )


class LiquidityReport(BaseModel):
    """All known pairs for one token, as returned by the liquidity indexer."""

    token_address: str
    pairs: list[DexScreenerPair]

    @property
    def primary_pair(self) -> DexScreenerPair | None:
        """Most liquid pair; pairs without a liquidity figure rank last."""
        if not self.pairs:
            return None
        return max(self.pairs, key=lambda p: p.liquidity_usd or 0.0)

    @property
    def liquidity_usd(self) -> float | None:
        pair = self.primary_pair
        return pair.liquidity_usd if pair is not None else None

    @property
    def oldest_pair_created_at(self) -> datetime | None:
        stamps = [p.created_at for p in self.pairs if p.created_at is not None]
        return min(stamps) if stamps else None

    def for_chain(self, dexscreener_id: str | None) -> "LiquidityReport":
        """Restrict to one chain when it has pairs (same address can exist on several chains)."""
        if not dexscreener_id:
            return self
        matching = [p for p in self.pairs if p.chainId == dexscreener_id]
        if not matching:
            return self
        return LiquidityReport(token_address=self.token_address, pairs=matching)
