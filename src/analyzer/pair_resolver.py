"""Pair-vs-token disambiguation.

Users often paste a liquidity-pair contract instead of the token. Analyzing the
pair (or its WETH/USDC leg) would score the wrong contract, so the subject is
resolved once, before any other fetch, and the result flows everywhere.
"""

from typing import Protocol

from loguru import logger

from src.analyzer.chains import chain_from_dexscreener
from src.analyzer.models import PairResolution
from src.analyzer.registry import is_quote_asset_symbol
from src.providers.dexscreener.models import DexScreenerPair


class PairSearch(Protocol):
    async def search_pairs(self, address: str) -> list[DexScreenerPair]: ...


async def resolve_subject(address: str, indexer: PairSearch | None) -> PairResolution:
    """Resolve the token to analyze for a user-supplied address."""
    if indexer is None:
        return PairResolution(subject_address=address)
    try:
        pairs = await indexer.search_pairs(address)
    except Exception as e:
        logger.debug(f"[PAIR] Search failed for {address[:12]}: {e!r}")
        pairs = []
    return resolve_from_pairs(address, pairs)


def resolve_from_pairs(address: str, pairs: list[DexScreenerPair]) -> PairResolution:
    """Pure resolution step over indexer results.

    - input equals a pair address  -> pair reference, subject is a leg
    - input is a leg of some pair  -> direct token
    - nothing references the input -> direct token
    """
    normalized = address.lower()
    exact = [p for p in pairs if p.pairAddress and p.pairAddress.lower() == normalized]
    if not exact:
        return PairResolution(subject_address=address)

    pair = max(exact, key=lambda p: p.liquidity_usd or 0.0)
    base, quote = pair.baseToken, pair.quoteToken
    if base is None:
        return PairResolution(subject_address=address)

    subject = base
    # Only special case: the base leg itself is the quote asset (e.g. WETH/PEPE ordering)
    if (
        quote is not None
        and is_quote_asset_symbol(base.symbol)
        and not is_quote_asset_symbol(quote.symbol)
    ):
        subject = quote

    logger.info(
        f"[PAIR] {address[:12]} is a {base.symbol}/{quote.symbol if quote else '?'} pair "
        f"-> analyzing {subject.symbol} {subject.address[:12]}"
    )
    return PairResolution(
        subject_address=subject.address,
        is_pair=True,
        pair_address=pair.pairAddress,
        chain=chain_from_dexscreener(pair.chainId),
        subject_name=subject.name,
        subject_symbol=subject.symbol,
    )
