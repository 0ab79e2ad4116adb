"""Token name/symbol resolution through a strict priority chain.

on-chain read > allow-list > pair metadata > indexer/scanner metadata > placeholder.
Name and symbol are resolved independently, each taking the first usable value.
"""

from collections.abc import Callable, Iterator

from src.analyzer.models import EvidenceBundle, PairResolution, TokenIdentity
from src.analyzer.registry import lookup_known

PLACEHOLDER_NAME = "New Token"
PLACEHOLDER_SYMBOL = "NEW"

# Values providers return instead of leaving the field empty
SENTINELS = frozenset({"unknown", "unverified token", "unknown token"})

Labels = tuple[str | None, str | None]
NameSource = Callable[[str, EvidenceBundle, PairResolution | None], Labels | None]


def clean_label(value: str | None) -> str | None:
    if not value or not isinstance(value, str):
        return None
    value = value.strip()
    if not value or value.lower() in SENTINELS:
        return None
    return value


def _from_onchain(
    address: str, bundle: EvidenceBundle, resolution: PairResolution | None
) -> Labels | None:
    if bundle.onchain is None:
        return None
    return bundle.onchain.name, bundle.onchain.symbol


def _from_allow_list(
    address: str, bundle: EvidenceBundle, resolution: PairResolution | None
) -> Labels | None:
    known = lookup_known(address)
    if known is None:
        return None
    return known.name, known.symbol


def _from_pair_resolution(
    address: str, bundle: EvidenceBundle, resolution: PairResolution | None
) -> Labels | None:
    if resolution is None or not resolution.is_pair:
        return None
    return resolution.subject_name, resolution.subject_symbol


def _from_indexer(
    address: str, bundle: EvidenceBundle, resolution: PairResolution | None
) -> Labels | None:
    if bundle.liquidity is None:
        return None
    normalized = address.lower()
    for pair in bundle.liquidity.pairs:
        for leg in (pair.baseToken, pair.quoteToken):
            if leg is not None and leg.address.lower() == normalized:
                return leg.name, leg.symbol
    return None


def _from_scanner(
    address: str, bundle: EvidenceBundle, resolution: PairResolution | None
) -> Labels | None:
    if bundle.security is None:
        return None
    return bundle.security.token_name, bundle.security.token_symbol


def _from_ledger(
    address: str, bundle: EvidenceBundle, resolution: PairResolution | None
) -> Labels | None:
    if bundle.ledger is None:
        return None
    return bundle.ledger.token_name, bundle.ledger.token_symbol


NAME_SOURCES: tuple[NameSource, ...] = (
    _from_onchain,
    _from_allow_list,
    _from_pair_resolution,
    _from_indexer,
    _from_scanner,
    _from_ledger,
)


def _candidates(
    address: str, bundle: EvidenceBundle, resolution: PairResolution | None
) -> Iterator[Labels]:
    for source in NAME_SOURCES:
        found = source(address, bundle, resolution)
        if found is not None:
            yield clean_label(found[0]), clean_label(found[1])


def resolve_identity(
    address: str,
    chain: str,
    bundle: EvidenceBundle,
    resolution: PairResolution | None = None,
) -> TokenIdentity:
    name: str | None = None
    symbol: str | None = None
    for candidate_name, candidate_symbol in _candidates(address, bundle, resolution):
        name = name or candidate_name
        symbol = symbol or candidate_symbol
        if name and symbol:
            break

    return TokenIdentity(
        address=address,
        chain=chain,
        name=name or PLACEHOLDER_NAME,
        symbol=symbol or PLACEHOLDER_SYMBOL,
    )
