"""Token and pair age from an ordered fallback chain of sources.

Each resolver is a pure function of (address, bundle, now) returning a TokenAge
or None; the first non-None result wins. An unknown age stays unknown and is
never guessed.
"""

from collections.abc import Callable
from datetime import UTC, datetime, time

from src.analyzer.models import UNKNOWN_AGE, EvidenceBundle, TokenAge
from src.analyzer.registry import lookup_known

# Nothing we analyze can predate the first smart-contract chain going live
EARLIEST_PLAUSIBLE = datetime(2015, 7, 30, tzinfo=UTC)

SOURCE_ALLOW_LIST = "allow-list"
SOURCE_PAIR_CREATION = "pair-creation"
SOURCE_EXPLORER_CREATION = "explorer-creation"

AgeResolver = Callable[[str, EvidenceBundle, datetime], TokenAge | None]


def age_since(timestamp: datetime | None, now: datetime, source: str) -> TokenAge | None:
    """Floor to whole days/hours. Future or implausible timestamps yield None."""
    if timestamp is None:
        return None
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    if timestamp > now or timestamp < EARLIEST_PLAUSIBLE:
        return None
    seconds = (now - timestamp).total_seconds()
    return TokenAge(days=int(seconds // 86400), hours=int(seconds // 3600), source=source)


def curated_age(address: str, now: datetime) -> TokenAge | None:
    """Age from the allow-list launch date, treated as ground truth."""
    known = lookup_known(address)
    if known is None:
        return None
    launched = datetime.combine(known.launched, time.min, tzinfo=UTC)
    return age_since(launched, now, SOURCE_ALLOW_LIST)


def _from_allow_list(address: str, bundle: EvidenceBundle, now: datetime) -> TokenAge | None:
    return curated_age(address, now)


def _from_pair_creation(address: str, bundle: EvidenceBundle, now: datetime) -> TokenAge | None:
    # A token is at least as old as its first pool
    if bundle.liquidity is None:
        return None
    return age_since(bundle.liquidity.oldest_pair_created_at, now, SOURCE_PAIR_CREATION)


def _from_explorer_creation(address: str, bundle: EvidenceBundle, now: datetime) -> TokenAge | None:
    # creation_timestamp is only populated when the creation-block lookup succeeded
    if bundle.explorer is None:
        return None
    return age_since(bundle.explorer.creation_timestamp, now, SOURCE_EXPLORER_CREATION)


TOKEN_AGE_RESOLVERS: tuple[AgeResolver, ...] = (
    _from_allow_list,
    _from_pair_creation,
    _from_explorer_creation,
)


def resolve_token_age(address: str, bundle: EvidenceBundle, now: datetime) -> TokenAge:
    for resolver in TOKEN_AGE_RESOLVERS:
        age = resolver(address, bundle, now)
        if age is not None:
            return age
    return UNKNOWN_AGE


def resolve_pair_age(bundle: EvidenceBundle, now: datetime) -> TokenAge:
    """Age of the primary (most liquid) pool. Indexer is the only source."""
    if bundle.liquidity is None:
        return UNKNOWN_AGE
    pair = bundle.liquidity.primary_pair
    if pair is None:
        return UNKNOWN_AGE
    return age_since(pair.created_at, now, SOURCE_PAIR_CREATION) or UNKNOWN_AGE
