"""Types flowing through the analysis pipeline.

Everything here is immutable: an analysis is built fresh per request from one
EvidenceBundle and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from src.providers.dexscreener.models import LiquidityReport
from src.providers.explorer.models import ExplorerReport
from src.providers.goplus.models import GoPlusTokenSecurity
from src.providers.onchain.erc20 import OnchainMetadata
from src.providers.rugcheck.models import LedgerAuthorityReport


class AddressKind(StrEnum):
    EVM = "EVM"
    LEDGER_B58 = "LEDGER_B58"
    INVALID = "INVALID"


class RiskLevel(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class ConfidenceLevel(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(frozen=True)
class TokenIdentity:
    address: str
    chain: str
    name: str
    symbol: str


@dataclass(frozen=True)
class EvidenceBundle:
    """Union of all provider responses for one analysis. Each field may be None."""

    security: GoPlusTokenSecurity | None = None
    explorer: ExplorerReport | None = None
    liquidity: LiquidityReport | None = None
    ledger: LedgerAuthorityReport | None = None
    onchain: OnchainMetadata | None = None


@dataclass(frozen=True)
class TokenAge:
    """Whole days/hours since a timestamp; both None when unknown."""

    days: int | None = None
    hours: int | None = None
    source: str | None = None

    @property
    def known(self) -> bool:
        return self.days is not None


UNKNOWN_AGE = TokenAge()


@dataclass(frozen=True)
class TokenFacts:
    """Resolved facts about the analysis subject, derived once from the bundle."""

    address: str
    kind: AddressKind
    chain: str
    symbol: str | None
    token_age: TokenAge
    pair_age: TokenAge
    liquidity_usd: float | None
    holder_count: int | None
    contract_verified: bool | None
    is_core: bool  # core tier or wrapped native
    is_allow_listed: bool
    curated_age: TokenAge | None = None

    @property
    def is_evm(self) -> bool:
        return self.kind == AddressKind.EVM

    @property
    def is_ledger(self) -> bool:
        return self.kind == AddressKind.LEDGER_B58


@dataclass(frozen=True)
class SecurityFlags:
    honeypot: bool = False
    mint_authority: bool = False
    freeze_authority: bool = False
    blacklist_authority: bool = False
    owner_privileges: bool = False
    proxy_upgradeable: bool = False
    unverified_contract: bool = False
    no_liquidity: bool = False
    new_token: bool = False
    not_listed: bool = False

    @property
    def has_critical(self) -> bool:
        """Flags that veto any numeric score into HIGH risk."""
        return self.honeypot or self.mint_authority or self.owner_privileges


@dataclass(frozen=True)
class DataConfidence:
    level: ConfidenceLevel
    percentage: int
    successful_checks: int
    total_checks: int
    missing_fields: tuple[str, ...] = ()
    provider_failures: tuple[str, ...] = ()


@dataclass(frozen=True)
class Penalty:
    reason: str
    points: int


@dataclass(frozen=True)
class ScoreResult:
    score: int
    penalties: tuple[Penalty, ...]
    new_token_override: bool = False


@dataclass(frozen=True)
class Verdict:
    verdict: str
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class RiskAnalysis:
    health_score: int  # 0-95
    risk_level: RiskLevel
    data_confidence: DataConfidence
    security_flags: SecurityFlags
    penalties: tuple[Penalty, ...]
    verdict: str
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisResult:
    """What the engine hands to the caller. Never raised, always returned."""

    input_address: str
    address_kind: AddressKind
    identity: TokenIdentity | None = None
    analysis: RiskAnalysis | None = None
    facts: TokenFacts | None = None
    pair_address: str | None = None  # set when the input was a pair contract
    is_fallback: bool = False
    error: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.address_kind != AddressKind.INVALID and self.analysis is not None


@dataclass(frozen=True)
class PairResolution:
    """Outcome of pair-vs-token disambiguation."""

    subject_address: str
    is_pair: bool = False
    pair_address: str | None = None
    chain: str | None = None
    subject_name: str | None = None
    subject_symbol: str | None = None
