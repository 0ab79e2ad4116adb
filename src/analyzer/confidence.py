"""Data-confidence: how much of the intended evidence set was actually obtained.

Two sub-scores are blended: checklist completion (fixed per address kind) and
provider availability (deductions per missing provider). The tier needs the
blend, the checklist percentage AND a minimum item count, so one saturated
sub-score cannot hide broad gaps in the other.
"""

from src.analyzer import constants as c
from src.analyzer.models import AddressKind, ConfidenceLevel, DataConfidence, EvidenceBundle, TokenFacts

EVM_CHECKS = (
    "Token Age",
    "Liquidity",
    "Contract Verification",
    "Honeypot Check",
    "Owner Privileges",
    "Explorer Data",
)
LEDGER_CHECKS = (
    "Token Age",
    "Liquidity",
    "Mint Authority",
    "Freeze Authority",
    "Indexer Data",
)


def checklist_for(kind: AddressKind) -> tuple[str, ...]:
    return EVM_CHECKS if kind == AddressKind.EVM else LEDGER_CHECKS


def _evaluate_checks(facts: TokenFacts, bundle: EvidenceBundle) -> list[tuple[str, bool]]:
    if facts.is_evm:
        available = (
            facts.token_age.known,
            facts.liquidity_usd is not None,
            facts.contract_verified is not None,
            bundle.security is not None,
            bundle.security is not None,
            bundle.explorer is not None,
        )
    else:
        available = (
            facts.token_age.known,
            facts.liquidity_usd is not None,
            bundle.ledger is not None,
            bundle.ledger is not None,
            bundle.liquidity is not None,
        )
    return list(zip(checklist_for(facts.kind), available, strict=True))


def provider_availability(facts: TokenFacts, bundle: EvidenceBundle) -> tuple[int, tuple[str, ...]]:
    """Deduction-based availability score and the names of providers that returned nothing."""
    score = c.PROVIDER_BASE_SCORE
    failures: list[str] = []

    if facts.is_evm:
        if bundle.security is None:
            failures.append("GoPlus")
            score -= c.PROVIDER_PENALTY_SCANNER
        if bundle.liquidity is None:
            failures.append("DexScreener")
            score -= c.PROVIDER_PENALTY_INDEXER
        if bundle.explorer is None:
            failures.append("Explorer")
            score -= c.PROVIDER_PENALTY_EXPLORER
    else:
        if bundle.liquidity is None:
            failures.append("DexScreener")
            score -= c.PROVIDER_PENALTY_INDEXER
        if bundle.ledger is None:
            failures.append("Rugcheck")
            score -= c.PROVIDER_PENALTY_LEDGER

    return max(0, score), tuple(failures)


def calculate_confidence(facts: TokenFacts, bundle: EvidenceBundle) -> DataConfidence:
    checks = _evaluate_checks(facts, bundle)
    total = len(checks)
    successful = sum(1 for _, ok in checks if ok)
    completion = successful / total * 100 if total else 0.0

    availability, failures = provider_availability(facts, bundle)
    blended = completion * c.COMPLETENESS_WEIGHT + availability * c.AVAILABILITY_WEIGHT

    if (
        blended >= c.HIGH_CONFIDENCE_MIN_BLEND
        and completion >= c.HIGH_CONFIDENCE_MIN_PCT
        and successful >= c.HIGH_CONFIDENCE_MIN_CHECKS
    ):
        level = ConfidenceLevel.HIGH
    elif (
        blended >= c.MEDIUM_CONFIDENCE_MIN_BLEND
        and completion >= c.MEDIUM_CONFIDENCE_MIN_PCT
        and successful >= c.MEDIUM_CONFIDENCE_MIN_CHECKS
    ):
        level = ConfidenceLevel.MEDIUM
    else:
        level = ConfidenceLevel.LOW

    return DataConfidence(
        level=level,
        percentage=round(completion),
        successful_checks=successful,
        total_checks=total,
        missing_fields=tuple(name for name, ok in checks if not ok),
        provider_failures=failures,
    )
