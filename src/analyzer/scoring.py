"""Health score: ordered penalty rules over a base of 100.

The new-token rule is a guard clause. When it fires the score is forced low and
nothing else is evaluated, so the returned ScoreResult is tagged with
``new_token_override=True``.
"""

from loguru import logger

from src.analyzer import constants as c
from src.analyzer.models import (
    ConfidenceLevel,
    DataConfidence,
    Penalty,
    ScoreResult,
    SecurityFlags,
    TokenFacts,
)

NEW_TOKEN_REASON = "Very new token (<7 days) - launch-phase rug risk"

# (flag attribute, reason, points, skipped for core/wrapped tokens)
FLAG_PENALTIES: tuple[tuple[str, str, int, bool], ...] = (
    ("honeypot", "Honeypot behavior detected", c.PENALTY_HONEYPOT, False),
    ("mint_authority", "Mint authority still active (supply inflation risk)", c.PENALTY_MINT_AUTHORITY, False),
    ("freeze_authority", "Freeze authority active (can freeze wallets)", c.PENALTY_FREEZE_AUTHORITY, False),
    ("owner_privileges", "Dangerous owner privileges detected", c.PENALTY_OWNER_PRIVILEGES, False),
    ("blacklist_authority", "Blacklist function detected", c.PENALTY_BLACKLIST, False),
    ("no_liquidity", "No liquidity detected or insufficient liquidity", c.PENALTY_NO_LIQUIDITY, True),
    ("unverified_contract", "Contract not verified on block explorer", c.PENALTY_UNVERIFIED, True),
    ("proxy_upgradeable", "Upgradeable proxy contract (owner can change logic)", c.PENALTY_PROXY, False),
)


def is_confirmed_new_token(facts: TokenFacts) -> bool:
    """True only on positive evidence of an age under NEW_TOKEN_DAYS.

    Allow-listed tokens are judged on their curated launch date alone. Unknown
    ages never count as new.
    """
    if facts.is_allow_listed and facts.curated_age is not None:
        return facts.curated_age.known and facts.curated_age.days < c.NEW_TOKEN_DAYS
    for age in (facts.token_age, facts.pair_age):
        if age.known and age.days < c.NEW_TOKEN_DAYS:
            return True
    return False


def calculate_health_score(
    facts: TokenFacts,
    flags: SecurityFlags,
    confidence: DataConfidence,
) -> ScoreResult:
    if is_confirmed_new_token(facts):
        return ScoreResult(
            score=c.NEW_TOKEN_OVERRIDE_SCORE,
            penalties=(Penalty(NEW_TOKEN_REASON, c.BASE_SCORE - c.NEW_TOKEN_OVERRIDE_SCORE),),
            new_token_override=True,
        )

    penalties: list[Penalty] = []

    for attr, reason, points, core_exempt in FLAG_PENALTIES:
        if not getattr(flags, attr):
            continue
        if core_exempt and facts.is_core:
            continue
        penalties.append(Penalty(reason, points))

    if not facts.is_core:
        if not facts.token_age.known:
            penalties.append(Penalty("Token age unknown - cannot verify launch date", c.PENALTY_AGE_UNKNOWN))
        if confidence.level == ConfidenceLevel.LOW:
            penalties.append(Penalty("Most market or explorer data unavailable", c.PENALTY_LOW_CONFIDENCE))
        elif confidence.level == ConfidenceLevel.MEDIUM:
            penalties.append(Penalty("Some market or explorer data unavailable", c.PENALTY_MEDIUM_CONFIDENCE))

    if facts.is_ledger:
        penalties.append(Penalty("Solana security checks are limited", c.PENALTY_LEDGER_LIMITED))

    score = c.BASE_SCORE - sum(p.points for p in penalties)
    score = max(c.MIN_SCORE, min(c.MAX_SCORE, score))

    # Caps only ever lower the score
    if not facts.is_core:
        if confidence.level == ConfidenceLevel.LOW:
            score = min(score, c.CAP_LOW_CONFIDENCE)
        elif (
            confidence.level == ConfidenceLevel.MEDIUM
            and confidence.percentage < c.CAP_MEDIUM_CONFIDENCE_BELOW_PCT
        ):
            score = min(score, c.CAP_MEDIUM_CONFIDENCE)

    logger.debug(f"[SCORE] {facts.address[:12]} -> {score} ({len(penalties)} penalties)")
    return ScoreResult(score=score, penalties=tuple(penalties))
