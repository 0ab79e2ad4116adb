"""Human-facing verdict selection.

A priority-ordered rule list: exactly one verdict is produced, plus an
auxiliary list of warnings that carries no decision weight.
"""

from src.analyzer import constants as c
from src.analyzer.models import (
    ConfidenceLevel,
    DataConfidence,
    RiskLevel,
    SecurityFlags,
    TokenFacts,
    Verdict,
)
from src.analyzer.scoring import is_confirmed_new_token

VERDICT_FRESH_LAUNCH = "🔴 HIGH RISK – Fresh launch under 7 days old. Rug risk is extremely high."
VERDICT_HONEYPOT = "🔴 HIGH RISK – Honeypot behavior detected. Do NOT interact."
VERDICT_MINT_AUTHORITY = "🔴 HIGH RISK – Token supply can be inflated at any time."
VERDICT_OWNER_PRIVILEGES = "🔴 HIGH RISK – Dangerous owner privileges detected."
VERDICT_INSUFFICIENT_DATA = "⚠️ INSUFFICIENT DATA – Risk cannot be accurately determined."
VERDICT_EARLY_STAGE = "🟡 EARLY-STAGE TOKEN – Launch-phase rug risk is extremely high."
VERDICT_NEWLY_CREATED = "⚠️ NEWLY CREATED TOKEN – Limited on-chain history available."
VERDICT_NO_LIQUIDITY = "🔴 HIGH RISK – No active liquidity pool detected."
VERDICT_LIMITED_LEDGER = "⚠️ LIMITED SOLANA ANALYSIS – Manual review required."
VERDICT_MULTIPLE_RISKS = "🔴 HIGH RISK – Multiple risk factors detected."
VERDICT_REVIEW = "⚠️ REVIEW RECOMMENDED – Some risk factors or limited history detected."
VERDICT_NO_CRITICAL_RISKS = "🟢 NO CRITICAL RISKS DETECTED – Token appears relatively safe."
VERDICT_UNABLE_TO_ASSESS = "⚠️ REVIEW RECOMMENDED – Unable to fully assess risk."


def insufficient_data_warning(percentage: int) -> str:
    return f"Only {percentage}% of security checks could be performed"


def _review_warnings(flags: SecurityFlags, confidence: DataConfidence) -> tuple[str, ...]:
    warnings = []
    if flags.new_token:
        warnings.append("Token is less than 7 days old")
    if flags.unverified_contract:
        warnings.append("Contract not verified")
    if confidence.level == ConfidenceLevel.MEDIUM:
        warnings.append("Some security data unavailable")
    return tuple(warnings)


def _is_clean_low_risk(
    risk_level: RiskLevel,
    facts: TokenFacts,
    flags: SecurityFlags,
    confidence: DataConfidence,
) -> bool:
    return (
        risk_level == RiskLevel.LOW
        and confidence.level == ConfidenceLevel.HIGH
        and not flags.honeypot
        and not flags.mint_authority
        and not flags.owner_privileges
        and not flags.no_liquidity
        and not flags.blacklist_authority
        and facts.token_age.known
        and facts.token_age.days >= c.NEW_TOKEN_DAYS
    )


def generate_verdict(
    risk_level: RiskLevel,
    facts: TokenFacts,
    flags: SecurityFlags,
    confidence: DataConfidence,
) -> Verdict:
    if is_confirmed_new_token(facts):
        return Verdict(
            VERDICT_FRESH_LAUNCH,
            (
                "🚨 VERY NEW TOKEN – Extremely high rug risk",
                "Token or its main pool was created less than 7 days ago",
                "Market and liquidity data still forming",
            ),
        )

    if flags.honeypot:
        return Verdict(VERDICT_HONEYPOT, ("This token may prevent you from selling after purchase",))
    if flags.mint_authority:
        return Verdict(
            VERDICT_MINT_AUTHORITY,
            ("Mint authority is still active - owner can print unlimited tokens",),
        )
    if flags.owner_privileges:
        return Verdict(VERDICT_OWNER_PRIVILEGES, ("Owner can modify balances or pause trading",))

    if confidence.level == ConfidenceLevel.LOW:
        return Verdict(VERDICT_INSUFFICIENT_DATA, (insufficient_data_warning(confidence.percentage),))

    age = facts.token_age
    if age.known and age.hours < c.EARLY_STAGE_HOURS:
        return Verdict(
            VERDICT_EARLY_STAGE,
            ("🚨 VERY NEW TOKEN – Extremely high rug risk", "Token created less than 24 hours ago"),
        )

    if not age.known and not facts.pair_age.known and confidence.level != ConfidenceLevel.HIGH:
        return Verdict(
            VERDICT_NEWLY_CREATED,
            (
                "Token is newly created – limited on-chain history available",
                "Market and liquidity data still forming",
            ),
        )

    if flags.no_liquidity:
        return Verdict(VERDICT_NO_LIQUIDITY, ("Cannot verify market depth or trading history",))

    if facts.is_ledger and confidence.level != ConfidenceLevel.HIGH:
        return Verdict(
            VERDICT_LIMITED_LEDGER,
            ("Solana security features are limited compared to EVM chains",),
        )

    if risk_level == RiskLevel.HIGH:
        return Verdict(VERDICT_MULTIPLE_RISKS, ("Proceed with extreme caution or avoid entirely",))
    if risk_level == RiskLevel.MEDIUM:
        return Verdict(VERDICT_REVIEW, _review_warnings(flags, confidence))

    if _is_clean_low_risk(risk_level, facts, flags, confidence):
        return Verdict(VERDICT_NO_CRITICAL_RISKS, ("Always DYOR - this is not financial advice",))

    return Verdict(VERDICT_UNABLE_TO_ASSESS, ("Incomplete analysis - exercise caution",))
