"""Final LOW/MEDIUM/HIGH classification. First matching rule wins."""

from src.analyzer import constants as c
from src.analyzer.models import ConfidenceLevel, DataConfidence, RiskLevel, SecurityFlags, TokenFacts
from src.analyzer.scoring import is_confirmed_new_token


def determine_risk_level(
    score: int,
    facts: TokenFacts,
    flags: SecurityFlags,
    confidence: DataConfidence,
) -> RiskLevel:
    if is_confirmed_new_token(facts):
        return RiskLevel.HIGH

    if flags.has_critical:
        return RiskLevel.HIGH

    if facts.is_core:
        return RiskLevel.LOW if score >= c.CORE_LOW_RISK_MIN_SCORE else RiskLevel.MEDIUM

    # Missing data alone never produces HIGH
    if confidence.level == ConfidenceLevel.LOW:
        return RiskLevel.LOW if score >= c.LOW_RISK_MIN_SCORE else RiskLevel.MEDIUM

    if confidence.level == ConfidenceLevel.MEDIUM and score < c.MEDIUM_CONFIDENCE_MIN_SCORE:
        return RiskLevel.MEDIUM

    if score >= c.LOW_RISK_MIN_SCORE:
        return RiskLevel.LOW
    if score >= c.MEDIUM_RISK_MIN_SCORE:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH
