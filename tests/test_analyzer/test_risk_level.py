"""Tests for risk-level determination."""

from datetime import timedelta

import pytest

from src.analyzer.models import ConfidenceLevel, DataConfidence, EvidenceBundle, RiskLevel, SecurityFlags
from src.analyzer.risk_level import determine_risk_level
from tests.fakes import NOW, TOKEN_EVM, USDC_ETH, full_evm_bundle, make_facts, make_liquidity, make_pair

HIGH = DataConfidence(ConfidenceLevel.HIGH, 100, 6, 6)
MEDIUM = DataConfidence(ConfidenceLevel.MEDIUM, 67, 4, 6)
LOW = DataConfidence(ConfidenceLevel.LOW, 17, 1, 6)

AGED = make_facts(TOKEN_EVM, full_evm_bundle())
CORE = make_facts(USDC_ETH, full_evm_bundle(USDC_ETH))


def test_confirmed_new_token_is_high_regardless_of_score() -> None:
    fresh_pool = make_liquidity(TOKEN_EVM, make_pair(created_at=NOW - timedelta(days=1)))
    young = make_facts(TOKEN_EVM, EvidenceBundle(liquidity=fresh_pool))
    assert determine_risk_level(95, young, SecurityFlags(), HIGH) == RiskLevel.HIGH


@pytest.mark.parametrize("flag", ["honeypot", "mint_authority", "owner_privileges"])
def test_critical_flag_veto(flag) -> None:
    flags = SecurityFlags(**{flag: True})
    assert determine_risk_level(95, AGED, flags, HIGH) == RiskLevel.HIGH
    assert determine_risk_level(95, CORE, flags, HIGH) == RiskLevel.HIGH


def test_non_critical_flags_do_not_veto() -> None:
    flags = SecurityFlags(blacklist_authority=True, proxy_upgradeable=True)
    assert determine_risk_level(85, AGED, flags, HIGH) == RiskLevel.LOW


class TestCoreTokens:
    def test_low_when_score_high(self) -> None:
        assert determine_risk_level(85, CORE, SecurityFlags(), LOW) == RiskLevel.LOW

    def test_never_worse_than_medium(self) -> None:
        assert determine_risk_level(84, CORE, SecurityFlags(), HIGH) == RiskLevel.MEDIUM
        assert determine_risk_level(10, CORE, SecurityFlags(no_liquidity=True), LOW) == RiskLevel.MEDIUM


class TestConfidenceRules:
    def test_low_confidence_never_high(self) -> None:
        assert determine_risk_level(20, AGED, SecurityFlags(), LOW) == RiskLevel.MEDIUM

    def test_low_confidence_permits_low_at_80(self) -> None:
        assert determine_risk_level(80, AGED, SecurityFlags(), LOW) == RiskLevel.LOW
        assert determine_risk_level(79, AGED, SecurityFlags(), LOW) == RiskLevel.MEDIUM

    def test_medium_confidence_below_70(self) -> None:
        assert determine_risk_level(50, AGED, SecurityFlags(), MEDIUM) == RiskLevel.MEDIUM


class TestScoreThresholds:
    @pytest.mark.parametrize(
        ("score", "expected"),
        [(95, RiskLevel.LOW), (80, RiskLevel.LOW), (79, RiskLevel.MEDIUM), (60, RiskLevel.MEDIUM), (59, RiskLevel.HIGH)],
    )
    def test_high_confidence(self, score, expected) -> None:
        assert determine_risk_level(score, AGED, SecurityFlags(), HIGH) == expected

    def test_medium_confidence_above_70_uses_thresholds(self) -> None:
        assert determine_risk_level(82, AGED, SecurityFlags(), MEDIUM) == RiskLevel.LOW
        assert determine_risk_level(75, AGED, SecurityFlags(), MEDIUM) == RiskLevel.MEDIUM
