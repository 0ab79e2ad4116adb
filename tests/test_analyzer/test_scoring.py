"""Tests for the health-score rules."""

from dataclasses import replace
from datetime import timedelta

from src.analyzer.confidence import calculate_confidence
from src.analyzer.flags import detect_security_flags
from src.analyzer.models import EvidenceBundle, ScoreResult
from src.analyzer.scoring import NEW_TOKEN_REASON, calculate_health_score, is_confirmed_new_token
from tests.fakes import (
    MINT_SOL,
    NOW,
    TOKEN_EVM,
    USDC_ETH,
    WETH_ETH,
    full_evm_bundle,
    full_ledger_bundle,
    make_explorer,
    make_facts,
    make_liquidity,
    make_pair,
    make_security,
)


def _score(address: str, bundle: EvidenceBundle) -> ScoreResult:
    facts = make_facts(address, bundle)
    return calculate_health_score(
        facts,
        detect_security_flags(facts, bundle),
        calculate_confidence(facts, bundle),
    )


def _reasons(result: ScoreResult) -> list[str]:
    return [p.reason for p in result.penalties]


class TestNewTokenOverride:
    def test_young_pair_forces_low_score(self) -> None:
        bundle = replace(
            full_evm_bundle(is_honeypot=True),
            liquidity=make_liquidity(TOKEN_EVM, make_pair(created_at=NOW - timedelta(days=2))),
        )

        result = _score(TOKEN_EVM, bundle)

        assert result.new_token_override is True
        assert result.score == 25
        # Short-circuit: the honeypot deduction is never evaluated
        assert _reasons(result) == [NEW_TOKEN_REASON]

    def test_young_explorer_creation(self) -> None:
        bundle = replace(
            full_evm_bundle(),
            liquidity=None,
            explorer=make_explorer(creation_timestamp=NOW - timedelta(hours=30)),
        )
        assert _score(TOKEN_EVM, bundle).new_token_override is True

    def test_unknown_ages_do_not_fire(self) -> None:
        bundle = replace(full_evm_bundle(), liquidity=None, explorer=make_explorer(creation_timestamp=None))

        result = _score(TOKEN_EVM, bundle)

        assert result.new_token_override is False
        assert "Token age unknown - cannot verify launch date" in _reasons(result)

    def test_allow_listed_uses_curated_age(self) -> None:
        # A freshly created USDC pool says nothing about USDC itself
        bundle = EvidenceBundle(liquidity=make_liquidity(USDC_ETH, make_pair(USDC_ETH, "USDC", created_at=NOW - timedelta(hours=2))))
        facts = make_facts(USDC_ETH, bundle)

        assert is_confirmed_new_token(facts) is False
        assert _score(USDC_ETH, bundle).new_token_override is False


class TestDeductions:
    def test_clean_token_capped_at_95(self) -> None:
        result = _score(TOKEN_EVM, full_evm_bundle())
        assert result.score == 95
        assert result.penalties == ()

    def test_honeypot(self) -> None:
        result = _score(TOKEN_EVM, full_evm_bundle(is_honeypot=True))
        assert result.score == 50
        assert _reasons(result) == ["Honeypot behavior detected"]

    def test_penalties_in_fixed_order(self) -> None:
        bundle = replace(
            full_evm_bundle(is_honeypot=True, hidden_owner=True, is_blacklisted=True, is_proxy=True),
            explorer=make_explorer(verified=False),
        )

        result = _score(TOKEN_EVM, bundle)

        assert _reasons(result) == [
            "Honeypot behavior detected",
            "Dangerous owner privileges detected",
            "Blacklist function detected",
            "Contract not verified on block explorer",
            "Upgradeable proxy contract (owner can change logic)",
        ]
        # 100 - 50 - 30 - 20 - 5 - 10 = -15, clamped
        assert result.score == 0

    def test_unknown_age_and_medium_confidence(self) -> None:
        bundle = replace(full_evm_bundle(), liquidity=None, explorer=make_explorer(creation_timestamp=None))

        result = _score(TOKEN_EVM, bundle)

        # 4/6 checks -> MEDIUM (-8), age unknown (-10)
        assert result.score == 82

    def test_low_confidence_cap(self) -> None:
        result = _score(TOKEN_EVM, EvidenceBundle(security=make_security()))
        # 100 - 10 (age) - 15 (LOW) = 75, capped to 65
        assert result.score == 65

    def test_ledger_blanket_deduction(self) -> None:
        result = _score(MINT_SOL, full_ledger_bundle())
        assert result.score == 85
        assert _reasons(result) == ["Solana security checks are limited"]

    def test_ledger_mint_authority(self) -> None:
        bundle = full_ledger_bundle(mint_authority="MintAuth11111111111111111111111111111111111")
        assert _score(MINT_SOL, bundle).score == 55


class TestCoreTokens:
    def test_no_confidence_penalties_or_caps(self) -> None:
        result = _score(USDC_ETH, EvidenceBundle())
        assert result.score == 95
        assert result.penalties == ()

    def test_wrapped_native_skips_liquidity_and_verification(self) -> None:
        bundle = EvidenceBundle(
            explorer=make_explorer(verified=False),
            liquidity=make_liquidity(WETH_ETH, make_pair(WETH_ETH, "WETH", liquidity_usd=5)),
        )
        assert _score(WETH_ETH, bundle).score == 95

    def test_critical_flags_still_deduct(self) -> None:
        result = _score(WETH_ETH, full_evm_bundle(WETH_ETH, owner_change_balance=True))
        assert result.score == 70


def test_score_always_within_bounds() -> None:
    bundles = [
        EvidenceBundle(),
        full_evm_bundle(),
        full_evm_bundle(is_honeypot=True, hidden_owner=True, is_blacklisted=True),
        replace(full_evm_bundle(), liquidity=make_liquidity(TOKEN_EVM, make_pair(liquidity_usd=0))),
    ]
    for bundle in bundles:
        assert 0 <= _score(TOKEN_EVM, bundle).score <= 95
