"""TokenHealth analysis engine.

Pipeline per address:
    classify -> resolve pair/token subject -> detect chain -> fetch evidence
    (concurrently) -> facts -> confidence + flags -> score -> risk -> verdict

``analyze`` never raises. Provider failures become missing evidence, an
unsupported address becomes an INVALID result, and anything else (including
the overall timeout) becomes the conservative fallback analysis.
"""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime

from loguru import logger

from config.settings import Settings
from src.analyzer import constants as c
from src.analyzer.address import classify_address, detect_evm_chain
from src.analyzer.chains import EVM_CHAINS, PRIMARY_CHAIN, SOLANA, dexscreener_id_for
from src.analyzer.confidence import calculate_confidence, checklist_for
from src.analyzer.flags import detect_security_flags
from src.analyzer.identity import PLACEHOLDER_NAME, PLACEHOLDER_SYMBOL, resolve_identity
from src.analyzer.models import (
    AddressKind,
    AnalysisResult,
    ConfidenceLevel,
    DataConfidence,
    EvidenceBundle,
    PairResolution,
    Penalty,
    RiskAnalysis,
    RiskLevel,
    SecurityFlags,
    TokenFacts,
    TokenIdentity,
)
from src.analyzer.pair_resolver import resolve_subject
from src.analyzer.registry import is_allow_listed, is_core_token, is_wrapped_native, lookup_known
from src.analyzer.risk_level import determine_risk_level
from src.analyzer.scoring import calculate_health_score
from src.analyzer.token_age import curated_age, resolve_pair_age, resolve_token_age
from src.analyzer.verdict import VERDICT_INSUFFICIENT_DATA, generate_verdict
from src.providers.dexscreener.client import DexScreenerClient
from src.providers.explorer.client import ExplorerClient
from src.providers.goplus.client import GoPlusClient
from src.providers.onchain.erc20 import Erc20MetadataReader
from src.providers.rugcheck.client import RugcheckClient

INVALID_ADDRESS_ERROR = "Unable to identify if this is an EVM or Solana address."
FALLBACK_PENALTY_REASON = "Insufficient data to perform thorough analysis"
FALLBACK_WARNING = "Partial analysis completed. Some data sources unavailable."

EVM_PROVIDERS = ("GoPlus", "DexScreener", "Explorer")
LEDGER_PROVIDERS = ("DexScreener", "Rugcheck")


def _utc_now() -> datetime:
    return datetime.now(UTC)


def build_facts(
    address: str,
    kind: AddressKind,
    chain: str,
    bundle: EvidenceBundle,
    now: datetime,
    symbol: str | None = None,
) -> TokenFacts:
    """Derive every per-token fact once, from one immutable bundle."""
    allow_listed = is_allow_listed(address)

    if kind == AddressKind.EVM:
        if bundle.explorer is not None and bundle.explorer.verified is not None:
            verified = bundle.explorer.verified
        else:
            # Canonical assets are verified contracts even when the explorer is down
            verified = True if allow_listed else None
        holders = bundle.security.holder_count if bundle.security else None
    else:
        verified = bundle.ledger.verified if bundle.ledger else None
        holders = bundle.ledger.holder_count if bundle.ledger else None

    return TokenFacts(
        address=address,
        kind=kind,
        chain=chain,
        symbol=symbol,
        token_age=resolve_token_age(address, bundle, now),
        pair_age=resolve_pair_age(bundle, now),
        liquidity_usd=bundle.liquidity.liquidity_usd if bundle.liquidity else None,
        holder_count=holders,
        contract_verified=verified,
        is_core=is_core_token(address) or is_wrapped_native(address, chain),
        is_allow_listed=allow_listed,
        curated_age=curated_age(address, now),
    )


def evaluate(facts: TokenFacts, bundle: EvidenceBundle) -> RiskAnalysis:
    """Pure scoring path: no I/O, no clock."""
    confidence = calculate_confidence(facts, bundle)
    flags = detect_security_flags(facts, bundle)
    scored = calculate_health_score(facts, flags, confidence)
    risk = determine_risk_level(scored.score, facts, flags, confidence)
    verdict = generate_verdict(risk, facts, flags, confidence)

    return RiskAnalysis(
        health_score=scored.score,
        risk_level=risk,
        data_confidence=confidence,
        security_flags=flags,
        penalties=scored.penalties,
        verdict=verdict.verdict,
        warnings=verdict.warnings,
    )


def build_fallback_result(address: str, kind: AddressKind, error: str | None = None) -> AnalysisResult:
    """Most conservative complete analysis, used when the pipeline itself fails."""
    known = lookup_known(address)
    allow_listed = known is not None
    is_evm = kind == AddressKind.EVM

    if known is not None:
        chain = known.chain
    else:
        chain = PRIMARY_CHAIN if is_evm else SOLANA

    checklist = checklist_for(kind)
    points = c.FALLBACK_PENALTY_ALLOW_LISTED if allow_listed else c.FALLBACK_PENALTY_DEFAULT
    analysis = RiskAnalysis(
        health_score=c.FALLBACK_SCORE_ALLOW_LISTED if allow_listed else c.FALLBACK_SCORE_DEFAULT,
        risk_level=RiskLevel.MEDIUM,
        data_confidence=DataConfidence(
            level=ConfidenceLevel.LOW,
            percentage=0,
            successful_checks=0,
            total_checks=len(checklist),
            missing_fields=checklist,
            provider_failures=EVM_PROVIDERS if is_evm else LEDGER_PROVIDERS,
        ),
        security_flags=SecurityFlags(),
        penalties=(Penalty(FALLBACK_PENALTY_REASON, points),),
        verdict=VERDICT_INSUFFICIENT_DATA,
        warnings=(FALLBACK_WARNING,),
    )
    identity = TokenIdentity(
        address=address,
        chain=chain,
        name=known.name if known else PLACEHOLDER_NAME,
        symbol=known.symbol if known else PLACEHOLDER_SYMBOL,
    )
    return AnalysisResult(
        input_address=address,
        address_kind=kind,
        identity=identity,
        analysis=analysis,
        is_fallback=True,
        error=error,
    )


class TokenHealthAnalyzer:
    """Fetches evidence for one address and scores it.

    Every collaborator is optional: a missing client is the same as a provider
    that always returns nothing.
    """

    def __init__(
        self,
        *,
        goplus: GoPlusClient | None = None,
        dexscreener: DexScreenerClient | None = None,
        explorer: ExplorerClient | None = None,
        rugcheck: RugcheckClient | None = None,
        onchain: Erc20MetadataReader | None = None,
        clock: Callable[[], datetime] = _utc_now,
        analysis_timeout: float = 30.0,
        probe_timeout: float = 5.0,
        detection_timeout: float = 8.0,
    ) -> None:
        self._goplus = goplus
        self._dexscreener = dexscreener
        self._explorer = explorer
        self._rugcheck = rugcheck
        self._onchain = onchain
        self._clock = clock
        self._analysis_timeout = analysis_timeout
        self._probe_timeout = probe_timeout
        self._detection_timeout = detection_timeout

    async def analyze(self, address: str) -> AnalysisResult:
        raw = address.strip() if isinstance(address, str) else ""
        kind = classify_address(raw)
        if kind == AddressKind.INVALID:
            logger.info(f"[ANALYZE] Unsupported address format: {raw[:16]!r}")
            return AnalysisResult(input_address=raw, address_kind=kind, error=INVALID_ADDRESS_ERROR)

        try:
            return await asyncio.wait_for(self._analyze(raw, kind), timeout=self._analysis_timeout)
        except TimeoutError:
            logger.warning(f"[ANALYZE] Timed out after {self._analysis_timeout}s for {raw[:12]}")
            return build_fallback_result(raw, kind, error="analysis timed out")
        except Exception as e:
            logger.exception(f"[ANALYZE] Analysis failed for {raw[:12]}: {e}")
            return build_fallback_result(raw, kind, error=f"internal error: {type(e).__name__}")

    async def _analyze(self, address: str, kind: AddressKind) -> AnalysisResult:
        resolution = await resolve_subject(address, self._dexscreener)
        subject = resolution.subject_address
        subject_kind = classify_address(subject)
        if subject_kind == AddressKind.INVALID:
            # Indexer handed back something unusable: analyze the input as given
            resolution = PairResolution(subject_address=address)
            subject, subject_kind = address, kind

        if subject_kind == AddressKind.EVM:
            chain = await detect_evm_chain(
                subject,
                self._goplus,
                chain_hint=resolution.chain,
                probe_timeout=self._probe_timeout,
                total_timeout=self._detection_timeout,
            )
        else:
            chain = SOLANA

        bundle = await self.gather_evidence(subject, subject_kind, chain)
        now = self._clock()

        identity = resolve_identity(subject, chain, bundle, resolution)
        facts = build_facts(subject, subject_kind, chain, bundle, now, symbol=identity.symbol)
        analysis = evaluate(facts, bundle)

        logger.info(
            f"[ANALYZE] {identity.symbol} {subject[:12]} on {chain}: "
            f"score={analysis.health_score} risk={analysis.risk_level} "
            f"confidence={analysis.data_confidence.level}({analysis.data_confidence.percentage}%)"
        )
        return AnalysisResult(
            input_address=address,
            address_kind=subject_kind,
            identity=identity,
            analysis=analysis,
            facts=facts,
            pair_address=resolution.pair_address if resolution.is_pair else None,
        )

    async def gather_evidence(self, address: str, kind: AddressKind, chain: str) -> EvidenceBundle:
        """Fan out to every applicable provider; failures become None."""
        coros: list = []
        labels: list[str] = []

        if self._dexscreener is not None:
            coros.append(self._dexscreener.get_token_pairs(address))
            labels.append("liquidity")

        if kind == AddressKind.EVM:
            if self._goplus is not None:
                coros.append(self._goplus.get_token_security(chain, address))
                labels.append("security")
            if self._explorer is not None:
                coros.append(self._explorer.get_contract_report(chain, address))
                labels.append("explorer")
            if self._onchain is not None:
                coros.append(self._onchain.read_metadata(chain, address))
                labels.append("onchain")
        elif self._rugcheck is not None:
            coros.append(self._rugcheck.get_authority_report(address))
            labels.append("ledger")

        results = await asyncio.gather(*coros, return_exceptions=True)

        evidence: dict = {}
        for label, result in zip(labels, results, strict=True):
            if isinstance(result, Exception):
                logger.debug(f"[ANALYZE] {label} fetch failed for {address[:12]}: {result!r}")
                continue
            evidence[label] = result

        liquidity = evidence.get("liquidity")
        if liquidity is not None:
            # Same address can exist on several chains; score the detected one
            liquidity = liquidity.for_chain(dexscreener_id_for(chain))

        return EvidenceBundle(
            security=evidence.get("security"),
            explorer=evidence.get("explorer"),
            liquidity=liquidity,
            ledger=evidence.get("ledger"),
            onchain=evidence.get("onchain"),
        )

    async def close(self) -> None:
        for client in (self._goplus, self._dexscreener, self._explorer, self._rugcheck, self._onchain):
            if client is not None:
                await client.close()


def build_analyzer(cfg: Settings) -> TokenHealthAnalyzer:
    """Wire clients from settings, honouring the per-provider feature flags."""
    common = {
        "timeout": cfg.request_timeout_sec,
        "max_retries": cfg.max_retries,
        "base_delay": cfg.retry_base_delay_sec,
    }

    goplus = GoPlusClient(max_rps=cfg.goplus_max_rps, **common) if cfg.enable_goplus else None
    dexscreener = (
        DexScreenerClient(max_rps=cfg.dexscreener_max_rps, **common) if cfg.enable_dexscreener else None
    )
    explorer = None
    if cfg.enable_explorer and cfg.etherscan_api_key:
        explorer = ExplorerClient(cfg.etherscan_api_key, max_rps=cfg.explorer_max_rps, **common)
    elif cfg.enable_explorer:
        logger.warning("[EXPLORER] ETHERSCAN_API_KEY not set, contract verification disabled")
    rugcheck = RugcheckClient(max_rps=cfg.rugcheck_max_rps, **common) if cfg.enable_rugcheck else None

    onchain = None
    if cfg.enable_onchain_metadata:
        rpc_urls = {name: getattr(cfg, info.rpc_setting) for name, info in EVM_CHAINS.items()}
        onchain = Erc20MetadataReader(rpc_urls, timeout=cfg.request_timeout_sec)

    return TokenHealthAnalyzer(
        goplus=goplus,
        dexscreener=dexscreener,
        explorer=explorer,
        rugcheck=rugcheck,
        onchain=onchain,
        analysis_timeout=cfg.analysis_timeout_sec,
        probe_timeout=cfg.chain_probe_timeout_sec,
        detection_timeout=cfg.chain_detection_timeout_sec,
    )
