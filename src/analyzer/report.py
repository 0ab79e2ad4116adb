"""Render an AnalysisResult as the plain-text TokenHealth report."""

from src.analyzer.models import AddressKind, AnalysisResult, RiskLevel, TokenAge, TokenFacts

RISK_EMOJI = {
    RiskLevel.HIGH: "🔴",
    RiskLevel.MEDIUM: "⚠️",
    RiskLevel.LOW: "🟢",
}

DISCLAIMER = (
    "Not financial advice. TokenHealth provides automated risk analysis only. Always DYOR.\n"
    "TokenHealth provides information only and does not facilitate trading or gambling."
)

UNSUPPORTED_ADDRESS_MESSAGE = (
    "⚠️ UNSUPPORTED ADDRESS FORMAT\n\n"
    "Unable to identify if this is an EVM or Solana address.\n"
    "Please provide a valid token contract address."
)


def _section(title: str) -> str:
    return f"─────────── {title} ───────────"


def _format_age(label: str, age: TokenAge) -> str:
    if not age.known:
        return f"{label}: ⚠️ Age unavailable (treat as high risk)"
    if age.days < 1:
        return f"{label}: 🆕 Just created ({age.hours}h ago)"
    if age.days < 7:
        return f"{label}: 🆕 {age.days} day{'s' if age.days > 1 else ''} (very new)"
    return f"{label}: {age.days:,} days"


def _check_lines(result: AnalysisResult) -> list[str]:
    flags = result.analysis.security_flags
    if result.address_kind == AddressKind.LEDGER_B58:
        return [
            f"Mint Authority: {'🔴 ACTIVE' if flags.mint_authority else '✅ Disabled'}",
            f"Freeze Authority: {'⚠️ ACTIVE' if flags.freeze_authority else '✅ Disabled'}",
            "Honeypot Risk: ⚠️ Not supported on Solana",
            "Contract Verified: ⚠️ Not applicable on Solana",
        ]

    verified = result.facts.contract_verified if result.facts else None
    if verified is True:
        verified_text = "✅ Yes"
    elif verified is False:
        verified_text = "⚠️ No"
    else:
        verified_text = "⚠️ Unknown"
    return [
        f"Honeypot Risk: {'🔴 DETECTED' if flags.honeypot else '✅ None detected'}",
        f"Owner Privileges: {'🔴 DANGEROUS' if flags.owner_privileges else '✅ Safe'}",
        f"Blacklist Function: {'⚠️ Present' if flags.blacklist_authority else '✅ None'}",
        f"Contract Verified: {verified_text}",
        f"Proxy Upgradeable: {'⚠️ Yes' if flags.proxy_upgradeable else '✅ No'}",
    ]


def _market_lines(facts: TokenFacts | None) -> list[str]:
    if facts is None:
        return [
            "Liquidity: ⚠️ Data unavailable",
            "Token Age: ⚠️ Age unavailable (treat as high risk)",
            "Holder Count: ⚠️ Data unavailable",
        ]

    if facts.liquidity_usd is None:
        liquidity = "⚠️ Data unavailable"
    elif facts.liquidity_usd <= 0:
        liquidity = "⚠️ No pool detected"
    else:
        liquidity = f"${facts.liquidity_usd:,.0f}"

    lines = [f"Liquidity: {liquidity}", _format_age("Token Age", facts.token_age)]
    if facts.pair_age.known:
        lines.append(_format_age("Pair Age", facts.pair_age))
    holders = f"{facts.holder_count:,}" if facts.holder_count is not None else "⚠️ Data unavailable"
    lines.append(f"Holder Count: {holders}")
    return lines


def render_report(result: AnalysisResult) -> str:
    if not result.is_valid:
        return UNSUPPORTED_ADDRESS_MESSAGE

    analysis = result.analysis
    identity = result.identity
    confidence = analysis.data_confidence

    lines = [
        "🩺 TokenHealth Report",
        "",
        f"Token: {identity.name}",
        f"Symbol: {identity.symbol}",
        f"Chain: {identity.chain}",
        f"Address: `{identity.address}`",
    ]
    if result.pair_address:
        lines.append(f"Pair: `{result.pair_address}` (analyzing the traded token)")

    lines += [
        "",
        f"Health Score: {analysis.health_score}/100",
        f"Risk Level: {RISK_EMOJI[analysis.risk_level]} {analysis.risk_level}",
        f"Data Confidence: {confidence.level} ({confidence.percentage}%)",
        "",
        _section("Security Checks"),
        "",
    ]
    lines += _check_lines(result)
    lines.append("")
    lines += _market_lines(result.facts)

    if confidence.missing_fields:
        lines += ["", "⚠️ Missing / Unavailable Data:"]
        lines += [f"  • {field}" for field in confidence.missing_fields]

    lines += ["", _section("Final Verdict"), "", analysis.verdict]

    if analysis.warnings:
        lines.append("")
        lines += [f"⚠️ {warning}" for warning in analysis.warnings]

    if analysis.penalties:
        lines += ["", _section("Why this score?"), ""]
        lines += [f"• {p.reason} (−{p.points} points)" for p in analysis.penalties]

    lines += ["", DISCLAIMER]
    return "\n".join(lines)
