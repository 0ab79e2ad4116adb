"""Map raw provider fields to the fixed set of boolean risk flags.

Each flag is a pure function of the evidence bundle and allow-list membership.
Missing evidence never sets a flag: it lowers data confidence instead.
"""

from src.analyzer import constants as c
from src.analyzer.models import EvidenceBundle, SecurityFlags, TokenFacts
from src.providers.goplus.models import GoPlusTokenSecurity


def _tax_exceeds(tax: float | None) -> bool:
    return tax is not None and tax > c.HONEYPOT_TAX_PCT


def _is_honeypot(security: GoPlusTokenSecurity | None) -> bool:
    if security is None:
        return False
    return bool(
        security.is_honeypot
        or _tax_exceeds(security.buy_tax)
        or _tax_exceeds(security.sell_tax)
        or security.cannot_sell_all
    )


def _has_owner_privileges(security: GoPlusTokenSecurity | None) -> bool:
    if security is None:
        return False
    return bool(security.owner_change_balance or security.hidden_owner or security.selfdestruct)


def detect_security_flags(facts: TokenFacts, bundle: EvidenceBundle) -> SecurityFlags:
    security = bundle.security if facts.is_evm else None
    explorer = bundle.explorer if facts.is_evm else None
    ledger = bundle.ledger if facts.is_ledger else None

    exempt = facts.is_allow_listed or facts.is_core
    known_low_liquidity = (
        not exempt
        and facts.liquidity_usd is not None
        and facts.liquidity_usd < c.MIN_LIQUIDITY_USD
    )

    return SecurityFlags(
        honeypot=_is_honeypot(security),
        mint_authority=ledger is not None and ledger.has_mint_authority,
        freeze_authority=ledger is not None and ledger.has_freeze_authority,
        blacklist_authority=bool(security and security.is_blacklisted),
        owner_privileges=_has_owner_privileges(security),
        proxy_upgradeable=bool(
            (security is not None and security.is_proxy)
            or (explorer is not None and explorer.is_proxy)
        ),
        unverified_contract=not exempt and explorer is not None and explorer.verified is False,
        no_liquidity=known_low_liquidity,
        new_token=facts.token_age.known and facts.token_age.days < c.NEW_TOKEN_DAYS,
        not_listed=known_low_liquidity,
    )
