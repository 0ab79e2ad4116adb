"""Address classification and EVM chain detection."""

import asyncio
import re
from typing import Protocol

from loguru import logger
from web3 import Web3

from src.analyzer.chains import EVM_CHAINS, PRIMARY_CHAIN, PROBE_ORDER
from src.analyzer.models import AddressKind
from src.analyzer.registry import lookup_known

EVM_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")
# Base58: no 0, O, I, l
LEDGER_PATTERN = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")

_EVM_SEARCH = re.compile(r"0x[a-fA-F0-9]{40}(?![a-fA-F0-9])")
_LEDGER_SEARCH = re.compile(r"\b[1-9A-HJ-NP-Za-km-z]{32,44}\b")


class ChainProbe(Protocol):
    async def has_token(self, chain: str, address: str) -> bool: ...


def classify_address(raw: str | None) -> AddressKind:
    """EVM (0x + 40 hex, valid EIP-55 checksum if mixed-case), base58 ledger, or invalid."""
    if not raw or not isinstance(raw, str):
        return AddressKind.INVALID
    address = raw.strip()

    if EVM_PATTERN.match(address):
        body = address[2:]
        if body == body.lower() or body == body.upper():
            return AddressKind.EVM
        # Mixed-case input must carry a correct EIP-55 checksum
        return AddressKind.EVM if Web3.is_checksum_address(address) else AddressKind.INVALID

    if LEDGER_PATTERN.match(address) and not address.startswith("0x"):
        return AddressKind.LEDGER_B58

    return AddressKind.INVALID


def extract_address(text: str) -> str | None:
    """Pull the first token address out of free text (EVM first, then base58)."""
    if not text:
        return None
    evm = _EVM_SEARCH.search(text)
    if evm:
        return evm.group(0)
    ledger = _LEDGER_SEARCH.search(text)
    return ledger.group(0) if ledger else None


async def detect_evm_chain(
    address: str,
    scanner: ChainProbe | None,
    *,
    chain_hint: str | None = None,
    probe_timeout: float = 5.0,
    total_timeout: float = 8.0,
) -> str:
    """Find which EVM network a contract lives on.

    Order: allow-list chain, then the chain of a resolved pair, then the security
    scanner probed on every chain concurrently (first chain in PROBE_ORDER with
    a hit wins), then PRIMARY_CHAIN. Never raises.
    """
    known = lookup_known(address)
    if known is not None and known.chain in EVM_CHAINS:
        return known.chain

    if chain_hint in EVM_CHAINS:
        return chain_hint

    if scanner is None:
        return PRIMARY_CHAIN

    async def _probe(chain: str) -> bool:
        try:
            return await asyncio.wait_for(scanner.has_token(chain, address), probe_timeout)
        except TimeoutError:
            logger.debug(f"[CHAIN] Probe timed out on {chain} for {address[:12]}")
        except Exception as e:
            logger.debug(f"[CHAIN] Probe failed on {chain} for {address[:12]}: {e!r}")
        return False

    tasks = {chain: asyncio.create_task(_probe(chain)) for chain in PROBE_ORDER}
    try:
        async with asyncio.timeout(total_timeout):
            for chain in PROBE_ORDER:
                if await tasks[chain]:
                    logger.debug(f"[CHAIN] {address[:12]} found on {chain}")
                    return chain
    except TimeoutError:
        logger.debug(f"[CHAIN] Detection timed out for {address[:12]}")
    finally:
        for task in tasks.values():
            task.cancel()

    return PRIMARY_CHAIN
