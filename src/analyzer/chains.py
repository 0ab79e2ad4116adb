"""Supported networks and their identifiers across providers."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class ChainInfo:
    """One EVM network as each provider names it."""

    name: str
    chain_id: int
    dexscreener_id: str
    rpc_setting: str  # attribute on config.settings.Settings


ETHEREUM = "Ethereum"
BSC = "BSC"
BASE = "Base"
ARBITRUM = "Arbitrum"
POLYGON = "Polygon"
OPTIMISM = "Optimism"
SOLANA = "Solana"

PRIMARY_CHAIN = ETHEREUM

EVM_CHAINS: MappingProxyType[str, ChainInfo] = MappingProxyType({
    ETHEREUM: ChainInfo(ETHEREUM, 1, "ethereum", "eth_rpc_url"),
    BSC: ChainInfo(BSC, 56, "bsc", "bsc_rpc_url"),
    BASE: ChainInfo(BASE, 8453, "base", "base_rpc_url"),
    ARBITRUM: ChainInfo(ARBITRUM, 42161, "arbitrum", "arbitrum_rpc_url"),
    POLYGON: ChainInfo(POLYGON, 137, "polygon", "polygon_rpc_url"),
    OPTIMISM: ChainInfo(OPTIMISM, 10, "optimism", "optimism_rpc_url"),
})

# Order in which the security scanner is probed for an unknown EVM contract
PROBE_ORDER: tuple[str, ...] = (ETHEREUM, BSC, BASE, ARBITRUM, POLYGON, OPTIMISM)

SOLANA_DEXSCREENER_ID = "solana"


def chain_id_for(chain: str) -> int:
    """GoPlus / Etherscan numeric chain id; unknown chains map to Ethereum."""
    info = EVM_CHAINS.get(chain)
    return info.chain_id if info else EVM_CHAINS[PRIMARY_CHAIN].chain_id


def dexscreener_id_for(chain: str) -> str | None:
    if chain == SOLANA:
        return SOLANA_DEXSCREENER_ID
    info = EVM_CHAINS.get(chain)
    return info.dexscreener_id if info else None


def chain_from_dexscreener(dexscreener_id: str | None) -> str | None:
    """Map a DexScreener chainId back to our chain name."""
    if not dexscreener_id:
        return None
    if dexscreener_id == SOLANA_DEXSCREENER_ID:
        return SOLANA
    for info in EVM_CHAINS.values():
        if info.dexscreener_id == dexscreener_id:
            return info.name
    return None
