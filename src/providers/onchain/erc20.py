"""Direct on-chain ERC-20 metadata reads (name/symbol) via JSON-RPC.

Highest-priority identity source: what the contract itself says.
Best-effort only; any RPC or decoding failure yields None.
"""

import asyncio
from dataclasses import dataclass

from loguru import logger
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3

ERC20_METADATA_ABI = [
    {
        "constant": True,
        "inputs": [],
        "name": "name",
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "symbol",
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
]


@dataclass(frozen=True)
class OnchainMetadata:
    name: str | None = None
    symbol: str | None = None


class Erc20MetadataReader:
    """Reads name()/symbol() from an ERC-20 contract on a configured chain."""

    def __init__(self, rpc_urls: dict[str, str], *, timeout: float = 8.0) -> None:
        self._rpc_urls = {chain: url for chain, url in rpc_urls.items() if url}
        self._timeout = timeout
        self._clients: dict[str, AsyncWeb3] = {}

    def _web3_for(self, chain: str) -> AsyncWeb3 | None:
        url = self._rpc_urls.get(chain)
        if not url:
            return None
        w3 = self._clients.get(chain)
        if w3 is None:
            w3 = AsyncWeb3(AsyncHTTPProvider(url, request_kwargs={"timeout": self._timeout}))
            self._clients[chain] = w3
        return w3

    async def read_metadata(self, chain: str, address: str) -> OnchainMetadata | None:
        w3 = self._web3_for(chain)
        if w3 is None:
            return None

        try:
            contract = w3.eth.contract(address=Web3.to_checksum_address(address), abi=ERC20_METADATA_ABI)
            name, symbol = await asyncio.wait_for(
                asyncio.gather(
                    contract.functions.name().call(),
                    contract.functions.symbol().call(),
                ),
                timeout=self._timeout,
            )
        except Exception as e:
            # Non-standard tokens (bytes32 name, no symbol) and RPC hiccups alike
            logger.debug(f"[ONCHAIN] metadata read failed for {address[:12]} on {chain}: {e!r}")
            return None

        name = name.strip() if isinstance(name, str) else None
        symbol = symbol.strip() if isinstance(symbol, str) else None
        if not name and not symbol:
            return None
        return OnchainMetadata(name=name or None, symbol=symbol or None)

    async def close(self) -> None:
        for w3 in self._clients.values():
            await w3.provider.disconnect()
        self._clients.clear()
