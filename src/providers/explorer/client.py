"""Etherscan V2 client: one key and base URL for every supported EVM chain."""

from datetime import UTC, datetime

from loguru import logger

from src.analyzer.chains import chain_id_for
from src.providers.explorer.models import ExplorerReport
from src.providers.http import JsonApiClient

BASE_URL = "https://api.etherscan.io/v2/api"


class ExplorerClient(JsonApiClient):
    """Contract verification, proxy detection and creation lookup."""

    tag = "EXPLORER"

    def __init__(self, api_key: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._api_key = api_key

    async def _call(self, chain: str, **params: str) -> list | dict | str | None:
        """One Etherscan request; returns the `result` payload or None."""
        data = await self._get_json(
            BASE_URL,
            params={"chainid": chain_id_for(chain), "apikey": self._api_key, **params},
        )
        if not isinstance(data, dict):
            return None
        # Etherscan signals errors with status "0" and a message string in `result`
        if str(data.get("status", "1")) == "0" and not isinstance(data.get("result"), (list, dict)):
            logger.debug(f"[EXPLORER] {params.get('action')}: {data.get('message')} {data.get('result')}")
            return None
        return data.get("result")

    async def get_contract_report(self, chain: str, address: str) -> ExplorerReport | None:
        """Fetch verification + creation facts. None without an API key or source data."""
        if not self._api_key:
            return None

        source = await self._call(chain, module="contract", action="getsourcecode", address=address)
        if not isinstance(source, list) or not source or not isinstance(source[0], dict):
            return None
        src_row = source[0]

        creator = creation_tx = None
        creation_block = None
        creation_timestamp = None

        creation = await self._call(
            chain, module="contract", action="getcontractcreation", contractaddresses=address
        )
        if isinstance(creation, list) and creation and isinstance(creation[0], dict):
            row = creation[0]
            creator = row.get("contractCreator") or None
            creation_tx = row.get("txHash") or None
            creation_block = _parse_int(row.get("blockNumber"))

        if creation_block is not None:
            creation_timestamp = await self.get_block_timestamp(chain, creation_block)

        return ExplorerReport(
            verified=bool(src_row.get("SourceCode")),
            contract_name=src_row.get("ContractName") or None,
            is_proxy=str(src_row.get("Proxy", "0")) == "1",
            implementation=src_row.get("Implementation") or None,
            creator=creator,
            creation_tx=creation_tx,
            creation_block=creation_block,
            creation_timestamp=creation_timestamp,
        )

    async def get_block_timestamp(self, chain: str, block_number: int) -> datetime | None:
        result = await self._call(
            chain, module="block", action="getblockreward", blockno=str(block_number)
        )
        if not isinstance(result, dict):
            return None
        ts = _parse_int(result.get("timeStamp"))
        if ts is None or ts <= 0:
            return None
        try:
            return datetime.fromtimestamp(ts, tz=UTC)
        except (ValueError, OverflowError, OSError):
            logger.debug(f"[EXPLORER] Out-of-range timeStamp {ts} for block {block_number}")
            return None


def _parse_int(val: str | int | None) -> int | None:
    if val is None or val == "":
        return None
    try:
        return int(str(val), 0) if str(val).startswith("0x") else int(val)
    except (ValueError, TypeError):
        return None
