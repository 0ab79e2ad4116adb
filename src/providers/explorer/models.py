"""Data models for block-explorer (Etherscan V2) responses."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ExplorerReport:
    """Verification and creation facts for one EVM contract."""

    verified: bool | None = None
    contract_name: str | None = None
    is_proxy: bool = False
    implementation: str | None = None
    creator: str | None = None
    creation_tx: str | None = None
    creation_block: int | None = None
    # Only set when the creation-block lookup itself succeeded
    creation_timestamp: datetime | None = None
