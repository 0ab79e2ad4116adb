"""GoPlus Security API client: free EVM token security analysis."""

from src.analyzer.chains import chain_id_for
from src.providers.goplus.models import GoPlusTokenSecurity
from src.providers.http import JsonApiClient

BASE_URL = "https://api.gopluslabs.io/api/v1"


class GoPlusClient(JsonApiClient):
    """Async HTTP client for GoPlus token_security (free, no key)."""

    tag = "GOPLUS"

    def __init__(self, **kwargs) -> None:
        super().__init__(base_url=BASE_URL, **kwargs)

    async def _fetch_result(self, chain: str, address: str) -> dict | None:
        data = await self._get_json(
            f"/token_security/{chain_id_for(chain)}",
            params={"contract_addresses": address},
        )
        if not isinstance(data, dict):
            return None
        result = data.get("result")
        return result if isinstance(result, dict) else None

    async def get_token_security(self, chain: str, address: str) -> GoPlusTokenSecurity | None:
        """Fetch the security record for an EVM token on the given chain."""
        result = await self._fetch_result(chain, address)
        if not result:
            return None
        return _parse_report(result, address)

    async def has_token(self, chain: str, address: str) -> bool:
        """True if GoPlus knows this contract on the given chain (chain probing)."""
        result = await self._fetch_result(chain, address)
        return bool(result)


def _parse_bool(val: str | int | None) -> bool | None:
    """Parse GoPlus '0'/'1' string to bool."""
    if val is None or val == "":
        return None
    return str(val) == "1"


def _parse_tax(val: str | float | None) -> float | None:
    """Parse GoPlus tax string to float percentage."""
    if val is None or val == "":
        return None
    try:
        return float(val) * 100  # GoPlus returns 0.0-1.0, convert to 0-100
    except (ValueError, TypeError):
        return None


def _parse_int(val: str | int | None) -> int | None:
    if val is None or val == "":
        return None
    try:
        return int(val)
    except (ValueError, TypeError):
        return None


def _parse_report(result: dict, address: str) -> GoPlusTokenSecurity | None:
    """Parse GoPlus result map ({address: {...fields...}})."""
    token_data = result.get(address.lower()) or result.get(address)
    if not isinstance(token_data, dict):
        return None

    return GoPlusTokenSecurity(
        token_address=address.lower(),
        is_honeypot=_parse_bool(token_data.get("is_honeypot")),
        buy_tax=_parse_tax(token_data.get("buy_tax")),
        sell_tax=_parse_tax(token_data.get("sell_tax")),
        cannot_sell_all=_parse_bool(token_data.get("cannot_sell_all")),
        is_mintable=_parse_bool(token_data.get("is_mintable")),
        transfer_pausable=_parse_bool(token_data.get("transfer_pausable")),
        is_blacklisted=_parse_bool(token_data.get("is_blacklisted")),
        selfdestruct=_parse_bool(token_data.get("selfdestruct")),
        owner_change_balance=_parse_bool(token_data.get("owner_change_balance")),
        hidden_owner=_parse_bool(token_data.get("hidden_owner")),
        is_proxy=_parse_bool(token_data.get("is_proxy")),
        is_open_source=_parse_bool(token_data.get("is_open_source")),
        owner_address=token_data.get("owner_address") or None,
        holder_count=_parse_int(token_data.get("holder_count")),
        token_name=token_data.get("token_name") or None,
        token_symbol=token_data.get("token_symbol") or None,
    )
