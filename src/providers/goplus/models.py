"""Data models for GoPlus Security API responses."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GoPlusTokenSecurity:
    """EVM token security record from GoPlus.

    Booleans are None when GoPlus omitted the field.
    """

    token_address: str
    is_honeypot: bool | None = None
    buy_tax: float | None = None  # percentage (0-100)
    sell_tax: float | None = None  # percentage (0-100)
    cannot_sell_all: bool | None = None
    is_mintable: bool | None = None
    transfer_pausable: bool | None = None
    is_blacklisted: bool | None = None
    selfdestruct: bool | None = None
    owner_change_balance: bool | None = None
    hidden_owner: bool | None = None
    is_proxy: bool | None = None
    is_open_source: bool | None = None
    owner_address: str | None = None
    holder_count: int | None = None
    token_name: str | None = None
    token_symbol: str | None = None
