"""Curated allow-lists of canonical assets.

Process-wide, read-only lookup tables keyed by lower-cased address. They
suppress false positives for wrapped-native tokens and major stablecoins, and
supply trusted age/verification facts when live provider queries fail.

Tiers:
- core: system-trusted assets (stablecoins, wrapped natives, a few majors).
  Exempt from liquidity/verification/confidence penalties; never worse than
  MEDIUM risk without a critical flag.
- bluechip: established tokens; exempt from false "unverified"/"no liquidity" flags.
Every entry carries a curated launch date used as ground-truth token age.
"""

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType

from src.analyzer.chains import ARBITRUM, BASE, BSC, ETHEREUM, OPTIMISM, POLYGON, SOLANA

CORE = "core"
BLUECHIP = "bluechip"


@dataclass(frozen=True)
class KnownToken:
    address: str
    name: str
    symbol: str
    chain: str
    launched: date
    tier: str = BLUECHIP
    wrapped_native: bool = False


_ENTRIES: tuple[KnownToken, ...] = (
    # ===== ETHEREUM =====
    KnownToken("0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2", "Wrapped Ether", "WETH", ETHEREUM, date(2017, 12, 12), CORE, True),
    KnownToken("0xdac17f958d2ee523a2206206994597c13d831ec7", "Tether USD", "USDT", ETHEREUM, date(2017, 11, 28), CORE),
    KnownToken("0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48", "USD Coin", "USDC", ETHEREUM, date(2018, 8, 3), CORE),
    KnownToken("0x6b175474e89094c44da98b954eedeac495271d0f", "Dai Stablecoin", "DAI", ETHEREUM, date(2019, 11, 13), CORE),
    KnownToken("0x2260fac5e5542a773aa44fbcfedf7c193bc2c599", "Wrapped BTC", "WBTC", ETHEREUM, date(2018, 11, 24), CORE),
    KnownToken("0x1f9840a85d5af5bf1d1762f925bdaddc4201f984", "Uniswap", "UNI", ETHEREUM, date(2020, 9, 14), CORE),
    KnownToken("0x4fabb145d64652a948d72533023f6e7a623c7c53", "Binance USD", "BUSD", ETHEREUM, date(2019, 9, 10)),
    KnownToken("0x853d955acef822db058eb8505911ed77f175b99e", "Frax", "FRAX", ETHEREUM, date(2020, 12, 20)),
    KnownToken("0x7f39c581f595b53c5cb19bd0b3f8da6c935e2ca0", "Wrapped liquid staked Ether 2.0", "wstETH", ETHEREUM, date(2021, 2, 24)),
    KnownToken("0xae7ab96520de3a18e5e111b5eaab095312d7fe84", "Lido Staked Ether", "stETH", ETHEREUM, date(2020, 12, 18)),
    KnownToken("0x514910771af9ca656af840dff83e8264ecf986ca", "ChainLink Token", "LINK", ETHEREUM, date(2017, 9, 16)),
    KnownToken("0x7fc66500c84a76ad7e9c93437bfc5ac33e2ddae9", "Aave Token", "AAVE", ETHEREUM, date(2020, 10, 2)),
    KnownToken("0xc00e94cb662c3520282e6f5717214004a7f26888", "Compound", "COMP", ETHEREUM, date(2020, 3, 4)),
    KnownToken("0x6b3595068778dd592e39a122f4f5a5cf09c90fe2", "SushiToken", "SUSHI", ETHEREUM, date(2020, 8, 26)),
    KnownToken("0x9f8f72aa9304c8b593d555f12ef6589cc3a579a2", "Maker", "MKR", ETHEREUM, date(2017, 11, 25)),
    KnownToken("0x0bc529c00c6401aef6d220be8c6ea1667f6ad93e", "yearn.finance", "YFI", ETHEREUM, date(2020, 7, 17)),
    KnownToken("0xd533a949740bb3306d119cc777fa900ba034cd52", "Curve DAO Token", "CRV", ETHEREUM, date(2020, 8, 13)),
    KnownToken("0xba100000625a3754423978a60c9317c58a424e3d", "Balancer", "BAL", ETHEREUM, date(2020, 6, 20)),
    KnownToken("0x0d8775f648430679a709e98d2b0cb6250d2887ef", "Basic Attention Token", "BAT", ETHEREUM, date(2017, 5, 29)),
    KnownToken("0x95ad61b0a150d79219dcf64e1e6cc01f0b64c4ce", "SHIBA INU", "SHIB", ETHEREUM, date(2020, 7, 31)),
    KnownToken("0x7d1afa7b718fb893db30a3abc0cfc608aacfebb0", "Matic Token", "MATIC", ETHEREUM, date(2019, 4, 28)),
    KnownToken("0x4d224452801aced8b2f0aebe155379bb5d594381", "ApeCoin", "APE", ETHEREUM, date(2022, 3, 17)),
    KnownToken("0x3845badade8e6dff049820680d1f14bd3903a5d0", "The Sandbox", "SAND", ETHEREUM, date(2020, 8, 13)),
    KnownToken("0x0f5d2fb29fb7d3cfee444a200298f468908cc942", "Decentraland", "MANA", ETHEREUM, date(2017, 8, 8)),
    KnownToken("0xf629cbd94d3791c9250152bd8dfbdf380e2a3b9c", "Enjin Coin", "ENJ", ETHEREUM, date(2017, 7, 24)),
    KnownToken("0xa0b73e1ff0b80914ab6fe0444e65848c4c34450b", "Cronos", "CRO", ETHEREUM, date(2018, 11, 14)),
    KnownToken("0x6982508145454ce325ddbe47a25d4ec3d2311933", "Pepe", "PEPE", ETHEREUM, date(2023, 4, 14)),
    KnownToken("0x111111111117dc0aa78b770fa6a738034120c302", "1INCH Token", "1INCH", ETHEREUM, date(2020, 12, 24)),
    KnownToken("0xbb0e17ef65f82ab018d8edd776e8dd940327b28b", "Axie Infinity Shard", "AXS", ETHEREUM, date(2020, 10, 30)),
    KnownToken("0x1f573d6fb3f13d689ff844b4ce37794d79a7ff1c", "Bancor Network Token", "BNT", ETHEREUM, date(2017, 6, 10)),
    KnownToken("0xe41d2489571d322189246dafa5ebde1f4699f498", "0x Protocol Token", "ZRX", ETHEREUM, date(2017, 8, 11)),
    KnownToken("0x3432b6a60d23ca0dfca7761b7ab56459d9c964d0", "Frax Share", "FXS", ETHEREUM, date(2020, 12, 20)),
    KnownToken("0xc944e90c64b2c07662a292be6244bdf05cda44a7", "Graph Token", "GRT", ETHEREUM, date(2020, 12, 17)),
    # ===== BSC =====
    KnownToken("0xbb4cdb9cbd36b01bd1cbaebf2de08d9173bc095c", "Wrapped BNB", "WBNB", BSC, date(2020, 9, 3), CORE, True),
    KnownToken("0x55d398326f99059ff775485246999027b3197955", "Tether USD", "USDT", BSC, date(2020, 9, 4), CORE),
    KnownToken("0x8ac76a51cc950d9822d68b83fe1ad97b32cd580d", "USD Coin", "USDC", BSC, date(2020, 9, 14), CORE),
    KnownToken("0xe9e7cea3dedca5984780bafc599bd69add087d56", "Binance USD", "BUSD", BSC, date(2020, 9, 4), CORE),
    KnownToken("0x1af3f329e8be154074d8769d1ffa4ee058b1dbc3", "Dai Token", "DAI", BSC, date(2020, 9, 4)),
    KnownToken("0x2170ed0880ac9a755fd29b2688956bd959f933f8", "Ethereum Token", "ETH", BSC, date(2020, 9, 4)),
    KnownToken("0x7130d2a12b9bcbfae4f2634d864a1ee1ce3ead9c", "BTCB Token", "BTCB", BSC, date(2020, 9, 4)),
    KnownToken("0x0e09fabb73bd3ade0a17ecc321fd13a19e81ce82", "PancakeSwap Token", "CAKE", BSC, date(2020, 9, 20)),
    # ===== BASE =====
    # 0x42..06 is also WETH on Optimism; the Base entry carries the shared address.
    KnownToken("0x4200000000000000000000000000000000000006", "Wrapped Ether", "WETH", BASE, date(2023, 6, 15), CORE, True),
    KnownToken("0x833589fcd6edb6e08f4c7c32d4f71b54bda02913", "USD Coin", "USDC", BASE, date(2023, 9, 5), CORE),
    KnownToken("0x50c5725949a6f0c72e6c4a641f24049a917db0cb", "Dai Stablecoin", "DAI", BASE, date(2023, 7, 13), CORE),
    # ===== ARBITRUM =====
    KnownToken("0x82af49447d8a07e3bd95bd0d56f35241523fbab1", "Wrapped Ether", "WETH", ARBITRUM, date(2021, 5, 28), CORE, True),
    KnownToken("0xff970a61a04b1ca14834a43f5de4533ebddb5cc8", "USD Coin (Arb1)", "USDC.e", ARBITRUM, date(2021, 5, 28), CORE),
    KnownToken("0xfd086bc7cd5c481dcc9c85ebe478a1c0b69fcbb9", "Tether USD", "USDT", ARBITRUM, date(2021, 8, 31), CORE),
    KnownToken("0xda10009cbd5d07dd0cecc66161fc93d7c9000da1", "Dai Stablecoin", "DAI", ARBITRUM, date(2021, 8, 31), CORE),
    KnownToken("0x912ce59144191c1204e64559fe8253a0e49e6548", "Arbitrum", "ARB", ARBITRUM, date(2023, 3, 23)),
    # ===== POLYGON =====
    KnownToken("0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270", "Wrapped Matic", "WMATIC", POLYGON, date(2020, 5, 30), CORE, True),
    KnownToken("0x2791bca1f2de4661ed88a30c99a7a9449aa84174", "USD Coin (PoS)", "USDC.e", POLYGON, date(2020, 10, 8), CORE),
    KnownToken("0xc2132d05d31c914a87c6611c10748aeb04b58e8f", "Tether USD (PoS)", "USDT", POLYGON, date(2020, 10, 8), CORE),
    KnownToken("0x8f3cf7ad23cd3cadbd9735aff958023239c6a063", "Dai Stablecoin (PoS)", "DAI", POLYGON, date(2020, 10, 8)),
    KnownToken("0x7ceb23fd6bc0add59e62ac25578270cff1b9f619", "Wrapped Ether", "WETH", POLYGON, date(2020, 10, 8)),
    KnownToken("0x1bfd67037b42cf73acf2047067bd4f2c47d9bfd6", "Wrapped BTC (PoS)", "WBTC", POLYGON, date(2020, 10, 8)),
    KnownToken("0x0b3f868e0be5597d5db7feb59e1cadbb0fdda50a", "SushiToken (PoS)", "SUSHI", POLYGON, date(2021, 2, 23)),
    KnownToken("0xd6df932a45c0f255f85145f286ea0b292b21c90b", "Aave (PoS)", "AAVE", POLYGON, date(2021, 3, 31)),
    # ===== OPTIMISM =====
    KnownToken("0x7f5c764cbc14f9669b88837ca1490cca17c31607", "USD Coin (Bridged)", "USDC.e", OPTIMISM, date(2021, 11, 11), CORE),
    KnownToken("0x94b008aa00579c1307b0ef2c499ad98a8ce58e58", "Tether USD", "USDT", OPTIMISM, date(2021, 11, 11), CORE),
    KnownToken("0x4200000000000000000000000000000000000042", "Optimism", "OP", OPTIMISM, date(2022, 5, 31)),
    # ===== SOLANA =====
    KnownToken("So11111111111111111111111111111111111111112", "Wrapped SOL", "SOL", SOLANA, date(2020, 8, 1), CORE, True),
    KnownToken("EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v", "USD Coin", "USDC", SOLANA, date(2020, 10, 1), CORE),
    KnownToken("Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB", "USDT", "USDT", SOLANA, date(2021, 3, 1), CORE),
)

ALL_KNOWN_TOKENS: MappingProxyType[str, KnownToken] = MappingProxyType(
    {t.address.lower(): t for t in _ENTRIES}
)
CORE_TOKENS: MappingProxyType[str, KnownToken] = MappingProxyType(
    {k: t for k, t in ALL_KNOWN_TOKENS.items() if t.tier == CORE}
)
BLUECHIP_TOKENS: MappingProxyType[str, KnownToken] = MappingProxyType(
    {k: t for k, t in ALL_KNOWN_TOKENS.items() if t.tier == BLUECHIP}
)

WRAPPED_NATIVE_ADDRESSES: MappingProxyType[str, frozenset[str]] = MappingProxyType({
    ETHEREUM: frozenset({"0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"}),
    BSC: frozenset({"0xbb4cdb9cbd36b01bd1cbaebf2de08d9173bc095c"}),
    POLYGON: frozenset({"0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270"}),
    ARBITRUM: frozenset({"0x82af49447d8a07e3bd95bd0d56f35241523fbab1"}),
    BASE: frozenset({"0x4200000000000000000000000000000000000006"}),
    OPTIMISM: frozenset({"0x4200000000000000000000000000000000000006"}),
    SOLANA: frozenset({"so11111111111111111111111111111111111111112"}),
})

# Reference-currency legs of trading pairs; never the token of interest.
QUOTE_ASSET_SYMBOLS: frozenset[str] = frozenset({
    "WETH", "ETH", "WBNB", "BNB", "WMATIC", "MATIC", "WPOL", "POL",
    "USDC", "USDT", "DAI", "BUSD", "FDUSD", "USDC.E", "SOL", "WSOL", "WBTC",
})


def lookup_known(address: str) -> KnownToken | None:
    return ALL_KNOWN_TOKENS.get(address.lower())


def is_core_token(address: str) -> bool:
    return address.lower() in CORE_TOKENS


def is_wrapped_native(address: str, chain: str | None = None) -> bool:
    """Address-based only: a symbol such as "WETH" is trivially spoofable."""
    normalized = address.lower()
    core = CORE_TOKENS.get(normalized)
    if core is not None and core.wrapped_native:
        return True
    if chain is not None:
        return normalized in WRAPPED_NATIVE_ADDRESSES.get(chain, frozenset())
    return any(normalized in addrs for addrs in WRAPPED_NATIVE_ADDRESSES.values())


def is_allow_listed(address: str) -> bool:
    return address.lower() in ALL_KNOWN_TOKENS


def is_quote_asset_symbol(symbol: str | None) -> bool:
    return bool(symbol) and symbol.strip().upper() in QUOTE_ASSET_SYMBOLS
