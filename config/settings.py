from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False
    log_file: str = "logs/tokenhealth_{time:YYYY-MM-DD}.log"  # empty disables the file sink

    # Etherscan V2 (one key covers every supported EVM chain)
    etherscan_api_key: str = ""

    # JSON-RPC endpoints for on-chain name()/symbol() reads
    eth_rpc_url: str = "https://ethereum-rpc.publicnode.com"
    bsc_rpc_url: str = "https://bsc-dataseed.binance.org"
    base_rpc_url: str = "https://mainnet.base.org"
    arbitrum_rpc_url: str = "https://arb1.arbitrum.io/rpc"
    polygon_rpc_url: str = "https://polygon-rpc.com"
    optimism_rpc_url: str = "https://mainnet.optimism.io"

    # Feature flags: providers
    enable_goplus: bool = True
    enable_dexscreener: bool = True
    enable_explorer: bool = True
    enable_rugcheck: bool = True
    enable_onchain_metadata: bool = True

    # Outbound request policy (per provider call)
    request_timeout_sec: float = 8.0
    max_retries: int = 2
    retry_base_delay_sec: float = 1.0

    # Rate limits
    goplus_max_rps: float = 2.0
    dexscreener_max_rps: float = 4.0
    explorer_max_rps: float = 4.0  # Etherscan free tier = 5 RPS
    rugcheck_max_rps: float = 2.0

    # Chain detection: each GoPlus probe is bounded individually and as a group
    chain_probe_timeout_sec: float = 5.0
    chain_detection_timeout_sec: float = 8.0

    # Caller-side bound for one whole analysis; on expiry the fallback report is returned
    analysis_timeout_sec: float = 30.0


settings = Settings()
