"""Shared GET-with-retry loop for the provider clients.

Every provider call is bounded by a timeout and a small number of retries with
exponential backoff. Whatever goes wrong (timeout, non-2xx, malformed JSON)
the call resolves to None: no single provider may abort an analysis.
"""

import asyncio
from typing import Any

import httpx
from loguru import logger

from src.providers.rate_limiter import RateLimiter

DEFAULT_TIMEOUT = 8.0
DEFAULT_MAX_RETRIES = 2
DEFAULT_BASE_DELAY = 1.0


class JsonApiClient:
    """Async JSON-over-HTTP client with retry, backoff and rate limiting."""

    tag = "HTTP"

    def __init__(
        self,
        *,
        base_url: str = "",
        max_rps: float = 2.0,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        base_delay: float = DEFAULT_BASE_DELAY,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json", **(headers or {})},
        )
        self._rate_limiter = RateLimiter(max_rps)
        self._max_retries = max_retries
        self._base_delay = base_delay

    async def close(self) -> None:
        await self._client.aclose()

    def _backoff(self, attempt: int) -> float:
        return self._base_delay * (2**attempt)

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any | None:
        """GET path and decode JSON. Returns None on any failure."""
        for attempt in range(self._max_retries + 1):
            try:
                await self._rate_limiter.acquire()
                resp = await self._client.get(path, params=params)

                if resp.status_code == 429 or resp.status_code >= 500:
                    if attempt < self._max_retries:
                        delay = self._backoff(attempt)
                        logger.debug(
                            f"[{self.tag}] HTTP {resp.status_code} for {path}, retry in {delay}s"
                        )
                        await asyncio.sleep(delay)
                        continue
                    logger.warning(f"[{self.tag}] HTTP {resp.status_code} for {path} after retries")
                    return None

                if resp.status_code != 200:
                    logger.debug(f"[{self.tag}] HTTP {resp.status_code} for {path}")
                    return None

                return resp.json()

            except httpx.TransportError as e:
                if attempt < self._max_retries:
                    delay = self._backoff(attempt)
                    logger.debug(f"[{self.tag}] {type(e).__name__}, retry in {delay}s")
                    await asyncio.sleep(delay)
                else:
                    logger.warning(
                        f"[{self.tag}] Failed after {self._max_retries + 1} attempts: {e!r}"
                    )
                    return None
            except ValueError as e:
                logger.debug(f"[{self.tag}] Malformed JSON for {path}: {e}")
                return None

        return None
