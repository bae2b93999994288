import logging
from typing import Any

import httpx

from wheels_router_mcp.data.config import RouterConfig
from wheels_router_mcp.errors import UpstreamHTTPError

logger = logging.getLogger(__name__)


class ProviderClient:
    """Async HTTP client for the upstream JSON providers.

    Usage:
        async with ProviderClient(config) as client:
            data = await client.get_json("Transitous", url, params)
    """

    def __init__(self, config: RouterConfig):
        """Initialize the client.

        Args:
            config: Configuration with user agent and timeout.
        """
        self._config = config
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "ProviderClient":
        """Enter async context - create HTTP client."""
        headers = {
            "User-Agent": self._config.user_agent,
            "Accept": "application/json",
        }
        self._client = httpx.AsyncClient(
            headers=headers, timeout=self._config.http_timeout_seconds
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context - close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get_json(self, provider: str, url: str, params: dict[str, str]) -> Any:
        """Issue a GET request and decode the JSON body.

        Args:
            provider: Provider display name, used in error messages.
            url: Endpoint URL.
            params: Query parameters.

        Returns:
            The decoded JSON payload, or None if the body is not valid JSON.

        Raises:
            RuntimeError: If client not initialized.
            UpstreamHTTPError: If the provider returns a non-success status.
            httpx.HTTPError: If the request itself fails.
        """
        if not self._client:
            raise RuntimeError("Client not initialized - use 'async with'")

        response = await self._client.get(url, params=params)
        if not response.is_success:
            logger.warning(f"{provider} returned HTTP {response.status_code}")
            raise UpstreamHTTPError(provider, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            # unreadable body is treated like an empty payload by the normalizers
            logger.warning(f"{provider} returned a non-JSON body: {e}")
            return None
