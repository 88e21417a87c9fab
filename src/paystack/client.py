# src/paystack/client.py
# Created: 2026-10-18 11:26:45

from typing import Optional
import logging

from .core.config import Config, PAYSTACK_BASE_URL
from .core.exceptions import ConfigError
from .endpoints.refund import RefundEndpoints
from .endpoints.subscription import SubscriptionEndpoints
from .utils.api.api_client import AiohttpClient, APIConfig, HttpClient

logger = logging.getLogger(__name__)

class PaystackClient:
    """
    Entry point holding one endpoint object per resource group.

    All groups share the same API key and HTTP client. When no client is
    given an AiohttpClient is created and owned by this instance.
    """

    def __init__(
        self,
        key: str,
        http: Optional[HttpClient] = None,
        base_url: str = PAYSTACK_BASE_URL
    ):
        if not key:
            raise ConfigError("A secret key is required")
        self._owns_http = http is None
        self.http: HttpClient = http if http is not None else AiohttpClient(APIConfig(base_url=base_url))
        self.refund = RefundEndpoints(key, self.http, base_url)
        self.subscription = SubscriptionEndpoints(key, self.http, base_url)

    @classmethod
    def from_config(
        cls,
        config: Optional[Config] = None,
        http: Optional[HttpClient] = None
    ) -> "PaystackClient":
        """Build a client from configuration, reading the key from ``api.secret_key``"""
        config = config or Config()
        key = config.get("api.secret_key")
        if not key:
            raise ConfigError("api.secret_key is not configured (set PAYSTACK_API_SECRET_KEY)")
        api_config = APIConfig.from_config(config)
        if http is None:
            http = AiohttpClient(api_config)
            client = cls(key, http, api_config.base_url)
            client._owns_http = True
            return client
        return cls(key, http, api_config.base_url)

    async def close(self) -> None:
        """Close the HTTP client if this instance created it"""
        if self._owns_http and isinstance(self.http, AiohttpClient):
            await self.http.close()

    async def __aenter__(self) -> "PaystackClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
