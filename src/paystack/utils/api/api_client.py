# src/paystack/utils/api/api_client.py
# Created: 2026-10-18 10:12:31

from typing import Dict, Any, Optional, Protocol, runtime_checkable
from dataclasses import dataclass
from enum import Enum
import logging
import json
import aiohttp
import yarl

from ...core.config import Config, PAYSTACK_BASE_URL
from ...core.exceptions import TransportError
from ...core.utils import QueryParams

logger = logging.getLogger(__name__)

class RequestMethod(Enum):
    """HTTP request methods used by the API"""
    GET = "GET"
    POST = "POST"

@dataclass(frozen=True)
class APIConfig:
    """Configuration for the HTTP client"""
    base_url: str = PAYSTACK_BASE_URL
    timeout: float = 30.0
    verify_ssl: bool = True
    user_agent: str = "paystack-client/0.1.0"

    @classmethod
    def from_config(cls, config: Config) -> "APIConfig":
        """Build client settings from the ``api`` section of a Config"""
        return cls(
            base_url=config.get("api.base_url", PAYSTACK_BASE_URL),
            timeout=float(config.get("api.timeout", 30.0)),
            verify_ssl=bool(config.get("api.verify_ssl", True)),
            user_agent=config.get("api.user_agent", cls.user_agent)
        )

@runtime_checkable
class HttpClient(Protocol):
    """
    Capability every endpoint group talks to.

    Both methods authenticate with the given API key as a bearer token and
    return the raw response text. Failures are raised as TransportError.
    """

    async def get(
        self,
        url: str,
        api_key: str,
        query: Optional[QueryParams] = None
    ) -> str:
        ...

    async def post(
        self,
        url: str,
        api_key: str,
        body: Optional[Any]
    ) -> str:
        ...

class AiohttpClient:
    """
    Default HttpClient backed by an aiohttp session.

    The session is opened on first use and shared by every call made
    through this client. Call ``close`` (or use ``async with``) when done.
    """

    def __init__(self, config: Optional[APIConfig] = None):
        self.config = config or APIConfig()
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "AiohttpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent}
            )
        return self._session

    async def close(self) -> None:
        """Close the underlying session"""
        if self._session and not self._session.closed:
            await self._session.close()

    @staticmethod
    def _headers(api_key: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json"
        }

    async def request(
        self,
        method: RequestMethod,
        url: str,
        api_key: str,
        query: Optional[QueryParams] = None,
        body: Optional[Any] = None
    ) -> str:
        """
        Send a request and return the response body as text

        Args:
            method: HTTP method to use
            url: Absolute URL of the endpoint
            api_key: Secret key sent as a bearer token
            query: Ordered query parameters
            body: JSON-compatible request body, omitted when None

        Returns:
            Raw response text

        Raises:
            TransportError: on connection failures and non-2xx responses
        """
        session = await self._get_session()
        data = json.dumps(body) if body is not None else None

        logger.debug(f"{method.value} {yarl.URL(url).with_query(query or {})}")
        try:
            async with session.request(
                method.value,
                url,
                params=query or None,
                data=data,
                headers=self._headers(api_key),
                ssl=self.config.verify_ssl
            ) as response:
                text = await response.text()
                if response.status >= 400:
                    raise TransportError(
                        f"Request failed with status code: {response.status} - {text}",
                        status=response.status,
                        body=text
                    )
                return text
        except TransportError:
            raise
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.error(f"{method.value} {url} failed: {str(e) or type(e).__name__}")
            raise TransportError(f"Request failed: {str(e) or type(e).__name__}")

    async def get(
        self,
        url: str,
        api_key: str,
        query: Optional[QueryParams] = None
    ) -> str:
        """Perform GET request"""
        return await self.request(RequestMethod.GET, url, api_key, query=query)

    async def post(
        self,
        url: str,
        api_key: str,
        body: Optional[Any]
    ) -> str:
        """Perform POST request"""
        return await self.request(RequestMethod.POST, url, api_key, body=body)
