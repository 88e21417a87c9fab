from typing import Any, Dict, Optional
import logging
import yarl
from pydantic_core import PydanticSerializationError

from ..core.config import PAYSTACK_BASE_URL
from ..core.exceptions import (
    FailureStage,
    PaystackAPIError,
    PaystackError,
    ResourceGroup,
    TransportError,
)
from ..core.utils import QueryParams, validate_path_segment
from ..models.base import RequestModel
from ..utils.api.api_client import HttpClient
from ..utils.api.response_handler import Response, ResponseHandler, extract_error_message

logger = logging.getLogger(__name__)

class BaseEndpoints:
    """
    Request pipeline shared by every resource group.

    Subclasses set ``path`` and ``group``; every failure on the way is raised
    as a PaystackAPIError tagged with ``group``.
    """

    path: str = ""
    group: ResourceGroup = ResourceGroup.GENERIC

    def __init__(
        self,
        key: str,
        http: HttpClient,
        base_url: str = PAYSTACK_BASE_URL
    ):
        self._key = key
        self.base_url = str(yarl.URL(base_url.rstrip("/")) / self.path)
        self.http = http
        self._handler = ResponseHandler()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    def _fail(
        self,
        operation: str,
        error: Exception,
        stage: FailureStage
    ) -> PaystackAPIError:
        message = str(error) or type(error).__name__
        details = {}
        if isinstance(error, TransportError) and error.status is not None:
            details["status"] = error.status
            api_message = extract_error_message(error.body)
            if api_message:
                details["api_message"] = api_message
        elif isinstance(error, PaystackError):
            details.update(error.details)

        logger.error(
            f"{operation} failed during {stage.value}: {message}",
            extra={"resource": self.group.value, "operation": operation}
        )
        return PaystackAPIError(self.group, message, stage=stage, details=details)

    def _url(self, operation: str, *segments: Any) -> str:
        """Resource URL with validated id/code segments appended"""
        url = yarl.URL(self.base_url)
        try:
            for segment in segments:
                url = url / validate_path_segment(segment)
        except PaystackError as e:
            raise self._fail(operation, e, FailureStage.SERIALIZE) from e
        return str(url)

    def _serialize(self, operation: str, request: RequestModel) -> Dict[str, Any]:
        try:
            return request.to_json()
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise self._fail(operation, e, FailureStage.SERIALIZE) from e

    async def _get(
        self,
        operation: str,
        url: str,
        query: Optional[QueryParams] = None,
        payload_type: Optional[Any] = None
    ) -> Response[Any]:
        logger.debug(
            f"GET {url} query={query or []}",
            extra={"resource": self.group.value, "operation": operation}
        )
        try:
            text = await self.http.get(url, self._key, query or None)
        except TransportError as e:
            raise self._fail(operation, e, FailureStage.TRANSPORT) from e
        return self._parse(operation, text, payload_type)

    async def _post(
        self,
        operation: str,
        url: str,
        body: Optional[Any],
        payload_type: Optional[Any] = None
    ) -> Response[Any]:
        logger.debug(
            f"POST {url}",
            extra={"resource": self.group.value, "operation": operation}
        )
        try:
            text = await self.http.post(url, self._key, body)
        except TransportError as e:
            raise self._fail(operation, e, FailureStage.TRANSPORT) from e
        return self._parse(operation, text, payload_type)

    def _parse(
        self,
        operation: str,
        text: str,
        payload_type: Optional[Any]
    ) -> Response[Any]:
        try:
            return self._handler.parse(text, payload_type)
        except PaystackError as e:
            raise self._fail(operation, e, FailureStage.DESERIALIZE) from e
