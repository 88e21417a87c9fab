# src/paystack/utils/api/response_handler.py
# Created: 2026-10-18 10:40:02

from typing import Dict, Any, Optional, TypeVar, Generic
import logging
import json

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, ValidationError

from ...core.exceptions import ResponseError
from ...models.base import describe_errors

T = TypeVar('T')
logger = logging.getLogger(__name__)

class Response(BaseModel, Generic[T]):
    """Envelope wrapping every API response"""
    model_config = ConfigDict(frozen=True)

    status: StrictBool
    message: StrictStr
    data: Optional[T] = None
    meta: Optional[Dict[str, Any]] = None

    def to_wire(self) -> Dict[str, Any]:
        """Serialize the envelope back to its wire shape"""
        return self.model_dump(mode="json", exclude_none=True)

class ResponseHandler:
    """
    Decodes raw response text into typed envelopes.

    ``payload_type`` is any type pydantic can validate, such as a
    ResponseModel subclass, ``List[RefundData]`` or ``str``. When it is None
    the payload is ignored.
    """

    def parse(self, text: str, payload_type: Optional[Any] = None) -> Response[Any]:
        """
        Parse a response body

        Args:
            text: Raw response text
            payload_type: Type of the ``data`` payload

        Returns:
            Response envelope with a decoded payload

        Raises:
            ResponseError: if the body is not an envelope of the expected shape
        """
        envelope = Response[Any] if payload_type is None else Response[payload_type]
        try:
            response = envelope.model_validate_json(text)
        except ValidationError as e:
            raise ResponseError(
                describe_errors(e),
                details={"errors": e.errors(include_url=False)}
            ) from e

        if payload_type is None and response.data is not None:
            return response.model_copy(update={"data": None})
        return response

def extract_error_message(body: Optional[str]) -> Optional[str]:
    """Pull the ``message`` out of an error response body, if it has one"""
    if not body:
        return None
    try:
        parsed = json.loads(body)
    except ValueError:
        return None
    if isinstance(parsed, dict) and isinstance(parsed.get("message"), str):
        return parsed["message"]
    return None
