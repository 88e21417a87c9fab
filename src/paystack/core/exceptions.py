from enum import Enum
from typing import Any, Dict, Optional

class PaystackError(Exception):
    """Base exception class for all paystack client exceptions"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ConfigError(PaystackError):
    """Raised when there is a configuration error"""
    pass

class LoggerError(PaystackError):
    """Raised when there is a logging error"""
    pass

class ValidationError(PaystackError):
    """Raised when a request model cannot be built"""
    pass

class TransportError(PaystackError):
    """Raised by an HTTP client when a request cannot be completed"""
    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        body: Optional[str] = None
    ):
        super().__init__(message, details={"status": status} if status is not None else None)
        self.status = status
        self.body = body

class ResponseError(PaystackError):
    """Raised when a response body cannot be decoded into an envelope"""
    pass

class ResourceGroup(Enum):
    """API resource groups, one per endpoint module"""
    REFUND = "Refund"
    SUBSCRIPTION = "Subscription"
    GENERIC = "Generic"

class FailureStage(Enum):
    """Step of the request pipeline where an operation failed"""
    SERIALIZE = "serialize"
    TRANSPORT = "transport"
    DESERIALIZE = "deserialize"

class PaystackAPIError(PaystackError):
    """
    Error returned by every endpoint operation.

    The resource group acts as the variant tag; the message is the textual
    description of the underlying failure. ``stage`` records where in the
    pipeline it happened and is informational only.
    """
    def __init__(
        self,
        group: ResourceGroup,
        message: str,
        stage: Optional[FailureStage] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details=details)
        self.group = group
        self.stage = stage

    @property
    def status(self) -> Optional[int]:
        """HTTP status code of the failed call, when the server answered"""
        return self.details.get("status")

    def __str__(self) -> str:
        return f"{self.group.value} Error: {self.message}"

    def __repr__(self) -> str:
        return f"PaystackAPIError(group={self.group.name}, message={self.message!r})"
