# src/paystack/utils/api/__init__.py
# Created: 2026-10-18 10:12:31

"""
HTTP transport and response decoding used by the endpoint groups.
"""

from .api_client import (
    AiohttpClient,
    APIConfig,
    HttpClient,
    QueryParams,
    RequestMethod
)

from .response_handler import (
    Response,
    ResponseHandler,
    extract_error_message
)

__all__ = [
    'AiohttpClient',
    'APIConfig',
    'HttpClient',
    'QueryParams',
    'RequestMethod',
    'Response',
    'ResponseHandler',
    'extract_error_message'
]
