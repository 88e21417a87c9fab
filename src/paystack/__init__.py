# src/paystack/__init__.py
# Created: 2026-10-18 11:31:09

"""
Asynchronous client for the Paystack REST API.
"""

from .client import PaystackClient
from .core.config import Config, PAYSTACK_BASE_URL
from .core.exceptions import (
    PaystackError,
    PaystackAPIError,
    ResourceGroup,
    FailureStage,
    ConfigError,
    LoggerError,
    ValidationError,
    TransportError,
    ResponseError
)
from .core.logger import Logger
from .endpoints import RefundEndpoints, SubscriptionEndpoints
from .models import (
    Authorization,
    Currency,
    Domain,
    CreateRefundRequest,
    CreateRefundRequestBuilder,
    RefundAccountDetails,
    RefundData,
    RetryRefundRequest,
    RetryRefundRequestBuilder,
    CreateSubscriptionRequest,
    CreateSubscriptionRequestBuilder,
    ListSubscriptionsRequest,
    ListSubscriptionsRequestBuilder,
    Subscription,
    SubscriptionStatus,
    UpdateSubscriptionRequest,
    UpdateSubscriptionRequestBuilder
)
from .utils.api import AiohttpClient, APIConfig, HttpClient, Response

__all__ = [
    'PaystackClient',
    'Config',
    'PAYSTACK_BASE_URL',
    'PaystackError',
    'PaystackAPIError',
    'ResourceGroup',
    'FailureStage',
    'ConfigError',
    'LoggerError',
    'ValidationError',
    'TransportError',
    'ResponseError',
    'Logger',
    'RefundEndpoints',
    'SubscriptionEndpoints',
    'Authorization',
    'Currency',
    'Domain',
    'CreateRefundRequest',
    'CreateRefundRequestBuilder',
    'RefundAccountDetails',
    'RefundData',
    'RetryRefundRequest',
    'RetryRefundRequestBuilder',
    'CreateSubscriptionRequest',
    'CreateSubscriptionRequestBuilder',
    'ListSubscriptionsRequest',
    'ListSubscriptionsRequestBuilder',
    'Subscription',
    'SubscriptionStatus',
    'UpdateSubscriptionRequest',
    'UpdateSubscriptionRequestBuilder',
    'AiohttpClient',
    'APIConfig',
    'HttpClient',
    'Response'
]
