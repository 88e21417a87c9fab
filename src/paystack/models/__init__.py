# src/paystack/models/__init__.py

from .common import Authorization, Currency, Domain
from .refund_models import (
    CreateRefundRequest,
    CreateRefundRequestBuilder,
    RefundAccountDetails,
    RefundData,
    RetryRefundRequest,
    RetryRefundRequestBuilder
)
from .subscription_models import (
    CreateSubscriptionRequest,
    CreateSubscriptionRequestBuilder,
    ListSubscriptionsRequest,
    ListSubscriptionsRequestBuilder,
    Subscription,
    SubscriptionStatus,
    UpdateSubscriptionRequest,
    UpdateSubscriptionRequestBuilder
)

__all__ = [
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
    'UpdateSubscriptionRequestBuilder'
]
