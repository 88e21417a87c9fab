# src/paystack/endpoints/__init__.py

from .refund import RefundEndpoints
from .subscription import SubscriptionEndpoints

__all__ = ['RefundEndpoints', 'SubscriptionEndpoints']
