"""
Refund models.

``RefundData.transaction`` is a full transaction object on create and a
plain numeric id on list and fetch, so it is kept as raw JSON.
"""

from typing import Any, Optional, Union

from pydantic import AliasChoices, Field, StrictBool, StrictInt, StrictStr

from .base import RequestBuilder, RequestModel, ResponseModel
from .common import Currency

class CreateRefundRequest(RequestModel):
    """Request body for creating a refund"""
    # transaction reference or id
    transaction: str
    # in the subunit of the currency; defaults to the full transaction amount
    amount: Optional[int] = None
    currency: Optional[Union[Currency, str]] = None
    customer_note: Optional[str] = None
    merchant_note: Optional[str] = None

    @classmethod
    def builder(cls) -> "CreateRefundRequestBuilder":
        return CreateRefundRequestBuilder()

class RefundAccountDetails(RequestModel):
    """Customer bank account used when retrying a refund"""
    # must match the payment currency
    currency: Union[Currency, str]
    account_number: str
    # id from the list banks endpoint
    bank_id: str

class RetryRefundRequest(RequestModel):
    """Request body for retrying a failed refund"""
    refund_account_details: RefundAccountDetails

    @classmethod
    def builder(cls) -> "RetryRefundRequestBuilder":
        return RetryRefundRequestBuilder()

class CreateRefundRequestBuilder(RequestBuilder[CreateRefundRequest]):
    model = CreateRefundRequest

class RetryRefundRequestBuilder(RequestBuilder[RetryRefundRequest]):
    model = RetryRefundRequest

class RefundData(ResponseModel):
    """Refund returned by create, retry, list and fetch"""
    id: StrictInt
    amount: StrictInt
    currency: StrictStr
    # pending, processing, processed, failed
    status: StrictStr
    integration: Optional[StrictInt] = None
    domain: Optional[StrictStr] = None
    transaction: Optional[Any] = None
    deducted_amount: Optional[StrictInt] = None
    channel: Optional[StrictStr] = None
    fully_deducted: Optional[StrictBool] = None
    refunded_by: Optional[StrictStr] = None
    refunded_at: Optional[StrictStr] = None
    expected_at: Optional[StrictStr] = None
    customer_note: Optional[StrictStr] = None
    merchant_note: Optional[StrictStr] = None
    created_at: Optional[StrictStr] = Field(
        None, validation_alias=AliasChoices("created_at", "createdAt")
    )
    updated_at: Optional[StrictStr] = Field(
        None, validation_alias=AliasChoices("updated_at", "updatedAt")
    )
