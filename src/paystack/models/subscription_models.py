from enum import Enum
from typing import Any, Optional, Union

from pydantic import AliasChoices, Field, StrictInt, StrictStr

from .base import RequestBuilder, RequestModel, ResponseModel
from .common import Authorization, Domain

class SubscriptionStatus(str, Enum):
    """Lifecycle states of a subscription"""
    ACTIVE = "active"
    NON_RENEWING = "non-renewing"
    ATTENTION = "attention"
    COMPLETED = "completed"
    COMPLETE = "complete"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value

class Subscription(ResponseModel):
    """
    Subscription returned by create, list and fetch.

    ``customer`` and ``plan`` hold numeric ids on create and embedded objects
    on fetch, so they are kept as raw JSON. Unknown ``status`` and ``domain``
    values are kept as plain strings.
    """
    id: StrictInt
    subscription_code: StrictStr
    status: Union[SubscriptionStatus, StrictStr] = Field(union_mode="left_to_right")
    customer: Optional[Any] = None
    plan: Optional[Any] = None
    integration: Optional[StrictInt] = None
    domain: Optional[Union[Domain, StrictStr]] = Field(None, union_mode="left_to_right")
    start: Optional[StrictInt] = None
    quantity: Optional[StrictInt] = None
    amount: Optional[StrictInt] = None
    email_token: Optional[StrictStr] = None
    authorization: Optional[Authorization] = None
    easy_cron_id: Optional[StrictStr] = None
    cron_expression: Optional[StrictStr] = None
    next_payment_date: Optional[StrictStr] = None
    open_invoice: Optional[StrictStr] = None
    invoice_limit: Optional[StrictInt] = None
    split_code: Optional[StrictStr] = None
    payments_count: Optional[StrictInt] = None
    most_recent_invoice: Optional[Any] = None
    cancelled_at: Optional[StrictStr] = Field(
        None, validation_alias=AliasChoices("cancelled_at", "cancelledAt")
    )
    created_at: Optional[StrictStr] = Field(
        None, validation_alias=AliasChoices("created_at", "createdAt")
    )
    updated_at: Optional[StrictStr] = Field(
        None, validation_alias=AliasChoices("updated_at", "updatedAt")
    )

class ManageLink(ResponseModel):
    """Payload of the generate-update-link route"""
    link: Optional[StrictStr] = None

class CreateSubscriptionRequest(RequestModel):
    """Request body for creating a subscription"""
    # email address or customer code
    customer: str
    # plan code
    plan: str
    # defaults to the customer's most recent authorization
    authorization: Optional[str] = None
    # ISO 8601, first debit date
    start_date: Optional[str] = None

    @classmethod
    def builder(cls) -> "CreateSubscriptionRequestBuilder":
        return CreateSubscriptionRequestBuilder()

class ListSubscriptionsRequest(RequestModel):
    """Filters for listing subscriptions, all optional"""
    page: Optional[int] = None
    per_page: Optional[int] = None
    # customer id
    customer: Optional[int] = None
    # plan id or code
    plan: Optional[str] = None

    @classmethod
    def builder(cls) -> "ListSubscriptionsRequestBuilder":
        return ListSubscriptionsRequestBuilder()

class UpdateSubscriptionRequest(RequestModel):
    """Code and email token identifying a subscription to enable or disable"""
    code: str
    token: str

    @classmethod
    def builder(cls) -> "UpdateSubscriptionRequestBuilder":
        return UpdateSubscriptionRequestBuilder()

class CreateSubscriptionRequestBuilder(RequestBuilder[CreateSubscriptionRequest]):
    model = CreateSubscriptionRequest

class ListSubscriptionsRequestBuilder(RequestBuilder[ListSubscriptionsRequest]):
    model = ListSubscriptionsRequest

class UpdateSubscriptionRequestBuilder(RequestBuilder[UpdateSubscriptionRequest]):
    model = UpdateSubscriptionRequest
