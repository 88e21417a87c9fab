"""
Subscriptions
=============
Create and manage recurring payments on your integration.
"""

from typing import List, Optional, Union

from pydantic import StrictStr

from ..core.exceptions import ResourceGroup
from ..core.utils import build_query
from ..models.subscription_models import (
    CreateSubscriptionRequest,
    ListSubscriptionsRequest,
    ManageLink,
    Subscription,
    UpdateSubscriptionRequest,
)
from ..utils.api.response_handler import Response
from .base import BaseEndpoints

class SubscriptionEndpoints(BaseEndpoints):
    """Operations of the ``/subscription`` route"""

    path = "subscription"
    group = ResourceGroup.SUBSCRIPTION

    async def create_subscription(
        self,
        request: CreateSubscriptionRequest
    ) -> Response[Subscription]:
        """
        Create a subscription on your integration

        Args:
            request: Request body, see ``CreateSubscriptionRequestBuilder``

        Returns:
            Envelope with the new subscription
        """
        body = self._serialize("create_subscription", request)
        return await self._post("create_subscription", self.base_url, body, Subscription)

    async def list_subscriptions(
        self,
        request: Optional[ListSubscriptionsRequest] = None
    ) -> Response[List[Subscription]]:
        """
        List subscriptions available on your integration

        Args:
            request: Optional filters, see ``ListSubscriptionsRequestBuilder``

        Returns:
            Envelope with a list of subscriptions
        """
        request = request or ListSubscriptionsRequest()
        query = build_query([
            ("perPage", request.per_page),
            ("page", request.page),
            ("customer", request.customer),
            ("plan", request.plan),
        ])
        return await self._get(
            "list_subscriptions", self.base_url, query, List[Subscription]
        )

    async def fetch_subscription(
        self,
        id_or_code: Union[int, str]
    ) -> Response[Subscription]:
        """Get details of a subscription by id or subscription code"""
        url = self._url("fetch_subscription", id_or_code)
        return await self._get("fetch_subscription", url, payload_type=Subscription)

    async def enable_subscription(
        self,
        request: UpdateSubscriptionRequest
    ) -> Response[None]:
        """Enable a subscription; the envelope carries no payload"""
        url = self._url("enable_subscription", "enable")
        body = self._serialize("enable_subscription", request)
        return await self._post("enable_subscription", url, body)

    async def disable_subscription(
        self,
        request: UpdateSubscriptionRequest
    ) -> Response[None]:
        """Disable a subscription; the envelope carries no payload"""
        url = self._url("disable_subscription", "disable")
        body = self._serialize("disable_subscription", request)
        return await self._post("disable_subscription", url, body)

    async def generate_update_subscription_link(self, code: str) -> Response[str]:
        """
        Generate a link for updating the card on a subscription

        Args:
            code: Subscription code

        Returns:
            Envelope whose payload is the link
        """
        url = self._url("generate_update_subscription_link", code, "manage", "link")
        response = await self._post(
            "generate_update_subscription_link", url, None, Union[ManageLink, StrictStr]
        )
        # the API nests the link as {"link": "..."}
        link = response.data
        if isinstance(link, ManageLink):
            link = link.link
        return Response(
            status=response.status,
            message=response.message,
            data=link,
            meta=response.meta
        )

    async def send_update_subscription_link(self, code: str) -> Response[str]:
        """Email the customer a link for updating the card on a subscription"""
        url = self._url("send_update_subscription_link", code, "manage", "email")
        return await self._post("send_update_subscription_link", url, None, StrictStr)
