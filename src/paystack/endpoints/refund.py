"""
Refund
======
Create and manage transaction refunds on your integration.
"""

from typing import List, Optional, Union

from ..core.exceptions import ResourceGroup
from ..core.utils import build_query
from ..models.common import Currency
from ..models.refund_models import CreateRefundRequest, RefundData, RetryRefundRequest
from ..utils.api.response_handler import Response
from .base import BaseEndpoints

class RefundEndpoints(BaseEndpoints):
    """Operations of the ``/refund`` route"""

    path = "refund"
    group = ResourceGroup.REFUND

    async def create_refund(self, request: CreateRefundRequest) -> Response[RefundData]:
        """
        Initiate a refund on your integration

        Args:
            request: Refund request body, see ``CreateRefundRequestBuilder``

        Returns:
            Envelope with the created refund
        """
        body = self._serialize("create_refund", request)
        return await self._post("create_refund", self.base_url, body, RefundData)

    async def retry_refund(
        self,
        id: int,
        request: RetryRefundRequest
    ) -> Response[RefundData]:
        """
        Retry a failed refund using the customer's bank account details

        Args:
            id: Id of the refund to retry
            request: Retry request body, see ``RetryRefundRequestBuilder``

        Returns:
            Envelope with the updated refund
        """
        url = self._url("retry_refund", "retry_with_customer_details", id)
        body = self._serialize("retry_refund", request)
        return await self._post("retry_refund", url, body, RefundData)

    async def list_refunds(
        self,
        transaction: Optional[str] = None,
        currency: Optional[Union[Currency, str]] = None,
        from_: Optional[str] = None,
        to: Optional[str] = None,
        per_page: Optional[int] = None,
        page: Optional[int] = None
    ) -> Response[List[RefundData]]:
        """
        List refunds available on your integration

        Args:
            transaction: Transaction id or reference to filter by
            currency: Currency to filter by
            from_: Start date, ISO 8601
            to: End date, ISO 8601
            per_page: Records per page
            page: Page number

        Returns:
            Envelope with a list of refunds
        """
        query = build_query([
            ("transaction", transaction),
            ("currency", currency),
            ("from", from_),
            ("to", to),
            ("perPage", per_page),
            ("page", page),
        ])
        return await self._get("list_refunds", self.base_url, query, List[RefundData])

    async def fetch_refund(self, id: int) -> Response[RefundData]:
        """Get details of a refund on your integration"""
        url = self._url("fetch_refund", id)
        return await self._get("fetch_refund", url, payload_type=RefundData)
