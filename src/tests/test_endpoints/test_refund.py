import pytest
from paystack.core.exceptions import (
    FailureStage,
    PaystackAPIError,
    ResourceGroup,
    TransportError,
    ValidationError
)
from paystack.models.common import Currency
from paystack.models.refund_models import (
    CreateRefundRequestBuilder,
    RefundAccountDetails,
    RefundData,
    RetryRefundRequestBuilder
)

BASE = "https://api.paystack.co/refund"

def envelope(message, data=None, **extra):
    body = {"status": True, "message": message}
    if data is not None:
        body["data"] = data
    body.update(extra)
    return body

@pytest.mark.asyncio
async def test_create_refund(client, http, api_key, refund_payload):
    """Test create posts the serialized request to the base route"""
    http.queue(envelope("Refund has been queued for processing", refund_payload))
    request = CreateRefundRequestBuilder().transaction("T685312322670591").amount(500000).build()

    response = await client.refund.create_refund(request)

    assert response.status is True
    assert isinstance(response.data, RefundData)
    assert http.calls == [
        ("POST", BASE, api_key, {"transaction": "T685312322670591", "amount": 500000})
    ]

@pytest.mark.asyncio
async def test_create_refund_for_unknown_transaction(client, http):
    """Test a rejected create is reported as a refund error"""
    body = '{"status": false, "message": "Transaction reference not found"}'
    http.queue(TransportError(f"Request failed with status code: 400 - {body}", status=400, body=body))
    request = CreateRefundRequestBuilder().transaction("invalid_transaction_reference").build()

    with pytest.raises(PaystackAPIError) as exc_info:
        await client.refund.create_refund(request)

    error = exc_info.value
    assert error.group is ResourceGroup.REFUND
    assert error.stage is FailureStage.TRANSPORT
    assert error.status == 400
    assert error.details["api_message"] == "Transaction reference not found"
    assert "status code: 400" in str(error)

def test_create_refund_build_fails_before_call(http):
    """Test an incomplete request never reaches the client"""
    with pytest.raises(ValidationError):
        CreateRefundRequestBuilder().currency(Currency.NGN).build()
    assert http.calls == []

@pytest.mark.asyncio
async def test_retry_refund(client, http, refund_payload):
    """Test retry posts account details to the retry route"""
    http.queue(envelope("Refund retried", dict(refund_payload, status="pending")))
    details = RefundAccountDetails(currency="NGN", account_number="0123456789", bank_id="9")
    request = RetryRefundRequestBuilder().refund_account_details(details).build()

    response = await client.refund.retry_refund(1, request)

    assert response.data.status == "pending"
    method, url, _, body = http.calls[0]
    assert method == "POST"
    assert url == f"{BASE}/retry_with_customer_details/1"
    assert body["refund_account_details"]["bank_id"] == "9"

@pytest.mark.asyncio
async def test_list_refunds_without_filters(client, http, api_key, refund_payload):
    """Test no filters means no query string"""
    http.queue(envelope("Refunds retrieved", [refund_payload]))

    response = await client.refund.list_refunds()

    assert response.message == "Refunds retrieved"
    assert len(response.data) == 1
    assert http.calls == [("GET", BASE, api_key, None)]

@pytest.mark.asyncio
async def test_list_refunds_with_all_filters(client, http):
    """Test filters are sent in a stable order"""
    http.queue(envelope("Refunds retrieved", []))

    await client.refund.list_refunds(
        transaction="T1",
        currency=Currency.NGN,
        from_="2024-01-01",
        to="2024-12-31",
        per_page=5,
        page=2
    )

    assert http.calls[0][3] == [
        ("transaction", "T1"),
        ("currency", "NGN"),
        ("from", "2024-01-01"),
        ("to", "2024-12-31"),
        ("perPage", "5"),
        ("page", "2")
    ]

@pytest.mark.asyncio
async def test_list_refunds_with_subset(client, http):
    """Test only supplied filters are sent"""
    http.queue(envelope("Refunds retrieved", []))

    await client.refund.list_refunds(per_page=5, currency="GHS")

    assert http.calls[0][3] == [("currency", "GHS"), ("perPage", "5")]

@pytest.mark.asyncio
async def test_fetch_refund(client, http, api_key, refund_payload):
    """Test fetch appends the id to the route"""
    http.queue(envelope("Refund retrieved", refund_payload))

    response = await client.refund.fetch_refund(1)

    assert response.data.id == 1
    assert http.calls == [("GET", f"{BASE}/1", api_key, None)]

@pytest.mark.asyncio
async def test_fetch_nonexistent_refund(client, http, not_found):
    """Test a missing refund is an error, not a crash"""
    http.queue(not_found)

    with pytest.raises(PaystackAPIError) as exc_info:
        await client.refund.fetch_refund(0)

    assert exc_info.value.status == 404
    assert str(exc_info.value).startswith("Refund Error:")
    assert "status code: 404" in str(exc_info.value)

@pytest.mark.asyncio
async def test_malformed_response(client, http):
    """Test undecodable bodies are reported as refund errors"""
    http.queue('{"status": true, "message": "Refund retrieved", "data": {"id": 1}}')

    with pytest.raises(PaystackAPIError) as exc_info:
        await client.refund.fetch_refund(1)

    assert exc_info.value.group is ResourceGroup.REFUND
    assert exc_info.value.stage is FailureStage.DESERIALIZE
    assert "missing field" in exc_info.value.message

@pytest.mark.asyncio
async def test_invalid_id(client, http):
    """Test a negative id is rejected before any call"""
    with pytest.raises(PaystackAPIError) as exc_info:
        await client.refund.fetch_refund(-1)

    assert exc_info.value.stage is FailureStage.SERIALIZE
    assert http.calls == []
