"""Testes do AsaasClient contra httpx.MockTransport (sem rede)."""

import json

import httpx
import pytest

from app.integrations.asaas_client import AsaasClient, AsaasError

BASE = "https://api.asaas.test/v3"


def _client(handler):
    return AsaasClient(api_key="key-123", base_url=BASE, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_list_customers_sends_token_and_limit():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["token"] = request.headers.get("access_token")
        return httpx.Response(200, json={"data": [{"id": "cus_1", "name": "Ana"}]})

    payload = await _client(handler).list_customers(limit=100)
    assert payload["data"][0]["id"] == "cus_1"
    assert seen["token"] == "key-123"
    assert seen["url"].path == "/v3/customers"
    assert seen["url"].params["limit"] == "100"


@pytest.mark.asyncio
async def test_list_payments_drops_empty_filters():
    seen = {}

    def handler(request):
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"data": []})

    await _client(handler).list_payments(status="RECEIVED", limit=100)
    assert seen["params"] == {"status": "RECEIVED", "limit": "100"}

    await _client(handler).list_payments(customer_id="cus_9")
    assert seen["params"] == {"customer": "cus_9"}


@pytest.mark.asyncio
async def test_create_payment_body():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "pay_1", **seen["body"]})

    await _client(handler).create_payment(
        customer_id="cus_1", value=700.004, due_date="2025-09-10",
        billing_type="BOLETO", description="Mensalidade da creche para Ana",
    )
    assert seen["method"] == "POST"
    assert seen["body"] == {
        "customer": "cus_1",
        "billingType": "BOLETO",
        "value": 700.0,
        "dueDate": "2025-09-10",
        "description": "Mensalidade da creche para Ana",
    }


@pytest.mark.asyncio
async def test_create_customer_omits_blank_fields():
    seen = {}

    def handler(request):
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "cus_1"})

    await _client(handler).create_customer(name="Ana", cpf_cnpj="12345678909", email="  ")
    assert seen["body"] == {"name": "Ana", "cpfCnpj": "12345678909"}


@pytest.mark.asyncio
async def test_http_error_carries_provider_body():
    def handler(request):
        return httpx.Response(400, json={"errors": [{"code": "invalid_cpfCnpj", "description": "CPF inválido"}]})

    with pytest.raises(AsaasError) as exc:
        await _client(handler).create_customer(name="Ana", cpf_cnpj="1")
    assert exc.value.code == "create_customer_failed"
    assert exc.value.data["_status_code"] == 400
    assert exc.value.data["errors"][0]["code"] == "invalid_cpfCnpj"


@pytest.mark.asyncio
async def test_non_json_error_body():
    def handler(request):
        return httpx.Response(502, text="Bad Gateway")

    with pytest.raises(AsaasError) as exc:
        await _client(handler).list_customers()
    assert exc.value.data == {"error": "Bad Gateway", "_status_code": 502}


@pytest.mark.asyncio
async def test_transport_failure_is_wrapped():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AsaasError) as exc:
        await _client(handler).list_payments()
    assert exc.value.code == "list_payments_failed"
    assert exc.value.data is None


@pytest.mark.asyncio
async def test_success_status_without_json_is_an_error():
    def handler(request):
        return httpx.Response(200, text="<html>maintenance</html>")

    with pytest.raises(AsaasError) as exc:
        await _client(handler).list_customers()
    assert exc.value.code == "list_customers_failed"
    assert exc.value.data == {"error": "<html>maintenance</html>", "_status_code": 200}


@pytest.mark.asyncio
async def test_success_status_with_non_object_json_is_an_error():
    def handler(request):
        return httpx.Response(200, json=[{"id": "cus_1"}])

    with pytest.raises(AsaasError) as exc:
        await _client(handler).list_customers()
    assert exc.value.data["_status_code"] == 200
