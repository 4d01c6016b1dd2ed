# app/integrations/asaas_client.py
from __future__ import annotations
import logging
from typing import Optional, Dict, Any

import httpx

logger = logging.getLogger(__name__)


class AsaasError(RuntimeError):
    def __init__(self, code: str, data: Any):
        super().__init__(code)
        self.code = code
        self.data = data


class AsaasClient:
    """
    Cliente HTTP do Asaas. Cada chamada é uma requisição única, sem retry.
    `transport` existe para testes (httpx.MockTransport).
    """

    def __init__(self, api_key: str, base_url: str = "https://api.asaas.com/v3",
                 timeout: float = 20.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._headers = {
            "accept": "application/json",
            "content-type": "application/json",
            "access_token": self.api_key,
        }

    async def _request(self, code: str, method: str, path: str, *,
                       params: Optional[Dict[str, Any]] = None,
                       json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                r = await client.request(method, f"{self.base_url}{path}", params=params,
                                         json=json, headers=self._headers)
        except httpx.HTTPError as e:
            logger.error("[ASAAS] %s %s falhou: %s", method, path, e)
            raise AsaasError(code, None) from e

        if r.status_code >= 400:
            # Tenta devolver o JSON de erro do Asaas
            try:
                data = r.json()
            except ValueError:
                data = {"error": r.text}
            if not isinstance(data, dict):
                data = {"error": data}
            data["_status_code"] = r.status_code
            logger.error("[ASAAS] %s %s -> HTTP %s: %s", method, path, r.status_code, data)
            raise AsaasError(code, data)

        # 2xx sem JSON (página de manutenção, proxy...) também é falha do provedor
        try:
            data = r.json()
        except ValueError:
            logger.error("[ASAAS] %s %s -> HTTP %s sem JSON: %s", method, path, r.status_code, r.text[:200])
            raise AsaasError(code, {"error": r.text, "_status_code": r.status_code})
        if not isinstance(data, dict):
            raise AsaasError(code, {"error": data, "_status_code": r.status_code})
        return data

    async def list_customers(self, *, limit: Optional[int] = None) -> Dict[str, Any]:
        return await self._request("list_customers_failed", "GET", "/customers",
                                   params={"limit": limit})

    async def create_customer(self, *, name: str, cpf_cnpj: Optional[str] = None,
                              email: Optional[str] = None,
                              mobile_phone: Optional[str] = None) -> Dict[str, Any]:
        payload = {
            "name": name,
            "cpfCnpj": (cpf_cnpj or "").strip() or None,
            "email": (email or "").strip() or None,
            "mobilePhone": (mobile_phone or "").strip() or None,
        }
        payload = {k: v for k, v in payload.items() if v is not None}
        return await self._request("create_customer_failed", "POST", "/customers", json=payload)

    async def create_payment(self, *, customer_id: str, value: float, due_date: str,
                             billing_type: str, description: Optional[str] = None) -> Dict[str, Any]:
        payload = {
            "customer": customer_id,
            "billingType": billing_type,
            "value": round(float(value), 2),
            "dueDate": due_date,
        }
        if description:
            payload["description"] = description
        return await self._request("create_payment_failed", "POST", "/payments", json=payload)

    async def list_payments(self, *, customer_id: Optional[str] = None,
                            status: Optional[str] = None,
                            limit: Optional[int] = None) -> Dict[str, Any]:
        return await self._request("list_payments_failed", "GET", "/payments",
                                   params={"customer": customer_id, "status": status, "limit": limit})
