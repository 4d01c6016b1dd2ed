# app/integrations/base.py
from __future__ import annotations
from typing import Any, Dict, Optional, Protocol


class BillingProvider(Protocol):
    """
    O que o backend precisa de um provedor de cobrança.
    Todas as listagens devolvem o payload paginado do provedor
    ({"data": [...], "hasMore": ..., ...}) numa única página.
    """

    async def list_customers(self, *, limit: Optional[int] = None) -> Dict[str, Any]: ...

    async def create_customer(self, *, name: str, cpf_cnpj: Optional[str] = None,
                              email: Optional[str] = None,
                              mobile_phone: Optional[str] = None) -> Dict[str, Any]: ...

    async def create_payment(self, *, customer_id: str, value: float, due_date: str,
                             billing_type: str, description: Optional[str] = None) -> Dict[str, Any]: ...

    async def list_payments(self, *, customer_id: Optional[str] = None,
                            status: Optional[str] = None,
                            limit: Optional[int] = None) -> Dict[str, Any]: ...
