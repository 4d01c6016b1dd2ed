from __future__ import annotations
from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from app.core.config import settings
from app.core.dependencies import get_billing_provider
from app.core.errors import UpstreamError
from app.integrations.asaas_client import AsaasError
from app.integrations.base import BillingProvider
from app.modules.asaas import service
from app.modules.asaas.schemas import (
    CustomerAndPaymentIn, CustomerAndPaymentOut, HealthOut,
    RevenueReportOut, StudentsStatusOut,
)

router = APIRouter()


# ---------- Endpoints ----------
@router.get("/customers", response_model=Dict[str, Any])
async def list_customers(provider: BillingProvider = Depends(get_billing_provider)):
    """Repassa a listagem de clientes (alunos) do Asaas como veio."""
    try:
        return await provider.list_customers()
    except AsaasError:
        raise UpstreamError("Erro ao buscar clientes no Asaas.")


@router.post("/create-customer-and-payment", response_model=CustomerAndPaymentOut,
             status_code=status.HTTP_201_CREATED)
async def create_customer_and_payment(
    payload: CustomerAndPaymentIn,
    provider: BillingProvider = Depends(get_billing_provider),
):
    try:
        return await service.create_customer_and_charge(
            provider, payload, default_billing_type=settings.ASAAS_BILLING_TYPE
        )
    except AsaasError as e:
        raise UpstreamError("Erro ao processar a criação no Asaas.", details=e.data)


@router.get("/students-status", response_model=StudentsStatusOut)
async def students_status(provider: BillingProvider = Depends(get_billing_provider)):
    try:
        students = await service.students_status(provider, limit=settings.ASAAS_PAGE_LIMIT)
    except AsaasError:
        raise UpstreamError("Erro ao obter status dos alunos.")
    return StudentsStatusOut(students=students)


@router.get("/revenue-report", response_model=RevenueReportOut)
async def revenue_report(provider: BillingProvider = Depends(get_billing_provider)):
    """Relatório de receitas: cobranças RECEIVED com o nome do cliente."""
    try:
        report = await service.revenue_report(provider, limit=settings.ASAAS_PAGE_LIMIT)
    except AsaasError:
        raise UpstreamError("Erro ao gerar relatório de receitas.")
    return RevenueReportOut(report=report)


@router.get("/billing/health", response_model=HealthOut)
async def health_check(provider: BillingProvider = Depends(get_billing_provider)):
    try:
        await provider.list_customers(limit=1)
    except AsaasError as e:
        status_code = (e.data or {}).get("_status_code")
        if status_code:
            return HealthOut(ok=False, message=f"HTTP {status_code}: {str(e.data)[:200]}")
        return HealthOut(ok=False, message="Falha de comunicação com o Asaas")
    return HealthOut(ok=True, message="Conexão com Asaas OK")
