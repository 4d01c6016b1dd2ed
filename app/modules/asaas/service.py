from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from app.core.errors import ValidationError
from app.integrations.asaas_client import AsaasError
from app.integrations.base import BillingProvider
from app.services.financial_overview import build_revenue_report
from app.services.student_status import classify
from app.utils.br import normalize_cpf_cnpj, normalize_mobile_phone, parse_valor
from app.modules.financeiro.models import RECEIVED
from .schemas import (
    AsaasCustomer, AsaasPayment, CustomerAndPaymentIn, CustomerAndPaymentOut,
    RevenueReportRow, StudentStatusOut,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

RESPOSTA_INESPERADA = "Resposta inesperada do Asaas"


def _items(payload: Optional[Dict[str, Any]], code: str) -> List[Any]:
    if payload is None:
        return []
    if not isinstance(payload, dict):
        raise AsaasError(code, {"error": RESPOSTA_INESPERADA})
    items = payload.get("data") or []
    if not isinstance(items, list):
        raise AsaasError(code, {"error": RESPOSTA_INESPERADA})
    return items


def _parse_items(model: Type[M], payload: Optional[Dict[str, Any]], code: str) -> List[M]:
    """Valida a página do Asaas; item fora do formato vira AsaasError (500 com mensagem)."""
    try:
        return [model.model_validate(item) for item in _items(payload, code)]
    except PydanticValidationError as e:
        logger.error("[ASAAS] %s: item fora do formato esperado: %s", code, e)
        raise AsaasError(code, {"error": RESPOSTA_INESPERADA}) from e


def _validate_charge_input(data: CustomerAndPaymentIn) -> tuple[str, float, str]:
    """Tudo é checado antes de qualquer chamada ao Asaas."""
    if (not (data.name or "").strip() or not (data.cpfCnpj or "").strip()
            or not data.value or not (data.dueDate or "").strip()):
        raise ValidationError("Todos os campos são obrigatórios.")

    cpf_cnpj = normalize_cpf_cnpj(data.cpfCnpj)
    if not cpf_cnpj:
        raise ValidationError("CPF/CNPJ inválido.")

    try:
        value = parse_valor(data.value)
    except ValueError:
        raise ValidationError("Valor da cobrança inválido.")
    if value <= 0:
        raise ValidationError("Valor da cobrança deve ser maior que zero.")

    try:
        due_date = date.fromisoformat(data.dueDate.strip()).isoformat()
    except ValueError:
        raise ValidationError("dueDate inválido (use YYYY-MM-DD).")

    return cpf_cnpj, value, due_date


async def create_customer_and_charge(
    provider: BillingProvider, data: CustomerAndPaymentIn, *, default_billing_type: str
) -> CustomerAndPaymentOut:
    """
    1) cria o cliente no Asaas; 2) cria a primeira cobrança para ele.
    Se o passo 2 falhar o cliente continua no Asaas (não há rollback).
    """
    cpf_cnpj, value, due_date = _validate_charge_input(data)
    name = data.name.strip()

    customer = await provider.create_customer(
        name=name,
        cpf_cnpj=cpf_cnpj,
        email=data.email,
        mobile_phone=normalize_mobile_phone(data.mobilePhone),
    )
    customer_id = customer.get("id") if isinstance(customer, dict) else None
    if not customer_id:
        logger.error("[ASAAS] cliente criado sem id na resposta: %s", customer)
        raise AsaasError("create_customer_failed", {"error": RESPOSTA_INESPERADA})

    try:
        payment = await provider.create_payment(
            customer_id=customer_id,
            value=value,
            due_date=due_date,
            billing_type=data.billingType or default_billing_type,
            description=f"Mensalidade da creche para {name}",
        )
    except AsaasError:
        logger.warning("[ASAAS] cliente %s ficou sem cobrança (criação do pagamento falhou)", customer_id)
        raise
    if not isinstance(payment, dict):
        raise AsaasError("create_payment_failed", {"error": RESPOSTA_INESPERADA})

    return CustomerAndPaymentOut(customer=customer, payment=payment)


async def students_status(provider: BillingProvider, *, limit: int) -> List[StudentStatusOut]:
    customers = _parse_items(AsaasCustomer, await provider.list_customers(limit=limit), "list_customers_failed")
    if not customers:
        return []

    async def _status_for(customer: AsaasCustomer) -> StudentStatusOut:
        payload = await provider.list_payments(customer_id=customer.id, limit=limit)
        derived = classify(_parse_items(AsaasPayment, payload, "list_payments_failed"))
        return StudentStatusOut(
            id=customer.id,
            name=customer.name,
            status=derived.status,
            nextDueDate=derived.next_due_date,
            monthlyFee=derived.fee,
        )

    # uma busca por cliente, todas em paralelo; gather devolve na ordem dos clientes
    return list(await asyncio.gather(*(_status_for(c) for c in customers)))


async def revenue_report(provider: BillingProvider, *, limit: int) -> List[RevenueReportRow]:
    customers = _parse_items(AsaasCustomer, await provider.list_customers(limit=limit), "list_customers_failed")
    payload = await provider.list_payments(status=RECEIVED, limit=limit)
    payments = _parse_items(AsaasPayment, payload, "list_payments_failed")
    return build_revenue_report(customers, payments)
