from __future__ import annotations
from datetime import date
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, StrictFloat, StrictInt, field_validator

from app.modules.financeiro.models import normalize_status

BillingType = Literal["BOLETO", "PIX", "CREDIT_CARD", "UNDEFINED"]


# ---------- itens que chegam do Asaas ----------
class AsaasCustomer(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: Optional[str] = None


class AsaasPayment(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    customer: Optional[str] = None
    value: float = 0
    dueDate: date
    status: str = ""
    paymentDate: Optional[date] = None
    invoiceUrl: Optional[str] = None
    description: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _norm_status(cls, v):
        return normalize_status(v)


# ---------- entrada ----------
class CustomerAndPaymentIn(BaseModel):
    # obrigatoriedade checada no service para devolver 400 com a mensagem do dashboard
    name: Optional[str] = None
    cpfCnpj: Optional[str] = None
    value: Optional[Union[StrictFloat, StrictInt, str]] = None
    dueDate: Optional[str] = None

    email: Optional[EmailStr] = None
    mobilePhone: Optional[str] = None
    billingType: Optional[BillingType] = None


# ---------- saída ----------
class CustomerAndPaymentOut(BaseModel):
    customer: Dict[str, Any]
    payment: Dict[str, Any]


class StudentStatusOut(BaseModel):
    id: str
    name: Optional[str] = None
    status: Literal["ADIMPLENTE", "INADIMPLENTE"]
    nextDueDate: Union[date, str]
    monthlyFee: float


class StudentsStatusOut(BaseModel):
    students: List[StudentStatusOut]


class RevenueReportRow(BaseModel):
    id: str
    customerName: str
    value: float
    paymentDate: Optional[date] = None
    invoiceUrl: Optional[str] = None


class RevenueReportOut(BaseModel):
    report: List[RevenueReportRow]


class HealthOut(BaseModel):
    ok: bool
    message: str | None = None
