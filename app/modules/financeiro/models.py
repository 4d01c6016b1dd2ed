from __future__ import annotations

from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, field_validator

# vocabulário de status de cobrança (nomes do Asaas)
PAID = "PAID"
RECEIVED = "RECEIVED"
PENDING = "PENDING"
OVERDUE = "OVERDUE"

STATUS_CHOICES = (PAID, RECEIVED, PENDING, OVERDUE)

# a planilha/mock antiga usa os nomes em português
_STATUS_ALIASES = {
    "PAGO": PAID,
    "RECEBIDO": RECEIVED,
    "PENDENTE": PENDING,
    "VENCIDO": OVERDUE,
}


def normalize_status(value: Optional[str]) -> str:
    """'vencido' -> 'OVERDUE', 'PENDING' -> 'PENDING'. Status desconhecidos passam em maiúsculas."""
    s = str(value or "").strip().upper()
    return _STATUS_ALIASES.get(s, s)


class Aluno(BaseModel):
    id: Union[int, str]
    nome: str
    responsavel: str


class Mensalidade(BaseModel):
    idAsaas: str
    alunoId: Union[int, str]
    valor: float
    vencimento: date
    status: str
    descricao: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _norm_status(cls, v):
        return normalize_status(v)


class Despesa(BaseModel):
    id: int
    descricao: Optional[str] = None
    categoria: Optional[str] = None
    data: date
    valor: float
