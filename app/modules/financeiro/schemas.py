# app/modules/financeiro/schemas.py
from __future__ import annotations
from typing import Any, Dict, List, Optional, Union
from datetime import date
from pydantic import BaseModel, StrictFloat, StrictInt

from .models import Aluno, Despesa


class KpisOut(BaseModel):
    faturamentoPrevisto: float
    valorRecebido: float
    totalDespesas: float
    saldo: float


class FinancialOverviewOut(BaseModel):
    kpis: KpisOut
    # mensalidade + nomeAluno, nomeResponsavel, linkPagamento
    relatorioMensalidades: List[Dict[str, Any]]
    relatorioDespesas: List[Despesa]


class StudentsSplitOut(BaseModel):
    adimplentes: List[Aluno]
    inadimplentes: List[Aluno]


class DespesaIn(BaseModel):
    descricao: Optional[str] = None
    categoria: Optional[str] = None
    # aceita 50, "50", "50,00" ou "1.500"; booleano é recusado; validado no router para responder 400
    valor: Optional[Union[StrictFloat, StrictInt, str]] = None
    data: Optional[date] = None
