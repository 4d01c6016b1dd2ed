# app/modules/financeiro/router.py
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from app.core.config import settings
from app.core.dependencies import get_store
from app.core.errors import ValidationError
from app.services.financial_overview import compute_kpis, enrich_mensalidades
from app.services.student_status import split_adimplentes_inadimplentes
from app.utils.br import parse_valor
from .models import Despesa
from .schemas import DespesaIn, FinancialOverviewOut, StudentsSplitOut
from .store import FinanceiroStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Financeiro - Dashboard"])


@router.get("/financial-overview", response_model=FinancialOverviewOut)
async def financial_overview(store: FinanceiroStore = Depends(get_store)):
    """KPIs do dashboard + relatório de mensalidades e despesas (sem filtro de período)."""
    alunos = store.list_alunos()
    mensalidades = store.list_mensalidades()
    despesas = store.list_despesas()

    return FinancialOverviewOut(
        kpis=compute_kpis(mensalidades, despesas),
        relatorioMensalidades=enrich_mensalidades(mensalidades, alunos, settings.ASAAS_PAYMENT_LINK_BASE),
        relatorioDespesas=despesas,
    )


@router.get("/students/status", response_model=StudentsSplitOut)
async def students_split(store: FinanceiroStore = Depends(get_store)):
    adimplentes, inadimplentes = split_adimplentes_inadimplentes(
        store.list_alunos(), store.list_mensalidades()
    )
    return StudentsSplitOut(adimplentes=adimplentes, inadimplentes=inadimplentes)


@router.get("/expenses", response_model=List[Despesa])
async def list_expenses(store: FinanceiroStore = Depends(get_store)):
    return store.list_despesas()


@router.post("/expenses", response_model=Despesa, status_code=status.HTTP_201_CREATED)
async def create_expense(payload: DespesaIn, store: FinanceiroStore = Depends(get_store)):
    try:
        valor = parse_valor(payload.valor)
    except ValueError:
        raise ValidationError("Valor da despesa inválido.")

    despesa = store.create_despesa(
        descricao=payload.descricao,
        categoria=payload.categoria,
        valor=valor,
        data=payload.data,
    )
    logger.info("Nova despesa adicionada: %s", despesa.model_dump(mode="json"))
    return despesa
