# app/services/financial_overview.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

from app.core.errors import ReferenceIntegrityError
from app.modules.asaas.schemas import AsaasCustomer, AsaasPayment, RevenueReportRow
from app.modules.financeiro.models import Aluno, Despesa, Mensalidade, PAID, RECEIVED

CLIENTE_NAO_ENCONTRADO = "Cliente não encontrado"


def _sum(values: Iterable[float]) -> float:
    return round(sum(values, 0.0), 2)


def compute_kpis(mensalidades: Sequence[Mensalidade], despesas: Sequence[Despesa]) -> Dict[str, float]:
    """
    faturamentoPrevisto soma todas as mensalidades lançadas (pagas, pendentes e vencidas),
    sem filtro de período. valorRecebido só as PAID.
    """
    faturamento_previsto = _sum(m.valor for m in mensalidades)
    valor_recebido = _sum(m.valor for m in mensalidades if m.status == PAID)
    total_despesas = _sum(d.valor for d in despesas)
    return {
        "faturamentoPrevisto": faturamento_previsto,
        "valorRecebido": valor_recebido,
        "totalDespesas": total_despesas,
        "saldo": round(valor_recebido - total_despesas, 2),
    }


def payment_link(link_base: str, id_asaas: str) -> str:
    return f"{link_base.rstrip('/')}/{id_asaas}"


def enrich_mensalidades(
    mensalidades: Sequence[Mensalidade], alunos: Sequence[Aluno], link_base: str
) -> List[Dict[str, Any]]:
    """Junta cada mensalidade ao aluno (nome, responsável) e ao link de pagamento."""
    by_id = {a.id: a for a in alunos}
    rows: List[Dict[str, Any]] = []
    for m in mensalidades:
        aluno = by_id.get(m.alunoId)
        if aluno is None:
            raise ReferenceIntegrityError(
                f"Mensalidade {m.idAsaas} referencia aluno inexistente ({m.alunoId})."
            )
        rows.append({
            **m.model_dump(mode="json"),
            "nomeAluno": aluno.nome,
            "nomeResponsavel": aluno.responsavel,
            "linkPagamento": payment_link(link_base, m.idAsaas),
        })
    return rows


def build_revenue_report(
    customers: Sequence[AsaasCustomer], payments: Sequence[AsaasPayment]
) -> List[RevenueReportRow]:
    # mapa id -> nome montado uma vez só
    names = {c.id: c.name for c in customers}
    return [
        RevenueReportRow(
            id=p.id,
            customerName=names.get(p.customer) or CLIENTE_NAO_ENCONTRADO,
            value=p.value,
            paymentDate=p.paymentDate,
            invoiceUrl=p.invoiceUrl,
        )
        for p in payments
        if p.status == RECEIVED
    ]
