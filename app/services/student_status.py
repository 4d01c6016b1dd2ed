# app/services/student_status.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Sequence, Tuple, Union

from app.modules.asaas.schemas import AsaasPayment
from app.modules.financeiro.models import Aluno, Mensalidade, OVERDUE, PENDING

ADIMPLENTE = "ADIMPLENTE"
INADIMPLENTE = "INADIMPLENTE"

# quando o aluno ainda não tem nenhuma cobrança
SEM_COBRANCAS = "Sem cobranças"

# próxima mensalidade ainda não gerada: estimada a partir da última
NEXT_CHARGE_INTERVAL = timedelta(days=30)


@dataclass(frozen=True)
class DerivedStatus:
    status: str
    next_due_date: Union[date, str]
    fee: float


def classify(payments: Sequence[AsaasPayment]) -> DerivedStatus:
    """
    Status de um aluno a partir das cobranças dele (sem ordem garantida).

    - Qualquer cobrança OVERDUE deixa o aluno INADIMPLENTE; PENDING sozinho não.
    - Próximo vencimento/valor: a cobrança em aberto (PENDING/OVERDUE) mais antiga;
      sem nada em aberto, a última cobrança + 30 dias; sem cobranças, SEM_COBRANCAS e 0.

    Empates de vencimento mantêm a ordem de chegada (sort estável).
    """
    status = INADIMPLENTE if any(p.status == OVERDUE for p in payments) else ADIMPLENTE

    pending = [p for p in payments if p.status in (PENDING, OVERDUE)]
    if pending:
        first = sorted(pending, key=lambda p: p.dueDate)[0]
        return DerivedStatus(status, first.dueDate, first.value)

    if payments:
        last = sorted(payments, key=lambda p: p.dueDate, reverse=True)[0]
        return DerivedStatus(status, last.dueDate + NEXT_CHARGE_INTERVAL, last.value)

    return DerivedStatus(status, SEM_COBRANCAS, 0)


def split_adimplentes_inadimplentes(
    alunos: Iterable[Aluno], mensalidades: Iterable[Mensalidade]
) -> Tuple[List[Aluno], List[Aluno]]:
    """
    Divide a lista de alunos para o dashboard olhando só para mensalidades vencidas.
    Ao contrário de `classify`, ignora PENDING e não calcula vencimento nem valor.
    """
    ids_inadimplentes = {m.alunoId for m in mensalidades if m.status == OVERDUE}
    alunos = list(alunos)
    adimplentes = [a for a in alunos if a.id not in ids_inadimplentes]
    inadimplentes = [a for a in alunos if a.id in ids_inadimplentes]
    return adimplentes, inadimplentes
