from __future__ import annotations

import threading
from datetime import date
from typing import Iterable, List, Optional

from .models import Aluno, Despesa, Mensalidade


class FinanceiroStore:
    """
    Base em memória do dashboard (alunos, mensalidades e despesas).

    Despesas só crescem; o id vem de um contador que nunca volta atrás.
    O FastAPI roda handlers síncronos num pool de threads, então incremento
    e append acontecem sob o mesmo lock.
    """

    def __init__(self, alunos: Iterable[Aluno] = (), mensalidades: Iterable[Mensalidade] = (),
                 despesas: Iterable[Despesa] = ()):
        self._lock = threading.Lock()
        self._alunos: List[Aluno] = list(alunos)
        self._mensalidades: List[Mensalidade] = list(mensalidades)
        self._despesas: List[Despesa] = list(despesas)
        self._proxima_despesa_id = max((d.id for d in self._despesas), default=0) + 1

    def list_alunos(self) -> List[Aluno]:
        with self._lock:
            return list(self._alunos)

    def list_mensalidades(self) -> List[Mensalidade]:
        with self._lock:
            return list(self._mensalidades)

    def list_despesas(self) -> List[Despesa]:
        with self._lock:
            return list(self._despesas)

    def create_despesa(self, *, descricao: Optional[str], categoria: Optional[str],
                       valor: float, data: Optional[date] = None) -> Despesa:
        with self._lock:
            despesa = Despesa(
                id=self._proxima_despesa_id,
                descricao=descricao,
                categoria=categoria,
                data=data or date.today(),
                valor=valor,
            )
            self._proxima_despesa_id += 1
            self._despesas.append(despesa)
        return despesa


def seed_store() -> FinanceiroStore:
    """Dados de demonstração do dashboard."""
    alunos = [
        Aluno(id=101, nome="Ana Clara Souza", responsavel="Marcos Souza"),
        Aluno(id=102, nome="Lucas Mendes", responsavel="Carla Mendes"),
        Aluno(id=103, nome="Beatriz Lima", responsavel="Beatriz Lima"),
        Aluno(id=104, nome="João Gabriel", responsavel="Fernanda Costa"),
        Aluno(id=105, nome="Mariana Oliveira", responsavel="Pedro Oliveira"),
        Aluno(id=106, nome="Pedro Santos", responsavel="Juliana Santos"),
    ]
    mensalidades = [
        Mensalidade(idAsaas="pay_111", alunoId=101, valor=700.00, vencimento="2025-09-10", status="PAGO"),
        Mensalidade(idAsaas="pay_222", alunoId=102, valor=700.00, vencimento="2025-09-10", status="VENCIDO"),
        Mensalidade(idAsaas="pay_333", alunoId=103, valor=700.00, vencimento="2025-09-10", status="PAGO"),
        Mensalidade(idAsaas="pay_444", alunoId=104, valor=150.00, vencimento="2025-09-15", status="PENDENTE",
                    descricao="Taxa de Matrícula"),
        Mensalidade(idAsaas="pay_555", alunoId=105, valor=700.00, vencimento="2025-09-10", status="PAGO"),
        Mensalidade(idAsaas="pay_666", alunoId=106, valor=700.00, vencimento="2025-09-10", status="PENDENTE"),
    ]
    despesas = [
        Despesa(id=1, descricao="Salário - Equipe Pedagógica", categoria="Salários",
                data="2025-09-05", valor=6500.00),
        Despesa(id=2, descricao="Compra de material de limpeza", categoria="Suprimentos",
                data="2025-09-12", valor=350.00),
    ]
    return FinanceiroStore(alunos, mensalidades, despesas)
