"""Testes de service dos fluxos de agregação do Asaas."""

import asyncio

import pytest

from app.modules.asaas import service
from tests.fakes import FakeBillingProvider


class GatedProvider(FakeBillingProvider):
    """list_payments só responde quando as buscas de todos os clientes estão em andamento."""

    def __init__(self, *args, expected, **kwargs):
        super().__init__(*args, **kwargs)
        self.expected = expected
        self.in_flight = 0
        self.all_started = asyncio.Event()

    async def list_payments(self, *, customer_id=None, status=None, limit=None):
        self.in_flight += 1
        if self.in_flight == self.expected:
            self.all_started.set()
        await asyncio.wait_for(self.all_started.wait(), timeout=1)
        return await super().list_payments(customer_id=customer_id, status=status, limit=limit)


@pytest.mark.asyncio
async def test_per_customer_fetches_run_concurrently_and_keep_customer_order():
    customers = [{"id": f"cus_{i}", "name": f"Aluno {i}"} for i in range(3)]
    payments = [
        {"id": f"p{i}", "customer": f"cus_{i}", "value": 100 * (i + 1),
         "dueDate": "2025-09-10", "status": "PENDING"}
        for i in range(3)
    ]
    provider = GatedProvider(customers, payments, expected=3)

    result = await service.students_status(provider, limit=100)

    assert [s.id for s in result] == ["cus_0", "cus_1", "cus_2"]
    assert [s.monthlyFee for s in result] == [100, 200, 300]


@pytest.mark.asyncio
async def test_revenue_report_asks_provider_for_received_only():
    provider = FakeBillingProvider(
        customers=[{"id": "cus_1", "name": "Ana"}],
        payments=[
            {"id": "p1", "customer": "cus_1", "value": 700, "dueDate": "2025-09-10", "status": "RECEIVED"},
            {"id": "p2", "customer": "cus_1", "value": 700, "dueDate": "2025-10-10", "status": "PENDING"},
        ],
    )
    report = await service.revenue_report(provider, limit=100)
    assert [r.id for r in report] == ["p1"]
    assert provider.calls == ["list_customers", "list_payments"]
