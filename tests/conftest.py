"""
Configuração dos testes.

ASAAS_API_KEY é obrigatória no Settings já no import, então é definida aqui
antes de qualquer import de app/. As rotas recebem um provedor falso e uma
base em memória nova via dependency_overrides do FastAPI.
"""

import os

os.environ.setdefault("ASAAS_API_KEY", "test-key")

import pytest
from fastapi.testclient import TestClient

from app.core.dependencies import get_billing_provider, get_store
from app.main import app
from app.modules.financeiro.store import seed_store
from tests.fakes import FakeBillingProvider


@pytest.fixture
def store():
    return seed_store()


@pytest.fixture
def provider():
    return FakeBillingProvider()


@pytest.fixture
def client(store, provider):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_billing_provider] = lambda: provider
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def lenient_client(store, provider):
    """Como `client`, mas exceções não tratadas viram a resposta 500 real do servidor."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_billing_provider] = lambda: provider
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
