from app.core.config import settings
from app.integrations.asaas_client import AsaasClient
from app.integrations.base import BillingProvider
from app.modules.financeiro.store import FinanceiroStore, seed_store

# base em memória única do processo
_store = seed_store()


def get_store() -> FinanceiroStore:
    return _store


def get_billing_provider() -> BillingProvider:
    return AsaasClient(
        api_key=settings.ASAAS_API_KEY,
        base_url=settings.ASAAS_API_BASE,
        timeout=settings.ASAAS_TIMEOUT,
    )
