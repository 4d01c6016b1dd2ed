# app/core/config.py
from __future__ import annotations

from typing import List, Union
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Ambiente
    ENVIRONMENT: str = "dev"                 # dev | prod
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # CORS (aceita JSON ["http://...","http://..."] ou CSV "http://...,http://...")
    CORS_ORIGINS: Union[List[str], str] = []

    # Asaas (obrigatório: sem a chave o processo não sobe)
    ASAAS_API_KEY: str
    ASAAS_API_BASE: str = "https://api.asaas.com/v3"
    ASAAS_TIMEOUT: float = 20.0
    ASAAS_PAGE_LIMIT: int = 100
    ASAAS_PAYMENT_LINK_BASE: str = "https://sandbox.asaas.com/pay"
    ASAAS_BILLING_TYPE: str = "BOLETO"       # BOLETO | PIX | CREDIT_CARD

    class Config:
        env_file = ".env"
        extra = "ignore"   # ignora envs desconhecidas para não quebrar


settings = Settings()
