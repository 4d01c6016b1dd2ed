# app/main.py
import sys
import asyncio

# Event loop compatível no Windows (safe em outros SOs também)
if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

import json
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.api.router import api_router

logging.basicConfig(
    level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def _normalize_origins(value) -> list[str]:
    """Aceita lista, JSON string ou CSV e devolve lista de origens."""
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(o).strip() for o in value if str(o).strip()]
    if isinstance(value, str):
        # tenta JSON primeiro
        try:
            as_json = json.loads(value)
            if isinstance(as_json, (list, tuple)):
                return [str(o).strip() for o in as_json if str(o).strip()]
        except ValueError:
            pass
        # fallback: CSV
        return [o.strip() for o in value.split(",") if o.strip()]
    # fallback final
    return [str(value).strip()]


# --- App ---
app = FastAPI(title="Creche Financeiro Backend")
register_exception_handlers(app)

# --- CORS (colocado ANTES dos routers) ---
# o dashboard roda no navegador; sem lista explícita libera qualquer origem
origins = _normalize_origins(settings.CORS_ORIGINS) or ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,   # credenciais só com lista explícita
    allow_methods=["*"],
    allow_headers=["*"],
)


# Healthcheck simples
@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


# --- API (só depois do CORS) ---
app.include_router(api_router, prefix=settings.API_PREFIX)
