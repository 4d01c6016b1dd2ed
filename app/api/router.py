# app/api/router.py
from fastapi import APIRouter
from app.modules.asaas.router import router as asaas_router
from app.modules.financeiro.router import router as financeiro_router

api_router = APIRouter()

api_router.include_router(asaas_router, tags=["Billing/Asaas"])
api_router.include_router(financeiro_router, tags=["Financeiro"])
