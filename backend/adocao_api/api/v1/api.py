"""Module: api."""

# backend/adocao_api/api/v1/api.py
from fastapi import APIRouter

# Operational routes (health/auth). Auth paths sit directly under the API root.
from adocao_api.api.v1.routes.health import router as health_router
from adocao_api.api.v1.routes.auth import router as auth_router

# Domain routes.
from adocao_api.api.v1.routes.pets import router as pets_router
from adocao_api.api.v1.routes.adotantes import router as adotantes_router
from adocao_api.api.v1.routes.adocoes import router as adocoes_router


api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])

api_router.include_router(pets_router, prefix="/pets", tags=["pets"])
api_router.include_router(adotantes_router, prefix="/adotantes", tags=["adotantes"])
# Declares both /adocoes and /adotantes/{id}/adocoes, so it carries full paths.
api_router.include_router(adocoes_router, tags=["adocoes"])
