"""API routes package."""

from fastapi import APIRouter

from teams_api.api.routes import health, teams

api_router = APIRouter()

# Incluir rutas de diferentes módulos
api_router.include_router(teams.router, prefix="/team", tags=["Teams"])
api_router.include_router(health.router, prefix="/health", tags=["Health"])
