from __future__ import annotations

from fastapi import APIRouter

from schemas import HealthResponse


def build_health_router(service_name: str) -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/health", response_model=HealthResponse)
    async def healthcheck() -> HealthResponse:
        return HealthResponse(status="healthy", service=service_name)

    return router
