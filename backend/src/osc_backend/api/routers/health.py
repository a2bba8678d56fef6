"""Liveness endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from osc_backend.api.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()
