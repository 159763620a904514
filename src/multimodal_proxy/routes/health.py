"""Liveness endpoint."""

from fastapi import APIRouter

from multimodal_proxy.response_models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="OK", message="Server is running")
