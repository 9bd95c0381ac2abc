"""Health check endpoint."""

from fastapi import APIRouter

from retailiq.models.schemas import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    # Static: neither the store nor the LLM is probed.
    return HealthResponse(status="ok", database="connected", ai="ready")
