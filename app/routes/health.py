"""Health check route."""

from fastapi import APIRouter

from ..utils import linter_svc

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check plus linter state."""
    return {"status": "ok", "linter": linter_svc.linter.state.value}
