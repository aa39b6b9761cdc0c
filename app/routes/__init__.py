"""Route handlers."""

from .compliance import router as compliance_router
from .features import router as features_router
from .health import router as health_router
from .lint import router as lint_router

__all__ = ["health_router", "lint_router", "features_router", "compliance_router"]
