"""FastAPI app: /health, /lint, /analyze, /features, /stats, /compliance."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import compliance_router, features_router, health_router, lint_router
from .startup import configure_logging, validate_config
from .utils import linter_svc

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate config and load the feature registry before serving."""
    configure_logging()
    validate_config()
    await linter_svc.initialize()
    logger.info("Linter ready (target Baseline %s)", linter_svc.linter.target_baseline)
    yield


app = FastAPI(
    title="Baseline Compatibility Checker API",
    description="Detects web platform features in CSS, JavaScript and HTML and classifies them by Baseline status.",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(lint_router)
app.include_router(features_router)
app.include_router(compliance_router)


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    from .config import get_host, get_port

    uvicorn.run(app, host=get_host(), port=get_port())
