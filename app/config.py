"""Configuration from environment."""

import os

from dotenv import load_dotenv

load_dotenv()

_TRUE = {"1", "true", "yes", "on"}


def get_baseline_target() -> str:
    """Target Baseline year (or 'high'/'low'). Default: 2024."""
    return os.environ.get("BASELINE_TARGET", "2024").strip() or "2024"


def get_feature_source() -> str:
    """Where feature data comes from: 'bundled' or 'webstatus'."""
    source = os.environ.get("BASELINE_FEATURE_SOURCE", "bundled").strip().lower()
    return source if source in ("bundled", "webstatus") else "bundled"


def get_webstatus_api_url() -> str:
    return os.environ.get("WEBSTATUS_API_URL", "https://api.webstatus.dev/v1").strip()


def get_registry_load_timeout() -> float:
    try:
        return float(os.environ.get("REGISTRY_LOAD_TIMEOUT", "10"))
    except ValueError:
        return 10.0


def get_enable_quick_fixes() -> bool:
    return os.environ.get("BASELINE_ENABLE_QUICK_FIXES", "true").strip().lower() in _TRUE


def get_framework() -> str:
    return os.environ.get("BASELINE_FRAMEWORK", "generic").strip() or "generic"


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_together_api_key() -> str:
    """Together.ai API key (optional; enables AI migration advice)."""
    return os.environ.get("TOGETHER_API_KEY", "").strip()


def get_together_model() -> str:
    """Together.ai model. Default: deepseek-ai/DeepSeek-V3.1."""
    return os.environ.get("TOGETHER_MODEL", "deepseek-ai/DeepSeek-V3.1").strip()


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000
