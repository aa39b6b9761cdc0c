"""AI service: Together.ai migration advice for Baseline diagnostics."""

import logging
from typing import Any, List, Optional

from openai import OpenAI, OpenAIError

from ..config import get_together_api_key, get_together_model
from ..schemas import DiagnosticOut

logger = logging.getLogger(__name__)


def _client() -> Optional[Any]:
    """Return OpenAI-compatible client for Together.ai, or None without an API key."""
    key = get_together_api_key()
    if not key:
        return None
    return OpenAI(api_key=key, base_url="https://api.together.xyz/v1")


def _diagnostics_summary(diagnostics: List[DiagnosticOut]) -> str:
    if not diagnostics:
        return "No Baseline compatibility issues found."
    parts = []
    for d in diagnostics:
        where = f"line {d.location.line}" if d.location.line else d.location.category
        parts.append(
            f"- {where} [{d.severity}] {d.feature_name} ({d.status}): {d.message}\n"
            f"  Alternatives: {', '.join(d.suggestions) or 'none'}\n"
            f"  Polyfills: {', '.join(d.polyfills) or 'none'}"
        )
    return "\n".join(parts)


class AIService:
    """Together.ai-backed migration advice."""

    def suggest_migrations(
        self,
        diagnostics: List[DiagnosticOut],
        code: Optional[str] = None,
        file_type: Optional[str] = None,
        target_baseline: Optional[str] = None,
    ) -> Optional[str]:
        """Return AI-generated migration advice. None if AI is unavailable or nothing to fix."""
        if not diagnostics:
            return None
        client = _client()
        if not client:
            return None
        target = f"Baseline {target_baseline}" if target_baseline else "Baseline"
        prompt = (
            "You are a web platform compatibility expert. A static checker reported the "
            f"following features that are not in {target}:\n\n"
            f"{_diagnostics_summary(diagnostics)}\n\n"
        )
        if code and file_type:
            prompt += f"Source ({file_type}):\n```\n{code[:8000]}\n```\n\n"
        prompt += (
            "For each feature, say whether it can ship as progressive enhancement, which "
            "feature detection (@supports, 'in' checks) to add, and when a polyfill is "
            "worth its cost. Be concise; use numbered steps."
        )
        try:
            r = client.chat.completions.create(
                model=get_together_model(),
                messages=[{"role": "user", "content": prompt}],
                max_tokens=2048,
            )
        except OpenAIError as e:
            logger.warning("AI migration advice failed: %s", e)
            return None
        if r.choices and r.choices[0].message.content:
            return r.choices[0].message.content.strip()
        return None
