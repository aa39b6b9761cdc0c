"""Utility functions for the API."""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from fastapi import HTTPException

from baseline_checker import LintResult, NotReadyError
from baseline_checker.utils import detect_file_type

from .schemas import LintRequest
from .services import LinterService

linter_svc = LinterService()


def _request_context(req: LintRequest) -> Dict[str, Any]:
    return {
        "target_baseline": req.target_baseline,
        "framework": req.framework,
        "enable_quick_fixes": req.enable_quick_fixes,
    }


def run_lint(req: LintRequest) -> Tuple[LintResult, Optional[str], Optional[str]]:
    """Run the linter. Returns (result, code, file_type) for AI advice."""
    context = _request_context(req)
    try:
        if req.file_path:
            p = Path(req.file_path)
            if not p.is_absolute():
                raise HTTPException(400, "file_path must be absolute")
            if not p.is_file():
                raise HTTPException(404, f"File not found: {req.file_path}")
            result = linter_svc.lint_file(p, context=context)
            return result, p.read_text(encoding="utf-8", errors="replace"), detect_file_type(p)
        if req.code is not None and req.file_type:
            result = linter_svc.lint_code(req.code, req.file_type, filename=req.filename, context=context)
            return result, req.code, req.file_type
    except NotReadyError as e:
        raise HTTPException(503, str(e)) from e
    raise HTTPException(
        400,
        "Provide either (code + file_type) or file_path.",
    )
