"""Lint routes (rules-only and rules + AI advice)."""

from fastapi import APIRouter

from ..schemas import AnalyzeResponse, LintRequest, LintResponse
from ..services import AIService
from ..services.linter import result_to_out
from ..utils import run_lint

router = APIRouter()
ai_svc = AIService()


@router.post("/lint", response_model=LintResponse)
def lint(req: LintRequest) -> LintResponse:
    """Rules-only analysis. No AI."""
    result, _, _ = run_lint(req)
    return result_to_out(result)


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(req: LintRequest) -> AnalyzeResponse:
    """Lint plus AI migration advice (when TOGETHER_API_KEY is configured)."""
    result, code, file_type = run_lint(req)
    out = result_to_out(result)
    advice = ai_svc.suggest_migrations(
        out.diagnostics, code=code, file_type=file_type, target_baseline=result.baseline_target
    )
    return AnalyzeResponse(**out.model_dump(), ai_migration_advice=advice)
