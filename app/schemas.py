"""Pydantic request/response models."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# --- Request ---


class LintRequest(BaseModel):
    """Unified request: either code+file_type or file_path."""

    code: Optional[str] = Field(default=None, description="Source text to lint")
    file_type: Optional[str] = Field(default=None, description="css, javascript, typescript, html, ... (unknown types use the generic rule)")
    file_path: Optional[str] = Field(default=None, description="Absolute path to a source file on the server")
    filename: Optional[str] = Field(default=None, description="Virtual filename used in diagnostic locations")
    target_baseline: Optional[str] = Field(default=None, description="Override the target Baseline for this request")
    framework: Optional[str] = Field(default=None, description="Framework identifier used in diagnostic ids")
    enable_quick_fixes: Optional[bool] = None


class CategoryIn(BaseModel):
    total: int = Field(..., ge=0, description="Units scanned in this category")
    issues: int = Field(default=0, ge=0, description="Units with findings")


class ComplianceRequest(BaseModel):
    """Per-category totals supplied by the scan driver."""

    categories: Dict[str, CategoryIn] = Field(..., description="e.g. {'css': {'total': 145, 'issues': 3}}")


# --- Responses ---


class LocationOut(BaseModel):
    category: str
    file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    kind: Optional[str] = None
    value: Optional[str] = None


class DiagnosticOut(BaseModel):
    """Single compatibility finding."""

    id: str
    feature_id: Optional[str] = None
    feature_name: str
    status: str = Field(..., description="widely, newly, limited, notBaseline or unknown")
    severity: str = Field(..., description="error or warning")
    message: str
    suggestions: List[str] = Field(default_factory=list)
    polyfills: List[str] = Field(default_factory=list)
    migration: List[str] = Field(default_factory=list)
    location: LocationOut
    created_at: str
    quick_fix: Optional[str] = None


class SummaryOut(BaseModel):
    total: int
    by_severity: Dict[str, int] = Field(default_factory=dict)
    by_category: Dict[str, int] = Field(default_factory=dict)


class LintResponse(BaseModel):
    """Response for POST /lint."""

    file_type: str
    diagnostics: List[DiagnosticOut] = Field(default_factory=list)
    summary: SummaryOut
    timestamp: str
    baseline_target: str


class AnalyzeResponse(LintResponse):
    """Response for POST /analyze (lint + AI migration advice)."""

    ai_migration_advice: Optional[str] = Field(default=None, description="AI-generated migration advice")


class FeatureOut(BaseModel):
    id: str
    name: str
    status: str
    since: Optional[str] = None
    alternatives: List[str] = Field(default_factory=list)
    polyfills: List[str] = Field(default_factory=list)
    migration_steps: List[str] = Field(default_factory=list)
    mdn_url: Optional[str] = None
    category: Optional[str] = None
    label: Optional[str] = None
    risk_level: Optional[str] = None


class FeatureStatusOut(BaseModel):
    """Classification of one identifier."""

    identifier: str
    is_baseline: bool
    status: str
    feature: Optional[FeatureOut] = None
    available_since: Optional[int] = None
    match: str
    confidence: str
    reason: Optional[str] = None
    suggestions: List[str] = Field(default_factory=list)
    polyfills: List[str] = Field(default_factory=list)
    migration: List[str] = Field(default_factory=list)


class StatsOut(BaseModel):
    checks: int
    cache_hits: int
    api_calls: int
    cache_size: int


class ComplianceResponse(BaseModel):
    compliance: float
    category_scores: Dict[str, float] = Field(default_factory=dict)


class ErrorDetail(BaseModel):
    """Error response detail."""

    detail: str = Field(..., description="Error message")
