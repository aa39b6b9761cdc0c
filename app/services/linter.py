"""Linter service: wraps baseline_checker and maps results to API models."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from baseline_checker import BaselineLinter, Diagnostic, FeatureRecord, LintResult
from baseline_checker.features import risk_level, status_label
from baseline_checker.loader import BundledFeatureLoader, WebStatusFeatureLoader
from baseline_checker.resolver import FeatureStatus
from baseline_checker.utils import detect_file_type

from ..config import (
    get_baseline_target,
    get_enable_quick_fixes,
    get_feature_source,
    get_framework,
    get_registry_load_timeout,
    get_webstatus_api_url,
)
from ..schemas import DiagnosticOut, FeatureOut, FeatureStatusOut, LintResponse, LocationOut, SummaryOut

logger = logging.getLogger(__name__)


def build_loader(source: Optional[str] = None):
    """Feature loader for the configured source."""
    source = source or get_feature_source()
    if source == "webstatus":
        return WebStatusFeatureLoader(base_url=get_webstatus_api_url())
    return BundledFeatureLoader()


def build_linter(target_baseline: Optional[str] = None, source: Optional[str] = None) -> BaselineLinter:
    """Linter configured from the environment."""
    return BaselineLinter(
        target_baseline=target_baseline or get_baseline_target(),
        options={"enable_quick_fixes": get_enable_quick_fixes(), "framework": get_framework()},
        loader=build_loader(source),
        load_timeout=get_registry_load_timeout(),
    )


def diagnostic_to_out(d: Diagnostic) -> DiagnosticOut:
    data = d.to_dict()
    data["location"] = LocationOut(**data["location"])
    return DiagnosticOut(**data)


def feature_to_out(record: FeatureRecord) -> FeatureOut:
    return FeatureOut(
        **record.to_dict(),
        label=status_label(record.status),
        risk_level=risk_level(record.status),
    )


def status_to_out(result: FeatureStatus) -> FeatureStatusOut:
    data = result.to_dict()
    data["feature"] = feature_to_out(result.record) if result.record else None
    return FeatureStatusOut(**data)


def result_to_out(result: LintResult) -> LintResponse:
    return LintResponse(
        file_type=result.file_type,
        diagnostics=[diagnostic_to_out(d) for d in result.diagnostics],
        summary=SummaryOut(**result.summary.to_dict()),
        timestamp=result.timestamp.isoformat(),
        baseline_target=result.baseline_target,
    )


class LinterService:
    """Owns one BaselineLinter for the API process."""

    def __init__(self, linter: Optional[BaselineLinter] = None):
        self.linter = linter or build_linter()

    async def initialize(self) -> None:
        await self.linter.initialize()

    def lint_code(
        self,
        code: str,
        file_type: str,
        filename: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> LintResult:
        return self.linter.lint(code, file_type, context=context, file=filename)

    def lint_file(self, file_path: Path, context: Optional[Dict[str, Any]] = None) -> LintResult:
        code = file_path.read_text(encoding="utf-8", errors="replace")
        return self.linter.lint(code, detect_file_type(file_path), context=context, file=str(file_path))

    def feature_status(self, identifier: str) -> FeatureStatusOut:
        return status_to_out(self.linter.get_feature_status(identifier))

    def search_features(
        self, query: str = "", status: Optional[str] = None, category: Optional[str] = None
    ) -> List[FeatureOut]:
        registry = self.linter.registry
        records = registry.search(query) if query else registry.all()
        if category:
            in_category = {r.id for r in registry.by_category(category)}
            records = [r for r in records if r.id in in_category]
        if status:
            records = [r for r in records if r.status.value.lower() == status.strip().lower()]
        return [feature_to_out(r) for r in records]
