"""
Baseline compatibility checker: detects web platform feature usage in CSS,
JavaScript/TypeScript and HTML and classifies it by Baseline status.
"""

from .aggregator import CategoryTotals, ComplianceReport, build_report, categorize, compute_compliance
from .diagnostic import Diagnostic, Location, ScanSummary, Severity
from .engine import DiagnosticEngine, RuleContext
from .errors import (
    BaselineCheckerError,
    DuplicateFeatureError,
    NotInitializedError,
    NotReadyError,
    RegistryLoadError,
    RegistrySealedError,
    ScanInProgressError,
)
from .features import BaselineStatus, FeatureRecord, FeatureRegistry
from .linter import BaselineLinter, FileType, LinterState, LintResult, create_linter, quick_lint
from .resolver import FeatureStatus, StatusResolver

__version__ = "0.1.0"

__all__ = [
    "BaselineCheckerError",
    "BaselineLinter",
    "BaselineStatus",
    "CategoryTotals",
    "ComplianceReport",
    "Diagnostic",
    "DiagnosticEngine",
    "DuplicateFeatureError",
    "FeatureRecord",
    "FeatureRegistry",
    "FeatureStatus",
    "FileType",
    "LintResult",
    "LinterState",
    "Location",
    "NotInitializedError",
    "NotReadyError",
    "RegistryLoadError",
    "RegistrySealedError",
    "RuleContext",
    "ScanInProgressError",
    "ScanSummary",
    "Severity",
    "StatusResolver",
    "build_report",
    "categorize",
    "compute_compliance",
    "create_linter",
    "quick_lint",
]
