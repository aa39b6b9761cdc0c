"""
Diagnostic data models for the Baseline compatibility checker.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple


class Severity(Enum):
    """Diagnostic severity levels."""
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Location:
    """Where a feature was found."""
    category: str
    file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    kind: Optional[str] = None
    value: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "kind": self.kind,
            "value": self.value,
        }


@dataclass(frozen=True)
class Diagnostic:
    """One detected compatibility problem. Immutable once created."""
    id: str
    feature_id: Optional[str]
    feature_name: str
    status: str
    severity: Severity
    message: str
    suggestions: Tuple[str, ...]
    polyfills: Tuple[str, ...]
    migration: Tuple[str, ...]
    location: Location
    created_at: datetime
    quick_fix: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "feature_id": self.feature_id,
            "feature_name": self.feature_name,
            "status": self.status,
            "severity": self.severity.value,
            "message": self.message,
            "suggestions": list(self.suggestions),
            "polyfills": list(self.polyfills),
            "migration": list(self.migration),
            "location": self.location.to_dict(),
            "created_at": self.created_at.isoformat(),
            "quick_fix": self.quick_fix,
        }


@dataclass(frozen=True)
class ScanSummary:
    """Counts derived from a list of diagnostics."""
    total: int
    by_severity: Dict[str, int] = field(default_factory=dict)
    by_category: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_diagnostics(cls, diagnostics: Sequence[Diagnostic]) -> "ScanSummary":
        by_severity = {s.value: 0 for s in Severity}
        by_category: Dict[str, int] = {}
        for d in diagnostics:
            by_severity[d.severity.value] += 1
            cat = d.location.category
            by_category[cat] = by_category.get(cat, 0) + 1
        return cls(total=len(diagnostics), by_severity=by_severity, by_category=by_category)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "by_severity": dict(self.by_severity),
            "by_category": dict(self.by_category),
        }
