"""
Compliance aggregation: diagnostics plus externally supplied totals -> scores.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Set, Tuple, Union

from .diagnostic import Diagnostic, Severity

# Categories reported even when no totals are supplied for them.
DEFAULT_CATEGORIES = ("css", "javascript", "html")


@dataclass(frozen=True)
class CategoryTotals:
    """Units scanned in one category and how many of them had findings."""
    total: int
    issues: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"total": self.total, "issues": self.issues}


@dataclass(frozen=True)
class ComplianceReport:
    compliance: float
    total_issues: int
    critical_issues: int
    categories: Dict[str, CategoryTotals] = field(default_factory=dict)

    def category_scores(self) -> Dict[str, float]:
        return {name: score(cat.total, cat.issues) for name, cat in self.categories.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "compliance": self.compliance,
            "total_issues": self.total_issues,
            "critical_issues": self.critical_issues,
            "categories": {name: cat.to_dict() for name, cat in self.categories.items()},
            "category_scores": self.category_scores(),
        }


def score(total: int, issues: int) -> float:
    """Percentage of units free of findings, rounded half-up to one decimal.

    Nothing scanned scores 100.0; issues beyond the total are capped.
    """
    if total <= 0:
        return 100.0
    clean = total - min(max(issues, 0), total)
    return math.floor(clean / total * 1000 + 0.5) / 10


def compute_compliance(categories: Mapping[str, Union[CategoryTotals, Mapping[str, int]]]) -> float:
    """Overall score from per-category ``{total, issues}``."""
    total = 0
    issues = 0
    for cat in categories.values():
        cat = _as_totals(cat)
        total += cat.total
        issues += min(max(cat.issues, 0), max(cat.total, 0))
    return score(total, issues)


def categorize(
    diagnostics: Iterable[Diagnostic],
    totals: Mapping[str, int],
) -> Dict[str, CategoryTotals]:
    """Count units with findings per category.

    A unit is a distinct file; a diagnostic without a file counts as its own
    unit. Categories come from ``DEFAULT_CATEGORIES`` plus any supplied in
    ``totals`` or seen in diagnostics.
    """
    units: Dict[str, Set[Tuple[str, Any]]] = {}
    for i, d in enumerate(diagnostics):
        key = ("file", d.location.file) if d.location.file else ("diagnostic", i)
        units.setdefault(d.location.category, set()).add(key)
    names = list(DEFAULT_CATEGORIES)
    for name in list(totals) + list(units):
        if name not in names:
            names.append(name)
    return {
        name: CategoryTotals(total=int(totals.get(name, 0)), issues=len(units.get(name, ())))
        for name in names
    }


def build_report(diagnostics: Iterable[Diagnostic], totals: Mapping[str, int]) -> ComplianceReport:
    diagnostics = list(diagnostics)
    categories = categorize(diagnostics, totals)
    return ComplianceReport(
        compliance=compute_compliance(categories),
        total_issues=len(diagnostics),
        critical_issues=sum(1 for d in diagnostics if d.severity is Severity.ERROR),
        categories=categories,
    )


def _as_totals(value: Union[CategoryTotals, Mapping[str, int]]) -> CategoryTotals:
    if isinstance(value, CategoryTotals):
        return value
    return CategoryTotals(total=int(value.get("total", 0)), issues=int(value.get("issues", 0)))
