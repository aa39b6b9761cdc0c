"""Compliance scoring and per-category aggregation."""

from __future__ import annotations

import pytest

from baseline_checker import CategoryTotals, Severity, build_report, categorize, compute_compliance
from baseline_checker.aggregator import DEFAULT_CATEGORIES, score

from conftest import make_diagnostic


def test_compliance_from_category_totals() -> None:
    categories = {
        "css": {"total": 145, "issues": 1},
        "javascript": {"total": 312, "issues": 1},
        "html": {"total": 45, "issues": 1},
        "webApi": CategoryTotals(total=121, issues=1),
    }

    assert compute_compliance(categories) == 99.4


@pytest.mark.parametrize(
    "total, issues, expected",
    [
        (8, 1, 87.5),
        (3, 1, 66.7),
        (3, 2, 33.3),
        (10, 0, 100.0),
        (5, 9, 0.0),
        (0, 0, 100.0),
        (0, 3, 100.0),
    ],
)
def test_score_rounds_to_one_decimal(total: int, issues: int, expected: float) -> None:
    assert score(total, issues) == expected


def test_empty_categories_score_full_compliance() -> None:
    assert compute_compliance({}) == 100.0
    assert compute_compliance({"css": {"total": 0, "issues": 0}}) == 100.0


def test_issues_are_capped_per_category() -> None:
    categories = {
        "css": {"total": 2, "issues": 10},
        "html": {"total": 8, "issues": 0},
    }

    assert compute_compliance(categories) == 80.0


def test_categorize_counts_distinct_files() -> None:
    diagnostics = [
        make_diagnostic("css", "a.css", seq=1),
        make_diagnostic("css", "a.css", seq=2),
        make_diagnostic("css", "b.css", seq=3),
        make_diagnostic("html", None, seq=4),
        make_diagnostic("html", None, seq=5),
    ]

    categories = categorize(diagnostics, {"css": 10, "html": 4})

    assert categories["css"] == CategoryTotals(total=10, issues=2)
    assert categories["html"] == CategoryTotals(total=4, issues=2)
    assert categories["javascript"] == CategoryTotals(total=0, issues=0)
    assert list(categories)[: len(DEFAULT_CATEGORIES)] == list(DEFAULT_CATEGORIES)


def test_categorize_adds_unseen_categories() -> None:
    categories = categorize([make_diagnostic("generic", "x.vue")], {"svg": 2})

    assert categories["svg"] == CategoryTotals(total=2, issues=0)
    assert categories["generic"] == CategoryTotals(total=0, issues=1)


def test_build_report_counts_errors_as_critical() -> None:
    diagnostics = [
        make_diagnostic("css", "a.css", severity=Severity.ERROR, seq=1),
        make_diagnostic("css", "a.css", seq=2),
        make_diagnostic("javascript", "app.js", seq=3),
    ]

    report = build_report(diagnostics, {"css": 4, "javascript": 4})

    assert report.total_issues == 3
    assert report.critical_issues == 1
    assert report.compliance == 75.0
    assert report.category_scores()["css"] == 75.0
    data = report.to_dict()
    assert data["categories"]["javascript"] == {"total": 4, "issues": 1}
    assert data["category_scores"]["html"] == 100.0


def test_default_categories_are_the_linted_file_types() -> None:
    assert DEFAULT_CATEGORIES == ("css", "javascript", "html")

    report = build_report([], {})

    assert list(report.categories) == ["css", "javascript", "html"]
    assert report.compliance == 100.0
