"""Diagnostic engine: severity mapping, ids, accumulation and summaries."""

from __future__ import annotations

import asyncio

import pytest

from baseline_checker import (
    BaselineStatus,
    DiagnosticEngine,
    FeatureRegistry,
    Location,
    NotInitializedError,
    RuleContext,
    Severity,
    StatusResolver,
)
from baseline_checker.loader import BundledFeatureLoader

from conftest import FIXED_NOW, build_registry

LOCATION = Location(category="css", file="styles.css", line=3, column=5)


@pytest.fixture
def engine(resolver: StatusResolver, fixed_clock) -> DiagnosticEngine:
    return DiagnosticEngine(RuleContext(), resolver, clock=fixed_clock)


def test_engine_without_resolver_refuses_to_check() -> None:
    with pytest.raises(NotInitializedError):
        DiagnosticEngine().check_feature_usage("gap", LOCATION)


def test_attach_binds_a_resolver(resolver: StatusResolver) -> None:
    engine = DiagnosticEngine().attach(resolver)

    assert engine.check_feature_usage("dialog", LOCATION) is not None


def test_widely_available_feature_produces_nothing(engine: DiagnosticEngine) -> None:
    assert engine.check_feature_usage("gap", LOCATION) is None
    assert engine.get_diagnostics() == ()


@pytest.mark.parametrize(
    "identifier, severity, status",
    [
        ("clamp-function", Severity.ERROR, "limited"),
        ("dialog", Severity.WARNING, "newly"),
        ("anchor-name", Severity.WARNING, "notBaseline"),
        ("nonexistent-feature", Severity.WARNING, "unknown"),
    ],
)
def test_severity_follows_status(
    engine: DiagnosticEngine, identifier: str, severity: Severity, status: str
) -> None:
    diagnostic = engine.check_feature_usage(identifier, LOCATION)

    assert diagnostic.severity is severity
    assert diagnostic.status == status
    assert diagnostic.location == LOCATION


def test_message_and_id_format(engine: DiagnosticEngine) -> None:
    diagnostic = engine.check_feature_usage("dialog", LOCATION)

    stamp = int(FIXED_NOW.timestamp() * 1000)
    assert diagnostic.id == f"baseline-generic-dialog-{stamp}-1"
    assert diagnostic.message == '"dialog" not in Baseline 2024'
    assert diagnostic.created_at == FIXED_NOW


def test_unknown_feature_diagnostic(engine: DiagnosticEngine) -> None:
    diagnostic = engine.check_feature_usage("nonexistent-feature", LOCATION)

    assert diagnostic.feature_id is None
    assert diagnostic.feature_name == "Unknown"
    assert diagnostic.message == '"Unknown" not in Baseline 2024'
    assert diagnostic.id.startswith("baseline-generic-unknown-")
    assert diagnostic.suggestions == ("Check feature name spelling",)


def test_repeated_findings_get_distinct_ids(engine: DiagnosticEngine) -> None:
    first = engine.check_feature_usage("dialog", LOCATION)
    second = engine.check_feature_usage("dialog", LOCATION)

    assert first.id != second.id
    assert engine.get_diagnostics() == (first, second)


def test_context_sets_framework_and_target(resolver: StatusResolver, fixed_clock) -> None:
    context = RuleContext(target_baseline="2023", framework="vite")
    engine = DiagnosticEngine(context, resolver, clock=fixed_clock)

    diagnostic = engine.check_feature_usage("dialog", LOCATION)

    assert diagnostic.id.startswith("baseline-vite-dialog-")
    assert diagnostic.message.endswith("Baseline 2023")


def test_quick_fix_uses_first_alternative(engine: DiagnosticEngine) -> None:
    diagnostic = engine.check_feature_usage("dialog", LOCATION)

    assert diagnostic.quick_fix == '<div role="dialog"> with ARIA'
    assert diagnostic.polyfills == ("dialog-polyfill",)
    assert diagnostic.migration == ("Use ARIA roles", "Add polyfill")


def test_quick_fixes_can_be_disabled(resolver: StatusResolver, fixed_clock) -> None:
    engine = DiagnosticEngine(RuleContext(enable_quick_fixes=False), resolver, clock=fixed_clock)

    assert engine.check_feature_usage("dialog", LOCATION).quick_fix is None


def test_record_without_alternatives_gets_generic_suggestion(engine: DiagnosticEngine) -> None:
    diagnostic = engine.check_feature_usage("clamp-function", LOCATION)

    assert diagnostic.suggestions == ("Check feature support on webstatus.dev",)


def test_snapshot_is_stable_and_clear_keeps_stats(
    engine: DiagnosticEngine, resolver: StatusResolver
) -> None:
    engine.check_feature_usage("dialog", LOCATION)
    engine.check_feature_usage("clamp-function", LOCATION)

    assert engine.get_diagnostics() == engine.get_diagnostics()
    checks = resolver.get_stats()["checks"]

    engine.clear_diagnostics()

    assert engine.get_diagnostics() == ()
    assert engine.get_summary().total == 0
    assert resolver.get_stats()["checks"] == checks


def test_summary_totals_add_up(engine: DiagnosticEngine) -> None:
    engine.check_feature_usage("dialog", LOCATION)
    engine.check_feature_usage("clamp-function", LOCATION)
    engine.check_feature_usage("anchor-name", Location(category="html"))
    engine.check_feature_usage("gap", LOCATION)

    summary = engine.get_summary()

    assert summary.total == 3
    assert sum(summary.by_severity.values()) == summary.total
    assert summary.by_severity == {"error": 1, "warning": 2}
    assert summary.by_category == {"css": 2, "html": 1}


def test_same_inputs_give_identical_diagnostics(resolver: StatusResolver, fixed_clock) -> None:
    def run() -> list:
        engine = DiagnosticEngine(RuleContext(), resolver, clock=fixed_clock)
        for identifier in ("dialog", "clamp-function", "nonexistent-feature"):
            engine.check_feature_usage(identifier, LOCATION)
        return [d.to_dict() for d in engine.get_diagnostics()]

    assert run() == run()


def _bundled_registry() -> FeatureRegistry:
    return build_registry(asyncio.run(BundledFeatureLoader().load()))


@pytest.mark.parametrize("feature_id", [r.id for r in _bundled_registry()])
def test_every_bundled_feature_maps_to_expected_severity(feature_id: str) -> None:
    resolver = StatusResolver(_bundled_registry())
    engine = DiagnosticEngine(resolver=resolver)
    status = resolver.registry.get(feature_id).status

    diagnostic = engine.check_feature_usage(feature_id, LOCATION)

    if status is BaselineStatus.WIDELY:
        assert diagnostic is None
    elif status is BaselineStatus.LIMITED:
        assert diagnostic.severity is Severity.ERROR
    else:
        assert diagnostic.severity is Severity.WARNING
