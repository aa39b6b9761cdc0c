"""Shared fixtures: small feature registries, a fixed clock and ready linters."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

import pytest

from baseline_checker import (
    BaselineLinter,
    BaselineStatus,
    Diagnostic,
    FeatureRecord,
    FeatureRegistry,
    Location,
    Severity,
    StatusResolver,
)
from baseline_checker.loader import StaticFeatureLoader

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def record(
    feature_id: str,
    status: BaselineStatus,
    name: Optional[str] = None,
    **kwargs: object,
) -> FeatureRecord:
    return FeatureRecord(id=feature_id, name=name or feature_id, status=status, **kwargs)


def sample_records() -> List[FeatureRecord]:
    """dialog newly, gap widely, clamp() limited, anchor-name not Baseline."""
    return [
        record(
            "dialog",
            BaselineStatus.NEWLY,
            available_since="2022-03-14",
            alternatives=('<div role="dialog"> with ARIA',),
            polyfills=("dialog-polyfill",),
            migration_steps=("Use ARIA roles", "Add polyfill"),
        ),
        record("gap", BaselineStatus.WIDELY, name="gap (flexbox and grid)", available_since="2021-04-26"),
        record("clamp-function", BaselineStatus.LIMITED, name="CSS clamp() function"),
        record("anchor-name", BaselineStatus.NOT_BASELINE, name="CSS anchor positioning"),
    ]


def build_registry(records: Iterable[FeatureRecord]) -> FeatureRegistry:
    registry = FeatureRegistry()
    registry.register_all(records)
    registry.seal()
    return registry


def make_diagnostic(
    category: str = "css",
    file: Optional[str] = None,
    severity: Severity = Severity.WARNING,
    feature_id: str = "dialog",
    seq: int = 1,
) -> Diagnostic:
    return Diagnostic(
        id=f"baseline-generic-{feature_id}-0-{seq}",
        feature_id=feature_id,
        feature_name=feature_id,
        status="limited" if severity is Severity.ERROR else "newly",
        severity=severity,
        message=f'"{feature_id}" not in Baseline 2024',
        suggestions=(),
        polyfills=(),
        migration=(),
        location=Location(category=category, file=file, line=1, column=1),
        created_at=FIXED_NOW,
    )


def ready_linter(records: Iterable[FeatureRecord], **kwargs: object) -> BaselineLinter:
    linter = BaselineLinter(loader=StaticFeatureLoader(records), clock=lambda: FIXED_NOW, **kwargs)
    asyncio.run(linter.initialize())
    return linter


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def registry() -> FeatureRegistry:
    return build_registry(sample_records())


@pytest.fixture
def resolver(registry: FeatureRegistry) -> StatusResolver:
    return StatusResolver(registry)


@pytest.fixture
def linter() -> BaselineLinter:
    """Ready linter over the sample records."""
    return ready_linter(sample_records())


@pytest.fixture(autouse=True)
def no_ai_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the AI advice path offline."""
    monkeypatch.delenv("TOGETHER_API_KEY", raising=False)
