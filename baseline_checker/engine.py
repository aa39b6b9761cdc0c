"""
Diagnostic engine: turns resolver results into diagnostics and accumulates them per scan.
"""

import itertools
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from .diagnostic import Diagnostic, Location, ScanSummary, Severity
from .errors import NotInitializedError
from .features import BaselineStatus
from .resolver import FeatureStatus, StatusResolver


@dataclass(frozen=True)
class RuleContext:
    """Read-only settings shared by every rule evaluation in one scan."""
    target_baseline: str = "2024"
    enable_quick_fixes: bool = True
    framework: str = "generic"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def severity_for(status: BaselineStatus) -> Severity:
    """Only ``limited`` is an error; ``notBaseline`` and ``unknown`` stay warnings."""
    return Severity.ERROR if status is BaselineStatus.LIMITED else Severity.WARNING


class DiagnosticEngine:
    """Owns the diagnostic list for one scan.

    Not thread-safe: use one instance per concurrent scan and merge the
    results.
    """

    def __init__(
        self,
        context: Optional[RuleContext] = None,
        resolver: Optional[StatusResolver] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.context = context or RuleContext()
        self.resolver = resolver
        self.clock = clock or _utcnow
        self._diagnostics: List[Diagnostic] = []
        self._sequence = itertools.count(1)

    def attach(self, resolver: StatusResolver) -> "DiagnosticEngine":
        self.resolver = resolver
        return self

    def check_feature_usage(
        self,
        identifier: str,
        location: Location,
        context: Optional[RuleContext] = None,
    ) -> Optional[Diagnostic]:
        """Resolve ``identifier`` and record a diagnostic unless it is widely available."""
        if self.resolver is None:
            raise NotInitializedError("No status resolver attached to the diagnostic engine")
        result = self.resolver.resolve(identifier)
        if result.is_baseline:
            return None
        diagnostic = self._create_diagnostic(result, location, context or self.context)
        self._diagnostics.append(diagnostic)
        return diagnostic

    def _create_diagnostic(
        self, result: FeatureStatus, location: Location, context: RuleContext
    ) -> Diagnostic:
        now = self.clock()
        record = result.record
        feature_id = record.id if record else None
        feature_name = record.name if record else "Unknown"
        stamp = int(now.timestamp() * 1000)
        diagnostic_id = (
            f"baseline-{context.framework}-{feature_id or 'unknown'}-{stamp}-{next(self._sequence)}"
        )
        quick_fix = None
        if context.enable_quick_fixes:
            options = result.suggestions + result.polyfills
            quick_fix = options[0] if options else None
        return Diagnostic(
            id=diagnostic_id,
            feature_id=feature_id,
            feature_name=feature_name,
            status=result.status.value,
            severity=severity_for(result.status),
            message=f'"{feature_name}" not in Baseline {context.target_baseline}',
            suggestions=result.suggestions or ("Check feature support on webstatus.dev",),
            polyfills=result.polyfills,
            migration=result.migration,
            location=location,
            created_at=now,
            quick_fix=quick_fix,
        )

    def get_diagnostics(self) -> Tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    def clear_diagnostics(self) -> None:
        """Forget collected diagnostics. Resolver statistics are untouched."""
        self._diagnostics = []

    def get_summary(self) -> ScanSummary:
        return ScanSummary.from_diagnostics(self._diagnostics)
