"""
Base rule class for Baseline compatibility checks.
"""

from typing import List, Optional

from .diagnostic import Diagnostic, Location
from .engine import DiagnosticEngine
from .utils import is_comment


class BaselineRule:
    """Generic rule: classifies identifiers that were already extracted.

    Subclasses override ``_run_checks`` to find identifiers in raw source.
    Rules hold no per-scan state; everything flows through the engine passed
    in, so one rule instance can serve concurrent scans.
    """

    category = "generic"

    def check(self, code: str, engine: DiagnosticEngine, file: Optional[str] = None) -> List[Diagnostic]:
        """Run checks on one unit of source text."""
        return self._run_checks(code, engine, file)

    def _run_checks(self, code: str, engine: DiagnosticEngine, file: Optional[str]) -> List[Diagnostic]:
        """Override in subclasses. The generic rule extracts nothing."""
        return []

    def check_feature(
        self,
        identifier: str,
        engine: DiagnosticEngine,
        location: Optional[Location] = None,
    ) -> List[Diagnostic]:
        """Classify one identifier. Returns zero or one diagnostic."""
        location = location or Location(category=self.category)
        diagnostic = engine.check_feature_usage(identifier, location)
        return [diagnostic] if diagnostic else []

    def _is_comment(self, line: str) -> bool:
        """Check if line is a comment."""
        return is_comment(line)
